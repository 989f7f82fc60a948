"""Finite state machine that debounces the user button."""

from __future__ import annotations

from enum import Enum

from .delay import Delay
from .gpio import Device, GpioBoard

DEBOUNCE_TIME_MS = 40
"""Requested debounce delay in milliseconds (clamped by the delay module)."""


class DebounceState(Enum):
    """Internal states of the debounce machine."""

    BUTTON_UP = "up"
    BUTTON_FALLING = "falling"
    BUTTON_DOWN = "down"
    BUTTON_RISING = "rising"


class DebounceFSM:
    """Debounces the user button and mirrors its state on the debug LED.

    Call :meth:`update` periodically. Confirmed presses and releases are
    latched and reported once each by :meth:`read_key_desc` and
    :meth:`read_key_asc`.
    """

    def __init__(self, io: GpioBoard, delay: Delay) -> None:
        self._io = io
        self._delay = delay
        self._key_desc = False
        self._key_asc = False
        self._state = DebounceState.BUTTON_UP
        self.reset()

    @property
    def state(self) -> DebounceState:
        """Current state of the machine."""
        return self._state

    def reset(self) -> None:
        """Return to the released state, re-arm the delay and turn the LED off."""
        self._delay.write(DEBOUNCE_TIME_MS)
        self._delay.running = False
        self._state = DebounceState.BUTTON_UP
        self._io.write(Device.LED_DEBUG, False)

    def _button(self) -> bool:
        return self._io.read(Device.BUTTON_USER)

    def update(self) -> None:
        """Advance the machine by one step."""
        state = self._state
        if state is DebounceState.BUTTON_UP:
            if self._button():
                self._state = DebounceState.BUTTON_FALLING
                self._delay.read()
        elif state is DebounceState.BUTTON_FALLING:
            if self._delay.read():
                if self._button():
                    self.button_pressed()
                    self._state = DebounceState.BUTTON_DOWN
                else:
                    self._state = DebounceState.BUTTON_UP
        elif state is DebounceState.BUTTON_DOWN:
            if not self._button():
                self._state = DebounceState.BUTTON_RISING
                self._delay.read()
        elif state is DebounceState.BUTTON_RISING:
            if self._delay.read():
                if self._button():
                    self._state = DebounceState.BUTTON_DOWN
                else:
                    self.button_released()
                    self._state = DebounceState.BUTTON_UP
        else:
            self._state = DebounceState.BUTTON_UP

    def button_pressed(self) -> None:
        """Latch a press event and turn the debug LED on."""
        self._key_desc = True
        self._io.write(Device.LED_DEBUG, True)

    def button_released(self) -> None:
        """Latch a release event and turn the debug LED off."""
        self._key_asc = True
        self._io.write(Device.LED_DEBUG, False)

    def read_key_desc(self) -> bool:
        """Return True once for each confirmed press, clearing the latch."""
        if self._key_desc:
            self._key_desc = False
            return True
        return False

    def read_key_asc(self) -> bool:
        """Return True once for each confirmed release, clearing the latch."""
        if self._key_asc:
            self._key_asc = False
            return True
        return False