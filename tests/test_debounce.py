from dataclasses import dataclass

import pytest

from debouncefsm.debounce import DebounceFSM, DebounceState
from debouncefsm.delay import Delay
from debouncefsm.gpio import (
    BUTTON_PIN,
    BUTTON_PORT,
    LED_PIN,
    LED_PORT,
    GpioBoard,
    MemoryPins,
)

SETTLE = 50


class FakeClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


@dataclass
class Rig:
    clock: FakeClock
    pins: MemoryPins
    delay: Delay
    fsm: DebounceFSM

    @property
    def led(self) -> bool:
        return self.pins.read_pin(LED_PORT, LED_PIN)

    def step(self, level: bool | None = None, advance: int = 0) -> None:
        """Optionally set the button, advance the clock, then update the FSM."""
        if level is not None:
            self.pins.write_pin(BUTTON_PORT, BUTTON_PIN, level)
        self.clock.now += advance
        self.fsm.update()

    def press_stable(self) -> None:
        self.step(True)
        self.step(advance=SETTLE)

    def release_stable(self) -> None:
        self.step(False)
        self.step(advance=SETTLE)


@pytest.fixture
def rig() -> Rig:
    clock = FakeClock()
    pins = MemoryPins()
    pins.write_pin(LED_PORT, LED_PIN, True)
    delay = Delay(500, clock)
    return Rig(clock, pins, delay, DebounceFSM(GpioBoard(pins), delay))


def test_initial_state(rig):
    assert rig.fsm.state is DebounceState.BUTTON_UP
    assert rig.fsm.read_key_desc() is False
    assert rig.fsm.read_key_asc() is False
    assert rig.led is False


def test_reset_arms_clamped_delay(rig):
    rig.fsm.reset()
    assert (rig.delay.duration, rig.delay.running) == (50, False)


def test_led_turns_on_with_stable_press(rig):
    rig.step(True)
    assert rig.fsm.state is DebounceState.BUTTON_FALLING
    rig.step(advance=SETTLE)
    assert rig.fsm.state is DebounceState.BUTTON_DOWN
    assert rig.led is True
    assert rig.fsm.read_key_desc() is True


def test_falling_waits_for_delay(rig):
    rig.step(True)
    rig.step(advance=10)
    assert rig.fsm.state is DebounceState.BUTTON_FALLING
    assert rig.led is False
    assert rig.fsm.read_key_desc() is False


def test_released_button_stays_up(rig):
    rig.step()
    assert rig.fsm.state is DebounceState.BUTTON_UP


def test_stable_release(rig):
    rig.press_stable()
    assert rig.fsm.read_key_desc() is True
    rig.step(False)
    assert rig.fsm.state is DebounceState.BUTTON_RISING
    rig.step(advance=SETTLE)
    assert rig.fsm.state is DebounceState.BUTTON_UP
    assert rig.led is False
    assert rig.fsm.read_key_asc() is True


def test_bounce_on_press_is_discarded(rig):
    rig.step(True)
    rig.step(False, advance=SETTLE)
    assert rig.fsm.state is DebounceState.BUTTON_UP
    assert rig.fsm.read_key_desc() is False
    assert rig.led is False


def test_bounce_on_release_is_discarded(rig):
    rig.press_stable()
    rig.fsm.read_key_desc()
    rig.step(False)
    rig.step(True, advance=SETTLE)
    assert rig.fsm.state is DebounceState.BUTTON_DOWN
    assert rig.fsm.read_key_asc() is False
    assert rig.led is True


def test_held_button_stays_down(rig):
    rig.press_stable()
    rig.step(advance=1000)
    assert rig.fsm.state is DebounceState.BUTTON_DOWN


def test_key_flags_are_read_once(rig):
    rig.fsm.button_pressed()
    rig.fsm.button_released()
    reads = [
        rig.fsm.read_key_desc(),
        rig.fsm.read_key_desc(),
        rig.fsm.read_key_asc(),
        rig.fsm.read_key_asc(),
    ]
    assert reads == [True, False, True, False]


def test_button_events_drive_led(rig):
    rig.fsm.button_pressed()
    assert rig.led is True
    rig.fsm.button_released()
    assert rig.led is False


def test_reset_returns_to_up(rig):
    rig.press_stable()
    rig.fsm.reset()
    assert rig.fsm.state is DebounceState.BUTTON_UP
    assert rig.led is False
    assert rig.delay.running is False


def test_second_press_after_full_cycle(rig):
    rig.press_stable()
    rig.release_stable()
    rig.fsm.read_key_desc()
    rig.fsm.read_key_asc()
    rig.press_stable()
    assert rig.fsm.state is DebounceState.BUTTON_DOWN
    assert rig.fsm.read_key_desc() is True