"""Named GPIO devices mapped onto port/pin pairs of a pin backend."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol


class Device(IntEnum):
    """GPIO devices available on the board."""

    BUTTON_USER = 0
    LED_DEBUG = 1


class InvalidDeviceError(ValueError):
    """Raised when an operation names a device that does not exist."""


BUTTON_PORT = "GPIOB"
BUTTON_PIN = 3
LED_PORT = "GPIOC"
LED_PIN = 13

PIN_MAP: dict[Device, tuple[str, int]] = {
    Device.BUTTON_USER: (BUTTON_PORT, BUTTON_PIN),
    Device.LED_DEBUG: (LED_PORT, LED_PIN),
}


class PinBackend(Protocol):
    def read_pin(self, port: str, pin: int) -> bool: ...

    def write_pin(self, port: str, pin: int, level: bool) -> None: ...

    def toggle_pin(self, port: str, pin: int) -> None: ...


class MemoryPins:
    """Pin backend that keeps pin levels in memory; every pin starts low."""

    def __init__(self) -> None:
        self._levels: dict[tuple[str, int], bool] = {}

    def read_pin(self, port: str, pin: int) -> bool:
        return self._levels.get((port, pin), False)

    def write_pin(self, port: str, pin: int, level: bool) -> None:
        self._levels[(port, pin)] = bool(level)

    def toggle_pin(self, port: str, pin: int) -> None:
        self._levels[(port, pin)] = not self.read_pin(port, pin)


class GpioBoard:
    """Reads and drives the board's named devices through a pin backend."""

    def __init__(self, pins: PinBackend) -> None:
        self.pins = pins

    @staticmethod
    def _locate(device: object) -> tuple[str, int]:
        try:
            return PIN_MAP[Device(device)]
        except (ValueError, TypeError, KeyError):
            raise InvalidDeviceError(f"invalid device: {device!r}") from None

    def init(self) -> None:
        """Put the debug LED in its initial (off) state."""
        self.write(Device.LED_DEBUG, False)

    def read(self, device: Device) -> bool:
        """Return True if the device's pin is high."""
        port, pin = self._locate(device)
        return bool(self.pins.read_pin(port, pin))

    def write(self, device: Device, state: bool) -> None:
        """Drive the device's pin high (True) or low (False)."""
        port, pin = self._locate(device)
        self.pins.write_pin(port, pin, bool(state))

    def toggle(self, device: Device) -> None:
        """Invert the level of the device's pin."""
        port, pin = self._locate(device)
        self.pins.toggle_pin(port, pin)