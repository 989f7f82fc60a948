"""Non-blocking delays driven by a millisecond tick source."""

from __future__ import annotations

from typing import Callable

DELAY_MAX = 2000
"""Longest delay accepted, in milliseconds."""

DELAY_MIN = 50
"""Shortest delay accepted, in milliseconds."""

_TICK_MASK = 0xFFFFFFFF

Clock = Callable[[], int]


def check_duration(duration: int) -> int:
    """Clamp a requested duration to the range [DELAY_MIN, DELAY_MAX]."""
    if duration > DELAY_MAX:
        return DELAY_MAX
    if duration < DELAY_MIN:
        return DELAY_MIN
    return duration


class Delay:
    """A non-blocking delay that is polled with :meth:`read`.

    The clock is a callable returning the current tick count in milliseconds.
    Tick counts are treated as unsigned 32-bit values, so elapsed time is
    computed correctly across a counter wrap-around.
    """

    def __init__(self, duration: int, clock: Clock) -> None:
        self.duration = check_duration(duration)
        self.running = False
        self.start_time = 0
        self._clock = clock

    def _now(self) -> int:
        return self._clock() & _TICK_MASK

    def read(self) -> bool:
        """Poll the delay.

        If the delay is not running it is started and ``False`` is returned.
        If it is running, ``True`` is returned once the duration has elapsed,
        and the delay stops so that the next read starts it again.
        """
        if not self.running:
            self.start_time = self._now()
            self.running = True
            return False
        elapsed = (self._now() - self.start_time) & _TICK_MASK
        if elapsed >= self.duration:
            self.running = False
            return True
        return False

    def write(self, duration: int) -> None:
        """Change the duration, clamped to the allowed range."""
        self.duration = check_duration(duration)