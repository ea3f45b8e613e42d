"""Wall-clock sources for DateTime.now().

DateTime.now() reads the active clock rather than the system clock
directly, so tests and hosts can substitute a deterministic source.

Classes:
    Clock: Protocol for anything with a now_ms() method.
    SystemClock: The process wall clock, truncated to milliseconds.
    FixedClock: Always returns the same instant; can be advanced by hand.

Functions:
    get_clock: Return the active clock.
    set_clock: Replace the active clock, returning the previous one.
    use_clock: Context manager that installs a clock temporarily.

Examples:
    >>> from fdate import DateTime
    >>> from fdate.clock import FixedClock, use_clock

    >>> with use_clock(FixedClock(0)):
    ...     DateTime.now().to_iso_string()
    '1970-01-01T00:00:00'
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator, Protocol


class Clock(Protocol):
    """A source of wall-clock time in milliseconds since the Unix epoch."""

    def now_ms(self) -> int: ...


class SystemClock:
    """The process wall clock, truncated to millisecond resolution."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock frozen at a given epoch millisecond value.

    Examples:
        >>> clock = FixedClock(1_000)
        >>> clock.now_ms()
        1000
        >>> clock.advance(500)
        >>> clock.now_ms()
        1500
    """

    __slots__ = ("_ms",)

    def __init__(self, ms: int) -> None:
        self._ms = ms

    def now_ms(self) -> int:
        return self._ms

    def advance(self, ms: int) -> None:
        """Move the clock forward (or backward, for negative ms)."""
        self._ms += ms

    def __repr__(self) -> str:
        return f"FixedClock({self._ms})"


_active_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """Return the clock used by DateTime.now()."""
    return _active_clock


def set_clock(clock: Clock) -> Clock:
    """Install clock as the process-wide source for DateTime.now().

    Args:
        clock: The new clock.

    Returns:
        The previously active clock, so callers can restore it.
    """
    global _active_clock
    previous = _active_clock
    _active_clock = clock
    return previous


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Install clock for the duration of a with-block."""
    previous = set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_clock",
    "set_clock",
    "use_clock",
]
