"""TimeSpan class representing a signed span of time.

This module provides the TimeSpan class for representing durations with
millisecond precision, and the decompose() function that splits a
millisecond total into sign-uniform day/hour/minute/second/millisecond
fields.
"""

from __future__ import annotations

from dataclasses import dataclass

from fdate._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from fdate._internal.validation import check_int64


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


@dataclass(frozen=True)
class TimeSpanComponents:
    """The decomposed fields of a TimeSpan.

    Fields produced by decompose() share the sign of the total. Records
    built by hand may mix signs; to_milliseconds() simply sums them.

    Attributes:
        days: Whole days (unbounded).
        hours: Hours within the day.
        minutes: Minutes within the hour.
        seconds: Seconds within the minute.
        milliseconds: Milliseconds within the second.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def to_milliseconds(self) -> int:
        """Recompose the fields into a millisecond total."""
        return (
            self.days * MS_PER_DAY
            + self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )


def decompose(total_ms: int) -> TimeSpanComponents:
    """Split a millisecond total into sign-uniform components.

    The absolute value is divided successively by the day, hour, minute
    and second sizes, each step working on the previous remainder. Every
    field is then negated if the total was negative.

    Args:
        total_ms: Signed millisecond count.

    Returns:
        A TimeSpanComponents whose fields all carry the sign of total_ms.

    Examples:
        >>> decompose(93_784_005)
        TimeSpanComponents(days=1, hours=2, minutes=3, seconds=4, milliseconds=5)

        >>> decompose(-3_661_001)
        TimeSpanComponents(days=0, hours=-1, minutes=-1, seconds=-1, milliseconds=-1)
    """
    negative = total_ms < 0
    remainder = -total_ms if negative else total_ms

    days, remainder = divmod(remainder, MS_PER_DAY)
    hours, remainder = divmod(remainder, MS_PER_HOUR)
    minutes, remainder = divmod(remainder, MS_PER_MINUTE)
    seconds, milliseconds = divmod(remainder, MS_PER_SECOND)

    if negative:
        return TimeSpanComponents(-days, -hours, -minutes, -seconds, -milliseconds)
    return TimeSpanComponents(days, hours, minutes, seconds, milliseconds)


class TimeSpan:
    """A signed span of time with millisecond precision.

    TimeSpan stores a single integer count of milliseconds, which may be
    positive, negative, or zero. All accessors derive from it. The total
    must fit in a signed 64-bit integer; any operation whose result does
    not raises fdate.errors.OverflowError.

    Component properties (days, hours, ...) return the bounded fields of
    the decomposition. Total properties (total_days, total_hours, ...)
    return the whole span expressed in one unit, truncated toward zero.

    Examples:
        >>> span = TimeSpan(days=1, hours=2, minutes=3, seconds=4, milliseconds=5)
        >>> span.hours
        2
        >>> span.total_hours
        26
        >>> str(span)
        '1d 02:03:04.005'

        >>> TimeSpan.from_hours(25).days
        1
    """

    __slots__ = ("_ms",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> None:
        """Create a TimeSpan from component parts.

        All parameters can be positive, negative, or zero, and are
        summed. Values outside the usual ranges (hours > 23, ...) are
        accepted.

        Args:
            days: Number of days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.

        Raises:
            OverflowError: If the total leaves the 64-bit range.

        Examples:
            >>> TimeSpan(days=1, hours=-2).total_hours
            22
        """
        total = TimeSpanComponents(days, hours, minutes, seconds, milliseconds)
        self._ms: int = check_int64(total.to_milliseconds(), "TimeSpan")

    @classmethod
    def _from_ms(cls, ms: int) -> TimeSpan:
        """Create a TimeSpan from a millisecond total, range-checked."""
        instance = object.__new__(cls)
        instance._ms = check_int64(ms, "TimeSpan")
        return instance

    @classmethod
    def zero(cls) -> TimeSpan:
        """Create a zero-length span."""
        return cls._from_ms(0)

    @classmethod
    def from_components(cls, components: TimeSpanComponents) -> TimeSpan:
        """Create a TimeSpan from a components record.

        Args:
            components: Fields to sum (signs may be mixed).

        Returns:
            A TimeSpan whose total is the sum of the fields.

        Examples:
            >>> span = TimeSpan.from_days(3) - TimeSpan.from_minutes(1)
            >>> TimeSpan.from_components(span.components()) == span
            True
        """
        return cls._from_ms(components.to_milliseconds())

    @classmethod
    def from_days(cls, days: int) -> TimeSpan:
        """Create a TimeSpan from a number of days.

        Examples:
            >>> TimeSpan.from_days(2).total_hours
            48
        """
        return cls._from_ms(days * MS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: int) -> TimeSpan:
        """Create a TimeSpan from a number of hours."""
        return cls._from_ms(hours * MS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> TimeSpan:
        """Create a TimeSpan from a number of minutes."""
        return cls._from_ms(minutes * MS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> TimeSpan:
        """Create a TimeSpan from a number of seconds."""
        return cls._from_ms(seconds * MS_PER_SECOND)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> TimeSpan:
        """Create a TimeSpan from a number of milliseconds.

        Examples:
            >>> TimeSpan.from_milliseconds(3_600_000).hours
            1
        """
        return cls._from_ms(milliseconds)

    # Decomposition

    def components(self) -> TimeSpanComponents:
        """Return the sign-uniform decomposition of this span.

        Returns:
            A TimeSpanComponents; see decompose().
        """
        return decompose(self._ms)

    @property
    def days(self) -> int:
        """Return the days component (unbounded, signed)."""
        return self.components().days

    @property
    def hours(self) -> int:
        """Return the hours component, within (-24, 24)."""
        return self.components().hours

    @property
    def minutes(self) -> int:
        """Return the minutes component, within (-60, 60)."""
        return self.components().minutes

    @property
    def seconds(self) -> int:
        """Return the seconds component, within (-60, 60)."""
        return self.components().seconds

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds component, within (-1000, 1000)."""
        return self.components().milliseconds

    # Totals

    @property
    def total_days(self) -> int:
        """Return the whole span in days, truncated toward zero.

        Examples:
            >>> TimeSpan(hours=-36).total_days
            -1
        """
        return _trunc_div(self._ms, MS_PER_DAY)

    @property
    def total_hours(self) -> int:
        """Return the whole span in hours, truncated toward zero."""
        return _trunc_div(self._ms, MS_PER_HOUR)

    @property
    def total_minutes(self) -> int:
        """Return the whole span in minutes, truncated toward zero."""
        return _trunc_div(self._ms, MS_PER_MINUTE)

    @property
    def total_seconds(self) -> int:
        """Return the whole span in seconds, truncated toward zero."""
        return _trunc_div(self._ms, MS_PER_SECOND)

    @property
    def total_milliseconds(self) -> int:
        """Return the whole span in milliseconds (exact)."""
        return self._ms

    @property
    def is_negative(self) -> bool:
        """Return True if this span is shorter than zero."""
        return self._ms < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length span."""
        return self._ms == 0

    # Arithmetic operators

    def __add__(self, other: object) -> TimeSpan:
        """Add two spans.

        Examples:
            >>> TimeSpan.from_days(1) + TimeSpan.from_days(2) == TimeSpan.from_days(3)
            True
        """
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan._from_ms(self._ms + other._ms)

    def __radd__(self, other: object) -> TimeSpan:
        """Support sum() by handling 0 + TimeSpan."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> TimeSpan:
        """Subtract one span from another."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan._from_ms(self._ms - other._ms)

    def __mul__(self, other: object) -> TimeSpan:
        """Scale a span by an integer factor.

        Examples:
            >>> (TimeSpan.from_hours(2) * 3).total_hours
            6
        """
        if not isinstance(other, int):
            return NotImplemented
        return TimeSpan._from_ms(self._ms * other)

    def __rmul__(self, other: object) -> TimeSpan:
        """Support int * TimeSpan."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> TimeSpan:
        """Divide a span by an integer, truncating toward zero.

        Raises:
            ZeroDivisionError: If other is zero.

        Examples:
            >>> TimeSpan.from_days(6) / 2 == TimeSpan.from_days(3)
            True
            >>> (TimeSpan.from_milliseconds(-7) / 2).total_milliseconds
            -3
        """
        if not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("TimeSpan division by zero")
        return TimeSpan._from_ms(_trunc_div(self._ms, other))

    def __neg__(self) -> TimeSpan:
        return TimeSpan._from_ms(-self._ms)

    def __pos__(self) -> TimeSpan:
        return self

    def __abs__(self) -> TimeSpan:
        return TimeSpan._from_ms(abs(self._ms))

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ms == other._ms

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ms < other._ms

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ms <= other._ms

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ms > other._ms

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ms >= other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    # String representation

    def to_string(self) -> str:
        """Return the span as "[{days}d ]HH:MM:SS[.mmm]".

        The day prefix appears only when the days component is non-zero
        and the millisecond suffix only when the milliseconds component
        is non-zero. Each field is printed with its own sign, so negative
        spans show a minus on every non-zero field.

        Examples:
            >>> TimeSpan(1, 2, 3, 4, 5).to_string()
            '1d 02:03:04.005'
            >>> TimeSpan(0, 2, 3, 4, 0).to_string()
            '02:03:04'
            >>> TimeSpan(hours=-1, minutes=-30).to_string()
            '-1:-30:00'
        """
        c = self.components()
        text = f"{c.hours:02d}:{c.minutes:02d}:{c.seconds:02d}"
        if c.milliseconds != 0:
            text += f".{c.milliseconds:03d}"
        if c.days != 0:
            text = f"{c.days}d {text}"
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        c = self.components()
        return (
            f"TimeSpan(days={c.days}, hours={c.hours}, minutes={c.minutes}, "
            f"seconds={c.seconds}, milliseconds={c.milliseconds})"
        )

    def __bool__(self) -> bool:
        """Return True if this is a non-zero span."""
        return self._ms != 0


__all__ = ["TimeSpan", "TimeSpanComponents", "decompose"]
