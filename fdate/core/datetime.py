"""DateTime class representing a point in time.

This module provides the DateTime class for representing naive (UTC)
instants with millisecond precision, stored as a signed count of
milliseconds since 1970-01-01T00:00:00.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from fdate._internal.calendar import civil_from_days, days_from_civil
from fdate._internal.constants import (
    DEFAULT_FORMAT,
    INVALID_TIMESTAMP,
    ISO_FORMAT,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from fdate._internal.validation import check_int64
from fdate.core.timespan import TimeSpan
from fdate.errors import ParseError
from fdate.format.strftime import strftime, strptime

if TYPE_CHECKING:
    from fdate.clock import Clock


class DateTime:
    """A calendar date and time of day with millisecond precision.

    DateTime represents an instant in the proleptic Gregorian calendar
    with no time zone (equivalently, UTC without leap seconds). The only
    state is the signed number of milliseconds since the Unix epoch,
    which must fit in a signed 64-bit integer.

    Calendar fields are derived on access: the epoch value is floored to
    the containing day (toward negative infinity, so instants before 1970
    land on the correct earlier day) and the remainder is split into
    hour, minute, second and millisecond.

    Attributes:
        INVALID_TIMESTAMP: Reserved "no value" marker for the flat bridge.
            The class itself never uses it; parse() returns None instead.

    Examples:
        >>> dt = DateTime(2022, 1, 31, 12, 34, 56, 789)
        >>> dt.month, dt.millisecond
        (1, 789)
        >>> str(dt)
        '2022-01-31 12:34:56'
        >>> dt.to_iso_string_msec()
        '2022-01-31T12:34:56.789'

        >>> (DateTime(2022, 1, 31) + TimeSpan.from_days(1)).to_iso_string()
        '2022-02-01T00:00:00'
    """

    INVALID_TIMESTAMP = INVALID_TIMESTAMP

    __slots__ = ("_ms",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create a DateTime from calendar fields.

        Fields outside their usual ranges are normalized by calendar
        arithmetic instead of rejected: month 13 is January of the next
        year, day 32 of January is February 1, day 0 is the last day of
        the previous month, and hour 24 is midnight of the next day.

        Args:
            year: The year (can be 0 or negative).
            month: The month, normally 1-12.
            day: The day of the month, normally 1-31.
            hour: The hour, normally 0-23.
            minute: The minute, normally 0-59.
            second: The second, normally 0-59.
            millisecond: The millisecond, normally 0-999.

        Raises:
            OverflowError: If the instant leaves the 64-bit range.

        Examples:
            >>> DateTime(2022, 13, 1) == DateTime(2023, 1, 1)
            True
        """
        days = days_from_civil(year, month, day)
        ms = (
            days * MS_PER_DAY
            + hour * MS_PER_HOUR
            + minute * MS_PER_MINUTE
            + second * MS_PER_SECOND
            + millisecond
        )
        self._ms: int = check_int64(ms, "DateTime")

    @classmethod
    def _from_ms(cls, ms: int) -> DateTime:
        """Create a DateTime from epoch milliseconds, range-checked."""
        instance = object.__new__(cls)
        instance._ms = check_int64(ms, "DateTime")
        return instance

    @classmethod
    def from_epoch_milliseconds(cls, ms: int) -> DateTime:
        """Create a DateTime from milliseconds since 1970-01-01T00:00:00.

        Args:
            ms: Signed epoch milliseconds.

        Returns:
            A DateTime wrapping the value.

        Examples:
            >>> DateTime.from_epoch_milliseconds(-1)
            DateTime(1969, 12, 31, 23, 59, 59, millisecond=999)
        """
        return cls._from_ms(ms)

    from_timestamp = from_epoch_milliseconds

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current time at millisecond resolution.

        Args:
            clock: Clock to sample. Defaults to the active clock from
                fdate.clock (the system clock unless replaced).

        Returns:
            A DateTime for the clock's current reading.
        """
        if clock is None:
            from fdate.clock import get_clock

            clock = get_clock()
        return cls._from_ms(clock.now_ms())

    @classmethod
    def parse(cls, text: str, fmt: str = DEFAULT_FORMAT) -> DateTime | None:
        """Parse a DateTime from text using a strftime-style pattern.

        If the fourth character from the end of text is a period, the
        text is parsed with millisecond precision, so %S consumes a
        seconds value with a 3-digit fraction (56.789). Otherwise the
        text is parsed at second resolution and the millisecond is 0.

        Args:
            text: The string to parse.
            fmt: Format string with %-directives.

        Returns:
            The parsed DateTime, or None if text does not conform to fmt.

        Raises:
            ValueError: If fmt contains unsupported directives.

        Examples:
            >>> DateTime.parse("2022-01-31 12:34:56.789").millisecond
            789
            >>> DateTime.parse("not a date") is None
            True
        """
        milliseconds = len(text) >= 4 and text[-4] == "."
        return strptime(text, fmt, milliseconds=milliseconds)

    @classmethod
    def parse_strict(cls, text: str, fmt: str = DEFAULT_FORMAT) -> DateTime:
        """Parse like parse(), raising instead of returning None.

        Raises:
            ParseError: If text does not conform to fmt.
            ValueError: If fmt contains unsupported directives.
        """
        result = cls.parse(text, fmt)
        if result is None:
            raise ParseError(f"string {text!r} does not match format {fmt!r}")
        return result

    # Accessors

    @property
    def timestamp(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00."""
        return self._ms

    def _day_and_offset(self) -> tuple[int, int]:
        """Return (days since epoch, milliseconds into that day)."""
        return divmod(self._ms, MS_PER_DAY)

    def _ymd(self) -> tuple[int, int, int]:
        return civil_from_days(self._day_and_offset()[0])

    @property
    def year(self) -> int:
        """Return the year."""
        return self._ymd()[0]

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self._ymd()[1]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._ymd()[2]

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self._day_and_offset()[1] // MS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._day_and_offset()[1] % MS_PER_HOUR // MS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._day_and_offset()[1] % MS_PER_MINUTE // MS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond (0-999)."""
        return self._day_and_offset()[1] % MS_PER_SECOND

    # Formatting

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        """Return the datetime rendered at second resolution.

        The millisecond part is dropped, never rounded.

        Examples:
            >>> DateTime(2022, 1, 31, 12, 34, 56, 789).format()
            '2022-01-31 12:34:56'
        """
        return strftime(self, fmt)

    def format_with_milliseconds(self, fmt: str = DEFAULT_FORMAT) -> str:
        """Return the datetime rendered with %S as seconds.milliseconds.

        Examples:
            >>> DateTime(2022, 1, 31, 12, 34, 56, 789).format_with_milliseconds()
            '2022-01-31 12:34:56.789'
        """
        return strftime(self, fmt, milliseconds=True)

    def to_iso_string(self) -> str:
        """Return the datetime as YYYY-MM-DDTHH:MM:SS."""
        return self.format(ISO_FORMAT)

    def to_iso_string_msec(self) -> str:
        """Return the datetime as YYYY-MM-DDTHH:MM:SS.mmm."""
        return self.format_with_milliseconds(ISO_FORMAT)

    def to_string(self) -> str:
        """Return format() with the default pattern."""
        return self.format()

    # Arithmetic operators

    def __add__(self, other: object) -> DateTime:
        """Add a TimeSpan to this datetime.

        Examples:
            >>> DateTime(2020, 2, 29) + TimeSpan.from_days(366)
            DateTime(2021, 3, 1, 0, 0, 0, millisecond=0)
        """
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return DateTime._from_ms(self._ms + other.total_milliseconds)

    def __radd__(self, other: object) -> DateTime:
        """Support TimeSpan + DateTime."""
        return self.__add__(other)

    @overload
    def __sub__(self, other: TimeSpan) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> TimeSpan: ...

    def __sub__(self, other: object) -> DateTime | TimeSpan:
        """Subtract a TimeSpan or another DateTime.

        Returns:
            A DateTime if other is a TimeSpan; the signed TimeSpan
            between the two instants if other is a DateTime.

        Examples:
            >>> (DateTime(2022, 1, 2) - DateTime(2022, 1, 1)).total_days
            1
        """
        if isinstance(other, TimeSpan):
            return DateTime._from_ms(self._ms - other.total_milliseconds)
        if isinstance(other, DateTime):
            return TimeSpan.from_milliseconds(self._ms - other._ms)
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms == other._ms

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms < other._ms

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms <= other._ms

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms > other._ms

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms >= other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        year, month, day = self._ymd()
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, millisecond={self.millisecond})"
        )


__all__ = ["DateTime"]
