"""Calendar utilities for fdate.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversion between civil
dates and day numbers counted from the Unix epoch (1970-01-01 is day 0).

This module is not part of the public API.
"""

from __future__ import annotations

from fdate._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2020)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def normalize_year_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Month 13 becomes January of the following year and month 0 becomes
    December of the previous year.

    Args:
        year: The year.
        month: Any integer month.

    Returns:
        Tuple of (year, month) with month in 1-12.

    Examples:
        >>> normalize_year_month(2022, 13)
        (2023, 1)
        >>> normalize_year_month(2022, 0)
        (2021, 12)
    """
    carry, index = divmod(month - 1, 12)
    return year + carry, index + 1


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1. The month must already be in 1-12;
    the day may be any integer and simply counts forward or backward
    from the first of the month, so day 32 of January lands in February
    and day 0 is the last day of the previous month.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day.

    Returns:
        The ordinal day number.
    """
    y = year - 1

    # Python's // floors toward negative infinity, so this holds for
    # years before 1 as well
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1); divmod floors, so ordinals
    # before year 1 fall into a negative 400-year cycle with a
    # non-negative remainder
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


# Ordinal of the Unix epoch, 1970-01-01
_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a civil date to days since 1970-01-01.

    Out-of-range months and days are normalized rather than rejected.

    Args:
        year: The year.
        month: The month (any integer, carried into the year).
        day: The day (any integer, counted from the first of the month).

    Returns:
        Days since the Unix epoch (negative before 1970).

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2022, 1, 32) == days_from_civil(2022, 2, 1)
        True
    """
    year, month = normalize_year_month(year, month)
    return ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(-1)
        (1969, 12, 31)
    """
    return ordinal_to_ymd(days + _EPOCH_ORDINAL)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "normalize_year_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "days_from_civil",
    "civil_from_days",
]
