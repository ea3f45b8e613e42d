"""strftime-style formatting and parsing.

This module renders DateTime values through strftime-style patterns and
parses strings back against the same patterns. It supports a small,
locale-independent set of directives.

Supported Directives:
    %Y - Year, at least 4 digits (e.g., 2024, -0044)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59); SS.mmm in millisecond mode
    %F - Shorthand for %Y-%m-%d
    %T - Shorthand for %H:%M:%S
    %% - Literal %

Not Supported (locale-dependent):
    %a, %A - Weekday names
    %b, %B - Month names
    %c, %x, %X - Locale-specific formats

Millisecond mode:
    With milliseconds=True, %S renders as seconds plus a 3-digit
    fraction (56.789) and accepts that form when parsing. Without it,
    the fraction is dropped (never rounded) when formatting and rejected
    when parsing.

Functions:
    strftime: Format a DateTime using a strftime-style pattern.
    strptime: Parse a string using a strftime-style pattern.

Examples:
    >>> from fdate import DateTime
    >>> from fdate.format import strftime, strptime

    >>> dt = DateTime(2024, 1, 15, 14, 30, 45, 250)
    >>> strftime(dt, "%Y-%m-%d %H:%M:%S")
    '2024-01-15 14:30:45'
    >>> strftime(dt, "%FT%T", milliseconds=True)
    '2024-01-15T14:30:45.250'

    >>> strptime("2024-01-15 14:30:45", "%Y-%m-%d %H:%M:%S")
    DateTime(2024, 1, 15, 14, 30, 45, millisecond=0)
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING, Iterator

from fdate._internal.calendar import days_in_month
from fdate.errors import OverflowError

if TYPE_CHECKING:
    from fdate.core.datetime import DateTime


_SUPPORTED = "%Y, %m, %d, %H, %M, %S, %F, %T, %%"

# Composite directives and their expansions
_SHORTHANDS: dict[str, str] = {
    "%F": "%Y-%m-%d",
    "%T": "%H:%M:%S",
}

# Mapping of format directives to (group name, pattern) for parsing
_PARSE_PATTERNS: dict[str, tuple[str, str]] = {
    "%Y": ("year", r"[+-]?\d{4,}"),
    "%m": ("month", r"\d{2}"),
    "%d": ("day", r"\d{2}"),
    "%H": ("hour", r"\d{2}"),
    "%M": ("minute", r"\d{2}"),
    "%S": ("second", r"\d{2}"),
}

_FRACTION_PATTERN = r"(?:\.(?P<millisecond>\d{3}))?"

# Distinct (pattern, precision) pairs kept compiled
_PATTERN_CACHE_SIZE = 128


def _tokenize(fmt: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_directive, text) pairs with shorthands expanded.

    Raises:
        ValueError: If fmt contains an unsupported directive.
    """
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            i += 2
            if directive in _SHORTHANDS:
                yield from _tokenize(_SHORTHANDS[directive])
            elif directive == "%%":
                yield (False, "%")
            elif directive in _PARSE_PATTERNS:
                yield (True, directive)
            else:
                raise ValueError(
                    f"unsupported strftime directive: {directive}. "
                    f"Supported: {_SUPPORTED}"
                )
        else:
            yield (False, fmt[i])
            i += 1


def strftime(value: "DateTime", fmt: str, *, milliseconds: bool = False) -> str:
    """Format a DateTime using a strftime-style pattern.

    Args:
        value: The DateTime to format.
        fmt: Format string with %-directives.
        milliseconds: Render %S with a 3-digit fraction.

    Returns:
        Formatted string.

    Raises:
        ValueError: If fmt contains unsupported directives.

    Examples:
        >>> from fdate import DateTime
        >>> dt = DateTime(2022, 1, 31, 12, 34, 56, 789)
        >>> strftime(dt, "%d/%m/%Y %H:%M:%S")
        '31/01/2022 12:34:56'
        >>> strftime(dt, "%H:%M:%S", milliseconds=True)
        '12:34:56.789'
    """
    result = []
    for is_directive, text in _tokenize(fmt):
        if is_directive:
            result.append(_format_directive(value, text, milliseconds))
        else:
            result.append(text)
    return "".join(result)


def _format_directive(value: "DateTime", directive: str, milliseconds: bool) -> str:
    """Format a single (already validated) directive."""
    if directive == "%Y":
        year = value.year
        if year >= 0:
            return f"{year:04d}"
        return f"{year:05d}"  # Include minus sign
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%H":
        return f"{value.hour:02d}"
    elif directive == "%M":
        return f"{value.minute:02d}"
    else:  # %S
        if milliseconds:
            return f"{value.second:02d}.{value.millisecond:03d}"
        return f"{value.second:02d}"


@functools.lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def _compile(fmt: str, milliseconds: bool) -> "re.Pattern[str]":
    """Convert a strftime pattern to a compiled regex.

    A directive used twice must match the same text both times.

    Raises:
        ValueError: If fmt contains unsupported directives.
    """
    result = []
    seen: set[str] = set()
    for is_directive, text in _tokenize(fmt):
        if not is_directive:
            result.append(re.escape(text))
            continue

        name, pattern = _PARSE_PATTERNS[text]
        if name in seen:
            result.append(f"(?P={name})")
            continue
        seen.add(name)
        result.append(f"(?P<{name}>{pattern})")
        if name == "second" and milliseconds:
            result.append(_FRACTION_PATTERN)

    # ASCII digits only
    return re.compile("".join(result), re.ASCII)


def strptime(text: str, fmt: str, *, milliseconds: bool = False) -> "DateTime | None":
    """Parse a string using a strftime-style pattern.

    The whole string must match the pattern. Year, month and day are
    required; hour, minute and second default to 0.

    Args:
        text: The string to parse.
        fmt: Format string with %-directives.
        milliseconds: Accept a 3-digit fraction after %S.

    Returns:
        The parsed DateTime, or None if text does not match fmt, has
        trailing content, lacks a date field, names an impossible
        field value (month 13, day 30 of February, hour 24, ...), or
        names an instant outside the 64-bit millisecond range.

    Raises:
        ValueError: If fmt contains unsupported directives.

    Examples:
        >>> strptime("31/01/2022 12:34:56", "%d/%m/%Y %H:%M:%S").day
        31
        >>> strptime("2022-01-XX", "%Y-%m-%d") is None
        True
    """
    from fdate.core.datetime import DateTime

    match = _compile(fmt, milliseconds).fullmatch(text)
    if match is None:
        return None

    groups = match.groupdict()
    if groups.get("year") is None or groups.get("month") is None or groups.get("day") is None:
        return None

    # Ten or more significant digits cannot fit the 64-bit range
    if len(groups["year"].lstrip("+-").lstrip("0")) > 9:
        return None

    year = int(groups["year"])
    month = int(groups["month"])
    day = int(groups["day"])
    hour = int(groups.get("hour") or 0)
    minute = int(groups.get("minute") or 0)
    second = int(groups.get("second") or 0)
    millisecond = int(groups.get("millisecond") or 0)

    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= days_in_month(year, month):
        return None
    if hour > 23 or minute > 59 or second > 59:
        return None

    try:
        return DateTime(year, month, day, hour, minute, second, millisecond)
    except OverflowError:
        return None


__all__ = ["strftime", "strptime"]
