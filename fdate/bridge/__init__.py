"""Flat integer interface for numeric hosts.

This module exposes TimeSpan and DateTime through plain functions over
integers, for callers that marshal values across a language boundary:
    - A TimeSpan is its total milliseconds
    - A DateTime is its milliseconds since 1970-01-01T00:00:00
    - Comparisons return 1 or 0
    - Failures that cannot raise return INVALID_TIMESTAMP
    - String results are cut to fit a caller-sized buffer

Examples:
    >>> from fdate import bridge

    >>> dt = bridge.datetime_create(2022, 1, 31)
    >>> later = bridge.datetime_add_timespan(dt, bridge.timespan_from_days(1))
    >>> bridge.datetime_get_month(later), bridge.datetime_get_day(later)
    (2, 1)

    >>> bridge.datetime_parse("2022-01-XX", "%Y-%m-%d", 10, 8) == bridge.INVALID_TIMESTAMP
    True
"""

from __future__ import annotations

from fdate._internal.constants import INVALID_TIMESTAMP
from fdate.bridge.datetime import (
    datetime_create,
    datetime_now,
    datetime_parse,
    datetime_get_year,
    datetime_get_month,
    datetime_get_day,
    datetime_get_hour,
    datetime_get_minute,
    datetime_get_second,
    datetime_get_millisecond,
    datetime_add_timespan,
    datetime_subtract_timespan,
    datetime_difference,
    datetime_format,
    datetime_format_milliseconds,
    datetime_to_iso_string,
    datetime_equals,
    datetime_less_than,
    datetime_greater_than,
    datetime_less_equal,
    datetime_greater_equal,
)
from fdate.bridge.timespan import (
    timespan_create,
    timespan_from_days,
    timespan_from_hours,
    timespan_from_minutes,
    timespan_from_seconds,
    timespan_from_milliseconds,
    timespan_get_days,
    timespan_get_hours,
    timespan_get_minutes,
    timespan_get_seconds,
    timespan_get_milliseconds,
    timespan_get_total_days,
    timespan_get_total_hours,
    timespan_get_total_minutes,
    timespan_get_total_seconds,
    timespan_add,
    timespan_subtract,
    timespan_multiply,
    timespan_divide,
    timespan_to_string,
    timespan_equals,
    timespan_less_than,
    timespan_greater_than,
    timespan_less_equal,
    timespan_greater_equal,
)

__all__: list[str] = [
    "INVALID_TIMESTAMP",
    # TimeSpan
    "timespan_create",
    "timespan_from_days",
    "timespan_from_hours",
    "timespan_from_minutes",
    "timespan_from_seconds",
    "timespan_from_milliseconds",
    "timespan_get_days",
    "timespan_get_hours",
    "timespan_get_minutes",
    "timespan_get_seconds",
    "timespan_get_milliseconds",
    "timespan_get_total_days",
    "timespan_get_total_hours",
    "timespan_get_total_minutes",
    "timespan_get_total_seconds",
    "timespan_add",
    "timespan_subtract",
    "timespan_multiply",
    "timespan_divide",
    "timespan_to_string",
    "timespan_equals",
    "timespan_less_than",
    "timespan_greater_than",
    "timespan_less_equal",
    "timespan_greater_equal",
    # DateTime
    "datetime_create",
    "datetime_now",
    "datetime_parse",
    "datetime_get_year",
    "datetime_get_month",
    "datetime_get_day",
    "datetime_get_hour",
    "datetime_get_minute",
    "datetime_get_second",
    "datetime_get_millisecond",
    "datetime_add_timespan",
    "datetime_subtract_timespan",
    "datetime_difference",
    "datetime_format",
    "datetime_format_milliseconds",
    "datetime_to_iso_string",
    "datetime_equals",
    "datetime_less_than",
    "datetime_greater_than",
    "datetime_less_equal",
    "datetime_greater_equal",
]
