"""Flat TimeSpan functions for numeric hosts.

Every TimeSpan crosses this boundary as its total milliseconds. Boolean
results are returned as 1 or 0 for hosts without a native boolean.
"""

from __future__ import annotations

from fdate.bridge._buffers import fit_buffer
from fdate.core.timespan import TimeSpan, decompose


def timespan_create(
    days: int, hours: int, minutes: int, seconds: int, milliseconds: int
) -> int:
    """Return the total milliseconds of the given components."""
    return TimeSpan(days, hours, minutes, seconds, milliseconds).total_milliseconds


def timespan_from_days(days: int) -> int:
    return TimeSpan.from_days(days).total_milliseconds


def timespan_from_hours(hours: int) -> int:
    return TimeSpan.from_hours(hours).total_milliseconds


def timespan_from_minutes(minutes: int) -> int:
    return TimeSpan.from_minutes(minutes).total_milliseconds


def timespan_from_seconds(seconds: int) -> int:
    return TimeSpan.from_seconds(seconds).total_milliseconds


def timespan_from_milliseconds(milliseconds: int) -> int:
    return TimeSpan.from_milliseconds(milliseconds).total_milliseconds


def timespan_get_days(ts_ms: int) -> int:
    return decompose(ts_ms).days


def timespan_get_hours(ts_ms: int) -> int:
    return decompose(ts_ms).hours


def timespan_get_minutes(ts_ms: int) -> int:
    return decompose(ts_ms).minutes


def timespan_get_seconds(ts_ms: int) -> int:
    return decompose(ts_ms).seconds


def timespan_get_milliseconds(ts_ms: int) -> int:
    return decompose(ts_ms).milliseconds


def timespan_get_total_days(ts_ms: int) -> int:
    return TimeSpan.from_milliseconds(ts_ms).total_days


def timespan_get_total_hours(ts_ms: int) -> int:
    return TimeSpan.from_milliseconds(ts_ms).total_hours


def timespan_get_total_minutes(ts_ms: int) -> int:
    return TimeSpan.from_milliseconds(ts_ms).total_minutes


def timespan_get_total_seconds(ts_ms: int) -> int:
    return TimeSpan.from_milliseconds(ts_ms).total_seconds


def timespan_add(ts1_ms: int, ts2_ms: int) -> int:
    return (TimeSpan.from_milliseconds(ts1_ms) + TimeSpan.from_milliseconds(ts2_ms)).total_milliseconds


def timespan_subtract(ts1_ms: int, ts2_ms: int) -> int:
    return (TimeSpan.from_milliseconds(ts1_ms) - TimeSpan.from_milliseconds(ts2_ms)).total_milliseconds


def timespan_multiply(ts_ms: int, factor: int) -> int:
    return (TimeSpan.from_milliseconds(ts_ms) * factor).total_milliseconds


def timespan_divide(ts_ms: int, divisor: int) -> int:
    """Divide a span, truncating toward zero.

    Raises:
        ZeroDivisionError: If divisor is zero.
    """
    return (TimeSpan.from_milliseconds(ts_ms) / divisor).total_milliseconds


def timespan_to_string(ts_ms: int, buffer_size: int) -> str:
    """Render a span as "[{days}d ]HH:MM:SS[.mmm]", cut to fit buffer_size."""
    return fit_buffer(str(TimeSpan.from_milliseconds(ts_ms)), buffer_size)


def timespan_equals(ts1_ms: int, ts2_ms: int) -> int:
    return 1 if ts1_ms == ts2_ms else 0


def timespan_less_than(ts1_ms: int, ts2_ms: int) -> int:
    return 1 if ts1_ms < ts2_ms else 0


def timespan_greater_than(ts1_ms: int, ts2_ms: int) -> int:
    return 1 if ts1_ms > ts2_ms else 0


def timespan_less_equal(ts1_ms: int, ts2_ms: int) -> int:
    return 1 if ts1_ms <= ts2_ms else 0


def timespan_greater_equal(ts1_ms: int, ts2_ms: int) -> int:
    return 1 if ts1_ms >= ts2_ms else 0


__all__ = [
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
]
