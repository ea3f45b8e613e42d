"""Flat DateTime functions for numeric hosts.

Every DateTime crosses this boundary as its epoch milliseconds and every
TimeSpan as its total milliseconds. Where a host cannot receive an
optional value, failure is reported as INVALID_TIMESTAMP.
"""

from __future__ import annotations

import logging

from fdate._internal.constants import INVALID_TIMESTAMP, ISO_FORMAT
from fdate._internal.validation import require_non_negative
from fdate.bridge._buffers import fit_buffer, read_chars
from fdate.core.datetime import DateTime
from fdate.core.timespan import TimeSpan
from fdate.errors import ValidationError

logger = logging.getLogger(__name__)


def datetime_create(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Return the epoch milliseconds of the given calendar fields.

    Returns:
        Epoch milliseconds, or INVALID_TIMESTAMP if any field is negative.
    """
    try:
        require_non_negative(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
        )
    except ValidationError as exc:
        logger.debug("datetime_create rejected: %s", exc)
        return INVALID_TIMESTAMP
    return DateTime(year, month, day, hour, minute, second, millisecond).timestamp


def datetime_now() -> int:
    return DateTime.now().timestamp


def datetime_parse(text: str, fmt: str, text_len: int, fmt_len: int) -> int:
    """Parse text against fmt, each cut to its given length.

    Returns:
        Epoch milliseconds, or INVALID_TIMESTAMP if a length is not
        positive, fmt has an unsupported directive, or text does not
        conform to fmt.
    """
    if text_len <= 0 or fmt_len <= 0:
        logger.warning("Invalid string or format length (%d, %d)", text_len, fmt_len)
        return INVALID_TIMESTAMP

    text = read_chars(text, text_len)
    fmt = read_chars(fmt, fmt_len)
    try:
        parsed = DateTime.parse(text, fmt)
    except ValueError as exc:
        logger.warning("Invalid format %r: %s", fmt, exc)
        return INVALID_TIMESTAMP

    if parsed is None:
        logger.debug("Could not parse %r with format %r", text, fmt)
        return INVALID_TIMESTAMP
    return parsed.timestamp


def datetime_get_year(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).year


def datetime_get_month(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).month


def datetime_get_day(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).day


def datetime_get_hour(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).hour


def datetime_get_minute(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).minute


def datetime_get_second(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).second


def datetime_get_millisecond(dt_ms: int) -> int:
    return DateTime.from_epoch_milliseconds(dt_ms).millisecond


def datetime_add_timespan(dt_ms: int, ts_ms: int) -> int:
    result = DateTime.from_epoch_milliseconds(dt_ms) + TimeSpan.from_milliseconds(ts_ms)
    return result.timestamp


def datetime_subtract_timespan(dt_ms: int, ts_ms: int) -> int:
    result = DateTime.from_epoch_milliseconds(dt_ms) - TimeSpan.from_milliseconds(ts_ms)
    return result.timestamp


def datetime_difference(dt1_ms: int, dt2_ms: int) -> int:
    """Return dt1 - dt2 as total milliseconds."""
    span = DateTime.from_epoch_milliseconds(dt1_ms) - DateTime.from_epoch_milliseconds(dt2_ms)
    return span.total_milliseconds


def _format(dt_ms: int, fmt: str, fmt_len: int, buffer_size: int, milliseconds: bool) -> str:
    if fmt_len <= 0 or buffer_size <= 0:
        logger.warning("Invalid format or buffer size (%d, %d)", fmt_len, buffer_size)
        return ""

    dt = DateTime.from_epoch_milliseconds(dt_ms)
    fmt = read_chars(fmt, fmt_len)
    if milliseconds:
        return fit_buffer(dt.format_with_milliseconds(fmt), buffer_size)
    return fit_buffer(dt.format(fmt), buffer_size)


def datetime_format(dt_ms: int, fmt: str, fmt_len: int, buffer_size: int) -> str:
    """Format at second resolution, cut to fit buffer_size.

    Raises:
        ValueError: If fmt contains unsupported directives.
    """
    return _format(dt_ms, fmt, fmt_len, buffer_size, milliseconds=False)


def datetime_format_milliseconds(dt_ms: int, fmt: str, fmt_len: int, buffer_size: int) -> str:
    """Format with %S as seconds.milliseconds, cut to fit buffer_size.

    Raises:
        ValueError: If fmt contains unsupported directives.
    """
    return _format(dt_ms, fmt, fmt_len, buffer_size, milliseconds=True)


def datetime_to_iso_string(dt_ms: int, buffer_size: int) -> str:
    return _format(dt_ms, ISO_FORMAT, len(ISO_FORMAT), buffer_size, milliseconds=False)


def datetime_equals(dt1_ms: int, dt2_ms: int) -> int:
    return 1 if dt1_ms == dt2_ms else 0


def datetime_less_than(dt1_ms: int, dt2_ms: int) -> int:
    return 1 if dt1_ms < dt2_ms else 0


def datetime_greater_than(dt1_ms: int, dt2_ms: int) -> int:
    return 1 if dt1_ms > dt2_ms else 0


def datetime_less_equal(dt1_ms: int, dt2_ms: int) -> int:
    return 1 if dt1_ms <= dt2_ms else 0


def datetime_greater_equal(dt1_ms: int, dt2_ms: int) -> int:
    return 1 if dt1_ms >= dt2_ms else 0


__all__ = [
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
