"""Validation utilities for fdate.

This module provides the checked-arithmetic guard that keeps every
TimeSpan and DateTime inside the signed 64-bit millisecond range, and the
non-negative field check used at the flat bridge boundary.

This module is not part of the public API.
"""

from __future__ import annotations

from fdate._internal.constants import INT64_MAX, INT64_MIN
from fdate.errors import OverflowError, ValidationError


def check_int64(value: int, what: str = "value") -> int:
    """Return value unchanged if it fits a signed 64-bit integer.

    Args:
        value: The integer to check.
        what: Name used in the error message.

    Returns:
        The same value.

    Raises:
        OverflowError: If value is outside [-2**63, 2**63 - 1].

    Examples:
        >>> check_int64(86_400_000)
        86400000

        >>> check_int64(2**63, "milliseconds")
        Traceback (most recent call last):
        ...
        fdate.errors.OverflowError: milliseconds out of 64-bit range: 9223372036854775808
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"{what} out of 64-bit range: {value}")
    return value


def require_non_negative(**fields: int) -> None:
    """Validate that every named field is zero or positive.

    Args:
        **fields: Mapping of field names to values.

    Raises:
        ValidationError: Naming the first negative field.

    Examples:
        >>> require_non_negative(year=2022, month=1)
        >>> require_non_negative(year=2022, month=-1)
        Traceback (most recent call last):
        ...
        fdate.errors.ValidationError: month must be non-negative, got -1
    """
    for name, value in fields.items():
        if value < 0:
            raise ValidationError(f"{name} must be non-negative, got {value}")


__all__ = [
    "check_int64",
    "require_non_negative",
]
