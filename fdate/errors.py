"""fdate exception hierarchy.

All fdate-specific exceptions inherit from FDateError.
"""

from __future__ import annotations


class FDateError(Exception):
    """Base exception for all fdate errors."""

    pass


class ValidationError(FDateError):
    """Invalid input values.

    Raised when a field that must be non-negative arrives negative at
    the flat bridge boundary.

    Examples:
        - Negative month passed to datetime_create
        - Negative millisecond passed to datetime_create
    """

    pass


class ParseError(FDateError):
    """Failed to parse string representation.

    DateTime.parse() reports failures by returning None. This error is
    raised only by DateTime.parse_strict().

    Examples:
        - Text that does not follow the format pattern
        - Trailing characters after the last directive
        - Month 13 or minute 60 in the input
    """

    pass


class OverflowError(FDateError):
    """Arithmetic operation exceeded representable range.

    Raised when a result cannot be represented as a signed 64-bit
    count of milliseconds.

    Examples:
        - TimeSpan.from_days() with more than about 106 billion days
        - Adding a TimeSpan that moves a DateTime past year 292 million
    """

    pass


__all__ = [
    "FDateError",
    "ValidationError",
    "ParseError",
    "OverflowError",
]
