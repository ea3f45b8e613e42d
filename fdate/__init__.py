"""fdate: millisecond-precision DateTime and TimeSpan values.

fdate provides two immutable value types with millisecond precision,
arithmetic between them, strftime-style parsing and formatting, and a
flat integer-only interface for numeric hosts.

Core Types:
    DateTime: Point in time, stored as milliseconds since 1970-01-01
    TimeSpan: Signed span of time, stored as milliseconds
    TimeSpanComponents: Day/hour/minute/second/millisecond breakdown

Format Functions:
    strftime: Format a DateTime with a strftime-style pattern
    strptime: Parse a string with a strftime-style pattern

Exceptions:
    FDateError: Base exception
    ValidationError: Negative field at the bridge boundary
    ParseError: Failed to parse string (parse_strict only)
    OverflowError: Result outside the 64-bit millisecond range

Example:
    >>> from fdate import DateTime, TimeSpan
    >>> start = DateTime(2022, 1, 1)
    >>> later = start + TimeSpan.from_hours(36)
    >>> str(later - start)
    '1d 12:00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from fdate.core.datetime import DateTime
from fdate.core.timespan import TimeSpan, TimeSpanComponents

# Constants
from fdate._internal.constants import INVALID_TIMESTAMP

# Exceptions
from fdate.errors import (
    FDateError,
    OverflowError,
    ParseError,
    ValidationError,
)

# Format functions
from fdate.format import strftime, strptime

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "TimeSpan",
    "TimeSpanComponents",
    # Constants
    "INVALID_TIMESTAMP",
    # Exceptions
    "FDateError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    # Format functions
    "strftime",
    "strptime",
]
