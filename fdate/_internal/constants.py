"""Internal constants for fdate.

These constants define the unit ratios, integer limits and default
patterns used throughout the library. This module is not part of the
public API.
"""

from __future__ import annotations

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000

# Signed 64-bit storage limits
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Reserved "no value" marker for callers without an optional type
INVALID_TIMESTAMP: int = -INT64_MAX

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Default strftime patterns
DEFAULT_FORMAT: str = "%Y-%m-%d %H:%M:%S"
ISO_FORMAT: str = "%Y-%m-%dT%H:%M:%S"


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "INT64_MIN",
    "INT64_MAX",
    "INVALID_TIMESTAMP",
    "DAYS_IN_MONTH",
    "DEFAULT_FORMAT",
    "ISO_FORMAT",
]
