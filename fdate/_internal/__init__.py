"""Internal utilities for fdate.

This module contains private implementation details:
    - Constants and unit ratios
    - Calendar day-number math
    - Checked 64-bit arithmetic and field validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from fdate._internal.validation import check_int64, require_non_negative

__all__: list[str] = [
    "check_int64",
    "require_non_negative",
]
