"""Temporal formatting and parsing.

This module provides functions for converting DateTime values to and
from strftime-style string representations.

Functions:
    strftime: Format a DateTime using a strftime pattern.
    strptime: Parse a string using a strftime pattern.

Examples:
    >>> from fdate import DateTime
    >>> from fdate.format import strftime, strptime

    >>> strftime(DateTime(2024, 1, 15, 14, 30, 45), "%Y-%m-%dT%H:%M:%S")
    '2024-01-15T14:30:45'

    >>> strptime("2024-01-15", "%Y-%m-%d").year
    2024
"""

from __future__ import annotations

from fdate.format.strftime import strftime, strptime

__all__: list[str] = [
    "strftime",
    "strptime",
]
