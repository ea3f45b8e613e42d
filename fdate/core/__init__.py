"""Core temporal types.

This module provides the two value types:
    - TimeSpan: Signed span of time with millisecond precision
    - DateTime: Point in time with millisecond precision (naive/UTC)
"""

from __future__ import annotations

from fdate.core.datetime import DateTime
from fdate.core.timespan import TimeSpan, TimeSpanComponents, decompose

__all__: list[str] = [
    "DateTime",
    "TimeSpan",
    "TimeSpanComponents",
    "decompose",
]
