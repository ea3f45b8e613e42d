"""Fixed-length character buffer helpers for the flat bridge.

Hosts such as Fortran pass strings as character arrays with an explicit
length and receive results in caller-allocated buffers that need one
slot for a terminator. This module is not part of the public API.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def read_chars(chars: str, length: int) -> str:
    """Return the first length characters of a host character array.

    Examples:
        >>> read_chars("%Y-%m-%d        ", 8)
        '%Y-%m-%d'
    """
    return chars[:length]


def fit_buffer(text: str, buffer_size: int) -> str:
    """Truncate text to what a buffer of buffer_size can hold.

    One slot is reserved for the terminator, so at most buffer_size - 1
    characters are kept. A non-positive size yields an empty string.

    Examples:
        >>> fit_buffer("2022-01-31T12:34:56", 11)
        '2022-01-31'
        >>> fit_buffer("02:03:04", 64)
        '02:03:04'
    """
    if buffer_size <= 0:
        logger.warning("Invalid buffer size %d", buffer_size)
        return ""
    return text[: buffer_size - 1]


__all__ = ["read_chars", "fit_buffer"]
