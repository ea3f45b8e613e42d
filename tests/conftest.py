"""Pytest configuration and fixtures for fdate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so fdate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fdate.clock import FixedClock, use_clock  # noqa: E402


@pytest.fixture
def fixed_clock():
    """Install a FixedClock at 2022-01-31T12:34:56.789 for one test."""
    clock = FixedClock(1_643_632_496_789)
    with use_clock(clock):
        yield clock
