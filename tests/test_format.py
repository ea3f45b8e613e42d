"""Tests for the strftime formatting engine."""

from __future__ import annotations

import pytest

from fdate import DateTime
from fdate.format import strftime


class TestStrftime:
    """Tests for strftime function."""

    def test_strftime_basic(self):
        """Format datetime with the default pattern."""
        dt = DateTime(2024, 1, 15, 14, 30, 45)
        assert strftime(dt, "%Y-%m-%d %H:%M:%S") == "2024-01-15 14:30:45"

    def test_strftime_custom_separators(self):
        """Format datetime with custom separators."""
        dt = DateTime(2024, 1, 15, 14, 30, 45)
        assert strftime(dt, "%Y/%m/%d %H:%M") == "2024/01/15 14:30"

    def test_strftime_day_first(self):
        """Format date in day-first order."""
        dt = DateTime(2022, 1, 31, 12, 34, 56)
        assert strftime(dt, "%d/%m/%Y %H:%M:%S") == "31/01/2022 12:34:56"

    def test_strftime_shorthands(self):
        """%F and %T expand to the ISO date and time patterns."""
        dt = DateTime(2024, 1, 15, 14, 30, 45)
        assert strftime(dt, "%FT%T") == "2024-01-15T14:30:45"

    def test_strftime_literal_percent(self):
        """%% renders a single percent sign."""
        dt = DateTime(2024, 1, 15)
        assert strftime(dt, "100%% %Y") == "100% 2024"

    def test_strftime_trailing_percent_is_literal(self):
        """A lone trailing % is copied through."""
        dt = DateTime(2024, 1, 15)
        assert strftime(dt, "%Y%") == "2024%"

    def test_strftime_zero_padding(self):
        """Fields are zero padded to two digits."""
        dt = DateTime(2024, 3, 5, 7, 8, 9)
        assert strftime(dt, "%m %d %H %M %S") == "03 05 07 08 09"

    def test_strftime_small_year_padded(self):
        """Years below 1000 are padded to four digits."""
        assert strftime(DateTime(44, 3, 15), "%Y") == "0044"

    def test_strftime_negative_year(self):
        """Negative years keep a sign and four digits."""
        assert strftime(DateTime(-44, 3, 15), "%Y-%m-%d") == "-0044-03-15"

    def test_strftime_large_year(self):
        """Years past 9999 print every digit."""
        assert strftime(DateTime(12345, 1, 1), "%Y") == "12345"

    def test_strftime_drops_milliseconds(self):
        """Without millisecond mode the fraction is truncated, not rounded."""
        dt = DateTime(2022, 1, 31, 12, 34, 56, 999)
        assert strftime(dt, "%H:%M:%S") == "12:34:56"

    def test_strftime_millisecond_mode(self):
        """Millisecond mode renders %S as SS.mmm."""
        dt = DateTime(2022, 1, 31, 12, 34, 56, 789)
        assert strftime(dt, "%H:%M:%S", milliseconds=True) == "12:34:56.789"

    def test_strftime_millisecond_mode_pads(self):
        """Milliseconds are always three digits."""
        dt = DateTime(2022, 1, 31, 12, 34, 56, 5)
        assert strftime(dt, "%S", milliseconds=True) == "56.005"

    def test_strftime_millisecond_mode_without_seconds(self):
        """Millisecond mode has no effect when %S is absent."""
        dt = DateTime(2022, 1, 31, 12, 34, 56, 789)
        assert strftime(dt, "%Y-%m-%d", milliseconds=True) == "2022-01-31"

    def test_strftime_no_directives(self):
        """Pattern without directives is returned unchanged."""
        assert strftime(DateTime(2022, 1, 31), "hello") == "hello"

    @pytest.mark.parametrize("directive", ["%a", "%B", "%c", "%j", "%f", "%z"])
    def test_strftime_unsupported_directive(self, directive):
        """Unsupported directives raise ValueError."""
        with pytest.raises(ValueError, match="unsupported strftime directive"):
            strftime(DateTime(2022, 1, 31), f"%Y {directive}")
