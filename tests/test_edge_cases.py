"""Edge case tests for fdate.

These tests cover the 64-bit range limits, decomposition invariants
across many magnitudes, and ordering between the two value types.
"""

from __future__ import annotations

import pytest

from fdate import INVALID_TIMESTAMP, DateTime, OverflowError, TimeSpan
from fdate.core.timespan import decompose
from fdate.errors import FDateError

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

SAMPLE_TOTALS = [
    0,
    1,
    -1,
    999,
    -999,
    1_000,
    59_999,
    -60_000,
    3_599_999,
    -3_600_001,
    86_399_999,
    -86_400_000,
    93_784_005,
    -93_784_005,
    123_456_789_012,
    -987_654_321_098,
    INT64_MAX,
    INT64_MIN + 1,
]


class TestDecompositionInvariants:
    """Properties of decompose() that hold for every total."""

    @pytest.mark.parametrize("total", SAMPLE_TOTALS)
    def test_recomposes_exactly(self, total: int) -> None:
        assert decompose(total).to_milliseconds() == total

    @pytest.mark.parametrize("total", SAMPLE_TOTALS)
    def test_fields_share_sign(self, total: int) -> None:
        c = decompose(total)
        fields = (c.days, c.hours, c.minutes, c.seconds, c.milliseconds)
        if total >= 0:
            assert all(f >= 0 for f in fields)
        else:
            assert all(f <= 0 for f in fields)

    @pytest.mark.parametrize("total", SAMPLE_TOTALS)
    def test_fields_bounded(self, total: int) -> None:
        c = decompose(total)
        assert abs(c.hours) < 24
        assert abs(c.minutes) < 60
        assert abs(c.seconds) < 60
        assert abs(c.milliseconds) < 1000

    @pytest.mark.parametrize("total", SAMPLE_TOTALS)
    def test_negation_mirrors_fields(self, total: int) -> None:
        c = decompose(total)
        n = decompose(-total)
        assert (n.days, n.hours, n.minutes, n.seconds, n.milliseconds) == (
            -c.days,
            -c.hours,
            -c.minutes,
            -c.seconds,
            -c.milliseconds,
        )


class TestRangeLimits:
    """Tests for the signed 64-bit millisecond range."""

    def test_extremes_are_valid(self) -> None:
        assert TimeSpan.from_milliseconds(INT64_MAX).total_milliseconds == INT64_MAX
        assert TimeSpan.from_milliseconds(INT64_MIN).total_milliseconds == INT64_MIN
        assert DateTime.from_epoch_milliseconds(INT64_MAX).timestamp == INT64_MAX

    def test_timespan_factory_overflow(self) -> None:
        with pytest.raises(OverflowError):
            TimeSpan.from_days(2**63 // 86_400_000 + 1)

    def test_timespan_constructor_overflow(self) -> None:
        with pytest.raises(OverflowError):
            TimeSpan(milliseconds=INT64_MAX + 1)

    def test_timespan_addition_overflow(self) -> None:
        with pytest.raises(OverflowError):
            TimeSpan.from_milliseconds(INT64_MAX) + TimeSpan.from_milliseconds(1)

    def test_timespan_multiplication_overflow(self) -> None:
        with pytest.raises(OverflowError):
            TimeSpan.from_days(10**9) * 10**9

    def test_negating_minimum_overflows(self) -> None:
        with pytest.raises(OverflowError):
            -TimeSpan.from_milliseconds(INT64_MIN)

    def test_datetime_addition_overflow(self) -> None:
        dt = DateTime.from_epoch_milliseconds(INT64_MAX)
        with pytest.raises(OverflowError):
            dt + TimeSpan.from_milliseconds(1)

    def test_datetime_difference_overflow(self) -> None:
        late = DateTime.from_epoch_milliseconds(INT64_MAX)
        early = DateTime.from_epoch_milliseconds(INT64_MIN)
        with pytest.raises(OverflowError):
            late - early

    def test_epoch_value_out_of_range(self) -> None:
        with pytest.raises(OverflowError):
            DateTime.from_epoch_milliseconds(INT64_MIN - 1)

    def test_overflow_is_fdate_error(self) -> None:
        with pytest.raises(FDateError):
            TimeSpan.from_milliseconds(2**64)

    def test_builtin_overflow_not_raised(self) -> None:
        """fdate's OverflowError is its own type, not the builtin."""
        import builtins

        assert not issubclass(OverflowError, builtins.OverflowError)


class TestInvalidTimestamp:
    """Tests for the reserved no-value marker."""

    def test_value(self) -> None:
        assert INVALID_TIMESTAMP == -(2**63 - 1)
        assert DateTime.INVALID_TIMESTAMP == INVALID_TIMESTAMP

    def test_core_never_returns_it_for_failed_parse(self) -> None:
        assert DateTime.parse("garbage") is None


class TestOrdering:
    """Total ordering over sampled values."""

    @pytest.mark.parametrize("a", SAMPLE_TOTALS[:8])
    @pytest.mark.parametrize("b", SAMPLE_TOTALS[:8])
    def test_exactly_one_relation(self, a: int, b: int) -> None:
        x, y = TimeSpan.from_milliseconds(a), TimeSpan.from_milliseconds(b)
        assert [x < y, x == y, x > y].count(True) == 1
        assert (x <= y) == (x < y or x == y)
        assert (x >= y) == (x > y or x == y)

    def test_datetime_order_matches_timestamp(self) -> None:
        values = [DateTime.from_epoch_milliseconds(ms) for ms in SAMPLE_TOTALS]
        ordered = sorted(values)
        assert [v.timestamp for v in ordered] == sorted(SAMPLE_TOTALS)


class TestFarDates:
    """Calendar fields far from the epoch."""

    def test_year_one(self) -> None:
        dt = DateTime(1, 1, 1)
        assert (dt.year, dt.month, dt.day) == (1, 1, 1)
        assert dt.to_iso_string() == "0001-01-01T00:00:00"

    def test_year_zero_and_before(self) -> None:
        dt = DateTime(0, 12, 31, 23, 59, 59, 999) + TimeSpan.from_milliseconds(1)
        assert dt == DateTime(1, 1, 1)
        assert DateTime(-1, 1, 1).year == -1

    def test_far_future(self) -> None:
        dt = DateTime(275_760, 9, 13)
        assert (dt.year, dt.month, dt.day) == (275_760, 9, 13)

    def test_fields_before_epoch(self) -> None:
        dt = DateTime(1900, 2, 28, 23, 59, 59, 1)
        assert dt.timestamp < 0
        assert (dt.year, dt.month, dt.day) == (1900, 2, 28)
        assert (dt.hour, dt.minute, dt.second, dt.millisecond) == (23, 59, 59, 1)
        assert (dt + TimeSpan.from_days(1)).day == 1
