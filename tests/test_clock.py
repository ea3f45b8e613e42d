"""Tests for the clock sources behind DateTime.now()."""

from __future__ import annotations

from fdate import DateTime
from fdate.clock import FixedClock, SystemClock, get_clock, set_clock, use_clock


class TestFixedClock:
    """Tests for FixedClock."""

    def test_returns_fixed_value(self) -> None:
        clock = FixedClock(1_000)
        assert clock.now_ms() == 1_000
        assert clock.now_ms() == 1_000

    def test_advance(self) -> None:
        clock = FixedClock(1_000)
        clock.advance(500)
        assert clock.now_ms() == 1_500
        clock.advance(-1_500)
        assert clock.now_ms() == 0

    def test_repr(self) -> None:
        assert repr(FixedClock(42)) == "FixedClock(42)"


class TestSystemClock:
    """Tests for SystemClock."""

    def test_is_default(self) -> None:
        assert isinstance(get_clock(), SystemClock)

    def test_monotone_enough(self) -> None:
        clock = SystemClock()
        first = clock.now_ms()
        second = clock.now_ms()
        assert second >= first
        # Later than 2020-01-01
        assert first > 1_577_836_800_000


class TestClockInstallation:
    """Tests for installing and restoring the active clock."""

    def test_set_clock_returns_previous(self) -> None:
        fixed = FixedClock(0)
        previous = set_clock(fixed)
        try:
            assert get_clock() is fixed
        finally:
            assert set_clock(previous) is fixed
        assert get_clock() is previous

    def test_use_clock_restores(self) -> None:
        before = get_clock()
        with use_clock(FixedClock(0)) as clock:
            assert get_clock() is clock
            assert DateTime.now() == DateTime(1970, 1, 1)
        assert get_clock() is before

    def test_use_clock_restores_on_error(self) -> None:
        before = get_clock()
        try:
            with use_clock(FixedClock(0)):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert get_clock() is before

    def test_fixture(self, fixed_clock: FixedClock) -> None:
        assert get_clock() is fixed_clock
        assert DateTime.now().to_iso_string_msec() == "2022-01-31T12:34:56.789"
