"""Compliance tests for the date adapters.

Both backends are run through the same expectations: start/end bracketing,
leap years, week start, calendar arithmetic, enumeration and the
unknown-unit degrade.

Run with: pytest tests/test_adapters.py -v
"""

import logging
import pytest
from datetime import datetime, timedelta

import pandas as pd
from dateutil.relativedelta import relativedelta

from timeperiods.adapters import (
    ADAPTER_UNITS,
    EACH_INTERVAL_LIMIT,
    NativeAdapter,
    PandasAdapter,
    to_duration,
    unit_step,
)
from timeperiods.errors import UnknownUnitError


# June 15, 2024 14:30:45.123 (a Saturday)
TEST_DATE = datetime(2024, 6, 15, 14, 30, 45, 123000)


@pytest.fixture(params=["native", "pandas"])
def adapter(request):
    """Each backend with Monday week start."""
    if request.param == "native":
        return NativeAdapter()
    return PandasAdapter()


def _end(adapter, *args):
    """Inclusive end instant one resolution step before the given midnight."""
    return pd.Timestamp(datetime(*args)) - adapter.resolution


# ============================================================================
# Duration Helpers
# ============================================================================

class TestDurations:
    """Test duration normalization"""

    def test_mapping_to_relativedelta(self):
        """Mapping keys map onto relativedelta fields"""
        assert to_duration({"months": 2, "days": 3}) == relativedelta(months=2, days=3)

    def test_quarters_and_milliseconds(self):
        """Quarters become months, milliseconds become microseconds"""
        assert to_duration({"quarters": 1}) == relativedelta(months=3)
        assert to_duration({"milliseconds": 5}) == relativedelta(microseconds=5000)

    def test_unknown_keys_dropped(self):
        """Unknown keys are ignored rather than failing"""
        assert to_duration({"fortnights": 1, "days": 1}) == relativedelta(days=1)

    def test_timedelta(self):
        """timedelta converts to an equivalent relativedelta"""
        assert to_duration(timedelta(hours=5)) == relativedelta(hours=5)

    def test_bad_type(self):
        """Non-duration values raise TypeError"""
        with pytest.raises(TypeError):
            to_duration(5)

    def test_unit_step(self):
        """unit_step scales one unit"""
        assert unit_step("quarter", 2) == relativedelta(months=6)
        with pytest.raises(UnknownUnitError):
            unit_step("fortnight")


# ============================================================================
# start_of / end_of
# ============================================================================

class TestStartOf:
    """Test start_of for every calendar unit"""

    @pytest.mark.parametrize("unit,expected", [
        ("year", datetime(2024, 1, 1)),
        ("quarter", datetime(2024, 4, 1)),
        ("month", datetime(2024, 6, 1)),
        ("week", datetime(2024, 6, 10)),
        ("day", datetime(2024, 6, 15)),
        ("hour", datetime(2024, 6, 15, 14)),
        ("minute", datetime(2024, 6, 15, 14, 30)),
        ("second", datetime(2024, 6, 15, 14, 30, 45)),
    ])
    def test_start_of(self, adapter, unit, expected):
        """start_of truncates to the unit start"""
        assert adapter.start_of(TEST_DATE, unit) == expected

    def test_week_starts_on_sunday(self, adapter):
        """Sunday week start moves the week back to Sunday June 9"""
        assert adapter.start_of(TEST_DATE, "week", week_starts_on=0) == datetime(2024, 6, 9)

    def test_week_start_default_from_constructor(self):
        """Adapter-level week start applies when no override is passed"""
        assert NativeAdapter(week_starts_on=6).start_of(TEST_DATE, "week") == datetime(2024, 6, 15)

    def test_unknown_unit_returns_input(self, adapter):
        """Unknown units degrade to the input instant"""
        assert adapter.start_of(TEST_DATE, "fortnight") == TEST_DATE

    @pytest.mark.parametrize("unit", ADAPTER_UNITS)
    def test_idempotent_and_bracketing(self, adapter, unit):
        """start_of(start_of(d)) == start_of(d) <= d <= end_of(d)"""
        start = adapter.start_of(TEST_DATE, unit)
        end = adapter.end_of(TEST_DATE, unit)
        assert adapter.start_of(start, unit) == start
        assert adapter.end_of(end, unit) == end
        assert start <= TEST_DATE <= end


class TestEndOf:
    """Test end_of including leap years"""

    def test_end_of_year(self, adapter):
        """Year ends one resolution step before the next January 1"""
        assert adapter.end_of(TEST_DATE, "year") == _end(adapter, 2025, 1, 1)

    def test_end_of_month(self, adapter):
        """June has 30 days"""
        assert adapter.end_of(TEST_DATE, "month") == _end(adapter, 2024, 7, 1)

    def test_february_leap_year(self, adapter):
        """February 2024 ends on the 29th"""
        end = adapter.end_of(datetime(2024, 2, 15), "month")
        assert end.day == 29
        assert (end.hour, end.minute, end.second) == (23, 59, 59)

    def test_february_non_leap_year(self, adapter):
        """February 2023 ends on the 28th"""
        assert adapter.end_of(datetime(2023, 2, 15), "month").day == 28

    def test_end_of_week(self, adapter):
        """Monday-start week containing Saturday June 15 ends on Sunday June 16"""
        assert adapter.end_of(TEST_DATE, "week") == _end(adapter, 2024, 6, 17)

    def test_end_of_quarter(self, adapter):
        """Q2 ends June 30"""
        assert adapter.end_of(TEST_DATE, "quarter") == _end(adapter, 2024, 7, 1)

    def test_native_microsecond_resolution(self):
        """Native end of day is 23:59:59.999999"""
        assert NativeAdapter().end_of(TEST_DATE, "day") == datetime(2024, 6, 15, 23, 59, 59, 999999)

    def test_pandas_nanosecond_resolution(self):
        """Pandas end of day is 23:59:59.999999999"""
        end = PandasAdapter().end_of(TEST_DATE, "day")
        assert end == pd.Timestamp("2024-06-15 23:59:59.999999999")

    def test_unknown_unit_returns_input(self, adapter):
        """Unknown units degrade to the input instant"""
        assert adapter.end_of(TEST_DATE, "fortnight") == TEST_DATE


# ============================================================================
# Arithmetic
# ============================================================================

class TestArithmetic:
    """Test add/subtract calendar arithmetic"""

    def test_add_month_clamps_to_month_end(self, adapter):
        """Jan 31 + 1 month = Feb 29 in a leap year"""
        assert adapter.add(datetime(2024, 1, 31), {"months": 1}) == datetime(2024, 2, 29)

    def test_add_quarter(self, adapter):
        """Quarters add three months"""
        assert adapter.add(datetime(2024, 1, 31), {"quarters": 1}) == datetime(2024, 4, 30)

    def test_subtract_day_across_leap_day(self, adapter):
        """March 1 - 1 day = Feb 29 in 2024"""
        assert adapter.subtract(datetime(2024, 3, 1), {"days": 1}) == datetime(2024, 2, 29)

    def test_add_subtract_inverse(self, adapter):
        """add and subtract cancel for integral amounts"""
        shifted = adapter.add(TEST_DATE, {"days": 10, "hours": 3})
        assert adapter.subtract(shifted, {"days": 10, "hours": 3}) == TEST_DATE

    def test_add_timedelta(self, adapter):
        """timedelta durations are accepted"""
        assert adapter.add(datetime(2024, 6, 15), timedelta(hours=5)) == datetime(2024, 6, 15, 5)

    def test_unknown_duration_key_is_noop(self, adapter):
        """A duration with only unknown keys leaves the date unchanged"""
        assert adapter.add(TEST_DATE, {"fortnights": 1}) == TEST_DATE

    def test_pandas_returns_timestamp(self):
        """Pandas adapter always returns Timestamps"""
        assert isinstance(PandasAdapter().add(datetime(2024, 1, 1), {"days": 1}), pd.Timestamp)


# ============================================================================
# Comparisons and Enumeration
# ============================================================================

class TestComparisons:
    """Test is_same / is_before / is_after"""

    def test_is_same_month(self, adapter):
        assert adapter.is_same(datetime(2024, 6, 1), datetime(2024, 6, 30, 23), "month")
        assert not adapter.is_same(datetime(2024, 6, 30), datetime(2024, 7, 1), "month")

    def test_is_same_week_respects_week_start(self, adapter):
        """Sunday June 16 shares Monday's week, but not with a Sunday start"""
        assert adapter.is_same(datetime(2024, 6, 10), datetime(2024, 6, 16), "week")
        assert not adapter.is_same(datetime(2024, 6, 10), datetime(2024, 6, 16), "week", week_starts_on=0)

    def test_is_before_after(self, adapter):
        a, b = datetime(2024, 6, 1), datetime(2024, 6, 2)
        assert adapter.is_before(a, b)
        assert adapter.is_after(b, a)
        assert not adapter.is_before(b, a)


class TestEachInterval:
    """Test interval enumeration"""

    def test_months_endpoint_inclusive(self, adapter):
        """First element is the aligned start; the last unit start <= end is included"""
        result = adapter.each_interval(datetime(2024, 1, 15), datetime(2024, 3, 2), "month")
        assert result == [datetime(2024, 1, 1), datetime(2024, 2, 1), datetime(2024, 3, 1)]

    def test_month_end_does_not_drift(self, adapter):
        """Months are stepped from the aligned start, never from a clamped day"""
        result = adapter.each_interval(datetime(2024, 1, 1), datetime(2024, 12, 31), "month")
        assert len(result) == 12
        assert all(d.day == 1 for d in result)

    def test_weeks(self, adapter):
        result = adapter.each_interval(datetime(2024, 6, 12), datetime(2024, 6, 30), "week")
        assert result == [datetime(2024, 6, 10), datetime(2024, 6, 17), datetime(2024, 6, 24)]

    def test_restartable(self, adapter):
        """Calling twice yields the same sequence"""
        first = adapter.each_interval(datetime(2024, 6, 1), datetime(2024, 6, 3), "day")
        second = adapter.each_interval(datetime(2024, 6, 1), datetime(2024, 6, 3), "day")
        assert first == second
        assert len(first) == 3

    def test_capped(self, adapter, caplog):
        """Enumeration stops at the safety cap with a warning"""
        with caplog.at_level(logging.WARNING, logger="timeperiods.adapters.adapterbase"):
            result = adapter.each_interval(datetime(2020, 1, 1), datetime(2030, 1, 1), "day")
        assert len(result) == EACH_INTERVAL_LIMIT
        assert "truncated" in caplog.text

    def test_unknown_unit(self, adapter):
        with pytest.raises(UnknownUnitError):
            adapter.each_interval(datetime(2024, 1, 1), datetime(2024, 2, 1), "fortnight")


class TestAdapterConstruction:
    """Test adapter construction"""

    def test_invalid_week_start(self):
        with pytest.raises(ValueError):
            NativeAdapter(week_starts_on=7)

    def test_repr(self):
        assert repr(PandasAdapter(week_starts_on=0)) == "PandasAdapter(week_starts_on=0)"
