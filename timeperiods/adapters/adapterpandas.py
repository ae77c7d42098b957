"""Pandas adapter.

Calendar math on ``pandas.Timestamp`` using pandas anchored offsets
(YearBegin, QuarterBegin, MonthBegin) and DateOffset arithmetic.
Timestamps carry nanoseconds, so this backend's resolution is one
nanosecond: the end of a day is 23:59:59.999999999.

Inputs may be datetime or Timestamp; outputs are always Timestamp.
"""

import logging
from typing import Optional

try:
    import pandas as pd
except ImportError as e:
    raise ImportError("pandas not installed. pip install pandas") from e

from timeperiods.adapters.adapterbase import DateAdapter, DurationLike, UNIT_STEPS, to_duration
from timeperiods.shared_utils import day_of_week

logger = logging.getLogger(__name__)

# Anchored offsets rolled back from a normalized timestamp
_ANCHORED_OFFSETS = {
    "year": pd.offsets.YearBegin(),
    "quarter": pd.offsets.QuarterBegin(startingMonth=1),
    "month": pd.offsets.MonthBegin(),
}

_DATEOFFSET_KEYS = ("years", "months", "days", "hours", "minutes", "seconds", "microseconds")


def _to_date_offset(duration: DurationLike) -> Optional[pd.DateOffset]:
    """Convert a duration to pandas DateOffset; None for a zero duration."""
    rd = to_duration(duration).normalized()
    kwargs = {key: getattr(rd, key) for key in _DATEOFFSET_KEYS if getattr(rd, key)}
    if not kwargs:
        # pd.DateOffset() without arguments means one day
        return None
    return pd.DateOffset(**kwargs)


class PandasAdapter(DateAdapter):
    """
    DateAdapter over pandas.Timestamp.

    Examples:
        >>> adapter = PandasAdapter()
        >>> adapter.start_of(pd.Timestamp("2024-05-20 13:45"), "quarter")
        Timestamp('2024-04-01 00:00:00')

        >>> adapter.add(pd.Timestamp("2024-01-31"), {"months": 1})
        Timestamp('2024-02-29 00:00:00')
    """

    name = "pandas"
    resolution = pd.Timedelta(1, unit="ns")

    def start_of(self, date, unit: str, week_starts_on: Optional[int] = None) -> pd.Timestamp:
        ts = pd.Timestamp(date)

        if unit in _ANCHORED_OFFSETS:
            return _ANCHORED_OFFSETS[unit].rollback(ts.normalize())
        if unit == "week":
            offset = (day_of_week(ts) - self._week_start(week_starts_on)) % 7
            return ts.normalize() - pd.Timedelta(days=offset)
        if unit == "day":
            return ts.normalize()
        if unit == "hour":
            return ts.replace(minute=0, second=0, microsecond=0, nanosecond=0)
        if unit == "minute":
            return ts.replace(second=0, microsecond=0, nanosecond=0)
        if unit == "second":
            return ts.replace(microsecond=0, nanosecond=0)

        logger.debug(f"start_of: unknown unit '{unit}', returning input unchanged")
        return ts

    def end_of(self, date, unit: str, week_starts_on: Optional[int] = None) -> pd.Timestamp:
        if unit not in UNIT_STEPS:
            logger.debug(f"end_of: unknown unit '{unit}', returning input unchanged")
            return pd.Timestamp(date)

        start = self.start_of(date, unit, week_starts_on)
        return self.add(start, UNIT_STEPS[unit]) - self.resolution

    def add(self, date, duration: DurationLike) -> pd.Timestamp:
        ts = pd.Timestamp(date)
        offset = _to_date_offset(duration)
        if offset is None:
            return ts
        return ts + offset


__all__ = [
    "PandasAdapter",
]
