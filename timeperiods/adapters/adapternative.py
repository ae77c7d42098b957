"""Native datetime adapter.

Calendar math on plain ``datetime.datetime`` values with
``dateutil.relativedelta`` for month/year arithmetic (month-end clamping,
leap years). Wall-clock only: tzinfo is carried through untouched.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from timeperiods.adapters.adapterbase import DateAdapter, DurationLike, UNIT_STEPS, to_duration
from timeperiods.shared_utils import day_of_week

logger = logging.getLogger(__name__)


def _start_of_day(dt: datetime) -> datetime:
    """Return datetime at start of day (00:00:00)."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


class NativeAdapter(DateAdapter):
    """
    DateAdapter over the standard library datetime type.

    Resolution is one microsecond, so the end of February 2024 is
    datetime(2024, 2, 29, 23, 59, 59, 999999).

    Examples:
        >>> adapter = NativeAdapter()
        >>> adapter.start_of(datetime(2024, 6, 15, 14, 30), "week")  # Monday start
        datetime.datetime(2024, 6, 10, 0, 0)

        >>> adapter.end_of(datetime(2024, 2, 15), "month")
        datetime.datetime(2024, 2, 29, 23, 59, 59, 999999)
    """

    name = "native"
    resolution = timedelta(microseconds=1)

    def start_of(self, date: datetime, unit: str, week_starts_on: Optional[int] = None) -> datetime:
        if unit == "year":
            return _start_of_day(date).replace(month=1, day=1)
        if unit == "quarter":
            first_month = ((date.month - 1) // 3) * 3 + 1
            return _start_of_day(date).replace(month=first_month, day=1)
        if unit == "month":
            return _start_of_day(date).replace(day=1)
        if unit == "week":
            offset = (day_of_week(date) - self._week_start(week_starts_on)) % 7
            return _start_of_day(date) - timedelta(days=offset)
        if unit == "day":
            return _start_of_day(date)
        if unit == "hour":
            return date.replace(minute=0, second=0, microsecond=0)
        if unit == "minute":
            return date.replace(second=0, microsecond=0)
        if unit == "second":
            return date.replace(microsecond=0)

        logger.debug(f"start_of: unknown unit '{unit}', returning input unchanged")
        return date

    def end_of(self, date: datetime, unit: str, week_starts_on: Optional[int] = None) -> datetime:
        if unit not in UNIT_STEPS:
            logger.debug(f"end_of: unknown unit '{unit}', returning input unchanged")
            return date

        start = self.start_of(date, unit, week_starts_on)
        return start + UNIT_STEPS[unit] - self.resolution

    def add(self, date: datetime, duration: DurationLike) -> datetime:
        return date + to_duration(duration)


__all__ = [
    "NativeAdapter",
]
