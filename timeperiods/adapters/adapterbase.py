"""Date Adapter Contract
---------------------

The period algebra never does calendar math itself. Every start/end,
shift and enumeration goes through a DateAdapter, so a backend can be
swapped without touching the algebra.

Contract:
  1. start_of/end_of are idempotent and bracket the input:
     start_of(d) <= d <= end_of(d)
  2. add/subtract are inverses for integral amounts
  3. each_interval is finite, ascending and endpoint-inclusive,
     capped at EACH_INTERVAL_LIMIT elements
  4. Unknown units degrade: start_of/end_of return the input unchanged,
     unknown duration keys are ignored

Durations are dateutil relativedelta objects. Mappings such as
{"months": 1} and timedelta values are accepted and converted.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import List, Mapping, Optional, Union

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiods.errors import UnknownUnitError
from timeperiods.shared_utils import check_week_starts_on, DEFAULT_WEEK_STARTS_ON

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Calendar units every adapter understands
ADAPTER_UNITS = ("year", "quarter", "month", "week", "day", "hour", "minute", "second")

# Safety cap on enumerated intervals
EACH_INTERVAL_LIMIT = 1000

# One step of each adapter unit
UNIT_STEPS = {
    "year": relativedelta(years=1),
    "quarter": relativedelta(months=3),
    "month": relativedelta(months=1),
    "week": relativedelta(weeks=1),
    "day": relativedelta(days=1),
    "hour": relativedelta(hours=1),
    "minute": relativedelta(minutes=1),
    "second": relativedelta(seconds=1),
}

_RELATIVEDELTA_KEYS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds", "microseconds")

DurationLike = Union[relativedelta, timedelta, Mapping[str, int]]


# ============================================================================
# Duration Helpers
# ============================================================================

def to_duration(value: DurationLike) -> relativedelta:
    """
    Convert a duration-like value to relativedelta.

    Args:
        value: relativedelta, timedelta, or mapping with keys
               years, quarters, months, weeks, days, hours, minutes,
               seconds, milliseconds, microseconds

    Returns:
        Equivalent relativedelta. Unknown mapping keys are dropped.

    Raises:
        TypeError: If value is none of the accepted types

    Examples:
        >>> to_duration({"quarters": 1})
        relativedelta(months=+3)

        >>> to_duration({"milliseconds": 5})
        relativedelta(microseconds=+5000)
    """
    if isinstance(value, relativedelta):
        return value

    if isinstance(value, timedelta):
        return relativedelta(days=value.days, seconds=value.seconds, microseconds=value.microseconds)

    if isinstance(value, Mapping):
        kwargs = {}
        for key, amount in value.items():
            if key == "quarters":
                kwargs["months"] = kwargs.get("months", 0) + 3 * amount
            elif key == "milliseconds":
                kwargs["microseconds"] = kwargs.get("microseconds", 0) + 1000 * amount
            elif key in _RELATIVEDELTA_KEYS:
                kwargs[key] = kwargs.get(key, 0) + amount
            else:
                logger.debug(f"Ignoring unknown duration key '{key}'")
        return relativedelta(**kwargs)

    raise TypeError(f"Cannot interpret {value!r} as a duration")


def unit_step(unit: str, amount: int = 1) -> relativedelta:
    """
    Duration of ``amount`` steps of an adapter unit.

    Raises:
        UnknownUnitError: If unit is not an adapter unit

    Examples:
        >>> unit_step("quarter", 2)
        relativedelta(months=+6)
    """
    if unit not in UNIT_STEPS:
        raise UnknownUnitError(unit)
    return UNIT_STEPS[unit] * amount


# ============================================================================
# Adapter Base Class
# ============================================================================

class DateAdapter(ABC):
    """
    Calendar-math backend consumed by the period algebra.

    Subclasses implement start_of, end_of and add. Everything else is
    derived here from those three primitives.

    Attributes:
        name: Backend name ("native", "pandas", ...)
        resolution: Gap between an inclusive end and the next start
        week_starts_on: Default week start (0 = Sunday .. 6 = Saturday)
    """

    name = "abstract"
    resolution = timedelta(microseconds=1)

    def __init__(self, week_starts_on: int = DEFAULT_WEEK_STARTS_ON):
        self.week_starts_on = check_week_starts_on(week_starts_on)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(week_starts_on={self.week_starts_on})"

    def _week_start(self, week_starts_on: Optional[int]) -> int:
        if week_starts_on is None:
            return self.week_starts_on
        return check_week_starts_on(week_starts_on)

    @abstractmethod
    def start_of(self, date: datetime, unit: str, week_starts_on: Optional[int] = None) -> datetime:
        """First instant of the unit containing date."""

    @abstractmethod
    def end_of(self, date: datetime, unit: str, week_starts_on: Optional[int] = None) -> datetime:
        """Last instant (inclusive) of the unit containing date."""

    @abstractmethod
    def add(self, date: datetime, duration: DurationLike) -> datetime:
        """Shift date forward by duration using calendar arithmetic."""

    def subtract(self, date: datetime, duration: DurationLike) -> datetime:
        """Shift date backward by duration."""
        return self.add(date, -to_duration(duration))

    def is_same(self, a: datetime, b: datetime, unit: str, week_starts_on: Optional[int] = None) -> bool:
        """True if a and b fall in the same unit."""
        return self.start_of(a, unit, week_starts_on) == self.start_of(b, unit, week_starts_on)

    def is_before(self, a: datetime, b: datetime) -> bool:
        return a < b

    def is_after(self, a: datetime, b: datetime) -> bool:
        return a > b

    def each_interval(
        self,
        start: datetime,
        end: datetime,
        unit: str,
        week_starts_on: Optional[int] = None,
    ) -> List[datetime]:
        """
        Start instants of every unit overlapping [start, end].

        The first element is start_of(start, unit); the sequence stops at
        the last unit start that is <= end.

        Args:
            start: Range start (inclusive)
            end: Range end (inclusive)
            unit: Adapter unit to enumerate
            week_starts_on: Week start override for "week"

        Returns:
            Ascending list of unit start instants (at most EACH_INTERVAL_LIMIT)

        Raises:
            UnknownUnitError: If unit is not an adapter unit

        Examples:
            >>> adapter.each_interval(datetime(2024, 1, 15), datetime(2024, 3, 2), "month")
            [datetime(2024, 1, 1, 0, 0), datetime(2024, 2, 1, 0, 0), datetime(2024, 3, 1, 0, 0)]
        """
        if unit not in ADAPTER_UNITS:
            raise UnknownUnitError(unit, f"Adapter '{self.name}' cannot enumerate unit '{unit}'")

        first = self.start_of(start, unit, week_starts_on)
        instants = []
        current = first
        while current <= end:
            if len(instants) >= EACH_INTERVAL_LIMIT:
                logger.warning(
                    f"each_interval truncated at {EACH_INTERVAL_LIMIT} '{unit}' intervals "
                    f"between {start} and {end}"
                )
                break
            instants.append(current)
            # Step from the aligned first start to avoid month-end drift
            current = self.add(first, unit_step(unit, len(instants)))

        return instants


__all__ = [
    "ADAPTER_UNITS",
    "EACH_INTERVAL_LIMIT",
    "UNIT_STEPS",
    "DateAdapter",
    "DurationLike",
    "to_duration",
    "unit_step",
]
