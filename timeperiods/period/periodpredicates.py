"""Period predicates: pure comparisons computed on demand."""

from typing import Optional, Union

from timeperiods.adapters.adapterbase import ADAPTER_UNITS
from timeperiods.errors import UnknownUnitError
from timeperiods.period.periodfactory import registry_of
from timeperiods.period.periodmodel import Period
from timeperiods.shared_utils import to_instant
from timeperiods.units.unitmodel import Unit, UnitTag, unit_key


def _reference(value):
    if isinstance(value, Period):
        return value.reference
    return to_instant(value)


def is_same(temporal, a: Optional[Union[Period, object]], b: Optional[Union[Period, object]], unit: UnitTag) -> bool:
    """
    True if a and b fall in the same ``unit``.

    Periods are compared by their reference instants; bare instants are
    accepted too. Returns False when either side is None.

    Raises:
        UnknownUnitError: If unit is neither a calendar unit nor registered

    Examples:
        >>> is_same(temporal, day_a, day_b, "month")
        True
        >>> is_same(temporal, None, day_b, "day")
        False
    """
    if a is None or b is None:
        return False

    ref_a, ref_b = _reference(a), _reference(b)
    key = unit_key(unit)

    if key in ADAPTER_UNITS:
        return temporal.adapter.is_same(ref_a, ref_b, key, temporal.week_starts_on)

    definition = registry_of(temporal).get(key)
    if definition is None:
        raise UnknownUnitError(key)

    adapter = temporal.adapter
    start_a, _ = definition.build(ref_a, adapter, week_starts_on=temporal.week_starts_on)
    start_b, _ = definition.build(ref_b, adapter, week_starts_on=temporal.week_starts_on)
    return start_a == start_b


def contains(period: Period, target: Union[Period, object]) -> bool:
    """
    Inclusive containment of an instant or a whole period.

    Examples:
        >>> contains(month, month.start), contains(month, month.end)
        (True, True)
        >>> contains(month, next_period(temporal, month))
        False
    """
    if isinstance(target, Period):
        return period.start <= target.start and target.end <= period.end

    instant = to_instant(target)
    return period.start <= instant <= period.end


def is_weekend(period: Period) -> bool:
    """True if the reference falls on Saturday or Sunday."""
    return period.reference.weekday() >= 5


def is_weekday(period: Period) -> bool:
    """True if the reference falls on Monday through Friday."""
    return not is_weekend(period)


def is_today(period: Period, temporal) -> bool:
    """True if the period's reference is on the same day as temporal.now."""
    return is_same(temporal, period, temporal.now.value, Unit.DAY)


__all__ = [
    "contains",
    "is_same",
    "is_today",
    "is_weekday",
    "is_weekend",
]
