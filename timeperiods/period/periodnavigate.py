"""Navigation: move a period along its own unit, or zoom to another unit.

Units with a ``step`` (all built-ins) shift the reference instant with
calendar arithmetic and rebuild the bounds, so month and year lengths
are always right. Units without a step hop across their own boundaries.
Custom periods keep their exact duration.
"""

from typing import List, Optional

from timeperiods.errors import DivisionNotSupportedError
from timeperiods.period.periodalgebra import divide
from timeperiods.period.periodfactory import create_period, registry_of, to_period
from timeperiods.period.periodmodel import Period
from timeperiods.units.unitmodel import Unit, UnitTag, unit_key


def _shift_custom(temporal, period: Period, steps: int) -> Period:
    span = period.end - period.start + temporal.adapter.resolution
    shift = span * steps
    return Period(
        start=period.start + shift,
        end=period.end + shift,
        unit=Unit.CUSTOM,
        reference=period.reference + shift,
    )


def go(temporal, period: Period, steps: int) -> Period:
    """
    Move a period ``steps`` units forward (negative: backward).

    Args:
        temporal: Temporal container
        period: Starting period
        steps: Number of units to move; 0 returns the period unchanged

    Returns:
        Period of the same unit

    Raises:
        ValueError: If steps is not an integer
        UnknownUnitError: If the period's unit is no longer registered

    Examples:
        >>> january = to_period(temporal, datetime(2024, 1, 10), "month")
        >>> go(temporal, january, 13).start
        datetime(2025, 2, 1, 0, 0)
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        if not (isinstance(steps, float) and steps.is_integer()):
            raise ValueError(f"steps must be an integer, got {steps!r}")
        steps = int(steps)
    if steps == 0:
        return period

    if period.is_custom:
        return _shift_custom(temporal, period, steps)

    adapter = temporal.adapter
    definition = registry_of(temporal).require(period.unit)

    if definition.step is not None:
        if steps > 0:
            reference = adapter.add(period.reference, definition.step * steps)
        else:
            reference = adapter.subtract(period.reference, definition.step * -steps)
        return to_period(temporal, reference, period.unit)

    current = period
    for _ in range(abs(steps)):
        if steps > 0:
            edge = current.end + adapter.resolution
        else:
            edge = current.start - adapter.resolution
        current = to_period(temporal, edge, period.unit)
    return current


def next_period(temporal, period: Period) -> Period:
    """The following period of the same unit."""
    return go(temporal, period, 1)


def previous_period(temporal, period: Period) -> Period:
    """The preceding period of the same unit."""
    return go(temporal, period, -1)


# ---- Zoom ----

def zoom_in(temporal, period: Period, unit: UnitTag) -> List[Period]:
    """Children of the period in a finer unit (same as divide)."""
    return divide(temporal, period, unit)


def zoom_to(temporal, period: Period, unit: UnitTag) -> Period:
    """
    Period of ``unit`` around the period's reference.

    Also moves ``temporal.browsing`` to the day containing that reference.
    """
    result = create_period(temporal, unit, period)
    temporal.browsing.set(to_period(temporal, period.reference, Unit.DAY))
    return result


def zoom_out(temporal, period: Period, unit: Optional[UnitTag] = None) -> Period:
    """
    Coarser period around the period's reference.

    Without ``unit`` the period's merges_into parent is used.

    Raises:
        DivisionNotSupportedError: If no unit is given and the period's
            unit has no parent

    Examples:
        >>> day = to_period(temporal, datetime(2024, 6, 12))
        >>> zoom_out(temporal, day).unit
        <Unit.WEEK: 'week'>
    """
    if unit is None:
        definition = None if period.is_custom else registry_of(temporal).require(period.unit)
        if definition is None or definition.merges_into is None:
            raise DivisionNotSupportedError(
                unit_key(period.unit), f"'{unit_key(period.unit)}' periods have no parent unit to zoom out to"
            )
        unit = definition.merges_into

    return zoom_to(temporal, period, unit)


__all__ = [
    "go",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
