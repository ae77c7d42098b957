"""Period construction.

  - to_period: bracket an instant with a registered unit
  - create_period: same, taking the instant from an existing period
  - create_custom_period: "custom" period from explicit bounds

The ``temporal`` argument is anything exposing ``adapter``,
``week_starts_on`` and (optionally) ``registry``; normally a Temporal.
"""

from typing import Union

from timeperiods.errors import UnknownUnitError
from timeperiods.period.periodmodel import Period
from timeperiods.shared_utils import midpoint, to_instant
from timeperiods.units.unitmodel import Unit, UnitTag, unit_key, unit_tag
from timeperiods.units.unitregistry import UnitRegistry, default_registry


def registry_of(temporal) -> UnitRegistry:
    """Registry carried by the temporal container, else the default one."""
    registry = getattr(temporal, "registry", None)
    return default_registry if registry is None else registry


def to_period(temporal, instant, unit: UnitTag = Unit.DAY) -> Period:
    """
    Period of ``unit`` containing ``instant``.

    Args:
        temporal: Temporal container (adapter, week start, registry)
        instant: datetime, date or parsable string
        unit: Registered unit name (default: "day")

    Returns:
        Period with bounds from the unit's build function and
        reference = instant

    Raises:
        UnknownUnitError: If unit is not registered (including "custom")

    Examples:
        >>> p = to_period(temporal, datetime(2024, 2, 15), "month")
        >>> p.start, p.end
        (datetime(2024, 2, 1, 0, 0), datetime(2024, 2, 29, 23, 59, 59, 999999))
    """
    key = unit_key(unit)
    if key == Unit.CUSTOM.value:
        raise UnknownUnitError(key, "Custom periods have no unit rule; use create_custom_period(start, end)")

    definition = registry_of(temporal).require(key)
    reference = to_instant(instant)
    start, end = definition.build(reference, temporal.adapter, week_starts_on=temporal.week_starts_on)

    return Period(start=start, end=end, unit=unit_tag(key), reference=reference)


def create_period(temporal, unit: UnitTag, source: Union[Period, object]) -> Period:
    """
    Period of ``unit`` around the reference of ``source``.

    Equivalent to to_period(temporal, source.reference, unit). A bare
    instant is also accepted as source.

    Examples:
        >>> day = to_period(temporal, datetime(2024, 6, 12))
        >>> create_period(temporal, "week", day).start
        datetime(2024, 6, 10, 0, 0)
    """
    reference = source.reference if isinstance(source, Period) else source
    return to_period(temporal, reference, unit)


def create_custom_period(start, end) -> Period:
    """
    "custom" period spanning [start, end] with the midpoint as reference.

    Raises:
        ValueError: If start is after end

    Examples:
        >>> p = create_custom_period(datetime(2024, 1, 1), datetime(2024, 1, 3))
        >>> p.reference
        datetime(2024, 1, 2, 0, 0)
    """
    start = to_instant(start)
    end = to_instant(end)
    if start > end:
        raise ValueError(f"Custom period start {start} is after end {end}")

    return Period(start=start, end=end, unit=Unit.CUSTOM, reference=midpoint(start, end))


__all__ = [
    "create_custom_period",
    "create_period",
    "registry_of",
    "to_period",
]
