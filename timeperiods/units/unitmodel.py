"""Unit tags and unit definitions.

Built-in units form a closed Enum; registered extension units are plain
string keys. Unit subclasses str, so Unit.MONTH == "month" and either form
can be passed wherever a unit is expected.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, FrozenSet, Iterable, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta


class Unit(str, Enum):
    """Built-in unit tags."""

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


BUILTIN_UNITS = tuple(u for u in Unit if u is not Unit.CUSTOM)

UnitTag = Union[Unit, str]

# build(instant, adapter, week_starts_on=1) -> (start, end)
BuildFn = Callable[..., Tuple[datetime, datetime]]


def unit_key(unit: UnitTag) -> str:
    """
    Plain string key for a unit tag.

    Examples:
        >>> unit_key(Unit.MONTH)
        'month'

        >>> unit_key("sprint")
        'sprint'
    """
    if isinstance(unit, Enum):
        return unit.value
    return str(unit)


def unit_tag(unit: UnitTag) -> UnitTag:
    """
    Canonical tag: the Unit member for built-in names, the string otherwise.

    Examples:
        >>> unit_tag("week")
        <Unit.WEEK: 'week'>

        >>> unit_tag("sprint")
        'sprint'
    """
    key = unit_key(unit)
    try:
        return Unit(key)
    except ValueError:
        return key


@dataclass(frozen=True)
class UnitDefinition:
    """
    How to build, divide and merge periods of one unit.

    Attributes:
        build: build(instant, adapter, week_starts_on=1) -> (start, end)
        divisible_into: Units a period of this unit may be divided into
        merges_into: Parent unit a complete run of these periods forms
        step: Duration of one unit for navigation; None means navigate by
              walking the unit's own boundaries
    """

    build: BuildFn
    divisible_into: FrozenSet[str] = field(default_factory=frozenset)
    merges_into: Optional[str] = None
    step: Optional[relativedelta] = None

    def __post_init__(self):
        # Normalize Enum members and plain iterables to string keys
        object.__setattr__(self, "divisible_into", _key_set(self.divisible_into))
        if self.merges_into is not None:
            object.__setattr__(self, "merges_into", unit_key(self.merges_into))


def _key_set(units: Iterable[UnitTag]) -> FrozenSet[str]:
    if isinstance(units, (str, Enum)):
        units = [units]
    return frozenset(unit_key(u) for u in units)


__all__ = [
    "BUILTIN_UNITS",
    "Unit",
    "UnitDefinition",
    "UnitTag",
    "unit_key",
    "unit_tag",
]
