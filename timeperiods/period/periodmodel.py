"""Period value type.

A Period is an immutable, unit-tagged, closed interval [start, end] plus a
reference instant inside it. Both bounds are inclusive: the next period of
the same unit starts one adapter resolution step after ``end``.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from timeperiods.units.unitmodel import Unit, UnitTag, unit_tag


@dataclass(frozen=True)
class Period:
    """
    Bounded interval of time tagged with a unit.

    Attributes:
        start: Inclusive lower bound
        end: Inclusive upper bound
        unit: Unit member for built-ins, plain string for registered units
        reference: Representative instant, start <= reference <= end

    Raises:
        ValueError: If start > end or reference lies outside [start, end]

    Examples:
        >>> p = Period(datetime(2024, 2, 1), datetime(2024, 2, 29, 23, 59, 59, 999999),
        ...            "month", datetime(2024, 2, 15))
        >>> p.unit
        <Unit.MONTH: 'month'>
        >>> datetime(2024, 2, 10) in p
        True
    """

    start: datetime
    end: datetime
    unit: UnitTag
    reference: datetime

    def __post_init__(self):
        object.__setattr__(self, "unit", unit_tag(self.unit))

        if self.start > self.end:
            raise ValueError(f"Period start {self.start} is after end {self.end}")
        if not (self.start <= self.reference <= self.end):
            raise ValueError(
                f"Period reference {self.reference} is outside [{self.start}, {self.end}]"
            )

    @property
    def is_custom(self) -> bool:
        return self.unit is Unit.CUSTOM

    def __contains__(self, instant) -> bool:
        return self.start <= instant <= self.end

    def replace(self, **changes) -> "Period":
        """Copy with some fields replaced (validated again)."""
        return replace(self, **changes)


__all__ = [
    "Period",
]
