"""Anchored units: repeating fixed-length spans counted from an anchor.

Sprints, fiscal years and semesters do not line up with calendar units,
but each is "N weeks / months / years starting from some date". An
anchored unit turns that description into a UnitDefinition.

Examples:
    >>> sprint = anchored_unit(datetime(2024, 1, 1), {"weeks": 2}, divisible_into=["week", "day"])
    >>> define_unit("sprint", sprint)

    >>> fiscal_year = anchored_unit(datetime(2023, 4, 1), {"years": 1}, divisible_into=["quarter", "month"])
    >>> define_unit("fiscal_year", fiscal_year)
"""

from datetime import datetime
from typing import Iterable, Optional

from timeperiods.adapters.adapterbase import DurationLike, to_duration
from timeperiods.units.unitmodel import UnitDefinition, UnitTag


def anchored_unit(
    anchor: datetime,
    length: DurationLike,
    divisible_into: Iterable[UnitTag] = (),
    merges_into: Optional[UnitTag] = None,
) -> UnitDefinition:
    """
    UnitDefinition for spans of ``length`` repeating from ``anchor``.

    The span containing an instant is [anchor + k*length, anchor + (k+1)*length)
    for the integer k (possibly negative) that brackets the instant. Month
    and year lengths use calendar arithmetic, so a 1-month unit anchored on
    the 1st always starts on the 1st.

    Args:
        anchor: Start instant of span k = 0
        length: Span length (relativedelta, timedelta or mapping)
        divisible_into: Units a span may be divided into
        merges_into: Parent unit a complete run of spans forms

    Returns:
        UnitDefinition without a step (navigation hops span boundaries)

    Raises:
        ValueError: If length is not strictly positive
    """
    step = to_duration(length)
    if anchor + step <= anchor:
        raise ValueError(f"Anchored unit length must be positive, got {length!r}")

    def build(instant, adapter, week_starts_on=1):
        # Estimate k from the first span's width, then correct by stepping
        width = adapter.add(anchor, step) - anchor
        k = int((instant - anchor) / width)

        start = adapter.add(anchor, step * k)
        while start > instant:
            k -= 1
            start = adapter.add(anchor, step * k)

        following = adapter.add(anchor, step * (k + 1))
        while following <= instant:
            k += 1
            start = following
            following = adapter.add(anchor, step * (k + 1))

        return start, following - adapter.resolution

    return UnitDefinition(
        build=build,
        divisible_into=divisible_into,
        merges_into=merges_into,
    )


__all__ = [
    "anchored_unit",
]
