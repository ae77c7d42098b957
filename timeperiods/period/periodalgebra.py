"""Period Algebra
--------------

divide, split and merge: the operations that take periods apart and put
them back together.

Key Invariants:
  1. divide(p, child) for a listed child unit tiles [p.start, p.end]
     exactly: consecutive periods are one adapter resolution step apart
  2. split by count/duration returns custom slices covering p exactly
  3. merge(divide(p, child)) returns p's unit again when the run lines up
     with a parent in the merges_into chain; otherwise a custom span

Enumerations are capped at EACH_INTERVAL_LIMIT periods.
"""

import logging
from typing import Iterable, List, Mapping, Optional

from timeperiods.adapters.adapterbase import ADAPTER_UNITS, EACH_INTERVAL_LIMIT, DurationLike, to_duration
from timeperiods.errors import DivisionNotSupportedError, UnknownUnitError
from timeperiods.period.periodfactory import create_custom_period, registry_of, to_period
from timeperiods.period.periodmodel import Period
from timeperiods.shared_utils import to_instant
from timeperiods.units.unitmodel import Unit, UnitDefinition, UnitTag, unit_key

logger = logging.getLogger(__name__)


# ---- Helper: enumerate unit starts over a range ----

def _walk_unit_starts(temporal, definition: UnitDefinition, start, end) -> list:
    """Unit starts over [start, end] by hopping from one span's end to the next."""
    adapter = temporal.adapter
    starts = []
    current = start
    while current <= end:
        if len(starts) >= EACH_INTERVAL_LIMIT:
            logger.warning(f"Unit walk truncated at {EACH_INTERVAL_LIMIT} periods between {start} and {end}")
            break
        span_start, span_end = definition.build(current, adapter, week_starts_on=temporal.week_starts_on)
        starts.append(span_start)
        current = span_end + adapter.resolution
    return starts


def _unit_starts(temporal, unit: str, definition: UnitDefinition, start, end) -> list:
    if unit in ADAPTER_UNITS:
        return temporal.adapter.each_interval(start, end, unit, temporal.week_starts_on)
    return _walk_unit_starts(temporal, definition, start, end)


# ---- Divide ----

def divide(temporal, period: Period, unit: UnitTag) -> List[Period]:
    """
    Partition a period into periods of a child unit.

    A period may only be divided into units listed in its definition's
    divisible_into. Custom periods may be divided by any registered unit;
    the first and last results are full unit periods and may extend past
    the custom bounds.

    Args:
        temporal: Temporal container
        period: Period to divide
        unit: Target unit

    Returns:
        Ascending list of target-unit periods

    Raises:
        UnknownUnitError: If the target (or the period's own unit) is not registered
        DivisionNotSupportedError: If the target is not a listed child unit

    Examples:
        >>> february = to_period(temporal, datetime(2024, 2, 15), "month")
        >>> len(divide(temporal, february, "day"))
        29
    """
    target = unit_key(unit)
    source = unit_key(period.unit)

    if target == Unit.CUSTOM.value:
        raise DivisionNotSupportedError(source, "Cannot divide by 'custom'; use split(count=...) instead", target)

    registry = registry_of(temporal)
    target_definition = registry.get(target)
    if target_definition is None:
        raise UnknownUnitError(target)

    if not period.is_custom:
        source_definition = registry.require(source)
        if target not in source_definition.divisible_into:
            allowed = ", ".join(sorted(source_definition.divisible_into)) or "nothing"
            raise DivisionNotSupportedError(
                source,
                f"Cannot divide a '{source}' period by '{target}' (divisible into: {allowed})",
                target,
            )

    starts = _unit_starts(temporal, target, target_definition, period.start, period.end)
    return [to_period(temporal, instant, target) for instant in starts]


# ---- Split ----

def _split_by_count(temporal, period: Period, count) -> List[Period]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise DivisionNotSupportedError(unit_key(period.unit), f"count must be a positive integer, got {count!r}")
    if count > EACH_INTERVAL_LIMIT:
        raise DivisionNotSupportedError(
            unit_key(period.unit), f"count {count} exceeds the limit of {EACH_INTERVAL_LIMIT} slices"
        )

    resolution = temporal.adapter.resolution
    width = (period.end - period.start + resolution) // count
    if width < resolution:
        raise DivisionNotSupportedError(unit_key(period.unit), f"Period is too short to split into {count} slices")

    slices = []
    for i in range(count):
        slice_start = period.start + width * i
        # The last slice absorbs the remainder
        slice_end = period.end if i == count - 1 else period.start + width * (i + 1) - resolution
        slices.append(create_custom_period(slice_start, slice_end))
    return slices


def _split_by_duration(temporal, period: Period, duration: DurationLike) -> List[Period]:
    adapter = temporal.adapter
    step = to_duration(duration)

    slices = []
    current = period.start
    while current <= period.end:
        if len(slices) >= EACH_INTERVAL_LIMIT:
            logger.warning(f"split by duration truncated at {EACH_INTERVAL_LIMIT} slices")
            break
        following = adapter.add(current, step)
        if following <= current:
            raise DivisionNotSupportedError(unit_key(period.unit), f"duration must be positive, got {duration!r}")
        slices.append(create_custom_period(current, min(following - adapter.resolution, period.end)))
        current = following
    return slices


def split(
    temporal,
    period: Period,
    options: Optional[Mapping] = None,
    *,
    by: Optional[UnitTag] = None,
    count: Optional[int] = None,
    duration: Optional[DurationLike] = None,
) -> List[Period]:
    """
    Split a period in one of three ways.

    Exactly one mode must be given, either as a keyword or in ``options``:
      - by: unit name, same as divide()
      - count: n equal custom slices, the last absorbing the remainder
      - duration: consecutive custom slices of that length, the last
        clipped to period.end

    Args:
        temporal: Temporal container
        period: Period to split
        options: Mapping with one of "by", "count", "duration"
        by / count / duration: Same, as keywords

    Returns:
        List of periods covering [period.start, period.end]

    Raises:
        DivisionNotSupportedError: If zero or several modes are given, or
            the chosen mode's value is invalid

    Examples:
        >>> day = to_period(temporal, datetime(2024, 6, 10))
        >>> [p.start.hour for p in split(temporal, day, count=4)]
        [0, 6, 12, 18]

        >>> len(split(temporal, day, duration={"hours": 5}))
        5
    """
    modes = {"by": by, "count": count, "duration": duration}
    for key, value in (options or {}).items():
        if key not in modes:
            raise DivisionNotSupportedError(unit_key(period.unit), f"Unknown split option '{key}'")
        if value is not None:
            modes[key] = value

    chosen = [key for key, value in modes.items() if value is not None]
    if len(chosen) != 1:
        raise DivisionNotSupportedError(
            unit_key(period.unit), f"split needs exactly one of 'by', 'count' or 'duration', got {chosen or 'none'}"
        )

    mode = chosen[0]
    if mode == "by":
        return divide(temporal, period, modes["by"])
    if mode == "count":
        return _split_by_count(temporal, period, modes["count"])
    return _split_by_duration(temporal, period, modes["duration"])


def split_at(temporal, period: Period, instant) -> List[Period]:
    """
    Split a period in two at ``instant``.

    The first part ends one resolution step before instant; the second
    starts at instant. Both parts are custom periods. If instant is not
    strictly after period.start and at or before period.end, the period
    is returned unchanged as a single-element list.

    Examples:
        >>> day = to_period(temporal, datetime(2024, 6, 10))
        >>> before, after = split_at(temporal, day, datetime(2024, 6, 10, 12))
        >>> before.end, after.start
        (datetime(2024, 6, 10, 11, 59, 59, 999999), datetime(2024, 6, 10, 12, 0))
    """
    instant = to_instant(instant)
    if instant <= period.start or instant > period.end:
        return [period]

    return [
        create_custom_period(period.start, instant - temporal.adapter.resolution),
        create_custom_period(instant, period.end),
    ]


# ---- Merge ----

def _is_contiguous(temporal, ordered: List[Period]) -> bool:
    resolution = temporal.adapter.resolution
    return all(nxt.start - prev.end == resolution for prev, nxt in zip(ordered, ordered[1:]))


def _natural_period(temporal, ordered: List[Period]) -> Optional[Period]:
    """Parent-unit period exactly covered by the run, walking up merges_into."""
    unit = ordered[0].unit
    if unit is Unit.CUSTOM or any(p.unit != unit for p in ordered):
        return None
    if not _is_contiguous(temporal, ordered):
        return None

    registry = registry_of(temporal)
    definition = registry.get(unit)
    parent = definition.merges_into if definition else None
    middle = ordered[len(ordered) // 2].reference
    visited = set()

    while parent is not None and parent not in visited:
        visited.add(parent)
        parent_definition = registry.get(parent)
        if parent_definition is None:
            return None

        candidate = to_period(temporal, middle, parent)
        if candidate.start == ordered[0].start and candidate.end == ordered[-1].end:
            return candidate

        parent = parent_definition.merges_into

    return None


def merge(temporal, periods: Iterable[Period]) -> Optional[Period]:
    """
    Combine periods into one.

    Periods are sorted by start (stable). If they form a contiguous run of
    one unit that exactly covers a parent unit (7 week-aligned days, 3
    quarter-aligned months, 12 months of a year, ...) the parent period is
    returned. Otherwise the result is a custom period from the earliest
    start to the latest end; gaps are not rejected.

    Args:
        temporal: Temporal container
        periods: Periods to merge

    Returns:
        Merged period, the only period for a single input, None for no input

    Examples:
        >>> week = to_period(temporal, datetime(2024, 6, 10), "week")
        >>> merge(temporal, divide(temporal, week, "day")).unit
        <Unit.WEEK: 'week'>
    """
    ordered = sorted(periods, key=lambda p: p.start)
    if not ordered:
        return None
    if len(ordered) == 1:
        return ordered[0]

    natural = _natural_period(temporal, ordered)
    if natural is not None:
        return natural

    return create_custom_period(ordered[0].start, max(p.end for p in ordered))


__all__ = [
    "divide",
    "merge",
    "split",
    "split_at",
]
