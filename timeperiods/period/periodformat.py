"""Period numbers, identifiers and display strings.

Passthrough formatting only (English month names from strftime); no
locale handling.

Examples:
    >>> period_label(to_period(temporal, datetime(2026, 2, 3), "quarter"))
    '2026Q1'

    >>> period_label(to_period(temporal, datetime(2025, 1, 8), "week"))
    '2025-W02'

    >>> format_period_display(to_period(temporal, datetime(2026, 2, 3), "quarter"))
    'Q1 2026 (Jan 1 - Mar 31, 2026)'
"""

from datetime import datetime, timedelta

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from timeperiods.period.periodmodel import Period
from timeperiods.units.unitmodel import Unit, unit_key


def _iso_week(period: Period) -> Week:
    """ISO week of the period's fourth day (Thursday for Monday-start weeks)."""
    middle = period.start + timedelta(days=3)
    return Week.withdate(middle.date())


def _short_date(dt: datetime) -> str:
    return f"{dt:%b} {dt.day}"


def period_number(period: Period) -> int:
    """
    Position number of the period within its parent.

    year -> 2024, quarter -> 1..4, month -> 1..12, week -> ISO week,
    day -> day of month, hour/minute/second -> clock value.
    Custom and registered extension units return 0.

    Examples:
        >>> period_number(to_period(temporal, datetime(2024, 12, 5), "month"))
        12
    """
    ref = period.reference
    unit = period.unit

    if unit is Unit.YEAR:
        return ref.year
    if unit is Unit.QUARTER:
        return (ref.month - 1) // 3 + 1
    if unit is Unit.MONTH:
        return ref.month
    if unit is Unit.WEEK:
        return _iso_week(period).week
    if unit is Unit.DAY:
        return ref.day
    if unit is Unit.HOUR:
        return ref.hour
    if unit is Unit.MINUTE:
        return ref.minute
    if unit is Unit.SECOND:
        return ref.second
    return 0


def period_label(period: Period) -> str:
    """
    Compact identifier for a period.

    Examples:
        year "2024", quarter "2024Q1", month "2024-02", week "2024-W24",
        day "2024-02-15", hour "2024-02-15T14", minute "2024-02-15T14:30",
        second "2024-02-15T14:30:05", custom "<start>/<end>" (ISO 8601),
        extension units "<unit> <start date>"
    """
    start = period.start
    unit = period.unit

    if unit is Unit.YEAR:
        return f"{start.year}"
    if unit is Unit.QUARTER:
        return f"{start.year}Q{(start.month - 1) // 3 + 1}"
    if unit is Unit.MONTH:
        return f"{start:%Y-%m}"
    if unit is Unit.WEEK:
        week = _iso_week(period)
        return f"{week.year}-W{week.week:02d}"
    if unit is Unit.DAY:
        return f"{start:%Y-%m-%d}"
    if unit is Unit.HOUR:
        return f"{start:%Y-%m-%dT%H}"
    if unit is Unit.MINUTE:
        return f"{start:%Y-%m-%dT%H:%M}"
    if unit is Unit.SECOND:
        return f"{start:%Y-%m-%dT%H:%M:%S}"
    if unit is Unit.CUSTOM:
        return f"{start.isoformat()}/{period.end.isoformat()}"
    return f"{unit_key(unit)} {start:%Y-%m-%d}"


def format_period_display(period: Period) -> str:
    """
    Human-readable display string.

    Examples:
        >>> format_period_display(month)
        'February 2024'
        >>> format_period_display(week)
        'W24 2024 (Jun 10 - Jun 16, 2024)'
    """
    if not period:
        return ""

    start = period.start
    end = period.end
    unit = period.unit

    if unit is Unit.YEAR:
        return f"{start.year}"

    elif unit is Unit.QUARTER:
        return f"Q{period_number(period)} {start.year} ({_short_date(start)} - {_short_date(end)}, {end.year})"

    elif unit is Unit.MONTH:
        return f"{start:%B %Y}"

    elif unit is Unit.WEEK:
        week = _iso_week(period)
        return f"W{week.week:02d} {week.year} ({_short_date(start)} - {_short_date(end)}, {end.year})"

    elif unit is Unit.DAY:
        return f"{start:%A}, {start:%B} {start.day}, {start.year}"

    elif unit is Unit.HOUR:
        return f"{_short_date(start)}, {start.year} {start:%H}:00"

    elif unit is Unit.MINUTE:
        return f"{_short_date(start)}, {start.year} {start:%H:%M}"

    elif unit is Unit.SECOND:
        return f"{_short_date(start)}, {start.year} {start:%H:%M:%S}"

    # Custom and extension units show their bounds
    return f"{_short_date(start)}, {start.year} - {_short_date(end)}, {end.year}"


__all__ = [
    "format_period_display",
    "period_label",
    "period_number",
]
