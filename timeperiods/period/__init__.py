"""Period value type and the period algebra.

Public API:
    Period(start, end, unit, reference)
        Immutable unit-tagged closed interval

    to_period(temporal, instant, unit="day") / create_period / create_custom_period
        Build periods

    divide(temporal, period, unit) / split(...) / split_at(...) / merge(temporal, periods)
        Take periods apart and put them back together

    go(temporal, period, steps) / next_period / previous_period
        Move along a period's own unit

    zoom_in / zoom_out / zoom_to
        Move between units around a period's reference

    is_same / contains / is_weekend / is_weekday / is_today
        Predicates

    period_number / period_label / format_period_display
        Numbers and display strings

Examples:
    >>> from timeperiods.period import to_period, divide, merge
    >>> february = to_period(temporal, datetime(2024, 2, 15), "month")
    >>> days = divide(temporal, february, "day")
    >>> len(days)
    29
    >>> merge(temporal, days).unit
    <Unit.MONTH: 'month'>
"""

from timeperiods.period.periodalgebra import divide, merge, split, split_at
from timeperiods.period.periodfactory import create_custom_period, create_period, to_period
from timeperiods.period.periodformat import format_period_display, period_label, period_number
from timeperiods.period.periodmodel import Period
from timeperiods.period.periodnavigate import go, next_period, previous_period, zoom_in, zoom_out, zoom_to
from timeperiods.period.periodpredicates import contains, is_same, is_today, is_weekday, is_weekend

__all__ = [
    "Period",
    "contains",
    "create_custom_period",
    "create_period",
    "divide",
    "format_period_display",
    "go",
    "is_same",
    "is_today",
    "is_weekday",
    "is_weekend",
    "merge",
    "next_period",
    "period_label",
    "period_number",
    "previous_period",
    "split",
    "split_at",
    "to_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
