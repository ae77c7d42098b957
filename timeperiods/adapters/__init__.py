"""Date adapters: pluggable calendar-math backends.

Public API:
    DateAdapter
        Abstract base class every backend implements

    NativeAdapter(week_starts_on=1)
        Standard library datetime + dateutil relativedelta

    PandasAdapter(week_starts_on=1)
        pandas Timestamp + anchored offsets

    to_duration(value) -> relativedelta
        Normalize mapping / timedelta / relativedelta durations

Examples:
    >>> from timeperiods.adapters import NativeAdapter
    >>> adapter = NativeAdapter()
    >>> adapter.add(datetime(2024, 1, 31), {"months": 1})
    datetime.datetime(2024, 2, 29, 0, 0)
"""

from timeperiods.adapters.adapterbase import (
    ADAPTER_UNITS,
    EACH_INTERVAL_LIMIT,
    UNIT_STEPS,
    DateAdapter,
    to_duration,
    unit_step,
)
from timeperiods.adapters.adapternative import NativeAdapter
from timeperiods.adapters.adapterpandas import PandasAdapter

__all__ = [
    "ADAPTER_UNITS",
    "EACH_INTERVAL_LIMIT",
    "UNIT_STEPS",
    "DateAdapter",
    "NativeAdapter",
    "PandasAdapter",
    "to_duration",
    "unit_step",
]
