"""Temporal container and observable cells.

Public API:
    create_temporal(date, adapter, now=None, week_starts_on=None, registry=None)
        Build the container; adapter is required

    Temporal
        Container class (adapter, week_starts_on, registry, browsing, now)

    ObservableCell
        Value holder with subscribe()/set() change notification
"""

from timeperiods.temporal.temporalcell import ObservableCell
from timeperiods.temporal.temporalcore import Temporal, create_temporal

__all__ = [
    "ObservableCell",
    "Temporal",
    "create_temporal",
]
