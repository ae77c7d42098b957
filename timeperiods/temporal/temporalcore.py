"""Temporal container.

Holds the active date adapter, the week start convention, the unit
registry, and two observable cells:

  - browsing: the day period the application is looking at
  - now: the day period containing the current instant

Everything in timeperiods.period takes a Temporal as its first argument
and reads only adapter, week_starts_on and registry from it.
"""

import logging
from datetime import datetime
from typing import Optional

from timeperiods.adapters.adapterbase import DateAdapter
from timeperiods.errors import MissingAdapterError
from timeperiods.period.periodfactory import to_period
from timeperiods.period.periodmodel import Period
from timeperiods.shared_utils import check_week_starts_on, default_week_starts_on
from timeperiods.temporal.temporalcell import ObservableCell
from timeperiods.units.unitmodel import Unit
from timeperiods.units.unitregistry import UnitRegistry, default_registry

logger = logging.getLogger(__name__)


class Temporal:
    """
    State container for period navigation.

    Attributes:
        adapter: DateAdapter used for all calendar math
        week_starts_on: 0 = Sunday .. 6 = Saturday
        registry: UnitRegistry used to resolve units
        browsing: ObservableCell[Period]
        now: ObservableCell[Period]

    Raises:
        MissingAdapterError: If adapter is None
        TypeError: If adapter is not a DateAdapter
        ValueError: If week_starts_on is outside 0..6
        UnknownUnitError: If the registry has no "day" unit

    Examples:
        >>> temporal = Temporal(datetime(2024, 6, 15), NativeAdapter())
        >>> temporal.browsing.value.start
        datetime(2024, 6, 15, 0, 0)
    """

    def __init__(
        self,
        date,
        adapter: DateAdapter,
        *,
        now=None,
        week_starts_on: Optional[int] = None,
        registry: Optional[UnitRegistry] = None,
    ):
        if adapter is None:
            raise MissingAdapterError()
        if not isinstance(adapter, DateAdapter):
            raise TypeError(f"adapter must be a DateAdapter, got {type(adapter).__name__}")

        self.adapter = adapter
        if week_starts_on is None:
            week_starts_on = default_week_starts_on()
        self.week_starts_on = check_week_starts_on(week_starts_on)
        self.registry = default_registry if registry is None else registry

        self.browsing: ObservableCell[Period] = ObservableCell(self._day(date))
        self.now: ObservableCell[Period] = ObservableCell(self._day(now if now is not None else datetime.now()))

        logger.debug(
            f"Created Temporal(adapter={adapter.name}, week_starts_on={self.week_starts_on}, "
            f"browsing={self.browsing.value.start})"
        )

    def _day(self, target) -> Period:
        if isinstance(target, Period):
            return target
        return to_period(self, target, Unit.DAY)

    def browse(self, target) -> Period:
        """
        Replace browsing with a period (or the day period of an instant).

        Returns:
            The new browsing period
        """
        period = self._day(target)
        logger.debug(f"browsing -> {period.unit} {period.start}")
        self.browsing.set(period)
        return period

    def refresh_now(self, instant=None) -> Period:
        """
        Replace now with the day period of instant (default: the current time).

        Returns:
            The new now period
        """
        period = self._day(instant if instant is not None else datetime.now())
        logger.debug(f"now -> {period.start}")
        self.now.set(period)
        return period

    def __repr__(self) -> str:
        return (
            f"Temporal(adapter={self.adapter!r}, week_starts_on={self.week_starts_on}, "
            f"browsing={self.browsing.value.start}, now={self.now.value.reference})"
        )


def create_temporal(
    date,
    adapter: Optional[DateAdapter] = None,
    *,
    now=None,
    week_starts_on: Optional[int] = None,
    registry: Optional[UnitRegistry] = None,
) -> Temporal:
    """
    Create the temporal container.

    Args:
        date: Initial browsing instant (datetime, date or parsable string)
        adapter: Date adapter (required)
        now: Current instant (default: datetime.now())
        week_starts_on: 0 = Sunday .. 6 = Saturday
                        (default: TIMEPERIODS_WEEK_STARTS_ON or 1)
        registry: Unit registry (default: the process-wide registry)

    Returns:
        Temporal

    Raises:
        MissingAdapterError: If no adapter is given

    Examples:
        >>> temporal = create_temporal(datetime(2024, 6, 15), NativeAdapter())
        >>> temporal.week_starts_on
        1
    """
    return Temporal(date, adapter, now=now, week_starts_on=week_starts_on, registry=registry)


__all__ = [
    "Temporal",
    "create_temporal",
]
