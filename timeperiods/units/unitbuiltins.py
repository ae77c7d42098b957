"""Built-in calendar units.

Each built-in delegates to the adapter's start_of/end_of for the unit of
the same name. Divisibility only lists children that tile the parent
exactly; weeks straddle month, quarter and year boundaries so they are
not listed there.

    year    -> quarter, month, day
    quarter -> month, day           (merges into year)
    month   -> day                  (merges into quarter)
    week    -> day                  (merges into month)
    day     -> hour                 (merges into week)
    hour    -> minute               (merges into day)
    minute  -> second               (merges into hour)
    second  -> (none)               (merges into minute)

For a month-by-week grid, divide a custom period spanning the month by
"week"; the first and last weeks then extend past the month bounds.
"""

from timeperiods.adapters.adapterbase import UNIT_STEPS
from timeperiods.units.unitmodel import Unit, UnitDefinition


def _adapter_build(unit: Unit):
    """Build function bracketing an instant with the adapter's unit bounds."""
    key = unit.value

    def build(instant, adapter, week_starts_on=1):
        return (
            adapter.start_of(instant, key, week_starts_on),
            adapter.end_of(instant, key, week_starts_on),
        )

    build.__name__ = f"build_{key}"
    return build


def _builtin(unit: Unit, divisible_into, merges_into=None) -> UnitDefinition:
    return UnitDefinition(
        build=_adapter_build(unit),
        divisible_into=divisible_into,
        merges_into=merges_into,
        step=UNIT_STEPS[unit.value],
    )


BUILTIN_DEFINITIONS = {
    Unit.YEAR: _builtin(Unit.YEAR, [Unit.QUARTER, Unit.MONTH, Unit.DAY]),
    Unit.QUARTER: _builtin(Unit.QUARTER, [Unit.MONTH, Unit.DAY], Unit.YEAR),
    Unit.MONTH: _builtin(Unit.MONTH, [Unit.DAY], Unit.QUARTER),
    Unit.WEEK: _builtin(Unit.WEEK, [Unit.DAY], Unit.MONTH),
    Unit.DAY: _builtin(Unit.DAY, [Unit.HOUR], Unit.WEEK),
    Unit.HOUR: _builtin(Unit.HOUR, [Unit.MINUTE], Unit.DAY),
    Unit.MINUTE: _builtin(Unit.MINUTE, [Unit.SECOND], Unit.HOUR),
    Unit.SECOND: _builtin(Unit.SECOND, [], Unit.MINUTE),
}


__all__ = [
    "BUILTIN_DEFINITIONS",
]
