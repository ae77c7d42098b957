"""Unit registry and unit definitions.

Public API:
    Unit
        Enum of built-in unit tags (year ... second, custom)

    UnitDefinition(build, divisible_into, merges_into, step)
        How to build, divide, merge and step one unit

    UnitRegistry
        Name -> UnitDefinition mapping; UnitRegistry.with_builtins()

    define_unit / get_unit_definition / has_unit / registered_units
        Helpers over the process-wide default registry

    anchored_unit(anchor, length, divisible_into=(), merges_into=None)
        Definition for repeating spans (sprints, fiscal years)

    load_unit_config(path=None, registry=None)
        Register anchored units declared in a YAML file

Examples:
    >>> from timeperiods.units import anchored_unit, define_unit, has_unit
    >>> define_unit("sprint", anchored_unit(datetime(2024, 1, 1), {"weeks": 2}, divisible_into=["day"]))
    >>> has_unit("sprint")
    True
"""

from timeperiods.units.unitanchored import anchored_unit
from timeperiods.units.unitconfig import load_unit_config
from timeperiods.units.unitmodel import (
    BUILTIN_UNITS,
    Unit,
    UnitDefinition,
    UnitTag,
    unit_key,
    unit_tag,
)
from timeperiods.units.unitregistry import (
    UnitRegistry,
    default_registry,
    define_unit,
    get_unit_definition,
    has_unit,
    registered_units,
)

__all__ = [
    "BUILTIN_UNITS",
    "Unit",
    "UnitDefinition",
    "UnitTag",
    "UnitRegistry",
    "anchored_unit",
    "default_registry",
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "load_unit_config",
    "registered_units",
    "unit_key",
    "unit_tag",
]
