"""Unit Registry
-------------

Maps unit names to UnitDefinition objects. Registration is a startup-time
activity: entries are never replaced or removed once defined.

A process-wide ``default_registry`` comes pre-loaded with the eight
built-in units and backs the module-level helpers (define_unit,
get_unit_definition, has_unit, registered_units). Tests and applications
that want isolation create their own with ``UnitRegistry.with_builtins()``
and hand it to create_temporal(registry=...).
"""

import logging
from typing import Dict, Iterator, List, Optional

from timeperiods.errors import DuplicateUnitError, UnknownUnitError
from timeperiods.units.unitbuiltins import BUILTIN_DEFINITIONS
from timeperiods.units.unitmodel import Unit, UnitDefinition, UnitTag, unit_key

logger = logging.getLogger(__name__)


class UnitRegistry:
    """
    Registry of unit definitions keyed by unit name.

    Examples:
        >>> registry = UnitRegistry.with_builtins()
        >>> registry.has("month")
        True
        >>> registry.define("sprint", anchored_unit(datetime(2024, 1, 1), {"weeks": 2}))
        >>> "sprint" in registry
        True
    """

    def __init__(self):
        self._definitions: Dict[str, UnitDefinition] = {}

    @classmethod
    def with_builtins(cls) -> "UnitRegistry":
        """New registry holding only the built-in units."""
        registry = cls()
        for unit, definition in BUILTIN_DEFINITIONS.items():
            registry.define(unit, definition)
        return registry

    def define(self, name: UnitTag, definition: UnitDefinition) -> None:
        """
        Register a unit definition.

        Args:
            name: Unit name (must not be "custom" or already registered)
            definition: UnitDefinition for the unit

        Raises:
            DuplicateUnitError: If name is taken or reserved
            TypeError: If definition is not a UnitDefinition
        """
        key = unit_key(name)
        if key == Unit.CUSTOM.value or key in self._definitions:
            raise DuplicateUnitError(key)
        if not isinstance(definition, UnitDefinition):
            raise TypeError(f"definition for '{key}' must be a UnitDefinition, got {type(definition).__name__}")

        self._definitions[key] = definition
        logger.debug(f"Registered unit '{key}'")

    def get(self, name: UnitTag) -> Optional[UnitDefinition]:
        """Definition for name, or None if not registered."""
        return self._definitions.get(unit_key(name))

    def require(self, name: UnitTag) -> UnitDefinition:
        """
        Definition for name.

        Raises:
            UnknownUnitError: If name is not registered
        """
        definition = self.get(name)
        if definition is None:
            raise UnknownUnitError(unit_key(name))
        return definition

    def has(self, name: UnitTag) -> bool:
        return unit_key(name) in self._definitions

    def names(self) -> List[str]:
        """Registered unit names in registration order."""
        return list(self._definitions)

    def __contains__(self, name) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"UnitRegistry({self.names()})"


default_registry = UnitRegistry.with_builtins()


# ============================================================================
# Module-level helpers (default registry unless one is passed)
# ============================================================================

def _registry_or_default(registry: Optional[UnitRegistry]) -> UnitRegistry:
    # An empty registry is falsy, so compare against None
    return default_registry if registry is None else registry


def define_unit(name: UnitTag, definition: UnitDefinition, *, registry: Optional[UnitRegistry] = None) -> None:
    """
    Register a unit so periods of that unit can be built, divided and merged.

    Examples:
        >>> define_unit("sprint", anchored_unit(datetime(2024, 1, 1), {"weeks": 2}, divisible_into=["day"]))
        >>> has_unit("sprint")
        True
    """
    _registry_or_default(registry).define(name, definition)


def get_unit_definition(name: UnitTag, *, registry: Optional[UnitRegistry] = None) -> Optional[UnitDefinition]:
    """Definition for name, or None if it is not registered."""
    return _registry_or_default(registry).get(name)


def has_unit(name: UnitTag, *, registry: Optional[UnitRegistry] = None) -> bool:
    """True if name is registered."""
    return _registry_or_default(registry).has(name)


def registered_units(*, registry: Optional[UnitRegistry] = None) -> List[str]:
    """All registered unit names."""
    return _registry_or_default(registry).names()


__all__ = [
    "UnitRegistry",
    "default_registry",
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "registered_units",
]
