"""Exception taxonomy for timeperiods.

All errors raised on purpose by the library derive from TimePeriodsError and
also from the builtin exception a caller would naturally catch, so both
``except TimePeriodsError`` and ``except ValueError`` keep working.

  - MissingAdapterError: Temporal constructed without a date adapter
  - UnknownUnitError: a unit name that is not registered
  - DivisionNotSupportedError: invalid divide/split target or options
  - DuplicateUnitError: unit registry name collision
"""

from typing import Optional


class TimePeriodsError(Exception):
    """Base class for timeperiods errors."""


class MissingAdapterError(TimePeriodsError, ValueError):
    """Raised when a Temporal is created without a date adapter."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "A date adapter is required. Pass adapter=NativeAdapter() or another DateAdapter."
        )


class UnknownUnitError(TimePeriodsError, KeyError):
    """Raised when a unit name is not present in the unit registry."""

    def __init__(self, unit: str, message: Optional[str] = None):
        self.unit = unit
        super().__init__(message or f"Unknown unit '{unit}'. Register it with define_unit() first.")

    def __str__(self) -> str:
        # KeyError quotes its argument; show the plain message instead
        return str(self.args[0])


class DivisionNotSupportedError(TimePeriodsError, ValueError):
    """Raised when a period cannot be divided or split as requested."""

    def __init__(self, unit: Optional[str], message: Optional[str] = None, target: Optional[str] = None):
        self.unit = unit
        self.target = target
        super().__init__(message or f"Cannot divide a '{unit}' period by '{target}'")


class DuplicateUnitError(TimePeriodsError, ValueError):
    """Raised when a unit name is registered twice."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unit '{unit}' is already defined")


__all__ = [
    "TimePeriodsError",
    "MissingAdapterError",
    "UnknownUnitError",
    "DivisionNotSupportedError",
    "DuplicateUnitError",
]
