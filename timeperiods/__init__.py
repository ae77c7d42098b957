"""timeperiods - Time-period calculus over pluggable date adapters

Represent spans of time as immutable, unit-tagged Period values and
navigate or subdivide them without touching raw date math.

Usage:
    from datetime import datetime
    from timeperiods import NativeAdapter, create_temporal, to_period, divide, merge, go

    temporal = create_temporal(datetime(2024, 2, 15), NativeAdapter())

    # Bracket an instant with a unit
    february = to_period(temporal, datetime(2024, 2, 15), "month")

    # Take it apart and put it back together
    days = divide(temporal, february, "day")   # 29 day periods
    merge(temporal, days).unit                 # Unit.MONTH

    # Navigate
    go(temporal, february, 13)                 # March 2025

    # Register domain units
    define_unit("sprint", anchored_unit(datetime(2024, 1, 1), {"weeks": 2}, divisible_into=["day"]))
"""

__version__ = "0.1.0"

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    DivisionNotSupportedError,
    DuplicateUnitError,
    MissingAdapterError,
    TimePeriodsError,
    UnknownUnitError,
)

# ============================================================================
# Date Adapters
# ============================================================================

from .adapters import (
    DateAdapter,      # Abstract backend contract
    NativeAdapter,    # datetime + dateutil
    PandasAdapter,    # pandas Timestamp
    to_duration,      # Normalize duration values
)

# ============================================================================
# Unit Registry
# ============================================================================

from .units import (
    Unit,                  # Built-in unit tags
    UnitDefinition,        # build / divisible_into / merges_into / step
    UnitRegistry,          # Injectable registry
    anchored_unit,         # Sprints, fiscal years, semesters
    default_registry,      # Process-wide registry
    define_unit,
    get_unit_definition,
    has_unit,
    load_unit_config,      # Register units from YAML
    registered_units,
)

# ============================================================================
# Periods
# ============================================================================

from .period import (
    Period,
    # Factory
    to_period,
    create_period,
    create_custom_period,
    # Algebra
    divide,
    split,
    split_at,
    merge,
    # Navigation
    go,
    next_period,
    previous_period,
    zoom_in,
    zoom_out,
    zoom_to,
    # Predicates
    is_same,
    contains,
    is_weekend,
    is_weekday,
    is_today,
    # Display
    period_number,
    period_label,
    format_period_display,
)

# ============================================================================
# Temporal Container
# ============================================================================

from .temporal import (
    ObservableCell,
    Temporal,
    create_temporal,
)

__all__ = [
    "__version__",
    # Errors
    "TimePeriodsError",
    "MissingAdapterError",
    "UnknownUnitError",
    "DivisionNotSupportedError",
    "DuplicateUnitError",
    # Adapters
    "DateAdapter",
    "NativeAdapter",
    "PandasAdapter",
    "to_duration",
    # Units
    "Unit",
    "UnitDefinition",
    "UnitRegistry",
    "anchored_unit",
    "default_registry",
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "load_unit_config",
    "registered_units",
    # Periods
    "Period",
    "to_period",
    "create_period",
    "create_custom_period",
    "divide",
    "split",
    "split_at",
    "merge",
    "go",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
    "is_same",
    "contains",
    "is_weekend",
    "is_weekday",
    "is_today",
    "period_number",
    "period_label",
    "format_period_display",
    # Temporal
    "ObservableCell",
    "Temporal",
    "create_temporal",
]
