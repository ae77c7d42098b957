"""Load anchored unit definitions from YAML.

File format:

    units:
      sprint:
        anchor: 2024-01-01
        length: {weeks: 2}
        divisible_into: [week, day]
      fiscal_year:
        anchor: 2023-04-01
        length: {years: 1}
        divisible_into: [quarter, month]

Loading priority:
  1. Explicit path if provided
  2. TIMEPERIODS_UNITS_PATH environment variable
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

try:
    import yaml
except ImportError as e:
    raise ImportError("PyYAML not installed. pip install pyyaml") from e

from timeperiods.shared_utils import to_instant
from timeperiods.units.unitanchored import anchored_unit
from timeperiods.units.unitregistry import UnitRegistry, default_registry

logger = logging.getLogger(__name__)

UNITS_PATH_ENV = "TIMEPERIODS_UNITS_PATH"


def _find_config(path: Optional[Union[str, Path]]) -> Path:
    """Resolve the config file location, explicit path first."""
    if path is not None:
        path = Path(path)
        if path.exists():
            return path

    env_path = os.environ.get(UNITS_PATH_ENV)
    if path is None and env_path:
        env_path = Path(env_path)
        if env_path.exists():
            return env_path

    searched = [
        f"  - Explicit path: {path if path is not None else 'Not provided'}",
        f"  - Environment variable {UNITS_PATH_ENV}: {env_path or 'Not set'}",
    ]
    raise FileNotFoundError("Unit config file not found. Searched:\n" + "\n".join(searched))


def _parse_entry(name: str, entry: dict):
    if not isinstance(entry, dict):
        raise ValueError(f"Unit '{name}': expected a mapping, got {type(entry).__name__}")

    missing = [key for key in ("anchor", "length") if key not in entry]
    if missing:
        raise ValueError(f"Unit '{name}': missing required keys {missing}")

    length = entry["length"]
    if not isinstance(length, dict):
        raise ValueError(f"Unit '{name}': length must be a mapping such as {{weeks: 2}}")

    return anchored_unit(
        to_instant(entry["anchor"]),
        length,
        divisible_into=entry.get("divisible_into") or (),
        merges_into=entry.get("merges_into"),
    )


def load_unit_config(
    path: Optional[Union[str, Path]] = None,
    *,
    registry: Optional[UnitRegistry] = None,
) -> List[str]:
    """
    Register the anchored units declared in a YAML file.

    All entries are parsed before any is registered, so a malformed file
    leaves the registry untouched.

    Args:
        path: YAML file path (default: TIMEPERIODS_UNITS_PATH)
        registry: Target registry (default: the process-wide registry)

    Returns:
        Names of the registered units, in file order

    Raises:
        FileNotFoundError: If no config file can be located
        ValueError: If the file content is malformed
        DuplicateUnitError: If a unit name is already registered

    Examples:
        >>> load_unit_config("units.yaml", registry=registry)
        ['sprint', 'fiscal_year']
    """
    config_path = _find_config(path)
    target = default_registry if registry is None else registry

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    units = data.get("units") if isinstance(data, dict) else None
    if not isinstance(units, dict):
        raise ValueError(f"{config_path}: expected a top-level 'units' mapping")

    definitions = [(str(name), _parse_entry(str(name), entry)) for name, entry in units.items()]
    for name, definition in definitions:
        target.define(name, definition)

    names = [name for name, _ in definitions]
    logger.info(f"Loaded {len(names)} units from {config_path}")
    return names


__all__ = [
    "UNITS_PATH_ENV",
    "load_unit_config",
]
