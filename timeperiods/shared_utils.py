"""
Shared Utility Functions
------------------------

Small helpers used across the adapters, units and period modules.

Functions:
  - check_week_starts_on: Validate a 0..6 week start (0 = Sunday)
  - default_week_starts_on: Week start from TIMEPERIODS_WEEK_STARTS_ON or 1
  - day_of_week: Weekday number in the 0 = Sunday .. 6 = Saturday convention
  - midpoint: Instant halfway between two instants
  - to_instant: Coerce date, str or datetime to a datetime instant
"""

import os
from datetime import date, datetime

try:
    from dateutil import parser as dateutil_parser
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

WEEK_STARTS_ON_ENV = "TIMEPERIODS_WEEK_STARTS_ON"

# Monday
DEFAULT_WEEK_STARTS_ON = 1


def check_week_starts_on(value) -> int:
    """
    Validate a week start day.

    Args:
        value: Day number, 0 = Sunday, 1 = Monday ... 6 = Saturday

    Returns:
        The value as int

    Raises:
        ValueError: If value is not an integer in 0..6

    Examples:
        >>> check_week_starts_on(0)
        0

        >>> check_week_starts_on("1")
        1
    """
    try:
        day = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"week_starts_on must be an integer 0..6, got {value!r}") from e

    if day < 0 or day > 6:
        raise ValueError(f"week_starts_on must be an integer 0..6, got {value!r}")

    return day


def default_week_starts_on() -> int:
    """Week start taken from the TIMEPERIODS_WEEK_STARTS_ON environment variable, else Monday."""
    env_value = os.environ.get(WEEK_STARTS_ON_ENV)
    if env_value is None or not env_value.strip():
        return DEFAULT_WEEK_STARTS_ON
    return check_week_starts_on(env_value.strip())


def day_of_week(instant: datetime) -> int:
    """
    Weekday number with Sunday as 0.

    Examples:
        >>> day_of_week(datetime(2024, 6, 10))  # Monday
        1

        >>> day_of_week(datetime(2024, 6, 16))  # Sunday
        0
    """
    return (instant.weekday() + 1) % 7


def midpoint(start: datetime, end: datetime) -> datetime:
    """
    Instant halfway between start and end.

    Uses timedelta arithmetic so the result keeps the type of ``start``
    (datetime or pandas.Timestamp).

    Examples:
        >>> midpoint(datetime(2024, 1, 1), datetime(2024, 1, 3))
        datetime.datetime(2024, 1, 2, 0, 0)
    """
    return start + (end - start) / 2


def to_instant(value) -> datetime:
    """
    Coerce a date-ish value to a datetime instant.

    Accepts:
      - datetime (and subclasses such as pandas.Timestamp): returned as-is
      - date: midnight of that day
      - str: parsed with dateutil ("2024-02-15", "15 Feb 2024 14:30", ...)

    Args:
        value: Date-ish value

    Returns:
        datetime instant

    Raises:
        ValueError: If a string cannot be parsed
        TypeError: If value is of an unsupported type

    Examples:
        >>> to_instant("2024-02-15")
        datetime.datetime(2024, 2, 15, 0, 0)

        >>> to_instant(date(2024, 2, 15))
        datetime.datetime(2024, 2, 15, 0, 0)
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Cannot parse an empty string as an instant")
        try:
            return dateutil_parser.parse(text)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Cannot parse {value!r} as an instant") from e

    raise TypeError(f"Expected datetime, date or str, got {type(value).__name__}")
