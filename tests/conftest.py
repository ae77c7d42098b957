"""Shared test fixtures and utilities for timeperiods tests."""

import pytest
from datetime import datetime

from timeperiods import (
    NativeAdapter,
    PandasAdapter,
    UnitRegistry,
    anchored_unit,
    create_temporal,
)


# Saturday morning, the reference "now" for every fixture temporal
FIXED_NOW = datetime(2024, 6, 15, 9, 30)


def assert_partition(temporal, periods, start, end):
    """Assert periods are ascending, contiguous and cover exactly [start, end].

    Example:
        assert_partition(temporal, divide(temporal, month, "day"), month.start, month.end)
    """
    assert periods, "expected at least one period"
    assert periods[0].start == start
    assert periods[-1].end == end
    for prev, nxt in zip(periods, periods[1:]):
        assert nxt.start - prev.end == temporal.adapter.resolution


@pytest.fixture
def registry():
    """Fresh registry with only the built-in units.

    Tests that register units use this so nothing leaks into the
    process-wide default registry.
    """
    return UnitRegistry.with_builtins()


@pytest.fixture
def temporal(registry):
    """Native-adapter temporal, Monday week start, browsing 2024-06-15."""
    return create_temporal(
        datetime(2024, 6, 15),
        NativeAdapter(),
        now=FIXED_NOW,
        week_starts_on=1,
        registry=registry,
    )


@pytest.fixture
def sunday_temporal(registry):
    """Native-adapter temporal with Sunday week start."""
    return create_temporal(
        datetime(2024, 6, 15),
        NativeAdapter(week_starts_on=0),
        now=FIXED_NOW,
        week_starts_on=0,
        registry=registry,
    )


@pytest.fixture
def pandas_temporal(registry):
    """Pandas-adapter temporal, Monday week start."""
    return create_temporal(
        datetime(2024, 6, 15),
        PandasAdapter(),
        now=FIXED_NOW,
        week_starts_on=1,
        registry=registry,
    )


@pytest.fixture
def sprint_temporal(temporal):
    """Temporal whose registry also knows two-week sprints from 2024-01-01."""
    temporal.registry.define(
        "sprint",
        anchored_unit(datetime(2024, 1, 1), {"weeks": 2}, divisible_into=["week", "day"]),
    )
    return temporal


@pytest.fixture
def check_partition():
    """The assert_partition helper, as a fixture."""
    return assert_partition
