"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available. They run quickly (<1 second) and are suitable for CI/CD.

Run with: pytest tests/test_smoke.py
"""

import pytest
from datetime import datetime


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from timeperiods import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import timeperiods
        assert timeperiods is not None

    def test_all_exports_resolve(self):
        """Every name in __all__ is an attribute of the package"""
        import timeperiods

        for name in timeperiods.__all__:
            assert hasattr(timeperiods, name), name


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_period_functions(self):
        from timeperiods import (
            to_period, create_period, create_custom_period,
            divide, split, split_at, merge,
            go, next_period, previous_period,
            zoom_in, zoom_out, zoom_to,
        )
        assert callable(to_period)
        assert callable(divide)
        assert callable(go)

    def test_predicates(self):
        from timeperiods import is_same, contains, is_weekend, is_weekday, is_today
        assert callable(is_same)
        assert callable(contains)

    def test_subpackages(self):
        from timeperiods.adapters import NativeAdapter, PandasAdapter
        from timeperiods.units import UnitRegistry, anchored_unit
        from timeperiods.period import Period
        from timeperiods.temporal import Temporal
        assert NativeAdapter and PandasAdapter and UnitRegistry and anchored_unit
        assert Period and Temporal


class TestQuickStart:
    """Test the README quick start end to end"""

    def test_quick_start(self, temporal):
        from timeperiods import divide, go, merge, to_period, Unit

        february = to_period(temporal, datetime(2024, 2, 15), "month")
        days = divide(temporal, february, "day")

        assert len(days) == 29
        assert merge(temporal, days).unit is Unit.MONTH
        assert go(temporal, february, 13).start == datetime(2025, 3, 1)
