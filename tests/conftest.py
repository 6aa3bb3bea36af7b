"""
Pytest configuration and shared fixtures.

This file provides common fixtures and configuration for all tests.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import pytest

# Add src/ to path so tests run without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from astromind.config.mission_config import MissionConfig  # noqa: E402
from astromind.core.telemetry import Telemetry, TelemetryStatus, Vec3  # noqa: E402
from astromind.planning.geometry import Obstacle, Point2D  # noqa: E402

FIXED_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def mission_config():
    """Provide a fresh, seeded MissionConfig."""
    return MissionConfig.create_default(seed=1234)


@pytest.fixture
def rng():
    """Provide a seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    return lambda: FIXED_TIME


# ============================================================================
# Telemetry Fixtures
# ============================================================================


def make_telemetry(**overrides) -> Telemetry:
    """Nominal telemetry at FIXED_TIME with field overrides."""
    values = dict(
        position=Vec3(0.0, 0.0, 0.0),
        velocity=Vec3(0.0, 0.0, 0.0),
        fuel=85.0,
        temperature=23.0,
        radiation=150.0,
        battery_level=87.0,
        system_health=94.0,
        status=TelemetryStatus.ACTIVE,
        last_update=FIXED_TIME,
    )
    values.update(overrides)
    return Telemetry(**values)


@pytest.fixture
def telemetry_factory():
    """Provide a factory for telemetry records with field overrides."""
    return make_telemetry


@pytest.fixture
def nominal_telemetry():
    """Provide nominal telemetry that triggers no advisories."""
    return make_telemetry()


# ============================================================================
# Planning Fixtures
# ============================================================================


@pytest.fixture
def wall_obstacles():
    """A column of overlapping asteroids across x = 100."""
    return [
        Obstacle(id=f"wall-{i}", position=Point2D(100.0, y), radius=15.0)
        for i, y in enumerate(range(-60, 61, 20))
    ]


# ============================================================================
# Pytest Configuration Hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """Add markers automatically from file names."""
    for item in items:
        if "test_integration_" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "test_property_based" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
