"""
Tests for mission planning heuristics.
"""

from datetime import timedelta

import pytest

from astromind.advisory.mission_planner import (
    MISSION_OBJECTIVES,
    RiskLevel,
    generate_mission_plan,
    grade_risk,
    predict_fuel_usage,
)
from astromind.core.telemetry import Vec3
from conftest import FIXED_TIME


class TestPredictFuelUsage:
    def test_speed_and_health_terms(self, telemetry_factory):
        telemetry = telemetry_factory(velocity=Vec3(300.0, 400.0, 0.0), system_health=100.0)
        assert predict_fuel_usage(telemetry, 10.0) == pytest.approx(6.0)

    def test_poor_health_inflates_usage(self, telemetry_factory):
        telemetry = telemetry_factory(velocity=Vec3(300.0, 400.0, 0.0), system_health=50.0)
        assert predict_fuel_usage(telemetry, 10.0) == pytest.approx(9.0)

    def test_zero_duration(self, nominal_telemetry):
        assert predict_fuel_usage(nominal_telemetry, 0.0) == 0.0


class TestGradeRisk:
    @pytest.mark.parametrize(
        "required, available, expected",
        [
            (81.0, 100.0, RiskLevel.HIGH),
            (80.0, 100.0, RiskLevel.MEDIUM),
            (61.0, 100.0, RiskLevel.MEDIUM),
            (60.0, 100.0, RiskLevel.LOW),
            (0.0, 0.0, RiskLevel.LOW),
        ],
    )
    def test_thresholds(self, required, available, expected):
        assert grade_risk(required, available) is expected


class TestGenerateMissionPlan:
    def test_direct_plan(self, nominal_telemetry):
        plan = generate_mission_plan((0, 0, 0), (30000, 0, 0), nominal_telemetry, now=FIXED_TIME)

        assert plan.name == "Navigation to Target 30000, 0"
        assert plan.id == f"mission-{int(FIXED_TIME.timestamp() * 1000)}"
        assert plan.duration == pytest.approx(3.0)
        assert plan.fuel_requirement == pytest.approx(0.1 * 3.0 * (2 - 0.94))
        assert plan.risk_level is RiskLevel.LOW
        assert plan.objectives == MISSION_OBJECTIVES

    def test_launch_window(self, nominal_telemetry):
        plan = generate_mission_plan((0, 0, 0), (100, 0, 0), nominal_telemetry, now=FIXED_TIME)
        window = plan.launch_window
        assert window.start == FIXED_TIME
        assert window.end == FIXED_TIME + timedelta(hours=24)
        assert window.optimal == FIXED_TIME + timedelta(hours=2)

    def test_trajectory_endpoints(self, nominal_telemetry):
        plan = generate_mission_plan(
            Vec3(100.0, 200.0, 0.0), (400.0, 600.0, 0.0), nominal_telemetry, now=FIXED_TIME
        )
        first, last = plan.trajectory
        assert (first.x, first.y, first.g) == (100.0, 200.0, 0.0)
        assert (last.x, last.y) == (400.0, 600.0)
        assert last.g == pytest.approx(500.0)
        assert last.f == last.g

    def test_three_dimensional_distance(self, nominal_telemetry):
        plan = generate_mission_plan((0, 0, 0), (0, 0, 20000), nominal_telemetry, now=FIXED_TIME)
        assert plan.duration == pytest.approx(2.0)

    @pytest.mark.parametrize(
        "fuel, expected",
        [(0.3, RiskLevel.HIGH), (0.45, RiskLevel.MEDIUM), (85.0, RiskLevel.LOW)],
    )
    def test_risk_follows_available_fuel(self, telemetry_factory, fuel, expected):
        telemetry = telemetry_factory(fuel=fuel)
        plan = generate_mission_plan((0, 0, 0), (30000, 0, 0), telemetry, now=FIXED_TIME)
        assert plan.risk_level is expected
