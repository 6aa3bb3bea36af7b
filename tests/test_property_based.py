"""
Property-based tests using Hypothesis.

These tests verify invariants that should hold for any valid input,
catching edge cases that example-based tests might miss.
"""

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from astromind.advisory.recommendations import RecommendationEngine
from astromind.core.telemetry import TelemetryStatus, classify_status
from astromind.core.telemetry_engine import TelemetryEngine
from astromind.planning.astar import DIRECTIONS, find_path
from astromind.planning.geometry import Obstacle, Point2D, SearchBounds, distance
from conftest import make_telemetry

# Strategies
seeds = st.integers(min_value=0, max_value=2**32 - 1)
percent = st.floats(min_value=0.0, max_value=100.0, allow_nan=False)
obstacle_specs = st.tuples(
    st.floats(min_value=30.0, max_value=170.0),
    st.floats(min_value=-80.0, max_value=80.0),
    st.floats(min_value=5.0, max_value=20.0),
)


class TestTelemetryProperties:
    """Invariants of the telemetry engine."""

    @given(seed=seeds, ticks=st.integers(min_value=1, max_value=200), mission=st.booleans())
    @settings(max_examples=40, deadline=None)
    def test_values_always_within_bounds(self, seed, ticks, mission):
        engine = TelemetryEngine(seed=seed)
        engine.set_mission_active(mission)
        previous_fuel = engine.telemetry.fuel
        for _ in range(ticks):
            t = engine.tick()
            assert 0.0 <= t.fuel <= previous_fuel
            assert -60.0 <= t.temperature <= 100.0
            assert 0.0 <= t.radiation <= 2000.0
            assert 0.0 <= t.battery_level <= 100.0
            assert 0.0 <= t.system_health <= 100.0
            assert abs(t.velocity.x) <= 1000.0
            assert abs(t.velocity.y) <= 1000.0
            assert abs(t.velocity.z) <= 500.0
            previous_fuel = t.fuel

    @given(fuel=st.floats(min_value=0.0, max_value=9.999), health=percent)
    def test_low_fuel_always_critical(self, fuel, health):
        assert classify_status(fuel, health) is TelemetryStatus.CRITICAL

    @given(fuel=percent, health=percent, temperature=st.floats(-60, 100), radiation=st.floats(0, 2000))
    @settings(max_examples=100)
    def test_analysis_idempotent(self, fuel, health, temperature, radiation):
        telemetry = make_telemetry(
            fuel=fuel, system_health=health, temperature=temperature, radiation=radiation
        )
        engine = RecommendationEngine()
        assert engine.analyze(telemetry) == engine.analyze(telemetry)


class TestRouteProperties:
    """Invariants of A* routes."""

    @given(specs=st.lists(obstacle_specs, max_size=8))
    @settings(max_examples=40, deadline=None)
    def test_route_clears_obstacles(self, specs):
        obstacles = [
            Obstacle(id=f"a{i}", position=Point2D(x, y), radius=r)
            for i, (x, y, r) in enumerate(specs)
        ]
        margin = 5.0
        goal = Point2D(200.0, 0.0)
        route = find_path(
            (0.0, 0.0),
            goal,
            obstacles,
            grid_step=10.0,
            safety_margin=margin,
            bounds=SearchBounds(-50.0, 250.0, -150.0, 150.0),
        )

        if not route:
            return
        assert route[0] == Point2D(0.0, 0.0)
        assert distance(route[-1], goal) < 10.0
        assert all(b >= a for a, b in zip(route.costs, route.costs[1:]))
        for point in route:
            for obstacle in obstacles:
                assert distance(point, obstacle.position) >= obstacle.radius + margin

    @given(
        x=st.floats(min_value=-500.0, max_value=500.0),
        y=st.floats(min_value=-500.0, max_value=500.0),
        direction=st.sampled_from(DIRECTIONS),
        length=st.floats(min_value=0.0, max_value=300.0),
    )
    @settings(max_examples=60, deadline=None)
    def test_straight_route_length(self, x, y, direction, length):
        di, dj = direction
        scale = length / math.hypot(di, dj)
        start = Point2D(x, y)
        goal = Point2D(x + di * scale, y + dj * scale)

        route = find_path(start, goal, [], grid_step=10.0, safety_margin=0.0)

        assert route
        assert abs(route.total_length() - distance(start, goal)) <= 10.0 * math.sqrt(2)
