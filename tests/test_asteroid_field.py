"""
Tests for asteroid field generation.
"""

import numpy as np
import pytest
from pydantic import ValidationError

from astromind.config.models import FieldParams
from astromind.planning.asteroid_field import generate_asteroid_field
from astromind.planning.geometry import Point2D


class TestGenerateAsteroidField:
    def test_default_field(self):
        field = generate_asteroid_field(seed=7)

        assert len(field) == 15
        assert field.id == "field-0"
        assert [a.id for a in field.asteroids] == [f"asteroid-{i}" for i in range(15)]
        assert (field.bounds.max_x, field.bounds.max_y) == (800.0, 400.0)

    def test_asteroids_respect_geometry(self):
        params = FieldParams(asteroid_count=200)
        field = generate_asteroid_field(params, seed=11)

        for asteroid in field.asteroids:
            assert 50.0 <= asteroid.position.x <= 750.0
            assert 50.0 <= asteroid.position.y <= 350.0
            assert 10.0 <= asteroid.radius <= 30.0
            for value in vars(asteroid.resources).values():
                assert 0.0 <= value <= 100.0

    def test_seeded_generation_is_reproducible(self):
        first = generate_asteroid_field(seed=99)
        second = generate_asteroid_field(seed=99)
        assert first == second

    def test_rng_takes_precedence_over_seed(self):
        from_rng = generate_asteroid_field(rng=np.random.default_rng(5), seed=1)
        from_seed = generate_asteroid_field(seed=5)
        assert from_rng == from_seed

    def test_empty_field(self):
        field = generate_asteroid_field(FieldParams(asteroid_count=0), seed=0)
        assert len(field) == 0
        assert field.richest() is None

    def test_default_start_goal_inset_corners(self):
        field = generate_asteroid_field(seed=3)
        start, goal = field.default_start_goal()
        assert start == Point2D(50, 50)
        assert goal == Point2D(750, 350)

    def test_richest(self):
        field = generate_asteroid_field(seed=3)
        best = field.richest("water")
        assert best.resources.water == max(a.resources.water for a in field.asteroids)


class TestFieldParams:
    def test_radius_range_must_be_ordered(self):
        with pytest.raises(ValidationError):
            FieldParams(min_radius=40, max_radius=30)

    def test_edge_margin_must_leave_room(self):
        with pytest.raises(ValidationError):
            FieldParams(width=100, height=100, edge_margin=50)
