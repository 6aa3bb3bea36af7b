"""
Asteroid Field Generation

Builds a seeded random field of circular asteroids for the route
planner, together with the rectangle that bounds the search.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from astromind.config.models import FieldParams

from .geometry import Obstacle, Point2D, ResourceProfile, SearchBounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsteroidField:
    """A fixed set of asteroids inside a rectangular region."""

    id: str
    asteroids: Tuple[Obstacle, ...]
    bounds: SearchBounds
    edge_margin: float = 50.0

    def __len__(self) -> int:
        return len(self.asteroids)

    def default_start_goal(self) -> Tuple[Point2D, Point2D]:
        """Opposite corners of the field, inset by the edge margin."""
        return (
            Point2D(self.bounds.min_x + self.edge_margin, self.bounds.min_y + self.edge_margin),
            Point2D(self.bounds.max_x - self.edge_margin, self.bounds.max_y - self.edge_margin),
        )

    def richest(self, resource: str = "platinum") -> Optional[Obstacle]:
        """Asteroid with the highest content of ``resource``."""
        if not self.asteroids:
            return None
        return max(self.asteroids, key=lambda a: getattr(a.resources, resource))


def generate_asteroid_field(
    params: Optional[FieldParams] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    field_id: str = "field-0",
) -> AsteroidField:
    """
    Generate a random asteroid field.

    Centers are uniform inside the field inset by ``edge_margin``, radii
    uniform in [min_radius, max_radius] and each resource percentage
    uniform in [0, 100].

    Args:
        params: Field geometry (defaults to FieldParams())
        rng: Random generator; takes precedence over ``seed``
        seed: Seed for a fresh generator when ``rng`` is None
        field_id: Identifier of the generated field

    Returns:
        AsteroidField bounded by (0, width) x (0, height)
    """
    params = params or FieldParams()
    rng = rng if rng is not None else np.random.default_rng(seed)

    span_x = params.width - 2 * params.edge_margin
    span_y = params.height - 2 * params.edge_margin
    radius_span = params.max_radius - params.min_radius

    asteroids = []
    for i in range(params.asteroid_count):
        position = Point2D(
            rng.random() * span_x + params.edge_margin,
            rng.random() * span_y + params.edge_margin,
        )
        radius = rng.random() * radius_span + params.min_radius
        resources = ResourceProfile(*(rng.random() * 100.0 for _ in range(4)))
        asteroids.append(
            Obstacle(id=f"asteroid-{i}", position=position, radius=radius, resources=resources)
        )

    logger.debug("Generated %d asteroids for %s", len(asteroids), field_id)
    return AsteroidField(
        id=field_id,
        asteroids=tuple(asteroids),
        bounds=SearchBounds(0.0, params.width, 0.0, params.height),
        edge_margin=params.edge_margin,
    )
