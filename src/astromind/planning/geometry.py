"""
Geometry and Collision Primitives

Circle obstacles in a 2D simulation plane (kilometers) and the
point-in-obstacle test used by the route planner. An obstacle blocks a
point when the point is strictly closer to its center than
``radius + safety_margin``.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from astromind.core.exceptions import InvalidObstacleError, ParameterValidationError


def _require_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ParameterValidationError(name, value, "must be a number") from e
    if not math.isfinite(value):
        raise ParameterValidationError(name, value, "must be finite")
    return value


@dataclass(frozen=True)
class Point2D:
    """Plain coordinate in simulation-space units (km)."""

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", _require_finite("x", self.x))
        object.__setattr__(self, "y", _require_finite("y", self.y))

    def distance_to(self, other: "Point2D") -> float:
        return distance(self, other)

    def as_tuple(self):
        return (self.x, self.y)


def distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points."""
    dx = b.x - a.x
    dy = b.y - a.y
    return math.sqrt(dx * dx + dy * dy)


def as_point(value, name: str = "point") -> Point2D:
    """Coerce a Point2D or an (x, y) pair into a Point2D."""
    if isinstance(value, Point2D):
        return value
    if isinstance(value, (str, bytes)):
        raise ParameterValidationError(name, value, "expected an (x, y) pair")
    try:
        x, y = value
    except (TypeError, ValueError) as e:
        raise ParameterValidationError(name, value, "expected an (x, y) pair") from e
    try:
        return Point2D(x, y)
    except ParameterValidationError as e:
        raise ParameterValidationError(name, value, e.reason) from e


@dataclass(frozen=True)
class ResourceProfile:
    """Mineral content of an asteroid, each value a percentage in [0, 100]."""

    platinum: float = 0.0
    gold: float = 0.0
    water: float = 0.0
    rare_earth: float = 0.0

    def __post_init__(self):
        for name in ("platinum", "gold", "water", "rare_earth"):
            value = _require_finite(name, getattr(self, name))
            if not (0.0 <= value <= 100.0):
                raise ParameterValidationError(name, value, "must be within [0, 100]")
            object.__setattr__(self, name, value)


@dataclass(frozen=True)
class Obstacle:
    """A circular no-go region (an asteroid)."""

    id: str
    position: Point2D
    radius: float
    resources: ResourceProfile = field(default_factory=ResourceProfile)

    def __post_init__(self):
        try:
            object.__setattr__(self, "position", as_point(self.position, "position"))
        except ParameterValidationError as e:
            raise InvalidObstacleError(self.id, "position", self.position, e.reason) from e
        try:
            radius = float(self.radius)
        except (TypeError, ValueError) as e:
            raise InvalidObstacleError(self.id, "radius", self.radius, "must be a number") from e
        if not math.isfinite(radius) or radius <= 0:
            raise InvalidObstacleError(self.id, "radius", radius, "must be a positive finite number")
        object.__setattr__(self, "radius", radius)

    def blocks(self, point: Point2D, safety_margin: float = 0.0) -> bool:
        """True if ``point`` lies strictly inside radius + safety_margin."""
        return distance(point, self.position) < self.radius + safety_margin


@dataclass(frozen=True)
class SearchBounds:
    """Axis-aligned rectangle limiting where lattice cells may be placed."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        for name in ("min_x", "max_x", "min_y", "max_y"):
            object.__setattr__(self, name, _require_finite(name, getattr(self, name)))
        if self.min_x > self.max_x:
            raise ParameterValidationError("bounds", self, "min_x must be <= max_x")
        if self.min_y > self.max_y:
            raise ParameterValidationError("bounds", self, "min_y must be <= max_y")

    def contains(self, point: Point2D) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


class CollisionChecker:
    """
    Vectorized point-in-obstacle test against a fixed obstacle set.

    Obstacle centers and inflated radii are cached in numpy arrays once,
    so each query is a single vector operation.
    """

    def __init__(self, obstacles: Sequence[Obstacle], safety_margin: float = 0.0):
        margin = _require_finite("safety_margin", safety_margin)
        if margin < 0:
            raise ParameterValidationError("safety_margin", margin, "must be non-negative")
        self.safety_margin = margin
        self.obstacles = tuple(obstacles)
        if self.obstacles:
            self._centers = np.array(
                [[o.position.x, o.position.y] for o in self.obstacles], dtype=float
            )
            self._limits = np.array([o.radius for o in self.obstacles], dtype=float) + margin
        else:
            self._centers = np.empty((0, 2), dtype=float)
            self._limits = np.empty(0, dtype=float)

    def __len__(self) -> int:
        return len(self.obstacles)

    def is_collision(self, x: float, y: float) -> bool:
        """True if (x, y) is closer than radius + margin to any obstacle center."""
        if not self.obstacles:
            return False
        dx = self._centers[:, 0] - x
        dy = self._centers[:, 1] - y
        dists = np.sqrt(dx * dx + dy * dy)
        return bool(np.any(dists < self._limits))

    def clearance(self, point: Point2D) -> float:
        """
        Smallest distance from ``point`` to any inflated obstacle boundary.

        Negative inside an obstacle; +inf with no obstacles.
        """
        if not self.obstacles:
            return math.inf
        dx = self._centers[:, 0] - point.x
        dy = self._centers[:, 1] - point.y
        dists = np.sqrt(dx * dx + dy * dy)
        return float(np.min(dists - self._limits))


def is_collision(
    point: Point2D, obstacles: Iterable[Obstacle], safety_margin: float = 0.0
) -> bool:
    """True if ``point`` lies inside any obstacle inflated by ``safety_margin``."""
    return any(obstacle.blocks(point, safety_margin) for obstacle in obstacles)


def path_length(points: Sequence[Point2D]) -> float:
    """Total polyline length of a point sequence."""
    return float(sum(distance(a, b) for a, b in zip(points, points[1:])))
