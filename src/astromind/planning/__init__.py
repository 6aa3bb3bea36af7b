"""
Route planning: obstacle geometry, A* search and asteroid fields.
"""

from .astar import AStarPathfinder, PathNode, Route, find_path
from .asteroid_field import AsteroidField, generate_asteroid_field
from .geometry import (
    CollisionChecker,
    Obstacle,
    Point2D,
    ResourceProfile,
    SearchBounds,
    distance,
    is_collision,
    path_length,
)

__all__ = [
    "AStarPathfinder",
    "PathNode",
    "Route",
    "find_path",
    "AsteroidField",
    "generate_asteroid_field",
    "CollisionChecker",
    "Obstacle",
    "Point2D",
    "ResourceProfile",
    "SearchBounds",
    "distance",
    "is_collision",
    "path_length",
]
