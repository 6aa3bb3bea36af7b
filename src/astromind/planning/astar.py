"""
A* Route Planner over an 8-connected Lattice

Searches a regular lattice anchored at the start point, with
Euclidean edge costs and a straight-line heuristic, for a route that
clears every obstacle by the safety margin.

Search nodes live in an arena (a plain list) and refer to their
predecessor by index. The open set is a binary heap ordered by
``(f, insertion sequence)`` with lazy deletion: a relaxed node is
re-pushed under its original sequence number, so the node expanded next
is always the minimum-f node and ties go to the earliest-inserted one.
Closed cells are never reopened.
"""

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple, Union

from astromind.config.constants import Constants
from astromind.config.models import PathfinderParams
from astromind.core.exceptions import ParameterValidationError

from .geometry import CollisionChecker, Obstacle, Point2D, SearchBounds, as_point, distance

logger = logging.getLogger(__name__)

PointLike = Union[Point2D, Tuple[float, float], Sequence[float]]
Cell = Tuple[int, int]

# N, E, S, W, then the diagonals. Order fixes insertion order and so
# tie-breaking between equal-f nodes.
DIRECTIONS: Tuple[Cell, ...] = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

NO_PARENT = -1


class PathNode:
    """One lattice cell reached by the search."""

    __slots__ = ("x", "y", "cell", "g", "h", "f", "parent", "seq")

    def __init__(self, x: float, y: float, cell: Cell, g: float, h: float, parent: int, seq: int):
        self.x = x
        self.y = y
        self.cell = cell
        self.g = g
        self.h = h
        self.f = g + h
        self.parent = parent
        self.seq = seq

    def position(self) -> Point2D:
        return Point2D(self.x, self.y)


@dataclass(frozen=True)
class Route:
    """
    Ordered points from the start to the node that reached the goal.

    An empty route means no path was found.

    Attributes:
        points: Route points, start first
        costs: Accumulated cost (g) at each point
        expanded: Number of nodes the search expanded
    """

    points: Tuple[Point2D, ...] = ()
    costs: Tuple[float, ...] = ()
    expanded: int = 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __bool__(self) -> bool:
        return bool(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def total_length(self) -> float:
        """Polyline length of the route (equals the final g cost)."""
        return self.costs[-1] if self.costs else 0.0

    def as_tuples(self) -> List[Tuple[float, float]]:
        return [p.as_tuple() for p in self.points]


class AStarPathfinder:
    """
    Grid-discretized A* search through a fixed obstacle field.

    The lattice is unbounded unless ``bounds`` is given; callers that
    may ask for an unreachable goal must bound it, otherwise the
    frontier grows without limit.
    """

    def __init__(
        self,
        obstacles: Sequence[Obstacle] = (),
        grid_step: float = Constants.GRID_STEP,
        safety_margin: float = Constants.SAFETY_MARGIN,
        bounds: Optional[SearchBounds] = None,
    ):
        try:
            grid_step = float(grid_step)
        except (TypeError, ValueError) as e:
            raise ParameterValidationError("grid_step", grid_step, "must be a number") from e
        if not math.isfinite(grid_step) or grid_step <= 0:
            raise ParameterValidationError("grid_step", grid_step, "must be a positive finite number")
        self.grid_step = grid_step
        self._checker = CollisionChecker(obstacles, safety_margin)
        self.safety_margin = self._checker.safety_margin
        self.bounds = bounds

    @classmethod
    def from_config(
        cls,
        obstacles: Sequence[Obstacle],
        params: PathfinderParams,
        bounds: Optional[SearchBounds] = None,
    ) -> "AStarPathfinder":
        return cls(
            obstacles,
            grid_step=params.grid_step,
            safety_margin=params.safety_margin,
            bounds=bounds,
        )

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return self._checker.obstacles

    def is_blocked(self, x: float, y: float) -> bool:
        """True if a lattice node at (x, y) may not be entered."""
        if self.bounds is not None and not (
            self.bounds.min_x <= x <= self.bounds.max_x
            and self.bounds.min_y <= y <= self.bounds.max_y
        ):
            return True
        return self._checker.is_collision(x, y)

    def clearance(self, point: PointLike) -> float:
        """Distance from ``point`` to the nearest obstacle inflated by the safety margin."""
        return self._checker.clearance(as_point(point))

    def find_path(self, start: PointLike, goal: PointLike) -> Route:
        """
        Search for a route from ``start`` to within one grid step of ``goal``.

        Start and goal are assumed to be free of obstacles; neither is
        checked.

        Returns:
            Route from start to the terminal lattice node, or an empty
            Route if the open set is exhausted.
        """
        start = as_point(start, "start")
        goal = as_point(goal, "goal")
        step = self.grid_step

        arena: List[PathNode] = []
        open_heap: List[Tuple[float, int, int]] = []
        open_cells: Dict[Cell, int] = {}
        closed: Set[Cell] = set()
        sequence = itertools.count()

        start_node = PathNode(
            start.x, start.y, (0, 0), 0.0, distance(start, goal), NO_PARENT, next(sequence)
        )
        arena.append(start_node)
        open_cells[start_node.cell] = 0
        heapq.heappush(open_heap, (start_node.f, start_node.seq, 0))

        expanded = 0
        while open_heap:
            f, _, index = heapq.heappop(open_heap)
            current = arena[index]
            if current.cell in closed or f != current.f:
                continue  # stale heap entry

            del open_cells[current.cell]
            closed.add(current.cell)
            expanded += 1

            if self._distance_xy(current.x, current.y, goal.x, goal.y) < step:
                route = self._reconstruct(arena, index, expanded)
                logger.debug(
                    "Route found: %d points, length %.2f, %d expanded, %d in arena",
                    len(route),
                    route.total_length(),
                    expanded,
                    len(arena),
                )
                return route

            ci, cj = current.cell
            for di, dj in DIRECTIONS:
                cell = (ci + di, cj + dj)
                if cell in closed:
                    continue
                nx = start.x + cell[0] * step
                ny = start.y + cell[1] * step
                if self.is_blocked(nx, ny):
                    continue

                tentative_g = current.g + self._distance_xy(current.x, current.y, nx, ny)
                existing = open_cells.get(cell)
                if existing is None:
                    node = PathNode(
                        nx,
                        ny,
                        cell,
                        tentative_g,
                        self._distance_xy(nx, ny, goal.x, goal.y),
                        index,
                        next(sequence),
                    )
                    arena.append(node)
                    node_index = len(arena) - 1
                    open_cells[cell] = node_index
                    heapq.heappush(open_heap, (node.f, node.seq, node_index))
                else:
                    node = arena[existing]
                    if tentative_g < node.g:
                        node.g = tentative_g
                        node.f = node.g + node.h
                        node.parent = index
                        heapq.heappush(open_heap, (node.f, node.seq, existing))

        logger.info(
            "No route from (%.1f, %.1f) to (%.1f, %.1f) after %d expansions",
            start.x,
            start.y,
            goal.x,
            goal.y,
            expanded,
        )
        return Route(expanded=expanded)

    @staticmethod
    def _distance_xy(ax: float, ay: float, bx: float, by: float) -> float:
        dx = bx - ax
        dy = by - ay
        return math.sqrt(dx * dx + dy * dy)

    @staticmethod
    def _reconstruct(arena: List[PathNode], index: int, expanded: int) -> Route:
        chain: List[PathNode] = []
        while index != NO_PARENT:
            node = arena[index]
            chain.append(node)
            index = node.parent
        chain.reverse()
        return Route(
            points=tuple(node.position() for node in chain),
            costs=tuple(node.g for node in chain),
            expanded=expanded,
        )


def find_path(
    start: PointLike,
    goal: PointLike,
    obstacles: Sequence[Obstacle] = (),
    grid_step: float = Constants.GRID_STEP,
    safety_margin: float = Constants.SAFETY_MARGIN,
    bounds: Optional[SearchBounds] = None,
) -> Route:
    """Functional form of ``AStarPathfinder(...).find_path(start, goal)``."""
    return AStarPathfinder(obstacles, grid_step, safety_margin, bounds).find_path(start, goal)
