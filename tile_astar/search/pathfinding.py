"""A* search over a :class:`~tile_astar.core.grid.Grid`."""

from __future__ import annotations

from heapq import heappop, heappush
import logging
from itertools import count
from typing import Any, Callable, List, Sequence, Tuple

from ..core.grid import Grid, GridError
from ..core.tile import Coord, Tile
from .heuristics import manhattan

logger = logging.getLogger(__name__)


Heuristic = Callable[[Any, Any], float]


class InvalidEndpointError(GridError, ValueError):
    """Raised when a search endpoint is blocked or foreign to the grid."""


def _check_endpoint(grid: Grid, tile: Tile, role: str) -> None:
    if tile not in grid:
        raise InvalidEndpointError(f"{role} tile {tile!r} does not belong to the grid")
    if tile.blocked:
        raise InvalidEndpointError(f"{role} tile {tile!r} is blocked")


def _reconstruct(grid: Grid, current: Tile) -> List[Tile]:
    path = [current]
    while current.parent is not None:
        current = grid.tile(*current.parent)
        path.append(current)
    path.reverse()
    return path


def find_path(grid: Grid, start: Tile, goal: Tile, heuristic: Heuristic = manhattan) -> List[Tile]:
    """Return the cheapest path from ``start`` to ``goal`` inclusive.

    The cost of a path is the sum of the weights of every tile entered, so
    ``start`` itself is free. An empty list means ``goal`` cannot be reached.
    Tile bookkeeping (``visited``, ``closed``, costs) is left in place after
    the search so callers can inspect which tiles were explored.

    Raises :class:`InvalidEndpointError` before touching the grid if either
    endpoint is blocked or is not one of ``grid``'s tiles.
    """

    _check_endpoint(grid, start, "start")
    _check_endpoint(grid, goal, "goal")

    grid.reset()

    # Entries are (f, seq, g, position). seq keeps equal-f tiles in FIFO
    # order; an entry whose g differs from the tile's live g_cost is stale.
    open_heap: List[Tuple[float, int, float, Coord]] = []
    seq = count()

    start.h_cost = heuristic(start, goal)
    start.f_cost = start.g_cost + start.h_cost
    start.visited = True
    heappush(open_heap, (start.f_cost, next(seq), start.g_cost, start.position))

    expanded = 0
    while open_heap:
        _, _, g_entry, position = heappop(open_heap)
        current = grid.tile(*position)
        if current.closed or g_entry != current.g_cost:
            continue

        if current.same_position(goal):
            path = _reconstruct(grid, current)
            logger.debug(
                "Path %s -> %s found: %d tiles, cost %s, %d expanded",
                start.position, goal.position, len(path), current.g_cost, expanded,
            )
            return path

        current.closed = True
        expanded += 1

        for neighbor in grid.neighbors(current.x, current.y):
            if neighbor.closed:
                continue

            g_cost = current.g_cost + neighbor.weight
            if neighbor.visited and g_cost >= neighbor.g_cost:
                continue

            neighbor.parent = current.position
            neighbor.h_cost = heuristic(neighbor, goal)
            neighbor.g_cost = g_cost
            neighbor.f_cost = neighbor.g_cost + neighbor.h_cost
            neighbor.visited = True
            heappush(open_heap, (neighbor.f_cost, next(seq), neighbor.g_cost, neighbor.position))

    logger.debug("No path %s -> %s after %d expanded", start.position, goal.position, expanded)
    return []


def path_cost(path: Sequence[Tile]) -> float:
    """Return the summed weight of every tile in ``path`` after the first."""

    return sum(tile.weight for tile in path[1:])


__all__ = ["find_path", "path_cost", "InvalidEndpointError", "Heuristic"]
