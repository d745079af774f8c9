"""Grid A* pathfinding."""

from .core.grid import Grid, GridError, OutOfBoundsError
from .core.tile import Tile
from .search.heuristics import manhattan
from .search.pathfinding import InvalidEndpointError, find_path, path_cost

__all__ = [
    "Grid",
    "GridError",
    "InvalidEndpointError",
    "OutOfBoundsError",
    "Tile",
    "find_path",
    "manhattan",
    "path_cost",
]
