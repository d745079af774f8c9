"""Interactive demo state shared by the GUI and terminal front ends."""

from __future__ import annotations

import logging
from typing import List

from .config import GridConfig
from .core.grid import Grid
from .core.tile import Tile
from .search.pathfinding import find_path, path_cost
from .utils import noise

logger = logging.getLogger(__name__)


class Demo:
    """Holds the current grid, the start tile and the last path found.

    Each successful search makes its goal the start of the next one, so
    clicking around the map walks a route from tile to tile.
    """

    def __init__(self, grid_cfg: GridConfig) -> None:
        self.grid_cfg = grid_cfg
        self.grid: Grid = self._build_grid(grid_cfg.seed)
        self.start: Tile = self.grid.tile(0, 0)
        self.path: List[Tile] = [self.start]

    def _build_grid(self, seed: int | None) -> Grid:
        passability = noise.random_passability(
            self.grid_cfg.width,
            self.grid_cfg.height,
            block_probability=self.grid_cfg.block_probability,
            seed=seed,
            keep_open=[(0, 0)],
        )
        return Grid(self.grid_cfg.width, self.grid_cfg.height, passability)

    def regenerate(self, seed: int | None = None) -> None:
        """Replace the grid with a fresh obstacle layout and restart at ``(0, 0)``."""

        self.grid = self._build_grid(seed)
        self.start = self.grid.tile(0, 0)
        self.path = [self.start]
        logger.info("Generated new %dx%d map (seed=%s)", self.grid.width, self.grid.height, seed)

    def set_start(self, x: int, y: int) -> Tile:
        """Move the start tile. Raises ``OutOfBoundsError`` for bad coordinates."""

        tile = self.grid.tile(x, y)
        if tile.blocked:
            logger.warning("Tile (%d, %d) is blocked; start unchanged.", x, y)
            return self.start
        self.grid.reset()
        self.start = tile
        self.path = [tile]
        return tile

    def search_to(self, x: int, y: int) -> List[Tile]:
        """Search from the current start to ``(x, y)``.

        Blocked goals are ignored. On success the goal becomes the new start.
        """

        goal = self.grid.tile(x, y)
        if goal.blocked:
            logger.info("Tile (%d, %d) is blocked; ignoring.", x, y)
            return []

        path = find_path(self.grid, self.start, goal)
        self.path = path
        if path:
            logger.info(
                "Path (%d, %d) -> (%d, %d): %d tiles, cost %s",
                self.start.x, self.start.y, x, y, len(path), path_cost(path),
            )
            self.start = goal
        else:
            logger.info("No path from (%d, %d) to (%d, %d)", self.start.x, self.start.y, x, y)
        return path


__all__ = ["Demo"]
