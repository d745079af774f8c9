"""Renderer for drawing a grid and path to a :class:`Window`."""

from __future__ import annotations

from typing import Sequence

from ..core.grid import Grid
from ..core.tile import Tile
from .window import Window

# Define colors for tiles
TILE_COLOR_MAP = {
    "blocked": (0, 0, 0),
    "closed": (255, 165, 0),    # orange
    "visited": (128, 128, 128), # grey
    "path": (255, 0, 0),
    "start": (255, 255, 0),
    "goal": (0, 128, 0),
}
BORDER_COLOR = (0, 0, 0)
BACKGROUND_COLOR = (255, 255, 255)


class Renderer:
    """Draw tiles at a fixed pixel size per tile."""

    def __init__(self, window: Window, tile_size: tuple[int, int]) -> None:
        self.window = window
        self.tile_size = tile_size

    def tile_rect(self, x: int, y: int) -> tuple[int, int, int, int]:
        tile_w, tile_h = self.tile_size
        return x * tile_w, y * tile_h, tile_w, tile_h

    def render_grid(self, grid: Grid) -> None:
        """Colour blocked, closed and visited tiles and outline every tile."""
        self.window.clear(BACKGROUND_COLOR)
        for tile in grid:
            rect = self.tile_rect(tile.x, tile.y)
            if tile.blocked:
                self.window.fill_rect(TILE_COLOR_MAP["blocked"], rect)
            elif tile.closed:
                self.window.fill_rect(TILE_COLOR_MAP["closed"], rect)
            elif tile.visited:
                self.window.fill_rect(TILE_COLOR_MAP["visited"], rect)
            self.window.stroke_rect(BORDER_COLOR, rect)

    def render_path(self, path: Sequence[Tile]) -> None:
        """Draw ``path`` with its first tile as start and last as goal."""
        last = len(path) - 1
        for i, tile in enumerate(path):
            color = TILE_COLOR_MAP["path"]
            if i == 0:
                color = TILE_COLOR_MAP["start"]
            elif i == last:
                color = TILE_COLOR_MAP["goal"]
            rect = self.tile_rect(tile.x, tile.y)
            self.window.fill_rect(color, rect)
            self.window.stroke_rect(BORDER_COLOR, rect)

    def update(self, grid: Grid, path: Sequence[Tile]) -> None:
        self.render_grid(grid)
        self.render_path(path)
        self.window.refresh()


__all__ = ["Renderer", "TILE_COLOR_MAP"]
