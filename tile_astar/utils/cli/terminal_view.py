"""ASCII terminal renderer for tile grids and search results."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from ...core.grid import Grid
from ...core.tile import Tile


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "orange": "\x1b[38;5;208m",
    "grey": "\x1b[90m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}


class TerminalView:
    """Draw a :class:`Grid` using one glyph per tile.

    ``#`` blocked, ``S`` start, ``G`` goal, ``*`` path, ``x`` closed,
    ``o`` visited and ``.`` open.
    """

    def __init__(self, colour: bool = True, stream: TextIO | None = None) -> None:
        self.colour = colour
        self.stream = stream
        self.enabled: bool = True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled after toggle."""

        self.enabled = not self.enabled
        return self.enabled

    def format(
        self,
        grid: Grid,
        path: Sequence[Tile] = (),
        start: Tile | None = None,
    ) -> str:
        """Return the map as text, row ``y == 0`` first."""

        on_path = {tile.position for tile in path}
        start_pos = path[0].position if path else (start.position if start else None)
        goal_pos = path[-1].position if len(path) > 1 else None

        lines: list[str] = []
        for y in range(grid.height):
            row: list[str] = []
            for x in range(grid.width):
                glyph, colour = _tile_to_glyph_colour(
                    grid.tile(x, y), on_path, start_pos, goal_pos
                )
                row.append(f"{_COLOURS[colour]}{glyph}" if self.colour else glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return "\n".join(lines)

    def render(
        self,
        grid: Grid,
        path: Sequence[Tile] = (),
        start: Tile | None = None,
    ) -> None:
        """Write :meth:`format` output to the stream if enabled."""

        if not self.enabled:
            return
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.format(grid, path, start) + "\n")
        stream.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _tile_to_glyph_colour(
    tile: Tile,
    on_path: set[tuple[int, int]],
    start_pos: tuple[int, int] | None,
    goal_pos: tuple[int, int] | None,
) -> tuple[str, str]:
    pos = tile.position
    if pos == start_pos:
        return "S", "yellow"
    if pos == goal_pos:
        return "G", "green"
    if pos in on_path:
        return "*", "red"
    if tile.blocked:
        return "#", "black"
    if tile.closed:
        return "x", "orange"
    if tile.visited:
        return "o", "grey"
    return ".", "white"


__all__ = ["TerminalView"]
