"""Fixed-size rectangular tile map with 4-connected adjacency."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Sequence, Union

from .tile import Tile


PassabilitySource = Union[Callable[[int, int], bool], Sequence[Sequence[bool]]]
WeightSource = Union[Callable[[int, int], float], Sequence[Sequence[float]]]

# west, east, south, north
_CARDINAL_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GridError(Exception):
    """Base error for grid and search failures."""


class OutOfBoundsError(GridError, IndexError):
    """Raised when a coordinate falls outside the grid."""


def _as_lookup(source: Any, width: int, height: int, name: str) -> Callable[[int, int], Any]:
    """Return ``source`` as an ``(x, y)`` callable.

    Nested sequences are indexed row-major, ``source[y][x]``.
    """

    if callable(source):
        return source
    if len(source) != height or any(len(row) != width for row in source):
        raise ValueError(f"{name} must have {height} rows of {width} values")
    return lambda x, y: source[y][x]


class Grid:
    """``width`` × ``height`` collection of :class:`Tile` objects.

    ``passability`` yields ``True`` for cells that may be entered. It is
    either a callable ``(x, y) -> bool`` or a nested sequence indexed
    ``[y][x]``; ``None`` leaves every cell open. ``weights`` accepts the same
    shapes and defaults to ``1`` everywhere.
    """

    def __init__(
        self,
        width: int,
        height: int,
        passability: PassabilitySource | None = None,
        weights: WeightSource | None = None,
    ) -> None:
        if int(width) != width or int(height) != height or width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive integers, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)

        passable = _as_lookup(passability, self.width, self.height, "passability") if passability is not None else None
        weight_of = _as_lookup(weights, self.width, self.height, "weights") if weights is not None else None

        self._tiles: List[List[Tile]] = []
        for y in range(self.height):
            row: List[Tile] = []
            for x in range(self.width):
                blocked = not passable(x, y) if passable is not None else False
                weight = weight_of(x, y) if weight_of is not None else 1
                if not weight > 0:
                    raise ValueError(f"Tile weight at ({x}, {y}) must be positive, got {weight}")
                row.append(Tile(x, y, blocked, weight))
            self._tiles.append(row)

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> Grid:
        """Build a grid from ASCII rows.

        ``#`` marks a blocked cell, ``.`` an open one and a digit ``1``-``9``
        an open cell with that weight. The first line is ``y == 0``.
        """

        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("No rows given")
        for line in rows:
            for ch in line:
                if ch not in "#." and not ("1" <= ch <= "9"):
                    raise ValueError(f"Unknown tile glyph {ch!r}")
        passability = [[ch != "#" for ch in line] for line in rows]
        weights = [[int(ch) if ch.isdigit() else 1 for ch in line] for line in rows]
        return cls(len(rows[0]), len(rows), passability, weights)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at ``(x, y)``."""

        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"({x}, {y}) is outside {self.width}x{self.height} grid")
        return self._tiles[y][x]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Tile) or not self.in_bounds(item.x, item.y):
            return False
        return self._tiles[item.y][item.x] is item

    def __iter__(self) -> Iterator[Tile]:
        for row in self._tiles:
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    # ------------------------------------------------------------------
    # Search support
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Reset the search bookkeeping of every tile."""

        for row in self._tiles:
            for tile in row:
                tile.reset()

    def neighbors(self, x: int, y: int) -> List[Tile]:
        """Return passable tiles west, east, south and north of ``(x, y)``."""

        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"({x}, {y}) is outside {self.width}x{self.height} grid")

        result: List[Tile] = []
        for dx, dy in _CARDINAL_STEPS:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            tile = self._tiles[ny][nx]
            if not tile.blocked:
                result.append(tile)
        return result


__all__ = [
    "Grid",
    "GridError",
    "OutOfBoundsError",
    "PassabilitySource",
    "WeightSource",
]
