"""Single grid cell with per-search bookkeeping."""

from __future__ import annotations

from typing import Tuple


Coord = Tuple[int, int]


class Tile:
    """A cell of a :class:`~tile_astar.core.grid.Grid`.

    ``x``, ``y``, ``blocked`` and ``weight`` are fixed when the tile is
    created. The remaining attributes are scratch space for a single search
    and are cleared by :meth:`reset`.
    """

    def __init__(self, x: int, y: int, blocked: bool = False, weight: float = 1) -> None:
        self._x = x
        self._y = y
        self._blocked = bool(blocked)
        # Varying weights simulate different terrain types
        self._weight = weight

        self.g_cost: float = 0
        self.h_cost: float = 0
        self.f_cost: float = 0
        self.visited: bool = False
        self.closed: bool = False
        # Coordinate of the predecessor on the best known path
        self.parent: Coord | None = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def blocked(self) -> bool:
        return self._blocked

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def position(self) -> Coord:
        return self._x, self._y

    def reset(self) -> None:
        """Clear the bookkeeping used during pathfinding."""

        self.g_cost = 0
        self.h_cost = 0
        self.f_cost = 0
        self.visited = False
        self.closed = False
        self.parent = None

    def same_position(self, other: Tile) -> bool:
        """Return ``True`` if ``other`` sits at the same coordinate."""

        return self._x == other.x and self._y == other.y

    def __repr__(self) -> str:
        flag = " blocked" if self._blocked else ""
        return f"Tile({self._x}, {self._y}{flag}, weight={self._weight})"


__all__ = ["Tile", "Coord"]
