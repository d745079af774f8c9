"""Distance estimates for grid search."""

from __future__ import annotations

from typing import Any


def manhattan(a: Any, b: Any) -> int:
    """Return estimated cost between two tiles.

    This uses Manhattan distance which never overestimates on a 4-neighbour
    grid whose weights are at least one.
    """

    return abs(b.x - a.x) + abs(b.y - a.y)


__all__ = ["manhattan"]
