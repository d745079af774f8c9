"""Random obstacle layouts built from white noise."""

from __future__ import annotations

from random import Random
from typing import Iterable


def threshold_mask(
    data: list[list[float]], threshold: float
) -> list[list[bool]]:
    """Return boolean grid where ``True`` indicates ``value >= threshold``."""

    mask: list[list[bool]] = []
    for row in data:
        mask.append([value >= threshold for value in row])
    return mask


def white_noise(
    width: int, height: int, seed: int | None = None
) -> list[list[float]]:
    """Return ``height`` × ``width`` grid of random floats in ``[0, 1)``.

    Parameters
    ----------
    width:
        Number of columns in the generated grid.
    height:
        Number of rows in the generated grid.
    seed:
        Optional seed for deterministic output.
    """

    rnd = Random(seed)
    return [[rnd.random() for _ in range(width)] for _ in range(height)]


def random_passability(
    width: int,
    height: int,
    block_probability: float = 0.25,
    seed: int | None = None,
    keep_open: Iterable[tuple[int, int]] = (),
) -> list[list[bool]]:
    """Return a ``[y][x]`` passability mask with roughly ``block_probability`` walls.

    Coordinates listed in ``keep_open`` are always passable.
    """

    data = white_noise(width, height, seed=seed)
    passable = threshold_mask(data, block_probability)
    for x, y in keep_open:
        if 0 <= x < width and 0 <= y < height:
            passable[y][x] = True
    return passable


__all__ = ["white_noise", "threshold_mask", "random_passability"]
