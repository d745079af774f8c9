"""Handle mouse and keyboard events for the pygame demo."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict

import pygame

from ..demo import Demo

logger = logging.getLogger(__name__)


def screen_to_tile(screen_pos: tuple[float, float], tile_size: tuple[int, int]) -> tuple[int, int]:
    """Convert pixel ``screen_pos`` to the tile coordinate under it.

    The result may lie outside the grid; callers check bounds.
    """
    tile_w, tile_h = tile_size
    return math.floor(screen_pos[0] / tile_w), math.floor(screen_pos[1] / tile_h)


def handle_events(demo: Demo, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events.

    A left click on an open tile searches from the current start to it.
    ``R`` regenerates the map, ``Esc`` or closing the window quits. Sets
    ``state["dirty"]`` when the view needs redrawing.
    """
    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            x, y = screen_to_tile(ev.pos, renderer.tile_size)
            if not demo.grid.in_bounds(x, y):
                logger.debug("Click at %s is outside the map", ev.pos)
                continue
            if demo.grid.tile(x, y).blocked:
                continue
            demo.search_to(x, y)
            state["dirty"] = True

        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                demo.regenerate()
                state["dirty"] = True
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events", "screen_to_tile"]
