"""Simple ``pygame`` window for rendering tiles."""

from __future__ import annotations

import pygame


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int], *, caption: str = "A* Pathfinding") -> None:
        self.size = size

        if not pygame.get_init(): pygame.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)

    def fill_rect(self, colour: tuple[int, int, int], rect: tuple[int, int, int, int]) -> None:
        pygame.draw.rect(self._surface, colour, rect)

    def stroke_rect(self, colour: tuple[int, int, int], rect: tuple[int, int, int, int]) -> None:
        pygame.draw.rect(self._surface, colour, rect, width=1)

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: tuple[int, int, int] = (255, 255, 255)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
