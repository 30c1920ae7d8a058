"""
Mouse sampler reading the pygame window
"""

from typing import Tuple

import pygame

from .interfaces import IPointerSampler


def normalize_position(px: float, py: float, width: int, height: int) -> Tuple[float, float]:
    """
    Convert window pixel coordinates to the normalized [-1, 1] space.

    Args:
        px, py: Pixel coordinates, origin top-left
        width, height: Window size in pixels

    Returns:
        (x, y) with (-1, -1) bottom-left and (1, 1) top-right
    """
    return (px / width) * 2 - 1, 1 - (py / height) * 2


class PygamePointerSampler(IPointerSampler):
    """Samples the left mouse button and cursor of the active pygame display"""

    def __init__(self, logger):
        self._logger = logger

    def setup(self) -> None:
        if pygame.display.get_surface() is None:
            raise RuntimeError("PygamePointerSampler requires an open pygame display")
        self._logger.debug("Mouse sampler attached to pygame display")

    def read_pressed(self) -> bool:
        return bool(pygame.mouse.get_pressed()[0])

    def read_position(self) -> Tuple[float, float]:
        width, height = pygame.display.get_surface().get_size()
        px, py = pygame.mouse.get_pos()
        return normalize_position(px, py, width, height)

    def cleanup(self) -> None:
        pass
