"""
Abstract interfaces for pointer input
"""

from abc import ABC, abstractmethod
from typing import Tuple

from .pointer_state import PointerState


class IPointerSampler(ABC):
    """
    Abstract interface for sampling the raw pointer.

    Separates reading the device from edge detection, so the game can run
    on a pygame window, a scripted replay, or anything else.
    """

    @abstractmethod
    def read_pressed(self) -> bool:
        """
        Returns:
            True if the primary button is currently held down
        """
        pass

    @abstractmethod
    def read_position(self) -> Tuple[float, float]:
        """
        Returns:
            Pointer position normalized to [-1, 1], y pointing up
        """
        pass

    @abstractmethod
    def setup(self) -> None:
        """Initialize the sampler resources"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup sampler resources"""
        pass


class IPointerReader(ABC):
    """Reads the pointer once per frame and returns an edge-detected snapshot"""

    @abstractmethod
    def read_pointer(self) -> PointerState:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass
