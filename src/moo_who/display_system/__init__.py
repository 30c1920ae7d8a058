"""
Display System Package

Renderers that draw the game session. The game core never depends on them.
"""

from .interfaces import IRenderer, NullRenderer
from .pygame_renderer import PygameRenderer, load_image

__all__ = [
    "IRenderer",
    "NullRenderer",
    "PygameRenderer",
    "load_image"
]
