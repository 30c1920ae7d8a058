"""
Pointer System Package

Samples the mouse (or a scripted replay) and turns it into per-frame
snapshots with click edge detection.
"""

from .pointer_state import PointerState
from .interfaces import IPointerReader, IPointerSampler
from .pointer_reader import PointerReader
from .pygame_sampler import PygamePointerSampler, normalize_position
from .scripted_sampler import ScriptedPointerSampler

__all__ = [
    "PointerState",
    "IPointerReader",
    "IPointerSampler",
    "PointerReader",
    "PygamePointerSampler",
    "normalize_position",
    "ScriptedPointerSampler"
]
