"""
Scripted pointer sampler for headless runs and tests
"""

from collections import deque
from typing import Iterable, Tuple

from .interfaces import IPointerSampler


class ScriptedPointerSampler(IPointerSampler):
    """
    Replays a queue of (x, y, pressed) samples, one per frame.

    When the script runs out, the pointer stays where it was with the
    button released.

    Example:
        sampler = ScriptedPointerSampler()
        sampler.click_at(0.1, -0.3)  # press on one frame, release on the next
    """

    def __init__(self, samples: Iterable[Tuple[float, float, bool]] = ()):
        self._samples = deque(samples)
        self._position: Tuple[float, float] = (0.0, 0.0)
        self._pressed = False

    def push(self, x: float, y: float, pressed: bool) -> None:
        self._samples.append((x, y, pressed))

    def click_at(self, x: float, y: float) -> None:
        self.push(x, y, True)
        self.push(x, y, False)

    def pending(self) -> int:
        return len(self._samples)

    def _advance(self) -> None:
        if self._samples:
            x, y, self._pressed = self._samples.popleft()
            self._position = (x, y)
        else:
            self._pressed = False

    def read_position(self) -> Tuple[float, float]:
        # Position is read first each frame, so it drives the replay
        self._advance()
        return self._position

    def read_pressed(self) -> bool:
        return self._pressed

    def setup(self) -> None:
        pass

    def cleanup(self) -> None:
        self._samples.clear()
