"""
Renderer interface - the presentation side of the game loop
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..game_system.session import GameSession


class IRenderer(ABC):
    """
    Draws the current session. Renderers only read game state.
    """

    @abstractmethod
    def render(self, session: 'GameSession', show_completion: bool) -> None:
        """
        Draw one frame.

        Args:
            session: Current game state
            show_completion: Draw the "all found" banner
        """
        pass

    @abstractmethod
    def poll_quit(self) -> bool:
        """
        Pump window events.

        Returns:
            True if the user asked to close the game
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass


class NullRenderer(IRenderer):
    """Draws nothing; counts frames for headless runs"""

    def __init__(self):
        self.frames_rendered = 0
        self.last_show_completion = False

    def render(self, session: 'GameSession', show_completion: bool) -> None:
        self.frames_rendered += 1
        self.last_show_completion = show_completion

    def poll_quit(self) -> bool:
        return False

    def cleanup(self) -> None:
        pass
