"""
Game state base class and concrete implementations
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..pointer_system.pointer_state import PointerState
    from .game_manager import GameManager
    from .progression import ClickOutcome


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state represents a distinct game phase with its own:
    - Click handling
    - Presentation flags read by the renderer
    - State transition conditions
    """

    # Renderer draws the completion banner while this is set
    show_completion: bool = False

    def __init__(self, game_manager: 'GameManager'):
        self.game_manager: 'GameManager' = game_manager

    def update(self, pointer_state: 'PointerState') -> Optional['GameState']:
        """
        Route a click (if any) and check for a transition.

        Args:
            pointer_state: Current pointer snapshot with edge detection

        Returns:
            New GameState instance if transition needed, None to stay
        """
        if pointer_state.was_clicked:
            self._route_click(pointer_state.x, pointer_state.y)
        return self.state_update(pointer_state)

    def _route_click(self, x: float, y: float) -> None:
        """Animal sprites take precedence over the sound panel"""
        session = self.game_manager.session

        animal_index = session.roster.hit_test(x, y)
        if animal_index is not None:
            self.on_animal_click(animal_index)
            return

        button_index = session.panel.hit_test(x, y)
        if button_index is not None:
            session.panel.on_play_toggle_clicked(button_index)

    def on_animal_click(self, index: int) -> Optional['ClickOutcome']:
        return self.game_manager.progression.on_animal_clicked(index)

    @abstractmethod
    def state_update(self, pointer_state: 'PointerState') -> Optional['GameState']:
        """
        State-specific logic after click routing (override in subclasses).

        Returns:
            New GameState instance if transition needed, None to stay
        """
        pass

    def on_enter(self) -> None:
        self.custom_on_enter()

    def on_exit(self) -> None:
        self.custom_on_exit()

    @abstractmethod
    def custom_on_enter(self) -> None:
        pass

    @abstractmethod
    def custom_on_exit(self) -> None:
        pass


class GuessingState(GameState):
    """
    Main play phase - the player identifies animals in order.

    Transitions:
    - Every animal found → CompletedState
    """

    def custom_on_enter(self) -> None:
        roster = self.game_manager.session.roster
        self.game_manager.logger.info(f"Find the hidden animals! First up: {roster.expected_key()}")

    def custom_on_exit(self) -> None:
        pass

    def state_update(self, pointer_state: 'PointerState') -> Optional['GameState']:
        if self.game_manager.progression.is_complete:
            return CompletedState(self.game_manager)
        return None


class CompletedState(GameState):
    """
    Every animal has been found.

    Animal clicks still pop the sprite and replay its sound, and the sound
    panel keeps working; the renderer shows the completion banner. Terminal.
    """

    show_completion = True

    def custom_on_enter(self) -> None:
        roster = self.game_manager.session.roster
        self.game_manager.logger.info(f"🎉 All {len(roster)} animals found!")

    def custom_on_exit(self) -> None:
        pass

    def state_update(self, pointer_state: 'PointerState') -> Optional['GameState']:
        return None
