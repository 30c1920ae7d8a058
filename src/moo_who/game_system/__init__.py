"""
Game System - the progression engine of Moo Who?

Animal roster, click judging with delayed sequential unlocks, feedback and
pop timers, the sound button panel, and the frame loop that ties them to
input, rendering and audio.
"""

from .animals import AnimalRoster, AnimalSpec, AnimalRecord, UnlockState
from .audio_tracker import TransientAudioTracker
from .config import GameConfig, AnimalConfig, AudioConfig, TimingConfig, PanelLayout, DisplayConfig
from .feedback import FeedbackMessage
from .game_manager import GameManager
from .pending_unlock import PendingUnlock, PendingUnlockPhase
from .pop_animation import PopAnimation
from .progression import ProgressionStateMachine, ClickOutcome
from .session import GameSession
from .sound_panel import SoundButton, SoundButtonPanel
from .states import GameState, GuessingState, CompletedState

__all__ = [
    # Roster
    "AnimalRoster",
    "AnimalSpec",
    "AnimalRecord",
    "UnlockState",
    # Timers and controls
    "PopAnimation",
    "FeedbackMessage",
    "PendingUnlock",
    "PendingUnlockPhase",
    "TransientAudioTracker",
    "SoundButton",
    "SoundButtonPanel",
    # Rules and loop
    "GameSession",
    "ProgressionStateMachine",
    "ClickOutcome",
    "GameManager",
    "GameState",
    "GuessingState",
    "CompletedState",
    # Configuration
    "GameConfig",
    "AnimalConfig",
    "AudioConfig",
    "TimingConfig",
    "PanelLayout",
    "DisplayConfig"
]
