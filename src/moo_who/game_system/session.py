"""
Game session - the single aggregate owning all mutable game state
"""

import os
from dataclasses import dataclass
from typing import Any, List

from .animals import AnimalRoster, AnimalSpec
from .audio_tracker import TransientAudioTracker
from .config import GameConfig
from .feedback import FeedbackMessage
from .pending_unlock import PendingUnlock
from .sound_panel import SoundButtonPanel
from ..audio_system.interfaces import ISoundController
from ..audio_system.sound_controller import GameSounds


@dataclass
class GameSession:
    """Everything the update and render passes read or mutate"""
    roster: AnimalRoster
    panel: SoundButtonPanel
    feedback: FeedbackMessage
    pending_unlock: PendingUnlock
    tracker: TransientAudioTracker
    animal_buffers: List[Any]
    correct_buffer: Any
    incorrect_buffer: Any

    @classmethod
    def create(cls, config: GameConfig, sound_controller: ISoundController, logger) -> 'GameSession':
        """
        Build a fresh session, loading every sound through the controller.

        Args:
            config: Validated game configuration
            sound_controller: Audio collaborator
            logger: ClassLogger; sub-components get their own child loggers

        Raises:
            AssetLoadError: If any sound fails to load
        """
        assets = config.audio.assets_folder
        specs = [
            AnimalSpec(
                key=animal.key,
                display_name=animal.display_name,
                image_path=os.path.join(assets, animal.image_file),
                sound_path=os.path.join(assets, animal.sound_file),
                x=animal.x,
                y=animal.y,
                size=animal.size
            )
            for animal in config.animals
        ]
        roster = AnimalRoster(specs, config.timing.pop_duration_s, config.timing.pop_scale)

        animal_buffers = [sound_controller.load_sound(spec.sound_path) for spec in specs]
        correct_buffer = sound_controller.load_sound(GameSounds.CORRECT_SOUND.get_sound_path(assets))
        incorrect_buffer = sound_controller.load_sound(GameSounds.INCORRECT_SOUND.get_sound_path(assets))

        panel = SoundButtonPanel.from_roster(
            roster, animal_buffers, config.layout, sound_controller,
            logger.create_class_logger("SoundButtonPanel"),
            preview_volume=config.audio.preview_volume
        )

        session = cls(
            roster=roster,
            panel=panel,
            feedback=FeedbackMessage(),
            pending_unlock=PendingUnlock(logger.create_class_logger("PendingUnlock")),
            tracker=TransientAudioTracker(sound_controller, logger.create_class_logger("AudioTracker")),
            animal_buffers=animal_buffers,
            correct_buffer=correct_buffer,
            incorrect_buffer=incorrect_buffer
        )
        logger.info(f"Session created: {len(roster)} animals, order {roster.keys}")
        return session

    def advance_timers(self, dt: float) -> None:
        """Time-driven updates that do not depend on input"""
        self.roster.advance_animations(dt)
        self.feedback.update(dt)

    def housekeeping(self) -> None:
        """End-of-frame reclamation and play/pause reconciliation"""
        self.tracker.reclaim()
        self.panel.reconcile_playback()

    def shutdown(self) -> None:
        self.panel.stop_all()
        self.tracker.release_all()
