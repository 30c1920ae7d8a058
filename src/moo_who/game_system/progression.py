"""
Progression state machine - judges clicks and drives the sequential unlocks
"""

import enum

from .animals import AnimalRef
from .config import GameConfig
from .feedback import CORRECT_TEXT, RED, WRONG_TEXT, YELLOW
from .session import GameSession
from ..audio_system.interfaces import ISoundController


class ClickOutcome(enum.Enum):
    """Result of a click on an animal sprite"""
    IGNORED = "ignored"              # Locked animal, nothing happens
    CORRECT = "correct"              # Clicked the expected animal
    WRONG = "wrong"                  # Clicked another unlocked animal
    ALREADY_FOUND = "already_found"  # Clicked an animal identified earlier


class ProgressionStateMachine:
    """
    Core game rules.

    The expected animal is the first one in order that is unlocked and not
    yet found. A correct guess marks it found and schedules the successor's
    unlock after a delay; until the delay elapses the successor stays locked,
    so there is never more than one expected animal.

    Example:
        progression = ProgressionStateMachine(session, sound_controller, config, logger)
        progression.on_animal_clicked("cat")   # ClickOutcome.CORRECT
        progression.update(2.0)                # "bird" unlocks
    """

    def __init__(self, session: GameSession, sound_controller: ISoundController, config: GameConfig, logger):
        """
        Args:
            session: Game state aggregate
            sound_controller: Audio collaborator for one-shot sounds
            config: Game configuration (timing and volumes)
            logger: ClassLogger instance
        """
        self.session = session
        self.sound_controller = sound_controller
        self.logger = logger
        self.unlock_delay_s = config.timing.unlock_delay_s
        self.feedback_duration_s = config.timing.feedback_duration_s
        self.effect_volume = config.audio.effect_volume

    @property
    def is_complete(self) -> bool:
        return self.session.roster.all_found

    def on_animal_clicked(self, ref: AnimalRef) -> ClickOutcome:
        """
        Handle a click on an animal sprite.

        Args:
            ref: Roster key or index of the clicked animal

        Returns:
            ClickOutcome describing what the click did
        """
        roster = self.session.roster
        index = roster.index_of(ref)
        spec = roster.order[index]
        record = roster.records[index]

        if not record.unlocked:
            self.logger.debug(f"Click on locked {spec.key} ignored")
            return ClickOutcome.IGNORED

        # Any click on an unlocked animal gets the visual acknowledgment
        record.pop.trigger()

        if record.found:
            self._play_transient(self.session.animal_buffers[index])
            self.logger.info(f"{spec.key} was already found")
            return ClickOutcome.ALREADY_FOUND

        if index == roster.expected_index():
            outcome = self._handle_correct(index)
        else:
            outcome = self._handle_wrong(index)

        self._play_transient(self.session.animal_buffers[index])
        chime = self.session.correct_buffer if outcome is ClickOutcome.CORRECT else self.session.incorrect_buffer
        self._play_transient(chime)
        return outcome

    def _handle_correct(self, index: int) -> ClickOutcome:
        roster = self.session.roster
        roster.mark_found(index)
        self.session.feedback.set_message(CORRECT_TEXT, YELLOW, self.feedback_duration_s)

        successor = roster.successor_index(index)
        if successor is None:
            self.logger.info(f"✅ {roster.order[index].key} found - that was the last one "
                             f"({roster.found_count}/{len(roster)})")
            return ClickOutcome.CORRECT

        preempted = self.session.pending_unlock.schedule(successor, self.unlock_delay_s)
        if preempted is not None:
            self._apply_unlock(preempted)

        self.logger.info(f"✅ {roster.order[index].key} found ({roster.found_count}/{len(roster)}), "
                         f"{roster.order[successor].key} unlocks in {self.unlock_delay_s:.1f}s")
        return ClickOutcome.CORRECT

    def _handle_wrong(self, index: int) -> ClickOutcome:
        self.session.feedback.set_message(WRONG_TEXT, RED, self.feedback_duration_s)
        expected = self.session.roster.expected_key()
        self.logger.info(f"❌ {self.session.roster.order[index].key} is wrong (expected {expected})")
        return ClickOutcome.WRONG

    def _play_transient(self, buffer) -> None:
        handle = self.sound_controller.play_sound(buffer, self.effect_volume)
        self.session.tracker.track(handle)

    def _apply_unlock(self, index: int) -> None:
        self.session.roster.unlock(index)
        self.session.panel.sync_unlocks(self.session.roster)
        self.logger.info(f"🔓 {self.session.roster.order[index].key} unlocked")

    def update(self, dt: float) -> None:
        """
        Tick the pending unlock.

        Args:
            dt: Delta time since last frame in seconds
        """
        resolved = self.session.pending_unlock.update(dt)
        if resolved is not None:
            self._apply_unlock(resolved)
