"""
Transient audio tracker - reclaims fire-and-forget playback handles
"""

from typing import Any, List

from ..audio_system.interfaces import ISoundController, PlaybackState


class TransientAudioTracker:
    """Holds one-shot playback handles until the device reports them finished"""

    def __init__(self, sound_controller: ISoundController, logger):
        self.sound_controller = sound_controller
        self.logger = logger
        self._handles: List[Any] = []

    def __len__(self) -> int:
        return len(self._handles)

    def track(self, handle: Any) -> None:
        # None means the device had no free voice; nothing to reclaim
        if handle is not None:
            self._handles.append(handle)

    def reclaim(self) -> int:
        """
        Release every handle that is no longer playing.

        Returns:
            Number of handles released
        """
        still_playing = []
        released = 0
        for handle in self._handles:
            if self.sound_controller.query_playback_state(handle) is PlaybackState.PLAYING:
                still_playing.append(handle)
            else:
                self.sound_controller.release(handle)
                released += 1
        self._handles = still_playing

        if released:
            self.logger.debug(f"Reclaimed {released} transient sound(s), {len(still_playing)} still playing")
        return released

    def release_all(self) -> None:
        """Stop and release everything, used on shutdown"""
        for handle in self._handles:
            self.sound_controller.release(handle)
        self._handles.clear()
