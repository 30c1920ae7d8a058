"""
Mock Sound Controller - No-op implementation for running without audio hardware
"""

import itertools
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .interfaces import ISoundController, PlaybackState


@dataclass(frozen=True)
class MockSoundBuffer:
    """Stand-in for a loaded sound: just remembers where it came from"""
    path: str

    @property
    def name(self) -> str:
        return os.path.splitext(os.path.basename(self.path))[0]


@dataclass(eq=False)
class MockPlayback:
    """Simulated playback handle"""
    playback_id: int
    buffer: MockSoundBuffer
    volume: float
    started_at: float = field(default_factory=time.time)
    stopped: bool = False
    released: bool = False


class MockSoundController(ISoundController):
    """
    Mock implementation of SoundController that performs no audio operations.

    Playbacks stay PLAYING until stop_sound()/finish() is called, or, when
    clip_duration_s is set, until that many seconds have passed since they
    started. Every play is recorded so callers can inspect what was heard.
    """

    def __init__(self, logger, clip_duration_s: Optional[float] = None):
        """
        Args:
            logger: ClassLogger instance for logging
            clip_duration_s: Simulated length of every clip, None = play until stopped
        """
        self.logger = logger
        self.clip_duration_s = clip_duration_s
        self.played: List[MockPlayback] = []
        self.released: List[MockPlayback] = []
        self.current_music: Optional[str] = None
        self.music_volume: float = 0.0
        self._ids = itertools.count(1)

        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    @property
    def played_names(self) -> List[str]:
        """Names (file stems) of every sound played, in order"""
        return [playback.buffer.name for playback in self.played]

    @property
    def last_played(self) -> Optional[str]:
        return self.played[-1].buffer.name if self.played else None

    def load_sound(self, path: str) -> MockSoundBuffer:
        self.logger.debug(f"Mock: Loaded sound {path}")
        return MockSoundBuffer(path)

    def play_sound(self, buffer: MockSoundBuffer, volume: float = 1.0) -> MockPlayback:
        playback = MockPlayback(playback_id=next(self._ids), buffer=buffer, volume=volume)
        self.played.append(playback)
        self.logger.debug(f"Mock: Playing {buffer.name} at volume {volume} (#{playback.playback_id})")
        return playback

    def query_playback_state(self, handle: MockPlayback) -> PlaybackState:
        if handle.stopped:
            return PlaybackState.STOPPED
        if self.clip_duration_s is not None and time.time() - handle.started_at >= self.clip_duration_s:
            handle.stopped = True
            return PlaybackState.STOPPED
        return PlaybackState.PLAYING

    def stop_sound(self, handle: MockPlayback) -> None:
        handle.stopped = True

    def release(self, handle: MockPlayback) -> None:
        handle.stopped = True
        handle.released = True
        self.released.append(handle)

    def finish(self, handle: MockPlayback) -> None:
        """Simulate a clip reaching its natural end"""
        handle.stopped = True

    def finish_all(self) -> None:
        for playback in self.played:
            playback.stopped = True

    def play_music(self, path: str, volume: float) -> None:
        self.current_music = path
        self.music_volume = volume
        self.logger.info(f"Mock: Playing music {path} at volume {volume}")

    def stop_music(self) -> None:
        if self.current_music is not None:
            self.logger.info("Mock: Stopped music")
        self.current_music = None

    def cleanup(self) -> None:
        self.stop_music()
        self.finish_all()
