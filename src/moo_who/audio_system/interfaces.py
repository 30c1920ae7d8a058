"""
Abstract interface for the audio collaborator used by the game core
"""

import enum
from abc import ABC, abstractmethod
from typing import Any, Optional


class PlaybackState(enum.Enum):
    """Device-reported state of a playback handle"""
    PLAYING = "playing"
    STOPPED = "stopped"


class ISoundController(ABC):
    """
    Audio services consumed by the game core.

    Buffers and playback handles are opaque to the core: it only hands them
    back to the controller that created them.
    """

    @abstractmethod
    def load_sound(self, path: str) -> Any:
        """
        Load a sound file into a reusable buffer.

        Raises:
            AssetLoadError: If the file is missing or unreadable
            UnsupportedFormatError: If the file is not PCM WAV, 1-2 channels, 8/16-bit
        """
        pass

    @abstractmethod
    def play_sound(self, buffer: Any, volume: float = 1.0) -> Optional[Any]:
        """
        Start a one-shot playback of a buffer.

        Returns:
            Playback handle, or None if the device could not start playback
        """
        pass

    @abstractmethod
    def query_playback_state(self, handle: Any) -> PlaybackState:
        """Report whether a playback handle is still rendering audio"""
        pass

    @abstractmethod
    def stop_sound(self, handle: Any) -> None:
        """Stop a playback handle (no-op if it already finished)"""
        pass

    @abstractmethod
    def release(self, handle: Any) -> None:
        """Give a finished playback handle back to the device"""
        pass

    @abstractmethod
    def play_music(self, path: str, volume: float) -> None:
        """Start looping background music"""
        pass

    @abstractmethod
    def stop_music(self) -> None:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release the audio device"""
        pass
