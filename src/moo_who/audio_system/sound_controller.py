"""
Sound Controller - pygame.mixer backed audio for the game
"""

import enum
import os
from dataclasses import dataclass
from typing import List, Optional

import pygame

from .interfaces import ISoundController, PlaybackState
from .wav_format import read_wav_format
from ..errors import AssetLoadError


class GameSounds(enum.Enum):
    """Shared sound effects - stores file names, resolved against the assets folder"""
    CORRECT_SOUND = "correct.wav"
    INCORRECT_SOUND = "incorrect.wav"
    BACKGROUND_MUSIC = "music.wav"

    def get_sound_path(self, assets_folder: str) -> str:
        """Get the full path to the sound file"""
        return os.path.join(assets_folder, self.value)


def find_missing_sounds(assets_folder: str) -> List[str]:
    """List the GameSounds files that do not exist in the assets folder"""
    return [
        sound.get_sound_path(assets_folder)
        for sound in GameSounds
        if not os.path.exists(sound.get_sound_path(assets_folder))
    ]


@dataclass
class Playback:
    """
    Playback handle: the mixer channel plus the sound it was started with.

    pygame recycles channels, so a channel alone cannot tell whether *our*
    sound is still the one playing on it.
    """
    channel: pygame.mixer.Channel
    sound: pygame.mixer.Sound

    def is_ours(self) -> bool:
        return self.channel.get_sound() is self.sound


class SoundController(ISoundController):
    """
    Controls all audio playback through pygame.mixer.

    Buffers are pygame.mixer.Sound objects, playback handles are Playback
    records, background music goes through pygame.mixer.music.
    """

    def __init__(self, logger, frequency: int = 44100, buffer_size: int = 512, num_channels: int = 16):
        """
        Initialize the mixer.

        Args:
            logger: ClassLogger instance for logging
            frequency: Mixer sample rate in Hz
            buffer_size: Mixer buffer size in samples
            num_channels: Number of simultaneous one-shot channels

        Raises:
            pygame.error: If the audio device cannot be opened
        """
        self.logger = logger
        self.mixer = pygame.mixer
        self.mixer.init(frequency=frequency, size=-16, channels=2, buffer=buffer_size)
        self.mixer.set_num_channels(num_channels)
        self.current_music: Optional[str] = None

        self.logger.info(f"Mixer initialized: {self.mixer.get_init()}, {num_channels} channels")

    def load_sound(self, path: str) -> pygame.mixer.Sound:
        """
        Validate a WAV file and load it into a pygame Sound.

        Raises:
            AssetLoadError: If the file is missing or pygame fails to decode it
            UnsupportedFormatError: If the WAV encoding is not supported
        """
        wav_format = read_wav_format(path)
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            raise AssetLoadError(path, str(e)) from e

        self.logger.debug(
            f"Loaded {os.path.basename(path)}: {wav_format.channels}ch "
            f"{wav_format.bits_per_sample}bit {wav_format.sample_rate}Hz "
            f"({wav_format.duration_s:.2f}s)"
        )
        return sound

    def play_sound(self, buffer: pygame.mixer.Sound, volume: float = 1.0) -> Optional[Playback]:
        channel = buffer.play()
        if channel is None:
            self.logger.warning("No free mixer channel - sound skipped")
            return None
        channel.set_volume(volume)
        return Playback(channel=channel, sound=buffer)

    def query_playback_state(self, handle: Playback) -> PlaybackState:
        if handle.channel.get_busy() and handle.is_ours():
            return PlaybackState.PLAYING
        return PlaybackState.STOPPED

    def stop_sound(self, handle: Playback) -> None:
        if handle.is_ours():
            handle.channel.stop()

    def release(self, handle: Playback) -> None:
        # Channels belong to the mixer pool; releasing only has to make sure
        # nothing keeps playing on our behalf
        self.stop_sound(handle)

    def play_music(self, path: str, volume: float) -> None:
        """
        Load and loop a background music file.

        Raises:
            AssetLoadError: If the file is missing or cannot be decoded
            UnsupportedFormatError: If the WAV encoding is not supported
        """
        read_wav_format(path)
        try:
            self.mixer.music.load(path)
        except pygame.error as e:
            raise AssetLoadError(path, str(e)) from e
        self.mixer.music.set_volume(volume)
        self.mixer.music.play(loops=-1)
        self.current_music = path
        self.logger.info(f'Background music "{os.path.basename(path)}" started at volume {volume:.2f}')

    def stop_music(self) -> None:
        self.mixer.music.stop()
        self.current_music = None

    def cleanup(self) -> None:
        """Stop everything and close the audio device"""
        if not self.mixer.get_init():
            return
        self.mixer.music.stop()
        self.mixer.stop()
        self.mixer.quit()
        self.logger.info("Mixer closed")
