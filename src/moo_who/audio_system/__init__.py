"""
Audio System Module

WAV validation, the pygame.mixer sound controller and a hardware-free mock.
"""

from .interfaces import ISoundController, PlaybackState
from .wav_format import WavFormat, read_wav_format
from .sound_controller import SoundController, GameSounds, Playback, find_missing_sounds
from .mock_sound_controller import MockSoundController, MockSoundBuffer, MockPlayback

__all__ = [
    'ISoundController',
    'PlaybackState',
    'WavFormat',
    'read_wav_format',
    'SoundController',
    'GameSounds',
    'Playback',
    'find_missing_sounds',
    'MockSoundController',
    'MockSoundBuffer',
    'MockPlayback'
]
