"""
WAV container validation - the game only ships uncompressed PCM clips
"""

import os
import wave
from dataclasses import dataclass

from ..errors import AssetLoadError, UnsupportedFormatError


SUPPORTED_CHANNELS = (1, 2)
SUPPORTED_BITS_PER_SAMPLE = (8, 16)


@dataclass(frozen=True)
class WavFormat:
    """Header information of a validated WAV file"""
    channels: int
    bits_per_sample: int
    sample_rate: int
    frame_count: int

    @property
    def duration_s(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.frame_count / self.sample_rate


def read_wav_format(path: str) -> WavFormat:
    """
    Read and validate the header of a WAV file.

    Only RIFF/WAVE PCM with 1-2 channels and 8- or 16-bit samples is accepted.

    Args:
        path: Path to the .wav file

    Returns:
        WavFormat describing the clip

    Raises:
        AssetLoadError: If the file is missing or cannot be read
        UnsupportedFormatError: If the file is not a supported PCM WAV
    """
    if not os.path.isfile(path):
        raise AssetLoadError(path, "file not found")

    try:
        with wave.open(path, "rb") as wav:
            channels = wav.getnchannels()
            sample_width = wav.getsampwidth()
            sample_rate = wav.getframerate()
            frame_count = wav.getnframes()
    except wave.Error as e:
        # wave rejects missing RIFF/WAVE ids and non-PCM encodings
        raise UnsupportedFormatError(path, str(e)) from e
    except EOFError as e:
        raise UnsupportedFormatError(path, "truncated WAV header") from e
    except OSError as e:
        raise AssetLoadError(path, str(e)) from e

    if channels not in SUPPORTED_CHANNELS:
        raise UnsupportedFormatError(path, f"unsupported number of channels: {channels}")

    bits_per_sample = sample_width * 8
    if bits_per_sample not in SUPPORTED_BITS_PER_SAMPLE:
        raise UnsupportedFormatError(path, f"unsupported bits per sample: {bits_per_sample}")

    return WavFormat(
        channels=channels,
        bits_per_sample=bits_per_sample,
        sample_rate=sample_rate,
        frame_count=frame_count
    )
