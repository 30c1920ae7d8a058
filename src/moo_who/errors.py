"""
Exception hierarchy for Moo Who?
"""


class MooWhoError(Exception):
    """Base class for all game errors"""


class AssetLoadError(MooWhoError):
    """An image or sound asset could not be loaded"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class UnsupportedFormatError(AssetLoadError):
    """A sound file is not a RIFF/WAVE PCM file with 1-2 channels and 8/16-bit samples"""


class ConfigError(MooWhoError, ValueError):
    """Invalid game configuration"""
