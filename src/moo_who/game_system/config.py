"""
Game system configuration
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..errors import ConfigError


Color = Tuple[int, int, int]


@dataclass
class AnimalConfig:
    """One hidden animal: identity, assets and sprite placement"""
    key: str
    display_name: str
    image_file: str
    sound_file: str
    x: float
    y: float
    size: float = 0.2  # Sprite quad edge in normalized units


@dataclass
class AudioConfig:
    """Audio assets and mixer settings"""
    assets_folder: str = "assets"
    music_volume: float = 0.4
    effect_volume: float = 1.0
    preview_volume: float = 1.0
    mixer_frequency: int = 44100
    mixer_buffer: int = 512
    mixer_channels: int = 16


@dataclass
class TimingConfig:
    """Durations of every timed behavior, in seconds"""
    unlock_delay_s: float = 2.0
    feedback_duration_s: float = 2.0
    pop_duration_s: float = 0.5
    pop_scale: float = 1.3


@dataclass
class PanelLayout:
    """Sound button container in normalized coordinates"""
    left: float = -0.97
    right: float = -0.53
    top: float = 0.45
    bottom: float = -0.85
    gap: float = 0.04
    play_size: float = 0.08
    play_margin: float = 0.02


@dataclass
class DisplayConfig:
    """Window and presentation assets"""
    width: int = 1400
    height: int = 900
    title: str = "Moo Who?"
    background_image: str = "backg.jpg"
    soundboard_image: str = "soundboard.jpg"
    lock_image: str = "lock.png"
    play_image: str = "play.png"
    pause_image: str = "pause.png"
    icon_image: str = "iconGame.png"
    button_color: Color = (231, 188, 94)  # Golden


@dataclass
class GameConfig:
    """Main game configuration"""

    animals: List[AnimalConfig]
    audio: AudioConfig = field(default_factory=AudioConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    layout: PanelLayout = field(default_factory=PanelLayout)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    # Timing configuration
    frame_duration_ms: float = 16.67  # ~60 FPS

    @property
    def animal_count(self) -> int:
        return len(self.animals)

    @property
    def animal_order(self) -> List[str]:
        """Unlock progression, first element starts unlocked"""
        return [animal.key for animal in self.animals]

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """
        Basic validation of configuration.

        Raises:
            ConfigError: On the first problem found
        """
        if not self.animals:
            raise ConfigError("At least one animal must be configured")

        keys = self.animal_order
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ConfigError(f"Duplicate animal keys: {duplicates}")

        for animal in self.animals:
            if not animal.key:
                raise ConfigError("Animal key must not be empty")
            if animal.size <= 0:
                raise ConfigError(f"Sprite size for {animal.key} must be positive, got {animal.size}")

        if self.frame_duration_ms <= 0:
            raise ConfigError("Frame duration must be positive")

        timing = self.timing
        if timing.unlock_delay_s < 0:
            raise ConfigError(f"Unlock delay must not be negative, got {timing.unlock_delay_s}")
        if timing.feedback_duration_s <= 0:
            raise ConfigError(f"Feedback duration must be positive, got {timing.feedback_duration_s}")
        if timing.pop_duration_s <= 0:
            raise ConfigError(f"Pop duration must be positive, got {timing.pop_duration_s}")
        if timing.pop_scale < 1.0:
            raise ConfigError(f"Pop scale must be at least 1.0, got {timing.pop_scale}")

        for name in ("music_volume", "effect_volume", "preview_volume"):
            volume = getattr(self.audio, name)
            if not (0.0 <= volume <= 1.0):
                raise ConfigError(f"{name} must be 0.0-1.0, got {volume}")

        layout = self.layout
        if layout.right <= layout.left or layout.top <= layout.bottom:
            raise ConfigError("Sound panel container has no area")
        button_space = (layout.top - layout.bottom) - (self.animal_count - 1) * layout.gap
        if button_space <= 0:
            raise ConfigError(f"Sound panel too small for {self.animal_count} buttons")
