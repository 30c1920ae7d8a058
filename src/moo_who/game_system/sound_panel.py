"""
Sound button panel - per-animal replay controls on the soundboard
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .animals import AnimalRoster
from .config import PanelLayout
from ..audio_system.interfaces import ISoundController, PlaybackState


@dataclass
class SoundButton:
    """One replay control; geometry in normalized coordinates, y up"""
    animal_index: int
    label: str
    x: float
    y: float
    width: float
    height: float
    play_x: float
    play_y: float
    play_size: float
    lock_x: float
    lock_y: float
    buffer: Any = None
    unlocked: bool = False
    is_playing: bool = False
    playback: Any = None

    def play_control_contains(self, px: float, py: float) -> bool:
        return (self.play_x <= px <= self.play_x + self.play_size
                and self.play_y <= py <= self.play_y + self.play_size)


def layout_buttons(count: int, layout: PanelLayout) -> List[tuple]:
    """
    Split the panel container into equal-height rows separated by fixed gaps.

    Args:
        count: Number of buttons
        layout: Container bounds and spacing

    Returns:
        List of (x, y, width, height) tuples, top row first; y is the bottom edge
    """
    width = layout.right - layout.left
    height = ((layout.top - layout.bottom) - (count - 1) * layout.gap) / count
    rows = []
    current_top = layout.top
    for _ in range(count):
        rows.append((layout.left, current_top - height, width, height))
        current_top -= height + layout.gap
    return rows


class SoundButtonPanel:
    """
    One button per animal, in roster order.

    A button's unlocked flag always mirrors its animal; the play/pause flag
    follows the device, so a preview that ends on its own flips back to
    "play" on the next reconcile.
    """

    def __init__(self, buttons: List[SoundButton], sound_controller: ISoundController, logger,
                 preview_volume: float = 1.0):
        self.buttons = buttons
        self.sound_controller = sound_controller
        self.logger = logger
        self.preview_volume = preview_volume

    @classmethod
    def from_roster(cls, roster: AnimalRoster, buffers: Sequence[Any], layout: PanelLayout,
                    sound_controller: ISoundController, logger,
                    preview_volume: float = 1.0) -> 'SoundButtonPanel':
        """
        Build the panel for a roster.

        Args:
            roster: Animals in unlock order
            buffers: Sound buffer per animal, same order as the roster
            layout: Container geometry
            sound_controller: Audio collaborator used for previews
            logger: ClassLogger instance
            preview_volume: Playback volume for previews
        """
        buttons = []
        rows = layout_buttons(len(roster), layout)
        for index, ((spec, record), (x, y, width, height)) in enumerate(zip(roster, rows)):
            play_y = y + (height - layout.play_size) / 2
            buttons.append(SoundButton(
                animal_index=index,
                label=spec.display_name,
                x=x,
                y=y,
                width=width,
                height=height,
                play_x=x + width - layout.play_size - layout.play_margin,
                play_y=play_y,
                play_size=layout.play_size,
                lock_x=x + (width - layout.play_size) / 2,
                lock_y=play_y,
                buffer=buffers[index],
                unlocked=record.unlocked
            ))
        return cls(buttons, sound_controller, logger, preview_volume)

    def __len__(self) -> int:
        return len(self.buttons)

    def __getitem__(self, index: int) -> SoundButton:
        return self.buttons[index]

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Index of the unlocked button whose play control contains the point"""
        for i, button in enumerate(self.buttons):
            if button.unlocked and button.play_control_contains(x, y):
                return i
        return None

    def _is_rendering(self, button: SoundButton) -> bool:
        return (button.playback is not None
                and self.sound_controller.query_playback_state(button.playback) is PlaybackState.PLAYING)

    def on_play_toggle_clicked(self, index: int) -> bool:
        """
        Toggle a button's preview.

        Args:
            index: Button index

        Returns:
            The button's playing flag after the toggle
        """
        button = self.buttons[index]
        if not button.unlocked:
            self.logger.debug(f"Ignoring toggle on locked button {button.label}")
            return button.is_playing

        if self._is_rendering(button):
            self.sound_controller.stop_sound(button.playback)
            button.is_playing = False
            self.logger.info(f"Preview {button.label} paused")
        else:
            if button.playback is not None:
                self.sound_controller.release(button.playback)
            button.playback = self.sound_controller.play_sound(button.buffer, self.preview_volume)
            button.is_playing = button.playback is not None
            self.logger.info(f"Preview {button.label} playing")
        return button.is_playing

    def sync_unlocks(self, roster: AnimalRoster) -> None:
        for button in self.buttons:
            button.unlocked = roster.records[button.animal_index].unlocked

    def reconcile_playback(self) -> None:
        """Flip buttons back to "play" once their preview stopped on the device"""
        for button in self.buttons:
            if button.is_playing and not self._is_rendering(button):
                button.is_playing = False
                self.logger.debug(f"Preview {button.label} finished")

    def stop_all(self) -> None:
        for button in self.buttons:
            if button.playback is not None:
                self.sound_controller.release(button.playback)
                button.playback = None
            button.is_playing = False
