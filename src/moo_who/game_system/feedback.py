"""
Feedback message - transient on-screen text with countdown expiry
"""

from typing import Tuple

from .config import Color


YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
WHITE: Color = (255, 255, 255)

CORRECT_TEXT = "CORRECT!"
WRONG_TEXT = "WRONG!"
COMPLETE_TEXT = "ALL ANIMALS FOUND!"


class FeedbackMessage:
    """Single feedback slot; a new message replaces whatever is showing"""

    def __init__(self):
        self.text = ""
        self.color: Color = YELLOW
        self.remaining_s = 0.0
        self._set_this_frame = False

    def set_message(self, text: str, color: Color, duration_s: float) -> None:
        self.text = text
        self.color = color
        self.remaining_s = duration_s
        self._set_this_frame = True

    def update(self, dt: float) -> None:
        """
        Count down; the text is cleared once the timer reaches zero.

        The update on the frame that set the message does not count down,
        its dt elapsed before the message existed.
        """
        if self._set_this_frame:
            self._set_this_frame = False
        elif self.remaining_s > 0.0:
            self.remaining_s -= dt

        if self.remaining_s <= 0.0:
            # Color is left as-is, nothing is drawn without text
            self.text = ""

    @property
    def is_visible(self) -> bool:
        return bool(self.text) and self.remaining_s > 0.0

    def snapshot(self) -> Tuple[str, Color]:
        return self.text, self.color
