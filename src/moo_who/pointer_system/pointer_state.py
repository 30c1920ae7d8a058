"""
PointerState - pointer snapshot with calculated edge fields
"""

from dataclasses import dataclass, field


@dataclass
class PointerState:
    """
    Snapshot of the primary pointer button with automatic edge detection.

    Coordinates are normalized to [-1, 1] on both axes, y pointing up.

    Usage:
        state = PointerState(x=0.1, y=-0.3, is_pressed=True, was_pressed=False)
        if state.was_clicked:
            handle_click(state.x, state.y)
    """
    x: float
    y: float
    is_pressed: bool     # Current button state
    was_pressed: bool    # Button state on the previous frame

    # Calculated fields (not in constructor)
    was_clicked: bool = field(init=False)    # Press edge: released -> pressed
    was_released: bool = field(init=False)   # Release edge: pressed -> released

    def __post_init__(self):
        if not isinstance(self.is_pressed, bool) or not isinstance(self.was_pressed, bool):
            raise TypeError("is_pressed and was_pressed must be bool")

        self.was_clicked = self.is_pressed and not self.was_pressed
        self.was_released = self.was_pressed and not self.is_pressed

    @property
    def position(self):
        return (self.x, self.y)

    def __str__(self) -> str:
        return (
            f"PointerState(pos=({self.x:.3f}, {self.y:.3f}), "
            f"pressed={self.is_pressed}, clicked={self.was_clicked})"
        )
