"""
Pop animation - a short scale pulse acknowledging a click on a sprite
"""


class PopAnimation:
    """
    Linear scale pulse: 1.0 -> peak over the first half, peak -> 1.0 over the second.

    Driven by the frame delta rather than wall-clock polling, so it is
    deterministic under test. The frame that triggers the pulse does not
    advance it: that frame's dt elapsed before the click, so the pulse is
    drawn at scale 1.0 first and starts counting on the next frame.

    Example:
        pop = PopAnimation(duration_s=0.5, peak_scale=1.3)
        pop.trigger()
        pop.advance(0.016)  # triggering frame, pop.scale == 1.0
        pop.advance(0.25)   # pop.scale == 1.3
        pop.advance(0.25)   # pop.scale == 1.0, pop.is_popping is False
    """

    def __init__(self, duration_s: float = 0.5, peak_scale: float = 1.3):
        self.duration_s = duration_s
        self.peak_scale = peak_scale
        self.is_popping = False
        self.timer = 0.0
        self.scale = 1.0
        self._started_this_frame = False

    def trigger(self) -> None:
        """Start (or restart) the pulse from the beginning"""
        self.is_popping = True
        self.timer = 0.0
        self.scale = 1.0
        self._started_this_frame = True

    def scale_at(self, t: float) -> float:
        """
        Scale factor at a given time into the pulse.

        Args:
            t: Seconds since trigger

        Returns:
            Scale factor, exactly 1.0 at and after the end of the pulse
        """
        if t <= 0.0 or t >= self.duration_s:
            return 1.0
        progress = t / self.duration_s
        amplitude = self.peak_scale - 1.0
        if progress < 0.5:
            return 1.0 + amplitude * (progress * 2)
        return self.peak_scale - amplitude * ((progress - 0.5) * 2)

    def advance(self, dt: float) -> None:
        """
        Advance the pulse by dt seconds (no-op when idle).

        Args:
            dt: Delta time since last frame in seconds
        """
        if not self.is_popping:
            return
        if self._started_this_frame:
            self._started_this_frame = False
            return

        self.timer += dt
        if self.timer >= self.duration_s:
            self.is_popping = False
            self.scale = 1.0
        else:
            self.scale = self.scale_at(self.timer)
