"""
Pending unlock - one deferred unlock slot counted down once per frame
"""

import enum
from typing import Optional


class PendingUnlockPhase(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"


class PendingUnlock:
    """
    One-shot delayed unlock.

    IDLE --schedule--> PENDING(target, remaining)
    PENDING --update(dt), remaining > 0--> PENDING(target, remaining - dt)
    PENDING --update(dt), remaining <= 0--> IDLE, target returned to the caller

    The update on the frame that scheduled the unlock does not count down:
    that frame's dt elapsed before the click, so the delay is measured
    from the click itself.

    Only one slot exists. Scheduling while PENDING hands the in-flight
    target back to the caller so it can be applied right away.
    """

    def __init__(self, logger):
        self.logger = logger
        self.phase = PendingUnlockPhase.IDLE
        self.target_index: Optional[int] = None
        self.remaining_s = 0.0
        self._scheduled_this_frame = False

    @property
    def is_pending(self) -> bool:
        return self.phase is PendingUnlockPhase.PENDING

    def schedule(self, target_index: int, delay_s: float) -> Optional[int]:
        """
        Schedule an unlock.

        Args:
            target_index: Roster index to unlock
            delay_s: Seconds until the unlock resolves

        Returns:
            Index of a previously pending target that must be unlocked now, or None
        """
        preempted = None
        if self.is_pending:
            preempted = self.target_index
            self.logger.warning(
                f"Unlock of animal #{preempted} still pending while scheduling #{target_index} - resolving it now"
            )

        self.phase = PendingUnlockPhase.PENDING
        self.target_index = target_index
        self.remaining_s = delay_s
        self._scheduled_this_frame = True
        self.logger.debug(f"Unlock of animal #{target_index} scheduled in {delay_s:.2f}s")
        return preempted

    def update(self, dt: float) -> Optional[int]:
        """
        Count down the pending unlock.

        Args:
            dt: Delta time since last frame in seconds

        Returns:
            The target index on the frame the unlock resolves, otherwise None
        """
        if not self.is_pending:
            return None
        if self._scheduled_this_frame:
            self._scheduled_this_frame = False
            return None

        self.remaining_s -= dt
        if self.remaining_s > 0.0:
            return None

        target = self.target_index
        self.cancel()
        return target

    def cancel(self) -> None:
        self.phase = PendingUnlockPhase.IDLE
        self.target_index = None
        self.remaining_s = 0.0
        self._scheduled_this_frame = False
