"""
Timing utility for throttling execution in the frame loop
"""

import time


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    The frame loop runs every ~16ms; housekeeping such as resource logging
    should not.

    Example:
        self.memory_monitor = OnceInMs(60000)  # Once per minute

        # In update loop:
        if self.memory_monitor.should_execute():
            self._log_memory_usage()
    """

    def __init__(self, interval_ms: int):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self.last_execution = 0.0

    def should_execute(self) -> bool:
        """
        Check if the interval has passed, restarting it if so.

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = time.time()
        if current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force the next should_execute() call to return True"""
        self.last_execution = 0.0
