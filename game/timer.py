"""Tick-counted countdown used to pace spawning."""

from .constants import TICKS_PER_SECOND


class Timer:
    """Counts simulation ticks up to a fixed target."""

    def __init__(self, duration_ms: int, ticks_per_second: int = TICKS_PER_SECOND):
        """
        Initialize the timer.

        Args:
            duration_ms: Time until the timer is ready, in milliseconds
            ticks_per_second: Fixed simulation rate used to convert to ticks
        """
        self.current_ticks = 0
        self.target_ticks = duration_ms * ticks_per_second // 1000

    def update(self):
        """Advance one tick, stopping at the target."""
        if self.current_ticks < self.target_ticks:
            self.current_ticks += 1

    advance = update

    def is_ready(self) -> bool:
        return self.current_ticks >= self.target_ticks

    def reset(self):
        self.current_ticks = 0
