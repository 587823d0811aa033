"""
clock.py: Turns successive frame timestamps into a clamped delta time.
"""

from typing import Optional

from .constants import BASELINE_DT, MAX_DT


class FrameClock:
    """Frame-to-frame delta time in seconds, guarded against long stalls."""

    def __init__(self, baseline: float = BASELINE_DT, max_dt: float = MAX_DT):
        self.baseline = baseline
        self.max_dt = max_dt
        self.last_timestamp: Optional[float] = None

    def reset(self):
        """Forget the previous timestamp; the next delta is the baseline."""
        self.last_timestamp = None

    def delta(self, timestamp_ms: float) -> float:
        if self.last_timestamp is None:
            dt = self.baseline
        else:
            dt = (timestamp_ms - self.last_timestamp) / 1000.0
        self.last_timestamp = timestamp_ms

        # No lower bound: a zero step is valid and leaves entities unchanged
        return min(dt, self.max_dt)
