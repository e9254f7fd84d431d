"""A countdown timer driven by per-frame delta time."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """Counts down from a set number of seconds."""

    remaining: float = 0.0
    maximum: float = 0.0

    def set(self, seconds: float) -> None:
        """Start the countdown at ``seconds`` and remember it as the maximum."""
        self.remaining = seconds
        self.maximum = seconds

    def tick(self, delta_time: float) -> None:
        """Advance the countdown by one frame; call once per frame."""
        if self.remaining > 0.0:
            self.remaining -= delta_time

    def is_done(self) -> bool:
        """True once no time is left."""
        return self.remaining <= 0.0

    def seconds_remaining(self) -> float:
        """Seconds left, never below zero."""
        return max(self.remaining, 0.0)