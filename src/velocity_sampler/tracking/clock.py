"""Clock sources for timestamping samples."""
from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


def monotonic_seconds() -> float:
    """Seconds from the high resolution monotonic counter."""
    return time.perf_counter()


class ManualClock:
    """Clock that only moves when told to.

    Useful for replaying recorded input or driving a sampler deterministically.
    """

    def __init__(self, start: float = 0.0) -> None:
        """Initialize the clock at `start` seconds."""
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        """Move the clock forward and return the new time."""
        self.now += float(seconds)
        return self.now

    def set(self, seconds: float) -> None:
        """Jump to an absolute time."""
        self.now = float(seconds)
