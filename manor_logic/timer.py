"""Countdown timer sampled on demand from a monotonic clock."""

import time
from typing import Callable


def format_clock(seconds: int) -> str:
    """Whole seconds as "mm:ss"."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class Timer:
    """Fixed time budget that only starts counting once `start()` is called.

    Elapsed time is read from the clock whenever it is asked for, so real time
    passes while the game loop is blocked waiting for input.
    """

    def __init__(self, total_seconds: int, clock: Callable[[], float] = time.monotonic):
        self._total = int(total_seconds)
        self._clock = clock
        self._accumulated = 0.0
        self._started_at: float | None = None

    @property
    def total_seconds(self) -> int:
        return self._total

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        if self.running:
            return
        self._started_at = self._clock()

    def pause(self) -> None:
        if not self.running:
            return
        self._accumulated += self._clock() - self._started_at
        self._started_at = None

    def resume(self) -> None:
        self.start()

    def stop(self) -> None:
        self.pause()

    @property
    def elapsed_seconds(self) -> float:
        elapsed = self._accumulated
        if self.running:
            elapsed += self._clock() - self._started_at
        return elapsed

    @property
    def remaining_seconds(self) -> int:
        return max(0, self._total - int(self.elapsed_seconds))

    @property
    def expired(self) -> bool:
        return self.remaining_seconds <= 0

    @property
    def remaining_formatted(self) -> str:
        return format_clock(self.remaining_seconds)
