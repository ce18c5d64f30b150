"""Millisecond interval timer."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Reports when a delay has passed since it was last started or fired.

    ``clock`` returns the current time in nanoseconds.
    """

    def __init__(self, delay_ms: int, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic_ns
        self.delay_ms = delay_ms
        self._start = self._clock()

    def update(self, delay_ms: int) -> None:
        """Set a new delay and restart the timer."""
        self.delay_ms = delay_ms
        self._start = self._clock()

    def destroy(self) -> None:
        self.delay_ms = -1

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the timer was last started."""
        return (self._clock() - self._start) // 1_000_000

    def time_over(self) -> bool:
        """Return True and restart if more than the delay has passed."""
        if self.elapsed_ms() > self.delay_ms:
            self._start = self._clock()
            return True
        return False

    def wait_ticks(self, ticks: int) -> None:
        """Block until the timer has fired ``ticks`` times."""
        count = 0
        while count < ticks:
            if self.time_over():
                count += 1
            else:
                time.sleep(0.001)

    def describe(self) -> str:
        return f"Timer:  {self.elapsed_ms()}"