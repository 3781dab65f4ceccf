"""A pausable stopwatch."""

from __future__ import annotations

import time
from collections.abc import Callable

from kairos.duration import Duration

Clock = Callable[[], int]
"""A callable returning a monotonic time in nanoseconds."""

default_clock: Clock = time.perf_counter_ns


class Stopwatch:
    """Measures elapsed time and can be paused, resumed and restarted."""

    def __init__(self, clock: Clock = default_clock) -> None:
        self._clock = clock
        self._start = clock()
        self._paused = False
        self._accumulated = Duration()

    @property
    def elapsed(self) -> Duration:
        """Time accumulated so far, including the running stretch."""
        if self._paused:
            return self._accumulated
        return self._accumulated + Duration(self._clock() - self._start)

    @property
    def is_paused(self) -> bool:
        return self._paused

    def restart(self) -> Duration:
        """Reset to zero, start running and return the time measured before."""
        now = self._clock()
        previous_start, self._start = self._start, now
        measured = self._accumulated
        self._accumulated = Duration()
        if not self._paused:
            measured += Duration(now - previous_start)
        self._paused = False
        return measured

    def pause(self) -> Duration:
        """Stop counting, keeping the time measured; return that time."""
        self._accumulated = self.restart()
        self._paused = True
        return self._accumulated

    def resume(self) -> Duration:
        """Continue counting from the time kept; return that time."""
        if not self._paused:
            return self.elapsed
        self._accumulated = self.restart()
        self._paused = False
        return self._accumulated

    def stop(self) -> Duration:
        """Pause and reset to zero; return the time measured before."""
        self.pause()
        measured = self._accumulated
        self._accumulated = Duration()
        return measured