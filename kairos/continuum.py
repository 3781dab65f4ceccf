"""A stoppable flow of time that can run at any speed."""

from __future__ import annotations

from kairos.duration import Duration
from kairos.stopwatch import Clock, Stopwatch, default_clock


class Continuum:
    """Accumulates time from a stopwatch, scaled by an adjustable speed."""

    def __init__(self, clock: Clock = default_clock) -> None:
        self._stopwatch = Stopwatch(clock)
        self._time = Duration()
        self._speed = 1.0

    def _update_time(self) -> None:
        was_stopped = self._stopwatch.is_paused
        self._time += self._stopwatch.restart() * self._speed
        if was_stopped:
            self._stopwatch.stop()

    def reset(self) -> Duration:
        """Zero the time, restore normal speed and run; return the old time."""
        previous = self.time
        self._stopwatch.restart()
        self._time = Duration()
        self._speed = 1.0
        return previous

    def go(self) -> None:
        self._stopwatch.resume()

    def stop(self) -> None:
        self._stopwatch.pause()

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, speed: float) -> None:
        self._update_time()
        self._speed = speed

    @property
    def time(self) -> Duration:
        self._update_time()
        return self._time

    @time.setter
    def time(self, value: Duration) -> None:
        self._update_time()
        self._time = value

    @property
    def is_stopped(self) -> bool:
        return self._stopwatch.is_paused