"""A pausable countdown timer."""

from __future__ import annotations

from kairos.duration import Duration
from kairos.stopwatch import Clock, Stopwatch, default_clock


class Timer:
    """Counts down from a starting time.

    A new timer is done and paused; give it a time with ``set_time`` and
    call ``start``.
    """

    def __init__(self, clock: Clock = default_clock) -> None:
        self._stopwatch = Stopwatch(clock)
        self._stopwatch.stop()
        self._start_time = Duration()
        self._done = True

    def set_time(self, time: Duration) -> None:
        """Set a new starting time, which also becomes the time remaining."""
        self._start_time = time
        if self._stopwatch.is_paused:
            self.reset()
        else:
            self.restart()

    def remaining(self) -> Duration:
        """Time left; finishes the timer once it has run out."""
        if (self._start_time - self._stopwatch.elapsed).nano < 0:
            self.stop()
        if self._done:
            return self._stopwatch.elapsed
        return self._start_time - self._stopwatch.elapsed

    @property
    def is_done(self) -> bool:
        return self._done

    @property
    def is_paused(self) -> bool:
        return self._stopwatch.is_paused

    def start(self) -> None:
        """Begin counting down if there is time left."""
        if self.remaining().nano > 0:
            self._done = False
            self._stopwatch.resume()

    def resume(self) -> None:
        self.start()

    def pause(self) -> None:
        self._stopwatch.pause()

    def stop(self) -> None:
        """Finish counting down and zero the time."""
        self._done = True
        self._stopwatch.stop()

    def finish(self) -> None:
        self.stop()

    def reset(self) -> None:
        """Return to the starting time, staying paused if paused."""
        self._done = False
        if self._stopwatch.is_paused:
            self._stopwatch.stop()
        else:
            self._stopwatch.restart()

    def restart(self) -> None:
        """Return to the starting time and run."""
        self._done = False
        self._stopwatch.restart()