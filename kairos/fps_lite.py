"""A simple frames-per-second counter."""

from __future__ import annotations

from kairos.stopwatch import Clock, Stopwatch, default_clock


class FpsLite:
    """Counts frames and recomputes the rate once at least a second passes."""

    def __init__(self, clock: Clock = default_clock) -> None:
        self._stopwatch = Stopwatch(clock)
        self._frames_passed = 0
        self._fps = 0.0

    @property
    def fps(self) -> float:
        return self._fps

    def update(self) -> None:
        """Record one frame; call once per frame."""
        self._frames_passed += 1
        if self._stopwatch.elapsed.as_seconds() >= 1.0:
            self._fps = self._frames_passed / self._stopwatch.restart().as_seconds()
            self._frames_passed = 0

    def reset(self) -> None:
        """Restart the clock and forget the frames counted so far."""
        self._frames_passed = 0
        self._stopwatch.restart()