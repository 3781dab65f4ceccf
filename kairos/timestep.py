"""A fixed timestep driven by real elapsed time."""

from __future__ import annotations

from collections.abc import Callable
from time import perf_counter_ns

from kairos.continuum import Continuum

_ZERO_EPSILON = 0.00001


def _should_be_zero(value: float) -> bool:
    return -_ZERO_EPSILON < value < _ZERO_EPSILON


class Timestep:
    """Splits the time between frames into fixed steps.

    Call ``add_frame`` once per frame. Then call ``is_update_required``
    until it returns false, running one update each time it returns true.
    ``clock`` is a callable returning a monotonic time in nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = perf_counter_ns) -> None:
        self._continuum = Continuum(clock)
        self._step = 0.01
        self._accumulator = 0.0
        self._overall = 0.0
        self._max_accumulation = 0.1
        self._time_speed = 1.0

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, step: float) -> None:
        self._step = 0.0 if _should_be_zero(step) else step
        self.max_accumulation = self._max_accumulation

    @property
    def max_accumulation(self) -> float:
        """Most time processed at once; the excess is discarded."""
        return self._max_accumulation

    @max_accumulation.setter
    def max_accumulation(self, value: float) -> None:
        self._max_accumulation = self._step if value < self._step else value

    @property
    def time_speed(self) -> float:
        return self._time_speed

    @time_speed.setter
    def time_speed(self, speed: float) -> None:
        self._time_speed = speed
        self._continuum.speed = speed

    def reset_time(self) -> None:
        """Restart the time source and forget the time processed."""
        self._continuum.reset()
        self._overall = 0.0

    def is_update_required(self) -> bool:
        """Consume one step if enough time has accumulated."""
        if self._accumulator > self._max_accumulation:
            self._accumulator = self._max_accumulation
        step = self._step
        if (step > 0.0 and self._accumulator >= step) or (
            step < 0.0 and self._accumulator <= step
        ):
            self._accumulator -= step
            self._overall += step
            return True
        return False

    @property
    def interpolation_alpha(self) -> float:
        """Unprocessed time as a fraction of one step."""
        if self._accumulator < self._step:
            return self._accumulator / self._step
        return 1.0

    def add_frame(self) -> None:
        """Add the time passed since the previous frame."""
        frame_time = self._continuum.reset().as_seconds()
        self._continuum.speed = self._time_speed
        self._accumulator += frame_time

    @property
    def overall(self) -> float:
        """Time processed in whole steps, less the step in progress."""
        return self._overall - self._step if self._overall > self._step else 0.0

    @property
    def time(self) -> float:
        """Time processed, including the interpolated part of a step."""
        return self.overall + self.interpolation_alpha * self._step

    def pause(self) -> None:
        self._continuum.stop()

    def unpause(self) -> None:
        self._continuum.go()

    @property
    def is_paused(self) -> bool:
        return self._continuum.is_stopped