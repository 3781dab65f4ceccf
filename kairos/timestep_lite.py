"""A minimal fixed timestep accumulator."""

from __future__ import annotations

_ZERO_EPSILON = 0.00001


def _should_be_zero(value: float) -> bool:
    return -_ZERO_EPSILON < value < _ZERO_EPSILON


class TimestepLite:
    """Splits accumulated frame time into fixed steps."""

    def __init__(self) -> None:
        self._step = 0.01
        self._accumulator = 0.0
        self._overall = 0.0

    def update(self, frame_time: float) -> None:
        """Add the time a frame took, in seconds."""
        self._accumulator += frame_time

    def is_time_to_integrate(self) -> bool:
        """Consume one step if enough time has accumulated."""
        step = self._step
        if (step > 0.0 and self._accumulator >= step) or (
            step < 0.0 and self._accumulator <= step
        ):
            self._accumulator -= step
            self._overall += step
            return True
        return False

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, step: float) -> None:
        self._step = 0.0 if _should_be_zero(step) else step

    @property
    def overall(self) -> float:
        """Time processed in whole steps, less the step in progress."""
        return self._overall - self._step if self._overall > self._step else 0.0