"""Wall-clock time of day taken from the system clock."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

_SECONDS_IN_MINUTE = 60
_SECONDS_IN_HOUR = 3600
_SECONDS_IN_DAY = 86400


@dataclass(frozen=True)
class ClockTime:
    """A time of day in hours, minutes and seconds."""

    hour: int
    minute: int
    second: int


class BasicClock:
    """Reports the current UTC time of day.

    ``clock`` is a callable returning seconds since the epoch.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def _seconds(self) -> int:
        return int(self._clock())

    def current_time(self) -> ClockTime:
        """Hour, minute and second read from one clock sample."""
        seconds = self._seconds()
        return ClockTime(
            hour=seconds % _SECONDS_IN_DAY // _SECONDS_IN_HOUR,
            minute=seconds % _SECONDS_IN_HOUR // _SECONDS_IN_MINUTE,
            second=seconds % _SECONDS_IN_MINUTE,
        )

    @property
    def hour(self) -> int:
        return self._seconds() % _SECONDS_IN_DAY // _SECONDS_IN_HOUR

    @property
    def minute(self) -> int:
        return self._seconds() % _SECONDS_IN_HOUR // _SECONDS_IN_MINUTE

    @property
    def second(self) -> int:
        return self._seconds() % _SECONDS_IN_MINUTE