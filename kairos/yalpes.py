"""A playback engine for sequences of timed events."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from time import perf_counter_ns
from typing import Any

from kairos.absorel import Absorel
from kairos.duration import Duration
from kairos.stopwatch import Stopwatch

_MIN_SPEED = 1.0
_MAX_SPEED = 1000.0


@dataclass
class Event:
    """Something that happens at a position in a track."""

    position: Absorel = field(default_factory=Absorel)
    kind: int = 0
    data: Any = None

    def __lt__(self, other: Event) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return float(self.position) < float(other.position)

    def __gt__(self, other: Event) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return float(self.position) > float(other.position)


@dataclass
class Track:
    """A list of events played in parallel with the other tracks."""

    events: list[Event] = field(default_factory=list)
    event_queue: list[Event] = field(default_factory=list)
    events_waiting: list[Event] = field(default_factory=list)
    _activated: bool = field(default=True, repr=False)

    def activate(self) -> None:
        self._activated = True

    def deactivate(self) -> None:
        """Switch the track off and drop its queued and waiting events."""
        self._activated = False
        self.event_queue.clear()
        self.events_waiting.clear()

    @property
    def is_activated(self) -> bool:
        return self._activated


class Yalpes:
    """Plays back tracks of events, moving due events to each track's waiting list.

    Positions are measured in steps; one step passes per second at speed 1.
    ``clock`` is a callable returning a monotonic time in nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = perf_counter_ns) -> None:
        self.tracks: list[Track] = [Track()]
        self.remove_waiting_on_update = True
        self._playing = False
        self._playback_clock = Stopwatch(clock)
        self._speed = 1.0
        self._substeps = 4
        self._position = Absorel()
        self._start_position = Absorel()
        self._length_in_steps = 0

    def update(self) -> None:
        """Advance the playback position; stop and rewind past the end."""
        if not self._playing:
            return
        if self._position > Absorel(self._length_in_steps):
            self.pause()
            self.rewind()
            return
        played = self.play_time.as_seconds() * self._speed
        self._position = self._start_position + Absorel.from_number(played)
        if self.remove_waiting_on_update:
            self._clear_waiting()
        self.move_due_events_to_waiting()

    def move_due_events_to_waiting(self) -> None:
        """Move queued events placed before the current position to waiting."""
        for track in self.tracks:
            due = [event for event in track.event_queue if event.position < self._position]
            track.events_waiting.extend(due)
            del track.event_queue[: len(due)]

    def prepare_event_queue(self) -> None:
        """Fill each queue from its track's events in order of position."""
        latest_step = 0
        self._clear_waiting()
        for track in self.tracks:
            track.event_queue = sorted(track.events, key=lambda e: float(e.position))
            for event in track.events:
                place = float(event.position)
                if latest_step < place:
                    latest_step = math.ceil(place)
        self.move_due_events_to_waiting()
        self._clear_waiting()
        self._length_in_steps = latest_step

    def play(self) -> None:
        self._start_position = self._position
        self.prepare_event_queue()
        self._playing = True
        self._playback_clock.restart()

    def stop(self) -> None:
        self.pause()
        self.rewind()

    def pause(self) -> None:
        self.move_due_events_to_waiting()
        self._clear_waiting()
        self._playing = False

    def seek(self, position: Absorel | int, relative: float = 0.0) -> None:
        """Jump to a position and pause; negative positions go to the start."""
        if isinstance(position, Absorel):
            absolute, relative = position.absolute, position.relative
        else:
            absolute = int(position)
        if absolute < 0 or absolute + relative < 0:
            absolute, relative = 0, 0.0
        self._position = Absorel(absolute, relative)
        self._start_position = self._position
        self.pause()

    def rewind(self) -> None:
        self.seek(0)

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, speed: float) -> None:
        """Values outside 1 to 1000 are ignored."""
        if _MIN_SPEED <= speed <= _MAX_SPEED:
            self._speed = speed

    @property
    def substeps(self) -> int:
        return self._substeps

    @substeps.setter
    def substeps(self, substeps: int) -> None:
        self._substeps = substeps

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def position(self) -> Absorel:
        return self._position

    @property
    def play_time(self) -> Duration:
        return self._playback_clock.elapsed

    def string_from_position(self, position: Absorel) -> str:
        """Format a position as ``step:substep``."""
        substep = math.floor(position.relative * self._substeps)
        return f"{position.absolute}:{substep}"

    @property
    def number_of_tracks(self) -> int:
        return len(self.tracks)

    @property
    def number_of_active_tracks(self) -> int:
        return sum(1 for track in self.tracks if track.is_activated)

    def _clear_waiting(self) -> None:
        for track in self.tracks:
            track.events_waiting.clear()