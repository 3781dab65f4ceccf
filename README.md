# kairos

A small timing toolkit for game loops, simulations and event playback.

## What is inside

- `kairos.duration.Duration`: an immutable span of time held in whole
  nanoseconds (`nano`). It can be built with `Duration(nano)`,
  `Duration.from_seconds(...)`, `from_minutes`, `from_hours`,
  `from_milliseconds` and `from_microseconds`, and read back with
  `as_nanoseconds()`, `as_microseconds()`, `as_milliseconds()`,
  `as_seconds()` and `as_minutes()`. Two durations can be added, subtracted
  and compared, and a duration can be multiplied or divided by a number.
- `kairos.absorel.Absorel`: a frozen position made of a whole step
  (`absolute`) and an offset from it (`relative`). `Absorel.from_number(2.75)`
  splits a number into its floor and remainder. It supports `+` and `-` with
  another `Absorel` or a number, `*` and `/` by a number, the comparisons
  `<`, `>`, `<=`, `>=`, and `float()`.
- `kairos.stopwatch.Stopwatch`: a pausable stopwatch. `elapsed` is a property;
  `restart()`, `pause()`, `resume()` and `stop()` each return a `Duration`;
  `is_paused` is a property.
- `kairos.timer.Timer`: a pausable countdown timer. `set_time(duration)`,
  `start()` / `resume()`, `pause()`, `stop()` / `finish()`, `reset()`,
  `restart()`, `remaining()`, and the properties `is_done` and `is_paused`.
- `kairos.continuum.Continuum`: a clock whose `speed` property can be changed
  while it runs; its `time` property can be read and set. `go()`, `stop()`,
  `reset()` and `is_stopped`.
- `kairos.basic_clock.BasicClock`: the current UTC time of day.
  `current_time()` returns a `ClockTime(hour, minute, second)`; the properties
  `hour`, `minute` and `second` read the clock on their own.
- `kairos.fps_lite.FpsLite`: a frames-per-second counter. Call `update()`
  once per frame; `fps` is recomputed once at least a second has passed.
- `kairos.timestep_lite.TimestepLite`: a fixed-step accumulator fed by hand
  with `update(frame_time)` and drained with `is_time_to_integrate()`.
- `kairos.timestep.Timestep`: a fixed-step accumulator that measures frame
  time itself, with `max_accumulation`, `interpolation_alpha`, `time_speed`,
  `overall`, `time`, `pause()`, `unpause()` and `reset_time()`.
- `kairos.yalpes.Yalpes`: playback of timed `Event`s held in one or more
  `Track`s.

Every class that reads a clock takes an optional `clock` callable, so tests
and replays can drive time by hand. For `Stopwatch`, `Timer`, `Continuum`,
`FpsLite`, `Timestep` and `Yalpes` it returns a monotonic time in
nanoseconds; for `BasicClock` it returns seconds since the epoch.

## A fixed-step loop

```python
from kairos.timestep import Timestep

timestep = Timestep()
timestep.step = 1 / 60
timestep.max_accumulation = 0.25

while running:
    timestep.add_frame()
    while timestep.is_update_required():
        simulate(timestep.step)
    draw(alpha=timestep.interpolation_alpha)
```

## A countdown

```python
from kairos.duration import Duration
from kairos.timer import Timer

timer = Timer()
timer.set_time(Duration.from_seconds(5))
timer.start()
...
print(timer.remaining().as_seconds())
if timer.is_done:
    print("time is up")
```

## Driving time by hand

```python
from kairos.stopwatch import Stopwatch

now = 0
stopwatch = Stopwatch(clock=lambda: now)
now = 1_500_000_000
print(stopwatch.elapsed.as_seconds())  # 1.5
```

## Playing events

```python
from kairos.absorel import Absorel
from kairos.yalpes import Event, Yalpes

player = Yalpes()
player.tracks[0].events.append(Event(Absorel(1, 0.5), kind=1, data="beep"))
player.play()

while player.is_playing:
    player.update()
    for event in player.tracks[0].events_waiting:
        handle(event)
```

Positions are counted in steps; at speed 1 one step passes per second.
`speed` accepts values from 1 to 1000 and ignores others. `seek(position)`
jumps to a step (or an `Absorel`) and pauses; `rewind()` goes back to the
start. `string_from_position(position)` formats a position as
`step:substep` using `substeps` (4 by default). Once playback runs past the
last event, `update()` pauses and rewinds.

## What it does not do

This is a library only: it has no command-line program, draws nothing and
reads no input devices. Frame pacing, rendering and the loop itself are left
to the code that uses it.

## Running the tests

```
pip install -e .[test]
pytest
```