import pytest

from kairos.duration import Duration
from kairos.stopwatch import Stopwatch


class FakeClock:
    """Manually driven nanosecond clock."""

    def __init__(self, start=1_000):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def watch(clock):
    return Stopwatch(clock)


def run(clock, watch, script):
    """Play clock advances (ints) and method names; return the last result."""
    result = None
    for step in script:
        if isinstance(step, int):
            clock.now += step
        else:
            result = getattr(watch, step)()
    return result


def test_starts_running_at_zero(watch):
    assert watch.elapsed == Duration()
    assert watch.is_paused is False


def test_elapsed_follows_clock(clock, watch):
    clock.now += 250
    assert watch.elapsed == Duration(250)
    clock.now += 50
    assert watch.elapsed == Duration(300)


@pytest.mark.parametrize(
    "script, returned, paused, later, elapsed",
    [
        ([400, "restart"], 400, False, 30, 30),
        ([100, "pause"], 100, True, 10_000, 100),
        ([100, "pause", 5_000, "resume"], 100, False, 30, 130),
        ([70, "resume"], 70, False, 5, 75),
        ([600, "stop"], 600, True, 900, 0),
        ([600, "stop", "resume"], 0, False, 20, 20),
        ([80, "pause", 1_000, "restart"], 80, False, 15, 15),
    ],
)
def test_controls(clock, watch, script, returned, paused, later, elapsed):
    assert run(clock, watch, script) == Duration(returned)
    assert watch.is_paused is paused
    clock.now += later
    assert watch.elapsed == Duration(elapsed)


def test_multiple_pause_resume_cycles_accumulate(clock, watch):
    script = []
    for running in (10, 20, 30):
        script += [running, "pause", 999, "resume"]
    run(clock, watch, script)
    assert watch.elapsed == Duration(60)


def test_real_clock_is_monotonic():
    watch = Stopwatch()
    first = watch.elapsed
    second = watch.elapsed
    assert Duration() <= first <= second