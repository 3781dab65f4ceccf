from unittest.mock import Mock

import pytest

from kairos.duration import Duration
from kairos.timer import Timer

START = Duration(1000)


@pytest.fixture
def clock():
    return Mock(return_value=0)


@pytest.fixture
def timer(clock):
    return Timer(clock)


@pytest.fixture
def running(timer):
    timer.set_time(START)
    timer.start()
    return timer


def wait(clock, nanoseconds):
    clock.return_value += nanoseconds


def test_new_timer_is_done_and_paused(timer):
    assert timer.is_done is True
    assert timer.is_paused is True
    assert timer.remaining() == Duration()


def test_start_without_time_does_nothing(clock, timer):
    timer.start()
    wait(clock, 100)
    assert timer.is_done is True
    assert timer.is_paused is True


def test_set_time_on_paused_timer(clock, timer):
    timer.set_time(START)
    wait(clock, 400)
    assert timer.is_done is False
    assert timer.is_paused is True
    assert timer.remaining() == START


def test_counts_down_after_start(clock, running):
    wait(clock, 300)
    assert running.is_paused is False
    assert running.remaining() == Duration(700)


def test_finishes_when_time_runs_out(clock, running):
    wait(clock, 2000)
    assert running.remaining() == Duration()
    assert running.is_done is True
    assert running.is_paused is True


def test_pause_holds_remaining_time(clock, running):
    wait(clock, 200)
    running.pause()
    wait(clock, 500)
    assert running.remaining() == Duration(800)
    running.resume()
    wait(clock, 100)
    assert running.remaining() == Duration(700)


def test_reset_while_paused_restores_start_time(clock, running):
    wait(clock, 300)
    running.pause()
    running.reset()
    assert running.is_paused is True
    assert running.remaining() == START


def test_reset_while_running_keeps_running(clock, running):
    wait(clock, 300)
    running.reset()
    wait(clock, 50)
    assert running.is_paused is False
    assert running.remaining() == Duration(950)


def test_restart_runs_from_start_time(clock, timer):
    timer.set_time(START)
    timer.restart()
    wait(clock, 250)
    assert timer.is_paused is False
    assert timer.remaining() == Duration(750)


def test_set_time_while_running_restarts(clock, running):
    wait(clock, 600)
    running.set_time(Duration(5000))
    wait(clock, 100)
    assert running.remaining() == Duration(4900)


@pytest.mark.parametrize("ending", ["finish", "stop"])
def test_finish_and_stop(clock, running, ending):
    wait(clock, 100)
    getattr(running, ending)()
    assert running.is_done is True
    assert running.is_paused is True
    assert running.remaining() == Duration()