import pytest

from kairos.timestep_lite import TimestepLite


@pytest.fixture
def quarter():
    timestep = TimestepLite()
    timestep.step = 0.25
    return timestep


def integrate(timestep, frame_time):
    """Add a frame and count the steps it yields."""
    timestep.update(frame_time)
    count = 0
    while timestep.is_time_to_integrate():
        count += 1
    return count


def test_defaults():
    timestep = TimestepLite()
    assert timestep.step == 0.01
    assert timestep.overall == 0.0
    assert timestep.is_time_to_integrate() is False


@pytest.mark.parametrize("tiny", [0.000001, -0.000001])
def test_tiny_step_becomes_zero(tiny):
    timestep = TimestepLite()
    timestep.step = tiny
    assert timestep.step == 0.0


def test_zero_step_never_integrates():
    timestep = TimestepLite()
    timestep.step = 0.0
    assert integrate(timestep, 10.0) == 0


def test_accumulated_time_split_into_steps(quarter):
    assert integrate(quarter, 1.0) == 4
    assert quarter.overall == pytest.approx(0.75)


def test_leftover_time_carries_over(quarter):
    assert integrate(quarter, 0.375) == 1
    assert integrate(quarter, 0.125) == 1


def test_single_step_reports_no_overall(quarter):
    assert integrate(quarter, 0.25) == 1
    assert quarter.overall == 0.0


def test_negative_step_consumes_negative_time():
    timestep = TimestepLite()
    timestep.step = -0.25
    assert integrate(timestep, -0.5) == 2
    assert timestep.overall == 0.0


def test_positive_step_ignores_negative_time(quarter):
    assert integrate(quarter, -1.0) == 0