from kairos.basic_clock import BasicClock, ClockTime


def _clock_at(days, hour, minute, second, fraction=0.0):
    value = days * 86400 + hour * 3600 + minute * 60 + second + fraction
    return lambda: value


def test_components_from_clock():
    clock = BasicClock(_clock_at(10, 3, 25, 7))
    assert clock.hour == 3
    assert clock.minute == 25
    assert clock.second == 7


def test_current_time_matches_components():
    clock = BasicClock(_clock_at(2, 23, 59, 58))
    assert clock.current_time() == ClockTime(23, 59, 58)


def test_fractional_seconds_are_truncated():
    clock = BasicClock(_clock_at(0, 12, 0, 30, 0.9))
    assert clock.current_time() == ClockTime(12, 0, 30)


def test_epoch_is_midnight():
    clock = BasicClock(lambda: 0)
    assert clock.current_time() == ClockTime(0, 0, 0)


def test_real_clock_is_within_range():
    now = BasicClock().current_time()
    assert 0 <= now.hour < 24
    assert 0 <= now.minute < 60
    assert 0 <= now.second < 60