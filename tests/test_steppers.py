"""Tests for stepper support."""

from ratewheel import Rate, TimeUnit


def test_max_step_index_is_one_below_wheel_size():
    """Test that the stepper range is the last valid wheel index."""
    assert Rate(5.0).max_step_index == 100
    assert Rate(5.0, allow_pause=True).max_step_index == 101
    assert Rate.from_time(5, TimeUnit.MINUTES).max_step_index == 98


def test_step_index_follows_time_index():
    """Test that steppers share the time wheel positions."""
    rate = Rate(5.0)

    assert rate.step_index == rate.time_index == 6


def test_set_time_from_step_index():
    """Test committing a stepper value."""
    rate = Rate(5.0)

    rate.set_time_from_step_index(4)
    assert rate.seconds == 3

    rate.set_time_from_step_index(rate.max_step_index)
    assert rate.seconds == 99

    rate.set_time_from_step_index(rate.max_step_index + 1)
    assert rate.seconds == 99


def test_string_for_step_index_includes_unit():
    """Test that stepper labels carry both count and unit."""
    rate = Rate(5.0)

    assert rate.string_for_step_index(0) == "⅛ second"
    assert rate.string_for_step_index(2) == "1 second"
    assert rate.string_for_step_index(6) == "5 seconds"
    assert Rate.from_time(5, TimeUnit.MINUTES).string_for_step_index(9) == (
        "10 minutes"
    )


def test_string_for_step_index_does_not_mutate():
    """Test that rendering a step leaves the rate untouched."""
    rate = Rate(5.0, allow_pause=True)

    assert rate.string_for_step_index(0) == "Pause"
    assert rate.seconds == 5
