"""Tests for rate strings and the pluggable formatter."""

from ratewheel import EnglishFormatter, Rate, TimeUnit
from ratewheel.formatting import unit_name


def test_english_formatter():
    """Test the default long and abbreviated phrases."""
    formatter = EnglishFormatter()

    assert formatter.format_duration(1, TimeUnit.MINUTES) == "1 minute"
    assert formatter.format_duration(2, TimeUnit.WEEKS) == "2 weeks"
    assert formatter.format_duration(0, TimeUnit.DAYS) == "0 days"
    assert formatter.format_duration(2, TimeUnit.WEEKS, abbreviated=True) == "2w"
    assert formatter.format_integer(1234) == "1,234"


def test_unit_name_strips_digits_and_spaces():
    """Test extracting the bare unit word from a formatted phrase."""
    formatter = EnglishFormatter()

    assert unit_name(formatter, TimeUnit.HOURS, 5) == "hours"
    assert unit_name(formatter, TimeUnit.HOURS, 1) == "hour"
    assert unit_name(formatter, TimeUnit.SECONDS, 42, abbreviated=True) == "s"


def test_string_and_short_string():
    """Test the full and short renderings of whole counts."""
    rate = Rate.from_time(5, TimeUnit.MINUTES)
    assert rate.string == "5 minutes"
    assert rate.short_string == "5m"

    assert Rate.from_time(1, TimeUnit.HOURS).string == "1 hour"
    assert Rate.from_raw_time(10000).string == "2 minutes"


def test_sub_second_labels():
    """Test the 1/8 and 1/2 second thresholds."""
    assert Rate(0.2).string == "⅛ second"
    assert Rate(0.2).short_string == "⅛s"
    assert Rate(0.7).string == "½ second"
    assert Rate(0.0).value_string == "⅛"


def test_pause_labels():
    """Test that a paused rate renders only the pause label."""
    rate = Rate(0.0, allow_pause=True)

    assert rate.value_string == "Pause"
    assert rate.string == "Pause"
    assert rate.short_string == "Pause"


def test_value_string_for_whole_counts():
    """Test the count-only rendering."""
    assert Rate(45.0).value_string == "45"
    assert Rate.from_time(3, TimeUnit.DAYS).value_string == "3"


class _ShoutingFormatter:
    def format_duration(self, count, unit, abbreviated=False):
        return f"{count} {unit.name}"

    def format_integer(self, value):
        return f"#{value}"


def test_custom_formatter_per_instance():
    """Test that a host can plug in its own wording."""
    rate = Rate.from_time(5, TimeUnit.MINUTES)
    rate.formatter = _ShoutingFormatter()

    assert rate.string == "#5 MINUTES"
    assert rate.string_for_time_index(2) == "#3"
    # Other rates keep the default formatter
    assert Rate.from_time(5, TimeUnit.MINUTES).string == "5 minutes"
