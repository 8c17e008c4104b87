"""Tests for persisting rates as flat records."""

import pytest

from ratewheel import MAX_SECONDS, Rate, RateDecodeError, TimeUnit, decode, encode


def _record(**overrides):
    record = {
        "RateTime": 5.0,
        "RateUnits": 1,
        "RatePause": True,
        "MinimumTime": 0.125,
        "MaximumTime": float(MAX_SECONDS),
    }
    record.update(overrides)
    return record


def test_encode_writes_five_fields():
    """Test the persisted field layout."""
    rate = Rate.from_time(5, TimeUnit.MINUTES, allow_pause=True)

    assert rate.to_record() == _record()


def test_encode_preserves_other_keys():
    """Test that encoding only touches the rate's own keys."""
    record = {"Other": "kept"}

    encode(Rate(3.0), record)

    assert record["Other"] == "kept"
    assert record["RateTime"] == 3.0
    assert record["RateUnits"] == 0


def test_decode_restores_rate():
    """Test rebuilding a rate from a record."""
    rate = decode(_record())

    assert rate.unit is TimeUnit.MINUTES
    assert rate.seconds == 300
    assert rate.allow_pause is True
    assert rate.minimum_seconds == 0.125
    assert rate.maximum_seconds == MAX_SECONDS


def test_encode_decode_round_trip():
    """Test that encoded rates decode to equal rates."""
    for rate in [
        Rate.from_raw_time(10001),
        Rate.from_time(3, TimeUnit.WEEKS),
        Rate(0.5, minimum=0.25, maximum=60),
        Rate(0.0, allow_pause=True),
    ]:
        restored = Rate.decode(rate.to_record())
        assert restored == rate
        assert restored.unit is rate.unit
        assert restored.raw_time == rate.raw_time


def test_decode_ignores_unrelated_keys():
    """Test that extra keys do not disturb decoding."""
    assert decode(_record(Extra=1)).time == 5


def test_decode_missing_field():
    """Test that a partial record is rejected."""
    record = _record()
    del record["RatePause"]

    with pytest.raises(RateDecodeError, match="missing fields: RatePause"):
        decode(record)


def test_decode_unknown_unit():
    """Test that an unknown unit ordinal is fatal."""
    with pytest.raises(RateDecodeError, match="Unknown unit ordinal"):
        decode(_record(RateUnits=7))


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("RateTime", "5", "must be a number"),
        ("RateTime", True, "must be a number"),
        ("RateTime", -1.0, "non-negative"),
        ("RateTime", float("nan"), "non-negative"),
        ("RateTime", 500.0, "at most 99"),
        ("RateTime", 1e303, "at most 99"),
        ("MinimumTime", None, "must be a number"),
        ("RatePause", 1, "must be a bool"),
        ("RateUnits", 1.0, "must be an int"),
    ],
)
def test_decode_corrupt_field(field, value, message):
    """Test that wrongly typed fields are rejected."""
    with pytest.raises(RateDecodeError, match=message):
        decode(_record(**{field: value}))


def test_decode_impossible_range():
    """Test that a stored minimum above the maximum is corrupt."""
    with pytest.raises(RateDecodeError, match="Corrupt rate record"):
        decode(_record(MinimumTime=100.0, MaximumTime=10.0))
