"""Flat key/value persistence for rates.

A rate is stored as five keyed fields. Decoding is all-or-nothing: any
missing or corrupt field raises RateDecodeError and no rate is returned.
"""

import math
from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from loguru import logger

from ratewheel.errors import RateDecodeError, RateError
from ratewheel.rate import Rate
from ratewheel.units import TimeUnit
from ratewheel.util import MAX_TIME

RATE_TIME = "RateTime"
RATE_UNITS = "RateUnits"
RATE_PAUSE = "RatePause"
MINIMUM_TIME = "MinimumTime"
MAXIMUM_TIME = "MaximumTime"

KEYS = (RATE_TIME, RATE_UNITS, RATE_PAUSE, MINIMUM_TIME, MAXIMUM_TIME)

R = TypeVar("R", bound=Rate)


def encode(rate: Rate, record: MutableMapping[str, Any]) -> None:
    """Write the rate's time, unit ordinal, pause flag and range into record."""
    record[RATE_TIME] = rate.magnitude
    record[RATE_UNITS] = int(rate.unit)
    record[RATE_PAUSE] = rate.allow_pause
    record[MINIMUM_TIME] = rate.minimum_seconds
    record[MAXIMUM_TIME] = rate.maximum_seconds


def _number(record: Mapping[str, Any], key: str) -> float:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RateDecodeError(
            f"Field {key!r} must be a number, got {type(value).__name__!r}: {value!r}"
        )
    return float(value)


def _flag(record: Mapping[str, Any], key: str) -> bool:
    value = record[key]
    if not isinstance(value, bool):
        raise RateDecodeError(
            f"Field {key!r} must be a bool, got {type(value).__name__!r}: {value!r}"
        )
    return value


def decode(record: Mapping[str, Any], rate_class: type[R] = Rate) -> R:
    """Rebuild a rate from the five persisted fields.

    Raises:
        RateDecodeError: If a field is missing, has the wrong type, names an
            unknown unit or describes an impossible range
    """
    missing = [key for key in KEYS if key not in record]
    if missing:
        logger.warning("Rate record is missing fields", missing=missing)
        raise RateDecodeError(
            f"Rate record is missing fields: {', '.join(missing)}\n"
            f"Expected keys: {', '.join(KEYS)}"
        )

    try:
        magnitude = _number(record, RATE_TIME)
        unit = TimeUnit.from_ordinal(record[RATE_UNITS])
        allow_pause = _flag(record, RATE_PAUSE)
        minimum = _number(record, MINIMUM_TIME)
        maximum = _number(record, MAXIMUM_TIME)
        if not math.isfinite(magnitude) or magnitude < 0:
            raise RateDecodeError(
                f"Field {RATE_TIME!r} must be a finite, non-negative number"
            )
        if magnitude > MAX_TIME:
            raise RateDecodeError(
                f"Field {RATE_TIME!r} must be at most {MAX_TIME} {unit.name.lower()}, "
                f"got {magnitude!r}"
            )
        return rate_class(
            magnitude * unit.scale,
            unit,
            allow_pause=allow_pause,
            minimum=minimum,
            maximum=maximum,
        )
    except RateDecodeError as e:
        logger.warning("Corrupt rate record", error=str(e))
        raise
    except RateError as e:
        logger.warning("Corrupt rate record", error=str(e))
        raise RateDecodeError(f"Corrupt rate record: {e}") from e
