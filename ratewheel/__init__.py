from .coding import decode, encode
from .errors import (
    InvalidTimeError,
    RangeError,
    RateDecodeError,
    RateError,
    UnknownUnitError,
)
from .formatting import DurationFormatter, EnglishFormatter
from .normalize import raw_time_from_seconds, seconds_from_raw_time, units_for_raw_time
from .rate import Rate
from .units import TimeUnit
from .util import DAY, HOUR, MAX_SECONDS, MAX_TIME, MINUTE, SECOND, WEEK

__all__ = [
    "Rate",
    "TimeUnit",
    "DurationFormatter",
    "EnglishFormatter",
    "units_for_raw_time",
    "seconds_from_raw_time",
    "raw_time_from_seconds",
    "encode",
    "decode",
    "RateError",
    "InvalidTimeError",
    "RangeError",
    "UnknownUnitError",
    "RateDecodeError",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MAX_TIME",
    "MAX_SECONDS",
]
