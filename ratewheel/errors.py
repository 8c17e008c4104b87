"""Exception hierarchy for ratewheel."""


class RateError(Exception):
    """Base exception for rate errors."""


class InvalidTimeError(RateError, ValueError):
    """Raised when a rate is built from a time that cannot be displayed."""


class RangeError(RateError, ValueError):
    """Raised when a minimum/maximum pair is inconsistent at construction."""


class UnknownUnitError(RateError, ValueError):
    """Raised when a unit ordinal does not name a known unit."""


class RateDecodeError(RateError, ValueError):
    """Raised when a persisted rate record is missing or corrupt."""
