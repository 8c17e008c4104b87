from enum import IntEnum

from ratewheel.errors import UnknownUnitError
from ratewheel.util import DAY, HOUR, MINUTE, SECOND, WEEK


class TimeUnit(IntEnum):
    """Display units for a rate, ordered finest to coarsest.

    The integer value is the ordinal used in persisted records.
    """

    SECONDS = 0
    MINUTES = 1
    HOURS = 2
    DAYS = 3
    WEEKS = 4

    @property
    def scale(self) -> int:
        """Seconds per unit."""
        return _SCALES[self]

    @property
    def ratio(self) -> int | None:
        """Factor to the next coarser unit, None for the coarsest."""
        return _RATIOS.get(self)

    @classmethod
    def from_ordinal(cls, ordinal: object) -> "TimeUnit":
        """Look up a unit by its persisted ordinal.

        Raises:
            UnknownUnitError: If ordinal is not an int in 0-4
        """
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise UnknownUnitError(
                f"Unit ordinal must be an int, got {type(ordinal).__name__!r}: "
                f"{ordinal!r}"
            )
        try:
            return cls(ordinal)
        except ValueError as e:
            valid = ", ".join(f"{u.value}={u.name.lower()}" for u in cls)
            raise UnknownUnitError(
                f"Unknown unit ordinal: {ordinal}\nValid ordinals: {valid}"
            ) from e


_SCALES: dict[TimeUnit, int] = {
    TimeUnit.SECONDS: SECOND,
    TimeUnit.MINUTES: MINUTE,
    TimeUnit.HOURS: HOUR,
    TimeUnit.DAYS: DAY,
    TimeUnit.WEEKS: WEEK,
}

_RATIOS: dict[TimeUnit, int] = {
    TimeUnit.SECONDS: MINUTE // SECOND,
    TimeUnit.MINUTES: HOUR // MINUTE,
    TimeUnit.HOURS: DAY // HOUR,
    TimeUnit.DAYS: WEEK // DAY,
}
