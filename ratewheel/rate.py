import copy
import math
from collections.abc import Mapping, MutableMapping
from datetime import timedelta
from functools import total_ordering
from typing import Any

from loguru import logger
from typing_extensions import override

from ratewheel import wheels
from ratewheel.errors import InvalidTimeError, RangeError
from ratewheel.formatting import (
    ONE_EIGHTH_LABEL,
    ONE_HALF_LABEL,
    PAUSE_LABEL,
    UNKNOWN_LABEL,
    DurationFormatter,
    EnglishFormatter,
    unit_name,
)
from ratewheel.normalize import (
    raw_time_from_seconds,
    seconds_from_raw_time,
    units_for_raw_time,
)
from ratewheel.units import TimeUnit
from ratewheel.util import (
    HUNDREDS,
    MAX_SECONDS,
    MAX_TIME,
    ONE_EIGHTH,
    round_half_up,
)
from ratewheel.wheels import SlotKind


@total_ordering
class Rate:
    """A duration shown in one of a fixed set of units.

    A rate keeps its total time in seconds together with the unit it is
    displayed in, a [minimum, maximum] range and an optional pause state
    (a zero time that is not clamped up to the minimum).

    Rates compare by their raw time in hundredths of a second.

    Examples:
        >>> Rate.from_raw_time(6000).unit
        <TimeUnit.MINUTES: 1>
        >>> Rate.from_time(5, TimeUnit.HOURS).string
        '5 hours'
    """

    formatter: DurationFormatter = EnglishFormatter()

    def __init__(
        self,
        seconds: float = 0.0,
        unit: TimeUnit = TimeUnit.SECONDS,
        *,
        allow_pause: bool = False,
        minimum: float = ONE_EIGHTH,
        maximum: float = MAX_SECONDS,
    ) -> None:
        """Initialize a rate without re-normalizing its unit.

        Args:
            seconds: Total time in seconds
            unit: Display unit
            allow_pause: Treat a zero time as a distinguished pause state
            minimum: Smallest selectable time in seconds
            maximum: Largest selectable time in seconds

        Raises:
            InvalidTimeError: If seconds is not a finite number
            RangeError: If not 0 <= minimum <= maximum <= 99 weeks
        """
        _check_finite(seconds)
        if not 0 <= minimum <= maximum <= MAX_SECONDS:
            raise RangeError(
                f"Rate range must satisfy 0 <= minimum <= maximum <= {MAX_SECONDS}.\n"
                f"Got minimum={minimum!r}, maximum={maximum!r}"
            )
        self._seconds: float = max(0.0, float(seconds))
        self.unit: TimeUnit = TimeUnit(unit)
        self.allow_pause: bool = allow_pause
        self._minimum: float = float(minimum)
        self._maximum: float = float(maximum)

    # Constructors

    @classmethod
    def from_time(cls, time: int, unit: TimeUnit, **kwargs: Any) -> "Rate":
        """Create a rate showing time counts of unit.

        Raises:
            InvalidTimeError: If time is outside 0-99
        """
        if not 0 <= time <= MAX_TIME:
            raise InvalidTimeError(
                f"Rate time must be between 0 and {MAX_TIME} units.\n"
                f"Got {time!r} {TimeUnit(unit).name.lower()}\n"
                f"Hint: validate user input before building a rate"
            )
        unit = TimeUnit(unit)
        return cls(time * unit.scale, unit, **kwargs)

    @classmethod
    def from_raw_time(cls, raw_time: int, **kwargs: Any) -> "Rate":
        """Create a rate from hundredths of a second, choosing the unit."""
        raw_time = max(0, raw_time)
        return cls(
            seconds_from_raw_time(raw_time), units_for_raw_time(raw_time), **kwargs
        )

    @classmethod
    def from_seconds(cls, seconds: float, **kwargs: Any) -> "Rate":
        """Create a rate from seconds; long times get a coarser unit."""
        _check_finite(seconds)
        if seconds > MAX_TIME:
            return cls.from_raw_time(raw_time_from_seconds(seconds), **kwargs)
        return cls(seconds, TimeUnit.SECONDS, **kwargs)

    @classmethod
    def from_timedelta(cls, delta: timedelta, **kwargs: Any) -> "Rate":
        return cls.from_seconds(max(0.0, delta.total_seconds()), **kwargs)

    # Basic attributes

    @property
    def seconds(self) -> float:
        """Total time in seconds."""
        return self._seconds

    @property
    def magnitude(self) -> float:
        """Total time expressed in the active unit."""
        return self._seconds / self.unit.scale

    @property
    def minimum_seconds(self) -> float:
        return self._minimum

    @property
    def maximum_seconds(self) -> float:
        return self._maximum

    @property
    def raw_time(self) -> int:
        """Time in hundredths of a second."""
        return raw_time_from_seconds(self._seconds)

    @raw_time.setter
    def raw_time(self, raw_time: int) -> None:
        raw_time = max(0, raw_time)
        self.unit = units_for_raw_time(raw_time)
        self._seconds = seconds_from_raw_time(raw_time)

    @property
    def is_paused(self) -> bool:
        return self.allow_pause and self.raw_time == 0

    @property
    def time(self) -> int:
        """Time scaled to the active unit, e.g. 180 seconds in minutes is 3."""
        return round_half_up(self.magnitude)

    @time.setter
    def time(self, time: int) -> None:
        self._seconds = float(max(0, time) * self.unit.scale)

    def set_time_seconds(self, seconds: float) -> None:
        """Set the time, clamped to the rate's range.

        A zero time is kept as-is when pause is allowed. When the clamped
        time no longer fits two digits of the active unit, or a coarse unit
        can no longer show it below the maximum, the unit is re-chosen from
        the raw time.

        Raises:
            InvalidTimeError: If seconds is not a finite number
        """
        _check_finite(seconds)
        if not (self.allow_pause and seconds == 0):
            seconds = min(max(seconds, self._minimum), self._maximum)
        if seconds / self.unit.scale > MAX_TIME:
            raw_time = raw_time_from_seconds(seconds)
            logger.debug(
                "Re-normalizing rate unit", seconds=seconds, unit=self.unit.name
            )
            self.raw_time = raw_time
        else:
            self._seconds = float(seconds)
        self._fit_unit()

    def _fit_unit(self) -> None:
        """Re-pick a coarse unit whose wheel cannot reach the current time."""
        unit = self.unit
        if unit is TimeUnit.SECONDS:
            return
        if unit.scale > self._maximum or self.time > self._maximum // unit.scale:
            logger.debug(
                "Re-normalizing rate unit", seconds=self._seconds, unit=unit.name
            )
            self.raw_time = self.raw_time

    def set_time(self, time: int, unit: TimeUnit) -> None:
        """Set the unit, then the time clamped to 1-99 of that unit."""
        self.unit = TimeUnit(unit)
        self.time = min(max(1, time), MAX_TIME)

    # Range

    def set_minimum(self, seconds: float) -> bool:
        """Set the minimum time, keeping the old value if out of range.

        Raises the maximum to match when the new minimum exceeds it and
        lifts the current time up to the minimum unless paused.

        Returns:
            True if the minimum was applied, False if it was rejected
        """
        if not 0 <= seconds <= MAX_SECONDS:
            logger.debug(
                "Rejected rate minimum", minimum=seconds, current=self._minimum
            )
            return False
        self._minimum = float(seconds)
        if self._minimum > self._maximum:
            self._maximum = self._minimum
        if self._seconds < self._minimum and not self.is_paused:
            self.set_time_seconds(self._minimum)
        return True

    def set_maximum(self, seconds: float) -> bool:
        """Set the maximum time, keeping the old value if out of range.

        A maximum below the current minimum is rejected; the minimum is never
        lowered to make room. Lowering the maximum below the current time
        clamps the time down.

        Returns:
            True if the maximum was applied, False if it was rejected
        """
        if not self._minimum <= seconds <= MAX_SECONDS:
            logger.debug(
                "Rejected rate maximum",
                maximum=seconds,
                minimum=self._minimum,
                current=self._maximum,
            )
            return False
        self._maximum = float(seconds)
        if self._seconds > self._maximum:
            self.set_time_seconds(self._maximum)
        self._fit_unit()
        return True

    # Scroll wheels

    @property
    def max_index_for_time(self) -> int:
        """Number of positions on the time wheel."""
        return len(wheels.time_slots(self))

    @property
    def max_index_for_units(self) -> int:
        """Number of positions on the unit wheel."""
        return len(wheels.unit_slots(self))

    @property
    def time_index(self) -> int:
        """Time wheel position matching the current time."""
        return wheels.locate_time_slot(self, wheels.time_slots(self))

    @property
    def unit_index(self) -> int:
        """Unit wheel position matching the current unit."""
        return wheels.locate_unit_slot(self, wheels.unit_slots(self))

    def set_time_from_index(self, index: int) -> None:
        """Commit a time wheel position; out-of-range indices are ignored."""
        slots = wheels.time_slots(self)
        if not 0 <= index < len(slots):
            logger.debug("Ignored time index", index=index, slots=len(slots))
            return
        self._seconds = slots[index].seconds

    def set_unit_from_index(self, index: int) -> None:
        """Commit a unit wheel position; out-of-range indices are ignored.

        The displayed count survives the unit change (at least 1), clamped
        to the range in the new unit. A paused rate stays at zero. The blank
        pause slot zeroes the time without touching the unit.
        """
        slots = wheels.unit_slots(self)
        if not 0 <= index < len(slots):
            logger.debug("Ignored unit index", index=index, slots=len(slots))
            return
        unit = slots[index]
        if unit is None:
            self._seconds = 0.0
            return
        paused = self.is_paused
        time = max(1, self.time)
        self.unit = unit
        if paused:
            self.time = 0
            return
        # Keep the count inside the range as seen from the new unit
        highest = min(MAX_TIME, max(1, int(self._maximum // unit.scale)))
        lowest = math.ceil(self._minimum / unit.scale)
        self.time = min(max(time, lowest), highest)

    def string_for_time_index(self, index: int) -> str:
        slots = wheels.time_slots(self)
        if not 0 <= index < len(slots):
            return UNKNOWN_LABEL
        slot = slots[index]
        if slot.kind is SlotKind.COUNT:
            return self.formatter.format_integer(slot.count)
        return _SLOT_LABELS[slot.kind]

    def string_for_unit_index(self, index: int) -> str:
        labels = self.unit_labels
        if 0 <= index < len(labels):
            return labels[index]
        return UNKNOWN_LABEL

    @property
    def time_fractions(self) -> list[str]:
        """Labels for the special stops ahead of the plain counts.

        Coarse units have no special stops; they pause from the unit wheel.
        """
        return [_SLOT_LABELS[slot.kind] for slot in wheels.fraction_slots(self)]

    @property
    def unit_labels(self) -> list[str]:
        """Unit wheel labels, pluralised for the current time."""
        time = self.time
        return [
            "" if unit is None else unit_name(self.formatter, unit, time)
            for unit in wheels.unit_slots(self)
        ]

    # Steppers

    @property
    def max_step_index(self) -> int:
        """Largest stepper value (inclusive)."""
        return self.max_index_for_time - 1

    @property
    def step_index(self) -> int:
        return self.time_index

    def set_time_from_step_index(self, index: int) -> None:
        self.set_time_from_index(index)

    def string_for_step_index(self, index: int) -> str:
        """Full string (count and unit) the rate would show at index."""
        stepped = self.copy()
        stepped.set_time_from_index(index)
        return stepped.string

    # Strings

    @property
    def value_string(self) -> str:
        """The current time without units."""
        raw_time = self.raw_time
        if raw_time == 0 and self.allow_pause:
            return PAUSE_LABEL
        if raw_time < HUNDREDS // 2:
            return ONE_EIGHTH_LABEL
        if raw_time < HUNDREDS:
            return ONE_HALF_LABEL
        return self.formatter.format_integer(self.time)

    def _unit_count(self) -> int:
        # Sub-second stops read as a single unit ("½ second")
        if self.raw_time < HUNDREDS:
            return 1
        return self.time

    @property
    def string(self) -> str:
        if self.is_paused:
            return self.value_string
        unit = unit_name(self.formatter, self.unit, self._unit_count())
        return f"{self.value_string} {unit}"

    @property
    def short_string(self) -> str:
        if self.is_paused:
            return self.value_string
        unit = unit_name(self.formatter, self.unit, self._unit_count(), True)
        return f"{self.value_string}{unit}"

    # Conversions

    def as_timedelta(self) -> timedelta:
        return timedelta(seconds=self._seconds)

    def copy(self) -> "Rate":
        return copy.copy(self)

    def encode(self, record: MutableMapping[str, Any]) -> None:
        """Write this rate's five persisted fields into record."""
        from ratewheel.coding import encode

        encode(self, record)

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {}
        self.encode(record)
        return record

    @classmethod
    def decode(cls, record: Mapping[str, Any]) -> "Rate":
        """Rebuild a rate from a persisted record.

        Raises:
            RateDecodeError: If any field is missing or corrupt
        """
        from ratewheel.coding import decode

        return decode(record, cls)

    # Comparison

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rate):
            return NotImplemented
        return self.raw_time == other.raw_time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rate):
            return NotImplemented
        return self.raw_time < other.raw_time

    __hash__ = None  # type: ignore[assignment]

    @override
    def __str__(self) -> str:
        return self.string

    @override
    def __repr__(self) -> str:
        return (
            f"Rate(seconds={self._seconds!r}, unit={self.unit.name}, "
            f"allow_pause={self.allow_pause!r}, minimum={self._minimum!r}, "
            f"maximum={self._maximum!r})"
        )


def _check_finite(seconds: float) -> None:
    if not math.isfinite(seconds):
        raise InvalidTimeError(
            f"Rate time must be a finite number of seconds, got {seconds!r}"
        )


_SLOT_LABELS: dict[SlotKind, str] = {
    SlotKind.PAUSE: PAUSE_LABEL,
    SlotKind.ONE_EIGHTH: ONE_EIGHTH_LABEL,
    SlotKind.ONE_HALF: ONE_HALF_LABEL,
}
