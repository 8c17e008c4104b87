"""Slot tables backing the scroll wheel and stepper index spaces.

A time wheel shows an optional pause slot, optional 1/8 and 1/2 second
stops (seconds unit only) and then plain counts. A unit wheel shows an
optional blank (pause) slot followed by every unit the maximum can reach.

Both directions of the index mapping (rate -> index and index -> rate)
read these tables, so the two can never disagree about slot positions.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ratewheel.units import TimeUnit
from ratewheel.util import MAX_TIME, ONE_EIGHTH, ONE_HALF

if TYPE_CHECKING:
    from ratewheel.rate import Rate


class SlotKind(Enum):
    PAUSE = "pause"
    ONE_EIGHTH = "one_eighth"
    ONE_HALF = "one_half"
    COUNT = "count"


@dataclass(frozen=True, kw_only=True)
class TimeSlot:
    """One position on the time wheel.

    Attributes:
        kind: Which kind of stop this is
        count: Displayed count in the active unit (0 for sub-second stops)
        seconds: Total seconds the slot commits when selected
    """

    kind: SlotKind
    count: int
    seconds: float


def first_whole_second(minimum_seconds: float) -> int:
    """Smallest whole second shown on a seconds wheel."""
    return max(1, int(math.floor(minimum_seconds)))


def fraction_slots(rate: "Rate") -> list[TimeSlot]:
    """Return the special stops that precede the plain counts.

    Only a seconds wheel has them; coarser wheels start at a count of one
    and reach the pause through the unit wheel blank.
    """
    slots: list[TimeSlot] = []
    if rate.unit is not TimeUnit.SECONDS:
        return slots
    if rate.allow_pause:
        slots.append(TimeSlot(kind=SlotKind.PAUSE, count=0, seconds=0.0))
    if rate.minimum_seconds < ONE_HALF:
        slots.append(TimeSlot(kind=SlotKind.ONE_EIGHTH, count=0, seconds=ONE_EIGHTH))
    if rate.minimum_seconds < 1.0:
        slots.append(TimeSlot(kind=SlotKind.ONE_HALF, count=0, seconds=ONE_HALF))
    return slots


def time_slots(rate: "Rate") -> list[TimeSlot]:
    """Return every selectable position on the time wheel, in order."""
    unit = rate.unit
    if unit is TimeUnit.SECONDS:
        slots = fraction_slots(rate)
        first = first_whole_second(rate.minimum_seconds)
        slots.extend(
            TimeSlot(kind=SlotKind.COUNT, count=n, seconds=float(n))
            for n in range(first, MAX_TIME + 1)
        )
        return slots

    last = min(MAX_TIME, int(rate.maximum_seconds // unit.scale))
    return [
        TimeSlot(kind=SlotKind.COUNT, count=n, seconds=float(n * unit.scale))
        for n in range(1, last + 1)
    ]


def locate_time_slot(rate: "Rate", slots: list[TimeSlot]) -> int:
    """Return the index of the slot the rate's current time falls into."""
    if rate.unit is not TimeUnit.SECONDS:
        return max(0, rate.time - 1)

    seconds = rate.seconds
    specials = 0
    for slot in slots:
        if slot.kind is SlotKind.COUNT:
            break
        if slot.kind is SlotKind.PAUSE and rate.is_paused:
            return specials
        if slot.kind is SlotKind.ONE_EIGHTH and seconds < ONE_HALF:
            return specials
        if slot.kind is SlotKind.ONE_HALF and seconds < 1.0:
            return specials
        specials += 1

    offset = rate.time - first_whole_second(rate.minimum_seconds)
    return specials + max(0, offset)


def unit_slots(rate: "Rate") -> list[TimeUnit | None]:
    """Return the unit wheel positions; None marks the blank pause slot.

    The blank is always first when pause is allowed, paused or not, so unit
    positions do not shift as the time moves to and from zero.
    """
    slots: list[TimeUnit | None] = []
    if rate.allow_pause:
        slots.append(None)
    for unit in TimeUnit:
        if unit is TimeUnit.SECONDS or unit.scale <= rate.maximum_seconds:
            slots.append(unit)
    return slots


def locate_unit_slot(rate: "Rate", slots: list[TimeUnit | None]) -> int:
    """Return the index of the rate's unit on the unit wheel."""
    if rate.is_paused:
        return 0
    # Units coarser than the maximum are shown at the coarsest slot
    position = 0
    for index, unit in enumerate(slots):
        if unit is not None and unit <= rate.unit:
            position = index
    return position
