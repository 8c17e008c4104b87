"""Raw-time codec and unit normalizer.

Raw times are integer hundredths of a second. Anything above zero but
below half a second decodes to the 1/8 second sampling stop.
"""

import math

from ratewheel.units import TimeUnit
from ratewheel.util import HUNDREDS, MAX_TIME, ONE_EIGHTH

# Tolerance (in hundredths) absorbing binary float error, e.g. 0.57 * 100
_EPSILON = 1e-4


def seconds_from_raw_time(raw_time: int) -> float:
    """Convert a raw time in hundredths of a second to seconds."""
    if raw_time <= 0:
        return 0.0
    if raw_time < HUNDREDS // 2:
        return ONE_EIGHTH
    return raw_time / HUNDREDS


def raw_time_from_seconds(seconds: float) -> int:
    """Convert seconds to a raw time, truncating to the hundredth."""
    return max(0, int(math.floor(seconds * HUNDREDS + _EPSILON)))


def units_for_raw_time(raw_time: int) -> TimeUnit:
    """Return the preferred display unit for a raw time.

    Promotes to the next coarser unit while the whole count divides evenly
    into it or would overflow a two-digit display.
    """
    count = max(0, raw_time) // HUNDREDS
    unit = TimeUnit.SECONDS
    if count == 0:
        return unit

    while unit.ratio is not None:
        ratio = unit.ratio
        if count % ratio != 0 and count <= MAX_TIME:
            break
        count //= ratio
        unit = TimeUnit(unit + 1)
    return unit
