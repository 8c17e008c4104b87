"""Utility constants and helpers for ratewheel.

Time unit constants represent durations in seconds.
Raw times are integer counts of hundredths of a second.
"""

import math

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Largest count any unit may display (two-digit wheels)
MAX_TIME = 99

# Raw time resolution: hundredths of a second
HUNDREDS = 100

# Sub-second stops
ONE_EIGHTH = 1.0 / 8.0
ONE_HALF = 1.0 / 2.0

MAX_SECONDS = MAX_TIME * WEEK
"""Upper bound for both the minimum and the maximum of a rate."""


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))
