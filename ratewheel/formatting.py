"""Unit wording and number rendering for rate labels.

The rate core only decides which label applies (pause, 1/8, 1/2 or a plain
count). Wording of units and digits is delegated to a DurationFormatter so a
host application can plug in its own localisation.
"""

import string
from typing import Protocol

from ratewheel.units import TimeUnit

PAUSE_LABEL = "Pause"
ONE_EIGHTH_LABEL = "⅛"
ONE_HALF_LABEL = "½"
UNKNOWN_LABEL = "???"


class DurationFormatter(Protocol):
    def format_duration(
        self, count: int, unit: TimeUnit, abbreviated: bool = False
    ) -> str:
        """Return a pluralised phrase such as "5 minutes" or "5m"."""
        ...

    def format_integer(self, value: int) -> str:
        """Return a plain integer rendered for display."""
        ...


_LONG_NAMES: dict[TimeUnit, tuple[str, str]] = {
    TimeUnit.SECONDS: ("second", "seconds"),
    TimeUnit.MINUTES: ("minute", "minutes"),
    TimeUnit.HOURS: ("hour", "hours"),
    TimeUnit.DAYS: ("day", "days"),
    TimeUnit.WEEKS: ("week", "weeks"),
}

_SHORT_NAMES: dict[TimeUnit, str] = {
    TimeUnit.SECONDS: "s",
    TimeUnit.MINUTES: "m",
    TimeUnit.HOURS: "h",
    TimeUnit.DAYS: "d",
    TimeUnit.WEEKS: "w",
}


class EnglishFormatter:
    """Default formatter producing English unit phrases."""

    def format_duration(
        self, count: int, unit: TimeUnit, abbreviated: bool = False
    ) -> str:
        if abbreviated:
            return f"{count}{_SHORT_NAMES[unit]}"
        singular, plural = _LONG_NAMES[unit]
        return f"{count} {singular if count == 1 else plural}"

    def format_integer(self, value: int) -> str:
        return f"{value:,}"


def unit_name(
    formatter: DurationFormatter,
    unit: TimeUnit,
    count: int,
    abbreviated: bool = False,
) -> str:
    """Return just the unit word for count, without digits or spacing."""
    phrase = formatter.format_duration(count, unit, abbreviated)
    return phrase.strip(string.digits + string.whitespace)
