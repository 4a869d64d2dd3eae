"""Time unit constants and the unit/precision enums.

All durations in this package are integer milliseconds unless the name says
otherwise (``*_SECONDS``).
"""

from __future__ import annotations

from enum import StrEnum

SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


class TruncationPrecision(StrEnum):
    """Granularity for :func:`rankclock.domain.calendar.truncate_date`.

    Declared coarse to fine; the declaration order is the truncation rank.
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class RelativeUnit(StrEnum):
    """Units accepted by relative-time formatting."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    AUTO = "auto"


RELATIVE_UNIT_SECONDS: dict[RelativeUnit, int] = {
    RelativeUnit.SECOND: 1,
    RelativeUnit.MINUTE: 60,
    RelativeUnit.HOUR: 60 * 60,
    RelativeUnit.DAY: 60 * 60 * 24,
    RelativeUnit.MONTH: 60 * 60 * 24 * 30,
    RelativeUnit.YEAR: 60 * 60 * 24 * 365,
}

# (exclusive upper bound in seconds, unit); anything past the last bound is years.
AUTO_UNIT_THRESHOLDS: tuple[tuple[int, RelativeUnit], ...] = (
    (60, RelativeUnit.SECOND),
    (60 * 60, RelativeUnit.MINUTE),
    (60 * 60 * 24, RelativeUnit.HOUR),
    (60 * 60 * 24 * 30, RelativeUnit.DAY),
    (60 * 60 * 24 * 365, RelativeUnit.MONTH),
)


def pick_auto_unit(abs_seconds: float) -> RelativeUnit:
    """Coarsest unit whose threshold *abs_seconds* has not yet reached."""
    for limit, unit in AUTO_UNIT_THRESHOLDS:
        if abs_seconds < limit:
            return unit
    return RelativeUnit.YEAR


def parse_relative_unit(unit: str | RelativeUnit) -> RelativeUnit | None:
    """Return the matching :class:`RelativeUnit`, or None if *unit* is unknown."""
    try:
        return RelativeUnit(unit)
    except ValueError:
        return None
