"""Instant arithmetic: offsets, truncation, and zone-local midnights."""

from __future__ import annotations

from datetime import datetime, timedelta

import pendulum

from rankclock import clock
from rankclock.domain.parsing import ensure_utc
from rankclock.domain.units import TruncationPrecision
from rankclock.domain.zones import accsaber_tz, beatleader_tz

# Reset values, coarse to fine.  Truncating to precision P resets every
# entry from P's rank onward, so "year" clears all of them.
_TRUNCATION_RESETS: tuple[tuple[str, int], ...] = (
    ("month", 1),
    ("day", 1),
    ("hour", 0),
    ("minute", 0),
    ("second", 0),
    ("microsecond", 0),
)
_PRECISION_RANK: dict[TruncationPrecision, int] = {
    precision: rank for rank, precision in enumerate(TruncationPrecision)
}


def add_to_date(millis: float, date: datetime | None = None) -> datetime:
    """Return *date* (default: now) shifted by *millis*; negative moves back."""
    base = clock.now() if date is None else ensure_utc(date)
    return base + timedelta(milliseconds=millis)


def truncate_date(
    date: datetime, precision: str | TruncationPrecision = TruncationPrecision.DAY
) -> datetime:
    """Reset every field finer than *precision*.

    ``"hour"`` clears minutes, seconds and microseconds; ``"year"`` also
    resets month and day to 1 and the time of day to midnight.  An unknown
    precision returns the date unchanged.
    """
    try:
        rank = _PRECISION_RANK[TruncationPrecision(precision)]
    except ValueError:
        return date
    return date.replace(**dict(_TRUNCATION_RESETS[rank:]))


def start_of_week(date: datetime, timezone: str = "UTC") -> datetime:
    """Monday 00:00 of *date*'s ISO week in *timezone*, as a UTC instant."""
    local = pendulum.instance(ensure_utc(date)).in_timezone(timezone)
    return ensure_utc(local.start_of("week"))


def to_timezone_midnight(date: datetime, timezone: str) -> datetime:
    """Midnight of *date*'s calendar day in *timezone*, as a UTC instant."""
    local = pendulum.instance(ensure_utc(date)).in_timezone(timezone)
    return ensure_utc(local.start_of("day"))


def to_bl_midnight(date: datetime) -> datetime:
    return to_timezone_midnight(date, beatleader_tz())


def to_accsaber_midnight(date: datetime) -> datetime:
    return to_timezone_midnight(date, accsaber_tz())
