"""Named timezones: the upstream score sources and the display zone.

BeatLeader and AccSaber both publish dates in Berlin time today.  They are
kept as separate settings because nothing ties one to the other.
"""

from __future__ import annotations

import pendulum

BEATLEADER_TZ = "Europe/Berlin"
ACCSABER_TZ = "Europe/Berlin"

DISPLAY_TZ = "UTC"

_active: dict[str, str] = {
    "beatleader": BEATLEADER_TZ,
    "accsaber": ACCSABER_TZ,
    "display": DISPLAY_TZ,
}


def validate_timezone(name: str) -> str:
    """Return *name* unchanged if it is a known IANA zone, else raise ValueError."""
    try:
        pendulum.timezone(name)
    except (KeyError, ValueError) as exc:  # ZoneInfoNotFoundError is a KeyError
        msg = f"Unknown timezone: {name!r}"
        raise ValueError(msg) from exc
    return name


def configure_timezones(
    *,
    beatleader: str | None = None,
    accsaber: str | None = None,
    display: str | None = None,
) -> None:
    """Override the source and display zones (usually from settings)."""
    if beatleader is not None:
        _active["beatleader"] = validate_timezone(beatleader)
    if accsaber is not None:
        _active["accsaber"] = validate_timezone(accsaber)
    if display is not None:
        _active["display"] = validate_timezone(display)


def reset_timezones() -> None:
    """Restore the built-in zone constants."""
    _active["beatleader"] = BEATLEADER_TZ
    _active["accsaber"] = ACCSABER_TZ
    _active["display"] = DISPLAY_TZ


def beatleader_tz() -> str:
    return _active["beatleader"]


def accsaber_tz() -> str:
    return _active["accsaber"]


def display_tz() -> str:
    """Zone that formatted dates are rendered in."""
    return _active["display"]
