"""Conversion between millisecond counts and ``HhMmSs`` duration strings."""

from __future__ import annotations

import re

from rankclock.domain.units import HOUR, MINUTE, SECOND

DURATION_PATTERN = re.compile(r"^\s*(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)\s*$")


def pad_number(num: int, width: int = 2) -> str:
    """Zero-pad *num* to at least *width* digits (sign kept in front).

    Examples:
        >>> pad_number(5)
        '05'
        >>> pad_number(123)
        '123'
        >>> pad_number(-5)
        '-05'
    """
    num = int(num)
    sign = "-" if num < 0 else ""
    return sign + str(abs(num)).rjust(width, "0")


def duration_to_millis(duration: str) -> int | None:
    """Parse ``[Nh][Nm]Ns`` into milliseconds.

    The seconds part is mandatory: ``"5m"`` does not match and yields None,
    as does any non-string input.
    """
    if not isinstance(duration, str):
        return None
    match = DURATION_PATTERN.match(duration)
    if match is None:
        return None

    hours, minutes, seconds = match.groups()
    return (
        (int(hours) * HOUR if hours else 0)
        + (int(minutes) * MINUTE if minutes else 0)
        + (int(seconds) * SECOND if seconds else 0)
    )


def millis_to_duration(millis: int) -> str:
    """Render *millis* as ``HHhMMmSSs``, dropping any sub-second remainder.

    Hours are not capped, so large inputs widen the hour field.
    """
    hours = millis // HOUR
    millis -= hours * HOUR

    minutes = millis // MINUTE
    millis -= minutes * MINUTE

    seconds = millis // SECOND

    return f"{pad_number(hours)}h{pad_number(minutes)}m{pad_number(seconds)}s"
