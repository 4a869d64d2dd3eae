"""Parsing external date representations into UTC instants.

Every parser fails soft: malformed input yields None, never an exception
and never a half-valid datetime.

Accepted inputs:
- Unix timestamps in seconds (API payloads), read leniently.
- ScoreSaber page dates (``2023-5-1 10:00 UTC``) and anything ISO 8601.
- AccSaber SQL datetimes, which carry no offset and are Berlin wall time.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import UTC, datetime
from typing import Any

import pendulum
from dateutil import parser as dateutil_parser

from rankclock import clock
from rankclock.domain.zones import accsaber_tz

logger = logging.getLogger(__name__)

SOURCE_SITE_PATTERN = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2})\s+(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?\sUTC$"
)
SQL_DATETIME_PATTERN = re.compile(
    r"^\s*(\d{4})-(\d{2})-(\d{2})"
    r"(?:[ T](\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?)?\s*$"
)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def is_valid_date(value: Any) -> bool:
    """True for any ``datetime`` instance."""
    return isinstance(value, datetime)


def ensure_utc(value: datetime) -> datetime:
    """Return *value* as a plain stdlib datetime in UTC (naive input is UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc = value.astimezone(UTC)
    return datetime(
        utc.year,
        utc.month,
        utc.day,
        utc.hour,
        utc.minute,
        utc.second,
        utc.microsecond,
        tzinfo=UTC,
    )


def _leading_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if not isinstance(value, str):
        value = str(value)
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def date_from_unix(value: Any) -> datetime | None:
    """Parse epoch **seconds** into a UTC instant.

    Strings are read leniently: an optional sign and leading digits count,
    trailing garbage is ignored.  Returns None when no number is found or
    the instant is outside the representable range.
    """
    seconds = _leading_int(value)
    if seconds is None:
        logger.debug("Not a unix timestamp: %r", value)
        return None
    try:
        return datetime.fromtimestamp(seconds, UTC)
    except (OverflowError, OSError, ValueError):
        logger.debug("Unix timestamp out of range: %r", value)
        return None


def to_unix(value: datetime) -> int:
    """Whole epoch seconds of *value*, the inverse of :func:`date_from_unix`."""
    return int(ensure_utc(value).timestamp())


def _rewrite_source_site_date(value: str) -> str | None:
    """Turn ``2023-5-1 10:0 UTC`` into ``2023-05-01T10:00:00Z``."""
    match = SOURCE_SITE_PATTERN.match(value)
    if match is None:
        return None
    year, month, day, hour, minute, second = match.groups()
    return (
        f"{year}-{int(month):02d}-{int(day):02d}"
        f"T{int(hour):02d}:{int(minute):02d}:{int(second or 0):02d}Z"
    )


def _parse_free_form(value: str) -> datetime:
    try:
        return dateutil_parser.isoparse(value)
    except ValueError:
        # Fields the string leaves out come from the library clock's day.
        today = clock.now().replace(hour=0, minute=0, second=0, microsecond=0)
        return dateutil_parser.parse(value, default=today)


def date_from_string(value: Any) -> datetime | None:
    """Parse a ScoreSaber page date or any ISO 8601 / free-form date string.

    Non-strings and empty strings yield None.  Results without an explicit
    offset are taken as UTC.
    """
    if not value or not isinstance(value, str):
        return None

    iso = _rewrite_source_site_date(value)
    try:
        if iso is not None:
            # Normalised from the source-site form: strict ISO only.
            parsed = dateutil_parser.isoparse(iso)
        else:
            parsed = _parse_free_form(value)
    except (ValueError, OverflowError):
        logger.debug("Unparseable date string: %r", value)
        return None

    try:
        return ensure_utc(parsed)
    except (ValueError, OverflowError):
        logger.debug("Date string out of range: %r", value)
        return None


def from_accsaber_date_string(value: str) -> datetime | None:
    """Parse an AccSaber SQL datetime (``YYYY-MM-DD[ HH:MM[:SS[.ffffff]]]``).

    The wall time is interpreted in the AccSaber timezone.
    """
    if not isinstance(value, str):
        return None
    match = SQL_DATETIME_PATTERN.match(value)
    if match is None:
        logger.debug("Not an SQL datetime: %r", value)
        return None

    year, month, day, hour, minute, second, fraction = match.groups()
    try:
        local = pendulum.datetime(
            int(year),
            int(month),
            int(day),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
            int((fraction or "0").ljust(6, "0")),
            tz=accsaber_tz(),
        )
    except ValueError:
        logger.debug("Invalid SQL datetime fields: %r", value)
        return None
    return ensure_utc(local)
