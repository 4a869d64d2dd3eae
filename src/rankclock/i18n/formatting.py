"""Locale-aware absolute and relative date formatting on top of Babel.

Absolute formats use CLDR date/time styles (``short``, ``medium``, ...);
relative formats produce long-form phrases such as "in 3 days" or
"5 minutes ago".  Every formatter returns None for a non-datetime value
instead of raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime
from typing import Any, Literal
from zoneinfo import ZoneInfo

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from pydantic import BaseModel

from rankclock import clock
from rankclock.domain.parsing import ensure_utc, is_valid_date
from rankclock.domain.units import (
    RELATIVE_UNIT_SECONDS,
    RelativeUnit,
    parse_relative_unit,
    pick_auto_unit,
)
from rankclock.domain.zones import display_tz
from rankclock.i18n.locale import DEFAULT_LOCALE, get_current_locale

logger = logging.getLogger(__name__)

Style = Literal["full", "long", "medium", "short"]
LocaleMatcher = Literal["best fit", "lookup"]


class DateFormatOptions(BaseModel):
    """Options for :func:`format_date_with_options`.

    Attributes:
        date_style: CLDR date style, or None to omit the date.
        time_style: CLDR time style, or None to omit the time.
        locale_matcher: ``"best fit"`` falls back from ``de-AT`` to ``de``
            before the default locale; ``"lookup"`` goes straight to it.
        time_zone: IANA zone to render in; None means the display zone.
    """

    model_config = {"frozen": True}

    date_style: Style | None = None
    time_style: Style | None = None
    locale_matcher: LocaleMatcher = "best fit"
    time_zone: str | None = None


def round_half_up(value: float) -> int:
    """Round halves toward +infinity (``2.5 -> 3``, ``-2.5 -> -2``)."""
    return math.floor(value + 0.5)


def _parse_locale(identifier: str) -> Locale | None:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def resolve_locale(identifier: str | None = None, matcher: LocaleMatcher = "best fit") -> Locale:
    """Map a BCP 47 or POSIX locale identifier onto a Babel :class:`Locale`.

    Unknown identifiers fall back (see :class:`DateFormatOptions`) and
    finally land on :data:`DEFAULT_LOCALE`, so this never raises.
    """
    identifier = identifier or get_current_locale()
    candidates = [identifier]
    if matcher == "best fit":
        language = identifier.replace("_", "-").split("-", 1)[0]
        if language != identifier:
            candidates.append(language)
    candidates.extend([get_current_locale(), DEFAULT_LOCALE])

    for candidate in candidates:
        resolved = _parse_locale(candidate)
        if resolved is not None:
            if candidate != identifier:
                logger.debug("Locale %r resolved to %r", identifier, candidate)
            return resolved
    return Locale.parse(DEFAULT_LOCALE)


def _coerce_options(options: DateFormatOptions | dict[str, Any] | None) -> DateFormatOptions:
    if options is None:
        return DateFormatOptions()
    if isinstance(options, DateFormatOptions):
        return options
    return DateFormatOptions.model_validate(options)


def format_date_with_options(
    val: Any,
    options: DateFormatOptions | dict[str, Any] | None = None,
    locale: str | None = None,
) -> str | None:
    """Format *val* with explicit :class:`DateFormatOptions`.

    With neither style set the short date style is used.  Returns None if
    *val* is not a datetime.
    """
    if not is_valid_date(val):
        return None

    opts = _coerce_options(options)
    loc = resolve_locale(locale, opts.locale_matcher)
    zone = ZoneInfo(opts.time_zone or display_tz())
    local = ensure_utc(val).astimezone(zone)

    if opts.date_style and opts.time_style:
        pattern = babel_dates.get_datetime_format(opts.date_style, locale=loc)
        return (
            pattern.replace("'", "")
            .replace("{0}", babel_dates.format_time(local, opts.time_style, tzinfo=zone, locale=loc))
            .replace("{1}", babel_dates.format_date(local, opts.date_style, locale=loc))
        )
    if opts.time_style:
        return babel_dates.format_time(local, opts.time_style, tzinfo=zone, locale=loc)
    return babel_dates.format_date(local, opts.date_style or "short", locale=loc)


def format_date(
    val: Any,
    date_style: Style = "short",
    time_style: Style | None = "medium",
    locale: str | None = None,
) -> str | None:
    """Format *val* by style; a falsy *time_style* gives a date-only string."""
    return format_date_with_options(
        val,
        DateFormatOptions(date_style=date_style, time_style=time_style or None),
        locale,
    )


def _format_relative(value: float, unit: RelativeUnit, loc: Locale) -> str:
    # An infinite threshold stops Babel from promoting to a coarser unit.
    return babel_dates.format_timedelta(
        value * RELATIVE_UNIT_SECONDS[unit],
        granularity=unit.value,
        threshold=math.inf,
        add_direction=True,
        format="long",
        locale=loc,
    )


def format_date_relative_in_units(
    val: float,
    unit: str | RelativeUnit = RelativeUnit.DAY,
    locale: str | None = None,
) -> str:
    """Phrase the signed count *val* of *unit*: ``-1`` day -> "1 day ago".

    *val* is a plain number, not a date.  An unknown unit (or ``auto``)
    is read as seconds.
    """
    resolved = parse_relative_unit(unit)
    if resolved is None or resolved is RelativeUnit.AUTO:
        resolved = RelativeUnit.SECOND
    return _format_relative(val, resolved, resolve_locale(locale))


def format_date_relative(
    val: Any,
    round_func: Callable[[float], float] = round_half_up,
    unit: str | RelativeUnit = RelativeUnit.AUTO,
    locale: str | None = None,
) -> str | None:
    """Describe *val* relative to now ("3 hours ago", "in 2 days").

    ``auto`` picks the coarsest unit whose threshold the distance has not
    reached: under a minute reads in seconds, under an hour in minutes, and
    so on up to 30-day months and 365-day years.  An unrecognised unit
    reads in seconds.  Elapsed time is measured at whole-second precision.
    """
    if not is_valid_date(val):
        return None

    reference = ensure_utc(val).replace(microsecond=0)
    diff_in_secs = (clock.now() - reference).total_seconds()

    resolved = parse_relative_unit(unit)
    if resolved is RelativeUnit.AUTO:
        resolved = pick_auto_unit(abs(diff_in_secs))
    elif resolved is None:
        resolved = RelativeUnit.SECOND

    value = -round_func(diff_in_secs / RELATIVE_UNIT_SECONDS[resolved])
    return _format_relative(value, resolved, resolve_locale(locale))
