"""Score freshness colour: newer scores render brighter.

Age maps onto a grey ramp from white (just set) to mid-grey (eight
30-day months or older) through a cubic ease-out, so recent scores fade
quickly and old ones settle.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from rankclock import clock
from rankclock.domain.parsing import date_from_unix, ensure_utc, is_valid_date
from rankclock.domain.units import DAY

FRESH_SCORE_AGE_MILLIS = 0
OLD_SCORE_AGE_MILLIS = 30 * DAY * 8
FRESH_SCORE_BRIGHTNESS = 255
OLD_SCORE_BRIGHTNESS = 128

FALLBACK_COLOR = "#ffffff"


def _age_millis(time_set: datetime) -> float:
    return (clock.now() - ensure_utc(time_set)).total_seconds() * 1000


def get_time_string_color(time_set: Any) -> str:
    """Grey ``#rrggbb`` for a score set at *time_set* (instant or epoch seconds)."""
    if not time_set:
        return FALLBACK_COLOR

    instant = time_set if is_valid_date(time_set) else date_from_unix(time_set)
    if instant is None:
        return FALLBACK_COLOR

    ratio = (_age_millis(instant) - FRESH_SCORE_AGE_MILLIS) / (
        OLD_SCORE_AGE_MILLIS - FRESH_SCORE_AGE_MILLIS
    )
    ratio = min(max(ratio, 0.0), 1.0)
    ratio = (1 - ratio) ** 3

    brightness = int(
        OLD_SCORE_BRIGHTNESS + (FRESH_SCORE_BRIGHTNESS - OLD_SCORE_BRIGHTNESS) * ratio
    )
    brightness_hex = f"{brightness:02x}"
    return f"#{brightness_hex * 3}"
