"""rankclock — date parsing, formatting and ranking-batch helpers for leaderboards."""

from __future__ import annotations

from rankclock.domain.batches import get_current_batch_date, will_be_ranked_in_current_batch
from rankclock.domain.calendar import (
    add_to_date,
    start_of_week,
    to_accsaber_midnight,
    to_bl_midnight,
    to_timezone_midnight,
    truncate_date,
)
from rankclock.domain.durations import duration_to_millis, millis_to_duration, pad_number
from rankclock.domain.freshness import get_time_string_color
from rankclock.domain.parsing import (
    date_from_string,
    date_from_unix,
    from_accsaber_date_string,
    is_valid_date,
    to_unix,
)
from rankclock.domain.units import (
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    RelativeUnit,
    TruncationPrecision,
)
from rankclock.domain.zones import ACCSABER_TZ, BEATLEADER_TZ
from rankclock.i18n.formatting import (
    DateFormatOptions,
    format_date,
    format_date_relative,
    format_date_relative_in_units,
    format_date_with_options,
    round_half_up,
)
from rankclock.i18n.locale import get_current_locale, use_locale

__version__ = "0.3.0"

__all__ = [
    "ACCSABER_TZ",
    "BEATLEADER_TZ",
    "DAY",
    "HOUR",
    "MINUTE",
    "SECOND",
    "DateFormatOptions",
    "RelativeUnit",
    "TruncationPrecision",
    "__version__",
    "add_to_date",
    "date_from_string",
    "date_from_unix",
    "duration_to_millis",
    "format_date",
    "format_date_relative",
    "format_date_relative_in_units",
    "format_date_with_options",
    "from_accsaber_date_string",
    "get_current_batch_date",
    "get_current_locale",
    "get_time_string_color",
    "is_valid_date",
    "millis_to_duration",
    "pad_number",
    "round_half_up",
    "start_of_week",
    "to_accsaber_midnight",
    "to_bl_midnight",
    "to_timezone_midnight",
    "to_unix",
    "truncate_date",
    "use_locale",
    "will_be_ranked_in_current_batch",
]
