"""Weekly ranking batch schedule.

Ranked maps go live in batches every Friday at 10:00 UTC.  A map approved
at time T qualifies once it has sat for :data:`RANKING_QUALIFY_DELAY`, so
it makes the upcoming batch only if ``T + 7 days`` is before the boundary.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

from rankclock import clock
from rankclock.domain.calendar import start_of_week
from rankclock.domain.parsing import date_from_unix

logger = logging.getLogger(__name__)

BATCH_WEEKDAY_OFFSET = timedelta(days=4)
BATCH_HOUR = 10
RANKING_QUALIFY_DELAY = timedelta(days=7)


def get_current_batch_date() -> datetime:
    """The next Friday 10:00 UTC boundary, or this week's if not yet passed."""
    now = clock.now()
    this_week_boundary = start_of_week(now) + BATCH_WEEKDAY_OFFSET + timedelta(hours=BATCH_HOUR)
    if now < this_week_boundary:
        return this_week_boundary
    return this_week_boundary + timedelta(days=7)


def will_be_ranked_in_current_batch(approval_timeset: Any) -> bool:
    """Whether a map approved at *approval_timeset* (epoch seconds) makes this batch."""
    if not approval_timeset:
        return False

    approved_at = date_from_unix(approval_timeset)
    if approved_at is None:
        logger.debug("Ignoring unparseable approval time: %r", approval_timeset)
        return False

    ready_to_rank = approved_at + RANKING_QUALIFY_DELAY
    return ready_to_rank < get_current_batch_date()
