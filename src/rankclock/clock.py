"""Ambient "now" with a scoped override.

Every function that depends on the current time reads it through
:func:`now`.  Tests and the CLI ``--at`` flag pin it with :func:`frozen_at`.
The override lives in a ContextVar, so threads and asyncio tasks never see
each other's frozen instant.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime

_frozen_now: ContextVar[datetime | None] = ContextVar("_frozen_now", default=None)


def frozen_instant() -> datetime | None:
    """The instant pinned by the innermost :func:`frozen_at`, or None."""
    return _frozen_now.get()


def now() -> datetime:
    """Current UTC instant, respecting any :func:`frozen_at` override."""
    frozen = frozen_instant()
    if frozen is not None:
        return frozen
    return datetime.now(UTC)


@contextmanager
def frozen_at(instant: datetime) -> Generator[datetime]:
    """Pin :func:`now` to *instant* for the duration of the block.

    Naive datetimes are taken as UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    instant = instant.astimezone(UTC)
    token = _frozen_now.set(instant)
    try:
        yield instant
    finally:
        _frozen_now.reset(token)
