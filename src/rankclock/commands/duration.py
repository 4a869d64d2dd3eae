"""Command: convert between milliseconds and ``HhMmSs`` durations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rankclock.commands._base import RankClockCommand
from rankclock.domain.durations import duration_to_millis, millis_to_duration
from rankclock.output.result import CommandResult

if TYPE_CHECKING:
    from rankclock.commands._context import AppContext


@click.command(
    cls=RankClockCommand,
    examples="""\
  rankclock duration 1h2m3s
  rankclock duration 3723000""",
)
@click.argument("value")
@click.pass_obj
def duration(app: AppContext, value: str) -> None:
    """Convert VALUE: milliseconds become HhMmSs, HhMmSs becomes milliseconds."""
    if value.strip().isdigit():
        millis = int(value)
        app.emit(CommandResult.success("duration", millis=millis, duration=millis_to_duration(millis)))
        return

    millis_or_none = duration_to_millis(value)
    if millis_or_none is None:
        app.emit(
            CommandResult.failure(
                "duration",
                "INVALID_DURATION",
                f"{value!r} is not [Nh][Nm]Ns (the seconds part is required)",
            )
        )
        return
    app.emit(
        CommandResult.success(
            "duration", millis=millis_or_none, duration=millis_to_duration(millis_or_none)
        )
    )
