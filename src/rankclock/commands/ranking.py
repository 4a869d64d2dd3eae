"""Commands: score freshness colour and ranking batch schedule."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from rankclock.commands._base import RankClockCommand
from rankclock.commands._types import INSTANT
from rankclock.domain.batches import get_current_batch_date, will_be_ranked_in_current_batch
from rankclock.domain.freshness import get_time_string_color
from rankclock.domain.parsing import to_unix
from rankclock.i18n.formatting import format_date_relative
from rankclock.output.result import CommandResult

if TYPE_CHECKING:
    from rankclock.commands._context import AppContext


@click.command(
    cls=RankClockCommand,
    examples="""\
  rankclock color 1682935200
  rankclock --at 2023-06-01T00:00:00Z color 1682935200""",
)
@click.argument("value", type=INSTANT)
@click.pass_obj
def color(app: AppContext, value: datetime) -> None:
    """Freshness colour for a score set at VALUE."""
    app.emit(CommandResult.success("color", instant=value, color=get_time_string_color(value)))


@click.command(
    cls=RankClockCommand,
    examples="""\
  rankclock batch
  rankclock batch --approved 1682935200
  rankclock --at 2024-01-05T09:00:00Z batch""",
)
@click.option("--approved", type=INSTANT, default=None, help="Approval time of a map.")
@click.pass_obj
def batch(app: AppContext, approved: datetime | None) -> None:
    """Show the current ranking batch boundary (Friday 10:00 UTC)."""
    batch_date = get_current_batch_date()
    data: dict[str, object] = {
        "batch_date": batch_date,
        "starts": format_date_relative(batch_date),
    }
    if approved is not None:
        data["approved"] = approved
        data["in_current_batch"] = will_be_ranked_in_current_batch(to_unix(approved))
    app.emit(CommandResult(ok=True, op="batch", data=data))
