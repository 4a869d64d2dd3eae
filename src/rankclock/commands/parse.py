"""Command: parse a date from one of the upstream formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rankclock.commands._base import RankClockCommand
from rankclock.domain.calendar import to_accsaber_midnight, to_bl_midnight
from rankclock.domain.parsing import (
    date_from_string,
    date_from_unix,
    from_accsaber_date_string,
    to_unix,
)
from rankclock.output.result import CommandResult

if TYPE_CHECKING:
    from rankclock.commands._context import AppContext


@click.command(
    cls=RankClockCommand,
    examples="""\
  rankclock parse "2023-5-1 10:00 UTC"
  rankclock parse 1682935200 --unix
  rankclock parse "2023-05-01 12:00:00" --accsaber
  rankclock --json parse 2023-05-01T10:00:00Z""",
)
@click.argument("value")
@click.option("--unix", "source", flag_value="unix", help="VALUE is epoch seconds.")
@click.option("--accsaber", "source", flag_value="accsaber", help="VALUE is an AccSaber SQL datetime.")
@click.pass_obj
def parse(app: AppContext, value: str, source: str | None) -> None:
    """Parse VALUE into a UTC instant."""
    if source == "unix":
        instant = date_from_unix(value)
    elif source == "accsaber":
        instant = from_accsaber_date_string(value)
    else:
        instant = date_from_string(value)

    if instant is None:
        app.emit(
            CommandResult.failure(
                "parse",
                "INVALID_DATE",
                f"Cannot parse {value!r}",
                source=source or "string",
            )
        )
        return

    app.emit(
        CommandResult.success(
            "parse",
            instant=instant,
            unix=to_unix(instant),
            bl_midnight=to_bl_midnight(instant),
            accsaber_midnight=to_accsaber_midnight(instant),
        )
    )
