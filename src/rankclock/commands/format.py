"""Commands: absolute (``format``) and relative (``relative``) date display."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from rankclock.commands._base import RankClockCommand
from rankclock.commands._types import INSTANT
from rankclock.domain.units import RelativeUnit
from rankclock.i18n.formatting import (
    DateFormatOptions,
    format_date_relative,
    format_date_relative_in_units,
    format_date_with_options,
)
from rankclock.output.result import CommandResult

if TYPE_CHECKING:
    from rankclock.commands._context import AppContext

_STYLES = click.Choice(["full", "long", "medium", "short"])


@click.command(
    "format",
    cls=RankClockCommand,
    examples="""\
  rankclock format 1682935200
  rankclock --locale de format "2023-5-1 10:00 UTC" --date-style long
  rankclock format 2023-05-01T10:00:00Z --no-time --tz Europe/Berlin""",
)
@click.argument("value", type=INSTANT)
@click.option("--date-style", type=_STYLES, default="short", show_default=True)
@click.option("--time-style", type=_STYLES, default="medium", show_default=True)
@click.option("--no-time", is_flag=True, help="Date only.")
@click.option("--tz", "time_zone", default=None, help="Render in this IANA zone.")
@click.pass_obj
def format_cmd(
    app: AppContext,
    value: datetime,
    date_style: str,
    time_style: str,
    no_time: bool,
    time_zone: str | None,
) -> None:
    """Format VALUE (epoch seconds or date string) for display."""
    options = DateFormatOptions(
        date_style=date_style,
        time_style=None if no_time else time_style,
        locale_matcher=app.settings.locale.matcher,
        time_zone=time_zone,
    )
    try:
        formatted = format_date_with_options(value, options)
    except (KeyError, ValueError) as exc:
        app.emit(CommandResult.failure("format", "INVALID_OPTION", str(exc)))
        return
    app.emit(CommandResult.success("format", instant=value, formatted=formatted))


@click.command(
    cls=RankClockCommand,
    examples="""\
  rankclock relative 1682935200
  rankclock relative "2023-5-1 10:00 UTC" --unit day
  rankclock relative --count --unit day -- -3""",
)
@click.argument("value")
@click.option(
    "--unit",
    type=click.Choice([u.value for u in RelativeUnit]),
    default=RelativeUnit.AUTO.value,
    show_default=True,
)
@click.option("--count", is_flag=True, help="VALUE is a signed count of UNIT, not a date.")
@click.pass_obj
def relative(app: AppContext, value: str, unit: str, count: bool) -> None:
    """Describe VALUE relative to now ("3 days ago")."""
    if count:
        try:
            amount = float(value)
        except ValueError:
            app.emit(CommandResult.failure("relative", "INVALID_COUNT", f"Not a number: {value!r}"))
            return
        app.emit(
            CommandResult.success(
                "relative",
                count=amount,
                unit=unit,
                phrase=format_date_relative_in_units(amount, unit),
            )
        )
        return

    instant = INSTANT.convert(value, None, click.get_current_context())
    app.emit(
        CommandResult.success(
            "relative",
            instant=instant,
            phrase=format_date_relative(instant, unit=unit),
        )
    )
