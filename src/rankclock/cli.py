"""Root CLI group for rankclock with global flags and command registration."""

from __future__ import annotations

from datetime import datetime

import click

from rankclock import __version__
from rankclock.clock import frozen_at
from rankclock.commands import register_commands
from rankclock.commands._context import AppContext
from rankclock.commands._types import INSTANT
from rankclock.config.settings import RankClockSettings
from rankclock.i18n.locale import use_locale


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rankclock")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging for rankclock.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--locale", default=None, help="Display locale (e.g. de, en-GB).")
@click.option("--at", "at", type=INSTANT, default=None, help="Pretend the current time is AT.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    locale: str | None,
    at: datetime | None,
) -> None:
    """rankclock — leaderboard date utilities."""
    ctx.ensure_object(dict)
    settings = RankClockSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if locale:
        ctx.with_resource(use_locale(locale))
    if at is not None:
        ctx.with_resource(frozen_at(at))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
