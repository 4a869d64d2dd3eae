"""Subcommand modules for rankclock.

Provides register_commands() which uses deferred imports to keep
``rankclock --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rankclock.commands.duration import duration
    from rankclock.commands.format import format_cmd, relative
    from rankclock.commands.parse import parse
    from rankclock.commands.ranking import batch, color

    cli.add_command(parse)
    cli.add_command(format_cmd)
    cli.add_command(relative)
    cli.add_command(duration)
    cli.add_command(color)
    cli.add_command(batch)
