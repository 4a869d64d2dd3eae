"""Human/JSON rendering of CommandResult.

Human output is a status line followed by indented ``key: value`` fields;
``color`` values also get a swatch.  ``--json`` dumps the result model.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from rich.text import Text

from rankclock.output.console import create_console, get_output, swatch_style

if TYPE_CHECKING:
    from rankclock.output.result import CommandResult


def _field(key: str, value: Any) -> Text:
    line = Text(f"  {key}: ", style="rc.key")
    if isinstance(value, bool):
        line.append("yes" if value else "no", style="rc.yes" if value else "rc.no")
    elif isinstance(value, datetime):
        line.append(value.isoformat(), style="rc.instant")
    elif key == "color" and isinstance(value, str):
        line.append(value)
        line.append("  ")
        line.append("      ", style=swatch_style(value))
    else:
        line.append(str(value))
    return line


def format_result(result: CommandResult, *, json_output: bool = False) -> str:
    """Format a CommandResult for display.

    Args:
        result: The command result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    console = create_console()
    console.print(Text.assemble(("OK", "rc.ok"), (f"  {result.op}", "rc.op")))
    for key, value in result.data.items():
        if value is None:
            continue
        console.print(_field(key, value))
    return get_output(console).rstrip("\n")
