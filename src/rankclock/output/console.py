"""Rich Console factory and theme for rankclock output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RANKCLOCK_THEME = Theme(
    {
        "rc.ok": "bold green",
        "rc.error": "bold red",
        "rc.op": "bold cyan",
        "rc.key": "dim",
        "rc.instant": "bold blue",
        "rc.yes": "green",
        "rc.no": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RANKCLOCK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def swatch_style(hex_color: str) -> str:
    """Rich style that paints a block in *hex_color* (``#rrggbb``)."""
    return f"on {hex_color}"
