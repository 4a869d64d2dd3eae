"""Tests for the Rich console factory."""

from rankclock.output.console import RANKCLOCK_THEME, create_console, get_output, swatch_style


def test_console_renders_to_buffer() -> None:
    console = create_console(no_color=True)
    console.print("hello", style="rc.ok")
    assert get_output(console) == "hello\n"


def test_theme_styles_present() -> None:
    for name in ("rc.ok", "rc.error", "rc.op", "rc.key", "rc.instant", "rc.yes", "rc.no"):
        assert name in RANKCLOCK_THEME.styles


def test_width_override() -> None:
    assert create_console(width=40).width == 40


def test_swatch_style() -> None:
    assert swatch_style("#8f8f8f") == "on #8f8f8f"
