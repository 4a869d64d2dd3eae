"""Shared pytest fixtures and test helpers for rankclock tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from rankclock.clock import frozen_at
from rankclock.domain.zones import reset_timezones
from rankclock.i18n.locale import DEFAULT_LOCALE, set_default_locale

# Wednesday of the ISO week starting Monday 2024-01-01.
WEDNESDAY_NOON = datetime(2024, 1, 3, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _restore_library_state() -> Generator[None]:
    """Undo anything apply_settings() or configure_logging() installed."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_level = logging.getLogger("rankclock").level
    yield
    reset_timezones()
    set_default_locale(DEFAULT_LOCALE)
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("rankclock").setLevel(package_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def frozen_now() -> Generator[datetime]:
    """Pin the library clock to :data:`WEDNESDAY_NOON`."""
    with frozen_at(WEDNESDAY_NOON) as instant:
        yield instant


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory so no rankclock.toml is discovered."""
    monkeypatch.delenv("RANKCLOCK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
