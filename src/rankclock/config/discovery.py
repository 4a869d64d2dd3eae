"""Locating and reading ``rankclock.toml``.

The file is looked up from the working directory towards the filesystem
root; ``RANKCLOCK_CONFIG`` names a file directly and disables the search.
Reading checks every table against its section model, so a typo such as
``[timezones] beatleadr = ...`` or an unknown zone is reported with the
file and the offending key instead of surfacing later as a bare
validation error.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from rankclock.config.models import CONFIG_SECTIONS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "rankclock.toml"
CONFIG_ENV_VAR = "RANKCLOCK_CONFIG"


class ConfigError(click.ClickException):
    """A config file that cannot be found, parsed or validated."""


def describe_validation_error(exc: ValidationError, section: str | None = None) -> str:
    """``section.key: message`` for each error, joined with ``; ``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        key = f"{section}.{loc}" if section and loc else section or loc
        parts.append(f"{key}: {err['msg']}")
    return "; ".join(parts)


def find_config(start: Path | None = None) -> Path | None:
    """Path of the governing rankclock.toml, or None.

    ``RANKCLOCK_CONFIG`` wins over the walk-up from *start* (default: cwd);
    when it names a missing file no config applies at all.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if path.is_file():
            return path
        logger.warning("%s points at missing file %s; using defaults", CONFIG_ENV_VAR, path)
        return None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Using config %s", candidate)
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and check each ``[locale]``/``[timezones]`` table.

    Returns the raw tables so later sources (env vars, CLI flags) can still
    be merged over them.

    Raises:
        ConfigError: invalid TOML, an unknown table, or a bad key or value.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    for section, value in data.items():
        model = CONFIG_SECTIONS.get(section)
        if model is None:
            known = ", ".join(f"[{name}]" for name in CONFIG_SECTIONS)
            raise ConfigError(f"{path}: unknown section [{section}] (expected {known})")
        if not isinstance(value, dict):
            raise ConfigError(f"{path}: {section} must be a table, not {type(value).__name__}")
        try:
            model.model_validate(value)
        except ValidationError as exc:
            raise ConfigError(f"{path}: {describe_validation_error(exc, section)}") from exc
    return data
