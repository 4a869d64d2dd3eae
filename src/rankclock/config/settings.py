"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RANKCLOCK_*`` prefix (``RANKCLOCK_LOCALE__DEFAULT=de``)
  3. TOML file    — ``rankclock.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The library itself never reads settings.  :func:`apply_settings` pushes the
locale and timezone choices into the i18n and domain layers.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rankclock.config.discovery import (
    ConfigError,
    describe_validation_error,
    find_config,
    read_config,
)
from rankclock.config.models import LocaleConfig, TimezonesConfig
from rankclock.domain.zones import configure_timezones
from rankclock.i18n.locale import set_default_locale


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rankclock.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RankClockSettings(BaseSettings):
    """Resolved settings for the rankclock CLI and embedding applications.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        locale: Display locale defaults.
        timezones: Source and display zones.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RANKCLOCK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    timezones: TimezonesConfig = Field(default_factory=TimezonesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> RankClockSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``rankclock.toml`` by walking up from *search_from* (default: cwd).

        Raises:
            ConfigError: the explicit file is missing, or the file or a
                ``RANKCLOCK_*`` variable holds an invalid value.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                raise ConfigError(f"Config file not found: {toml_path}")
        else:
            toml_path = find_config(search_from)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            raise ConfigError(f"Invalid settings: {describe_validation_error(exc)}") from exc
        finally:
            _tls.toml_path = None


def apply_settings(settings: RankClockSettings) -> None:
    """Install the configured default locale and timezones library-wide."""
    set_default_locale(settings.locale.default)
    configure_timezones(
        beatleader=settings.timezones.beatleader,
        accsaber=settings.timezones.accsaber,
        display=settings.timezones.display,
    )
