"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rankclock.toml only contains
overrides.  An empty file (or none at all) reproduces the built-in zones
and the ``en`` locale.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

from rankclock.domain.zones import ACCSABER_TZ, BEATLEADER_TZ, DISPLAY_TZ, validate_timezone
from rankclock.i18n.locale import DEFAULT_LOCALE


class LocaleConfig(BaseModel):
    """[locale] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    default: str = DEFAULT_LOCALE
    matcher: Literal["best fit", "lookup"] = "best fit"


class TimezonesConfig(BaseModel):
    """[timezones] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    beatleader: str = BEATLEADER_TZ
    accsaber: str = ACCSABER_TZ
    display: str = DISPLAY_TZ

    @field_validator("beatleader", "accsaber", "display")
    @classmethod
    def _known_zone(cls, value: str) -> str:
        return validate_timezone(value)


# TOML table name -> model; these are the only tables rankclock.toml may hold.
CONFIG_SECTIONS: dict[str, type[BaseModel]] = {
    "locale": LocaleConfig,
    "timezones": TimezonesConfig,
}
