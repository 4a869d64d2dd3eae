"""Tests for RankClockSettings: CLI flags, env vars and TOML in one object."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rankclock.config.discovery import ConfigError
from rankclock.config.settings import RankClockSettings, apply_settings
from rankclock.domain.zones import accsaber_tz, beatleader_tz, display_tz
from rankclock.i18n.locale import get_current_locale


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RANKCLOCK_CONFIG", "RANKCLOCK_LOCALE__DEFAULT", "RANKCLOCK_TIMEZONES__DISPLAY"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RankClockSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.locale.default == "en"
        assert settings.timezones.display == "UTC"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RankClockSettings.from_cli(search_from=tmp_path)
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "rankclock.toml"
        toml.write_text('[locale]\ndefault = "de"\n[timezones]\ndisplay = "Europe/Berlin"\n')
        settings = RankClockSettings.from_cli(search_from=tmp_path)
        assert settings.config_path == toml
        assert settings.locale.default == "de"
        assert settings.locale.matcher == "best fit"
        assert settings.timezones.display == "Europe/Berlin"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "clock.toml"
        custom.parent.mkdir()
        custom.write_text('[locale]\nmatcher = "lookup"\n')
        settings = RankClockSettings.from_cli(config_path=str(custom))
        assert settings.locale.matcher == "lookup"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "rankclock.toml").write_text("[locale\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            RankClockSettings.from_cli(search_from=tmp_path)

    def test_invalid_zone(self, tmp_path: Path) -> None:
        (tmp_path / "rankclock.toml").write_text('[timezones]\nbeatleader = "Nowhere/Town"\n')
        with pytest.raises(ConfigError, match=r"timezones\.beatleader: .*Unknown timezone"):
            RankClockSettings.from_cli(search_from=tmp_path)

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Config file not found"):
            RankClockSettings.from_cli(config_path=str(tmp_path / "missing.toml"))


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "rankclock.toml").write_text('[locale]\ndefault = "fr"\n')
        monkeypatch.setenv("RANKCLOCK_LOCALE__DEFAULT", "de")
        settings = RankClockSettings.from_cli(search_from=tmp_path)
        assert settings.locale.default == "de"

    def test_bad_env_value_reported(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANKCLOCK_TIMEZONES__DISPLAY", "Nowhere/Town")
        with pytest.raises(ConfigError, match=r"Invalid settings: timezones\.display"):
            RankClockSettings.from_cli(search_from=tmp_path)

    def test_cli_flags_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANKCLOCK_VERBOSE", "false")
        settings = RankClockSettings.from_cli(search_from=tmp_path, verbose=True)
        assert settings.verbose is True


def test_apply_settings(tmp_path: Path) -> None:
    (tmp_path / "rankclock.toml").write_text(
        '[locale]\ndefault = "ja"\n'
        '[timezones]\nbeatleader = "America/Chicago"\ndisplay = "Asia/Tokyo"\n'
    )
    apply_settings(RankClockSettings.from_cli(search_from=tmp_path))
    assert get_current_locale() == "ja"
    assert beatleader_tz() == "America/Chicago"
    assert accsaber_tz() == "Europe/Berlin"
    assert display_tz() == "Asia/Tokyo"
