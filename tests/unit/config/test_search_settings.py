"""Unit tests for SearchSettings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from scoped_search.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SearchSettings,
    SettingsFactory,
)

_VARS = ("SEARCH_BASE_URL", "SEARCH_TIMEOUT", "SEARCH_DEFAULT_PAGE_SIZE", "SEARCH_MAX_PAGE_SIZE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values a .env file loaded
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvLoading:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_BASE_URL", "https://portal.example.com")
        settings = EnvSettingsLoader().load(SearchSettings)
        assert settings.base_url == "https://portal.example.com"
        assert settings.timeout == 10.0
        assert settings.default_page_size == 10
        assert settings.max_page_size == 1000

    def test_coerces_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("SEARCH_TIMEOUT", "2.5")
        monkeypatch.setenv("SEARCH_DEFAULT_PAGE_SIZE", "25")
        monkeypatch.setenv("SEARCH_MAX_PAGE_SIZE", "200")
        settings = EnvSettingsLoader().load(SearchSettings)
        assert settings.timeout == 2.5
        assert settings.default_page_size == 25
        assert settings.max_page_size == 200

    def test_empty_timeout_disables_it(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_BASE_URL", "http://localhost")
        monkeypatch.setenv("SEARCH_TIMEOUT", "")
        assert EnvSettingsLoader().load(SearchSettings).timeout is None

    def test_missing_base_url(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(SearchSettings)
        assert exc_info.value.setting_name == "SEARCH_BASE_URL"

    def test_unparseable_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_BASE_URL", "http://localhost")
        monkeypatch.setenv("SEARCH_DEFAULT_PAGE_SIZE", "ten")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(SearchSettings)
        assert exc_info.value.setting_name == "SEARCH_DEFAULT_PAGE_SIZE"


# ---------------------------------------------------------------------------
# Cross-field validation
# ---------------------------------------------------------------------------


class TestValidation:
    @pytest.mark.parametrize(
        ("kwargs", "setting"),
        [
            ({"base_url": "portal.example.com"}, "base_url"),
            ({"base_url": "http://x", "timeout": 0}, "timeout"),
            ({"base_url": "http://x", "default_page_size": 0}, "default_page_size"),
            ({"base_url": "http://x", "default_page_size": 50, "max_page_size": 20}, "max_page_size"),
        ],
    )
    def test_rejected(self, kwargs: dict[str, object], setting: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchSettings(**kwargs)  # type: ignore[arg-type]
        assert exc_info.value.setting_name == setting

    def test_invalid_setting_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SearchSettings(base_url="ftp://portal")


# ---------------------------------------------------------------------------
# Dotenv + factory
# ---------------------------------------------------------------------------


class TestDotenvAndFactory:
    def test_dotenv_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEARCH_BASE_URL=http://from-dotenv\nSEARCH_MAX_PAGE_SIZE=500\n")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(SearchSettings)
        assert settings.base_url == "http://from-dotenv"
        assert settings.max_page_size == 500

    def test_factory_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_BASE_URL", "http://env")
        settings = SettingsFactory.create(
            SearchSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"timeout": None},
        )
        assert settings.base_url == "http://env"
        assert settings.timeout is None

    def test_factory_fills_missing_from_overrides(self) -> None:
        settings = SettingsFactory.create(
            SearchSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"base_url": "http://override"},
        )
        assert settings.base_url == "http://override"

    def test_factory_reports_missing(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(SearchSettings, loaders=[EnvSettingsLoader()])
