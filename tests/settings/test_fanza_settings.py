"""Tests for settings modules.

Uses monkeypatch to isolate from environment variables.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.settings import Settings
from src.settings.api import APISettings
from src.settings.base import LoggingSettings, PathsSettings, get_config_dir, get_project_root
from src.settings.sources.fanza import FanzaSettings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove relevant environment variables for isolated testing."""
    for var in (
        "LOG_LEVEL",
        "LOG_DIR",
        "API_HOST",
        "API_PORT",
        "FANZA_BASE_URL",
        "FANZA_CONFIG_FILE",
        "FANZA_TIMEOUT",
        "FANZA_USER_AGENT",
        "FANZA_ACCEPT_LANGUAGE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.mark.usefixtures("clean_env")
class TestFanzaSettings:
    @staticmethod
    def test_defaults() -> None:
        s = FanzaSettings(_env_file=None)
        assert s.base_url == "https://www.dmm.co.jp"
        assert s.config_file == get_project_root() / "config" / "config.json"
        assert s.timeout == 30.0
        assert s.accept_language.startswith("ja-JP")

    @staticmethod
    def test_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("FANZA_CONFIG_FILE", str(tmp_path / "c.json"))
        monkeypatch.setenv("FANZA_TIMEOUT", "5")
        s = FanzaSettings(_env_file=None)
        assert s.config_file == tmp_path / "c.json"
        assert s.timeout == 5.0


@pytest.mark.usefixtures("clean_env")
class TestBaseSettings:
    @staticmethod
    def test_log_level_uppercased(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingSettings(_env_file=None).level == "DEBUG"

    @staticmethod
    def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            LoggingSettings(_env_file=None)

    @staticmethod
    def test_paths() -> None:
        paths = PathsSettings(_env_file=None)
        assert paths.config_dir == get_project_root() / "config"
        assert get_config_dir() == paths.config_dir

    @staticmethod
    def test_log_dir_under_project_root() -> None:
        assert LoggingSettings(_env_file=None).log_dir == get_project_root() / "logs"

    @staticmethod
    def test_log_dir_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "out"))
        assert LoggingSettings(_env_file=None).log_dir == tmp_path / "out"

    @staticmethod
    def test_api_port(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "9000")
        assert APISettings(_env_file=None).port == 9000


@pytest.mark.usefixtures("clean_env")
class TestGlobalSettings:
    @staticmethod
    def test_aggregates_sections() -> None:
        s = Settings(_env_file=None)
        assert isinstance(s.fanza, FanzaSettings)
        assert s.fanza.config_file.parent == s.paths.config_dir
        assert s.paths.config_dir.is_dir()
