"""Base configuration settings.

Contains foundational settings for paths and logging.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# PROJECT ROOT DETECTION
# =============================================================================

_PROJECT_ROOT = Path(__file__).parent.parent.parent
_CONFIG_DIR = _PROJECT_ROOT / "config"
_LOGS_DIR = _PROJECT_ROOT / "logs"


def get_project_root() -> Path:
    """Get project root directory."""
    return _PROJECT_ROOT


def get_config_dir() -> Path:
    """Get default directory of the mapping config file."""
    return _CONFIG_DIR


# =============================================================================
# PATH SETTINGS
# =============================================================================


class PathsSettings(BaseSettings):
    """Config paths configuration.

    Automatically creates required directories on initialization.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def config_dir(self) -> Path:
        """Persisted mapping tables."""
        return _CONFIG_DIR

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)


# =============================================================================
# LOGGING SETTINGS
# =============================================================================


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Log files directory (created on first file handler).
        to_file: Whether loggers also write a dated log file.
    """

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path = Field(default=_LOGS_DIR, alias="LOG_DIR")
    to_file: bool = Field(default=True, alias="LOG_TO_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid LOG_LEVEL. Valid: {valid_levels}")
        return v_upper
