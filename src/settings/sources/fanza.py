"""FANZA (dmm.co.jp) scraping configuration settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.settings.base import get_config_dir


class FanzaSettings(BaseSettings):
    """FANZA scraping configuration.

    Attributes:
        base_url: Site base URL for detail pages.
        config_file: JSON file holding prefix/suffix mapping tables.
        timeout: Request timeout (seconds).
        user_agent: HTTP User-Agent for requests.
        accept_language: Accept-Language header sent with every request.
    """

    base_url: str = Field(
        default="https://www.dmm.co.jp",
        alias="FANZA_BASE_URL",
    )
    config_file: Path = Field(
        default_factory=lambda: get_config_dir() / "config.json",
        alias="FANZA_CONFIG_FILE",
    )
    timeout: float = Field(default=30.0, alias="FANZA_TIMEOUT")
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        alias="FANZA_USER_AGENT",
    )
    accept_language: str = Field(
        default="ja-JP,ja;q=0.9,en-US;q=0.8,en;q=0.7",
        alias="FANZA_ACCEPT_LANGUAGE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
