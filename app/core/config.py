"""
Application configuration models and helpers.

Credentials for the Yahoo Fantasy API are loaded once at process start from
the environment (or a ``.env`` file) and never mutated afterwards.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class YahooSettings(BaseSettings):
    """Configuration required for talking to Yahoo OAuth and Fantasy APIs."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    client_id: str = Field("", validation_alias="CLIENT_ID")
    client_secret: str = Field("", validation_alias="CLIENT_SECRET")
    redirect_uri: str = Field(
        "http://localhost:3000/auth/callback",
        validation_alias="REDIRECT_URI",
        description="Callback URL registered with the Yahoo developer app.",
    )
    league_key: str = Field(
        "",
        validation_alias="LEAGUE_KEY",
        description="League identifier such as ``nfl.l.12345``.",
    )
    timeout_seconds: float = Field(10.0, validation_alias="UPSTREAM_TIMEOUT_SECONDS")

    @field_validator("client_id", "client_secret", "league_key", mode="before")
    @classmethod
    def _strip(cls, value: Optional[str]) -> str:
        return (value or "").strip()


class AppSettings(BaseSettings):
    """Root settings object for the relay service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    port: int = Field(3000, validation_alias="PORT")
    static_dir: Path = Field(DEFAULT_STATIC_DIR, validation_alias="STATIC_DIR")
    yahoo: YahooSettings = Field(default_factory=YahooSettings)

    def missing_credentials(self) -> list[str]:
        """Return the names of required Yahoo settings that are unset."""
        required = {
            "CLIENT_ID": self.yahoo.client_id,
            "CLIENT_SECRET": self.yahoo.client_secret,
            "LEAGUE_KEY": self.yahoo.league_key,
        }
        return [name for name, value in required.items() if not value]


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "YahooSettings",
    "get_settings",
]
