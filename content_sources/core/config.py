# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Database settings live in ``content_sources.db.config``.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "content-sources"
    API_VERSION: str = "v1"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:1337"]

    # -- Logging --
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level name (DEBUG, INFO, WARNING, ...).",
    )

    @property
    def API_PREFIX(self) -> str:
        """Path prefix every versioned route is mounted under."""
        return f"/api/{self.APP_NAME}/{self.API_VERSION}"


settings = Settings()
