"""Centralized configuration for imdb_search.

All values are sourced from environment variables (or a .env
file) and have safe defaults.

Usage:
    from imdb_search.settings import settings

    settings.imdb.base_url
    settings.logging.level
    settings.log_level
"""

from logging import DEBUG

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from imdb_search.settings.base import LoggingSettings
from imdb_search.settings.sources import IMDBSettings

__all__ = [
    "IMDBSettings",
    "LoggingSettings",
    "Settings",
    "settings",
]


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from imdb_search.settings import settings`
    """

    debug: bool = Field(default=False, alias="DEBUG")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    imdb: IMDBSettings = Field(default_factory=IMDBSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def log_level(self) -> int:
        """Logging level for the CLI. DEBUG overrides LOG_LEVEL."""
        return DEBUG if self.debug else self.logging.level_number


settings = Settings()
