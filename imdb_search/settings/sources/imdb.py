"""IMDb website configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IMDBSettings(BaseSettings):
    """IMDb search configuration.

    Attributes:
        base_url: IMDb website base URL (no trailing slash).
        timeout: Request timeout (seconds).
        max_retries: Maximum attempts per request on timeout.
        user_agent: HTTP User-Agent for requests.
        default_start: Default listing offset.
        default_count: Default listing page size.
    """

    base_url: str = Field(default="https://www.imdb.com", alias="IMDB_BASE_URL")
    timeout: float = Field(default=30.0, alias="IMDB_TIMEOUT")
    max_retries: int = Field(default=3, ge=1, alias="IMDB_MAX_RETRIES")
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        alias="IMDB_USER_AGENT",
    )
    default_start: int = Field(default=1, ge=1, alias="IMDB_DEFAULT_START")
    default_count: int = Field(default=10, ge=1, le=255, alias="IMDB_DEFAULT_COUNT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
