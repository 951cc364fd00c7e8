"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration.

    Only the composition root reads these values; pipeline components
    receive them as explicit constructor arguments.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "newsfeed"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # Fetching
    feed_fetch_timeout: float = Field(
        default=12.0,
        gt=0,
        description="Time budget of a single fetch attempt in seconds",
    )
    feed_max_attempts: int = Field(
        default=2,
        ge=1,
        description="Total fetch attempts on timeout or network failure",
    )
    feed_retry_delay: float = Field(
        default=0.35,
        ge=0,
        description="Fixed delay between fetch attempts in seconds",
    )
    feed_user_agent: str = "newsfeed/0.1 (+feed reader)"
    feed_accept: str = (
        "application/rss+xml, application/rdf+xml, application/atom+xml, "
        "application/xml;q=0.9, text/xml;q=0.8, */*;q=0.5"
    )

    # Parsing
    feed_max_items: int = Field(
        default=30,
        ge=1,
        description="Maximum number of items returned per feed",
    )

    # API
    default_source: str = "nhk"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cache_s_maxage: int = Field(default=30, ge=0, description="CDN cache lifetime in seconds")
    cache_stale_while_revalidate: int = Field(default=60, ge=0)


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
