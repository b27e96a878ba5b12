"""Application settings and configuration helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly-typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = Field(default="Fandango Showtimes Skill", description="Human-readable service name.")
    environment: str = Field(default="local", description="Deployment environment identifier.")
    log_level: str = Field(default="INFO", description="Application log level.")

    skill_title: str = Field(default="Fandango", description="Title shown on cards sent to the device.")
    alexa_app_id: str | None = Field(
        default=None,
        description="Application id requests must carry. Verification is skipped when unset.",
    )

    fandango_feed_url: str = Field(
        default="http://www.fandango.com/rss/moviesnearme_{zipcode}.rss",
        description="Movies-near-me RSS feed URL template with a {zipcode} placeholder.",
    )
    fandango_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the feed request.",
    )
    fandango_max_theaters: int = Field(
        default=3,
        ge=1,
        description="Maximum number of theaters read back to the user.",
    )

    default_location: str = Field(
        default="Seattle",
        description="Location used by one-shot requests that do not name one.",
    )
    extra_locations: Dict[str, str] = Field(
        default_factory=dict,
        description="Additional location name to zipcode entries merged into the built-in table.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()
