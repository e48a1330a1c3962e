"""Runtime configuration for the httpi HTTP client binding."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="HTTPI_", extra="allow")

    # General
    environment: str = "development"
    log_level: str = "INFO"

    # HTTP client
    base_url: str = Field(default="", description="Prefix for relative request URLs")
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Default httpx timeout when a request does not carry a numeric one",
    )
    user_agent: str = Field(default="httpi/1.0", description="User-Agent header for outgoing requests")

    # JSONP
    jsonp_callback_prefix: str = Field(
        default="httpi_callbacks",
        description="Prefix of the generated names substituted for the JSON_CALLBACK marker",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
