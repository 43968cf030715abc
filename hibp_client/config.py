"""
Configuration settings for the HIBP lookup client.

Uses Pydantic Settings to load environment variables for the API key,
service endpoint, transport timeout, and logging. Pass a `Settings` instance
to `LookupClient` explicitly; `get_settings()` is only the process default.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hibp_client import __version__

DEFAULT_BASE_URL = "https://haveibeenpwned.com/api/v3/"
DEFAULT_USER_AGENT = f"hibp-client/{__version__}"


class Settings(BaseSettings):
    # Service
    hibp_api_key: str = Field("", alias="HIBP_API_KEY")
    hibp_base_url: str = Field(DEFAULT_BASE_URL, alias="HIBP_BASE_URL")
    hibp_user_agent: str = Field(DEFAULT_USER_AGENT, alias="HIBP_USER_AGENT")
    hibp_timeout_seconds: float = Field(10.0, gt=0, alias="HIBP_TIMEOUT_SECONDS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_USER_AGENT", "Settings", "get_settings"]
