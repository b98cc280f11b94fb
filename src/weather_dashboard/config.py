"""
Application settings.

Values come from environment variables prefixed with ``WEATHER_DASHBOARD_``
(or a local ``.env`` file). The Google Maps key is also accepted under the
unprefixed names used by the browser build.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "weather-dashboard/0.1 (https://github.com/weather-dashboard/weather-dashboard)"
)


class Settings(BaseSettings):
    """Runtime configuration for the proxy, the client and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_DASHBOARD_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-dashboard"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default location (Tokyo) used until the user picks one
    lat: float = Field(default=35.6895, ge=-90, le=90)
    lon: float = Field(default=139.6917, ge=-180, le=180)

    api_host: str = "127.0.0.1"
    api_port: int = 8000
    proxy_base_url: str = "http://127.0.0.1:8000"

    google_maps_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "WEATHER_DASHBOARD_GOOGLE_MAPS_API_KEY",
            "GOOGLE_MAPS_API_KEY",
            "NEXT_PUBLIC_GOOGLE_MAPS_API_KEY",
        ),
    )
    user_agent: str = DEFAULT_USER_AGENT

    # Outbound HTTP
    http_timeout: float = 10.0
    http_retries: int = 2

    # Cache lifetimes (seconds)
    forecast_ttl: float = 15 * 60
    geocode_ttl: float = 24 * 60 * 60

    preferences_path: Path = Path("~/.config/weather-dashboard/preferences.json")


@lru_cache
def get_settings() -> Settings:
    """Return the process settings, loaded once."""
    return Settings()
