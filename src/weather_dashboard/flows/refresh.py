"""
Prefect flow that refreshes the dashboard for one location.

Fetches the forecast and the place name through a ``DashboardClient`` (so
both proxy cache layers apply), then builds today/tomorrow summaries, the
current conditions and the umbrella recommendation.

Run locally (proxy must be running, see ``weather-dashboard serve``):
    python -m weather_dashboard.flows.refresh
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from weather_dashboard.client import DashboardClient
from weather_dashboard.config import get_settings
from weather_dashboard.forecast import (
    CurrentConditions,
    DaySummary,
    current_conditions,
    needs_umbrella,
    summarize_day,
)

if TYPE_CHECKING:
    from datetime import tzinfo

    from weather_dashboard.datasources.metno import ForecastSample


@dataclass
class Dashboard:
    """Everything the dashboard shows for one location."""

    latitude: float
    longitude: float
    location_name: str
    today: DaySummary | None
    tomorrow: DaySummary | None
    current: CurrentConditions | None
    needs_umbrella: bool


@task(name="fetch-forecast", cache_policy=NO_CACHE)
def fetch_forecast(client: DashboardClient, lat: float, lon: float) -> list[ForecastSample]:
    """Fetch the forecast time series via the proxy."""
    return client.fetch_forecast(lat, lon)


@task(name="fetch-location-name", cache_policy=NO_CACHE)
def fetch_location_name(client: DashboardClient, lat: float, lon: float, language: str) -> str:
    """Resolve the place name (never fails; may be "Unknown Location")."""
    return client.fetch_location_name(lat, lon, language)


def build_dashboard(
    timeseries: list[ForecastSample],
    location_name: str,
    lat: float,
    lon: float,
    today: date,
    tz: tzinfo | None = None,
) -> Dashboard:
    """Assemble the dashboard from an already-fetched time series."""
    return Dashboard(
        latitude=lat,
        longitude=lon,
        location_name=location_name,
        today=summarize_day(timeseries, today, tz),
        tomorrow=summarize_day(timeseries, today + timedelta(days=1), tz),
        current=current_conditions(timeseries),
        needs_umbrella=needs_umbrella(timeseries),
    )


@flow(name="refresh-dashboard", log_prints=True)
def refresh_dashboard(
    lat: float | None = None,
    lon: float | None = None,
    language: str = "en",
    base_url: str | None = None,
    today: date | None = None,
) -> Dashboard:
    """
    Refresh the dashboard for a location.

    Defaults to the configured location and the proxy at
    ``settings.proxy_base_url``. Forecast errors (rate limiting, upstream
    failure) propagate as ``DashboardError``; the place name never fails.
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon
    client = DashboardClient(base_url=base_url, settings=settings)

    print(f"Fetching forecast for ({lat}, {lon})...")
    timeseries = fetch_forecast(client, lat, lon)
    location_name = fetch_location_name(client, lat, lon, language)
    print(f"{location_name}: {len(timeseries)} forecast samples")

    return build_dashboard(timeseries, location_name, lat, lon, today or date.today())


if __name__ == "__main__":
    result = refresh_dashboard()
    print(f"Flow complete: {result.location_name}, umbrella={result.needs_umbrella}")
