"""
Client data layer: the dashboard's view of the proxy.

``DashboardClient`` calls ``/api/weather`` and ``/api/geocode`` and adds a
second cache layer in front of them. One client is meant to be shared by
every widget of a dashboard: its caches and its in-flight map are per
instance, so widgets asking for the same rounded coordinates at the same time
share a single proxy call.

Errors:
  - ``fetch_forecast*`` raise the ``DashboardError`` matching the proxy's
    status, carrying the proxy's message for display.
  - ``fetch_location_name`` never raises; it walks embedded name -> geocoder
    -> ``UNKNOWN_LOCATION``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from weather_dashboard.cache import TTLCache, cache_key
from weather_dashboard.client.fallback import Fallback, first_available
from weather_dashboard.coalesce import InFlightRequests
from weather_dashboard.config import Settings, get_settings
from weather_dashboard.datasources.metno.models import embedded_location_name, parse_timeseries
from weather_dashboard.errors import UNKNOWN_LOCATION, DashboardError, UpstreamFailure
from weather_dashboard.services.http import session_from_settings

if TYPE_CHECKING:
    from weather_dashboard.datasources.metno.models import ForecastSample

logger = logging.getLogger(__name__)

WEATHER_PATH = "/api/weather"
GEOCODE_PATH = "/api/geocode"

PROXY_UNREACHABLE = (
    "We're having trouble connecting to the weather service. Please try again later."
)


class DashboardClient:
    """Caching, coalescing client for the weather proxy."""

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        settings: Settings | None = None,
        forecast_cache: TTLCache[dict[str, Any]] | None = None,
        location_cache: TTLCache[str] | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = (base_url or settings.proxy_base_url).rstrip("/")
        self.session = session or session_from_settings(settings)
        self.forecast_cache: TTLCache[dict[str, Any]] = (
            forecast_cache if forecast_cache is not None else TTLCache(settings.forecast_ttl)
        )
        self.location_cache: TTLCache[str] = (
            location_cache if location_cache is not None else TTLCache(settings.geocode_ttl)
        )
        self._in_flight: InFlightRequests[Any] = InFlightRequests()

    # Forecast -----------------------------------------------------------

    def fetch_forecast_payload(self, lat: float, lon: float) -> dict[str, Any]:
        """Raw forecast JSON for a point, from cache or the proxy."""
        key = cache_key("weather", lat, lon)
        cached = self.forecast_cache.get(key)
        if cached is not None:
            return cached
        payload: dict[str, Any] = self._in_flight.run(
            key, lambda: self._load_forecast(key, lat, lon)
        )
        return payload

    def fetch_forecast(self, lat: float, lon: float) -> list[ForecastSample]:
        """Forecast time series for a point, in upstream order."""
        return parse_timeseries(self.fetch_forecast_payload(lat, lon))

    def _load_forecast(self, key: str, lat: float, lon: float) -> dict[str, Any]:
        payload = self._get_json(WEATHER_PATH, {"lat": lat, "lon": lon})
        self.forecast_cache.put(key, payload)
        return payload

    # Location name -----------------------------------------------------

    def fetch_location_name(self, lat: float, lon: float, language: str = "en") -> str:
        """
        Display name for a point; never raises.

        Tries, in order:
          1. ``properties.location.name`` embedded in the forecast payload
          2. the proxy's geocode endpoint (cached 24 h per language)
          3. ``UNKNOWN_LOCATION``
        """
        return first_available(
            [
                Fallback("forecast", lambda: self._embedded_name(lat, lon)),
                Fallback("geocode", lambda: self._geocoded_name(lat, lon, language)),
            ],
            default=UNKNOWN_LOCATION,
        )

    def _embedded_name(self, lat: float, lon: float) -> str | None:
        return embedded_location_name(self.fetch_forecast_payload(lat, lon))

    def _geocoded_name(self, lat: float, lon: float, language: str) -> str:
        key = cache_key("geocode", lat, lon, language)
        cached = self.location_cache.get(key)
        if cached is not None:
            return cached
        name: str = self._in_flight.run(key, lambda: self._load_name(key, lat, lon, language))
        return name

    def _load_name(self, key: str, lat: float, lon: float, language: str) -> str:
        body = self._get_json(GEOCODE_PATH, {"lat": lat, "lng": lon, "lang": language})
        name = str(body.get("locationName") or UNKNOWN_LOCATION)
        self.location_cache.put(key, name)
        return name

    # Transport -----------------------------------------------------------

    def _get_json(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params)
        except requests.RequestException as exc:
            logger.error("Error calling %s: %s", path, exc)
            raise UpstreamFailure(message=PROXY_UNREACHABLE) from exc

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not resp.ok:
            error = DashboardError.from_response(resp.status_code, body)
            logger.error("%s returned %s: %s", path, resp.status_code, error.error)
            raise error
        if not isinstance(body, dict):
            raise UpstreamFailure(message=PROXY_UNREACHABLE)
        return body
