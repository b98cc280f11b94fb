"""
Proxy endpoint services: upstream client + TTL cache + error normalization.

Each endpoint object owns its cache and in-flight map, so a test (or a second
app instance) gets isolated state simply by constructing a new one.

Flow for a request::

    parse coordinates -> cache hit? -> in-flight? -> upstream -> cache -> body

Every failure leaves as a ``DashboardError`` (400 / 429 / 500); raw
``requests`` exceptions never escape.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests
from pydantic import ValidationError

from weather_dashboard.cache import FORECAST_TTL, GEOCODE_TTL, TTLCache, cache_key
from weather_dashboard.coalesce import InFlightRequests
from weather_dashboard.datasources import geocoding, metno
from weather_dashboard.datasources.geocoding.client import (
    GEOCODE_FAILURE,
    GEOCODE_FAILURE_MESSAGE,
)
from weather_dashboard.errors import InvalidParameter, MissingParameter, UpstreamFailure
from weather_dashboard.schemas import Coordinates, GeocodeResponse

if TYPE_CHECKING:
    from weather_dashboard.config import Settings

logger = logging.getLogger(__name__)


def parse_coordinates(lat: str | None, lon: str | None) -> Coordinates:
    """
    Validate raw query-string coordinates.

    Raises:
        MissingParameter: Either value is absent or blank.
        InvalidParameter: Values are not numbers within lat/lon bounds.
    """
    if not lat or not lon:
        raise MissingParameter()
    try:
        return Coordinates(latitude=float(lat), longitude=float(lon))
    except (ValueError, ValidationError) as exc:
        raise InvalidParameter() from exc


class ForecastEndpoint:
    """``/api/weather``: Met.no forecast, enriched with a place name, cached 15 min."""

    kind = "weather"

    def __init__(
        self,
        session: requests.Session | None = None,
        cache: TTLCache[dict[str, Any]] | None = None,
        enrich: bool = True,
    ) -> None:
        self.session = session
        self.cache: TTLCache[dict[str, Any]] = (
            cache if cache is not None else TTLCache(FORECAST_TTL)
        )
        self.enrich = enrich
        self._in_flight: InFlightRequests[dict[str, Any]] = InFlightRequests()

    def get(self, coords: Coordinates) -> dict[str, Any]:
        """Return the (possibly cached) forecast payload for ``coords``."""
        key = cache_key(self.kind, coords.latitude, coords.longitude)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Forecast cache hit: %s", key)
            return cached
        return self._in_flight.run(key, lambda: self._fetch(key, coords))

    def _fetch(self, key: str, coords: Coordinates) -> dict[str, Any]:
        payload = metno.fetch_forecast(coords, session=self.session)
        if self.enrich:
            self._add_location(payload, coords)
        self.cache.put(key, payload)
        logger.info("Cached forecast %s (%d samples)", key, _sample_count(payload))
        return payload

    def _add_location(self, payload: dict[str, Any], coords: Coordinates) -> None:
        """Inject ``properties.location``; failures only cost the place name."""
        try:
            place = metno.fetch_place(coords, session=self.session)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Error fetching location name from Met.no: %s", exc)
            return
        if place is None:
            return
        properties = payload.setdefault("properties", {})
        properties["location"] = place.model_dump()


class GeocodeEndpoint:
    """``/api/geocode``: Google reverse geocoding, cached 24 h per language."""

    kind = "geocode"

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        cache: TTLCache[GeocodeResponse] | None = None,
    ) -> None:
        self.api_key = api_key
        self.session = session
        self.cache: TTLCache[GeocodeResponse] = (
            cache if cache is not None else TTLCache(GEOCODE_TTL)
        )
        self._in_flight: InFlightRequests[GeocodeResponse] = InFlightRequests()

    def get(self, coords: Coordinates, language: str = "en") -> GeocodeResponse:
        """Return the best place name for ``coords`` in ``language``."""
        key = cache_key(self.kind, coords.latitude, coords.longitude, language)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Geocode cache hit: %s", key)
            return cached
        return self._in_flight.run(key, lambda: self._fetch(key, coords, language))

    def _fetch(self, key: str, coords: Coordinates, language: str) -> GeocodeResponse:
        if not self.api_key:
            logger.error("No Google Maps API key configured")
            raise UpstreamFailure(GEOCODE_FAILURE, GEOCODE_FAILURE_MESSAGE)
        results = geocoding.fetch_reverse_geocode(
            coords, self.api_key, language=language, session=self.session
        )
        response = GeocodeResponse(locationName=geocoding.pick_location_name(results))
        self.cache.put(key, response)
        return response


def build_endpoints(
    settings: Settings, session: requests.Session | None = None
) -> tuple[ForecastEndpoint, GeocodeEndpoint]:
    """Construct both endpoints with cache lifetimes from ``settings``."""
    forecast = ForecastEndpoint(session=session, cache=TTLCache(settings.forecast_ttl))
    geocode = GeocodeEndpoint(
        settings.google_maps_api_key, session=session, cache=TTLCache(settings.geocode_ttl)
    )
    return forecast, geocode


def _sample_count(payload: dict[str, Any]) -> int:
    return len((payload.get("properties") or {}).get("timeseries") or [])
