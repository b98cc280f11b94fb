"""Reverse geocoding (coordinates -> place name) via Google Geocoding API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from weather_dashboard.datasources.geocoding.client import (
    GEOCODE_API,
    GEOCODE_FAILURE,
    GEOCODE_FAILURE_MESSAGE,
    RESULT_TYPES,
)
from weather_dashboard.datasources.geocoding.models import GeocodeResult
from weather_dashboard.errors import UpstreamFailure
from weather_dashboard.services import http

if TYPE_CHECKING:
    from weather_dashboard.schemas import Coordinates

logger = logging.getLogger(__name__)

# Google reports quota and key problems in the body with HTTP 200
_OK_STATUSES = {"OK", "ZERO_RESULTS"}


def fetch_reverse_geocode(
    coords: Coordinates,
    api_key: str,
    language: str = "en",
    session: requests.Session | None = None,
) -> list[GeocodeResult]:
    """
    Fetch reverse-geocoding results for a point.

    Args:
        coords: Point to resolve (sent at full precision).
        api_key: Google Maps API key.
        language: Language tag for the returned names (e.g. ``"ja"``).
        session: HTTP session (defaults to the shared module session).

    Returns:
        Parsed results; empty list when Google finds nothing.

    Raises:
        UpstreamFailure: Non-success status, network error or an error
            status in the response body.
    """
    params: dict[str, Any] = {
        "latlng": f"{coords.latitude},{coords.longitude}",
        "key": api_key,
        "language": language,
        "result_type": "|".join(RESULT_TYPES),
    }
    try:
        resp = (session or http.session).get(GEOCODE_API, params=params)
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Error fetching geocoding data: %s", exc)
        raise UpstreamFailure(GEOCODE_FAILURE, GEOCODE_FAILURE_MESSAGE) from exc

    if not isinstance(data, dict):
        raise UpstreamFailure(GEOCODE_FAILURE, GEOCODE_FAILURE_MESSAGE)

    status = data.get("status", "OK")
    if status not in _OK_STATUSES:
        logger.error("Geocoding API status %s: %s", status, data.get("error_message", ""))
        raise UpstreamFailure(GEOCODE_FAILURE, GEOCODE_FAILURE_MESSAGE)

    return [GeocodeResult.from_api(r) for r in data.get("results") or []]
