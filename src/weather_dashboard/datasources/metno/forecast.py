"""Hourly forecast from the Met.no Locationforecast API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from weather_dashboard.datasources.metno.client import (
    CONNECTIVITY_MESSAGE,
    LOCATIONFORECAST_API,
    check_response,
    json_body,
)
from weather_dashboard.errors import UpstreamFailure
from weather_dashboard.services import http

if TYPE_CHECKING:
    from weather_dashboard.schemas import Coordinates

logger = logging.getLogger(__name__)


def fetch_forecast(coords: Coordinates, session: requests.Session | None = None) -> dict[str, Any]:
    """
    Fetch the complete locationforecast payload for a point.

    Coordinates are sent at full precision; rounding only applies to cache keys.

    Args:
        coords: Point to forecast.
        session: HTTP session (defaults to the shared module session).

    Returns:
        Raw API response dict with ``properties.timeseries``.

    Raises:
        RateLimited: Met.no answered 429.
        UpstreamFailure: Any other non-success status or network error.
    """
    params = {"lat": coords.latitude, "lon": coords.longitude}
    try:
        resp = (session or http.session).get(LOCATIONFORECAST_API, params=params)
    except requests.RequestException as exc:
        logger.error("Error fetching weather data: %s", exc)
        raise UpstreamFailure(message=CONNECTIVITY_MESSAGE) from exc

    check_response(resp)
    return json_body(resp)
