"""Place-name lookup used to enrich forecast payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.datasources.metno.client import GEOLOOKUP_API
from weather_dashboard.schemas import PlaceLocation
from weather_dashboard.services import http

if TYPE_CHECKING:
    import requests

    from weather_dashboard.schemas import Coordinates


def fetch_place(
    coords: Coordinates, session: requests.Session | None = None
) -> PlaceLocation | None:
    """
    Look up the place nearest to ``coords``.

    Returns None when the service answers without a usable name. Network and
    HTTP errors propagate (``requests.RequestException``); the forecast
    endpoint treats this lookup as best-effort.
    """
    params = {"lat": coords.latitude, "lon": coords.longitude}
    resp = (session or http.session).get(
        GEOLOOKUP_API, params=params, headers={"Accept": "application/json"}
    )
    resp.raise_for_status()
    data = resp.json()

    if not isinstance(data, dict) or not data.get("name"):
        return None
    return PlaceLocation(
        name=str(data["name"]),
        country=data.get("country"),
        region=data.get("region"),
    )
