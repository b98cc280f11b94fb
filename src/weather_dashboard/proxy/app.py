"""
FastAPI application exposing the proxy endpoints.

Routes:
  GET /api/weather?lat=<f>&lon=<f>              -> Met.no forecast JSON
  GET /api/geocode?lat=<f>&lng=<f>&lang=<code>  -> {"locationName": ...}
  GET /health                                   -> {"status": "ok"}

Failures are JSON ``{error, message?}`` with status 400 / 429 / 500.

Run locally::

    uvicorn --factory weather_dashboard.proxy.app:create_app
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from weather_dashboard import __version__
from weather_dashboard.config import Settings, get_settings
from weather_dashboard.errors import DashboardError, UpstreamFailure
from weather_dashboard.proxy.endpoints import (
    ForecastEndpoint,
    GeocodeEndpoint,
    build_endpoints,
    parse_coordinates,
)
from weather_dashboard.schemas import ErrorResponse, GeocodeResponse
from weather_dashboard.services.http import session_from_settings

logger = logging.getLogger(__name__)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid coordinates"},
    429: {"model": ErrorResponse, "description": "Upstream rate limit"},
    500: {"model": ErrorResponse, "description": "Upstream failure"},
}

router = APIRouter(prefix="/api", responses=_ERROR_RESPONSES)


def get_forecast_endpoint(request: Request) -> ForecastEndpoint:
    endpoint: ForecastEndpoint = request.app.state.forecast_endpoint
    return endpoint


def get_geocode_endpoint(request: Request) -> GeocodeEndpoint:
    endpoint: GeocodeEndpoint = request.app.state.geocode_endpoint
    return endpoint


@contextmanager
def normalized_errors(action: str) -> Iterator[None]:
    """Turn anything that is not already a ``DashboardError`` into a 500."""
    try:
        yield
    except DashboardError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error while %s", action)
        raise UpstreamFailure() from exc


@router.get("/weather")
def weather(
    endpoint: Annotated[ForecastEndpoint, Depends(get_forecast_endpoint)],
    lat: str | None = None,
    lon: str | None = None,
) -> dict[str, Any]:
    """Forecast for a point, with ``properties.location`` when it could be resolved."""
    coords = parse_coordinates(lat, lon)
    with normalized_errors("fetching weather data"):
        return endpoint.get(coords)


@router.get("/geocode", response_model=GeocodeResponse)
def geocode(
    endpoint: Annotated[GeocodeEndpoint, Depends(get_geocode_endpoint)],
    lat: str | None = None,
    lng: str | None = None,
    lang: str = "en",
) -> GeocodeResponse:
    """Display name for a point in the requested language."""
    coords = parse_coordinates(lat, lng)
    with normalized_errors("fetching geocoding data"):
        return endpoint.get(coords, language=lang or "en")


async def handle_dashboard_error(_request: Request, exc: DashboardError) -> JSONResponse:
    return JSONResponse(exc.to_body(), status_code=exc.status_code)


def create_app(
    settings: Settings | None = None,
    forecast_endpoint: ForecastEndpoint | None = None,
    geocode_endpoint: GeocodeEndpoint | None = None,
) -> FastAPI:
    """
    Build the proxy application.

    Endpoints (and therefore their caches) belong to the app instance;
    pass them in to share or isolate cache state.

    Args:
        settings: Configuration (defaults to ``get_settings()``).
        forecast_endpoint: Pre-built forecast endpoint.
        geocode_endpoint: Pre-built geocode endpoint.
    """
    settings = settings or get_settings()
    if forecast_endpoint is None or geocode_endpoint is None:
        default_forecast, default_geocode = build_endpoints(
            settings, session=session_from_settings(settings)
        )
        forecast_endpoint = forecast_endpoint or default_forecast
        geocode_endpoint = geocode_endpoint or default_geocode

    app = FastAPI(title=settings.app_name, version=__version__, debug=settings.debug)
    app.state.settings = settings
    app.state.forecast_endpoint = forecast_endpoint
    app.state.geocode_endpoint = geocode_endpoint

    app.add_exception_handler(DashboardError, handle_dashboard_error)  # type: ignore[arg-type]
    app.include_router(router)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
