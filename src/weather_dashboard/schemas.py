"""
Pydantic models for the proxy's inputs and outputs.

Parsed upstream records (forecast samples, geocoding results) are plain
dataclasses under ``datasources/``; these models cover what crosses the
HTTP boundary of the proxy.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class PlaceLocation(BaseModel):
    """Place name injected into forecast payloads as ``properties.location``."""

    name: str
    country: str | None = None
    region: str | None = None


class GeocodeResponse(BaseModel):
    """Body of a successful ``/api/geocode`` call."""

    locationName: str  # noqa: N815 (wire name)


class ErrorResponse(BaseModel):
    """Body of every failed proxy call."""

    error: str
    message: str | None = None
