"""Forecast sample model and parsing of Met.no ``properties.timeseries``."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from weather_dashboard.datasources.metno.client import MALFORMED_MESSAGE
from weather_dashboard.errors import UpstreamFailure


@dataclass(frozen=True)
class ForecastSample:
    """A single point of the forecast time series."""

    time: datetime
    temperature: float  # air temperature, degC
    humidity: float | None = None  # relative humidity, %
    wind_speed: float | None = None  # m/s
    condition_code: str | None = None  # e.g. "rain", "partlycloudy_day"


def symbol_code(entry: dict[str, Any]) -> str | None:
    """Condition code of a raw timeseries entry, next-1-hour summary first."""
    data = entry.get("data", {})
    for period in ("next_1_hours", "next_6_hours"):
        code = (data.get(period) or {}).get("summary", {}).get("symbol_code")
        if code:
            return str(code)
    return None


def parse_time(value: str) -> datetime:
    """Parse Met.no ISO timestamps (``2024-01-02T00:00:00Z``)."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_sample(entry: dict[str, Any]) -> ForecastSample:
    """Convert one raw timeseries entry into a ``ForecastSample``."""
    details = entry.get("data", {}).get("instant", {}).get("details", {})
    return ForecastSample(
        time=parse_time(entry["time"]),
        temperature=float(details["air_temperature"]),
        humidity=details.get("relative_humidity"),
        wind_speed=details.get("wind_speed"),
        condition_code=symbol_code(entry),
    )


def parse_timeseries(payload: dict[str, Any]) -> list[ForecastSample]:
    """
    Extract forecast samples from a locationforecast payload.

    Order is preserved as received (chronological ascending upstream);
    no re-sorting is performed.

    Args:
        payload: Raw locationforecast JSON (as returned by the proxy).

    Returns:
        List of samples; empty when the payload has no timeseries.

    Raises:
        UpstreamFailure: An entry lacks a timestamp or air temperature, or
            the payload is not shaped like a locationforecast response.
    """
    try:
        entries = (payload.get("properties") or {}).get("timeseries") or []
        return [parse_sample(entry) for entry in entries]
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise UpstreamFailure(message=MALFORMED_MESSAGE) from exc


def embedded_location_name(payload: dict[str, Any]) -> str | None:
    """Place name injected by the proxy under ``properties.location.name``."""
    properties = payload.get("properties")
    location = properties.get("location") if isinstance(properties, dict) else None
    if not isinstance(location, dict):
        return None
    name = location.get("name")
    return str(name) if name else None
