"""Met.no weather data source.

Fetches the hourly locationforecast (identifying User-Agent required) and a
best-effort place name for enriching forecast payloads.

Public API:
  - forecast: fetch_forecast (raw locationforecast payload)
  - geolookup: fetch_place (nearest place name)
  - models: ForecastSample, parse_timeseries, embedded_location_name
  - client: API URLs, response checking
"""

from weather_dashboard.datasources.metno.client import GEOLOOKUP_API, LOCATIONFORECAST_API
from weather_dashboard.datasources.metno.forecast import fetch_forecast
from weather_dashboard.datasources.metno.geolookup import fetch_place
from weather_dashboard.datasources.metno.models import (
    ForecastSample,
    embedded_location_name,
    parse_timeseries,
    symbol_code,
)

__all__ = [
    "GEOLOOKUP_API",
    "LOCATIONFORECAST_API",
    "ForecastSample",
    "embedded_location_name",
    "fetch_forecast",
    "fetch_place",
    "parse_timeseries",
    "symbol_code",
]
