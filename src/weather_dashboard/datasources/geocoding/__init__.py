"""Google reverse-geocoding data source.

Public API:
  - reverse: fetch_reverse_geocode (coordinates -> results)
  - models: GeocodeResult, pick_location_name (locality > admin area > country)
"""

from weather_dashboard.datasources.geocoding.client import GEOCODE_API, RESULT_TYPES
from weather_dashboard.datasources.geocoding.models import GeocodeResult, pick_location_name
from weather_dashboard.datasources.geocoding.reverse import fetch_reverse_geocode

__all__ = [
    "GEOCODE_API",
    "RESULT_TYPES",
    "GeocodeResult",
    "fetch_reverse_geocode",
    "pick_location_name",
]
