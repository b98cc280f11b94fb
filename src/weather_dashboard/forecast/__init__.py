"""Forecast logic: pure functions from samples to what the dashboard shows.

Dependency rule: forecast/ imports datasource *models* only. It never fetches
data and never renders.

Modules:
  - selector: day filtering, representative samples, min/max, precipitation
  - recommendation: umbrella rule over the next 12 samples
  - units: Celsius/Fahrenheit display conversion
"""

from weather_dashboard.forecast.recommendation import needs_umbrella
from weather_dashboard.forecast.selector import (
    EVENING,
    MORNING,
    NOON,
    CurrentConditions,
    DaySummary,
    TemperatureRange,
    aggregate,
    current_conditions,
    pick_representative,
    precipitation_likelihood,
    select_day,
    summarize_day,
)
from weather_dashboard.forecast.units import (
    TemperatureUnit,
    convert_temperature,
    format_temperature,
)

__all__ = [
    "EVENING",
    "MORNING",
    "NOON",
    "CurrentConditions",
    "DaySummary",
    "TemperatureRange",
    "TemperatureUnit",
    "aggregate",
    "convert_temperature",
    "current_conditions",
    "format_temperature",
    "needs_umbrella",
    "pick_representative",
    "precipitation_likelihood",
    "select_day",
    "summarize_day",
]
