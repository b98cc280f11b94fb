"""Umbrella recommendation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weather_dashboard.datasources.metno.models import ForecastSample

RAIN_INDICATOR = "rain"
LOOKAHEAD_SAMPLES = 12  # hourly series -> roughly the next 12 hours


def needs_umbrella(timeseries: list[ForecastSample], window: int = LOOKAHEAD_SAMPLES) -> bool:
    """
    Whether rain shows up in the first ``window`` samples of the series.

    Uses series order (upstream is chronological), not clock arithmetic;
    shorter series are checked in full.
    """
    return any(
        RAIN_INDICATOR in (sample.condition_code or "") for sample in timeseries[:window]
    )
