"""Pick a calendar day out of a forecast time series and summarize it.

Pure functions over ``ForecastSample`` lists; no I/O.

Day boundaries are local: a sample belongs to ``target_date`` when its local
time is within 00:00:00.000-23:59:59.999 of that date. Aware timestamps are
converted to ``tz`` (the system zone when ``tz`` is None); naive timestamps
are taken as already local.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from weather_dashboard.datasources.metno.models import ForecastSample

# Inclusive local-hour ranges for the representative samples of a day
MORNING = (8, 10)
NOON = (12, 14)
EVENING = (18, 20)

DAY_START = time(0, 0, 0)
DAY_END = time(23, 59, 59, 999000)

# Checked in order: a rain-shower code also contains "rain"
PRECIPITATION_RULES: tuple[tuple[str, int], ...] = (
    ("rainshowers", 60),
    ("rain", 80),
    ("drizzle", 40),
    ("cloud", 20),
)


class TemperatureRange(NamedTuple):
    """Daily min/max air temperature in degC."""

    min: float
    max: float


@dataclass
class DaySummary:
    """Everything the day view shows for one calendar date."""

    date: date
    samples: list[ForecastSample]
    morning: ForecastSample
    noon: ForecastSample
    evening: ForecastSample
    temperature: TemperatureRange
    precipitation_chance: int

    @property
    def first(self) -> ForecastSample:
        """Earliest sample of the day, used for the headline condition."""
        return self.samples[0]


@dataclass
class CurrentConditions:
    """The latest sample plus the hours that follow it."""

    now: ForecastSample
    upcoming: list[ForecastSample]


def local_time(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Naive local wall-clock time for ``moment``."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz).replace(tzinfo=None)


def select_day(
    timeseries: list[ForecastSample], target_date: date, tz: tzinfo | None = None
) -> list[ForecastSample]:
    """
    Samples falling on ``target_date`` (local time), in series order.

    An empty list means "no data for this day", not an error.
    """
    start = datetime.combine(target_date, DAY_START)
    end = datetime.combine(target_date, DAY_END)
    return [s for s in timeseries if start <= local_time(s.time, tz) <= end]


def pick_representative(
    samples: list[ForecastSample], hour_range: tuple[int, int], tz: tzinfo | None = None
) -> ForecastSample:
    """
    First sample whose local hour is within ``hour_range`` (inclusive).

    Falls back to the first sample of ``samples`` when none matches.

    Raises:
        ValueError: ``samples`` is empty.
    """
    if not samples:
        msg = "Cannot pick a representative sample from an empty day"
        raise ValueError(msg)
    low, high = hour_range
    for sample in samples:
        if low <= local_time(sample.time, tz).hour <= high:
            return sample
    return samples[0]


def aggregate(samples: list[ForecastSample]) -> TemperatureRange:
    """Min and max temperature; ``(nan, nan)`` for an empty list."""
    if not samples:
        return TemperatureRange(math.nan, math.nan)
    temperatures = [s.temperature for s in samples]
    return TemperatureRange(min(temperatures), max(temperatures))


def precipitation_likelihood(condition_code: str | None) -> int:
    """Rough precipitation chance (%) implied by a condition code."""
    if not condition_code:
        return 0
    for fragment, percent in PRECIPITATION_RULES:
        if fragment in condition_code:
            return percent
    return 0


def summarize_day(
    timeseries: list[ForecastSample], target_date: date, tz: tzinfo | None = None
) -> DaySummary | None:
    """Build the day view for ``target_date``, or None when there is no data."""
    samples = select_day(timeseries, target_date, tz)
    if not samples:
        return None
    return DaySummary(
        date=target_date,
        samples=samples,
        morning=pick_representative(samples, MORNING, tz),
        noon=pick_representative(samples, NOON, tz),
        evening=pick_representative(samples, EVENING, tz),
        temperature=aggregate(samples),
        precipitation_chance=precipitation_likelihood(samples[0].condition_code),
    )


def current_conditions(
    timeseries: list[ForecastSample], hours: int = 24
) -> CurrentConditions | None:
    """First sample and the next ``hours`` entries (series order)."""
    if not timeseries:
        return None
    return CurrentConditions(now=timeseries[0], upcoming=timeseries[:hours])
