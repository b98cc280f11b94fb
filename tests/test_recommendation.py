"""Tests for the umbrella recommendation."""

from __future__ import annotations

from conftest import make_sample

from weather_dashboard.datasources.metno import ForecastSample
from weather_dashboard.forecast import needs_umbrella


def series(codes: list[str | None]) -> list[ForecastSample]:
    return [make_sample(f"2024-01-02T{h:02d}:00", 10.0, code) for h, code in enumerate(codes)]


class TestNeedsUmbrella:
    """Rain anywhere in the next 12 samples."""

    def test_rain_in_window(self) -> None:
        codes = ["clearsky_day"] * 12
        codes[4] = "rain"
        assert needs_umbrella(series(codes)) is True

    def test_all_clear(self) -> None:
        assert needs_umbrella(series(["clearsky_day"] * 12)) is False

    def test_rain_after_window_ignored(self) -> None:
        codes = ["clearsky_day"] * 12 + ["heavyrain"]
        assert needs_umbrella(series(codes)) is False

    def test_rain_substring_matches(self) -> None:
        assert needs_umbrella(series(["cloudy", "lightrainshowers_night"])) is True

    def test_short_series_checked_in_full(self) -> None:
        assert needs_umbrella(series(["cloudy", "sleet", "rain"])) is True

    def test_missing_codes(self) -> None:
        assert needs_umbrella(series([None, None])) is False

    def test_empty_series(self) -> None:
        assert needs_umbrella([]) is False

    def test_custom_window(self) -> None:
        assert needs_umbrella(series(["cloudy", "rain"]), window=1) is False
