"""Shared fixtures for weather dashboard tests."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from weather_dashboard.datasources.metno import ForecastSample


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_response(
    status: int = 200, body: Any = None, url: str = "https://example.com"
) -> requests.Response:
    """Build a real ``requests.Response`` with a JSON (or raw bytes) body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.encoding = "utf-8"
    if isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body if body is not None else {}).encode()
    return resp


def make_sample(
    when: str, temperature: float = 15.0, condition: str | None = None
) -> ForecastSample:
    """Naive-local forecast sample from an ISO timestamp."""
    return ForecastSample(
        time=datetime.fromisoformat(when), temperature=temperature, condition_code=condition
    )


def metno_entry(when: str, temperature: float, symbol: str | None = "cloudy") -> dict[str, Any]:
    """One raw locationforecast ``timeseries`` entry."""
    entry: dict[str, Any] = {
        "time": when,
        "data": {
            "instant": {
                "details": {
                    "air_temperature": temperature,
                    "relative_humidity": 70.0,
                    "wind_speed": 3.2,
                }
            }
        },
    }
    if symbol is not None:
        entry["data"]["next_1_hours"] = {"summary": {"symbol_code": symbol}}
    return entry


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Minimal locationforecast payload with three hourly samples."""
    return {
        "type": "Feature",
        "properties": {
            "timeseries": [
                metno_entry("2024-01-02T00:00:00Z", 5.0, "cloudy"),
                metno_entry("2024-01-02T01:00:00Z", 4.5, "lightrain"),
                metno_entry("2024-01-02T02:00:00Z", 4.0, "rain"),
            ]
        },
    }


@pytest.fixture
def mock_session() -> Mock:
    """Session stand-in whose ``get`` returns an empty 200 JSON response."""
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(200, {})
    return session

