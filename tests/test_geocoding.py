"""Tests for Google reverse geocoding."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests
from conftest import make_response

from weather_dashboard.datasources.geocoding import (
    GEOCODE_API,
    GeocodeResult,
    fetch_reverse_geocode,
    pick_location_name,
)
from weather_dashboard.errors import UNKNOWN_LOCATION, UpstreamFailure
from weather_dashboard.schemas import Coordinates

OSLO = Coordinates(latitude=59.9139, longitude=10.7522)


class TestFetchReverseGeocode:
    """Requests to the geocoding API."""

    def test_request_params(self, mock_session: Mock) -> None:
        mock_session.get.return_value = make_response(200, {"status": "OK", "results": []})

        fetch_reverse_geocode(OSLO, "key-123", language="ja", session=mock_session)

        args, kwargs = mock_session.get.call_args
        assert args[0] == GEOCODE_API
        assert kwargs["params"] == {
            "latlng": "59.9139,10.7522",
            "key": "key-123",
            "language": "ja",
            "result_type": "locality|administrative_area_level_1|country",
        }

    def test_parses_results(self, mock_session: Mock) -> None:
        mock_session.get.return_value = make_response(
            200,
            {
                "status": "OK",
                "results": [
                    {"formatted_address": "Oslo, Norway", "types": ["locality", "political"]},
                    {"formatted_address": "Norway", "types": ["country"]},
                ],
            },
        )

        results = fetch_reverse_geocode(OSLO, "key", session=mock_session)

        assert results == [
            GeocodeResult("Oslo, Norway", ["locality", "political"]),
            GeocodeResult("Norway", ["country"]),
        ]

    def test_zero_results(self, mock_session: Mock) -> None:
        mock_session.get.return_value = make_response(200, {"status": "ZERO_RESULTS", "results": []})
        assert fetch_reverse_geocode(OSLO, "key", session=mock_session) == []

    def test_error_status_in_body(self, mock_session: Mock) -> None:
        mock_session.get.return_value = make_response(
            200, {"status": "REQUEST_DENIED", "error_message": "bad key"}
        )
        with pytest.raises(UpstreamFailure) as exc_info:
            fetch_reverse_geocode(OSLO, "key", session=mock_session)
        assert exc_info.value.error == "Failed to fetch location data"

    def test_http_error(self, mock_session: Mock) -> None:
        mock_session.get.return_value = make_response(500, {})
        with pytest.raises(UpstreamFailure):
            fetch_reverse_geocode(OSLO, "key", session=mock_session)

    def test_network_error(self, mock_session: Mock) -> None:
        mock_session.get.side_effect = requests.Timeout("slow")
        with pytest.raises(UpstreamFailure):
            fetch_reverse_geocode(OSLO, "key", session=mock_session)

    def test_non_object_body(self, mock_session: Mock) -> None:
        mock_session.get.return_value = make_response(200, ["not", "a", "dict"])
        with pytest.raises(UpstreamFailure):
            fetch_reverse_geocode(OSLO, "key", session=mock_session)


class TestPickLocationName:
    """Preference order locality > administrative area > country > first."""

    def test_locality_preferred_over_earlier_country(self) -> None:
        results = [GeocodeResult("Norway", ["country"]), GeocodeResult("Oslo", ["locality"])]
        assert pick_location_name(results) == "Oslo"

    def test_admin_area_over_country(self) -> None:
        results = [
            GeocodeResult("Japan", ["country"]),
            GeocodeResult("Tokyo", ["administrative_area_level_1"]),
        ]
        assert pick_location_name(results) == "Tokyo"

    def test_first_result_when_no_type_matches(self) -> None:
        results = [GeocodeResult("Somewhere", ["route"]), GeocodeResult("Else", ["premise"])]
        assert pick_location_name(results) == "Somewhere"

    def test_empty_results(self) -> None:
        assert pick_location_name([]) == UNKNOWN_LOCATION

    def test_from_api_tolerates_missing_fields(self) -> None:
        assert GeocodeResult.from_api({}) == GeocodeResult("", [])
