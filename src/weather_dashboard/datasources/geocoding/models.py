"""Reverse-geocoding result model and place-name preference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from weather_dashboard.datasources.geocoding.client import RESULT_TYPES
from weather_dashboard.errors import UNKNOWN_LOCATION


@dataclass(frozen=True)
class GeocodeResult:
    """One entry of a Google reverse-geocoding ``results`` array."""

    formatted_address: str
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> GeocodeResult:
        return cls(
            formatted_address=str(raw.get("formatted_address") or ""),
            types=list(raw.get("types") or []),
        )


def pick_location_name(results: list[GeocodeResult]) -> str:
    """
    Choose the best display name from reverse-geocoding results.

    Preference: locality > administrative area > country > first result.
    Falls back to ``UNKNOWN_LOCATION`` when there are no results.
    """
    for place_type in RESULT_TYPES:
        for result in results:
            if place_type in result.types and result.formatted_address:
                return result.formatted_address

    if results and results[0].formatted_address:
        return results[0].formatted_address
    return UNKNOWN_LOCATION
