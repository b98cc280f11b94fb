"""Met.no API constants and response checking.

API docs:
  - Locationforecast: https://api.met.no/weatherapi/locationforecast/2.0/documentation
  - Terms of service: https://api.met.no/doc/TermsOfService (identifying User-Agent required)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from weather_dashboard.errors import RateLimited, UpstreamFailure

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)

LOCATIONFORECAST_API = "https://api.met.no/weatherapi/locationforecast/2.0/complete"
GEOLOOKUP_API = "https://api.met.no/weatherapi/geolookup/1.0/"

# User-facing messages
RATE_LIMIT_DETAIL = "The weather service is currently experiencing high demand."
CONNECTIVITY_MESSAGE = (
    "We're having trouble connecting to the weather service. Please try again later."
)
MALFORMED_MESSAGE = "The weather service returned an unreadable response."


def check_response(resp: requests.Response) -> None:
    """Raise the dashboard error matching a non-success Met.no response."""
    if resp.ok:
        return
    if resp.status_code == 429:
        logger.warning("Met.no rate limit hit: %s", resp.url)
        raise RateLimited(message=RATE_LIMIT_DETAIL)
    logger.error("Met.no returned %s: %s", resp.status_code, resp.text[:200])
    raise UpstreamFailure(message=CONNECTIVITY_MESSAGE)


def json_body(resp: requests.Response) -> dict[str, Any]:
    """Decode a JSON object body or raise ``UpstreamFailure``."""
    try:
        data = resp.json()
    except ValueError as exc:
        raise UpstreamFailure(message=MALFORMED_MESSAGE) from exc
    if not isinstance(data, dict):
        raise UpstreamFailure(message=MALFORMED_MESSAGE)
    return data
