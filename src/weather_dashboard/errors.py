"""
Error taxonomy shared by the proxy and the client data layer.

Every failure the dashboard can surface is a ``DashboardError`` carrying an
HTTP-equivalent status and a user-presentable message. The proxy serializes
them with ``to_body()``; the client rebuilds them with ``from_response()``.

Two outcomes are deliberately *not* errors:
  - no samples for a requested day: ``select_day`` returns ``[]``
  - no resolvable place name: ``fetch_location_name`` returns ``UNKNOWN_LOCATION``
"""

from __future__ import annotations

from typing import Any

UNKNOWN_LOCATION = "Unknown Location"


class DashboardError(Exception):
    """Base class for normalized dashboard failures."""

    status_code: int = 500
    default_error: str = "Unexpected error"

    def __init__(self, error: str | None = None, message: str | None = None) -> None:
        self.error = error or self.default_error
        self.message = message
        super().__init__(self.error)

    def to_body(self) -> dict[str, Any]:
        """JSON body in the ``{error, message?}`` shape."""
        body: dict[str, Any] = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body

    @staticmethod
    def from_response(status_code: int, body: Any) -> DashboardError:
        """Rebuild the matching error from a proxy response."""
        error = None
        message = None
        if isinstance(body, dict):
            error = body.get("error")
            message = body.get("message")
        if not error:
            error = f"Weather API error: {status_code}"

        cls = _BY_STATUS.get(status_code, UpstreamFailure)
        return cls(error, message)


class MissingParameter(DashboardError):
    """Required query parameters were not supplied."""

    status_code = 400
    default_error = "Latitude and longitude are required"


class InvalidParameter(DashboardError):
    """Query parameters were present but not usable coordinates."""

    status_code = 400
    default_error = "Latitude and longitude must be valid coordinates"


class RateLimited(DashboardError):
    """The upstream provider is throttling us; try again later."""

    status_code = 429
    default_error = "Rate limit exceeded. Please try again later."


class UpstreamFailure(DashboardError):
    """Any other upstream or network failure."""

    status_code = 500
    default_error = "Failed to fetch weather data"


_BY_STATUS: dict[int, type[DashboardError]] = {
    400: MissingParameter,
    429: RateLimited,
    500: UpstreamFailure,
}
