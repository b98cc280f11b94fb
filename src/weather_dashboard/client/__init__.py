"""Client data layer: cached, coalesced access to the proxy endpoints."""

from weather_dashboard.client.data import DashboardClient
from weather_dashboard.client.fallback import Fallback, first_available

__all__ = ["DashboardClient", "Fallback", "first_available"]
