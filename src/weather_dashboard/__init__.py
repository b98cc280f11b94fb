"""Weather Dashboard - forecast proxy, caching client and day summaries.

Architecture::

    datasources/   Upstream APIs (Met.no forecast + geolookup, Google reverse geocoding)
    cache.py       TTL cache with rounded-coordinate keys
    coalesce.py    One in-flight request per cache key
    proxy/         FastAPI service: /api/weather, /api/geocode (server-side cache)
    client/        DashboardClient: calls the proxy (client-side cache, fallbacks)
    forecast/      Pure logic: day selection, aggregates, umbrella rule, units
    flows/         Prefect refresh flow (fetch -> summarize)
    preferences.py Persisted coordinates / language / unit / theme

Data flow: client -> proxy -> upstream, cached at both layers, then
forecast/ turns the payload into day summaries and a recommendation.
"""

__version__ = "0.1.0"

from weather_dashboard.config import Settings

__all__ = ["Settings", "__version__"]
