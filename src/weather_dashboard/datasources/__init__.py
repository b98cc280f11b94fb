"""External data source integrations.

Each subdirectory is one upstream API with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, response checks
    ├── models.py         # Dataclasses for API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - metno/      Met.no locationforecast + geolookup (forecast, place name)
  - geocoding/  Google reverse geocoding (language-aware place name)

Fetch functions take explicit ``Coordinates`` and an optional
``requests.Session``, and raise ``DashboardError`` subclasses (or plain
``requests`` errors for best-effort lookups). Caching lives one layer up,
in ``proxy/endpoints.py``.
"""
