"""
Server-side proxy in front of the upstream weather and geocoding APIs.

- endpoints.py - ForecastEndpoint / GeocodeEndpoint (cache + upstream + errors)
- app.py       - FastAPI routes and error handlers
"""
