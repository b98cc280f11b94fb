"""
Prefect flows.

Flows:
- refresh: fetch forecast + place name through the proxy, build day summaries

Usage (local):
    weather-dashboard serve &
    python -m weather_dashboard.flows.refresh

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m weather_dashboard.flows.refresh
"""
