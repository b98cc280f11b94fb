"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

import uvicorn

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.errors import DashboardError
from weather_dashboard.flows.refresh import Dashboard, refresh_dashboard
from weather_dashboard.forecast import DaySummary, TemperatureUnit, format_temperature
from weather_dashboard.logging_config import configure_logging
from weather_dashboard.preferences import PreferencesStore
from weather_dashboard.proxy.app import create_app


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="Weather forecast proxy and dashboard with umbrella recommendations",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - run the proxy API
    serve_parser = subparsers.add_parser("serve", help="Run the forecast proxy API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    # 'forecast' command - refresh and print a day summary
    forecast_parser = subparsers.add_parser("forecast", help="Show the forecast summary")
    forecast_parser.add_argument(
        "--day",
        choices=["today", "tomorrow"],
        default="today",
        help="Which day to summarize (default: today)",
    )
    forecast_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    forecast_parser.add_argument("--lon", type=float, default=None, help="Longitude")

    # Preference commands
    location_parser = subparsers.add_parser("set-location", help="Save default coordinates")
    location_parser.add_argument("lat", type=float)
    location_parser.add_argument("lon", type=float)

    unit_parser = subparsers.add_parser("set-unit", help="Save temperature unit")
    unit_parser.add_argument("unit", choices=[u.value for u in TemperatureUnit])

    language_parser = subparsers.add_parser("set-language", help="Save place-name language")
    language_parser.add_argument("language", type=str)

    return parser


def _store() -> PreferencesStore:
    return PreferencesStore(get_settings().preferences_path)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    prefs = _store().current
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Proxy: {settings.proxy_base_url}")
    print(f"Location: ({prefs.coordinates.latitude}, {prefs.coordinates.longitude})")
    print(f"Language: {prefs.language}")
    print(f"Unit: {prefs.unit.value}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the proxy with uvicorn."""
    settings = get_settings()
    host = args.host or settings.api_host
    port = args.port if args.port is not None else settings.api_port

    print(f"Serving proxy on http://{host}:{port}/ (Ctrl+C to stop)")
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return 0


def format_day(summary: DaySummary, unit: TemperatureUnit) -> list[str]:
    """Plain-text lines for one day summary."""
    low, high = summary.temperature
    low_text = format_temperature(low, unit, 0)
    high_text = format_temperature(high, unit, 0)
    lines = [
        f"{summary.date:%A, %b %d}",
        f"  Low / high: {low_text} / {high_text}",
        f"  Precipitation: {summary.precipitation_chance}%",
    ]
    for label, sample in (
        ("Morning", summary.morning),
        ("Noon", summary.noon),
        ("Evening", summary.evening),
    ):
        condition = sample.condition_code or "-"
        lines.append(
            f"  {label:<8} {sample.time:%H:%M}  "
            f"{format_temperature(sample.temperature, unit)}  {condition}"
        )
    return lines


def format_dashboard(dashboard: Dashboard, unit: TemperatureUnit, day: str = "today") -> str:
    """Plain-text rendering of a refreshed dashboard."""
    lines = [f"{dashboard.location_name} ({dashboard.latitude}, {dashboard.longitude})"]

    if dashboard.current is not None:
        now = dashboard.current.now
        lines.append(
            f"Now: {format_temperature(now.temperature, unit)}, "
            f"humidity {now.humidity}%, wind {now.wind_speed} m/s"
        )

    summary = dashboard.today if day == "today" else dashboard.tomorrow
    if summary is None:
        lines.append(f"No forecast data for {day}.")
    else:
        lines.extend(format_day(summary, unit))

    if dashboard.needs_umbrella:
        lines.append("Umbrella: yes, rain is expected in the next 12 hours.")
    else:
        lines.append("Umbrella: no, no rain expected in the next 12 hours.")
    return "\n".join(lines)


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command: refresh via the proxy and print a summary."""
    prefs = _store().current
    lat = args.lat if args.lat is not None else prefs.coordinates.latitude
    lon = args.lon if args.lon is not None else prefs.coordinates.longitude

    try:
        dashboard = refresh_dashboard(lat=lat, lon=lon, language=prefs.language)
    except DashboardError as exc:
        print(f"Error: {exc.error}", file=sys.stderr)
        if exc.message:
            print(exc.message, file=sys.stderr)
        return 1

    print(format_dashboard(dashboard, prefs.unit, args.day))
    return 0


def cmd_set_location(args: argparse.Namespace) -> int:
    """Handle the 'set-location' command."""
    try:
        prefs = _store().set_coordinates(args.lat, args.lon)
    except ValueError as exc:
        print(f"Error: invalid coordinates: {exc}", file=sys.stderr)
        return 1
    print(f"Location set to ({prefs.coordinates.latitude}, {prefs.coordinates.longitude})")
    return 0


def cmd_set_unit(args: argparse.Namespace) -> int:
    """Handle the 'set-unit' command."""
    prefs = _store().set_unit(args.unit)
    print(f"Temperature unit set to {prefs.unit.value}")
    return 0


def cmd_set_language(args: argparse.Namespace) -> int:
    """Handle the 'set-language' command."""
    prefs = _store().set_language(args.language)
    print(f"Language set to {prefs.language}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "serve": cmd_serve,
        "forecast": cmd_forecast,
        "set-location": cmd_set_location,
        "set-unit": cmd_set_unit,
        "set-language": cmd_set_language,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
