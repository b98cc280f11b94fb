"""Temperature unit conversion for display.

Upstream data is always degC; conversion happens only when presenting.
"""

from __future__ import annotations

from enum import StrEnum


class TemperatureUnit(StrEnum):
    """Display unit for temperatures."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def convert_temperature(celsius: float, unit: TemperatureUnit) -> float:
    """Express a degC reading in ``unit``."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return c_to_f(celsius)
    return celsius


def format_temperature(celsius: float, unit: TemperatureUnit, digits: int = 1) -> str:
    """Format a reading, e.g. ``21.5°C`` or ``71°F`` with ``digits=0``."""
    return f"{convert_temperature(celsius, unit):.{digits}f}{unit.symbol}"
