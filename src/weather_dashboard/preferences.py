"""Persisted dashboard preferences.

Four keys, each read once at startup and written whenever it changes:
  - coordinates: last location the user picked
  - language: language tag for place names (e.g. ``"en"``, ``"ja"``)
  - unit: temperature display unit
  - theme: opaque theme name for the presentation layer

Stored as a single JSON file. A missing or unreadable file (or a bad value
for one key) falls back to the defaults instead of failing startup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path  # noqa: TC003 - used at runtime, not just annotations
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from weather_dashboard.forecast.units import TemperatureUnit
from weather_dashboard.schemas import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_COORDINATES = Coordinates(latitude=35.6895, longitude=139.6917)  # Tokyo


class Preferences(BaseModel):
    """Current values of all persisted preferences."""

    coordinates: Coordinates = Field(default_factory=lambda: DEFAULT_COORDINATES.model_copy())
    language: str = "en"
    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    theme: str = "system"


class PreferencesStore:
    """Reads and writes ``Preferences`` to a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path.expanduser()
        self._current: Preferences | None = None

    @property
    def current(self) -> Preferences:
        """Preferences as loaded (loads on first access)."""
        if self._current is None:
            self._current = self.load()
        return self._current

    def load(self) -> Preferences:
        """Read the file, keeping defaults for anything missing or invalid."""
        raw = self._read_raw()
        prefs = Preferences()
        for key, value in raw.items():
            if key not in Preferences.model_fields:
                continue
            try:
                prefs = Preferences.model_validate({**prefs.model_dump(), key: value})
            except ValidationError:
                logger.warning("Ignoring invalid stored preference %r", key)
        self._current = prefs
        return prefs

    def set_coordinates(self, latitude: float, longitude: float) -> Preferences:
        return self._update(coordinates=Coordinates(latitude=latitude, longitude=longitude))

    def set_language(self, language: str) -> Preferences:
        return self._update(language=language)

    def set_unit(self, unit: TemperatureUnit | str) -> Preferences:
        return self._update(unit=TemperatureUnit(unit))

    def set_theme(self, theme: str) -> Preferences:
        return self._update(theme=theme)

    def _update(self, **changes: Any) -> Preferences:
        prefs = self.current.model_copy(update=changes)
        self._write(prefs)
        self._current = prefs
        return prefs

    def _read_raw(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open() as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read preferences %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, prefs: Preferences) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w") as f:
            json.dump(prefs.model_dump(mode="json"), f, indent=2)
