"""In-memory TTL cache shared by the proxy endpoints and the client data layer.

Each endpoint and each ``DashboardClient`` owns its own ``TTLCache`` instance;
there is no module-level cache.

Entries are replaced, never mutated or deleted:
  - ``get`` treats an entry as a hit only while ``now - stored_at < ttl``
  - expired entries stay in place until the next ``put`` for that key
  - there is no size bound (one entry per rounded coordinate + parameters)

Keys collapse nearby coordinates onto one slot by rounding to 2 decimals
(~1.1 km), e.g. ``weather-35.69-139.69`` or ``geocode-35.69-139.69-ja``.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

FORECAST_TTL = 15 * 60  # seconds
GEOCODE_TTL = 24 * 60 * 60

_KEY_PRECISION = Decimal("0.01")


def round_coordinate(value: float) -> str:
    """
    Two-decimal text of a coordinate, exact ties rounded away from zero.

    Matches JavaScript's ``toFixed(2)`` (``0.125 -> "0.13"``), unlike the
    half-to-even ``format(value, ".2f")`` (``"0.12"``), so keys agree with
    browser-side caches for the same point.
    """
    return str(Decimal(value).quantize(_KEY_PRECISION, rounding=ROUND_HALF_UP))


def cache_key(kind: str, lat: float, lon: float, *extra: Any) -> str:
    """Build ``<kind>-<lat>-<lon>[-<extra>...]`` with coordinates at 2 decimals."""
    parts = [kind, round_coordinate(lat), round_coordinate(lon), *(str(e) for e in extra)]
    return "-".join(parts)


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the clock reading when it was stored."""

    value: T
    stored_at: float


class TTLCache(Generic[T]):
    """Key-value store whose entries expire ``ttl`` seconds after being stored."""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> T | None:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl:
            return None
        return entry.value

    def put(self, key: str, value: T) -> None:
        """Store ``value``, superseding any previous entry for ``key``."""
        entry = CacheEntry(value=value, stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
