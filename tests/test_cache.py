"""Tests for the TTL cache and cache keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.cache import FORECAST_TTL, GEOCODE_TTL, TTLCache, cache_key

if TYPE_CHECKING:
    from conftest import FakeClock


class TestCacheKey:
    """Key format and coordinate rounding."""

    def test_weather_key(self) -> None:
        assert cache_key("weather", 35.6895, 139.6917) == "weather-35.69-139.69"

    def test_extra_parts_appended(self) -> None:
        assert cache_key("geocode", 35.6895, 139.6917, "ja") == "geocode-35.69-139.69-ja"

    def test_nearby_points_share_a_key(self) -> None:
        assert cache_key("weather", 35.6895, 139.6917) == cache_key("weather", 35.6901, 139.6899)

    def test_distinct_points_differ(self) -> None:
        assert cache_key("weather", 35.68, 139.69) != cache_key("weather", 35.70, 139.69)

    def test_negative_coordinates(self) -> None:
        assert cache_key("weather", -33.8688, -151.2093) == "weather--33.87--151.21"

    def test_language_distinguishes_geocode_keys(self) -> None:
        assert cache_key("geocode", 1, 2, "en") != cache_key("geocode", 1, 2, "ja")

    def test_exact_ties_round_away_from_zero(self) -> None:
        """0.125 is exact in binary; it rounds up like ``toFixed(2)``."""
        assert cache_key("weather", 0.125, -0.125) == "weather-0.13--0.13"

    def test_near_ties_follow_binary_value(self) -> None:
        # 1.005 is stored as 1.00499999...
        assert cache_key("weather", 1.005, 0) == "weather-1.00-0.00"


class TestTTLCache:
    """Freshness rules for cached entries."""

    def test_miss_on_empty(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(60, clock=clock)
        assert cache.get("missing") is None

    def test_hit_while_fresh(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(60, clock=clock)
        cache.put("k", "v")
        clock.advance(59.9)
        assert cache.get("k") == "v"

    def test_expired_at_exact_ttl(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(60, clock=clock)
        cache.put("k", "v")
        clock.advance(60)
        assert cache.get("k") is None

    def test_put_replaces_entry_and_resets_age(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(60, clock=clock)
        cache.put("k", "old")
        clock.advance(50)
        cache.put("k", "new")
        clock.advance(50)
        assert cache.get("k") == "new"

    def test_expired_entries_not_evicted(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(60, clock=clock)
        cache.put("k", "v")
        clock.advance(120)
        assert cache.get("k") is None
        assert len(cache) == 1

    def test_forecast_ttl_boundary(self, clock: FakeClock) -> None:
        cache: TTLCache[dict[str, int]] = TTLCache(FORECAST_TTL, clock=clock)
        cache.put("weather-1.00-2.00", {"n": 1})
        clock.advance(14 * 60 + 59)
        assert cache.get("weather-1.00-2.00") == {"n": 1}
        clock.advance(1)
        assert cache.get("weather-1.00-2.00") is None

    def test_default_lifetimes(self) -> None:
        assert FORECAST_TTL == 900
        assert GEOCODE_TTL == 86400
