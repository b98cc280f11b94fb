"""Tests for request coalescing."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from unittest.mock import patch

import pytest

from weather_dashboard import coalesce
from weather_dashboard.coalesce import InFlightRequests


def _signal_join(event: threading.Event) -> Any:
    """Patch the join log call so tests know a waiter has attached."""
    return patch.object(coalesce.logger, "debug", side_effect=lambda *_: event.set())


class TestInFlightRequests:
    """One fetch per key while a request is pending."""

    def test_single_call_returns_result(self) -> None:
        in_flight: InFlightRequests[int] = InFlightRequests()
        assert in_flight.run("k", lambda: 42) == 42
        assert "k" not in in_flight

    def test_concurrent_callers_share_one_fetch(self) -> None:
        in_flight: InFlightRequests[str] = InFlightRequests()
        started = threading.Event()
        release = threading.Event()
        calls = []

        def slow_fetch() -> str:
            calls.append(1)
            started.set()
            release.wait(timeout=5)
            return "payload"

        joined = threading.Event()
        with _signal_join(joined), ThreadPoolExecutor(max_workers=2) as pool:
            first = pool.submit(in_flight.run, "k", slow_fetch)
            assert started.wait(timeout=5)
            second = pool.submit(in_flight.run, "k", slow_fetch)
            assert joined.wait(timeout=5)
            release.set()
            assert first.result(timeout=5) == "payload"
            assert second.result(timeout=5) == "payload"

        assert len(calls) == 1

    def test_failure_propagates_to_owner_and_key_released(self) -> None:
        in_flight: InFlightRequests[str] = InFlightRequests()

        def boom() -> str:
            raise RuntimeError("upstream down")

        with pytest.raises(RuntimeError, match="upstream down"):
            in_flight.run("k", boom)
        assert "k" not in in_flight
        # Next call fetches again
        assert in_flight.run("k", lambda: "ok") == "ok"

    def test_waiter_sees_owner_exception(self) -> None:
        in_flight: InFlightRequests[str] = InFlightRequests()
        started = threading.Event()
        release = threading.Event()

        def failing_fetch() -> str:
            started.set()
            release.wait(timeout=5)
            raise ValueError("bad payload")

        joined = threading.Event()
        with _signal_join(joined), ThreadPoolExecutor(max_workers=2) as pool:
            first = pool.submit(in_flight.run, "k", failing_fetch)
            assert started.wait(timeout=5)
            second = pool.submit(in_flight.run, "k", lambda: "unused")
            assert joined.wait(timeout=5)
            release.set()
            with pytest.raises(ValueError, match="bad payload"):
                first.result(timeout=5)
            with pytest.raises(ValueError, match="bad payload"):
                second.result(timeout=5)

    def test_different_keys_do_not_coalesce(self) -> None:
        in_flight: InFlightRequests[str] = InFlightRequests()
        assert in_flight.run("a", lambda: "A") == "A"
        assert in_flight.run("b", lambda: "B") == "B"
