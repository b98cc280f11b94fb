"""Request coalescing: one in-flight fetch per cache key.

When several callers ask for the same key at once, only the first runs the
fetch; the others block on the same ``Future`` and observe its result or
its exception. Once the fetch settles the key is released, so the next call
after that goes through the caches again.

Used by the proxy endpoints (one upstream call per rounded coordinate) and
by ``DashboardClient`` (one proxy call per rounded coordinate, shared by every
widget using that client).
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InFlightRequests(Generic[T]):
    """Map of cache key -> pending ``Future`` shared by concurrent callers."""

    def __init__(self) -> None:
        self._pending: dict[str, Future[T]] = {}
        self._lock = threading.Lock()

    def run(self, key: str, fetch: Callable[[], T]) -> T:
        """Run ``fetch`` for ``key`` unless an identical call is already running."""
        with self._lock:
            future = self._pending.get(key)
            owner = future is None
            if future is None:
                future = Future()
                self._pending[key] = future

        if not owner:
            logger.debug("Joining in-flight request for %s", key)
            return future.result()

        try:
            result = fetch()
        except BaseException as exc:
            future.set_exception(exc)
            raise
        else:
            future.set_result(result)
            return result
        finally:
            with self._lock:
                self._pending.pop(key, None)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._pending
