"""Ordered fallback chains.

A chain is a list of named strategies tried in order. Each strategy returns
a value, or ``None`` when it has nothing to offer; an expected failure
(``DashboardError``, network or decoding error) also moves on to the next
strategy. The chain's default is returned when every strategy comes up empty.

Example::

    name = first_available(
        [
            Fallback("embedded", lambda: name_from_forecast(lat, lon)),
            Fallback("geocode", lambda: name_from_geocoder(lat, lon)),
        ],
        default=UNKNOWN_LOCATION,
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

import requests

from weather_dashboard.errors import DashboardError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Failures that mean "try the next strategy" rather than a programming error.
FALLBACK_ERRORS: tuple[type[Exception], ...] = (
    DashboardError,
    requests.RequestException,
    ValueError,
    KeyError,
    TypeError,
)


@dataclass(frozen=True)
class Fallback(Generic[T]):
    """One named strategy of a fallback chain."""

    name: str
    attempt: Callable[[], T | None]


def first_available(chain: Sequence[Fallback[T]], default: T) -> T:
    """Return the first non-None result of ``chain``, else ``default``."""
    for step in chain:
        try:
            value = step.attempt()
        except FALLBACK_ERRORS as exc:
            logger.warning("Fallback %r failed: %s", step.name, exc)
            continue
        if value is not None:
            return value
        logger.debug("Fallback %r had no result", step.name)
    return default
