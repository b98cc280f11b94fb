"""
Shared HTTP client with transport-level retry and a default timeout.

Provides a pre-configured ``requests.Session`` for both upstream calls (from
the proxy) and proxy calls (from the client data layer). Every request gets
a timeout so a hung upstream cannot hang the caller indefinitely.

Rate limiting (429) is *not* retried here: callers map it to
``RateLimited`` so the user sees "try again later" straight away.

Usage::

    from weather_dashboard.services.http import create_session

    session = create_session(user_agent="my-app/1.0 (contact@example.com)")
    resp = session.get("https://api.met.no/weatherapi/...", params={...})
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_dashboard.config import DEFAULT_USER_AGENT

if TYPE_CHECKING:
    from weather_dashboard.config import Settings

#: Retry connection resets and gateway errors only.
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,  # 0s, 1s between retries
    status_forcelist=[502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let callers inspect the final response
)

DEFAULT_TIMEOUT = 10  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: Identifying ``User-Agent``; Met.no rejects anonymous clients.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def session_from_settings(settings: Settings) -> requests.Session:
    """Build a session using the configured retries, timeout and user agent."""
    return create_session(
        retry=DEFAULT_RETRY.new(total=settings.http_retries),
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
    )


#: Module-level session with default settings; import and use directly.
session: requests.Session = create_session()
