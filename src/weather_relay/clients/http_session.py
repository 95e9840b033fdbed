"""requests.Session configuration shared by every provider client."""
from __future__ import annotations

from typing import Callable, Iterable, Mapping, ParamSpec, TypeVar

import requests
from requests.adapters import HTTPAdapter, Retry

P = ParamSpec("P")
R = TypeVar("R")

DEFAULT_USER_AGENT = "weather-relay"


def configure_session(
    session: requests.Session,
    *,
    headers: Mapping[str, str] | None,
    timeout_seconds: int,
    retries: int,
    retry_backoff_seconds: float,
    allowed_methods: Iterable[str] = ("GET",),
    status_forcelist: Iterable[int] = (429, 500, 502, 503, 504),
) -> requests.Session:
    """Mount a retrying adapter, merge headers and default the request timeout."""
    merged = {"User-Agent": DEFAULT_USER_AGENT}
    merged.update(headers or {})
    session.headers.update(merged)

    retry = Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=retry_backoff_seconds,
        status_forcelist=frozenset(status_forcelist),
        allowed_methods=frozenset(allowed_methods),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    for prefix in ("https://", "http://"):
        session.mount(prefix, adapter)
    session.request = _with_timeout(session.request, timeout_seconds)  # type: ignore[assignment]
    return session


def _with_timeout(fn: Callable[P, R], default_timeout: int) -> Callable[P, R]:
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        kwargs.setdefault("timeout", default_timeout)
        return fn(*args, **kwargs)

    return wrapper
