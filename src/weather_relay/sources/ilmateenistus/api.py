"""HTTP client for the Ilmateenistus (Estonian Environment Agency) meteogram."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests
from pydantic import ValidationError

from weather_relay.clients.http_session import configure_session
from weather_relay.sources.ilmateenistus.schemas import IlmateenistusForecastResult
from weather_relay.utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="ilmateenistus_api")

DEFAULT_BASE_URL = "https://www.ilmateenistus.ee/"
METEOGRAM_PATH = "wp-content/themes/ilm2020/meteogram.php"
DEFAULT_TIMEOUT = 15  # seconds
DEFAULT_RETRIES = 3
DEFAULT_BACKOFF = 0.5  # seconds


class IlmateenistusClientError(RuntimeError):
    """Raised when the meteogram request fails or returns an unreadable document."""


@dataclass
class IlmateenistusClientConfig:
    """
    Configuration for IlmateenistusApi.

    Attributes
    ----------
    base_url:
        Instance root; the meteogram path is resolved against it.
    timeout_seconds:
        Default HTTP timeout for requests.
    retries:
        Number of retry attempts for transient 5xx/429 errors.
    retry_backoff_seconds:
        Backoff factor for the retry adapter.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    retry_backoff_seconds: float = DEFAULT_BACKOFF


def format_coordinates(latitude: float, longitude: float) -> str:
    """The meteogram expects ``lat;lon``."""
    return f"{latitude};{longitude}"


class IlmateenistusApi:
    """Single-endpoint client: GET the hourly meteogram for a coordinate string."""

    def __init__(
        self,
        config: IlmateenistusClientConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._session = configure_session(
            session or requests.Session(),
            headers={"Accept": "application/json"},
            timeout_seconds=self._config.timeout_seconds,
            retries=self._config.retries,
            retry_backoff_seconds=self._config.retry_backoff_seconds,
        )

    @property
    def config(self) -> IlmateenistusClientConfig:
        return self._config

    @property
    def meteogram_url(self) -> str:
        base = self._config.base_url
        if not base.endswith("/"):
            base += "/"
        return urljoin(base, METEOGRAM_PATH)

    def get_hourly(self, coordinates: str) -> IlmateenistusForecastResult:
        """Fetch and parse the forecast for ``coordinates`` (``lat;lon``)."""
        raw = self._get(self.meteogram_url, {"coordinates": coordinates})
        try:
            return IlmateenistusForecastResult.model_validate(raw)
        except ValidationError as exc:
            logger.error(f"Unexpected meteogram document for {coordinates}: {exc}")
            raise IlmateenistusClientError(str(exc)) from exc

    def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Fetching meteogram from {url} with {params}")
        try:
            resp = self._session.get(url, params=params)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error(f"Ilmateenistus request failed: {exc}")
            raise IlmateenistusClientError(str(exc)) from exc
        try:
            return resp.json()
        except ValueError as exc:
            logger.error(f"Ilmateenistus returned a non-JSON body: {exc}")
            raise IlmateenistusClientError("Response body is not JSON") from exc


def make_ilmateenistus_api_from_env(
    session: Optional[requests.Session] = None,
) -> IlmateenistusApi:
    """Construct the client from ``ILMATEENISTUS_*`` environment overrides."""
    config = IlmateenistusClientConfig(
        base_url=os.getenv("ILMATEENISTUS_BASE_URL", DEFAULT_BASE_URL),
        timeout_seconds=int(os.getenv("ILMATEENISTUS_TIMEOUT_SEC", DEFAULT_TIMEOUT)),
        retries=int(os.getenv("ILMATEENISTUS_RETRIES", DEFAULT_RETRIES)),
        retry_backoff_seconds=float(os.getenv("ILMATEENISTUS_RETRY_BACKOFF", DEFAULT_BACKOFF)),
    )
    return IlmateenistusApi(config=config, session=session)
