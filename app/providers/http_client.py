"""Shared HTTP client wrapper issuing single, timeout-bounded GET requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Optional

import requests
from requests import Session
from requests.exceptions import JSONDecodeError, RequestException

from app.logging import upstream_log_extra

from .base import UnexpectedPayloadError, UpstreamStatusError, UpstreamTransportError

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_STATUS = 502


@dataclass(frozen=True)
class HTTPClientConfig:
    """Configuration for the shared HTTP client."""

    base_url: str
    timeout: float = 5.0
    name: str = "upstream"


class HTTPClient:
    """Small HTTP client; one attempt per call, never retried."""

    def __init__(
        self,
        config: HTTPClientConfig,
        session: Optional[Session] = None,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()

    @property
    def name(self) -> str:
        return self._config.name

    def get(self, path: str) -> Any:
        """Return the decoded JSON body of a 200 response.

        Raises:
            UpstreamTransportError: no HTTP response was received.
            UpstreamStatusError: the status code was not 200.
            UnexpectedPayloadError: the body is not valid JSON.
        """

        url = self._build_url(path)
        start = perf_counter()
        try:
            response = self._session.get(url, timeout=self._config.timeout)
        except RequestException as exc:
            self._log_failure(url, start, exc)
            raise UpstreamTransportError(f"Failed to fetch {url}: {exc}") from exc

        if response.status_code != 200:
            error = UpstreamStatusError(
                f"Upstream returned {response.status_code} for {url}",
                status_code=response.status_code,
            )
            self._log_failure(url, start, error)
            raise error

        try:
            payload = response.json()
        except JSONDecodeError as exc:
            error = UnexpectedPayloadError(f"Invalid JSON response from {url}")
            self._log_failure(url, start, error)
            raise error from exc

        logger.debug(
            "Upstream request to %s succeeded",
            url,
            extra=upstream_log_extra(upstream=self.name, event="upstream.fetch", url=url, started=start),
        )
        return payload

    def probe(self, path: str) -> int:
        """Return the status code for ``path``, or 502 when no response arrives."""

        url = self._build_url(path)
        start = perf_counter()
        try:
            response = self._session.get(url, timeout=self._config.timeout)
        except RequestException as exc:
            self._log_failure(url, start, exc, event="upstream.probe")
            return TRANSPORT_FAILURE_STATUS

        response.close()
        return response.status_code

    def _build_url(self, path: str) -> str:
        base = self._config.base_url.rstrip("/")
        suffix = path.lstrip("/")
        return f"{base}/{suffix}"

    def _log_failure(
        self,
        url: str,
        start: float,
        error: Exception,
        *,
        event: str = "upstream.fetch",
    ) -> None:
        logger.warning(
            "Upstream request to %s failed: %s",
            url,
            error,
            extra=upstream_log_extra(
                upstream=self.name,
                event=event,
                url=url,
                started=start,
                error=error,
            ),
        )
