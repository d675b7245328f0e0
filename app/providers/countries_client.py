from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from app.providers.base import CountryNotFoundError, UpstreamStatusError
from app.providers.http_client import HTTPClient, HTTPClientConfig
from app.providers.schemas import CountryRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://129.241.150.113:8080/v3.1"


class CountriesClientConfig:
    """Configuration parameters for the country-data client."""

    def __init__(self, base_url: str, timeout: float, probe_path: str = "/alpha/no") -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.probe_path = probe_path


class CountriesClient:
    """Client for the REST Countries style ``/alpha/{code}`` lookup."""

    name = "restcountries"

    def __init__(self, config: CountriesClientConfig, client: Optional[HTTPClient] = None) -> None:
        self._config = config
        self._client = client or HTTPClient(
            HTTPClientConfig(base_url=config.base_url, timeout=config.timeout, name=self.name)
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> CountriesClient:
        base_url_value = config.get("COUNTRIES_API_BASE_URL")
        if not isinstance(base_url_value, str) or not base_url_value.strip():
            base_url = DEFAULT_BASE_URL
        else:
            base_url = base_url_value
        return cls(
            CountriesClientConfig(
                base_url=base_url,
                timeout=float(config.get("REQUEST_TIMEOUT_SECONDS", 5)),
                probe_path=str(config.get("COUNTRIES_PROBE_PATH") or "/alpha/no"),
            )
        )

    def fetch_country(self, code: str) -> CountryRecord:
        """Fetch one country by its 2-letter (or 3-letter cca3) code.

        Raises:
            CountryNotFoundError: the provider answered 404.
            UpstreamTransportError, UpstreamStatusError, UnexpectedPayloadError:
                any other failure.
        """

        try:
            payload = self._client.get(f"/alpha/{code}")
        except UpstreamStatusError as exc:
            if exc.status_code == 404:
                raise CountryNotFoundError(code) from exc
            raise
        return CountryRecord.from_payload(payload)

    def probe(self) -> int:
        return self._client.probe(self._config.probe_path)
