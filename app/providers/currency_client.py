from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.providers.http_client import HTTPClient, HTTPClientConfig
from app.providers.schemas import RateSet

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://129.241.150.113:9090/currency"


class CurrencyClientConfig:
    """Configuration parameters for the currency-rate client."""

    def __init__(self, base_url: str, timeout: float, probe_path: str = "/NOK") -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.probe_path = probe_path


class CurrencyClient:
    """Client for the ``/{BASE}`` exchange-rate lookup."""

    name = "currencies"

    def __init__(self, config: CurrencyClientConfig, client: HTTPClient | None = None) -> None:
        self._config = config
        self._client = client or HTTPClient(
            HTTPClientConfig(base_url=config.base_url, timeout=config.timeout, name=self.name)
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> CurrencyClient:
        base_url_value = config.get("CURRENCY_API_BASE_URL")
        if not isinstance(base_url_value, str) or not base_url_value.strip():
            base_url = DEFAULT_BASE_URL
        else:
            base_url = base_url_value
        return cls(
            CurrencyClientConfig(
                base_url=base_url,
                timeout=float(config.get("REQUEST_TIMEOUT_SECONDS", 5)),
                probe_path=str(config.get("CURRENCY_PROBE_PATH") or "/NOK"),
            )
        )

    def fetch_rates(self, base_currency: str) -> RateSet:
        base = base_currency.strip().upper()
        payload = self._client.get(f"/{base}")
        rate_set = RateSet.from_payload(base, payload)
        if not rate_set.is_success:
            logger.warning("Currency service reported result=%r for %s", rate_set.result, base)
        return rate_set

    def probe(self) -> int:
        return self._client.probe(self._config.probe_path)
