"""Upstream clients for the country-data and currency-rate providers."""

from __future__ import annotations

from .base import (
    CountryNotFoundError,
    ProviderError,
    UnexpectedPayloadError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from .countries_client import CountriesClient, CountriesClientConfig
from .currency_client import CurrencyClient, CurrencyClientConfig
from .http_client import HTTPClient, HTTPClientConfig
from .schemas import CountryRecord, RateSet

__all__ = [
    "CountriesClient",
    "CountriesClientConfig",
    "CountryNotFoundError",
    "CountryRecord",
    "CurrencyClient",
    "CurrencyClientConfig",
    "HTTPClient",
    "HTTPClientConfig",
    "ProviderError",
    "RateSet",
    "UnexpectedPayloadError",
    "UpstreamStatusError",
    "UpstreamTransportError",
    "init_providers",
]


def init_providers(app) -> tuple[CountriesClient, CurrencyClient]:
    """Build both upstream clients from config and attach them to the app."""

    countries = CountriesClient.from_config(app.config)
    currencies = CurrencyClient.from_config(app.config)
    app.extensions["countries_client"] = countries
    app.extensions["currency_client"] = currencies
    return countries, currencies
