"""Exchange-rate composition across a country's neighbours."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from app.errors import UpstreamError
from app.providers import (
    CountriesClient,
    CurrencyClient,
    ProviderError,
    RateSet,
    UpstreamTransportError,
)

from .info import fetch_country_or_raise

logger = logging.getLogger(__name__)

CURRENCY_CODE_LENGTH = 3


def select_base_currency(codes: Iterable[str]) -> str:
    """Pick the lexicographically smallest currency code, upper-cased.

    Returns an empty string when ``codes`` is empty.
    """

    ordered = sorted(codes)
    if not ordered:
        return ""
    return ordered[0].upper()


def _is_currency_code(code: str) -> bool:
    return len(code) == CURRENCY_CODE_LENGTH


def collect_neighbour_currencies(
    countries: CountriesClient, borders: Iterable[str], base_currency: str
) -> set[str]:
    """Resolve every neighbour and return their currencies, minus ``base_currency``.

    Lookups run one at a time and the first failure aborts the whole
    collection; partial results are never returned.
    """

    currencies: set[str] = set()
    for raw_code in borders:
        cca3 = raw_code.strip()
        if not cca3:
            continue

        try:
            neighbour = countries.fetch_country(cca3)
        except UpstreamTransportError as exc:
            raise UpstreamError("failed to call countries service for neighbours") from exc
        except ProviderError as exc:
            logger.warning("Neighbour lookup for %s failed: %s", cca3, exc)
            raise UpstreamError("countries service failed neighbour lookup") from exc

        currency = select_base_currency(neighbour.currency_codes)
        if not _is_currency_code(currency) or currency == base_currency:
            continue
        currencies.add(currency)
    return currencies


def fetch_rates_or_raise(client: CurrencyClient, base_currency: str) -> RateSet:
    try:
        rate_set = client.fetch_rates(base_currency)
    except UpstreamTransportError as exc:
        raise UpstreamError("failed to call currency service") from exc
    except ProviderError as exc:
        raise UpstreamError("currency service returned non-200") from exc

    if not rate_set.is_success:
        raise UpstreamError("currency service returned result != success")
    return rate_set


def filter_rates(rate_set: RateSet, currencies: Iterable[str]) -> dict[str, float]:
    """Keep the rates for ``currencies``; codes missing upstream are dropped."""

    return {code: rate_set.rates[code] for code in sorted(currencies) if code in rate_set.rates}


def compose_exchange(
    countries: CountriesClient, currencies: CurrencyClient, code: str
) -> dict[str, Any]:
    """Return base currency and neighbour exchange rates for the country ``code``."""

    country = fetch_country_or_raise(countries, code)

    base_currency = select_base_currency(country.currency_codes)
    if not _is_currency_code(base_currency):
        raise UpstreamError("input country has no valid currency")

    neighbour_currencies = collect_neighbour_currencies(countries, country.borders, base_currency)
    if not neighbour_currencies:
        rates: dict[str, float] = {}
    else:
        rate_set = fetch_rates_or_raise(currencies, base_currency)
        rates = filter_rates(rate_set, neighbour_currencies)

    return {
        "country": country.name,
        "base_currency": base_currency,
        "exchange_rates": rates,
    }
