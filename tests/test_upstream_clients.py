"""Country and currency client tests against stubbed HTTP endpoints."""

from __future__ import annotations

import pytest
import requests
import responses

from app.providers import (
    CountriesClient,
    CountriesClientConfig,
    CountryNotFoundError,
    CurrencyClient,
    CurrencyClientConfig,
    UnexpectedPayloadError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from tests.fixtures import load_json

pytestmark = pytest.mark.providers

COUNTRIES_URL = "https://countries.example/v3.1"
CURRENCY_URL = "https://currency.example/currency"


@pytest.fixture()
def countries() -> CountriesClient:
    return CountriesClient(CountriesClientConfig(base_url=COUNTRIES_URL, timeout=2))


@pytest.fixture()
def currencies() -> CurrencyClient:
    return CurrencyClient(CurrencyClientConfig(base_url=CURRENCY_URL, timeout=2))


@responses.activate
def test_fetch_country_parses_record(countries: CountriesClient) -> None:
    responses.add(responses.GET, f"{COUNTRIES_URL}/alpha/no", json=load_json("alpha_no.json"))

    record = countries.fetch_country("no")

    assert record.name == "Norway"
    assert len(responses.calls) == 1


@responses.activate
def test_fetch_country_maps_404_to_not_found(countries: CountriesClient) -> None:
    responses.add(responses.GET, f"{COUNTRIES_URL}/alpha/zz", status=404, json={"status": 404})

    with pytest.raises(CountryNotFoundError) as exc_info:
        countries.fetch_country("zz")

    assert exc_info.value.code == "zz"


@responses.activate
def test_fetch_country_keeps_other_statuses(countries: CountriesClient) -> None:
    responses.add(responses.GET, f"{COUNTRIES_URL}/alpha/no", status=503)

    with pytest.raises(UpstreamStatusError) as exc_info:
        countries.fetch_country("no")

    assert not isinstance(exc_info.value, CountryNotFoundError)
    assert exc_info.value.status_code == 503


@responses.activate
def test_fetch_country_reports_timeouts(countries: CountriesClient) -> None:
    responses.add(
        responses.GET,
        f"{COUNTRIES_URL}/alpha/no",
        body=requests.exceptions.ReadTimeout("read timed out"),
    )

    with pytest.raises(UpstreamTransportError):
        countries.fetch_country("no")
    assert len(responses.calls) == 1


@responses.activate
def test_fetch_country_rejects_empty_list(countries: CountriesClient) -> None:
    responses.add(responses.GET, f"{COUNTRIES_URL}/alpha/no", json=[])

    with pytest.raises(UnexpectedPayloadError):
        countries.fetch_country("no")


@responses.activate
def test_fetch_rates_upper_cases_base(currencies: CurrencyClient) -> None:
    responses.add(responses.GET, f"{CURRENCY_URL}/NOK", json=load_json("currency_nok.json"))

    rate_set = currencies.fetch_rates("nok")

    assert rate_set.base_currency == "NOK"
    assert rate_set.rates == {"SEK": 10.5, "EUR": 11.2}
    assert rate_set.is_success


@responses.activate
def test_probes_use_configured_paths() -> None:
    countries = CountriesClient(
        CountriesClientConfig(base_url=COUNTRIES_URL, timeout=2, probe_path="/alpha/se")
    )
    currencies = CurrencyClient(
        CurrencyClientConfig(base_url=CURRENCY_URL, timeout=2, probe_path="/SEK")
    )
    responses.add(responses.GET, f"{COUNTRIES_URL}/alpha/se", json={})
    responses.add(responses.GET, f"{CURRENCY_URL}/SEK", status=500)

    assert countries.probe() == 200
    assert currencies.probe() == 500


def test_from_config_falls_back_to_default_urls() -> None:
    client = CountriesClient.from_config({"COUNTRIES_API_BASE_URL": "  "})

    assert client._config.base_url == "http://129.241.150.113:8080/v3.1"  # type: ignore[attr-defined]
    assert client._config.timeout == 5.0  # type: ignore[attr-defined]
