"""Smoke tests for the status endpoint."""

from __future__ import annotations

import requests

from app.services.status import ServiceClock, ServiceHealth
from tests.fixtures import COUNTRIES_URL, CURRENCY_URL


def test_status_reports_healthy_upstreams(client, upstream, fake_clock):
    upstream.add("GET", f"{COUNTRIES_URL}/alpha/no", json=[{"name": {"common": "Norway"}}])
    upstream.add("GET", f"{CURRENCY_URL}/NOK", json={"result": "success", "rates": {}})
    fake_clock.advance(42.9)

    response = client.get("/countryinfo/v1/status/")

    assert response.status_code == 200
    assert response.get_json() == {
        "restcountriesapi": 200,
        "currenciesapi": 200,
        "version": "v1",
        "uptime": 42,
    }


def test_status_reports_502_when_one_upstream_fails(client, upstream):
    upstream.add("GET", f"{COUNTRIES_URL}/alpha/no", json=[])
    upstream.add("GET", f"{CURRENCY_URL}/NOK", status=503)

    response = client.get("/countryinfo/v1/status/")

    assert response.status_code == 502
    payload = response.get_json()
    assert payload["restcountriesapi"] == 200
    assert payload["currenciesapi"] == 503
    assert payload["version"] == "v1"
    assert payload["uptime"] == 0


def test_status_maps_probe_timeout_to_bad_gateway(client, upstream):
    upstream.add(
        "GET",
        f"{COUNTRIES_URL}/alpha/no",
        body=requests.exceptions.ConnectTimeout("timed out"),
    )
    upstream.add("GET", f"{CURRENCY_URL}/NOK", json={})

    response = client.get("/countryinfo/v1/status/")

    assert response.status_code == 502
    payload = response.get_json()
    assert payload["restcountriesapi"] == 502
    assert payload["currenciesapi"] == 200


def test_service_clock_truncates_to_whole_seconds():
    now = [100.0]
    clock = ServiceClock.start(lambda: now[0])

    now[0] = 159.99
    assert clock.uptime_seconds() == 59


def test_service_health_requires_both_upstreams():
    assert ServiceHealth(200, 200, "v1", 0).http_status == 200
    assert ServiceHealth(200, 404, "v1", 0).http_status == 502
    assert not ServiceHealth(500, 200, "v1", 0).healthy
