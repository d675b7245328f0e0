"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import responses

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from app.services.status import ServiceClock  # noqa: E402
from tests.fixtures import COUNTRIES_URL, CURRENCY_URL, load_json  # noqa: E402


class FakeClock:
    """Manually advanced clock standing in for ``time.monotonic``."""

    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def app(fake_clock: FakeClock) -> Iterator:
    """Flask application wired to stub upstream hosts and a fake clock."""

    flask_app = create_app("testing", service_clock=ServiceClock.start(fake_clock))
    yield flask_app


@pytest.fixture()
def client(app):
    """Provide a Flask test client."""

    with app.test_client() as client:
        yield client


@pytest.fixture()
def upstream() -> Iterator[responses.RequestsMock]:
    """Stub both upstream providers; any unregistered URL fails the request."""

    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture()
def stub_country(upstream: responses.RequestsMock) -> Callable[..., None]:
    """Register a country lookup, from a fixture file name or an inline payload."""

    def _stub(code: str, payload: Any = None, *, status: int = 200) -> None:
        if isinstance(payload, str):
            payload = load_json(payload)
        upstream.add(
            responses.GET,
            f"{COUNTRIES_URL}/alpha/{code}",
            json=payload if payload is not None else {"status": status, "message": "Not Found"},
            status=status,
        )

    return _stub


@pytest.fixture()
def stub_rates(upstream: responses.RequestsMock) -> Callable[..., None]:
    def _stub(base: str, payload: Any = None, *, status: int = 200) -> None:
        if isinstance(payload, str):
            payload = load_json(payload)
        upstream.add(
            responses.GET,
            f"{CURRENCY_URL}/{base}",
            json=payload if payload is not None else {},
            status=status,
        )

    return _stub
