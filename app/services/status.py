"""Upstream health probing and service uptime."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from app.providers import CountriesClient, CurrencyClient

HEALTHY_STATUS = 200


@dataclass(frozen=True)
class ServiceClock:
    """Process start timestamp plus the clock used to measure uptime."""

    started_at: float
    clock: Callable[[], float] = field(default=time.monotonic, compare=False)

    @classmethod
    def start(cls, clock: Callable[[], float] = time.monotonic) -> ServiceClock:
        return cls(started_at=clock(), clock=clock)

    def uptime_seconds(self) -> int:
        return max(int(self.clock() - self.started_at), 0)


@dataclass(frozen=True)
class ServiceHealth:
    restcountriesapi: int
    currenciesapi: int
    version: str
    uptime: int

    @property
    def healthy(self) -> bool:
        return self.restcountriesapi == HEALTHY_STATUS and self.currenciesapi == HEALTHY_STATUS

    @property
    def http_status(self) -> int:
        return HEALTHY_STATUS if self.healthy else 502


def probe_status(
    countries: CountriesClient,
    currencies: CurrencyClient,
    clock: ServiceClock,
    version: str,
) -> ServiceHealth:
    """Probe both upstreams once and report their status codes with uptime."""

    return ServiceHealth(
        restcountriesapi=countries.probe(),
        currenciesapi=currencies.probe(),
        version=version,
        uptime=clock.uptime_seconds(),
    )


def init_service_clock(app, clock: ServiceClock | None = None) -> ServiceClock:
    """Store the process start clock on the app; set once, read-only afterwards."""

    service_clock = clock or ServiceClock.start()
    app.extensions["service_clock"] = service_clock
    return service_clock
