"""Country info composition."""

from __future__ import annotations

import logging
from typing import Any

from app.errors import NotFoundError, UpstreamError
from app.providers import (
    CountriesClient,
    CountryNotFoundError,
    CountryRecord,
    UnexpectedPayloadError,
    UpstreamStatusError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


def fetch_country_or_raise(client: CountriesClient, code: str) -> CountryRecord:
    """Fetch a country, translating provider failures into API errors."""

    try:
        return client.fetch_country(code)
    except CountryNotFoundError as exc:
        raise NotFoundError("country not found") from exc
    except UpstreamTransportError as exc:
        raise UpstreamError("failed to call countries service") from exc
    except UpstreamStatusError as exc:
        raise UpstreamError("countries service returned non-200") from exc
    except UnexpectedPayloadError as exc:
        logger.warning("Countries service sent an unexpected payload for %s: %s", code, exc)
        raise UpstreamError("unexpected response from countries service") from exc


def project_country_info(country: CountryRecord) -> dict[str, Any]:
    return {
        "name": country.name,
        "continents": list(country.continents),
        "population": country.population,
        "area": country.area,
        "languages": dict(country.languages),
        "borders": list(country.borders),
        "flag": country.flag,
        "capital": country.capital,
    }


def compose_country_info(client: CountriesClient, code: str) -> dict[str, Any]:
    """Return the public info view of the country identified by ``code``."""

    country = fetch_country_or_raise(client, code)
    return project_country_info(country)
