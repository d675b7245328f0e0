"""Validation helpers for country-code path parameters."""

from __future__ import annotations

from app.errors import ClientError

ISO2_LENGTH = 2


def normalize_country_code(value: str | None) -> str:
    """Trim surrounding whitespace and lowercase."""

    if value is None:
        return ""
    return str(value).strip().lower()


def is_valid_iso2(code: str) -> bool:
    """True iff ``code`` is exactly two ASCII letters ``a``-``z``."""

    if len(code) != ISO2_LENGTH:
        return False
    return all("a" <= ch <= "z" for ch in code)


def validate_country_code(value: str | None, *, endpoint: str) -> str:
    """Return the normalized code or raise ``ClientError`` before any upstream call."""

    normalized = normalize_country_code(value)
    if not is_valid_iso2(normalized):
        raise ClientError(
            "two_letter_country_code must be 2 letters (ISO 3166-2), "
            f"e.g. /countryinfo/v1/{endpoint}/no"
        )
    return normalized
