"""Dataclasses describing normalized upstream payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .base import UnexpectedPayloadError

SUCCESS_RESULT = "success"


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _number(value: Any, *, field_name: str, cast: type) -> Any:
    if value is None:
        return cast(0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnexpectedPayloadError(f"Field '{field_name}' must be numeric, got {value!r}")
    return cast(value)


@dataclass(frozen=True)
class CountryRecord:
    """One country as described by the country-data provider."""

    name: str
    continents: List[str] = field(default_factory=list)
    population: int = 0
    area: float = 0.0
    languages: Dict[str, str] = field(default_factory=dict)
    borders: List[str] = field(default_factory=list)
    flag_png: str = ""
    flag_svg: str = ""
    capitals: List[str] = field(default_factory=list)
    currency_codes: Tuple[str, ...] = ()

    @property
    def capital(self) -> str:
        return self.capitals[0] if self.capitals else ""

    @property
    def flag(self) -> str:
        return self.flag_png or self.flag_svg

    @classmethod
    def from_payload(cls, payload: Any) -> CountryRecord:
        """Build a record from an ``/alpha`` payload, which may be an object or a list."""

        item = _single_record(payload)
        name = _mapping(item.get("name"))
        flags = _mapping(item.get("flags"))
        languages = {
            str(code): str(label) for code, label in _mapping(item.get("languages")).items()
        }
        return cls(
            name=str(name.get("common") or ""),
            continents=_string_list(item.get("continents")),
            population=_number(item.get("population"), field_name="population", cast=int),
            area=_number(item.get("area"), field_name="area", cast=float),
            languages=languages,
            borders=_string_list(item.get("borders")),
            flag_png=str(flags.get("png") or ""),
            flag_svg=str(flags.get("svg") or ""),
            capitals=_string_list(item.get("capital")),
            currency_codes=tuple(str(code) for code in _mapping(item.get("currencies"))),
        )


def _single_record(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if isinstance(payload, list) and payload and isinstance(payload[0], Mapping):
        return payload[0]
    raise UnexpectedPayloadError("Unexpected alpha response shape")


@dataclass(frozen=True)
class RateSet:
    """Exchange rates for one base currency."""

    base_currency: str
    rates: Dict[str, float] = field(default_factory=dict)
    result: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return not self.result or self.result == SUCCESS_RESULT

    @classmethod
    def from_payload(cls, base_currency: str, payload: Any) -> RateSet:
        if not isinstance(payload, Mapping):
            raise UnexpectedPayloadError("Currency response must be a JSON object")

        raw_rates = payload.get("rates")
        if raw_rates is None:
            raw_rates = {}
        elif not isinstance(raw_rates, Mapping):
            raise UnexpectedPayloadError("Currency response field 'rates' must be an object")

        rates: Dict[str, float] = {}
        for code, value in raw_rates.items():
            rates[str(code).upper()] = _number(value, field_name=f"rates.{code}", cast=float)

        result = payload.get("result")
        return cls(
            base_currency=base_currency.strip().upper(),
            rates=rates,
            result=str(result) if result is not None else None,
        )
