"""Test fixture helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_FIXTURE_ROOT = Path(__file__).parent


def load_json(name: str) -> Any:
    """Load a JSON fixture by filename; upstream payloads may be objects or lists."""

    data = json.loads((_FIXTURE_ROOT / name).read_text(encoding="utf-8"))
    if not isinstance(data, dict | list):
        raise ValueError(f"Fixture '{name}' does not contain a JSON object or array.")
    return data


COUNTRIES_URL = "http://countries.test/v3.1"
CURRENCY_URL = "http://currency.test/currency"
