"""Application configuration classes."""

from __future__ import annotations

import os
from urllib.parse import urlparse

SUPPORTED_URL_SCHEMES = {"http", "https"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "countryinfo"
    API_VERSION = "v1"
    PORT = int(_get_env("PORT", "8080"))
    REQUEST_TIMEOUT_SECONDS = float(_get_env("REQUEST_TIMEOUT_SECONDS", "5"))
    COUNTRIES_API_BASE_URL = _get_env(
        "COUNTRIES_API_BASE_URL", "http://129.241.150.113:8080/v3.1"
    )
    CURRENCY_API_BASE_URL = _get_env(
        "CURRENCY_API_BASE_URL", "http://129.241.150.113:9090/currency"
    )
    COUNTRIES_PROBE_PATH = _get_env("COUNTRIES_PROBE_PATH", "/alpha/no")
    CURRENCY_PROBE_PATH = _get_env("CURRENCY_PROBE_PATH", "/NOK")
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON_ENABLED = _get_env("LOG_JSON_ENABLED", "false").lower() == "true"
    LOG_FORMAT = _get_env("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")
    TIMING_LOGS_ENABLED = _get_env("TIMING_LOGS_ENABLED", "false").lower() == "true"
    TIMING_MIN_DURATION_MS = _get_env("TIMING_MIN_DURATION_MS", "1000")


class DevelopmentConfig(BaseConfig):
    """Configuration for local development."""

    DEBUG = True
    TESTING = False


class ProductionConfig(BaseConfig):
    """Configuration for production deployments."""

    DEBUG = False
    TESTING = False


class TestingConfig(BaseConfig):
    """Configuration used by the test suite; upstreams point at stub hosts."""

    DEBUG = False
    TESTING = True
    COUNTRIES_API_BASE_URL = "http://countries.test/v3.1"
    CURRENCY_API_BASE_URL = "http://currency.test/currency"
    COUNTRIES_PROBE_PATH = "/alpha/no"
    CURRENCY_PROBE_PATH = "/NOK"
    REQUEST_TIMEOUT_SECONDS = 5.0
    LOG_JSON_ENABLED = False
    TIMING_LOGS_ENABLED = False


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(config_name: str | None = None) -> type[BaseConfig]:
    """Return the config class for the requested environment.

    Args:
        config_name: Optional explicit config identifier. If omitted, the
            APP_ENV environment variable is consulted.

    Raises:
        KeyError: If the requested configuration is not defined.
        ValueError: If upstream URLs or the request timeout are unusable.
    """

    env_candidate = config_name if config_name is not None else os.getenv("APP_ENV", "development")
    env_name = (env_candidate or "development").lower()
    try:
        config_cls = CONFIG_BY_ENV[env_name]
    except KeyError as exc:
        raise KeyError(f"Unknown APP_ENV '{env_name}'") from exc

    _validate_upstreams(config_cls)
    return config_cls


def _validate_upstreams(config_cls: type[BaseConfig]) -> None:
    for key in ("COUNTRIES_API_BASE_URL", "CURRENCY_API_BASE_URL"):
        value = getattr(config_cls, key)
        parsed = urlparse(value or "")
        if parsed.scheme not in SUPPORTED_URL_SCHEMES or not parsed.netloc:
            raise ValueError(f"{key} must be an absolute http(s) URL, got '{value}'")

    if config_cls.REQUEST_TIMEOUT_SECONDS <= 0:
        raise ValueError(
            f"REQUEST_TIMEOUT_SECONDS must be positive, got {config_cls.REQUEST_TIMEOUT_SECONDS}"
        )
