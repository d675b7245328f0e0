"""Application factory for the country info service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask
from flask_smorest import Api

from config import get_config
from .cli import register_cli
from .logging import init_request_logging, setup_logging
from .services.status import ServiceClock

API_PREFIX = "/countryinfo/v1"


def create_app(
    config_name: str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    service_clock: ServiceClock | None = None,
) -> Flask:
    """Application factory adhering to the Flask app factory pattern.

    ``service_clock`` fixes the process start time used for uptime; a fresh
    one is started when omitted.
    """

    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    setup_logging(app)
    init_request_logging(app)

    _configure_api(app)
    api = _register_extensions(app, service_clock)
    _register_blueprints(app, api)
    _register_error_handlers(app)

    register_cli(app)
    return app


def _configure_api(app: Flask) -> None:
    app.config.setdefault("API_TITLE", "Country Info API")
    app.config.setdefault("API_VERSION", "v1")
    app.config.setdefault("OPENAPI_VERSION", "3.0.3")
    app.config.setdefault("OPENAPI_URL_PREFIX", "/docs")
    app.config.setdefault("OPENAPI_SWAGGER_UI_PATH", "/")
    app.config.setdefault(
        "OPENAPI_SWAGGER_UI_URL",
        "https://cdn.jsdelivr.net/npm/swagger-ui-dist/",
    )


def _register_extensions(app: Flask, service_clock: ServiceClock | None) -> Api:
    """Initialize the upstream clients, the uptime clock and the API extension."""

    from .providers import init_providers
    from .services import init_service_clock

    init_providers(app)
    init_service_clock(app, service_clock)

    api = Api(app)
    app.extensions["smorest_api"] = api
    return api


def _register_blueprints(app: Flask, api: Api) -> None:
    """Register Flask blueprints."""

    from .countryinfo import blp as countryinfo_blp

    api.register_blueprint(countryinfo_blp, url_prefix=API_PREFIX)


def _register_error_handlers(app: Flask) -> None:
    """Register global error handlers."""

    from .errors import register_error_handlers

    register_error_handlers(app)
