"""Route handlers for the country info API."""

from __future__ import annotations

from flask import current_app, request
from flask.views import MethodView
from werkzeug.exceptions import MethodNotAllowed

from app.monitoring import timed_operation
from app.providers import CountriesClient, CurrencyClient
from app.schemas import CountryInfoSchema, ErrorSchema, ExchangeSchema, StatusSchema
from app.services import compose_country_info, compose_exchange, probe_status
from app.services.status import ServiceClock
from app.validation import validate_country_code

from . import blp


def _countries_client() -> CountriesClient:
    return current_app.extensions["countries_client"]


def _currency_client() -> CurrencyClient:
    return current_app.extensions["currency_client"]


class GetOnlyView(MethodView):
    """MethodView answering 405 for every verb but GET, OPTIONS and HEAD included."""

    provide_automatic_options = False

    def dispatch_request(self, **kwargs):
        if request.method != "GET":
            raise MethodNotAllowed(valid_methods=["GET"])
        return super().dispatch_request(**kwargs)


@blp.route("/status/")
class Status(GetOnlyView):
    @blp.response(200, StatusSchema())
    @blp.alt_response(502, schema=StatusSchema, description="At least one upstream is unhealthy")
    def get(self):
        clock: ServiceClock = current_app.extensions["service_clock"]
        with timed_operation("countryinfo.status"):
            health = probe_status(
                _countries_client(),
                _currency_client(),
                clock,
                current_app.config.get("API_VERSION", "v1"),
            )
        return health, health.http_status


@blp.route("/info/", defaults={"code": ""})
@blp.route("/info/<path:code>")
class CountryInfo(GetOnlyView):
    @blp.response(200, CountryInfoSchema())
    @blp.alt_response(400, schema=ErrorSchema, description="Invalid country code")
    @blp.alt_response(404, schema=ErrorSchema, description="Country not found")
    @blp.alt_response(502, schema=ErrorSchema, description="Upstream failure")
    def get(self, code: str):
        normalized = validate_country_code(code, endpoint="info")
        with timed_operation("countryinfo.info", metadata={"country_code": normalized}):
            return compose_country_info(_countries_client(), normalized)


@blp.route("/exchange/", defaults={"code": ""})
@blp.route("/exchange/<path:code>")
class Exchange(GetOnlyView):
    @blp.response(200, ExchangeSchema())
    @blp.alt_response(400, schema=ErrorSchema, description="Invalid country code")
    @blp.alt_response(404, schema=ErrorSchema, description="Country not found")
    @blp.alt_response(502, schema=ErrorSchema, description="Upstream failure")
    def get(self, code: str):
        normalized = validate_country_code(code, endpoint="exchange")
        with timed_operation("countryinfo.exchange", metadata={"country_code": normalized}):
            return compose_exchange(_countries_client(), _currency_client(), normalized)
