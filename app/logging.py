"""Logging setup for the country info service.

Records go to one stream handler on the root logger, rendered either with
``LOG_FORMAT`` or as one JSON object per line. The JSON renderer only copies
the ``extra`` keys listed in ``LOG_FIELDS``; anything else passed as ``extra``
stays on the record but is not emitted.
"""

from __future__ import annotations

import json
import logging
import logging.config
import time
import uuid
from typing import Any

from flask import Flask, Response, g, has_request_context, request
from requests.exceptions import RequestException

REQUEST_ID_HEADER = "X-Request-ID"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

LOG_FIELDS = (
    "event",
    "request_id",
    "method",
    "route",
    "country_code",
    "upstream",
    "url",
    "status",
    "outcome",
    "duration_ms",
    "error",
)

_OUTCOMES = {
    400: "invalid_input",
    404: "not_found",
    405: "method_not_allowed",
    502: "upstream_error",
}


class JSONLogFormatter(logging.Formatter):
    """One-line JSON rendering with a fixed set of correlation fields."""

    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        for field in LOG_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(app: Flask) -> None:
    """Install the stream handler on the root logger according to app config."""

    level = _level(app.config.get("LOG_LEVEL"))
    if app.config.get("LOG_JSON_ENABLED"):
        formatter: dict[str, Any] = {"()": JSONLogFormatter, "service": app.config.get("APP_NAME")}
    else:
        formatter = {"format": app.config.get("LOG_FORMAT") or DEFAULT_FORMAT}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": formatter},
            "handlers": {
                "stream": {"class": "logging.StreamHandler", "formatter": "default"},
            },
            "root": {"level": level, "handlers": ["stream"]},
        }
    )
    app.logger.handlers.clear()
    app.logger.setLevel(level)


def init_request_logging(app: Flask) -> None:
    """Tag each request with an ``X-Request-ID`` and log one line when it completes."""

    @app.before_request
    def _assign_request_id() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        extra = request_log_extra(response.status_code)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        app.logger.log(level, "%s %s -> %s", request.method, request.path, response.status_code, extra=extra)
        return response


def request_log_extra(status: int) -> dict[str, Any]:
    """Fields for the ``request.completed`` line of the active request."""

    view_args = request.view_args or {}
    extra = {
        "event": "request.completed",
        "request_id": g.get("request_id"),
        "method": request.method,
        "route": request.url_rule.rule if request.url_rule else request.path,
        "country_code": view_args.get("code") or None,
        "status": status,
        "outcome": outcome_for_status(status),
        "duration_ms": elapsed_ms(g.get("request_started")),
    }
    return {key: value for key, value in extra.items() if value is not None}


def outcome_for_status(status: int) -> str:
    if status < 400:
        return "success"
    return _OUTCOMES.get(status, "client_error" if status < 500 else "server_error")


def upstream_status(error: Exception | None) -> str:
    """Classify an upstream call: no response, a bad status, or an unreadable body.

    ``transport_error`` means no HTTP response arrived, ``http_<code>`` means the
    upstream answered with something other than 200.
    """

    if error is None:
        return "success"
    if isinstance(error, RequestException):
        return "transport_error"
    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        return f"http_{status_code}"
    return "invalid_payload"


def upstream_log_extra(
    *,
    upstream: str,
    event: str,
    url: str,
    started: float | None = None,
    error: Exception | None = None,
) -> dict[str, Any]:
    extra = {
        "event": event,
        "request_id": current_request_id(),
        "upstream": upstream,
        "url": url,
        "status": upstream_status(error),
        "duration_ms": elapsed_ms(started),
        "error": str(error) if error is not None else None,
    }
    return {key: value for key, value in extra.items() if value is not None}


def current_request_id() -> str | None:
    if not has_request_context():
        return None
    return g.get("request_id")


def elapsed_ms(started: float | None) -> float | None:
    if started is None:
        return None
    return round((time.perf_counter() - started) * 1000, 3)


def _level(name: Any) -> int:
    level = logging.getLevelName(str(name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
