"""Application-wide error utilities and handlers."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import InternalServerError, MethodNotAllowed, NotFound


class APIError(Exception):
    """Base class for API-level errors rendered as ``{"error": message}``."""

    status_code: int = 400

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientError(APIError):
    """Malformed input supplied by the caller."""

    status_code = 400


class NotFoundError(APIError):
    """The upstream reports that the requested resource does not exist."""

    status_code = 404


class UpstreamError(APIError):
    """An upstream failed, answered with a non-success status or sent malformed data."""

    status_code = 502


DEFAULT_STATUS_MESSAGES: dict[int, str] = {
    400: "bad request",
    404: "not found",
    405: "method not allowed",
    500: "internal server error",
    502: "upstream service unavailable",
}


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def register_error_handlers(app: Flask) -> None:
    """Attach error handlers to the Flask application."""

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError):
        message = error.message or DEFAULT_STATUS_MESSAGES.get(error.status_code, "request failed")
        return jsonify(error_body(message)), error.status_code

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error: MethodNotAllowed):
        response = jsonify(error_body(DEFAULT_STATUS_MESSAGES[405]))
        response.status_code = 405
        allowed = [method for method in error.valid_methods or [] if method != "HEAD"]
        if allowed:
            response.headers["Allow"] = ", ".join(allowed)
        return response

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        return jsonify(error_body(DEFAULT_STATUS_MESSAGES[404])), 404

    @app.errorhandler(InternalServerError)
    def handle_internal_error(error: InternalServerError):
        return jsonify(error_body(DEFAULT_STATUS_MESSAGES[500])), 500
