"""Timing logs around the composed endpoints."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from flask import current_app

from app.errors import APIError
from app.logging import current_request_id, elapsed_ms


def _threshold_ms() -> float | None:
    try:
        return float(current_app.config.get("TIMING_MIN_DURATION_MS"))
    except (TypeError, ValueError):
        return None


def _timing_status(error: BaseException | None) -> str:
    if error is None:
        return "success"
    if isinstance(error, APIError):
        return f"error_{error.status_code}"
    return "error"


@contextmanager
def timed_operation(
    event: str,
    *,
    metadata: Mapping[str, Any] | None = None,
    logger: logging.Logger | None = None,
) -> Iterator[None]:
    """Log how long the block took.

    Every run is logged when ``TIMING_LOGS_ENABLED`` is set; otherwise only runs
    reaching ``TIMING_MIN_DURATION_MS``. A block that raises logs at WARNING
    with ``status`` set to ``error_<code>`` for API errors.
    """

    logger = logger or current_app.logger
    always = bool(current_app.config.get("TIMING_LOGS_ENABLED"))
    threshold = _threshold_ms()
    started = time.perf_counter()
    error: BaseException | None = None
    try:
        yield
    except Exception as exc:
        error = exc
        raise
    finally:
        duration_ms = elapsed_ms(started)
        if always or (threshold is not None and duration_ms >= threshold):
            extra = {
                "event": event,
                "request_id": current_request_id(),
                "status": _timing_status(error),
                "duration_ms": duration_ms,
                **(metadata or {}),
            }
            if error is None:
                logger.info("%s took %.1f ms", event, duration_ms, extra=extra)
            else:
                extra["error"] = str(error)
                logger.warning("%s failed after %.1f ms", event, duration_ms, extra=extra)
