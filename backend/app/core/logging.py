"""Structured JSON logging and per-request access logging."""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# ``extra=`` keys copied into JSON records when present.
_ACCESS_FIELDS = ("method", "path", "status_code", "duration_ms", "client_ip")
_SIMULATION_FIELDS = (
    "appliance_count",
    "moved",
    "evaluations",
    "cost_savings",
    "co2_savings",
)

# Probes hit these often; their access lines go out at DEBUG.
_QUIET_PATHS = frozenset({"/health"})


class JSONFormatter(logging.Formatter):
    """One JSON object per record, tagged with the current request ID."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        rid = request_id_var.get("")
        if rid:
            entry["request_id"] = rid

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        for key in _ACCESS_FIELDS + _SIMULATION_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        return json.dumps(entry)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an X-Request-ID and log its status and latency."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        request_id_var.set(rid)

        start = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 1)

        response.headers["X-Request-ID"] = rid

        path = request.url.path
        if path in _QUIET_PATHS:
            level = logging.DEBUG
        elif response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logging.getLogger("smartgrid.access").log(
            level,
            "%s %s -> %s (%.1fms)",
            request.method,
            path,
            response.status_code,
            duration_ms,
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "client_ip": request.client.host if request.client else "unknown",
            },
        )

        return response


def setup_logging(
    json_format: bool = False,
    level: str = "INFO",
    engine_level: str | None = None,
) -> None:
    """Configure the root logger.

    ``json_format=True`` is meant for production.  ``engine_level`` sets the
    ``engine`` logger separately, e.g. ``"DEBUG"`` to trace every appliance
    move without turning on debug output for the web stack.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    # Replace, don't stack, when the app factory runs more than once.
    root.handlers.clear()
    root.addHandler(handler)

    if engine_level:
        logging.getLogger("engine").setLevel(engine_level.upper())

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
