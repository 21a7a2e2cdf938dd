"""Observability — structured log records, request correlation and access logging.

Invariants:
    - Every record carries timestamp, level, logger and message; JSON output adds
      the request id of the request that produced it
    - Known extra keys (error_code, stage, kind, resource_id, user_id, reason ...)
      are copied onto the JSON record only when set
    - Credentials, secrets and hashes are never passed as extra fields
    - Every response carries X-Request-ID (echoed from the caller when supplied)

Design Decisions:
    - Request id kept in a ContextVar: handlers and services log without threading it
      through every call
    - Access log skips the liveness probe and greeting to keep probe noise out
"""

import logging
import json
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = frozenset({"/", "/api/health/", "/api/health/ready"})

_EXTRA_KEYS = (
    "error_code", "stage", "kind", "resource_id", "user_id",
    "path", "method", "status", "duration_ms", "reason",
)

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

access_logger = logging.getLogger("scholarlog.access")


def current_request_id() -> str | None:
    return _request_id.get()


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = current_request_id()
        if request_id:
            entry["request_id"] = request_id
        entry.update({
            key: record.__dict__[key]
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assigns a request id and writes one access-log line per request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = _request_id.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            if request.url.path not in QUIET_PATHS:
                access_logger.info(
                    f"{request.method} {request.url.path} {response.status_code}",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status": response.status_code,
                        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    },
                )
            return response
        finally:
            _request_id.reset(token)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install one stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_scholarlog", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler._scholarlog = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
