"""
staff_skills.observability.middleware

HTTP middleware for request-scoped logging context and access logs.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from staff_skills.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id (caller-provided `x-request-id` or a fresh uuid4),
    binds it with the path and method into structlog contextvars, and writes one
    `request_completed` line per request. uvicorn's own access log is disabled.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            )
        except Exception as e:
            # The server turns unhandled errors into a bare 500 further out.
            log.error(
                "request_completed",
                status_code=500,
                duration_ms=_elapsed_ms(started),
                error=type(e).__name__,
                exc_info=e,
            )
            raise
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
