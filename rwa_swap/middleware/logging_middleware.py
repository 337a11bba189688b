"""
HTTP request logging middleware.

Binds a request id (and the route being served) into structlog's context
so aggregator and provider logs for a token-data batch can be traced back
to the request that triggered them. One summary line is logged per request.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.stdlib.get_logger("http")

REQUEST_ID_HEADER = "x-request-id"

# Load balancer probes; logged at debug only
PROBE_PATHS = frozenset({"/healthz"})


def _log_method(path: str, status_code: int):
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    if path in PROBE_PATHS:
        return logger.debug
    return logger.info


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Request-scoped log context plus a timing line per request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        path = request.url.path

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, route=path)

        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            _log_method(path, status_code)(
                "http_request",
                method=request.method,
                status=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
            )
