"""
Correlation ID middleware for request tracing.

The ID is taken from X-Request-ID (or X-Correlation-ID) when present,
generated otherwise, bound to every log line of the request and echoed back
in the response headers.
"""

from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...infrastructure.logging import Timer

logger = structlog.get_logger()


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(
            "X-Request-ID",
            request.headers.get("X-Correlation-ID", str(uuid4())),
        )

        with structlog.contextvars.bound_contextvars(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        ):
            logger.info(
                "Request started",
                client_ip=request.client.host if request.client else None,
            )

            with Timer() as t:
                response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=t.duration_ms,
            )

        response.headers["X-Request-ID"] = correlation_id
        response.headers["X-Correlation-ID"] = correlation_id

        return response
