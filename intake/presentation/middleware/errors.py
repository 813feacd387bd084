"""Top-level safety net for exceptions no handler claimed."""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..api.errors import unexpected_error_response

logger = structlog.get_logger()


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Converts any uncaught exception into the generic 500 JSON response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                "Unhandled API error",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return unexpected_error_response(e)
