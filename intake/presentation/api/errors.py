"""Exception handlers rendering intake errors as JSON."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...domain.errors import IntakeError

logger = structlog.get_logger()

MALFORMED_REQUEST = "잘못된 요청 형식입니다."
SERVER_ERROR = "서버 오류가 발생했습니다."


async def intake_error_handler(request: Request, exc: IntakeError) -> JSONResponse:
    logger.warning(
        "Request rejected",
        error_type=type(exc).__name__,
        status_code=exc.status_code,
        error=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed request body", errors=[e.get("type") for e in exc.errors()])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MALFORMED_REQUEST},
    )


def unexpected_error_response(exc: Exception) -> JSONResponse:
    """Generic 500 that still exposes message and type to operators."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": SERVER_ERROR,
            "message": str(exc),
            "type": type(exc).__name__,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntakeError, intake_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
