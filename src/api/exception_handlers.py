"""Exception handlers for the FastAPI application.

Every request-time failure is answered with a plain-text body. Application
errors carry their own status code (400 for all of them today); clients do
not get to tell a missing todo from a bad payload or a database fault.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings
from core.exceptions import AppException, ErrorCode, ValidationError

logger = structlog.get_logger()


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> PlainTextResponse:
        """Handle custom application exceptions."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
            details=exc.details,
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        """Handle HTTP exceptions from FastAPI/Starlette (unknown route, bad method)."""
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        """Handle Pydantic validation errors and unparseable bodies."""
        error = ValidationError(
            details=[
                {
                    "field": ".".join(str(x) for x in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exc.errors()
            ]
        )
        logger.info("validation_error", errors=error.details)
        return PlainTextResponse(error.message, status_code=error.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Handle unexpected exceptions."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error_code=ErrorCode.INTERNAL_ERROR.value,
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )

        message = "unexpected error"
        if not settings.is_production:
            message = str(exc) or message

        return PlainTextResponse(message, status_code=400)
