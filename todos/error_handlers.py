"""Global exception handlers.

ValidationError and malformed request bodies answer 400. Everything else,
storage failures included, answers a fixed 500 body with no details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todos.errors import ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"error": "Internal Server Error"}
INVALID_BODY = {"error": "Invalid request body"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_request_validation_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_request_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Malformed request on {request.url.path}: {exc.errors()}",
            extra={"error_code": "INVALID_BODY", "path": request.url.path},
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=INVALID_BODY)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={
                "error_code": getattr(exc, "code", "INTERNAL_ERROR"),
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR,
        )
