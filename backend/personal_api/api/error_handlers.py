"""Error Handlers: global exception handlers for personal-api.

Invariants:
    - PersonalApiError → its own to_response() envelope and http_status
    - Exception (catch-all) → generic 500 envelope, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (PersonalApiError), catch-all (Exception).
      Contact payloads are parsed by the Validator, so no route raises
      RequestValidationError
    - Extracted from main.py so create_app() stays a plain wiring function
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from personal_api.core.errors import ErrorCategory, ErrorSeverity, PersonalApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register personal-api domain/infrastructure error handler."""

    @app.exception_handler(PersonalApiError)
    async def personal_api_error_handler(request: Request, exc: PersonalApiError):
        """Handle all personal-api domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.http_status < 500 else logging.ERROR
        )
        logger.log(
            level,
            f"PersonalApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "contact_id": exc.context.contact_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
