"""Error Handlers — global exception handlers for the playground API.

Invariants:
    - PlaygroundError → structured JSON with error code, message, severity
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PlaygroundError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so tests can build an app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from playground.core.errors import PlaygroundError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_playground_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_playground_error_handler(app: FastAPI) -> None:
    """Register playground domain/capability error handler."""

    @app.exception_handler(PlaygroundError)
    async def playground_error_handler(request: Request, exc: PlaygroundError):
        """Handle all playground domain/capability errors."""
        expected = exc.http_status < 500 or exc.severity == ErrorSeverity.WARNING
        log = logger.warning if expected else logger.error
        log(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra=error_log_fields(exc),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def error_log_fields(exc: PlaygroundError) -> dict:
    """Structured log fields for a domain error; unset context is left out."""
    fields = {
        "error_code": exc.code,
        "error_category": exc.category.value,
        "severity": exc.severity.value,
        "session_id": exc.context.session_id,
        "revision": exc.context.revision,
        "entrypoint": exc.context.entrypoint,
    }
    return {key: value for key, value in fields.items() if value is not None}


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
