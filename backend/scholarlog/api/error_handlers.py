"""Error Handlers — global exception handlers for the Scholarlog API.

Invariants:
    - ScholarlogError → structured JSON with error code, message, severity
      (ValidationFailed adds the top-level "errors" message list)
    - RequestValidationError → the same ValidationFailed shape, status 400
    - Unknown routes → {"message": "Route Not Found"}
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Four-layer handler: domain (ScholarlogError), validation (framework),
      routing (Starlette HTTPException), catch-all (Exception)
    - 401 responses carry a Basic challenge so standard clients know the scheme
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from scholarlog.core.errors import (
    ErrorSeverity, InternalError, ScholarlogError, UnauthenticatedError,
    ValidationFailedError,
)
from scholarlog.core.normalize_violations import messages_from_request_errors

logger = logging.getLogger(__name__)

BASIC_CHALLENGE = {"WWW-Authenticate": 'Basic realm="scholarlog"'}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_scholarlog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_scholarlog_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ScholarlogError)
    async def scholarlog_error_handler(request: Request, exc: ScholarlogError):
        """Handle all Scholarlog errors, exiting at the stage they record."""
        extra = {**exc.log_extra(), "path": request.url.path, "method": request.method}
        if isinstance(exc, InternalError):
            logger.error(f"InternalError: {exc.detail or exc.message}", extra=extra)
        else:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        headers = BASIC_CHALLENGE if isinstance(exc, UnauthenticatedError) else None
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(), headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register framework request-validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed path or body: same shape as field violations."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = ValidationFailedError(messages_from_request_errors(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Route Not Found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code, content={"message": message},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": InternalError.MESSAGE,
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
