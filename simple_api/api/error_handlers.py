"""Error Handlers — global exception handlers for the API.

Invariants:
    - SimpleApiError → structured JSON with error code, message, severity
    - Unparsable JSON body → MalformedRequestError (400)
    - Other RequestValidationError → 400 with field-level details
    - Routing errors: 404 → ResourceNotFoundError, 405 → MethodNotAllowedError
      (Allow header preserved)
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from simple_api.core.errors import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    MalformedRequestError,
    MethodNotAllowedError,
    ResourceNotFoundError,
    SimpleApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _api_error_response(
    request: Request, exc: SimpleApiError, headers: dict | None = None,
) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(), headers=headers,
    )


def _request_context(request: Request) -> ErrorContext:
    return ErrorContext(path=request.url.path, method=request.method)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(SimpleApiError)
    async def api_error_handler(request: Request, exc: SimpleApiError):
        if exc.context.path is None:
            exc.context.path = request.url.path
            exc.context.method = request.method
        return _api_error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        if any(e.get("type") == "json_invalid" for e in exc.errors()):
            return _api_error_response(
                request, MalformedRequestError(context=_request_context(request)),
            )
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong verb)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        ctx = _request_context(request)
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _api_error_response(
                request, ResourceNotFoundError(request.url.path, ctx),
            )
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return _api_error_response(
                request,
                MethodNotAllowedError(request.method, request.url.path, ctx),
                headers=exc.headers,
            )
        return _api_error_response(
            request,
            SimpleApiError(
                str(exc.detail), f"HTTP_{exc.status_code}",
                ErrorCategory.INTERNAL if exc.status_code >= 500
                else ErrorCategory.VALIDATION,
                ErrorSeverity.ERROR, ctx, exc.status_code,
            ),
            headers=exc.headers,
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
