"""Error Handlers — the centralized conversion of failures into error envelopes.

Invariants:
    - AppError → {status, message} with the error's status code
    - HTTPException → same envelope, classification derived from its status code
    - RequestValidationError → 400 fail naming the first offending field
    - Exception (catch-all) → 500 error with the generic message, never internals

Design Decisions:
    - render_error is the only place an error envelope is built; every handler delegates to it
    - Missing attributes fall back to 500 / "error" / the generic message
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rates_api.core.errors import (
    AppError,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_STATUS,
    DEFAULT_STATUS_CODE,
    missing_query_param,
)

logger = logging.getLogger(__name__)


def render_error(err) -> JSONResponse:
    """Build the error response for a forwarded error."""
    if isinstance(err, AppError):
        return JSONResponse(
            status_code=err.status_code, content=err.to_response(),
        )
    status_code = getattr(err, "status_code", None) or DEFAULT_STATUS_CODE
    status = getattr(err, "status", None) or DEFAULT_STATUS
    message = getattr(err, "message", None) or DEFAULT_ERROR_MESSAGE
    return JSONResponse(
        status_code=status_code,
        content={"status": status, "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_app_error_handler(app)
    _register_http_exception_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _log_app_error(request: Request, exc: AppError) -> None:
    """One log line per failure; forwarded failures carry their cause's traceback."""
    extra = {
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.status_code,
        "error_status": exc.status,
    }
    if exc.status == "fail":
        logger.warning(f"Client error: {exc.message}", extra=extra)
    elif exc.__cause__ is not None:
        cause = exc.__cause__
        logger.error(
            f"Server error on {request.url.path}: "
            f"{type(cause).__name__}: {cause}",
            extra=extra,
            exc_info=cause,
        )
    else:
        logger.error(f"Server error: {exc.message}", extra=extra)


def _register_app_error_handler(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle every error forwarded from guards and route handlers."""
        _log_app_error(request, exc)
        return render_error(exc)


def _register_http_exception_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Map framework HTTP errors into the envelope."""
        err = AppError(str(exc.detail), exc.status_code)
        _log_app_error(request, err)
        return render_error(err)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Report the first validation problem as a 400 fail."""
        err = _validation_error_to_app_error(exc)
        _log_app_error(request, err)
        return render_error(err)


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return render_error(AppError(DEFAULT_ERROR_MESSAGE))


def _validation_error_to_app_error(exc: RequestValidationError) -> AppError:
    errors = exc.errors()
    if not errors:
        return AppError("Invalid request data", 400)
    first = errors[0]
    loc = first.get("loc", ())
    field = str(loc[-1]) if loc else "request"
    if first.get("type") == "missing" and loc and loc[0] == "query":
        return missing_query_param(field)
    return AppError(f"Invalid request data - {field}: {first.get('msg')}", 400)
