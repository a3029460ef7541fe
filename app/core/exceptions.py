"""
Error taxonomy and global exception handlers.

Every failure leaves the API as ``{"message": ..., "success": false}`` with
the message localised for the request.  Stack traces never reach clients.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.i18n import get_language, translate

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP status and a message key."""

    status_code: int = 500
    message_key: str = "error.internal"

    def __init__(self, message_key: str | None = None, *, fields: list[str] | None = None) -> None:
        if message_key is not None:
            self.message_key = message_key
        self.fields = fields or []
        super().__init__(self.message_key)


class ValidationError(AppError):
    status_code = 400
    message_key = "validation.failed"


class AuthError(AppError):
    status_code = 401
    message_key = "auth.invalid_credentials"


class AuthorizationError(AppError):
    status_code = 403
    message_key = "auth.forbidden"


class NotFoundError(AppError):
    status_code = 404
    message_key = "error.not_found"


class InternalError(AppError):
    status_code = 500
    message_key = "error.internal"


def _error_response(request: Request, status_code: int, message_key: str, **extra) -> JSONResponse:
    content = {"message": translate(message_key, get_language(request)), "success": False}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.message_key)
    extra = {"fields": exc.fields} if exc.fields else {}
    headers = {"WWW-Authenticate": "Session"} if exc.status_code == 401 else None
    response = _error_response(request, exc.status_code, exc.message_key, **extra)
    if headers:
        response.headers.update(headers)
    return response


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    fields = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        if loc:
            fields.append(".".join(loc))
    logger.debug("Request validation failed on %s: %s", request.url.path, fields)
    only_path = bool(errors) and all(err.get("loc", ("",))[0] == "path" for err in errors)
    key = "validation.invalid_id" if only_path else "validation.failed"
    return _error_response(request, 400, key, fields=fields)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Framework-raised errors (unknown route, wrong method) keep their status
    key = "error.not_found" if exc.status_code == 404 else None
    if key is not None:
        return _error_response(request, exc.status_code, key)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "success": False},
        headers=getattr(exc, "headers", None),
    )


async def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning("Rate limit exceeded on %s: %s", request.url.path, exc.detail)
    return _error_response(request, 429, "auth.rate_limited")


async def _sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error: %s", exc, exc_info=True)
    return _error_response(request, 500, "error.database")


async def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return _error_response(request, 500, "error.internal")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(AppError, _app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _sqlalchemy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
