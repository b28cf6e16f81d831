"""
Exception handlers for the FastAPI application.

Every error leaves the API as
`{"error": true, "code", "message", "details", "status_code"}`.
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from storefront.core.domain import DomainException, ErrorCode

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES: dict[int, ErrorCode] = {
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHENTICATED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
}


def _error_body(code: ErrorCode | str, message: str, status_code: int, details: Any = None) -> dict[str, Any]:
    return {
        "error": True,
        "code": code.value if isinstance(code, ErrorCode) else code,
        "message": message,
        "details": details if details is not None else {},
        "status_code": status_code,
    }


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate a DomainException into its status code and error body."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    if exc.status_code >= 500:
        logger.error(f"{exc.code.value} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code.value} on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """A unique or check constraint fired: report it as a conflict."""
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body(ErrorCode.CONFLICT, "Resource conflicts with existing data", status.HTTP_409_CONFLICT),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    code = _HTTP_STATUS_CODES.get(http_exc.status_code, f"HTTP_{http_exc.status_code}")
    return JSONResponse(
        status_code=http_exc.status_code,
        content=_error_body(code, str(http_exc.detail), http_exc.status_code),
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with per-field details."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=_error_body(ErrorCode.VALIDATION, str(exc), 422),
        )

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=422,
        content=_error_body(ErrorCode.VALIDATION, "Validation error", 422, errors),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL", "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
