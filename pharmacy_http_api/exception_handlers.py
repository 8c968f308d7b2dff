"""
Exception handlers for the Pharmacy HTTP API.

Every error leaves the service as ``{"success": false, "message": ...}``,
optionally with ``error`` and ``details``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pharmacy_http_api.errors import PharmacyError
from pharmacy_http_api.logging import get_logger

logger = get_logger(__name__)

_UNMATCHED_ROUTE = (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)
_ROUTER_DETAILS = (None, "Not Found", "Method Not Allowed")


def error_response(
    status_code: int,
    message: str,
    *,
    error: Optional[str] = None,
    details: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def pharmacy_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map domain errors to their HTTP status."""
    if not isinstance(exc, PharmacyError):
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    logger.info(
        "request_failed",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        message=exc.message,
    )
    return error_response(exc.status_code, exc.message, details=exc.details)


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn request validation failures into a 400 with per-field messages."""
    if not isinstance(exc, RequestValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation error")
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning("request_validation_failed", path=request.url.path, errors=errors)

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation error",
        details=errors,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle Starlette HTTP errors, including unmatched routes.

    A known path called with a method it does not serve is reported as an
    unmatched route too, so 405 from the router becomes the JSON 404.
    """
    if not isinstance(exc, StarletteHTTPException):
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    if exc.status_code in _UNMATCHED_ROUTE and exc.detail in _ROUTER_DETAILS:
        return error_response(status.HTTP_404_NOT_FOUND, "Route not found")
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


def make_unhandled_exception_handler(expose_details: bool):
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Log the full exception and return a generic 500.
        """
        logger.error(
            "unhandled_exception",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            exc_info=exc,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            error=str(exc) if expose_details else None,
        )

    return unhandled_exception_handler


def register_exception_handlers(app: FastAPI, *, expose_details: bool = False) -> None:
    """
    Register all exception handlers with the FastAPI application.
    """
    app.add_exception_handler(PharmacyError, pharmacy_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, make_unhandled_exception_handler(expose_details))


__all__ = ["error_response", "register_exception_handlers"]
