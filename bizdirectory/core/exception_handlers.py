"""Exception handlers for the FastAPI app.

Every error body has the shape {"error", "message", "details"}. Database
failures are not caught below this layer and end up in the 500 handler.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bizdirectory.core.config import get_settings
from bizdirectory.domain.exceptions import DirectoryException

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, error: str, message: str, details: object = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "details": details or {}},
    )


def _directory_exception_handler(
    request: Request, exc: DirectoryException
) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for parameters that cannot be coerced at all (e.g. page=abc).

    Only the offending location and message are reported, never the input.
    """
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return _error_response(
        422, "VALIDATION_ERROR", "Request validation failed", {"errors": errors}
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and wrong methods."""
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for DirectoryException, request validation, HTTP errors and the rest."""
    app.add_exception_handler(DirectoryException, _directory_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
