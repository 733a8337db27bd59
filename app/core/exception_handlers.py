"""Exception to JSON response mapping.

Every error body has the shape {"error": code, "message": text, "details": ...}.
Call register_exception_handlers(app) once after the app is created.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import OpportunityHubException

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "SESSION_PROVIDER_ERROR": 502,
    "SERVICE_UNAVAILABLE": 503,
    "TAG_RESOLUTION_ERROR": 500,
}


def _error_response(
    status_code: int, error: str, message: Any, details: Any = None
) -> JSONResponse:
    body: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def _handle_domain_error(request: Request, exc: OpportunityHubException) -> JSONResponse:
    """Unmapped error codes are treated as client errors (400)."""
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status_code >= 500:
        logger.error(
            "%s %s -> %s %s: %s",
            request.method,
            request.url.path,
            status_code,
            exc.error_code,
            exc.message,
        )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, "HTTP_ERROR", exc.detail)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log with traceback; the exception text is only exposed in debug mode."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OpportunityHubException, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
