"""
FastAPI Error Handlers for the read API.

Converts exceptions into the standardized APIErrorResponse format with the
matching HTTP status code.

Usage:
    from fastapi import FastAPI
    from shared.fastapi_errors import register_error_handlers

    app = FastAPI()
    register_error_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.errors import (
    APIErrorResponse,
    ErrorCategory,
    get_error_logger,
    map_status_to_category,
)


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Convert HTTPException (403, 404...) to APIErrorResponse.

    Args:
        request: FastAPI request object
        exc: HTTPException that was raised

    Returns:
        JSONResponse with APIErrorResponse body
    """
    category = map_status_to_category(exc.status_code)

    context: dict[str, Any] = {
        "path": str(request.url.path),
        "method": request.method,
        "status_code": exc.status_code,
    }

    # HTTPException is expected, no stack trace needed
    log_ref = get_error_logger().log_error(
        error=exc,
        category=category,
        context=context,
        exc_info=False,
    )

    response = APIErrorResponse(
        error_category=category,
        error_code=f"HTTP_{exc.status_code}",
        message=str(exc.detail),
        log_ref=log_ref,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Convert request validation errors (e.g. a malformed id) to APIErrorResponse."""
    errors = exc.errors()

    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.VALIDATION_ERROR,
        context={"path": str(request.url.path), "method": request.method},
        exc_info=False,
    )

    if len(errors) == 1:
        field = ".".join(str(loc) for loc in errors[0]["loc"])
        message = f"Invalid value for '{field}': {errors[0]['msg']}"
    else:
        message = f"Invalid values for {len(errors)} fields"

    response = APIErrorResponse(
        error_category=ErrorCategory.VALIDATION_ERROR,
        error_code="VALIDATION_ERROR",
        message=message,
        log_ref=log_ref,
    )

    return JSONResponse(status_code=422, content=response.model_dump())


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert unhandled exceptions to a 500 APIErrorResponse without internal details."""
    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.UNEXPECTED_ERROR,
        context={
            "path": str(request.url.path),
            "method": request.method,
            "exception_type": type(exc).__name__,
        },
    )

    response = APIErrorResponse(
        error_category=ErrorCategory.UNEXPECTED_ERROR,
        error_code="INTERNAL_SERVER_ERROR",
        message="Internal server error",
        log_ref=log_ref,
    )

    return JSONResponse(status_code=500, content=response.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers with a FastAPI app.

    Registers handlers for:
    - HTTPException (403, 404, ...)
    - RequestValidationError
    - Exception (all unhandled exceptions)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Registered error handlers for FastAPI")
