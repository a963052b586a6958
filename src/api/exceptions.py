"""HTTP exception handlers.

Every error body has the shape ``{"error": message}``; validation errors
add ``details``.
"""

import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)

INVALID_PARAMETERS = "Invalid query parameters"
INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Server not found"
NAME_REQUIRED = "Server name is required"


def error_response(status_code: int, message: str, details=None) -> JSONResponse:
    content = {"error": message}
    if details is not None:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content)


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    """Handle malformed query parameters."""
    errors = exc.errors(include_url=False) if isinstance(exc, ValidationError) else exc.errors()
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_PARAMETERS, errors)


async def global_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
