# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure, expected or not, is rendered as the standard error envelope:
#
#   {"status": "error", "message": "..."}
#
# Stack traces are logged, never returned to the client.
# =============================================================================

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.models.response import APIResponse

logger = logging.getLogger(__name__)


class UserAPIException(Exception):
    """
    Base exception for the User API.

    All custom exceptions inherit from this class. The code and details
    are for logs; clients only see the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "USER_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_envelope(self) -> APIResponse:
        """Convert exception to the error envelope."""
        return APIResponse.error(self.message)


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestBodyError(UserAPIException):
    """Raised when a request body is malformed or missing required fields."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(
            message="Invalid request body",
            code="INVALID_REQUEST_BODY",
            status_code=400,
            details=details,
        )


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UserAPIException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=404,
            details={"user_id": user_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

def _envelope_response(
    status_code: int,
    envelope: APIResponse,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope.to_content(),
        headers=headers,
    )


async def user_api_exception_handler(
    request: Request,
    exc: UserAPIException
) -> JSONResponse:
    """Convert UserAPIException to an error envelope."""
    logger.info(f"{request.method} {request.url.path} failed: [{exc.code}] {exc.message}")
    return _envelope_response(exc.status_code, exc.to_envelope())


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed JSON, a body that isn't an object, missing fields and wrong
    types all map to 400 "Invalid request body". FastAPI's default would
    be a 422 with the raw pydantic errors.
    """
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {exc.errors()}")
    return await user_api_exception_handler(request, InvalidRequestBodyError())


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) as envelopes."""
    return _envelope_response(
        exc.status_code,
        APIResponse.error(str(exc.detail)),
        headers=exc.headers,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return _envelope_response(500, APIResponse.error("An unexpected error occurred"))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the app."""
    app.add_exception_handler(UserAPIException, user_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
