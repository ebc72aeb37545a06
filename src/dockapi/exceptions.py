"""FastAPI exception handlers for converting BookingError to HTTP responses.

This module provides exception handlers that convert domain errors (BookingError)
to appropriate HTTP responses with consistent JSON structure matching ToolError.

The ErrorCode-to-HTTP status mapping follows REST conventions:
- 400 Bad Request: Invalid input or booking rule violations
- 409 Conflict: Dates already taken or reservation already cancelled
- 422 Unprocessable Entity: Malformed request bodies or query parameters

Usage:
    from dockapi.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from dockapi.models.common import format_validation_errors
from dockcore.models.errors import BookingError, ErrorCode
from dockcore.utils.logging import get_logger

logger = get_logger(__name__)

# Starlette renamed the 422 constant; the code itself is stable
VALIDATION_ERROR_STATUS = 422

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Conflicts with existing state -> 409 Conflict
    ErrorCode.DATES_UNAVAILABLE: HTTP_409_CONFLICT,
    ErrorCode.RESERVATION_NOT_CANCELLABLE: HTTP_409_CONFLICT,
    # Input and booking rule errors -> 400 Bad Request
    ErrorCode.INVALID_DATE_RANGE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: HTTP_400_BAD_REQUEST,
    ErrorCode.CHECK_IN_IN_PAST: HTTP_400_BAD_REQUEST,
    ErrorCode.MAX_NIGHTS_EXCEEDED: HTTP_400_BAD_REQUEST,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 400 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    """Handle BookingError exceptions and convert to JSON response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The BookingError exception

    Returns:
        JSONResponse with ToolError body and mapped status code.
    """
    status_code = get_http_status_for_error(exc.code)
    logger.info(
        "Booking error %s on %s %s",
        exc.code.value,
        request.method,
        request.url.path,
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_tool_error().model_dump(mode="json"),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Wrap FastAPI request validation errors in the standard error shape.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The validation error raised while parsing the request

    Returns:
        JSONResponse with 422 status and per-field details.
    """
    body = format_validation_errors(list(exc.errors()))
    return JSONResponse(
        status_code=VALIDATION_ERROR_STATUS,
        content=body.model_dump(mode="json"),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a generic error response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The uncaught exception

    Returns:
        JSONResponse with 500 status and generic error message.
    """
    logger.exception("Unhandled exception: %s", exc)

    # Don't expose internal details to the client
    error_response = {
        "success": False,
        "error_code": "ERR_INTERNAL",
        "message": "An unexpected error occurred",
        "recovery": "Please try again later or contact support",
        "details": None,
    }

    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(BookingError, booking_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
