"""Standard error codes for dock slip booking operations.

All services raise BookingError (or one of its subclasses) carrying one of
these codes. The API layer converts them into ToolError JSON responses.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard booking error codes."""

    DATES_UNAVAILABLE = "ERR_001"
    INVALID_DATE_RANGE = "ERR_002"
    INVALID_AMOUNT = "ERR_003"
    CHECK_IN_IN_PAST = "ERR_004"
    MAX_NIGHTS_EXCEEDED = "ERR_005"
    RESERVATION_NOT_CANCELLABLE = "ERR_006"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "This slip is already booked for the selected dates",
    ErrorCode.INVALID_DATE_RANGE: "Check-out date must be after check-in date",
    ErrorCode.INVALID_AMOUNT: "Amounts must be zero or positive whole cents",
    ErrorCode.CHECK_IN_IN_PAST: "Check-in date cannot be in the past",
    ErrorCode.MAX_NIGHTS_EXCEEDED: "Renters can only book up to 30 days at a time",
    ErrorCode.RESERVATION_NOT_CANCELLABLE: "Reservation has already been cancelled",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Choose a different date range or another slip",
    ErrorCode.INVALID_DATE_RANGE: "Pick a check-out date at least one day after check-in",
    ErrorCode.INVALID_AMOUNT: "Send amounts as non-negative integers in cents",
    ErrorCode.CHECK_IN_IN_PAST: "Pick a check-in date of today or later",
    ErrorCode.MAX_NIGHTS_EXCEEDED: "Shorten the stay to 30 nights or fewer",
    ErrorCode.RESERVATION_NOT_CANCELLABLE: "No action needed, the reservation is already cancelled",
}


class ToolError(BaseModel):
    """Standard error response format for failed booking operations."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Create a ToolError from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            A ToolError with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised by booking operations.

    Can be caught and converted to a ToolError for API responses.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_tool_error(self) -> ToolError:
        """Convert this exception to a ToolError."""
        return ToolError.from_code(self.code, self.details)


class InvalidRangeError(BookingError):
    """Raised when a date range does not end strictly after it starts."""

    def __init__(self, details: Optional[dict[str, str]] = None):
        super().__init__(ErrorCode.INVALID_DATE_RANGE, details)


class InvalidAmountError(BookingError):
    """Raised when a nightly rate or total cost is negative or not whole cents."""

    def __init__(self, details: Optional[dict[str, str]] = None):
        super().__init__(ErrorCode.INVALID_AMOUNT, details)
