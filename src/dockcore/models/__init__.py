"""Pydantic models for dock slip booking data entities."""

from .enums import (
    OccupantClass,
    PaymentMethod,
    ReservationStatus,
    SettlementStatus,
)
from .errors import (
    BookingError,
    ErrorCode,
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    InvalidAmountError,
    InvalidRangeError,
    ToolError,
)
from .date_range import DateRange
from .reservation import Reservation
from .pricing import PricingResult, RevenueSummary
from .refund import RefundResult
from .booking import BookingQuote

__all__ = [
    # Enums
    "OccupantClass",
    "PaymentMethod",
    "ReservationStatus",
    "SettlementStatus",
    # Stays
    "DateRange",
    "Reservation",
    "BookingQuote",
    # Pricing
    "PricingResult",
    "RevenueSummary",
    # Refunds
    "RefundResult",
    # Errors
    "BookingError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "InvalidAmountError",
    "InvalidRangeError",
    "ToolError",
]
