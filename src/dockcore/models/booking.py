"""Booking quote returned before a reservation is persisted."""

from pydantic import BaseModel, ConfigDict, Field

from .date_range import DateRange
from .enums import OccupantClass, PaymentMethod, ReservationStatus
from .pricing import PricingResult


class BookingQuote(BaseModel):
    """Everything the booking layer needs to create and charge a reservation.

    ``pricing`` is the informational breakdown; ``amount_due`` is what is
    actually charged (zero for fee-exempt occupants).
    """

    model_config = ConfigDict(frozen=True)

    slip_id: str
    date_range: DateRange
    occupant_class: OccupantClass
    pricing: PricingResult
    amount_due: int = Field(..., ge=0, description="Amount to charge in USD cents")
    initial_status: ReservationStatus = Field(
        ..., description="Status to persist the new reservation with"
    )
    payment_method: PaymentMethod
