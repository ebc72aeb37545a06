"""Booking quote endpoint.

Runs the booking rules (past dates, renter stay limit), the availability
check and pricing in one call. The caller persists the reservation and
charges ``amount_due``; nothing is stored here.
"""

from fastapi import APIRouter, Depends

from dockapi.dependencies import get_booking_service
from dockapi.models.bookings import BookingQuoteRequest
from dockcore.models import BookingQuote
from dockcore.services.booking import BookingService

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings/quote",
    summary="Quote a booking",
    description="""
Validate a booking request and return what to persist and charge.

**Notes:**
- Renter bookings start `pending`; fee-exempt bookings start `confirmed`
- `amount_due` is 0 for homeowners, admins and superadmins
- Renters may book at most 30 nights per reservation
""",
    response_description="Booking quote",
    response_model=BookingQuote,
    responses={
        400: {"description": "Invalid dates, past check-in, or stay too long"},
        409: {"description": "Slip already booked for the selected dates"},
    },
)
async def quote_booking(
    request: BookingQuoteRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingQuote:
    """Validate, check availability and price a booking."""
    return service.prepare_booking(
        slip_id=request.slip_id,
        date_range=request.date_range,
        nightly_rate=request.nightly_rate,
        occupant_class=request.occupant_class,
        existing=request.reservations,
        today=request.today,
    )
