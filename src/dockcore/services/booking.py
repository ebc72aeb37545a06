"""Booking service composing availability, pricing and refund policy.

Nothing here touches storage. The caller fetches the slip's reservations,
calls prepare_booking() and persists the returned quote inside whatever
transaction guards its read-check-write.
"""

import datetime as dt
from collections.abc import Iterable
from typing import TYPE_CHECKING

from dockcore.models import (
    BookingError,
    BookingQuote,
    DateRange,
    ErrorCode,
    OccupantClass,
    PaymentMethod,
    RefundResult,
    Reservation,
    ReservationStatus,
)
from dockcore.utils.dates import DateLike, to_day
from dockcore.utils.logging import get_logger, log_booking_operation

if TYPE_CHECKING:
    from .availability import AvailabilityService
    from .pricing import PricingService
    from .refund_policy_service import RefundPolicyService

logger = get_logger(__name__)


class BookingService:
    """Service for booking and cancellation decisions."""

    # Longest stay a renter may book in one reservation
    RENTER_MAX_NIGHTS = 30

    def __init__(
        self,
        availability: "AvailabilityService",
        pricing: "PricingService",
        refund_policy: "RefundPolicyService",
    ) -> None:
        """Initialize booking service.

        Args:
            availability: Availability service instance
            pricing: Pricing service instance
            refund_policy: Refund policy service instance
        """
        self.availability = availability
        self.pricing = pricing
        self.refund_policy = refund_policy

    def validate_dates(
        self,
        date_range: DateRange,
        occupant_class: OccupantClass,
        today: DateLike | None = None,
    ) -> None:
        """Check booking rules for a requested stay.

        Args:
            date_range: Requested stay
            occupant_class: Who is booking
            today: Reference day (defaults to the current date)

        Raises:
            BookingError: CHECK_IN_IN_PAST or MAX_NIGHTS_EXCEEDED
        """
        reference = to_day(today) if today is not None else dt.date.today()

        if date_range.start < reference:
            raise BookingError(
                ErrorCode.CHECK_IN_IN_PAST,
                {"check_in": date_range.start.isoformat(), "today": reference.isoformat()},
            )

        occupant = OccupantClass.normalize(occupant_class)
        if occupant == OccupantClass.RENTER and date_range.nights > self.RENTER_MAX_NIGHTS:
            raise BookingError(
                ErrorCode.MAX_NIGHTS_EXCEEDED,
                {"nights": str(date_range.nights), "max_nights": str(self.RENTER_MAX_NIGHTS)},
            )

    def prepare_booking(
        self,
        slip_id: str,
        date_range: DateRange,
        nightly_rate: int,
        occupant_class: OccupantClass,
        existing: Iterable[Reservation],
        today: DateLike | None = None,
    ) -> BookingQuote:
        """Validate, check availability and price a booking request.

        Fee-exempt occupants are confirmed immediately and charged nothing.
        Renter bookings start pending until approved.

        Args:
            slip_id: Slip being booked
            date_range: Requested stay
            nightly_rate: Slip rate in USD cents
            occupant_class: Who is booking
            existing: Reservations already on file (any slip)
            today: Reference day for the past-date rule

        Returns:
            BookingQuote ready to persist and charge

        Raises:
            BookingError: If a booking rule fails or the dates are taken
            InvalidAmountError: If the nightly rate is invalid
        """
        occupant = OccupantClass.normalize(occupant_class)
        self.validate_dates(date_range, occupant, today)

        conflicts = self.availability.find_conflicts(date_range, existing, slip_id=slip_id)
        if conflicts:
            log_booking_operation(
                logger,
                "prepare_booking",
                slip_id=slip_id,
                error="dates unavailable",
                check_in=date_range.start.isoformat(),
                check_out=date_range.end.isoformat(),
                conflicts=len(conflicts),
            )
            raise BookingError(
                ErrorCode.DATES_UNAVAILABLE,
                {
                    "slip_id": slip_id,
                    "check_in": date_range.start.isoformat(),
                    "check_out": date_range.end.isoformat(),
                },
            )

        pricing = self.pricing.compute_total(date_range, nightly_rate, occupant)
        amount_due = self.pricing.amount_due(pricing, occupant)

        if occupant.is_fee_exempt:
            initial_status = ReservationStatus.CONFIRMED
            payment_method = PaymentMethod.EXEMPT
        else:
            initial_status = ReservationStatus.PENDING
            payment_method = PaymentMethod.CARD

        log_booking_operation(
            logger,
            "prepare_booking",
            slip_id=slip_id,
            amount_cents=amount_due,
            status=initial_status.value,
            nights=pricing.night_count,
            discount_applied=pricing.discount_applied,
        )

        return BookingQuote(
            slip_id=slip_id,
            date_range=date_range,
            occupant_class=occupant,
            pricing=pricing,
            amount_due=amount_due,
            initial_status=initial_status,
            payment_method=payment_method,
        )

    def settle_cancellation(
        self,
        reservation: Reservation,
        cancellation_date: DateLike | None = None,
    ) -> RefundResult:
        """Work out the refund for cancelling a reservation.

        Args:
            reservation: Reservation being cancelled
            cancellation_date: When the guest cancelled (defaults to today)

        Returns:
            RefundResult to pass to the payment processor

        Raises:
            BookingError: RESERVATION_NOT_CANCELLABLE if already cancelled
        """
        if reservation.status == ReservationStatus.CANCELLED:
            raise BookingError(
                ErrorCode.RESERVATION_NOT_CANCELLABLE,
                {"reservation_id": reservation.reservation_id or "", "slip_id": reservation.slip_id},
            )

        cancelled_on = to_day(cancellation_date) if cancellation_date is not None else dt.date.today()
        result = self.refund_policy.compute_refund(
            check_in_date=reservation.date_range.start,
            cancellation_date=cancelled_on,
            total_cost=reservation.total_cost,
            occupant_class=reservation.occupant_class,
        )

        log_booking_operation(
            logger,
            "settle_cancellation",
            slip_id=reservation.slip_id,
            reservation_id=reservation.reservation_id,
            amount_cents=result.refund_amount,
            status=result.settlement_status.value,
            cancellation_fee=result.cancellation_fee,
            days_until_check_in=result.days_until_check_in,
        )

        return result
