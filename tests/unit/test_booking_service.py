"""Unit tests for BookingService.

Test categories:
- Booking date rules
- Booking quotes for renters and fee-exempt occupants
- Cancellation settlement
- Structured logging of booking operations
"""

import datetime as dt
import logging

import pytest

from dockcore.models import (
    BookingError,
    DateRange,
    ErrorCode,
    InvalidAmountError,
    OccupantClass,
    PaymentMethod,
    ReservationStatus,
    SettlementStatus,
)
from dockcore.services.booking import BookingService

TODAY = dt.date(2025, 6, 1)


class TestValidateDates:
    """Tests for validate_dates."""

    def test_today_is_allowed(self, booking_service: BookingService) -> None:
        """Checking in today is fine."""
        booking_service.validate_dates(
            DateRange.of(TODAY, TODAY + dt.timedelta(days=1)), OccupantClass.RENTER, today=TODAY
        )

    def test_past_check_in_rejected(self, booking_service: BookingService) -> None:
        """Yesterday is too late."""
        with pytest.raises(BookingError) as exc_info:
            booking_service.validate_dates(
                DateRange.of("2025-05-31", "2025-06-02"), OccupantClass.RENTER, today=TODAY
            )

        assert exc_info.value.code == ErrorCode.CHECK_IN_IN_PAST
        assert exc_info.value.details == {"check_in": "2025-05-31", "today": "2025-06-01"}

    def test_renter_thirty_nights_allowed(self, booking_service: BookingService) -> None:
        """Thirty nights is the renter maximum."""
        booking_service.validate_dates(
            DateRange.of("2025-07-01", "2025-07-31"), OccupantClass.RENTER, today=TODAY
        )

    def test_renter_over_thirty_nights_rejected(self, booking_service: BookingService) -> None:
        """Thirty-one nights is too long for a renter."""
        with pytest.raises(BookingError) as exc_info:
            booking_service.validate_dates(
                DateRange.of("2025-07-01", "2025-08-01"), OccupantClass.RENTER, today=TODAY
            )

        assert exc_info.value.code == ErrorCode.MAX_NIGHTS_EXCEEDED
        assert exc_info.value.details == {"nights": "31", "max_nights": "30"}

    def test_homeowner_has_no_stay_limit(self, booking_service: BookingService) -> None:
        """Fee-exempt occupants may book long stays."""
        booking_service.validate_dates(
            DateRange.of("2025-07-01", "2025-10-01"), OccupantClass.HOMEOWNER, today=TODAY
        )


class TestPrepareBooking:
    """Tests for prepare_booking."""

    def test_renter_thirty_night_quote(self, booking_service: BookingService) -> None:
        """Renter quote is pending, paid by card, with the long-stay discount."""
        quote = booking_service.prepare_booking(
            slip_id="slip-1",
            date_range=DateRange.of("2025-07-01", "2025-07-31"),
            nightly_rate=2000,
            occupant_class=OccupantClass.RENTER,
            existing=[],
            today=TODAY,
        )

        assert quote.pricing.final_total == 36000
        assert quote.amount_due == 36000
        assert quote.initial_status == ReservationStatus.PENDING
        assert quote.payment_method == PaymentMethod.CARD

    def test_homeowner_quote_is_free_and_confirmed(self, booking_service: BookingService) -> None:
        """Homeowner bookings are confirmed immediately and charged nothing."""
        quote = booking_service.prepare_booking(
            slip_id="slip-1",
            date_range=DateRange.of("2025-07-01", "2025-07-04"),
            nightly_rate=5000,
            occupant_class=OccupantClass.HOMEOWNER,
            existing=[],
            today=TODAY,
        )

        assert quote.pricing.final_total == 15000
        assert quote.amount_due == 0
        assert quote.initial_status == ReservationStatus.CONFIRMED
        assert quote.payment_method == PaymentMethod.EXEMPT
        assert quote.occupant_class == OccupantClass.HOMEOWNER

    def test_conflict_raises_dates_unavailable(
        self, booking_service: BookingService, make_reservation
    ) -> None:
        """A confirmed overlapping stay on the same slip blocks the booking."""
        existing = [make_reservation("2025-07-02", "2025-07-05", slip_id="slip-1")]

        with pytest.raises(BookingError) as exc_info:
            booking_service.prepare_booking(
                slip_id="slip-1",
                date_range=DateRange.of("2025-07-01", "2025-07-03"),
                nightly_rate=2000,
                occupant_class=OccupantClass.RENTER,
                existing=existing,
                today=TODAY,
            )

        assert exc_info.value.code == ErrorCode.DATES_UNAVAILABLE
        assert exc_info.value.details == {
            "slip_id": "slip-1",
            "check_in": "2025-07-01",
            "check_out": "2025-07-03",
        }

    def test_other_slip_and_pending_do_not_block(
        self, booking_service: BookingService, make_reservation
    ) -> None:
        """Only confirmed reservations on the same slip matter."""
        existing = [
            make_reservation("2025-07-01", "2025-07-03", slip_id="slip-2"),
            make_reservation("2025-07-01", "2025-07-03", status=ReservationStatus.PENDING),
        ]

        quote = booking_service.prepare_booking(
            slip_id="slip-1",
            date_range=DateRange.of("2025-07-01", "2025-07-03"),
            nightly_rate=2000,
            occupant_class=OccupantClass.RENTER,
            existing=existing,
            today=TODAY,
        )

        assert quote.amount_due == 4000

    def test_invalid_rate_rejected(self, booking_service: BookingService) -> None:
        """Negative rates never produce a quote."""
        with pytest.raises(InvalidAmountError):
            booking_service.prepare_booking(
                slip_id="slip-1",
                date_range=DateRange.of("2025-07-01", "2025-07-03"),
                nightly_rate=-1,
                occupant_class=OccupantClass.RENTER,
                existing=[],
                today=TODAY,
            )

    def test_logs_operation(
        self, booking_service: BookingService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Successful quotes are logged with structured context."""
        with caplog.at_level(logging.INFO, logger="dockcore.services.booking"):
            booking_service.prepare_booking(
                slip_id="slip-1",
                date_range=DateRange.of("2025-07-01", "2025-07-03"),
                nightly_rate=2000,
                occupant_class=OccupantClass.RENTER,
                existing=[],
                today=TODAY,
            )

        record = caplog.records[-1]
        assert "Booking operation: prepare_booking" in record.getMessage()
        assert "amount_cents=4000" in record.getMessage()
        assert record.booking_slip_id == "slip-1"  # type: ignore[attr-defined]
        assert record.booking_status == "pending"  # type: ignore[attr-defined]


class TestSettleCancellation:
    """Tests for settle_cancellation."""

    def test_renter_cancellation(self, booking_service: BookingService, make_reservation) -> None:
        """Renter cancels 5 days before a $300 stay."""
        reservation = make_reservation(
            "2025-07-20", "2025-07-23", total_cost=30000, reservation_id="res-1"
        )

        result = booking_service.settle_cancellation(reservation, dt.date(2025, 7, 15))

        assert result.refund_amount == 15000
        assert result.cancellation_fee == 15000
        assert result.settlement_status == SettlementStatus.PARTIALLY_REFUNDED

    def test_pending_reservation_can_be_cancelled(
        self, booking_service: BookingService, make_reservation
    ) -> None:
        """Unapproved bookings settle under the same policy."""
        reservation = make_reservation(
            "2025-07-20", "2025-07-23", status=ReservationStatus.PENDING, total_cost=9000
        )

        result = booking_service.settle_cancellation(reservation, "2025-07-01")

        assert result.refund_amount == 9000
        assert result.settlement_status == SettlementStatus.REFUNDED

    def test_homeowner_cancellation_is_exempt(
        self, booking_service: BookingService, make_reservation
    ) -> None:
        """Homeowners settle as exempt."""
        reservation = make_reservation(
            "2025-07-20", "2025-07-23", occupant_class=OccupantClass.HOMEOWNER
        )

        result = booking_service.settle_cancellation(reservation, "2025-07-19")

        assert result.settlement_status == SettlementStatus.EXEMPT
        assert result.refund_amount == 0
        assert result.cancellation_fee == 0

    def test_already_cancelled_rejected(
        self, booking_service: BookingService, make_reservation
    ) -> None:
        """A cancelled reservation can't be cancelled again."""
        reservation = make_reservation(
            status=ReservationStatus.CANCELLED, reservation_id="res-9"
        )

        with pytest.raises(BookingError) as exc_info:
            booking_service.settle_cancellation(reservation, "2025-06-01")

        assert exc_info.value.code == ErrorCode.RESERVATION_NOT_CANCELLABLE
        assert exc_info.value.details == {"reservation_id": "res-9", "slip_id": "slip-1"}
