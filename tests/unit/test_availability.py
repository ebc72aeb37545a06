"""Unit tests for AvailabilityService.

Test categories:
- Half-open overlap semantics
- Which reservation statuses block dates
- Slip filtering and active booking checks
"""

import datetime as dt

from dockcore.models import DateRange, ReservationStatus
from dockcore.services.availability import AvailabilityService


class TestOverlaps:
    """Tests for the overlap predicate."""

    def test_overlapping_ranges(self, availability_service: AvailabilityService) -> None:
        """Ranges sharing a night overlap."""
        first = DateRange.of("2025-06-22", "2025-06-24")
        second = DateRange.of("2025-06-23", "2025-06-25")

        assert availability_service.overlaps(first, second)
        assert availability_service.overlaps(second, first)

    def test_checkout_day_is_free(self, availability_service: AvailabilityService) -> None:
        """A stay may start on the day another ends."""
        first = DateRange.of("2025-06-22", "2025-06-24")
        second = DateRange.of("2025-06-24", "2025-06-26")

        assert not availability_service.overlaps(first, second)
        assert not availability_service.overlaps(second, first)

    def test_disjoint_ranges(self, availability_service: AvailabilityService) -> None:
        """Ranges with a gap do not overlap."""
        assert not availability_service.overlaps(
            DateRange.of("2025-06-01", "2025-06-03"),
            DateRange.of("2025-06-10", "2025-06-12"),
        )


class TestIsAvailable:
    """Tests for is_available."""

    def test_no_reservations_is_available(self, availability_service: AvailabilityService) -> None:
        """An empty reservation list never blocks."""
        assert availability_service.is_available(DateRange.of("2025-06-22", "2025-06-24"), [])

    def test_adjacent_confirmed_stay_does_not_block(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Booking from the previous guest's check-out day is allowed."""
        existing = [make_reservation("2025-06-22", "2025-06-24")]

        assert availability_service.is_available(DateRange.of("2025-06-24", "2025-06-26"), existing)

    def test_overlapping_confirmed_stay_blocks(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """A confirmed reservation sharing a night blocks the stay."""
        existing = [make_reservation("2025-06-22", "2025-06-24")]

        assert not availability_service.is_available(
            DateRange.of("2025-06-23", "2025-06-25"), existing
        )

    def test_pending_reservation_does_not_block(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Pending reservations are not yet holding the slip."""
        existing = [make_reservation(status=ReservationStatus.PENDING)]

        assert availability_service.is_available(DateRange.of("2025-06-22", "2025-06-24"), existing)

    def test_cancelled_reservation_does_not_block(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Cancelled reservations release their dates."""
        existing = [make_reservation(status=ReservationStatus.CANCELLED)]

        assert availability_service.is_available(DateRange.of("2025-06-22", "2025-06-24"), existing)

    def test_other_slip_ignored_when_slip_given(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Reservations on another slip are skipped when a slip is named."""
        existing = [make_reservation(slip_id="slip-2")]

        assert availability_service.is_available(
            DateRange.of("2025-06-22", "2025-06-24"), existing, slip_id="slip-1"
        )

    def test_agrees_with_find_conflicts(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """is_available is exactly 'no conflicts found'."""
        existing = [
            make_reservation("2025-06-01", "2025-06-05"),
            make_reservation("2025-06-10", "2025-06-12", status=ReservationStatus.PENDING),
            make_reservation("2025-06-20", "2025-06-25"),
        ]
        candidates = [
            DateRange.of("2025-06-04", "2025-06-06"),
            DateRange.of("2025-06-05", "2025-06-20"),
            DateRange.of("2025-06-10", "2025-06-12"),
            DateRange.of("2025-06-24", "2025-06-30"),
        ]

        for candidate in candidates:
            expected = not availability_service.find_conflicts(candidate, existing)
            assert availability_service.is_available(candidate, existing) == expected


class TestFindConflicts:
    """Tests for find_conflicts."""

    def test_returns_only_confirmed_overlaps(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Only overlapping confirmed reservations are reported, in order."""
        blocking_a = make_reservation("2025-06-20", "2025-06-23", reservation_id="a")
        pending = make_reservation(
            "2025-06-22", "2025-06-23", status=ReservationStatus.PENDING, reservation_id="p"
        )
        blocking_b = make_reservation("2025-06-24", "2025-06-28", reservation_id="b")
        outside = make_reservation("2025-06-28", "2025-06-30", reservation_id="o")

        conflicts = availability_service.find_conflicts(
            DateRange.of("2025-06-22", "2025-06-25"),
            [blocking_a, pending, blocking_b, outside],
        )

        assert [r.reservation_id for r in conflicts] == ["a", "b"]


class TestFilterAvailableSlips:
    """Tests for filter_available_slips."""

    def test_filters_booked_slips_preserving_order(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Slips with a confirmed overlapping stay are removed."""
        existing = [
            make_reservation("2025-06-22", "2025-06-24", slip_id="slip-2"),
            make_reservation("2025-06-22", "2025-06-24", slip_id="slip-4",
                             status=ReservationStatus.PENDING),
            make_reservation("2025-06-24", "2025-06-26", slip_id="slip-3"),
        ]

        available = availability_service.filter_available_slips(
            ["slip-4", "slip-3", "slip-2", "slip-1"],
            DateRange.of("2025-06-22", "2025-06-24"),
            existing,
        )

        assert available == ["slip-4", "slip-3", "slip-1"]

    def test_empty_listing(self, availability_service: AvailabilityService) -> None:
        """No slips in, no slips out."""
        assert availability_service.filter_available_slips(
            [], DateRange.of("2025-06-22", "2025-06-24"), []
        ) == []


class TestHasActiveBookings:
    """Tests for has_active_bookings."""

    def test_future_confirmed_booking_is_active(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """A confirmed stay that has not checked out keeps the slip busy."""
        existing = [make_reservation("2025-07-01", "2025-07-05")]

        assert availability_service.has_active_bookings("slip-1", existing, today="2025-06-15")

    def test_checkout_today_is_active(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """A stay checking out today still counts."""
        existing = [make_reservation("2025-06-10", "2025-06-15")]

        assert availability_service.has_active_bookings(
            "slip-1", existing, today=dt.date(2025, 6, 15)
        )

    def test_past_and_unconfirmed_are_not_active(
        self, availability_service: AvailabilityService, make_reservation
    ) -> None:
        """Finished, pending and other-slip stays are ignored."""
        existing = [
            make_reservation("2025-05-01", "2025-05-03"),
            make_reservation("2025-07-01", "2025-07-05", status=ReservationStatus.PENDING),
            make_reservation("2025-07-01", "2025-07-05", slip_id="slip-9"),
        ]

        assert not availability_service.has_active_bookings("slip-1", existing, today="2025-06-15")
