"""Pytest configuration and fixtures for the dock slip booking tests.

This module provides reusable fixtures for testing:
- Service instances for the booking core
- A reservation factory for building slip bookings
- A FastAPI test client
"""

import datetime as dt
import os
from typing import Any, Callable, Generator

import pytest
from fastapi.testclient import TestClient

# === Environment Setup ===

# Set environment variables for testing before the app is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dockcore.models import DateRange, OccupantClass, Reservation, ReservationStatus  # noqa: E402
from dockcore.services import (  # noqa: E402
    AvailabilityService,
    BookingService,
    PricingService,
    RefundPolicyService,
)

ReservationFactory = Callable[..., Reservation]


# === Service Fixtures ===


@pytest.fixture
def availability_service() -> AvailabilityService:
    """Create an AvailabilityService."""
    return AvailabilityService()


@pytest.fixture
def pricing_service() -> PricingService:
    """Create a PricingService."""
    return PricingService()


@pytest.fixture
def refund_policy_service() -> RefundPolicyService:
    """Create a RefundPolicyService."""
    return RefundPolicyService()


@pytest.fixture
def booking_service(
    availability_service: AvailabilityService,
    pricing_service: PricingService,
    refund_policy_service: RefundPolicyService,
) -> BookingService:
    """Create a BookingService wired to real collaborators."""
    return BookingService(
        availability=availability_service,
        pricing=pricing_service,
        refund_policy=refund_policy_service,
    )


# === Sample Data Fixtures ===


@pytest.fixture
def make_reservation() -> ReservationFactory:
    """Factory for reservations with sensible defaults.

    Dates may be given as ``date`` objects or ISO strings.
    """

    def _make(
        start: dt.date | str = "2025-06-22",
        end: dt.date | str = "2025-06-24",
        *,
        slip_id: str = "slip-1",
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        occupant_class: OccupantClass = OccupantClass.RENTER,
        total_cost: int = 0,
        reservation_id: str | None = None,
    ) -> Reservation:
        return Reservation(
            slip_id=slip_id,
            date_range=DateRange.of(start, end),
            status=status,
            occupant_class=occupant_class,
            total_cost=total_cost,
            reservation_id=reservation_id,
        )

    return _make


@pytest.fixture
def reservation_payload() -> Callable[..., dict[str, Any]]:
    """Factory for reservation JSON bodies as API clients send them."""

    def _payload(
        start: str = "2025-06-22",
        end: str = "2025-06-24",
        *,
        slip_id: str = "slip-1",
        status: str = "confirmed",
        occupant_class: str = "renter",
    ) -> dict[str, Any]:
        return {
            "slip_id": slip_id,
            "date_range": {"start": start, "end": end},
            "status": status,
            "occupant_class": occupant_class,
        }

    return _payload


# === API Fixtures ===


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the API with fresh service instances."""
    from dockapi.dependencies import reset_services
    from dockapi.main import app

    reset_services()
    yield TestClient(app)
    reset_services()
