"""Availability endpoints for slip date conflicts.

Provides REST endpoints for:
- Checking a candidate stay against a slip's reservations
- Filtering a slip listing to slips free for a stay

Dates are in YYYY-MM-DD format. Check-out is exclusive, so a stay may
start on the day another ends.
"""

from fastapi import APIRouter, Depends

from dockapi.dependencies import get_availability_service
from dockapi.models.availability import (
    AvailabilityCheckRequest,
    AvailabilityCheckResponse,
    SlipSearchRequest,
    SlipSearchResponse,
)
from dockcore.services.availability import AvailabilityService

router = APIRouter(tags=["availability"])


@router.post(
    "/availability/check",
    summary="Check slip availability",
    description="""
Check whether a stay can be booked given the slip's existing reservations.

Only **confirmed** reservations block dates. Pending and cancelled
reservations are ignored.

**Notes:**
- Ranges are half-open: check-out on the day another stay checks in is allowed
- Returns the conflicting reservations when unavailable
""",
    response_description="Availability decision with conflicts",
    response_model=AvailabilityCheckResponse,
    responses={
        400: {"description": "Invalid date range (end must be after start)"},
    },
)
async def check_availability(
    request: AvailabilityCheckRequest,
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityCheckResponse:
    """Check a candidate stay for conflicts."""
    conflicts = service.find_conflicts(
        request.candidate,
        request.reservations,
        slip_id=request.slip_id,
    )

    return AvailabilityCheckResponse(
        candidate=request.candidate,
        is_available=not conflicts,
        nights=request.candidate.nights,
        conflicts=conflicts,
    )


@router.post(
    "/availability/slips",
    summary="Find available slips",
    description="""
Filter a list of slips to those with no confirmed reservation overlapping
the requested stay.

**Notes:**
- The order of `slip_ids` is preserved in the result
""",
    response_description="Slips available for the whole stay",
    response_model=SlipSearchResponse,
    responses={
        400: {"description": "Invalid date range (end must be after start)"},
    },
)
async def find_available_slips(
    request: SlipSearchRequest,
    service: AvailabilityService = Depends(get_availability_service),
) -> SlipSearchResponse:
    """Filter slips by availability."""
    available = service.filter_available_slips(
        request.slip_ids,
        request.candidate,
        request.reservations,
    )

    return SlipSearchResponse(
        candidate=request.candidate,
        available_slip_ids=available,
        total_slips=len(request.slip_ids),
    )
