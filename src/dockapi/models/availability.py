"""API models for availability endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from dockcore.models import DateRange, Reservation

_EXAMPLE_RESERVATION = {
    "slip_id": "slip-3",
    "date_range": {"start": "2025-06-22", "end": "2025-06-24"},
    "status": "confirmed",
    "occupant_class": "renter",
}


class AvailabilityCheckRequest(BaseModel):
    """Candidate stay plus the reservations to check it against."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "slip_id": "slip-3",
                    "candidate": {"start": "2025-06-24", "end": "2025-06-26"},
                    "reservations": [_EXAMPLE_RESERVATION],
                }
            ]
        },
    )

    candidate: DateRange = Field(..., description="Requested stay")
    reservations: list[Reservation] = Field(
        default_factory=list,
        description="Existing reservations for the slip",
    )
    slip_id: str | None = Field(
        default=None,
        description="Only consider reservations for this slip",
    )


class AvailabilityCheckResponse(BaseModel):
    """Availability decision with the reservations that block it."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "candidate": {"start": "2025-06-23", "end": "2025-06-25"},
                    "is_available": False,
                    "nights": 2,
                    "conflicts": [_EXAMPLE_RESERVATION],
                }
            ]
        },
    )

    candidate: DateRange
    is_available: bool = Field(..., description="True if no confirmed reservation overlaps")
    nights: int = Field(..., ge=1, description="Nights in the candidate stay")
    conflicts: list[Reservation] = Field(
        default_factory=list,
        description="Confirmed reservations overlapping the candidate",
    )


class SlipSearchRequest(BaseModel):
    """Slips to filter by availability for a stay."""

    candidate: DateRange = Field(..., description="Requested stay")
    slip_ids: list[str] = Field(..., description="Slips to consider, in display order")
    reservations: list[Reservation] = Field(
        default_factory=list,
        description="Reservations across all slips",
    )


class SlipSearchResponse(BaseModel):
    """Slips free for the whole requested stay."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "candidate": {"start": "2025-06-23", "end": "2025-06-25"},
                    "available_slip_ids": ["slip-1", "slip-2"],
                    "total_slips": 3,
                }
            ]
        },
    )

    candidate: DateRange
    available_slip_ids: list[str] = Field(..., description="Available slips, order preserved")
    total_slips: int = Field(..., ge=0, description="Number of slips considered")
