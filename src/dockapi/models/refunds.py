"""API models for cancellation refund endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from dockcore.models import OccupantClass


class RefundCalculationRequest(BaseModel):
    """Inputs for a cancellation settlement."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "check_in": "2025-07-15",
                    "cancellation_date": "2025-07-10",
                    "total_cost": 30000,
                    "occupant_class": "renter",
                }
            ]
        },
    )

    check_in: dt.date = Field(..., description="Reservation check-in date")
    cancellation_date: dt.datetime | dt.date | None = Field(
        default=None,
        description="When the guest cancelled (defaults to today)",
    )
    total_cost: int = Field(..., description="Amount paid in USD cents")
    occupant_class: OccupantClass = Field(default=OccupantClass.RENTER)


class PolicyTierResponse(BaseModel):
    """One row of the cancellation schedule."""

    min_days: int | None = Field(..., description="Lowest day count in the tier (None = unbounded)")
    max_days: int | None = Field(..., description="Highest day count in the tier (None = unbounded)")
    refund_percentage: int = Field(..., ge=0, le=100)
    description: str


class RefundPolicyResponse(BaseModel):
    """The cancellation policy in structured and text form."""

    tiers: list[PolicyTierResponse]
    exempt_classes: list[OccupantClass] = Field(
        ..., description="Occupant classes that are never charged"
    )
    description: str
