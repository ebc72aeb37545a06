"""API models for booking quote endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from dockcore.models import DateRange, OccupantClass, Reservation


class BookingQuoteRequest(BaseModel):
    """A booking request to validate, check and price.

    The caller supplies the reservations already on file; nothing is
    persisted by this endpoint.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "slip_id": "slip-3",
                    "date_range": {"start": "2025-07-01", "end": "2025-07-31"},
                    "nightly_rate": 2000,
                    "occupant_class": "renter",
                    "reservations": [],
                }
            ]
        },
    )

    slip_id: str = Field(..., description="Slip being booked")
    date_range: DateRange = Field(..., description="Requested stay")
    nightly_rate: int = Field(..., description="Slip nightly rate in USD cents")
    occupant_class: OccupantClass = Field(default=OccupantClass.RENTER)
    reservations: list[Reservation] = Field(
        default_factory=list,
        description="Existing reservations for the slip",
    )
    today: dt.date | None = Field(
        default=None,
        description="Reference day for the past-date rule (defaults to server date)",
    )
