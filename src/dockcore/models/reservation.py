"""Reservation model as read by the booking core."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .date_range import DateRange
from .enums import OccupantClass, ReservationStatus


class Reservation(BaseModel):
    """An existing booking of a slip.

    Created and transitioned by the booking-management layer; the core
    only reads lists of these. Amounts are in USD cents.
    """

    model_config = ConfigDict(frozen=True)

    slip_id: str = Field(..., description="Identifier of the booked slip")
    date_range: DateRange = Field(..., description="Booked stay")
    status: ReservationStatus = Field(..., description="Approval status")
    occupant_class: OccupantClass = Field(
        default=OccupantClass.RENTER,
        description="Who booked the slip",
    )
    reservation_id: str | None = Field(default=None, description="Booking ID if persisted")
    total_cost: int = Field(default=0, ge=0, description="Amount charged in USD cents")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: object) -> object:
        if isinstance(value, str):
            return ReservationStatus(value)
        return value

    @field_validator("occupant_class", mode="before")
    @classmethod
    def _normalize_occupant(cls, value: object) -> OccupantClass:
        return OccupantClass.normalize(value)  # type: ignore[arg-type]

    @property
    def is_confirmed(self) -> bool:
        """Whether this reservation blocks its dates."""
        return self.status == ReservationStatus.CONFIRMED
