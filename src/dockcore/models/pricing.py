"""Pricing result models."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PricingResult(BaseModel):
    """Price breakdown for a stay.

    Amounts are in USD cents.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "night_count": 30,
                    "nightly_rate": 2000,
                    "base_total": 60000,
                    "discount": 24000,
                    "final_total": 36000,
                    "discount_applied": True,
                }
            ]
        },
    )

    night_count: int = Field(..., ge=0, description="Nights in the stay")
    nightly_rate: int = Field(..., ge=0, description="Slip nightly rate in USD cents")
    base_total: int = Field(..., ge=0, description="Nights times rate in USD cents")
    discount: int = Field(default=0, ge=0, description="Long-stay discount in USD cents")
    final_total: int = Field(..., ge=0, description="Base total minus discount in USD cents")
    discount_applied: bool = Field(default=False, description="Whether the long-stay discount applied")

    @model_validator(mode="after")
    def _check_totals(self) -> "PricingResult":
        if self.final_total != self.base_total - self.discount:
            raise ValueError("final_total must equal base_total - discount")
        if self.discount > 0 and not self.discount_applied:
            raise ValueError("discount requires discount_applied")
        return self


class RevenueSummary(BaseModel):
    """Revenue from confirmed renter bookings."""

    model_config = ConfigDict(frozen=True)

    booking_count: int = Field(..., ge=0, description="Bookings counted")
    total_revenue: int = Field(..., ge=0, description="Revenue in USD cents")
    month: dt.date | None = Field(
        default=None,
        description="First day of the month the summary is restricted to, if any",
    )
