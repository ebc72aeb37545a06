"""API models for pricing endpoints.

All amounts are in USD cents (e.g., 2000 = $20.00).
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from dockcore.models import DateRange, OccupantClass, PricingResult, Reservation, RevenueSummary


class PricingQuoteResponse(BaseModel):
    """Price of a stay together with the amount actually charged.

    ``pricing`` is computed for every occupant class; ``amount_due`` is
    zero for fee-exempt classes.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "date_range": {"start": "2025-07-01", "end": "2025-07-31"},
                    "occupant_class": "renter",
                    "pricing": {
                        "night_count": 30,
                        "nightly_rate": 2000,
                        "base_total": 60000,
                        "discount": 24000,
                        "final_total": 36000,
                        "discount_applied": True,
                    },
                    "amount_due": 36000,
                    "currency": "USD",
                }
            ]
        },
    )

    date_range: DateRange
    occupant_class: OccupantClass
    pricing: PricingResult
    amount_due: int = Field(..., ge=0, description="Amount to charge in USD cents")
    currency: str = Field(default="USD", description="Currency code (always USD)")


class RevenueRequest(BaseModel):
    """Reservations and slip rates to total."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "reservations": [
                        {
                            "slip_id": "slip-1",
                            "date_range": {"start": "2025-06-22", "end": "2025-06-24"},
                            "status": "confirmed",
                            "occupant_class": "renter",
                        }
                    ],
                    "nightly_rates": {"slip-1": 2000},
                    "month": "2025-06-01",
                }
            ]
        },
    )

    reservations: list[Reservation] = Field(default_factory=list)
    nightly_rates: dict[str, int] = Field(
        default_factory=dict,
        description="Nightly rate in USD cents keyed by slip ID",
    )
    month: dt.date | None = Field(
        default=None,
        description="Any date in the month to restrict to (by check-in)",
    )


class RevenueResponse(RevenueSummary):
    """Revenue summary with currency."""

    currency: str = Field(default="USD", description="Currency code (always USD)")
