"""Pricing endpoints for stay totals and revenue.

Provides REST endpoints for:
- Price calculation for a stay, including the 30-night renter discount
- Revenue totals over confirmed renter bookings

All amounts are in USD cents (e.g., 2000 = $20.00).
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from dockapi.dependencies import get_pricing_service
from dockapi.models.pricing import PricingQuoteResponse, RevenueRequest, RevenueResponse
from dockcore.models import DateRange, OccupantClass
from dockcore.services.pricing import PricingService

router = APIRouter(tags=["pricing"])


@router.get(
    "/pricing/calculate",
    summary="Calculate stay price",
    description="""
Calculate the total price for a stay on a slip.

Renters booking **exactly** 30 nights get 40% off. Homeowners, admins and
superadmins are priced for reference but `amount_due` is always 0 for them.

**Notes:**
- Amounts are in USD cents
- check_out is exclusive (last night is check_out - 1 day)
""",
    response_description="Pricing breakdown and amount due",
    response_model=PricingQuoteResponse,
    responses={
        200: {
            "description": "Price calculated successfully",
            "content": {
                "application/json": {
                    "example": {
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
                }
            },
        },
        400: {"description": "Invalid date range or negative rate"},
    },
)
async def calculate_price(
    check_in: dt.date = Query(
        ...,
        description="Check-in date (YYYY-MM-DD)",
        examples=["2025-07-01"],
    ),
    check_out: dt.date = Query(
        ...,
        description="Check-out date (YYYY-MM-DD)",
        examples=["2025-07-31"],
    ),
    nightly_rate: int = Query(
        ...,
        description="Slip nightly rate in USD cents",
        examples=[2000],
    ),
    occupant_class: OccupantClass = Query(
        default=OccupantClass.RENTER,
        description="Who is booking",
    ),
    service: PricingService = Depends(get_pricing_service),
) -> PricingQuoteResponse:
    """Calculate price for a date range."""
    date_range = DateRange.of(check_in, check_out)
    pricing = service.compute_total(date_range, nightly_rate, occupant_class)

    return PricingQuoteResponse(
        date_range=date_range,
        occupant_class=occupant_class,
        pricing=pricing,
        amount_due=service.amount_due(pricing, occupant_class),
    )


@router.post(
    "/pricing/revenue",
    summary="Calculate revenue",
    description="""
Total revenue from confirmed renter bookings.

Revenue is nights times each slip's nightly rate. Pass `month` to restrict
to bookings checking in that calendar month.
""",
    response_description="Booking count and revenue in cents",
    response_model=RevenueResponse,
    responses={
        400: {"description": "Negative or fractional nightly rate"},
    },
)
async def calculate_revenue(
    request: RevenueRequest,
    service: PricingService = Depends(get_pricing_service),
) -> RevenueResponse:
    """Sum revenue over the supplied reservations."""
    summary = service.calculate_revenue(
        request.reservations,
        request.nightly_rates,
        month=request.month,
    )
    return RevenueResponse(**summary.model_dump())
