"""Cancellation refund endpoints.

Provides REST endpoints for:
- Calculating the settlement for a cancellation
- Describing the cancellation policy

All amounts are in USD cents.
"""

import datetime as dt

from fastapi import APIRouter, Depends

from dockapi.dependencies import get_refund_policy_service
from dockapi.models.refunds import (
    PolicyTierResponse,
    RefundCalculationRequest,
    RefundPolicyResponse,
)
from dockcore.models import OccupantClass, RefundResult
from dockcore.services.refund_policy_service import RefundPolicyService

router = APIRouter(tags=["refunds"])


@router.post(
    "/refunds/calculate",
    summary="Calculate cancellation refund",
    description="""
Apply the cancellation policy to a reservation.

| Days before check-in | Refund |
|---|---|
| 7 or more | 100% |
| 3-6 | 50% |
| 1-2 | 25% |
| 0 or after | none |

Homeowners, admins and superadmins settle as `exempt` with nothing refunded
or retained. For everyone else `refund_amount + cancellation_fee == total_cost`.
""",
    response_description="Refund, fee and settlement status",
    response_model=RefundResult,
    responses={
        400: {"description": "Negative total cost"},
    },
)
async def calculate_refund(
    request: RefundCalculationRequest,
    service: RefundPolicyService = Depends(get_refund_policy_service),
) -> RefundResult:
    """Calculate the refund for a cancellation."""
    cancelled_on = request.cancellation_date or dt.date.today()
    return service.compute_refund(
        check_in_date=request.check_in,
        cancellation_date=cancelled_on,
        total_cost=request.total_cost,
        occupant_class=request.occupant_class,
    )


@router.get(
    "/refunds/policy",
    summary="Get cancellation policy",
    response_description="Policy tiers and description",
    response_model=RefundPolicyResponse,
)
async def get_refund_policy(
    service: RefundPolicyService = Depends(get_refund_policy_service),
) -> RefundPolicyResponse:
    """Describe the cancellation policy."""
    return RefundPolicyResponse(
        tiers=[PolicyTierResponse(**tier) for tier in service.get_policy_tiers()],
        exempt_classes=[c for c in OccupantClass if c.is_fee_exempt],
        description=service.get_policy_description(),
    )
