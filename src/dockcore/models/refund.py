"""Cancellation settlement model."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import SettlementStatus


class RefundResult(BaseModel):
    """Result of applying the cancellation policy.

    For paying occupants ``refund_amount + cancellation_fee`` equals the
    original total cost. Fee-exempt occupants get zero on both sides.
    Amounts are in USD cents.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "refund_amount": 15000,
                    "cancellation_fee": 15000,
                    "settlement_status": "partially_refunded",
                    "days_until_check_in": 5,
                    "refund_percentage": 50,
                    "description": "50% refund: Cancelled 5 days before check-in. "
                    "Refund: $150.00 (Cancellation fee: $150.00)",
                }
            ]
        },
    )

    refund_amount: int = Field(..., ge=0, description="Amount returned in USD cents")
    cancellation_fee: int = Field(..., ge=0, description="Amount retained in USD cents")
    settlement_status: SettlementStatus
    days_until_check_in: int = Field(
        ..., description="Whole days from cancellation to check-in (negative if after)"
    )
    refund_percentage: int = Field(..., ge=0, le=100, description="Tier refund percentage")
    description: str = Field(default="", description="Human-readable explanation")
