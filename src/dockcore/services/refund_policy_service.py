"""Refund policy service for cancellation settlements.

Implements the slip cancellation policy:
- Full refund (100%): Cancel 7+ days before check-in
- Partial refund (50%): Cancel 3-6 days before check-in
- Partial refund (25%): Cancel 1-2 days before check-in
- No refund (0%): Cancel on or after the check-in day

Homeowners, admins and superadmins are never charged, so their
cancellations settle as exempt with nothing refunded or retained.

All amounts are in USD cents to avoid floating-point issues.
"""

from typing import TypedDict

from dockcore.models import OccupantClass, RefundResult, SettlementStatus
from dockcore.utils.dates import DateLike, days_until
from dockcore.utils.money import format_usd, percent_of, require_cents


class PolicyTier(TypedDict):
    """One row of the cancellation schedule."""

    min_days: int | None  # None = no lower bound
    max_days: int | None  # None = no upper bound
    refund_percentage: int
    description: str


class RefundPolicyService:
    """Service for calculating refunds based on cancellation timing.

    Policy tiers (days before check-in, floored):
    - FULL (100%): 7+ days
    - HALF (50%): 3-6 days
    - QUARTER (25%): 1-2 days
    - NONE (0%): 0 days or after check-in
    """

    # Policy thresholds (days before check-in)
    FULL_REFUND_DAYS = 7  # >= 7 days = full refund
    HALF_REFUND_DAYS = 3  # >= 3 days = 50% refund
    QUARTER_REFUND_DAYS = 1  # >= 1 day = 25% refund

    # Refund percentages
    FULL_REFUND_PERCENT = 100
    HALF_REFUND_PERCENT = 50
    QUARTER_REFUND_PERCENT = 25
    NO_REFUND_PERCENT = 0

    EXEMPT_DESCRIPTION = "Free cancellation anytime"

    def compute_refund(
        self,
        check_in_date: DateLike,
        cancellation_date: DateLike,
        total_cost: int,
        occupant_class: OccupantClass = OccupantClass.RENTER,
    ) -> RefundResult:
        """Calculate the settlement for a cancelled reservation.

        Args:
            check_in_date: Reservation check-in date
            cancellation_date: When the cancellation was requested
            total_cost: Amount the occupant paid in USD cents
            occupant_class: Who booked the slip

        Returns:
            RefundResult with refund, fee and settlement status

        Raises:
            InvalidAmountError: If total_cost is negative or not whole cents
        """
        total = require_cents(total_cost, "total_cost")
        occupant = OccupantClass.normalize(occupant_class)

        # Floored: any time on the cancellation day counts as that day
        days = days_until(check_in_date, cancellation_date)

        if occupant.is_fee_exempt:
            return RefundResult(
                refund_amount=0,
                cancellation_fee=0,
                settlement_status=SettlementStatus.EXEMPT,
                days_until_check_in=days,
                refund_percentage=self.NO_REFUND_PERCENT,
                description=f"{self.EXEMPT_DESCRIPTION} ({occupant.value} bookings are not charged)",
            )

        percentage = self.refund_percentage_for(days)
        refund_amount = percent_of(total, percentage)
        # Fee is the remainder so refund + fee == total exactly
        cancellation_fee = total - refund_amount

        return RefundResult(
            refund_amount=refund_amount,
            cancellation_fee=cancellation_fee,
            settlement_status=self._settlement_status(refund_amount, total, percentage),
            days_until_check_in=days,
            refund_percentage=percentage,
            description=self._describe(days, percentage, refund_amount, cancellation_fee),
        )

    def refund_percentage_for(self, days_until_check_in: int) -> int:
        """Refund percentage for a floored day count. First matching tier wins."""
        if days_until_check_in >= self.FULL_REFUND_DAYS:
            return self.FULL_REFUND_PERCENT
        if days_until_check_in >= self.HALF_REFUND_DAYS:
            return self.HALF_REFUND_PERCENT
        if days_until_check_in >= self.QUARTER_REFUND_DAYS:
            return self.QUARTER_REFUND_PERCENT
        return self.NO_REFUND_PERCENT

    def get_policy_tiers(self) -> list[PolicyTier]:
        """Get the cancellation schedule, most generous tier first."""
        return [
            PolicyTier(
                min_days=self.FULL_REFUND_DAYS,
                max_days=None,
                refund_percentage=self.FULL_REFUND_PERCENT,
                description=f"Free cancellation {self.FULL_REFUND_DAYS}+ days before check-in",
            ),
            PolicyTier(
                min_days=self.HALF_REFUND_DAYS,
                max_days=self.FULL_REFUND_DAYS - 1,
                refund_percentage=self.HALF_REFUND_PERCENT,
                description=(
                    f"{self.HALF_REFUND_PERCENT}% refund {self.HALF_REFUND_DAYS}-"
                    f"{self.FULL_REFUND_DAYS - 1} days before check-in"
                ),
            ),
            PolicyTier(
                min_days=self.QUARTER_REFUND_DAYS,
                max_days=self.HALF_REFUND_DAYS - 1,
                refund_percentage=self.QUARTER_REFUND_PERCENT,
                description=(
                    f"{self.QUARTER_REFUND_PERCENT}% refund {self.QUARTER_REFUND_DAYS}-"
                    f"{self.HALF_REFUND_DAYS - 1} days before check-in"
                ),
            ),
            PolicyTier(
                min_days=None,
                max_days=self.QUARTER_REFUND_DAYS - 1,
                refund_percentage=self.NO_REFUND_PERCENT,
                description="No refund within 24 hours of check-in",
            ),
        ]

    def get_policy_description(self) -> str:
        """Get human-readable description of the cancellation policy.

        Returns:
            Policy description text
        """
        lines = ["Cancellation Policy:"]
        lines.extend(f"• {tier['description']}" for tier in self.get_policy_tiers())
        lines.append(f"• Homeowners and staff: {self.EXEMPT_DESCRIPTION}")
        return "\n".join(lines)

    def _settlement_status(
        self,
        refund_amount: int,
        total_cost: int,
        percentage: int,
    ) -> SettlementStatus:
        # A zero-cost booking is "refunded" only in the full-refund tier
        if refund_amount == total_cost and percentage == self.FULL_REFUND_PERCENT:
            return SettlementStatus.REFUNDED
        if refund_amount > 0:
            return SettlementStatus.PARTIALLY_REFUNDED
        return SettlementStatus.NON_REFUNDABLE

    def _describe(
        self,
        days: int,
        percentage: int,
        refund_amount: int,
        cancellation_fee: int,
    ) -> str:
        if days < 0:
            timing = "Cancelled after check-in date"
        elif days == 0:
            timing = "Cancelled on the check-in date"
        else:
            timing = f"Cancelled {days} day{'s' if days != 1 else ''} before check-in"

        if percentage == self.FULL_REFUND_PERCENT:
            label = "Full refund (100%)"
        elif percentage == self.NO_REFUND_PERCENT:
            label = "No refund (0%)"
        else:
            label = f"{percentage}% refund"

        text = f"{label}: {timing}. Refund: {format_usd(refund_amount)}"
        if cancellation_fee > 0:
            text += f" (Cancellation fee: {format_usd(cancellation_fee)})"
        return text
