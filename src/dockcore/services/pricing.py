"""Pricing service for stay totals and revenue."""

import datetime as dt
from collections.abc import Iterable, Mapping

from dockcore.models import (
    DateRange,
    OccupantClass,
    PricingResult,
    Reservation,
    RevenueSummary,
)
from dockcore.utils.dates import same_month
from dockcore.utils.logging import get_logger
from dockcore.utils.money import percent_of, require_cents

logger = get_logger(__name__)


class PricingService:
    """Service for nightly-rate pricing.

    Renters booking exactly 30 nights get 40% off. The rule is an exact
    match: 29 or 31 nights pay full price.
    """

    # Long-stay discount
    DISCOUNT_NIGHTS = 30
    DISCOUNT_PERCENT = 40

    def compute_total(
        self,
        date_range: DateRange,
        nightly_rate: int,
        occupant_class: OccupantClass = OccupantClass.RENTER,
    ) -> PricingResult:
        """Calculate the price of a stay.

        Fee-exempt occupants are still priced (for audit) but never get the
        renter discount; use amount_due() for what is actually charged.

        Args:
            date_range: Stay to price
            nightly_rate: Slip rate in USD cents
            occupant_class: Who is booking

        Returns:
            PricingResult with breakdown

        Raises:
            InvalidAmountError: If the rate is negative or not whole cents
        """
        rate = require_cents(nightly_rate, "nightly_rate")
        occupant = OccupantClass.normalize(occupant_class)

        nights = date_range.nights
        base_total = nights * rate

        if occupant == OccupantClass.RENTER and nights == self.DISCOUNT_NIGHTS:
            # 30 * rate * 40 / 100 is always whole cents
            discount = percent_of(base_total, self.DISCOUNT_PERCENT)
            return PricingResult(
                night_count=nights,
                nightly_rate=rate,
                base_total=base_total,
                discount=discount,
                final_total=base_total - discount,
                discount_applied=True,
            )

        return PricingResult(
            night_count=nights,
            nightly_rate=rate,
            base_total=base_total,
            discount=0,
            final_total=base_total,
            discount_applied=False,
        )

    def amount_due(
        self,
        pricing: PricingResult,
        occupant_class: OccupantClass,
    ) -> int:
        """Amount to charge for a priced stay.

        Homeowners, admins and superadmins are never charged.
        """
        if OccupantClass.normalize(occupant_class).is_fee_exempt:
            return 0
        return pricing.final_total

    def calculate_revenue(
        self,
        reservations: Iterable[Reservation],
        nightly_rates: Mapping[str, int],
        month: dt.date | None = None,
    ) -> RevenueSummary:
        """Sum revenue from confirmed renter bookings.

        Revenue is nights times the slip's current nightly rate. Slips with
        no known rate contribute nothing.

        Args:
            reservations: Reservations to total
            nightly_rates: Nightly rate in cents keyed by slip ID
            month: Only count check-ins in this calendar month if given

        Returns:
            RevenueSummary with count and total

        Raises:
            InvalidAmountError: If any nightly rate is negative or not whole cents
        """
        rates = {
            slip_id: require_cents(rate, f"nightly_rates[{slip_id}]")
            for slip_id, rate in nightly_rates.items()
        }
        count = 0
        total = 0

        for reservation in reservations:
            if not reservation.is_confirmed:
                continue
            if reservation.occupant_class != OccupantClass.RENTER:
                continue
            if month is not None and not same_month(reservation.date_range.start, month):
                continue

            count += 1
            total += reservation.date_range.nights * rates.get(reservation.slip_id, 0)

        logger.debug("Revenue over %d booking(s): %d cents", count, total)

        return RevenueSummary(
            booking_count=count,
            total_revenue=total,
            month=month.replace(day=1) if month is not None else None,
        )
