"""Booking core services. All are pure and perform no I/O."""

from .availability import AvailabilityService
from .booking import BookingService
from .pricing import PricingService
from .refund_policy_service import PolicyTier, RefundPolicyService

__all__ = [
    "AvailabilityService",
    "BookingService",
    "PolicyTier",
    "PricingService",
    "RefundPolicyService",
]
