"""FastAPI dependency injection providers for booking core services.

Services are stateless, so each provider caches a single instance with
@lru_cache.

Usage in routes:
    from dockapi.dependencies import get_availability_service

    @router.post("/availability/check")
    async def check_availability(
        availability: AvailabilityService = Depends(get_availability_service),
    ):
        ...

Service Dependency Graph:
    BookingService
        ├── AvailabilityService
        ├── PricingService
        └── RefundPolicyService

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from dockcore.services.availability import AvailabilityService
from dockcore.services.booking import BookingService
from dockcore.services.pricing import PricingService
from dockcore.services.refund_policy_service import RefundPolicyService


@lru_cache
def get_availability_service() -> AvailabilityService:
    """Get cached AvailabilityService instance."""
    return AvailabilityService()


@lru_cache
def get_pricing_service() -> PricingService:
    """Get cached PricingService instance."""
    return PricingService()


@lru_cache
def get_refund_policy_service() -> RefundPolicyService:
    """Get cached RefundPolicyService instance."""
    return RefundPolicyService()


@lru_cache
def get_booking_service() -> BookingService:
    """Get cached BookingService instance.

    Returns:
        BookingService wired to the other cached services.
    """
    return BookingService(
        availability=get_availability_service(),
        pricing=get_pricing_service(),
        refund_policy=get_refund_policy_service(),
    )


def reset_services() -> None:
    """Clear all cached service instances."""
    get_availability_service.cache_clear()
    get_pricing_service.cache_clear()
    get_refund_policy_service.cache_clear()
    get_booking_service.cache_clear()
