"""API-specific request/response models.

Domain models (DateRange, Reservation, PricingResult, RefundResult, ...)
are in dockcore.models and are reused here where appropriate.

Modules:
- common: Error response wrappers and validation error formatting
- availability: Availability check and slip search models
- pricing: Pricing quote and revenue models
- bookings: Booking quote request model
- refunds: Refund calculation and policy models
"""

__all__: list[str] = []
