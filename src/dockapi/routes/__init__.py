"""API routes package.

Routers are organized by domain:

- health: Health check endpoint
- availability: Slip date conflict checks and slip search
- pricing: Stay pricing and revenue
- bookings: Booking quotes
- refunds: Cancellation refunds and policy

All routers are registered in main.py with /api prefix.
"""

from dockapi.routes.availability import router as availability_router
from dockapi.routes.bookings import router as bookings_router
from dockapi.routes.health import router as health_router
from dockapi.routes.pricing import router as pricing_router
from dockapi.routes.refunds import router as refunds_router

__all__ = [
    "availability_router",
    "bookings_router",
    "health_router",
    "pricing_router",
    "refunds_router",
]
