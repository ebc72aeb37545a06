"""FastAPI application for the dock slip booking core.

This package provides REST endpoints for:
- Health checks
- Availability checks and slip search
- Pricing and revenue
- Booking quotes
- Cancellation refunds

Authentication, persistence and payment capture belong to the platform
services that call these endpoints.
"""

import os
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from dockapi.exceptions import register_exception_handlers
from dockapi.middleware.correlation import CorrelationIdMiddleware
from dockapi.routes import (
    availability_router,
    bookings_router,
    health_router,
    pricing_router,
    refunds_router,
)
from dockcore import __version__
from dockcore.utils.logging import configure_logging, get_logger

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Dock Slip Booking API",
    description="Availability, pricing and cancellation refunds for dock slips",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.include_router(health_router, prefix="/api")
app.include_router(availability_router, prefix="/api")
app.include_router(pricing_router, prefix="/api")
app.include_router(bookings_router, prefix="/api")
app.include_router(refunds_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Root health check endpoint at /api/ping."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "dock-booking-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    logger.info("Starting booking API on %s:%d", host, port)
    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run("dockapi.main:app", host=host, port=port, reload=True, reload_dirs=["src"])
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
