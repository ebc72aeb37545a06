"""Health check endpoint."""

import os
from typing import Any

from fastapi import APIRouter

from dockcore import __version__

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    response_description="Service health and version",
)
async def health() -> dict[str, Any]:
    """Report service health, version and environment."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": os.getenv("ENVIRONMENT", "dev"),
    }
