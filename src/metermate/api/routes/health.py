"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the business-rule defaults the service is running with."""
    return {
        "service": settings.app_name,
        "geofence_radius_meters": settings.geofence_radius_meters,
        "rate_per_mile": settings.rate_per_mile,
        "fuel_allowance_per_job": settings.fuel_allowance_per_job,
    }
