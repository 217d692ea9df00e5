"""Geofence endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...config import settings
from ...schemas.geofence import DistanceRequest, DistanceResponse, GeofenceRequest, GeofenceResponse
from ...services.geofence import validate_geofence
from ...services.geospatial import distance_miles, miles_to_meters

router = APIRouter(prefix="/geofence", tags=["geofence"])

logger = logging.getLogger(__name__)


@router.post("/validate", response_model=GeofenceResponse, status_code=status.HTTP_200_OK)
def validate(payload: GeofenceRequest) -> GeofenceResponse:
    """Check that the reader is close enough to the job site to proceed.

    Invalid coordinates are reported in the body (``error``), not as an HTTP
    error, so clients can show the message directly.
    """
    radius = payload.radius_meters if payload.radius_meters is not None else settings.geofence_radius_meters
    result = validate_geofence(payload.observed.to_domain(), payload.target.to_domain(), radius)
    if not result.can_proceed:
        logger.info(
            "Geofence check rejected: distance=%.1fm radius=%sm error=%s",
            result.distance_meters,
            result.radius_meters,
            result.error,
        )
    return GeofenceResponse(
        is_valid=result.is_valid,
        can_proceed=result.can_proceed,
        distance=result.distance_miles,
        distance_meters=result.distance_meters,
        radius_meters=result.radius_meters,
        message=result.message,
        error=result.error,
    )


@router.post("/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
def distance(payload: DistanceRequest) -> DistanceResponse:
    try:
        miles = distance_miles(payload.origin.to_domain(), payload.destination.to_domain())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return DistanceResponse(miles=miles, meters=miles_to_meters(miles))
