"""Geofence API schemas."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import Coordinate


class CoordinateModel(BaseModel):
    """Raw coordinate values; validity is decided by ``is_valid_coordinate``, not coerced here."""

    latitude: Any = None
    longitude: Any = None

    def to_domain(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class GeofenceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    observed: CoordinateModel = Field(..., alias="userLocation", description="Position reported by the device.")
    target: CoordinateModel = Field(..., alias="jobLocation", description="Job site position.")
    radius_meters: Optional[float] = Field(
        default=None,
        gt=0,
        alias="radiusMeters",
        description="Required radius; the configured default applies when omitted.",
    )


class GeofenceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    can_proceed: bool = Field(..., alias="canProceed")
    distance: float = Field(..., description="Distance in miles.")
    distance_meters: float = Field(..., alias="distanceMeters")
    radius_meters: float = Field(..., alias="radiusMeters")
    message: Optional[str] = None
    error: Optional[str] = None


class DistanceRequest(BaseModel):
    origin: CoordinateModel
    destination: CoordinateModel


class DistanceResponse(BaseModel):
    miles: float
    meters: float
