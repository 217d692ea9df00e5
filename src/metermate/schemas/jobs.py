"""Job list API schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .geofence import CoordinateModel


class NearestJobsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: CoordinateModel = Field(..., alias="userLocation")
    jobs: List[Dict[str, Any]] = Field(default_factory=list)


class RankedJobModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    distance_from_user: Optional[float] = Field(
        None,
        alias="distanceFromUser",
        description="Miles from the reader; null when the job has no usable location.",
    )
    job: Dict[str, Any]


class NearestJobsResponse(BaseModel):
    jobs: List[RankedJobModel]
    count: int


class DistanceTraveledRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    distance_traveled: Any = Field(None, alias="distanceTraveled", description="Recorded miles, if any.")
    start_location: Optional[CoordinateModel] = Field(None, alias="startLocation")
    end_location: Optional[CoordinateModel] = Field(None, alias="endLocation")


class DistanceTraveledResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    distance_traveled: float = Field(..., alias="distanceTraveled")
