"""Job list endpoints."""

from __future__ import annotations

import math

from fastapi import APIRouter, HTTPException, status

from ...schemas.jobs import (
    DistanceTraveledRequest,
    DistanceTraveledResponse,
    NearestJobsRequest,
    NearestJobsResponse,
    RankedJobModel,
)
from ...services.jobs import resolve_distance_traveled, sort_jobs_by_distance

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/nearest", response_model=NearestJobsResponse, status_code=status.HTTP_200_OK)
def nearest_jobs(payload: NearestJobsRequest) -> NearestJobsResponse:
    """Order the reader's jobs nearest first; jobs without a location go last."""
    try:
        ranked = sort_jobs_by_distance(payload.jobs, payload.origin.to_domain())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    items = [
        RankedJobModel(distance_from_user=None if math.isinf(distance) else distance, job=job)
        for distance, job in ranked
    ]
    return NearestJobsResponse(jobs=items, count=len(items))


@router.post("/distance-traveled", response_model=DistanceTraveledResponse, status_code=status.HTTP_200_OK)
def distance_traveled(payload: DistanceTraveledRequest) -> DistanceTraveledResponse:
    """Distance to store when a job is completed."""
    start = payload.start_location.to_domain() if payload.start_location is not None else None
    end = payload.end_location.to_domain() if payload.end_location is not None else None
    try:
        miles = resolve_distance_traveled(payload.distance_traveled, start, end)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return DistanceTraveledResponse(distance_traveled=miles)
