"""Geofence validation for job-site presence checks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..models.domain import Coordinate
from .geospatial import (
    INVALID_COORDINATES_MESSAGE,
    distance_miles,
    is_valid_coordinate,
    miles_to_meters,
)

DEFAULT_RADIUS_METERS = 10


@dataclass(slots=True)
class GeofenceResult:
    is_valid: bool
    can_proceed: bool
    distance_miles: float
    distance_meters: float
    radius_meters: float
    message: Optional[str] = None
    error: Optional[str] = None


def _format_meters(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def validate_geofence(
    observed: Coordinate,
    target: Coordinate,
    radius_meters: float = DEFAULT_RADIUS_METERS,
) -> GeofenceResult:
    """Check whether ``observed`` lies within ``radius_meters`` of ``target``.

    Invalid coordinates never raise here: the result carries ``error`` and
    ``can_proceed=False`` and no distance is computed. The boundary is
    inclusive.
    """

    if not is_valid_coordinate(observed.latitude, observed.longitude) or not is_valid_coordinate(
        target.latitude, target.longitude
    ):
        return GeofenceResult(
            is_valid=False,
            can_proceed=False,
            distance_miles=0.0,
            distance_meters=0.0,
            radius_meters=radius_meters,
            error=INVALID_COORDINATES_MESSAGE,
        )

    miles = distance_miles(observed, target)
    meters = miles_to_meters(miles)
    is_valid = meters <= radius_meters
    radius_label = _format_meters(radius_meters)

    if is_valid:
        message = f"You are within the required {radius_label}m radius"
    else:
        message = (
            f"You are {_round_half_up(meters)}m away. "
            f"Please move within {radius_label}m to proceed."
        )

    return GeofenceResult(
        is_valid=is_valid,
        can_proceed=is_valid,
        distance_miles=miles,
        distance_meters=meters,
        radius_meters=radius_meters,
        message=message,
    )
