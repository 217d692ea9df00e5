"""Geospatial helper functions."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from ..models.domain import Coordinate

EARTH_RADIUS_MILES = 3959.0
METERS_PER_MILE = 1609.34

INVALID_COORDINATES_MESSAGE = "Invalid coordinates provided"


class InvalidCoordinatesError(ValueError):
    """Raised when a latitude/longitude pair is not a usable coordinate."""

    def __init__(self, message: str = INVALID_COORDINATES_MESSAGE) -> None:
        super().__init__(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def is_valid_coordinate(lat: Any, lon: Any) -> bool:
    """Return True for finite numeric latitude in [-90, 90] and longitude in [-180, 180]."""

    if not (_is_number(lat) and _is_number(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    if not is_valid_coordinate(lat1, lon1) or not is_valid_coordinate(lat2, lon2):
        raise InvalidCoordinatesError()

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_miles(a: Coordinate, b: Coordinate) -> float:
    return haversine_miles(a.latitude, a.longitude, b.latitude, b.longitude)


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE
