"""Distance helpers for a meter reader's job list."""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Iterable, List, Optional, Tuple

from ...models.domain import Coordinate
from ..geospatial import InvalidCoordinatesError, distance_miles, is_valid_coordinate


def job_location(job: Any) -> Optional[Coordinate]:
    """Return the job's site coordinate, preferring the linked house record."""

    if not isinstance(job, Mapping):
        return None
    sources = (job.get("house"), job)
    for source in sources:
        if not isinstance(source, Mapping):
            continue
        lat, lon = source.get("latitude"), source.get("longitude")
        if is_valid_coordinate(lat, lon):
            return Coordinate(lat, lon)
    return None


def sort_jobs_by_distance(jobs: Iterable[Any], origin: Coordinate) -> List[Tuple[float, Any]]:
    """Pair each job with its distance (miles) from ``origin``, nearest first.

    Jobs without a usable location get ``math.inf`` and keep their relative
    order at the end of the list.
    """

    if not is_valid_coordinate(origin.latitude, origin.longitude):
        raise InvalidCoordinatesError()

    ranked: list[Tuple[float, Any]] = []
    for job in jobs:
        location = job_location(job)
        distance = distance_miles(origin, location) if location is not None else math.inf
        ranked.append((distance, job))
    ranked.sort(key=lambda item: item[0])
    return ranked


def _is_positive_distance(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value) and value > 0


def resolve_distance_traveled(
    distance_traveled: Any,
    start: Optional[Coordinate] = None,
    end: Optional[Coordinate] = None,
) -> float:
    """Distance to record for a completed job.

    A positive recorded distance wins; otherwise the straight-line distance from the
    start to the end location is used when both are known.
    """

    if _is_positive_distance(distance_traveled):
        return float(distance_traveled)
    if start is not None and end is not None:
        return distance_miles(start, end)
    return 0
