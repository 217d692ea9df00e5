"""Job list helpers."""

from .proximity import job_location, resolve_distance_traveled, sort_jobs_by_distance

__all__ = ["job_location", "sort_jobs_by_distance", "resolve_distance_traveled"]
