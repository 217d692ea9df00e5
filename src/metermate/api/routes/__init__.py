"""Route group exports."""

from . import geofence, health, jobs, scoring, wages

__all__ = ["geofence", "health", "jobs", "scoring", "wages"]
