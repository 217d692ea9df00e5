"""Domain value types shared by the rules engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    No validation happens on construction; callers decide how to treat an
    invalid pair (see ``services.geospatial.is_valid_coordinate``).
    """

    latitude: Any
    longitude: Any


class JobOutcome(str, Enum):
    """Completion outcome derived from a job's field data."""

    REGISTER_FILLED = "register_filled"
    NO_ACCESS_RECORDED = "no_access_recorded"
    INCOMPLETE = "incomplete"
