import math

import pytest

from metermate.models.domain import Coordinate
from metermate.services.geofence import validate_geofence
from metermate.services.geospatial import distance_miles, miles_to_meters

JOB_SITE = Coordinate(51.5074, -0.1278)
# 0.0001 degrees of latitude north of the job site, roughly 11 meters
NEARBY = Coordinate(51.5075, -0.1278)


def test_same_location_is_within_radius():
    result = validate_geofence(JOB_SITE, JOB_SITE)

    assert result.is_valid is True
    assert result.can_proceed is True
    assert result.distance_meters == pytest.approx(0.0, abs=1e-6)
    assert result.radius_meters == 10
    assert result.message == "You are within the required 10m radius"
    assert result.error is None


def test_outside_radius_reports_rounded_distance():
    result = validate_geofence(NEARBY, JOB_SITE, 10)

    assert result.is_valid is False
    assert result.can_proceed is False
    assert result.distance_meters == pytest.approx(11.12, abs=0.05)
    assert result.distance_miles == pytest.approx(result.distance_meters / 1609.34)
    assert result.message == "You are 11m away. Please move within 10m to proceed."


def test_custom_radius_is_echoed():
    result = validate_geofence(NEARBY, JOB_SITE, 50)

    assert result.is_valid is True
    assert result.radius_meters == 50
    assert "50m" in result.message


def test_fractional_radius_in_message():
    result = validate_geofence(NEARBY, JOB_SITE, 2.5)

    assert result.message == "You are 11m away. Please move within 2.5m to proceed."


def test_boundary_is_inclusive():
    exact = miles_to_meters(distance_miles(NEARBY, JOB_SITE))

    assert validate_geofence(NEARBY, JOB_SITE, exact).is_valid is True
    assert validate_geofence(NEARBY, JOB_SITE, exact - 0.01).is_valid is False


@pytest.mark.parametrize(
    "observed, target",
    [
        (Coordinate(math.nan, -0.1278), JOB_SITE),
        (JOB_SITE, Coordinate(51.5074, 200)),
        (Coordinate(None, None), JOB_SITE),
        (Coordinate("51.5", "-0.12"), JOB_SITE),
    ],
)
def test_invalid_coordinates_block_progress(observed, target):
    result = validate_geofence(observed, target, 10)

    assert result.is_valid is False
    assert result.can_proceed is False
    assert result.distance_meters == 0
    assert result.distance_miles == 0
    assert result.error == "Invalid coordinates provided"
    assert result.message is None
