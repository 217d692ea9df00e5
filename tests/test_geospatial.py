import math

import pytest

from metermate.models.domain import Coordinate
from metermate.services.geospatial import (
    InvalidCoordinatesError,
    distance_miles,
    haversine_miles,
    is_valid_coordinate,
    meters_to_miles,
    miles_to_meters,
)

LONDON = Coordinate(51.5074, -0.1278)
MANCHESTER = Coordinate(53.4808, -2.2426)


def test_distance_london_to_manchester():
    distance = distance_miles(LONDON, MANCHESTER)

    assert 150 < distance < 175


def test_distance_same_point_is_zero():
    assert distance_miles(LONDON, LONDON) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "a, b",
    [
        (LONDON, MANCHESTER),
        (Coordinate(-34.6037, -58.3816), Coordinate(-23.5505, -46.6333)),
        (Coordinate(0, 179.9), Coordinate(0, -179.9)),
        (Coordinate(90, 0), Coordinate(-90, 0)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert distance_miles(a, b) == pytest.approx(distance_miles(b, a))


def test_close_points_are_under_a_mile():
    distance = haversine_miles(51.5074, -0.1278, 51.5074, -0.12782)

    assert 0 < distance < 1


@pytest.mark.parametrize(
    "lat1, lon1, lat2, lon2",
    [
        (math.nan, -0.1278, 51.5074, -0.1278),
        (91, -0.1278, 51.5074, -0.1278),
        (51.5074, 181, 51.5074, -0.1278),
        (51.5074, -0.1278, None, -0.1278),
        (51.5074, -0.1278, 51.5074, math.inf),
    ],
)
def test_distance_rejects_invalid_coordinates(lat1, lon1, lat2, lon2):
    with pytest.raises(InvalidCoordinatesError, match="Invalid coordinates provided"):
        haversine_miles(lat1, lon1, lat2, lon2)


def test_invalid_coordinates_error_is_a_value_error():
    assert issubclass(InvalidCoordinatesError, ValueError)


def test_unit_conversions():
    assert miles_to_meters(1) == pytest.approx(1609.34)
    assert meters_to_miles(1609.34) == pytest.approx(1.0)
    assert meters_to_miles(10) == pytest.approx(0.00621371, abs=1e-6)


@pytest.mark.parametrize("miles", [0, 0.001, 1, 5.5, 12_000])
def test_conversion_round_trip(miles):
    assert meters_to_miles(miles_to_meters(miles)) == pytest.approx(miles)


@pytest.mark.parametrize(
    "lat, lon",
    [(51.5074, -0.1278), (-34.6037, -58.3816), (0, 0), (90, 180), (-90, -180)],
)
def test_valid_coordinates(lat, lon):
    assert is_valid_coordinate(lat, lon) is True


@pytest.mark.parametrize(
    "lat, lon",
    [
        (91, -0.1278),
        (-91, -0.1278),
        (51.5074, 181),
        (51.5074, -181),
        (math.nan, -0.1278),
        (51.5074, math.nan),
        (math.inf, 0),
        ("51.5074", -0.1278),
        (None, -0.1278),
        (True, 0),
    ],
)
def test_invalid_coordinates(lat, lon):
    assert is_valid_coordinate(lat, lon) is False
