"""Haversine distance tests."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from culturemap.domain.models import GeoPoint
from culturemap.planner.distance import EARTH_RADIUS_M, distance_meters, haversine_meters

SEOUL = GeoPoint(latitude=37.5665, longitude=126.9780)
BUSAN = GeoPoint(latitude=35.1796, longitude=129.0756)


def test_seoul_busan_fixture():
    assert distance_meters(SEOUL, BUSAN) == pytest.approx(325_000, abs=5_000)


def test_distance_is_symmetric():
    pairs = [
        (SEOUL, BUSAN),
        (GeoPoint(latitude=0, longitude=179.9), GeoPoint(latitude=0, longitude=-179.9)),
        (GeoPoint(latitude=-33.86, longitude=151.21), GeoPoint(latitude=51.5, longitude=-0.12)),
    ]
    for a, b in pairs:
        assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))


def test_distance_to_self_is_zero():
    for point in (SEOUL, BUSAN, GeoPoint(latitude=90, longitude=0), GeoPoint(latitude=0, longitude=0)):
        assert distance_meters(point, point) == 0.0


def test_points_on_one_great_circle_are_consistent():
    a = GeoPoint(latitude=37.0, longitude=127.0)
    b = GeoPoint(latitude=37.5, longitude=127.0)
    c = GeoPoint(latitude=38.0, longitude=127.0)
    ac = distance_meters(a, c)
    assert ac >= distance_meters(a, b)
    assert ac >= distance_meters(b, c)
    assert ac == pytest.approx(distance_meters(a, b) + distance_meters(b, c))


def test_distance_grows_with_separation():
    origin = GeoPoint(latitude=37.0, longitude=127.0)
    last = 0.0
    for step in range(1, 20):
        current = distance_meters(origin, GeoPoint(latitude=37.0 + step * 0.5, longitude=127.0))
        assert current > last
        last = current


def test_one_degree_of_latitude_matches_earth_radius():
    expected = EARTH_RADIUS_M * math.radians(1.0)
    assert haversine_meters(10.0, 20.0, 11.0, 20.0) == pytest.approx(expected)


def test_antipodal_points_are_half_circumference():
    assert haversine_meters(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_nan_input_propagates_instead_of_raising():
    assert math.isnan(haversine_meters(float("nan"), 127.0, 37.0, 127.0))


@pytest.mark.parametrize(
    ("lat", "lon"),
    [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.5), (0.0, -181.0), (float("nan"), 0.0)],
)
def test_geopoint_rejects_out_of_range(lat, lon):
    with pytest.raises(ValidationError):
        GeoPoint(latitude=lat, longitude=lon)


def test_geopoint_is_immutable():
    with pytest.raises(ValidationError):
        SEOUL.latitude = 0.0  # type: ignore[misc]
