from datetime import datetime, timedelta, timezone

import pytest

from features.geo_features import distance_km
from features.weighting import distance_weight, report_age_days, time_weight
from models.entities import Coordinate, InvalidCoordinateError

from conftest import KM_PER_DEG_LAT

POINTS = [
    Coordinate(0.0, 0.0),
    Coordinate(6.4550, 3.3941),
    Coordinate(-33.8688, 151.2093),
    Coordinate(89.9, -179.9),
    Coordinate(-90.0, 180.0),
]


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert distance_km(point, point) == pytest.approx(0.0, abs=1e-9)


def test_distance_is_symmetric():
    for a in POINTS:
        for b in POINTS:
            assert distance_km(a, b) == pytest.approx(distance_km(b, a), rel=1e-12)


def test_one_degree_of_latitude():
    assert distance_km(Coordinate(10.0, 5.0), Coordinate(11.0, 5.0)) == pytest.approx(KM_PER_DEG_LAT, rel=1e-9)


def test_antipodal_distance_is_half_circumference():
    assert distance_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0)) == pytest.approx(6371.0 * 3.141592653589793)


@pytest.mark.parametrize("lat, lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -200.0), (float("nan"), 0.0)])
def test_invalid_coordinates_rejected(lat, lon):
    with pytest.raises(InvalidCoordinateError):
        Coordinate(lat, lon)


@pytest.mark.parametrize(
    "age, expected",
    [(0, 1.0), (7, 1.0), (8, 0.7), (30, 0.7), (31, 0.4), (90, 0.4), (91, 0.2), (400, 0.2)],
)
def test_time_weight_tiers(age, expected):
    assert time_weight(age) == expected


@pytest.mark.parametrize(
    "km, expected",
    [(0.0, 1.0), (1.0, 1.0), (1.0001, 0.7), (3.0, 0.7), (3.5, 0.4), (5.0, 0.4), (5.01, 0.1), (50.0, 0.1)],
)
def test_distance_weight_tiers(km, expected):
    assert distance_weight(km) == expected


def test_report_age_floors_partial_days():
    now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    assert report_age_days(now - timedelta(hours=36), now) == 1
    assert report_age_days(now - timedelta(days=7, hours=23), now) == 7


def test_report_age_mixes_naive_and_aware():
    aware_now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    naive_ts = datetime(2024, 1, 5, 12, 0)
    assert report_age_days(naive_ts, aware_now) == 10
    assert report_age_days(aware_now - timedelta(days=3), datetime(2024, 1, 15, 12, 0)) == 3
