from datetime import datetime, timedelta, timezone

import pytest

from models.entities import Coordinate, HistoricalReport, WeatherSnapshot

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

# Inland point outside both proximity boxes.
IBADAN = Coordinate(7.3775, 3.9470)
# Inside both the coastal and the urban box.
LAGOS_ISLAND = Coordinate(6.4550, 3.3941)

KM_PER_DEG_LAT = 6371.0 * 3.141592653589793 / 180.0


class TimeController:
    """Fake monotonic clock; ``sleep`` advances it instead of blocking."""

    def __init__(self) -> None:
        self.now = 1000.0
        self.sleeps = []

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> TimeController:
    return TimeController()


@pytest.fixture
def make_report():
    def _make(score, center=IBADAN, north_km=0.0, days_ago=0, report_type="user_report"):
        return HistoricalReport(
            coordinate=Coordinate(center.latitude + north_km / KM_PER_DEG_LAT, center.longitude),
            quality_score=score,
            timestamp=NOW - timedelta(days=days_ago),
            report_type=report_type,
        )

    return _make


@pytest.fixture
def dry_mild_weather() -> WeatherSnapshot:
    return WeatherSnapshot(temperature_c=20.0, humidity_pct=50.0, rainfall_mm=0.0, conditions="Clear sky")
