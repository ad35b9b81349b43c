import pytest

from config.constants import OPEN_METEO_FORECAST
from data_fetch.weather_client import WeatherClient, WeatherClientError


def test_current_snapshot_normalization(requests_mock):
    requests_mock.get(
        OPEN_METEO_FORECAST,
        json={
            "current": {
                "temperature_2m": 31.4,
                "relative_humidity_2m": 84,
                "precipitation": 1.2,
                "weather_code": 61,
            },
            "daily": {"time": ["2024-07-20"], "precipitation_sum": [22.5]},
        },
    )

    snap = WeatherClient().get_current_snapshot(6.45501, 3.39412)

    assert snap.temperature_c == 31.4
    assert snap.humidity_pct == 84.0
    assert snap.rainfall_mm == 22.5
    assert snap.conditions == "Rain"
    assert requests_mock.last_request.qs["latitude"] == ["6.455"]
    assert requests_mock.last_request.qs["daily"] == ["precipitation_sum"]


def test_missing_daily_sum_uses_current_precipitation(requests_mock):
    requests_mock.get(
        OPEN_METEO_FORECAST,
        json={
            "current": {"temperature_2m": 12.0, "relative_humidity_2m": 40, "precipitation": 3.0, "weather_code": 7},
            "daily": {"precipitation_sum": [None]},
        },
    )

    snap = WeatherClient().get_current_snapshot(59.9, 10.75)

    assert snap.rainfall_mm == 3.0
    assert snap.conditions == "Unknown"


@pytest.mark.parametrize(
    "mock_kwargs",
    [
        {"status_code": 500},
        {"text": "not json"},
        {"json": {"current": {"relative_humidity_2m": 40}}},
        {"json": ["not", "a", "dict"]},
        {"json": {"current": ["temperature_2m", 30.0]}},
        {"json": {"current": {"temperature_2m": "n/a", "relative_humidity_2m": 40}}},
        {"json": {"current": {"temperature_2m": 30.0, "relative_humidity_2m": 40}, "daily": {"precipitation_sum": ["heavy"]}}},
    ],
)
def test_failures_raise_client_error(requests_mock, mock_kwargs):
    requests_mock.get(OPEN_METEO_FORECAST, **mock_kwargs)
    with pytest.raises(WeatherClientError):
        WeatherClient().get_current_snapshot(6.45, 3.39)
