import dataclasses
from datetime import datetime, timezone

import pytest

from analysis.prediction_engine import predict
from config.constants import RECOMMENDATIONS
from data_fetch.synthetic_data import SyntheticDataGenerator
from models.entities import QualityLevel, RiskLevel, TrendDirection, WeatherSnapshot

from conftest import IBADAN, LAGOS_ISLAND

JANUARY = datetime(2024, 1, 20, tzinfo=timezone.utc)
JULY = datetime(2024, 7, 20, tzinfo=timezone.utc)


def test_no_evidence_starts_from_prior(now):
    result = predict(IBADAN, [], None, JANUARY, now=now)

    assert result.score == pytest.approx(75.0 - 2.0)
    assert result.quality_level is QualityLevel.MODERATE
    assert result.risk_level is RiskLevel.MEDIUM
    assert result.confidence == 50.0
    assert result.contaminants == ()
    assert result.recommendations == tuple(RECOMMENDATIONS["moderate"])
    assert result.trend.direction is TrendDirection.STABLE
    assert result.trend.forecast_7_day == result.trend.forecast_30_day == result.score
    assert result.predicted_at == JANUARY
    assert result.location == IBADAN


def test_storm_over_lagos_in_wet_season(now):
    storm = WeatherSnapshot(temperature_c=20.0, humidity_pct=50.0, rainfall_mm=60.0, conditions="Heavy rain")
    result = predict(LAGOS_ISLAND, [], storm, JULY, now=now)

    assert result.score == pytest.approx(75.0 - 15.0 - 8.0 - 8.0)
    assert result.quality_level is QualityLevel.POOR
    assert result.risk_level is RiskLevel.HIGH
    assert [c.name for c in result.contaminants] == [
        "Bacterial Contamination",
        "Heavy Metals (Lead, Mercury)",
        "High Turbidity",
    ]
    assert result.confidence == 60.0


def test_reports_drive_score_and_trend(make_report, now, dry_mild_weather):
    reports = [make_report(95.0, days_ago=1), make_report(90.0, days_ago=4), make_report(85.0, days_ago=7)]
    result = predict(IBADAN, reports, dry_mild_weather, JANUARY, now=now)

    assert result.score == pytest.approx(90.0 - 2.0)
    assert result.quality_level is QualityLevel.SAFE
    assert result.trend.change_rate == pytest.approx(-2.0)
    assert result.trend.direction is TrendDirection.STABLE
    assert result.confidence == 75.0


def test_target_date_defaults_to_now(now):
    assert predict(IBADAN, [], None, now=now).predicted_at == now


def test_result_is_immutable(now):
    result = predict(IBADAN, [], None, now=now)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.score = 10.0


def test_prediction_is_deterministic(now):
    gen = SyntheticDataGenerator(seed=7)
    reports = gen.sample_reports(LAGOS_ISLAND, now=now)
    weather = gen.sample_weather()

    first = predict(LAGOS_ISLAND, reports, weather, JULY, now=now)
    second = predict(LAGOS_ISLAND, reports, weather, JULY, now=now)

    assert first == second
    assert 0.0 <= first.score <= 100.0
    assert first.confidence == 90.0


def test_to_dict_uses_plain_tags(now):
    data = predict(LAGOS_ISLAND, [], None, JULY, now=now).to_dict()
    assert data["quality_level"] == "poor"
    assert data["risk_level"] == "high"
    assert data["trend"]["direction"] == "stable"
    assert data["location"] == {"lat": 6.455, "lon": 3.3941}
    assert data["predicted_at"] == JULY.isoformat()
