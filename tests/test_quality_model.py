import pytest

from models.quality_model import compute_base_score, compute_quality_score

from conftest import IBADAN


def test_empty_reports_use_prior(now):
    result = compute_quality_score(IBADAN, [], now)
    assert result["score"] == 75.0
    assert result["used_prior"] is True
    assert result["contributing_reports"] == 0


def test_reports_outside_radius_are_ignored(make_report, now):
    far = [make_report(20.0, north_km=5.5), make_report(10.0, north_km=-12.0)]
    assert compute_base_score(IBADAN, far, now) == 75.0


def test_single_report_sets_base(make_report, now):
    assert compute_base_score(IBADAN, [make_report(42.0)], now) == pytest.approx(42.0)


def test_weighted_mean_uses_time_and_distance_tiers(make_report, now):
    fresh_here = make_report(90.0)                            # 1.0 × 1.0
    older_nearby = make_report(40.0, north_km=2.0, days_ago=10)  # 0.7 × 0.7
    far_away = make_report(0.0, north_km=8.0)                 # outside radius

    result = compute_quality_score(IBADAN, [fresh_here, older_nearby, far_away], now)

    expected = (90.0 * 1.0 + 40.0 * 0.49) / 1.49
    assert result["score"] == pytest.approx(expected)
    assert result["contributing_reports"] == 2
    assert result["total_weight"] == pytest.approx(1.49)


def test_old_reports_still_count_with_floor_weight(make_report, now):
    reports = [make_report(100.0, days_ago=200), make_report(50.0, days_ago=1)]
    expected = (100.0 * 0.2 + 50.0 * 1.0) / 1.2
    assert compute_base_score(IBADAN, reports, now) == pytest.approx(expected)
