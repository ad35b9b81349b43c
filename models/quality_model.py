"""
ClimaTrack — Model 1: Quality Aggregator

Weighted mean of nearby historical report scores.

    weight_i = time_weight(age_i) × distance_weight(distance_i)
    base     = Σ score_i·weight_i / Σ weight_i        (reports within 5 km)

With no report inside the radius the model returns the 75.0 prior
("assume moderately safe absent evidence").
"""

from datetime import datetime
from typing import Dict, List, Sequence

from config.constants import AGGREGATION
from features.geo_features import distance_km
from features.weighting import distance_weight, report_age_days, time_weight
from models.entities import Coordinate, HistoricalReport


def compute_quality_score(
    target: Coordinate,
    reports: Sequence[HistoricalReport],
    now: datetime,
) -> Dict:
    """
    Aggregate historical reports into a base quality score.

    Parameters
    ----------
    target : Coordinate
        Location being scored.
    reports : sequence of HistoricalReport
        Any order; reports outside the radius are ignored.
    now : datetime
        Reference time for report ages.

    Returns
    -------
    dict with keys: score, contributing_reports, total_weight, used_prior, factors
    """
    radius = AGGREGATION["radius_km"]
    total_score = 0.0
    total_weight = 0.0
    contributing = 0

    for report in reports:
        dist = distance_km(target, report.coordinate)
        if dist > radius:
            continue
        weight = time_weight(report_age_days(report.timestamp, now)) * distance_weight(dist)
        total_score += report.quality_score * weight
        total_weight += weight
        contributing += 1

    factors: List[str] = []
    if total_weight > 0:
        score = total_score / total_weight
        used_prior = False
        factors.append(f"{contributing} report(s) within {radius:.0f} km")
    else:
        score = AGGREGATION["prior_score"]
        used_prior = True
        factors.append(f"No reports within {radius:.0f} km — using prior {score:.0f}")

    return {
        "score": score,
        "contributing_reports": contributing,
        "total_weight": round(total_weight, 4),
        "used_prior": used_prior,
        "factors": factors,
    }


def compute_base_score(
    target: Coordinate,
    reports: Sequence[HistoricalReport],
    now: datetime,
) -> float:
    return compute_quality_score(target, reports, now)["score"]
