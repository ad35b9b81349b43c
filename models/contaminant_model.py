"""
ClimaTrack — Model 3: Contaminant Inference

Rule-based likely-contaminant findings from the final score and weather.
Rules are independent and evaluated in a fixed order (bacterial, heavy
metals, turbidity); any subset may fire.

Also hosts the recommendation lookup, which is keyed on quality level only.
"""

from typing import List, Optional, Sequence, Tuple

from config.constants import CONTAMINANT_RULES, RECOMMENDATIONS
from models.entities import (
    ContaminantCategory,
    ContaminantFinding,
    QualityLevel,
    RiskLevel,
    Severity,
    WeatherSnapshot,
)


def _finding(rule: dict, probability: float, severity: str) -> ContaminantFinding:
    return ContaminantFinding(
        name=rule["name"],
        category=ContaminantCategory(rule["category"]),
        probability=probability,
        severity=Severity(severity),
        sources=tuple(rule["sources"]),
    )


def infer_contaminants(
    score: float,
    weather: Optional[WeatherSnapshot],
) -> Tuple[ContaminantFinding, ...]:
    """
    Evaluate the contaminant rules.

    Parameters
    ----------
    score : float
        Final (clamped) quality score, 0–100.
    weather : WeatherSnapshot or None
        Rainfall-driven rules never fire without it.
    """
    rainfall = weather.rainfall_mm if weather is not None else None
    findings: List[ContaminantFinding] = []

    bacterial = CONTAMINANT_RULES["bacterial"]
    if score < bacterial["score_below"] or (rainfall is not None and rainfall > bacterial["rainfall_above"]):
        tier = bacterial["severe"] if score < bacterial["severe_score_below"] else bacterial["mild"]
        findings.append(_finding(bacterial, tier["probability"], tier["severity"]))

    metals = CONTAMINANT_RULES["heavy_metals"]
    if score < metals["score_below"]:
        findings.append(_finding(metals, metals["probability"], metals["severity"]))

    turbidity = CONTAMINANT_RULES["turbidity"]
    if rainfall is not None and rainfall > turbidity["rainfall_above"]:
        findings.append(_finding(turbidity, turbidity["probability"], turbidity["severity"]))

    return tuple(findings)


def generate_recommendations(
    quality_level: QualityLevel,
    risk_level: RiskLevel,
    contaminants: Sequence[ContaminantFinding],
) -> Tuple[str, ...]:
    """Advisory list for a quality level.

    ``risk_level`` and ``contaminants`` are accepted for API stability but
    do not change the selected list.
    """
    return tuple(RECOMMENDATIONS[quality_level.value])
