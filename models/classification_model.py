"""
ClimaTrack — Model 2: Quality / Risk Classification

Two parallel ordinal scales over the same cut points (80 / 60 / 40,
inclusive lower bounds). No hysteresis.
"""

from config.constants import QUALITY_FLOOR, QUALITY_THRESHOLDS, RISK_FLOOR, RISK_THRESHOLDS
from models.entities import QualityLevel, RiskLevel


def classify_quality(score: float) -> QualityLevel:
    for lower, label in QUALITY_THRESHOLDS:
        if score >= lower:
            return QualityLevel(label)
    return QualityLevel(QUALITY_FLOOR)


def classify_risk(score: float) -> RiskLevel:
    for lower, label in RISK_THRESHOLDS:
        if score >= lower:
            return RiskLevel(label)
    return RiskLevel(RISK_FLOOR)
