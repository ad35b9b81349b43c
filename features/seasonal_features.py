"""
ClimaTrack — Seasonal Impact Modifier

April–October is treated as the wet season. The dry season still carries a
small penalty.
"""

from datetime import datetime

from config.constants import SEASONAL_IMPACT


def seasonal_impact(date: datetime) -> float:
    if date.month in SEASONAL_IMPACT["wet_months"]:
        return SEASONAL_IMPACT["wet_penalty"]
    return SEASONAL_IMPACT["dry_penalty"]


def is_wet_season(date: datetime) -> bool:
    return date.month in SEASONAL_IMPACT["wet_months"]
