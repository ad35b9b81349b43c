"""
ClimaTrack — Modifier Stack

Runs the weather, seasonal and proximity modifiers and combines them with
the aggregated base score. The modifiers are additive and order-insensitive;
clamping happens once, after summing.
"""

from datetime import datetime
from typing import Dict, Optional

import numpy as np

from config.constants import SCORE_MAX, SCORE_MIN
from features.proximity_features import compute_proximity_features
from features.seasonal_features import is_wet_season, seasonal_impact
from features.weather_features import compute_weather_features
from models.entities import Coordinate, WeatherSnapshot


def compute_modifiers(
    coordinate: Coordinate,
    weather: Optional[WeatherSnapshot],
    date: datetime,
) -> Dict:
    """Build the modifier breakdown for one location and date.

    Returns
    -------
    dict with keys: weather, seasonal, proximity, total, factors
    """
    weather_feats = compute_weather_features(weather)
    proximity_feats = compute_proximity_features(coordinate)

    # --- Seasonal -------------------------------------------------------
    seasonal = seasonal_impact(date)
    season_label = "Wet season" if is_wet_season(date) else "Dry season"

    factors = list(weather_feats["factors"])
    factors.append(f"{season_label} ({seasonal:+.0f})")
    factors.extend(proximity_feats["factors"])

    total = weather_feats["impact"] + seasonal + proximity_feats["impact"]

    return {
        "weather": weather_feats["impact"],
        "seasonal": seasonal,
        "proximity": proximity_feats["impact"],
        "total": total,
        "factors": factors,
    }


def apply_modifiers(base_score: float, modifiers: Dict) -> float:
    """Final score = clamp(base + Σ modifiers, 0, 100)."""
    return float(np.clip(base_score + modifiers["total"], SCORE_MIN, SCORE_MAX))
