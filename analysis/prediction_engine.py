"""
ClimaTrack — Prediction Engine

Single entry point that turns a coordinate, its historical reports and a
weather snapshot into one immutable PredictionResult:

    Aggregator → Modifier Stack → Classifier → Contaminants
               → Trend → Confidence

Pure given its inputs: no randomness, no I/O, no shared state.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from analysis.trend_analysis import forecast_trend
from features.feature_pipeline import apply_modifiers, compute_modifiers
from models.classification_model import classify_quality, classify_risk
from models.confidence_model import compute_confidence
from models.contaminant_model import generate_recommendations, infer_contaminants
from models.entities import Coordinate, HistoricalReport, PredictionResult, WeatherSnapshot
from models.quality_model import compute_quality_score

logger = logging.getLogger(__name__)


def predict(
    coordinate: Coordinate,
    historical_reports: Sequence[HistoricalReport],
    weather: Optional[WeatherSnapshot],
    target_date: Optional[datetime] = None,
    *,
    now: Optional[datetime] = None,
) -> PredictionResult:
    """
    Estimate water quality at ``coordinate``.

    Parameters
    ----------
    coordinate : Coordinate
    historical_reports : sequence of HistoricalReport
        Supplied by the caller; may be empty.
    weather : WeatherSnapshot or None
    target_date : datetime, optional
        Date the prediction is for. Drives the seasonal modifier and
        ``predicted_at``. Defaults to ``now``.
    now : datetime, optional
        Reference time for report ages. Defaults to the current UTC time.
    """
    now = now or datetime.now(timezone.utc)
    target_date = target_date or now
    reports = list(historical_reports)

    # --- 1. Base score --------------------------------------------------
    quality = compute_quality_score(coordinate, reports, now)

    # --- 2. Modifier stack ----------------------------------------------
    modifiers = compute_modifiers(coordinate, weather, target_date)
    score = apply_modifiers(quality["score"], modifiers)

    # --- 3. Classification ----------------------------------------------
    quality_level = classify_quality(score)
    risk_level = classify_risk(score)

    # --- 4. Contaminants + advice ---------------------------------------
    contaminants = infer_contaminants(score, weather)
    recommendations = generate_recommendations(quality_level, risk_level, contaminants)

    # --- 5. Trend + confidence ------------------------------------------
    trend = forecast_trend(score, reports, weather)
    confidence = compute_confidence(len(reports), weather is not None)

    logger.debug(
        "prediction.done lat=%s lon=%s base=%.1f modifiers=%.1f score=%.1f level=%s",
        coordinate.latitude, coordinate.longitude,
        quality["score"], modifiers["total"], score, quality_level.value,
    )

    return PredictionResult(
        score=score,
        quality_level=quality_level,
        risk_level=risk_level,
        confidence=confidence,
        contaminants=contaminants,
        recommendations=recommendations,
        trend=trend,
        predicted_at=target_date,
        location=coordinate,
    )
