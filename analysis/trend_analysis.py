"""
ClimaTrack — Short-Horizon Trend Forecast

Compares the current score against the mean of the most recent reports
(first 10 in source order; the list is not re-sorted) and extrapolates:

    change_rate = current − mean(recent)
    forecast_7  = clamp(current + 0.5 × change_rate)
    forecast_30 = clamp(current + 2.0 × change_rate)

Heavy rain (> 30 mm) knocks a further 10 / 8 points off the forecasts.
"""

from typing import Optional, Sequence

import numpy as np

from config.constants import SCORE_MAX, SCORE_MIN, TREND
from models.entities import HistoricalReport, Trend, TrendDirection, WeatherSnapshot


def forecast_trend(
    current_score: float,
    reports: Sequence[HistoricalReport],
    weather: Optional[WeatherSnapshot],
) -> Trend:
    """
    Estimate direction and 7/30-day forecasts.

    Parameters
    ----------
    current_score : float
        Final score of the prediction being made.
    reports : sequence of HistoricalReport
        Must have ≥ 3 entries, otherwise the trend is flat.
    weather : WeatherSnapshot or None
    """
    if len(reports) < TREND["min_reports"]:
        return _stable_trend(current_score)

    recent = np.array([r.quality_score for r in reports[:TREND["window"]]], dtype=float)
    change_rate = float(current_score - recent.mean())

    threshold = TREND["direction_threshold"]
    if change_rate > threshold:
        direction = TrendDirection.IMPROVING
    elif change_rate < -threshold:
        direction = TrendDirection.DECLINING
    else:
        direction = TrendDirection.STABLE

    forecast_7 = _clamp(current_score + change_rate * TREND["factor_7d"])
    forecast_30 = _clamp(current_score + change_rate * TREND["factor_30d"])

    if weather is not None and weather.rainfall_mm > TREND["heavy_rain_mm"]:
        forecast_7 -= TREND["rain_penalty_7d"]
        forecast_30 -= TREND["rain_penalty_30d"]

    return Trend(
        direction=direction,
        change_rate=change_rate,
        forecast_7_day=_clamp(forecast_7),
        forecast_30_day=_clamp(forecast_30),
    )


def _stable_trend(current_score: float) -> Trend:
    return Trend(
        direction=TrendDirection.STABLE,
        change_rate=0.0,
        forecast_7_day=current_score,
        forecast_30_day=current_score,
    )


def _clamp(value: float) -> float:
    return float(np.clip(value, SCORE_MIN, SCORE_MAX))
