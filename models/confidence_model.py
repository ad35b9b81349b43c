"""
ClimaTrack — Model 4: Prediction Confidence

    confidence = 50 + min(5 × reports, 30) + (10 if weather else 0)

Clamped to 0–100; non-decreasing in report count and weather availability.
"""

import numpy as np

from config.constants import CONFIDENCE, SCORE_MAX, SCORE_MIN


def compute_confidence(report_count: int, has_weather: bool) -> float:
    confidence = CONFIDENCE["base"]
    confidence += min(report_count * CONFIDENCE["per_report"], CONFIDENCE["report_cap"])
    if has_weather:
        confidence += CONFIDENCE["weather_bonus"]
    return float(np.clip(confidence, SCORE_MIN, SCORE_MAX))
