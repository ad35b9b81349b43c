"""
ClimaTrack — Weather Impact Modifier

Rainfall washes runoff into the supply, heat favours bacterial growth and
high humidity tracks with both. The three sub-rules are independent and
summed; only the rainfall tiers are mutually exclusive.
"""

from typing import Dict, List, Optional

from config.constants import WEATHER_IMPACT
from models.entities import WeatherSnapshot


def weather_impact(weather: Optional[WeatherSnapshot]) -> float:
    """Additive score adjustment from a weather snapshot (0 when absent)."""
    if weather is None:
        return 0.0

    impact = 0.0
    for threshold, penalty in WEATHER_IMPACT["rainfall_tiers"]:
        if weather.rainfall_mm > threshold:
            impact += penalty
            break

    if weather.temperature_c > WEATHER_IMPACT["hot_temp_c"]:
        impact += WEATHER_IMPACT["hot_penalty"]
    elif weather.temperature_c < WEATHER_IMPACT["cold_temp_c"]:
        impact += WEATHER_IMPACT["cold_bonus"]

    if weather.humidity_pct > WEATHER_IMPACT["humid_pct"]:
        impact += WEATHER_IMPACT["humid_penalty"]

    return impact


def compute_weather_features(weather: Optional[WeatherSnapshot]) -> Dict:
    """
    Weather modifier plus the human-readable reasons behind it.

    Returns
    -------
    dict with keys: impact, rainfall_mm, temperature_c, humidity_pct, factors
    """
    if weather is None:
        return {
            "impact": 0.0,
            "rainfall_mm": None,
            "temperature_c": None,
            "humidity_pct": None,
            "factors": ["No weather data — weather modifier skipped"],
        }

    factors: List[str] = []
    for threshold, penalty in WEATHER_IMPACT["rainfall_tiers"]:
        if weather.rainfall_mm > threshold:
            factors.append(f"Rainfall {weather.rainfall_mm:.0f}mm — runoff risk ({penalty:+.0f})")
            break
    if weather.temperature_c > WEATHER_IMPACT["hot_temp_c"]:
        factors.append(f"Air temperature {weather.temperature_c:.1f}°C — warm water favours bacteria")
    elif weather.temperature_c < WEATHER_IMPACT["cold_temp_c"]:
        factors.append(f"Air temperature {weather.temperature_c:.1f}°C — cold suppresses growth")
    if weather.humidity_pct > WEATHER_IMPACT["humid_pct"]:
        factors.append(f"Humidity {weather.humidity_pct:.0f}%")

    return {
        "impact": weather_impact(weather),
        "rainfall_mm": weather.rainfall_mm,
        "temperature_c": weather.temperature_c,
        "humidity_pct": weather.humidity_pct,
        "factors": factors,
    }
