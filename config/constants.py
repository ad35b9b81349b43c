"""
ClimaTrack — Constants and Scoring Thresholds

Every tier, rule and advisory used by the water-quality engine lives here.
Tier tables are ordered (upper_bound, value) pairs with INCLUSIVE upper
bounds; the first matching tier wins.
"""

# =============================================================================
# Geo
# =============================================================================
EARTH_RADIUS_KM = 6371.0
CACHE_KEY_DECIMALS = 4            # ~11 m grid for place-name caching

# =============================================================================
# Report Weighting (tiered, not smoothed)
# =============================================================================
TIME_WEIGHT_TIERS = [
    (7, 1.0),        # days — last week counts fully
    (30, 0.7),
    (90, 0.4),
]
TIME_WEIGHT_FLOOR = 0.2

DISTANCE_WEIGHT_TIERS = [
    (1.0, 1.0),      # km
    (3.0, 0.7),
    (5.0, 0.4),
]
DISTANCE_WEIGHT_FLOOR = 0.1

# =============================================================================
# Quality Aggregation
# =============================================================================
AGGREGATION = {
    "radius_km": 5.0,          # reports further away are ignored
    "prior_score": 75.0,       # "moderately safe" when no evidence
}

# =============================================================================
# Modifier Stack
# =============================================================================
WEATHER_IMPACT = {
    # rainfall tiers are mutually exclusive (strictly greater than)
    "rainfall_tiers": [
        (50.0, -15.0),
        (20.0, -8.0),
        (5.0, -3.0),
    ],
    "hot_temp_c": 30.0,
    "hot_penalty": -5.0,
    "cold_temp_c": 10.0,
    "cold_bonus": 2.0,
    "humid_pct": 80.0,
    "humid_penalty": -3.0,
}

SEASONAL_IMPACT = {
    "wet_months": range(4, 11),   # April–October wet-season proxy
    "wet_penalty": -8.0,
    "dry_penalty": -2.0,
}

# Bounding boxes are exclusive on every edge.
PROXIMITY_BOXES = {
    "coastal": {"lat": (6.4, 6.7), "lon": (3.3, 3.6), "impact": -5.0,
                "label": "Coastal zone — saline intrusion and tidal runoff"},
    "urban":   {"lat": (6.4, 6.6), "lon": (3.3, 3.5), "impact": -3.0,
                "label": "Dense urban area — ageing distribution network"},
}

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# =============================================================================
# Classification — same cut points, two label sets
# =============================================================================
QUALITY_THRESHOLDS = [
    (80.0, "safe"),
    (60.0, "moderate"),
    (40.0, "poor"),
]
QUALITY_FLOOR = "critical"

RISK_THRESHOLDS = [
    (80.0, "low"),
    (60.0, "medium"),
    (40.0, "high"),
]
RISK_FLOOR = "critical"

QUALITY_DESCRIPTIONS = {
    "safe": "Safe for consumption and daily use",
    "moderate": "Use with caution, filtration recommended",
    "poor": "Not safe for drinking, treatment required",
    "critical": "Severe contamination, avoid all use",
}

# =============================================================================
# Contaminant Rules (evaluated in this order)
# =============================================================================
CONTAMINANT_RULES = {
    "bacterial": {
        "name": "Bacterial Contamination",
        "category": "Biological",
        "score_below": 70.0,
        "rainfall_above": 20.0,
        "severe_score_below": 50.0,
        "severe": {"probability": 0.8, "severity": "high"},
        "mild": {"probability": 0.4, "severity": "medium"},
        "sources": ["Sewage overflow", "Surface runoff", "Inadequate treatment"],
    },
    "heavy_metals": {
        "name": "Heavy Metals (Lead, Mercury)",
        "category": "Chemical",
        "score_below": 60.0,
        "probability": 0.3,
        "severity": "medium",
        "sources": ["Old pipes", "Industrial discharge", "Corrosion"],
    },
    "turbidity": {
        "name": "High Turbidity",
        "category": "Physical",
        "rainfall_above": 30.0,
        "probability": 0.7,
        "severity": "low",
        "sources": ["Soil erosion", "Construction sites", "Heavy rainfall"],
    },
}

# =============================================================================
# Recommendations — keyed on quality level only
# =============================================================================
RECOMMENDATIONS = {
    "critical": [
        "⚠️ DO NOT use tap water for drinking or cooking",
        "💧 Use bottled water for all consumption",
        "🧪 Boiling may not remove all contaminants",
        "🏥 Seek medical attention if you experience symptoms",
        "📞 Report water quality issues immediately",
    ],
    "poor": [
        "⚠️ Boil water for at least 3 minutes before drinking",
        "💧 Use filtered or bottled water when possible",
        "🧼 Wash hands frequently with clean water",
        "🚿 Limit shower time to reduce exposure",
        "👶 Extra precautions for children and elderly",
    ],
    "moderate": [
        "💧 Consider boiling or filtering drinking water",
        "🚰 Run tap for 30 seconds before use",
        "🧪 Use water filter certified for your contaminants",
        "👀 Monitor for changes in water appearance or taste",
        "📱 Stay updated on local water quality alerts",
    ],
    "safe": [
        "✅ Water is safe for normal use",
        "💧 Continue normal consumption habits",
        "🧼 Maintain good hygiene practices",
        "🚰 Regular maintenance of home plumbing",
        "📱 Stay informed about local water quality",
    ],
}

# =============================================================================
# Trend Forecast
# =============================================================================
TREND = {
    "min_reports": 3,
    "window": 10,                 # first N reports in source order
    "direction_threshold": 5.0,   # score units
    "factor_7d": 0.5,
    "factor_30d": 2.0,
    "heavy_rain_mm": 30.0,
    "rain_penalty_7d": 10.0,
    "rain_penalty_30d": 8.0,
}

TREND_DESCRIPTIONS = {
    "improving": "Quality is improving",
    "declining": "Quality is declining",
    "stable": "Quality is stable",
}

# =============================================================================
# Confidence
# =============================================================================
CONFIDENCE = {
    "base": 50.0,
    "per_report": 5.0,
    "report_cap": 30.0,
    "weather_bonus": 10.0,
}

# =============================================================================
# API Endpoints
# =============================================================================
OPEN_METEO_FORECAST = "https://api.open-meteo.com/v1/forecast"
NOMINATIM_REVERSE = "https://nominatim.openstreetmap.org/reverse"

NOMINATIM = {
    "user_agent": "ClimaTrack-WaterQuality/1.0",
    "zoom": 14,
    "timeout_s": 10.0,
    "min_interval_s": 1.0,
    "name_fields": [
        "suburb",
        "neighbourhood",
        "quarter",
        "hamlet",
        "village",
        "town",
        "city",
        "county",
        "state_district",
    ],
    "unknown_label": "Unknown Area",
}

# =============================================================================
# Synthetic Data (demo / test inputs only, never used by scoring)
# =============================================================================
SYNTHETIC = {
    "report_count": 15,
    "jitter_deg": 0.05,           # full width, centred on the target
    "score_range": (65.0, 90.0),
    "report_spacing_days": 3,
    "temp_range": (28.0, 33.0),
    "humidity_range": (70.0, 90.0),
    "rainfall_range": (0.0, 30.0),
    "conditions": "Partly cloudy",
}

# Open-Meteo WMO weather codes → short condition labels
WMO_CONDITIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Fog",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Heavy rain",
    80: "Rain showers",
    81: "Rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}
