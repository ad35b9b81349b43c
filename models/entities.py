"""
ClimaTrack — Value Objects

Immutable data model shared by every stage of the engine. Enumerations are
closed and string-valued so results serialise to the familiar tags
("safe", "declining", ...) without free-form strings leaking into scoring.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Tuple

from config.constants import CACHE_KEY_DECIMALS, QUALITY_DESCRIPTIONS, TREND_DESCRIPTIONS


class InvalidCoordinateError(ValueError):
    """Latitude/longitude outside the valid range or not finite."""


class QualityLevel(str, Enum):
    SAFE = "safe"
    MODERATE = "moderate"
    POOR = "poor"
    CRITICAL = "critical"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class ContaminantCategory(str, Enum):
    BIOLOGICAL = "Biological"
    CHEMICAL = "Chemical"
    PHYSICAL = "Physical"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Coordinate:
    """A point in decimal degrees. Validated on construction."""

    latitude: float
    longitude: float

    def __post_init__(self):
        lat, lon = self.latitude, self.longitude
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidCoordinateError(f"Non-finite coordinate ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise InvalidCoordinateError(f"Latitude {lat} outside [-90, 90]")
        if not -180.0 <= lon <= 180.0:
            raise InvalidCoordinateError(f"Longitude {lon} outside [-180, 180]")

    def rounded(self, places: int = CACHE_KEY_DECIMALS) -> "Coordinate":
        return Coordinate(round(self.latitude, places), round(self.longitude, places))


@dataclass(frozen=True)
class HistoricalReport:
    """A single community water-quality observation."""

    coordinate: Coordinate
    quality_score: float  # 0–100, higher is safer
    timestamp: datetime
    report_type: str = "user_report"

    def __post_init__(self):
        if not 0.0 <= self.quality_score <= 100.0:
            raise ValueError(f"Quality score {self.quality_score} outside [0, 100]")


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature_c: float
    humidity_pct: float
    rainfall_mm: float
    conditions: str = "Unknown"


@dataclass(frozen=True)
class ContaminantFinding:
    name: str
    category: ContaminantCategory
    probability: float  # 0–1
    severity: Severity
    sources: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Trend:
    direction: TrendDirection
    change_rate: float  # score units, current minus recent average
    forecast_7_day: float
    forecast_30_day: float

    @property
    def description(self) -> str:
        return TREND_DESCRIPTIONS[self.direction.value]


@dataclass(frozen=True)
class PredictionResult:
    """Everything a caller needs to render one location's water quality."""

    score: float
    quality_level: QualityLevel
    risk_level: RiskLevel
    confidence: float
    contaminants: Tuple[ContaminantFinding, ...]
    recommendations: Tuple[str, ...]
    trend: Trend
    predicted_at: datetime
    location: Coordinate

    @property
    def quality_description(self) -> str:
        return QUALITY_DESCRIPTIONS[self.quality_level.value]

    def to_dict(self) -> Dict:
        return {
            "score": round(self.score, 1),
            "quality_level": self.quality_level.value,
            "risk_level": self.risk_level.value,
            "quality_description": self.quality_description,
            "confidence": round(self.confidence, 1),
            "contaminants": [
                {
                    "name": c.name,
                    "category": c.category.value,
                    "probability": c.probability,
                    "severity": c.severity.value,
                    "sources": list(c.sources),
                }
                for c in self.contaminants
            ],
            "recommendations": list(self.recommendations),
            "trend": {
                "direction": self.trend.direction.value,
                "description": self.trend.description,
                "change_rate": round(self.trend.change_rate, 2),
                "forecast_7_day": round(self.trend.forecast_7_day, 1),
                "forecast_30_day": round(self.trend.forecast_30_day, 1),
            },
            "predicted_at": self.predicted_at.isoformat(),
            "location": {"lat": self.location.latitude, "lon": self.location.longitude},
        }
