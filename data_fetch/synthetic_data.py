"""
ClimaTrack — Synthetic Input Generator

Demo/test stand-in for the report store and weather feed. Produces
plausible HistoricalReport lists and WeatherSnapshots around a coordinate.
Never called from inside the scoring engine.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import numpy as np

from config.constants import SYNTHETIC
from models.entities import Coordinate, HistoricalReport, WeatherSnapshot


class SyntheticDataGenerator:
    """Seeded generator so demos and tests are reproducible."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def sample_reports(
        self,
        center: Coordinate,
        count: int = SYNTHETIC["report_count"],
        now: Optional[datetime] = None,
    ) -> List[HistoricalReport]:
        """
        ``count`` reports scattered within ±0.025° of ``center``, newest
        first, one every 3 days.
        """
        now = now or datetime.now(timezone.utc)
        jitter = SYNTHETIC["jitter_deg"]
        lo, hi = SYNTHETIC["score_range"]

        reports = []
        for i in range(count):
            lat = float(np.clip(center.latitude + (self.rng.random() - 0.5) * jitter, -90.0, 90.0))
            lon = float(np.clip(center.longitude + (self.rng.random() - 0.5) * jitter, -180.0, 180.0))
            reports.append(HistoricalReport(
                coordinate=Coordinate(lat, lon),
                quality_score=float(lo + self.rng.random() * (hi - lo)),
                timestamp=now - timedelta(days=i * SYNTHETIC["report_spacing_days"]),
                report_type="user_report",
            ))
        return reports

    def sample_weather(self) -> WeatherSnapshot:
        t_lo, t_hi = SYNTHETIC["temp_range"]
        h_lo, h_hi = SYNTHETIC["humidity_range"]
        r_lo, r_hi = SYNTHETIC["rainfall_range"]
        return WeatherSnapshot(
            temperature_c=float(self.rng.uniform(t_lo, t_hi)),
            humidity_pct=float(self.rng.uniform(h_lo, h_hi)),
            rainfall_mm=float(self.rng.uniform(r_lo, r_hi)),
            conditions=SYNTHETIC["conditions"],
        )
