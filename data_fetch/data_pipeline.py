"""
ClimaTrack — Data Pipeline Orchestrator
Gathers historical reports and a weather snapshot for a location and
returns a unified dict ready for ``predict``.

Each source is fetched independently; a failing source is recorded in
``errors`` and replaced by synthetic data (when enabled) or left empty.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union

from config.constants import AGGREGATION
from data_fetch.report_reader import ReportReader
from data_fetch.synthetic_data import SyntheticDataGenerator
from data_fetch.weather_client import WeatherClient, WeatherClientError
from features.geo_features import distance_km
from models.entities import Coordinate, HistoricalReport

logger = logging.getLogger(__name__)


class DataPipeline:
    def __init__(
        self,
        reports_path: Optional[Union[str, Path]] = None,
        weather_client: Optional[WeatherClient] = None,
        synthetic: Optional[SyntheticDataGenerator] = None,
        use_live_weather: bool = True,
        neighbourhood_km: float = AGGREGATION["radius_km"],
    ):
        self.reports_path = reports_path
        self.weather = weather_client or WeatherClient()
        self.synthetic = synthetic
        self.use_live_weather = use_live_weather
        self.neighbourhood_km = neighbourhood_km
        self.reader = ReportReader()
        self._all_reports: Optional[List[HistoricalReport]] = None

    def _load_reports(self) -> List[HistoricalReport]:
        if self._all_reports is None:
            self._all_reports = self.reader.read_csv(self.reports_path)
        return self._all_reports

    def nearby_reports(self, coordinate: Coordinate) -> List[HistoricalReport]:
        """Reports within the neighbourhood radius, newest first."""
        nearby = [
            r for r in self._load_reports()
            if distance_km(coordinate, r.coordinate) <= self.neighbourhood_km
        ]
        nearby.sort(key=lambda r: r.timestamp, reverse=True)
        return nearby

    def fetch_all(self, coordinate: Coordinate) -> Dict:
        errors = {}

        reports: List[HistoricalReport] = []
        report_source = "none"
        if self.reports_path is not None:
            try:
                reports = self.nearby_reports(coordinate)
                report_source = "csv"
            except (OSError, ValueError) as e:
                errors["reports"] = str(e)
                logger.warning("pipeline.reports_failed path=%s err=%s", self.reports_path, e)
        if report_source == "none" and self.synthetic is not None:
            reports = self.synthetic.sample_reports(coordinate)
            report_source = "synthetic"

        weather = None
        weather_source = "none"
        if self.use_live_weather:
            try:
                weather = self.weather.get_current_snapshot(coordinate.latitude, coordinate.longitude)
                weather_source = "open-meteo"
            except WeatherClientError as e:
                errors["weather"] = str(e)
                logger.warning(
                    "pipeline.weather_failed lat=%s lon=%s err=%s",
                    coordinate.latitude, coordinate.longitude, e,
                )
        if weather is None and self.synthetic is not None:
            weather = self.synthetic.sample_weather()
            weather_source = "synthetic"

        return {
            "location": coordinate,
            "reports": reports,
            "weather": weather,
            "sources": {"reports": report_source, "weather": weather_source},
            "fetched_at": datetime.now(timezone.utc).isoformat(),
            "errors": errors,
        }
