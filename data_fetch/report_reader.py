"""
ClimaTrack — Historical Report Reader

Loads community water-quality reports exported as CSV (or already in a
DataFrame) into HistoricalReport objects.

Expected columns:
  latitude, longitude, quality_score, timestamp[, report_type]

Rows with missing values, unparsable timestamps or out-of-range
coordinates/scores are dropped and logged. Row order is preserved, since
the trend model reads the first rows as the most recent.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from models.entities import Coordinate, HistoricalReport

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["latitude", "longitude", "quality_score", "timestamp"]


class ReportReader:
    """Converts tabular report exports into HistoricalReport lists."""

    def read_csv(self, path: Union[str, Path]) -> List[HistoricalReport]:
        df = pd.read_csv(path)
        return self.from_frame(df)

    def from_frame(self, df: pd.DataFrame) -> List[HistoricalReport]:
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Report table missing columns: {', '.join(missing)}")

        df = df.copy()
        df["timestamp"] = pd.to_datetime(df["timestamp"], errors="coerce", utc=True)
        for col in ("latitude", "longitude", "quality_score"):
            df[col] = pd.to_numeric(df[col], errors="coerce")
        if "report_type" not in df.columns:
            df["report_type"] = "user_report"
        df["report_type"] = df["report_type"].fillna("user_report")

        before = len(df)
        df = df.dropna(subset=REQUIRED_COLUMNS)

        reports: List[HistoricalReport] = []
        for row in df.itertuples(index=False):
            try:
                reports.append(HistoricalReport(
                    coordinate=Coordinate(float(row.latitude), float(row.longitude)),
                    quality_score=float(row.quality_score),
                    timestamp=row.timestamp.to_pydatetime(),
                    report_type=str(row.report_type),
                ))
            except ValueError as e:
                logger.warning("reports.row_skipped reason=%s", e)

        dropped = before - len(reports)
        if dropped:
            logger.info("reports.loaded kept=%s dropped=%s", len(reports), dropped)
        return reports
