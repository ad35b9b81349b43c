"""
ClimaTrack — Open-Meteo Weather Client

Fetches REAL current conditions from the Open-Meteo API and normalises them
into a WeatherSnapshot.
- No API key required
- Today's accumulated precipitation is taken from the daily sum
"""

import logging
from typing import Dict, Optional

import requests

from config.constants import OPEN_METEO_FORECAST, WMO_CONDITIONS
from models.entities import WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherClientError(Exception):
    pass


class WeatherClient:
    """Client for Open-Meteo free weather API."""

    FORECAST_URL = OPEN_METEO_FORECAST

    def __init__(self, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Cache-Control": "no-cache",
        })

    # -----------------------------------------------------------------
    # Current conditions → WeatherSnapshot
    # -----------------------------------------------------------------
    def get_current_snapshot(self, lat: float, lon: float) -> WeatherSnapshot:
        """
        Fetch current temperature, humidity and weather code plus today's
        precipitation sum. Raises WeatherClientError on any failure.
        """
        params = {
            "latitude": round(lat, 4),
            "longitude": round(lon, 4),
            "current": ",".join([
                "temperature_2m",
                "relative_humidity_2m",
                "precipitation",
                "weather_code",
            ]),
            "daily": "precipitation_sum",
            "forecast_days": 1,
            "timezone": "auto",
        }

        try:
            resp = self.session.get(self.FORECAST_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.RequestException as e:
            raise WeatherClientError(f"Failed to fetch current weather: {e}")
        except ValueError as e:
            raise WeatherClientError(f"Invalid JSON from API: {e}")

        return self._parse_snapshot(data)

    @staticmethod
    def _parse_snapshot(data: Dict) -> WeatherSnapshot:
        if not isinstance(data, dict):
            raise WeatherClientError(f"Unexpected response body: {type(data).__name__}")
        current = data.get("current") or {}
        daily = data.get("daily") or {}
        if not isinstance(current, dict) or not isinstance(daily, dict):
            raise WeatherClientError("Unexpected shape for current/daily blocks")

        temperature = current.get("temperature_2m")
        humidity = current.get("relative_humidity_2m")
        if temperature is None or humidity is None:
            raise WeatherClientError("Response missing expected weather data fields")

        code = current.get("weather_code")
        try:
            daily_precip = [p for p in (daily.get("precipitation_sum") or []) if p is not None]
            if daily_precip:
                rainfall = float(daily_precip[0])
            else:
                rainfall = float(current.get("precipitation") or 0.0)
            snapshot = WeatherSnapshot(
                temperature_c=float(temperature),
                humidity_pct=float(humidity),
                rainfall_mm=rainfall,
                conditions=WMO_CONDITIONS.get(code, "Unknown"),
            )
        except (TypeError, ValueError) as e:
            raise WeatherClientError(f"Non-numeric weather field: {e}") from e

        logger.debug(
            "weather.snapshot temp=%s humidity=%s rain=%s code=%s",
            snapshot.temperature_c, snapshot.humidity_pct, snapshot.rainfall_mm, code,
        )
        return snapshot

    def close(self):
        self.session.close()
