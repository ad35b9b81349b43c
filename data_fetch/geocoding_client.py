"""
ClimaTrack — Place Name Resolver

Reverse geocoding via OpenStreetMap Nominatim with:
  - an in-memory cache keyed on the coordinate rounded to 4 decimals (~11 m)
  - a minimum 1 s spacing between outbound requests (Nominatim usage policy),
    enforced across every thread sharing the resolver
  - a deterministic coordinate-based label whenever the lookup fails

``resolve_place_name`` never raises.

Nominatim usage policy: https://operations.osmfoundation.org/policies/nominatim/
"""

import logging
import threading
import time
from typing import Callable, Dict, Optional

import requests

from config.constants import NOMINATIM, NOMINATIM_REVERSE
from models.entities import Coordinate

logger = logging.getLogger(__name__)


class PlaceResolver:
    """Cached, rate-limited reverse geocoder. Share one instance per process."""

    REVERSE_URL = NOMINATIM_REVERSE

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        min_interval_s: float = NOMINATIM["min_interval_s"],
        timeout_s: float = NOMINATIM["timeout_s"],
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = base_url or self.REVERSE_URL
        self.min_interval_s = min_interval_s
        self.timeout_s = timeout_s
        self._clock = clock
        self._sleep = sleep

        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": NOMINATIM["user_agent"],
            "Accept": "application/json",
        })

        self.cache: Dict[str, str] = {}
        self._cache_lock = threading.Lock()
        # Held across wait → request → stamp so concurrent callers queue up.
        self._request_lock = threading.Lock()
        self._last_request_at: Optional[float] = None

    # -----------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------
    def resolve_place_name(self, coordinate: Coordinate) -> str:
        """Human-readable label for a coordinate. Never raises."""
        rounded = coordinate.rounded()
        cache_key = self.cache_key(rounded)

        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        with self._request_lock:
            # Another caller may have resolved this cell while we waited.
            cached = self._cache_get(cache_key)
            if cached is not None:
                return cached

            self._wait_for_slot()
            label = self._lookup(rounded)
            self._cache_put(cache_key, label)

        return label

    def clear_cache(self):
        with self._cache_lock:
            self.cache.clear()

    @property
    def cache_size(self) -> int:
        with self._cache_lock:
            return len(self.cache)

    @staticmethod
    def cache_key(coordinate: Coordinate) -> str:
        return f"{coordinate.latitude:.4f}_{coordinate.longitude:.4f}"

    @staticmethod
    def fallback_name(coordinate: Coordinate) -> str:
        return f"Area {coordinate.latitude:.3f}°, {coordinate.longitude:.3f}°"

    # -----------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------
    def _cache_get(self, key: str) -> Optional[str]:
        with self._cache_lock:
            return self.cache.get(key)

    def _cache_put(self, key: str, label: str):
        with self._cache_lock:
            self.cache[key] = label

    def _wait_for_slot(self):
        """Sleep out the rest of the minimum interval, then stamp. Caller holds the request lock."""
        if self._last_request_at is not None:
            elapsed = self._clock() - self._last_request_at
            if elapsed < self.min_interval_s:
                self._sleep(self.min_interval_s - elapsed)
        self._last_request_at = self._clock()

    def _lookup(self, coordinate: Coordinate) -> str:
        params = {
            "format": "json",
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "zoom": NOMINATIM["zoom"],
            "addressdetails": 1,
        }
        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.warning(
                "geocode.fallback lat=%s lon=%s reason=%s",
                coordinate.latitude, coordinate.longitude, e,
            )
            return self.fallback_name(coordinate)
        except Exception as e:
            logger.warning(
                "geocode.fallback lat=%s lon=%s reason=unexpected_error err=%r",
                coordinate.latitude, coordinate.longitude, e,
            )
            return self.fallback_name(coordinate)

        if resp.status_code != 200:
            logger.warning(
                "geocode.fallback lat=%s lon=%s reason=status_%s",
                coordinate.latitude, coordinate.longitude, resp.status_code,
            )
            return self.fallback_name(coordinate)

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning(
                "geocode.fallback lat=%s lon=%s reason=invalid_json err=%s",
                coordinate.latitude, coordinate.longitude, e,
            )
            return self.fallback_name(coordinate)

        if not isinstance(data, dict):
            logger.warning(
                "geocode.fallback lat=%s lon=%s reason=unexpected_body",
                coordinate.latitude, coordinate.longitude,
            )
            return self.fallback_name(coordinate)

        return extract_place_name(data)


def extract_place_name(data: Dict) -> str:
    """
    Pick the most specific label from a Nominatim reverse response.

    Address fields are tried in priority order; otherwise the first
    comma-separated segment of ``display_name``; otherwise "Unknown Area".
    """
    address = data.get("address")
    if isinstance(address, dict):
        for field_name in NOMINATIM["name_fields"]:
            value = address.get(field_name)
            if value is not None:
                return str(value)

    display_name = data.get("display_name")
    if display_name is not None:
        return str(display_name).split(",")[0]
    return NOMINATIM["unknown_label"]
