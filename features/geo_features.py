"""
ClimaTrack — Geo Math

Great-circle distance (haversine) between two coordinates.
"""

import math

from config.constants import EARTH_RADIUS_KM
from models.entities import Coordinate


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometres. Symmetric; zero for identical points."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude))
        * math.cos(math.radians(b.latitude))
        * math.sin(d_lon / 2) ** 2
    )
    h = min(h, 1.0)  # rounding near antipodes can push h past 1
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c
