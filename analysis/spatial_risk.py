"""
ClimaTrack — Nearby Zone Assessment

Lays a jittered grid of zones around a centre point, then scores and names
each one. Place names are resolved concurrently; the shared PlaceResolver
serialises the actual network calls.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Dict, List, Optional

import numpy as np

from analysis.prediction_engine import predict
from data_fetch.data_pipeline import DataPipeline
from data_fetch.geocoding_client import PlaceResolver
from features.geo_features import distance_km
from models.entities import Coordinate

KM_PER_DEG_LAT = 111.32
JITTER_FRACTION = 0.3

STATUS_LABELS = {
    "safe": "Safe",
    "moderate": "Moderate",
    "poor": "Poor",
    "critical": "Critical",
}


def build_zone_grid(
    center: Coordinate,
    radius_km: float = 10.0,
    n_zones: int = 12,
    rng: Optional[np.random.Generator] = None,
) -> List[Dict]:
    """
    Generate up to ``n_zones`` zone centres around ``center``.

    Strategy:
      - Square grid of ceil(sqrt(n)) cells per side spanning ±radius_km.
      - Each centre is jittered by up to ±15 % of a grid step.
      - Zones are returned nearest first.

    Returns
    -------
    list of dict with keys: id, name, lat, lon, distance_km
    """
    rng = rng or np.random.default_rng()
    grid = math.ceil(math.sqrt(n_zones))

    cos_lat = max(math.cos(math.radians(center.latitude)), 1e-6)
    half_lat = radius_km / KM_PER_DEG_LAT
    half_lon = radius_km / (KM_PER_DEG_LAT * cos_lat)
    step_lat = 2 * half_lat / grid
    step_lon = 2 * half_lon / grid

    zones = []
    zone_id = 1
    for i in range(grid):
        for j in range(grid):
            if zone_id > n_zones:
                break
            lat = center.latitude - half_lat + i * step_lat
            lon = center.longitude - half_lon + j * step_lon
            lat += (rng.random() - 0.5) * step_lat * JITTER_FRACTION
            lon += (rng.random() - 0.5) * step_lon * JITTER_FRACTION

            lon = ((lon + 180.0) % 360.0) - 180.0
            point = Coordinate(float(np.clip(lat, -90, 90)), float(lon))
            zones.append({
                "id": f"zone_{zone_id}",
                "name": "Loading...",
                "lat": point.latitude,
                "lon": point.longitude,
                "distance_km": round(distance_km(center, point), 3),
            })
            zone_id += 1

    zones.sort(key=lambda z: z["distance_km"])
    return zones


def assess_zones(
    zones: List[Dict],
    pipeline: DataPipeline,
    resolver: PlaceResolver,
    target_date: Optional[datetime] = None,
    max_workers: int = 4,
) -> List[Dict]:
    """
    Attach a place name, prediction and status label to each zone.

    Returns new dicts; the input list is not modified.
    """
    coords = [Coordinate(z["lat"], z["lon"]) for z in zones]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        names = list(pool.map(resolver.resolve_place_name, coords))

    assessed = []
    for zone, coord, name in zip(zones, coords, names):
        raw = pipeline.fetch_all(coord)
        prediction = predict(coord, raw["reports"], raw["weather"], target_date)
        assessed.append({
            **zone,
            "name": name,
            "prediction": prediction,
            "quality_score": round(prediction.score, 1),
            "status": STATUS_LABELS[prediction.quality_level.value],
            "errors": raw["errors"],
        })
    return assessed
