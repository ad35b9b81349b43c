"""
ClimaTrack — Proximity Impact Modifier

Coastal and urban membership are approximated with fixed bounding boxes
around the Lagos metropolitan area. A point may sit in both.
"""

from typing import Dict, List

from config.constants import PROXIMITY_BOXES
from models.entities import Coordinate


def _in_box(coord: Coordinate, box: Dict) -> bool:
    lat_min, lat_max = box["lat"]
    lon_min, lon_max = box["lon"]
    return lat_min < coord.latitude < lat_max and lon_min < coord.longitude < lon_max


def is_near_coast(coord: Coordinate) -> bool:
    return _in_box(coord, PROXIMITY_BOXES["coastal"])


def is_urban_area(coord: Coordinate) -> bool:
    return _in_box(coord, PROXIMITY_BOXES["urban"])


def proximity_impact(coord: Coordinate) -> float:
    impact = 0.0
    if is_near_coast(coord):
        impact += PROXIMITY_BOXES["coastal"]["impact"]
    if is_urban_area(coord):
        impact += PROXIMITY_BOXES["urban"]["impact"]
    return impact


def compute_proximity_features(coord: Coordinate) -> Dict:
    """Proximity modifier with the zones that triggered it."""
    zones: List[str] = [name for name, box in PROXIMITY_BOXES.items() if _in_box(coord, box)]
    return {
        "impact": proximity_impact(coord),
        "zones": zones,
        "factors": [PROXIMITY_BOXES[z]["label"] for z in zones],
    }
