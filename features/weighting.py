"""
ClimaTrack — Report Weighting

Converts report age and distance into decay weights for aggregation.
Both are step functions with inclusive upper bounds: sparse community data
is down-weighted sharply past fixed ages and radii.
"""

from datetime import datetime

from config.constants import (
    DISTANCE_WEIGHT_FLOOR,
    DISTANCE_WEIGHT_TIERS,
    TIME_WEIGHT_FLOOR,
    TIME_WEIGHT_TIERS,
)


def time_weight(age_in_days: float) -> float:
    for upper, weight in TIME_WEIGHT_TIERS:
        if age_in_days <= upper:
            return weight
    return TIME_WEIGHT_FLOOR


def distance_weight(km: float) -> float:
    for upper, weight in DISTANCE_WEIGHT_TIERS:
        if km <= upper:
            return weight
    return DISTANCE_WEIGHT_FLOOR


def report_age_days(timestamp: datetime, now: datetime) -> int:
    """
    Whole days elapsed between ``timestamp`` and ``now`` (floored).

    A naive timestamp is read in ``now``'s timezone and vice versa, so
    callers may mix local and UTC-aware values.
    """
    if timestamp.tzinfo is None and now.tzinfo is not None:
        timestamp = timestamp.replace(tzinfo=now.tzinfo)
    elif timestamp.tzinfo is not None and now.tzinfo is None:
        now = now.replace(tzinfo=timestamp.tzinfo)
    return (now - timestamp).days
