"""
Great-circle distances on a spherical Earth (haversine).
"""

import math
from typing import Sequence

import numpy as np

EARTH_RADIUS_METERS = 6_371_000.0


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Surface distance in meters between two (lat, lng) points in degrees.

    Exactly 0 for identical points and symmetric in its arguments.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # rounding can push near-antipodal pairs just above 1
    a = min(max(a, 0.0), 1.0)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def haversine_matrix(lats: Sequence[float], lngs: Sequence[float]) -> np.ndarray:
    """
    Pairwise haversine distances, shape (n, n), in meters.

    Same formula as haversine_distance, vectorised: entry [i, j] is the
    distance between point i and point j. The diagonal is 0.
    """
    lat = np.asarray(lats, dtype=float)
    lng = np.asarray(lngs, dtype=float)

    d_lat = np.radians(lat[None, :] - lat[:, None])
    d_lng = np.radians(lng[None, :] - lng[:, None])
    cos_lat = np.cos(np.radians(lat))

    a = np.sin(d_lat / 2) ** 2 + np.outer(cos_lat, cos_lat) * np.sin(d_lng / 2) ** 2
    a = np.clip(a, 0.0, 1.0)

    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c
