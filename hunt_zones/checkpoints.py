"""
Checkpoint validators: decide whether a player's submission completes a POI.
"""

from enum import Enum

from .geo.distance import haversine_distance


class ValidationType(str, Enum):
    PHOTO_ONLY = "PHOTO_ONLY"
    GPS_RADIUS = "GPS_RADIUS"
    QR_CODE = "QR_CODE"
    MANUAL = "MANUAL"


def photo_only() -> bool:
    """No location check; the photo alone completes the checkpoint."""
    return True


def manual() -> bool:
    """Accessibility fallback for manual completion."""
    return True


def qr_code(scanned: str, expected: str) -> bool:
    # case-sensitive
    return scanned == expected


def gps_radius(
    user_lat: float,
    user_lng: float,
    poi_lat: float,
    poi_lng: float,
    radius_meters: float,
) -> bool:
    """True if the user is within `radius_meters` of the POI."""
    return haversine_distance(user_lat, user_lng, poi_lat, poi_lng) <= radius_meters
