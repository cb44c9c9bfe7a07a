
from .types import Bounds, Coordinate, MapSize, lat_lng
from .distance import EARTH_RADIUS_METERS, haversine_distance, haversine_matrix
from .projection import MAX_ZOOM, MIN_ZOOM, calculate_bounds, calculate_center, calculate_zoom
from .frames import LocalFrame

__all__ = [
    "Bounds",
    "Coordinate",
    "MapSize",
    "lat_lng",
    "EARTH_RADIUS_METERS",
    "haversine_distance",
    "haversine_matrix",
    "MIN_ZOOM",
    "MAX_ZOOM",
    "calculate_bounds",
    "calculate_center",
    "calculate_zoom",
    "LocalFrame",
]
