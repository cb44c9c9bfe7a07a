"""
Bounds, center and zoom helpers on the 256 px slippy-map tile model.

Longitudes are treated as a plain interval: bounds that cross the
antimeridian are not supported.
"""

import math
from typing import Iterable

from shapely.geometry import MultiPoint

from .types import Bounds, Coordinate, MapSize, lat_lng

MIN_ZOOM = 1
MAX_ZOOM = 18
WORLD_TILE_PX = 256


def calculate_bounds(coordinates: Iterable) -> Bounds:
    """
    Exact bounding box of a non-empty set of points.

    Raises ValueError when no coordinate is given.
    """
    points = [lat_lng(c) for c in coordinates]
    if not points:
        raise ValueError("At least one coordinate required")

    # shapely works in (x, y) = (lng, lat)
    west, south, east, north = MultiPoint([(lng, lat) for lat, lng in points]).bounds
    return Bounds(north=north, south=south, east=east, west=west)


def calculate_center(bounds: Bounds) -> Coordinate:
    return Coordinate(
        lat=(bounds.north + bounds.south) / 2,
        lng=(bounds.east + bounds.west) / 2,
    )


def _lat_rad(lat: float) -> float:
    """Mercator y of a latitude, scaled so the world spans [-pi/2, pi/2]."""
    sin = math.sin(math.radians(lat))
    if sin >= 1.0:
        rad_x2 = math.inf
    elif sin <= -1.0:
        rad_x2 = -math.inf
    else:
        rad_x2 = math.log((1 + sin) / (1 - sin)) / 2
    return max(min(rad_x2, math.pi), -math.pi) / 2


def _axis_zoom(map_px: float, fraction: float) -> float:
    # a point-sized extent fits at any zoom; the final clamp brings it to MAX_ZOOM
    if fraction <= 0:
        return math.inf
    if map_px <= 0:
        return -math.inf
    return math.floor(math.log2(map_px / WORLD_TILE_PX / fraction))


def calculate_zoom(bounds: Bounds, map_size: MapSize) -> int:
    """
    Largest zoom at which `bounds` fits into a viewport of `map_size` pixels
    (Leaflet fitBounds), clamped to [MIN_ZOOM, MAX_ZOOM].
    """
    lat_fraction = (_lat_rad(bounds.north) - _lat_rad(bounds.south)) / math.pi

    lng_diff = bounds.east - bounds.west
    lng_fraction = (lng_diff + 360 if lng_diff < 0 else lng_diff) / 360

    lat_zoom = _axis_zoom(map_size.height, lat_fraction)
    lng_zoom = _axis_zoom(map_size.width, lng_fraction)

    zoom = min(lat_zoom, lng_zoom, MAX_ZOOM)
    return int(max(MIN_ZOOM, min(MAX_ZOOM, zoom)))
