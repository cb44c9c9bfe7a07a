from collections.abc import Mapping
from dataclasses import dataclass
from typing import Tuple

from shapely.geometry import Polygon, box


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float


@dataclass(frozen=True)
class Bounds:
    # Axis-aligned lat/lng box, no antimeridian wraparound
    north: float
    south: float
    east: float
    west: float

    def as_polygon(self) -> Polygon:
        """Shapely box in (lng, lat) order."""
        return box(self.west, self.south, self.east, self.north)


@dataclass(frozen=True)
class MapSize:
    width: int = 400   # px
    height: int = 700  # px, portrait mobile


def lat_lng(point) -> Tuple[float, float]:
    """
    Read (lat, lng) from a mapping with "lat"/"lng" keys or from an object
    with lat/lng attributes. Any other field is ignored.
    """
    if isinstance(point, Mapping):
        return float(point["lat"]), float(point["lng"])
    return float(point.lat), float(point.lng)
