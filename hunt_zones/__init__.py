
from .geo import (
    Bounds,
    Coordinate,
    MapSize,
    calculate_bounds,
    calculate_center,
    calculate_zoom,
    haversine_distance,
)
from .zones import (
    TransportMode,
    Zone,
    ZoneConfig,
    ZonePlanner,
    calculate_overall_bounds,
    get_zone_pois,
    plan_zones,
)

__all__ = [
    "Bounds",
    "Coordinate",
    "MapSize",
    "calculate_bounds",
    "calculate_center",
    "calculate_zoom",
    "haversine_distance",
    "TransportMode",
    "Zone",
    "ZoneConfig",
    "ZonePlanner",
    "calculate_overall_bounds",
    "get_zone_pois",
    "plan_zones",
]
