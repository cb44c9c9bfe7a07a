
from .config import (
    DEFAULT_MAX_TRAVEL_MINUTES,
    TRANSPORT_SPEEDS_KMH,
    ZONE_PRESETS,
    ResolvedZoneConfig,
    TransportMode,
    ZoneConfig,
    zone_diameter_meters,
)
from .planner import Zone, ZonePlanner, plan_zones
from .queries import calculate_overall_bounds, find_zone_for_poi, get_zone_pois
from .report import ZoneReport, describe_zones, travel_minutes

__all__ = [
    "DEFAULT_MAX_TRAVEL_MINUTES",
    "TRANSPORT_SPEEDS_KMH",
    "ZONE_PRESETS",
    "ResolvedZoneConfig",
    "TransportMode",
    "ZoneConfig",
    "zone_diameter_meters",
    "Zone",
    "ZonePlanner",
    "plan_zones",
    "calculate_overall_bounds",
    "find_zone_for_poi",
    "get_zone_pois",
    "ZoneReport",
    "describe_zones",
    "travel_minutes",
]
