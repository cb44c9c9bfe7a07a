import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from ..geo.types import MapSize


class TransportMode(str, Enum):
    WALK = "walk"
    BIKE = "bike"
    CAR = "car"

    @property
    def speed_kmh(self) -> float:
        return TRANSPORT_SPEEDS_KMH[self]


# Average speeds [km/h]
TRANSPORT_SPEEDS_KMH: Dict[TransportMode, float] = {
    TransportMode.WALK: 5.0,
    TransportMode.BIKE: 15.0,
    TransportMode.CAR: 40.0,  # city driving
}

DEFAULT_MAX_TRAVEL_MINUTES = 20.0
DEFAULT_MIN_POIS_PER_ZONE = 3
DEFAULT_MAX_POIS_PER_ZONE = 10


def zone_diameter_meters(
    mode: Union[TransportMode, str], minutes: float = DEFAULT_MAX_TRAVEL_MINUTES
) -> int:
    """
    Distance covered in `minutes` at the mode's average speed, rounded
    half-up to whole meters (walk 1667, bike 5000, car 13333 for 20 min).
    """
    speed = TransportMode(mode).speed_kmh
    return int(math.floor((minutes / 60) * speed * 1000 + 0.5))


@dataclass
class ZoneConfig:
    # Any field left as None takes its default in resolve()

    # Drives the radius/diameter defaults below
    transport_mode: Optional[Union[TransportMode, str]] = TransportMode.WALK

    min_pois_per_zone: Optional[int] = DEFAULT_MIN_POIS_PER_ZONE
    max_pois_per_zone: Optional[int] = DEFAULT_MAX_POIS_PER_ZONE

    # Max distance from the seed POI [m]; None -> derived from transport_mode
    cluster_radius_meters: Optional[float] = None

    # Max distance between any two POIs of a zone [m];
    # None -> derived from transport_mode, 0 -> 2 * cluster radius
    max_zone_diameter_meters: Optional[float] = None

    # Viewport used for zoom
    map_size: Optional[MapSize] = field(default_factory=MapSize)

    def resolve(self) -> "ResolvedZoneConfig":
        """Fill every unset field from its default."""
        mode = TransportMode.WALK if self.transport_mode is None else TransportMode(self.transport_mode)
        auto_diameter = zone_diameter_meters(mode)

        return ResolvedZoneConfig(
            transport_mode=mode,
            min_pois_per_zone=(
                DEFAULT_MIN_POIS_PER_ZONE if self.min_pois_per_zone is None else self.min_pois_per_zone
            ),
            max_pois_per_zone=(
                DEFAULT_MAX_POIS_PER_ZONE if self.max_pois_per_zone is None else self.max_pois_per_zone
            ),
            cluster_radius_meters=(
                auto_diameter if self.cluster_radius_meters is None else self.cluster_radius_meters
            ),
            max_zone_diameter_meters=(
                auto_diameter if self.max_zone_diameter_meters is None else self.max_zone_diameter_meters
            ),
            map_size=MapSize() if self.map_size is None else self.map_size,
        )


@dataclass(frozen=True)
class ResolvedZoneConfig:
    transport_mode: TransportMode
    min_pois_per_zone: int
    max_pois_per_zone: int
    cluster_radius_meters: float
    max_zone_diameter_meters: float
    map_size: MapSize

    @property
    def effective_max_diameter(self) -> float:
        if self.max_zone_diameter_meters > 0:
            return self.max_zone_diameter_meters
        return 2 * self.cluster_radius_meters


def _walking_minutes_to_meters(minutes: float) -> float:
    return (minutes / 60) * TRANSPORT_SPEEDS_KMH[TransportMode.WALK] * 1000


ZONE_PRESETS: Dict[str, ZoneConfig] = {
    "walk": ZoneConfig(transport_mode=TransportMode.WALK, min_pois_per_zone=3, max_pois_per_zone=10),
    "bike": ZoneConfig(transport_mode=TransportMode.BIKE, min_pois_per_zone=4, max_pois_per_zone=12),
    "car": ZoneConfig(transport_mode=TransportMode.CAR, min_pois_per_zone=5, max_pois_per_zone=15),
    # fixed walking-time sizes, independent of transport mode
    "tight": ZoneConfig(
        cluster_radius_meters=_walking_minutes_to_meters(10),
        max_zone_diameter_meters=_walking_minutes_to_meters(10),
        min_pois_per_zone=3,
        max_pois_per_zone=6,
    ),
    "relaxed": ZoneConfig(
        cluster_radius_meters=_walking_minutes_to_meters(20),
        max_zone_diameter_meters=_walking_minutes_to_meters(20),
        min_pois_per_zone=3,
        max_pois_per_zone=10,
    ),
}
