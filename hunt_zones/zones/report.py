"""
Per-zone statistics used when tuning zone configurations.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import List, Sequence, Union

from ..geo.distance import haversine_distance
from ..geo.types import lat_lng
from .config import TransportMode
from .planner import Zone
from .queries import get_zone_pois


@dataclass
class ZoneReport:
    zone_id: str
    n_pois: int
    zoom: int
    ns_span_m: float       # north-south extent through the center
    ew_span_m: float       # east-west extent through the center
    max_pair_m: float      # largest distance between two member POIs
    max_travel_min: float  # max_pair_m at the transport mode's speed


def travel_minutes(meters: float, mode: Union[TransportMode, str]) -> float:
    return meters / 1000 / TransportMode(mode).speed_kmh * 60


def describe_zones(
    pois: Sequence,
    zones: Sequence[Zone],
    transport_mode: Union[TransportMode, str] = TransportMode.WALK,
) -> List[ZoneReport]:
    reports = []
    for zone in zones:
        members = [lat_lng(p) for p in get_zone_pois(pois, zone)]

        max_pair = 0.0
        for (lat1, lng1), (lat2, lng2) in combinations(members, 2):
            max_pair = max(max_pair, haversine_distance(lat1, lng1, lat2, lng2))

        b, c = zone.bounds, zone.center
        reports.append(
            ZoneReport(
                zone_id=zone.id,
                n_pois=len(members),
                zoom=zone.zoom,
                ns_span_m=haversine_distance(b.north, c.lng, b.south, c.lng),
                ew_span_m=haversine_distance(c.lat, b.west, c.lat, b.east),
                max_pair_m=max_pair,
                max_travel_min=travel_minutes(max_pair, transport_mode),
            )
        )
    return reports
