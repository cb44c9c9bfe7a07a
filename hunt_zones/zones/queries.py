from typing import List, Optional, Sequence, TypeVar

from ..geo.types import Bounds
from .planner import Zone

T = TypeVar("T")


def get_zone_pois(pois: Sequence[T], zone: Zone) -> List[T]:
    """POIs of `zone`, in the order stored in zone.poi_indices."""
    return [pois[i] for i in zone.poi_indices]


def calculate_overall_bounds(zones: Sequence[Zone]) -> Optional[Bounds]:
    """
    Box enclosing the bounds of every zone (birds-eye overview), or None
    when there are no zones.
    """
    if not zones:
        return None

    return Bounds(
        north=max(z.bounds.north for z in zones),
        south=min(z.bounds.south for z in zones),
        east=max(z.bounds.east for z in zones),
        west=min(z.bounds.west for z in zones),
    )


def find_zone_for_poi(zones: Sequence[Zone], poi_index: int) -> Optional[Zone]:
    for zone in zones:
        if poi_index in zone.poi_indices:
            return zone
    return None
