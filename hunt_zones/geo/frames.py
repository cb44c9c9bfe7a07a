from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pyproj import CRS, Transformer

from .projection import calculate_center
from .types import Bounds


@dataclass
class LocalFrame:
    """
    Local metric frame (UTM zone) for plotting lat/lng data in meters.

    The zone clustering itself never uses this; it works on haversine
    distances directly.
    """

    epsg_code: int
    transformer_to_local: Transformer
    transformer_to_geo: Transformer

    @classmethod
    def for_bounds(cls, bounds: Bounds) -> "LocalFrame":
        center = calculate_center(bounds)

        # UTM zone: 1-60
        zone = int((center.lng + 180) // 6) + 1
        zone = min(max(zone, 1), 60)

        # Northern: 326XX, Southern: 327XX
        epsg_code = 32600 + zone if center.lat >= 0 else 32700 + zone

        crs_geo = CRS.from_epsg(4326)  # WGS84
        crs_local = CRS.from_epsg(epsg_code)

        return cls(
            epsg_code=epsg_code,
            transformer_to_local=Transformer.from_crs(crs_geo, crs_local, always_xy=True),
            transformer_to_geo=Transformer.from_crs(crs_local, crs_geo, always_xy=True),
        )

    def to_local(self, lat: float, lng: float) -> Tuple[float, float]:
        """
        (lat, lng) -> (x, y) in meters in the local frame.
        """
        x, y = self.transformer_to_local.transform(lng, lat)
        return float(x), float(y)

    def to_geo(self, x: float, y: float) -> Tuple[float, float]:
        """
        (x, y) in the local frame -> (lat, lng).
        """
        lng, lat = self.transformer_to_geo.transform(x, y)
        return float(lat), float(lng)
