from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import fiona
from shapely.geometry import shape


@dataclass
class PointOfInterest:
    lat: float
    lng: float
    name: Optional[str] = None


def load_pois(path: Union[str, Path], name_field: str = "name") -> List[PointOfInterest]:
    """
    Read point features from a vector file (GeoJSON, shapefile, GeoPackage...)
    in WGS84 lon/lat.

    Features without a point geometry are skipped. The file order is kept,
    so the returned list can be handed straight to the zone planner.
    """
    pois: List[PointOfInterest] = []

    with fiona.open(str(path), "r") as src:
        for feat in src:
            if feat["geometry"] is None:
                continue
            geom = shape(feat["geometry"])  # shapely geometry in lon/lat
            if geom.is_empty or geom.geom_type != "Point":
                continue

            props = feat["properties"] or {}
            name = props.get(name_field)
            pois.append(PointOfInterest(lat=float(geom.y), lng=float(geom.x), name=name))

    print(f"[IO] Loaded {len(pois)} POIs from: {path}")
    return pois
