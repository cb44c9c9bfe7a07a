from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..geo.distance import haversine_distance, haversine_matrix
from ..geo.projection import calculate_bounds, calculate_center, calculate_zoom
from ..geo.types import Bounds, Coordinate, lat_lng
from .config import ResolvedZoneConfig, ZoneConfig

Cluster = List[int]

# Zones whose north edges are closer than this [deg] are ordered west to east
SAME_ROW_TOLERANCE_DEG = 0.01


@dataclass
class Zone:
    id: str
    poi_indices: List[int]  # positions in the caller's POI list
    bounds: Bounds
    center: Coordinate
    zoom: int


class ZonePlanner:
    """
    Greedy geographic clustering of POIs into zones sized for a travel mode.

    1. Seed-and-grow: POIs are visited north to south; each unassigned POI
       seeds a cluster which takes the nearest unassigned POIs within the
       cluster radius, as long as the cluster stays under the max size and
       max diameter.
    2. Merge pass: clusters smaller than the min size are merged into the
       nearest compatible cluster until nothing changes.
    3. Each cluster becomes a Zone with bounds, center and zoom; zones are
       ordered north to south, then west to east.

    The result is deterministic for a given input and config. A planner
    keeps no state between calls.
    """

    def __init__(self, cfg: Optional[ZoneConfig] = None, verbose: bool = False):
        self.cfg = cfg or ZoneConfig()
        self.verbose = verbose

    # ---------- public API ----------

    def plan(self, pois: Sequence) -> List[Zone]:
        """
        Partition `pois` (items with lat/lng keys or attributes) into zones.

        Every input index ends up in exactly one zone.
        """
        if len(pois) == 0:
            return []

        cfg = self.cfg.resolve()
        coords = [lat_lng(p) for p in pois]
        dist = haversine_matrix([c[0] for c in coords], [c[1] for c in coords])

        clusters = self._grow_clusters(coords, dist, cfg)
        n_initial = len(clusters)
        clusters = self._merge_small_clusters(clusters, coords, dist, cfg)

        zones = [self._make_zone(cluster, coords, cfg) for cluster in clusters]
        zones = sorted(zones, key=cmp_to_key(_presentation_order))
        for position, zone in enumerate(zones):
            zone.id = f"zone-{position}"

        if self.verbose:
            print(
                f"[ZONES] {len(pois)} POIs -> {n_initial} clusters -> {len(zones)} zones "
                f"({cfg.transport_mode.value}, radius {cfg.cluster_radius_meters:.0f} m, "
                f"diameter {cfg.effective_max_diameter:.0f} m)"
            )
        return zones

    # ---------- seed-and-grow ----------

    @staticmethod
    def _seed_order(coords: Sequence[Tuple[float, float]]) -> List[int]:
        # sorted() is stable: equal latitudes keep input order
        return sorted(range(len(coords)), key=lambda i: -coords[i][0])

    def _grow_clusters(
        self,
        coords: Sequence[Tuple[float, float]],
        dist: np.ndarray,
        cfg: ResolvedZoneConfig,
    ) -> List[Cluster]:
        max_diameter = cfg.effective_max_diameter
        order = self._seed_order(coords)
        assigned = [False] * len(coords)
        clusters: List[Cluster] = []

        for seed in order:
            if assigned[seed]:
                continue

            cluster = [seed]
            assigned[seed] = True

            candidates = [
                (float(dist[seed, i]), i)
                for i in order
                if not assigned[i] and dist[seed, i] <= cfg.cluster_radius_meters
            ]
            candidates.sort(key=lambda c: c[0])

            for _, i in candidates:
                if len(cluster) >= cfg.max_pois_per_zone:
                    break
                # diameter is checked against every member, so chains cannot drift
                if dist[i, cluster].max() > max_diameter:
                    continue
                cluster.append(i)
                assigned[i] = True

            clusters.append(cluster)

        if self.verbose:
            print(f"[ZONES] Seed-and-grow produced {len(clusters)} clusters")
        return clusters

    # ---------- merge pass ----------

    @staticmethod
    def _centroid(cluster: Cluster, coords: Sequence[Tuple[float, float]]) -> Tuple[float, float]:
        """Arithmetic mean of member lat/lng (not a geodesic centroid)."""
        lat = sum(coords[i][0] for i in cluster) / len(cluster)
        lng = sum(coords[i][1] for i in cluster) / len(cluster)
        return lat, lng

    def _best_partner(
        self,
        k: int,
        clusters: List[Cluster],
        centroids: Sequence[Tuple[float, float]],
        dist: np.ndarray,
        cfg: ResolvedZoneConfig,
    ) -> Optional[int]:
        """
        Index of the cluster with the nearest centroid that fits the size and
        centroid-distance limits, or None if there is none or if merging with
        it would put some pair of POIs farther apart than the max diameter.
        Only the nearest candidate is cross-checked.
        """
        max_diameter = cfg.effective_max_diameter
        small = clusters[k]
        c_lat, c_lng = centroids[k]

        best, best_distance = None, float("inf")
        for j, other in enumerate(clusters):
            if j == k:
                continue
            if len(small) + len(other) > cfg.max_pois_per_zone:
                continue

            o_lat, o_lng = centroids[j]
            d = haversine_distance(c_lat, c_lng, o_lat, o_lng)
            if d <= max_diameter and d < best_distance:
                best, best_distance = j, d

        if best is None:
            return None
        # every cross pair must fit within the diameter
        if dist[np.ix_(small, clusters[best])].max() > max_diameter:
            return None
        return best

    def _merge_small_clusters(
        self,
        clusters: List[Cluster],
        coords: Sequence[Tuple[float, float]],
        dist: np.ndarray,
        cfg: ResolvedZoneConfig,
    ) -> List[Cluster]:
        working = [list(c) for c in clusters]
        n_merges = 0

        # each merge removes one cluster, so this terminates
        changed = True
        while changed and len(working) > 1:
            changed = False
            # clusters only change on a merge, which ends the pass
            centroids = [self._centroid(c, coords) for c in working]
            for k in range(len(working)):
                if len(working[k]) >= cfg.min_pois_per_zone:
                    continue

                j = self._best_partner(k, working, centroids, dist, cfg)
                if j is None:
                    continue

                working[k] = working[k] + working[j]
                del working[j]
                n_merges += 1
                changed = True
                break  # rescan from the top

        if self.verbose and n_merges:
            print(f"[ZONES] Merged {n_merges} undersized clusters")
        return working

    # ---------- annotation ----------

    @staticmethod
    def _make_zone(
        cluster: Cluster,
        coords: Sequence[Tuple[float, float]],
        cfg: ResolvedZoneConfig,
    ) -> Zone:
        bounds = calculate_bounds(Coordinate(*coords[i]) for i in cluster)
        return Zone(
            id="",
            poi_indices=list(cluster),
            bounds=bounds,
            center=calculate_center(bounds),
            zoom=calculate_zoom(bounds, cfg.map_size),
        )


def _presentation_order(a: Zone, b: Zone) -> int:
    """North to south; zones on roughly the same row go west to east."""
    if abs(a.bounds.north - b.bounds.north) > SAME_ROW_TOLERANCE_DEG:
        diff = b.bounds.north - a.bounds.north
    else:
        diff = a.bounds.west - b.bounds.west
    return (diff > 0) - (diff < 0)


def plan_zones(pois: Sequence, config: Optional[ZoneConfig] = None) -> List[Zone]:
    """Plan zones for `pois` with `config` (defaults for anything unset)."""
    return ZonePlanner(config).plan(pois)
