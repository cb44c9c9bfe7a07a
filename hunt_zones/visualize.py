from typing import Optional, Sequence

import matplotlib.pyplot as plt

from .geo.frames import LocalFrame
from .geo.types import lat_lng
from .zones.planner import Zone
from .zones.queries import calculate_overall_bounds


def plot_zones(
    pois: Sequence,
    zones: Sequence[Zone],
    ax: Optional[plt.Axes] = None,
    frame: Optional[LocalFrame] = None,
    pad: float = 200.0,
):
    """
    Plot POIs coloured by zone, with each zone's bounding box, in a local
    metric frame (UTM zone around the overall bounds unless `frame` is given).
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(7, 7))

    overall = calculate_overall_bounds(zones)
    if overall is None:
        ax.set_title("Zones (none)")
        return ax

    if frame is None:
        frame = LocalFrame.for_bounds(overall)

    all_x, all_y = [], []
    for zone in zones:
        xs, ys = [], []
        for i in zone.poi_indices:
            x, y = frame.to_local(*lat_lng(pois[i]))
            xs.append(x); ys.append(y)
        (line,) = ax.plot(xs, ys, "o", ms=5, label=f"{zone.id} (z{zone.zoom})")

        # bounds polygon is in (lng, lat); project its ring to local meters
        ring = zone.bounds.as_polygon().exterior
        bx, by = zip(*(frame.to_local(lat, lng) for lng, lat in ring.coords))
        ax.plot(bx, by, "--", lw=1, color=line.get_color())
        ax.fill(bx, by, alpha=0.1, color=line.get_color())

        cx, cy = frame.to_local(zone.center.lat, zone.center.lng)
        ax.annotate(zone.id, (cx, cy), ha="center", fontsize=8)

        all_x.extend(bx); all_y.extend(by)

    # --- bounds handling ---
    ax.set_xlim(min(all_x) - pad, max(all_x) + pad)
    ax.set_ylim(min(all_y) - pad, max(all_y) + pad)

    ax.set_aspect("equal", "box")
    ax.set_xlabel("x (m, local)")
    ax.set_ylabel("y (m, local)")
    ax.legend(fontsize=8)
    ax.set_title(f"Zones ({len(zones)})")
    return ax
