"""
Zone planner tuning.

Shows how POIs get clustered into zones for a preset, to tune the
configuration.

    python examples/tune_zone_planner.py [preset] [--pois SET]
    python examples/tune_zone_planner.py [preset] --all-pois
    python examples/tune_zone_planner.py all --pois linear
    python examples/tune_zone_planner.py walk --file pois.geojson --plot
"""

import argparse
from typing import Dict, List

import matplotlib.pyplot as plt

from hunt_zones.io import PointOfInterest, load_pois
from hunt_zones.visualize import plot_zones
from hunt_zones.zones import (
    ZONE_PRESETS,
    TransportMode,
    ZoneConfig,
    describe_zones,
    get_zone_pois,
    plan_zones,
    zone_diameter_meters,
)


def _pois(*rows) -> List[PointOfInterest]:
    return [PointOfInterest(lat=lat, lng=lng, name=name) for name, lat, lng in rows]


# ============================================================
# Sample POI sets
# ============================================================
POI_SETS: Dict[str, List[PointOfInterest]] = {
    # Toronto downtown
    "toronto": _pois(
        ("CN Tower", 43.6426, -79.3871),
        ("Union Station", 43.6453, -79.3806),
        ("St Lawrence Market", 43.6487, -79.3715),
        ("Distillery District", 43.6503, -79.3596),
        ("Eaton Centre", 43.6544, -79.3807),
        ("Nathan Phillips Square", 43.6525, -79.3832),
        ("Kensington Market", 43.6547, -79.4006),
        ("AGO", 43.6536, -79.3925),
        ("ROM", 43.6677, -79.3948),
        ("Casa Loma", 43.6780, -79.4094),
        ("North York Centre", 43.7615, -79.4111),
        ("Mel Lastman Square", 43.7673, -79.4139),
    ),
    # POIs along a street, ~700 m apart (chain breaking)
    "linear": _pois(
        ("Point A", 43.6500, -79.4000),
        ("Point B", 43.6550, -79.3950),
        ("Point C", 43.6600, -79.3900),
        ("Point D", 43.6650, -79.3850),
        ("Point E", 43.6700, -79.3800),
        ("Point F", 43.6750, -79.3750),
    ),
    # two groups ~3 km apart
    "two_clusters": _pois(
        ("Downtown 1", 43.6500, -79.3800),
        ("Downtown 2", 43.6510, -79.3810),
        ("Downtown 3", 43.6490, -79.3790),
        ("Downtown 4", 43.6505, -79.3795),
        ("Midtown 1", 43.6800, -79.3900),
        ("Midtown 2", 43.6810, -79.3910),
        ("Midtown 3", 43.6790, -79.3890),
        ("Midtown 4", 43.6805, -79.3895),
    ),
    # all within 200 m
    "tight": _pois(
        ("Spot 1", 43.6500, -79.3800),
        ("Spot 2", 43.6502, -79.3802),
        ("Spot 3", 43.6498, -79.3798),
        ("Spot 4", 43.6501, -79.3801),
        ("Spot 5", 43.6499, -79.3799),
        ("Spot 6", 43.6503, -79.3797),
    ),
    # N-S spread, tight E-W (portrait viewport)
    "vertical": _pois(
        ("North 1", 43.6800, -79.3850),
        ("North 2", 43.6790, -79.3860),
        ("Mid 1", 43.6600, -79.3855),
        ("Mid 2", 43.6590, -79.3845),
        ("South 1", 43.6400, -79.3850),
        ("South 2", 43.6410, -79.3840),
    ),
    "scattered": _pois(
        ("NW Corner", 43.7000, -79.4500),
        ("NE Corner", 43.7000, -79.3500),
        ("Center", 43.6600, -79.4000),
        ("SW Corner", 43.6200, -79.4500),
        ("SE Corner", 43.6200, -79.3500),
    ),
}


def analyze_zones(pois: List[PointOfInterest], config: ZoneConfig, plot: bool = False) -> None:
    zones = plan_zones(pois, config)

    resolved = config.resolve()
    mode = resolved.transport_mode
    diameter = resolved.effective_max_diameter
    travel_time = diameter / 1000 / mode.speed_kmh * 60

    print("\n" + "=" * 60)
    print("Config:")
    print(f"  transport_mode: {mode.value} ({mode.speed_kmh:.0f} km/h)")
    print(f"  max diameter:   {diameter:.0f} m (~{travel_time:.0f} min by {mode.value})")
    print(f"  min POIs: {resolved.min_pois_per_zone}, max POIs: {resolved.max_pois_per_zone}")
    print("=" * 60)
    print(f"Total zones: {len(zones)}")

    for zone, report in zip(zones, describe_zones(pois, zones, mode)):
        print(f"\n{zone.id}: {report.n_pois} POIs, zoom {report.zoom}")
        print(f"  Bounds: {report.ns_span_m:.0f} m N-S x {report.ew_span_m:.0f} m E-W")
        print(
            f"  Max travel between POIs: {report.max_pair_m:.0f} m "
            f"(~{report.max_travel_min:.0f} min by {mode.value})"
        )
        print("  POIs:")
        for poi in get_zone_pois(pois, zone):
            print(f"    - {poi.name or f'({poi.lat:.5f}, {poi.lng:.5f})'}")

    if plot:
        plot_zones(pois, zones)
        plt.show()


def main():
    parser = argparse.ArgumentParser(description="Zone planner tuning")
    parser.add_argument(
        "preset",
        nargs="?",
        default="relaxed",
        help=f"Config preset ({', '.join(ZONE_PRESETS)}) or 'all'",
    )
    parser.add_argument("--pois", default="toronto", help=f"POI set ({', '.join(POI_SETS)})")
    parser.add_argument("--all-pois", action="store_true", help="Run the preset on every POI set")
    parser.add_argument("--file", default=None, help="Load POIs from a vector file instead")
    parser.add_argument("--plot", action="store_true", help="Show a matplotlib plot of the zones")
    args = parser.parse_args()

    print("Zone Planner Tuning")
    print("==================")
    print(f"Walking diameter for 20 min: {zone_diameter_meters(TransportMode.WALK)} m\n")

    if args.file:
        selected = load_pois(args.file)
        set_name = args.file
    else:
        if args.pois not in POI_SETS:
            parser.error(f"unknown POI set: {args.pois}")
        selected = POI_SETS[args.pois]
        set_name = args.pois

    if args.all_pois:
        config = ZONE_PRESETS.get(args.preset, ZONE_PRESETS["relaxed"])
        print(f'Testing all POI sets with "{args.preset}" preset\n')
        for name, pois in POI_SETS.items():
            print("\n" + "#" * 60)
            print(f"POI SET: {name.upper()} ({len(pois)} POIs)")
            print("#" * 60)
            analyze_zones(pois, config, plot=args.plot)
    elif args.preset == "all":
        print(f"POI set: {set_name} ({len(selected)} POIs)\n")
        for name, config in ZONE_PRESETS.items():
            print(f"\n\n>>> PRESET: {name.upper()}")
            analyze_zones(selected, config, plot=args.plot)
    elif args.preset in ZONE_PRESETS:
        print(f"POI set: {set_name} ({len(selected)} POIs)\n")
        analyze_zones(selected, ZONE_PRESETS[args.preset], plot=args.plot)
    else:
        parser.error(
            f"unknown preset: {args.preset} (available: {', '.join(ZONE_PRESETS)}, all)"
        )


if __name__ == "__main__":
    main()
