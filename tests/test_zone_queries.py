"""
Unit tests for zone queries and zone reports.
"""

import pytest

from hunt_zones.geo.types import Bounds, Coordinate
from hunt_zones.zones.planner import Zone, plan_zones
from hunt_zones.zones.queries import calculate_overall_bounds, find_zone_for_poi, get_zone_pois
from hunt_zones.zones.report import describe_zones, travel_minutes

TORONTO_POIS = [
    {"lat": 43.6532, "lng": -79.3832},
    {"lat": 43.6547, "lng": -79.3806},
    {"lat": 43.6561, "lng": -79.3793},
    {"lat": 43.7615, "lng": -79.4111},
    {"lat": 43.7630, "lng": -79.4095},
    {"lat": 43.6426, "lng": -79.3871},
]

CLUSTERED_POIS = [
    {"lat": 43.6532, "lng": -79.3832},
    {"lat": 43.6534, "lng": -79.3830},
    {"lat": 43.6530, "lng": -79.3834},
    {"lat": 43.6533, "lng": -79.3831},
]


def _empty_zone() -> Zone:
    return Zone(
        id="empty",
        poi_indices=[],
        bounds=Bounds(north=0.0, south=0.0, east=0.0, west=0.0),
        center=Coordinate(lat=0.0, lng=0.0),
        zoom=10,
    )


class TestGetZonePois:
    """Tests for get_zone_pois."""

    def test_returns_zone_pois_in_order(self):
        """Test POIs are looked up in poi_indices order."""
        zone = plan_zones(TORONTO_POIS)[0]
        pois = get_zone_pois(TORONTO_POIS, zone)

        assert len(pois) == len(zone.poi_indices)
        for poi, index in zip(pois, zone.poi_indices):
            assert poi is TORONTO_POIS[index]

    def test_empty_zone(self):
        """Test a zone without indices gives no POIs."""
        assert get_zone_pois(TORONTO_POIS, _empty_zone()) == []


class TestCalculateOverallBounds:
    """Tests for calculate_overall_bounds."""

    def test_no_zones(self):
        """Test None is returned for an empty list."""
        assert calculate_overall_bounds([]) is None

    def test_encloses_all_zones(self):
        """Test the overall box contains every zone's box."""
        zones = plan_zones(TORONTO_POIS)
        overall = calculate_overall_bounds(zones)

        assert overall is not None
        for zone in zones:
            assert overall.north >= zone.bounds.north
            assert overall.south <= zone.bounds.south
            assert overall.east >= zone.bounds.east
            assert overall.west <= zone.bounds.west

    def test_single_zone(self):
        """Test a single zone's bounds are returned unchanged."""
        zones = plan_zones(CLUSTERED_POIS)
        assert len(zones) == 1
        assert calculate_overall_bounds(zones) == zones[0].bounds


class TestFindZoneForPoi:
    """Tests for find_zone_for_poi."""

    def test_finds_owner(self):
        """Test every POI index maps back to the zone that holds it."""
        zones = plan_zones(TORONTO_POIS)
        for index in range(len(TORONTO_POIS)):
            zone = find_zone_for_poi(zones, index)
            assert zone is not None
            assert index in zone.poi_indices

    def test_unknown_index(self):
        """Test an index outside every zone gives None."""
        assert find_zone_for_poi(plan_zones(TORONTO_POIS), 99) is None


class TestDescribeZones:
    """Tests for zone reports."""

    def test_report_per_zone(self):
        """Test one report per zone with matching ids and counts."""
        zones = plan_zones(TORONTO_POIS)
        reports = describe_zones(TORONTO_POIS, zones)

        assert [r.zone_id for r in reports] == [z.id for z in zones]
        assert [r.n_pois for r in reports] == [len(z.poi_indices) for z in zones]
        assert [r.zoom for r in reports] == [z.zoom for z in zones]

    def test_max_pair_within_diameter(self):
        """Test default walking zones never exceed the walking diameter."""
        reports = describe_zones(TORONTO_POIS, plan_zones(TORONTO_POIS))

        for r in reports:
            assert 0.0 < r.max_pair_m <= 1667
            assert r.max_travel_min == pytest.approx(travel_minutes(r.max_pair_m, "walk"))

    def test_single_poi_zone_has_no_span(self):
        """Test a single-POI zone reports zero extent."""
        pois = [{"lat": 43.6532, "lng": -79.3832}]
        (report,) = describe_zones(pois, plan_zones(pois))

        assert report.ns_span_m == 0.0
        assert report.ew_span_m == 0.0
        assert report.max_pair_m == 0.0

    def test_travel_minutes(self):
        """Test 5 km takes an hour on foot and 20 min by bike."""
        assert travel_minutes(5000, "walk") == pytest.approx(60.0)
        assert travel_minutes(5000, "bike") == pytest.approx(20.0)
