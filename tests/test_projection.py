"""
Unit tests for bounds, center and zoom helpers.
"""

import pytest

from hunt_zones.geo.projection import (
    MAX_ZOOM,
    MIN_ZOOM,
    calculate_bounds,
    calculate_center,
    calculate_zoom,
)
from hunt_zones.geo.types import Bounds, Coordinate, MapSize


class TestCalculateBounds:
    """Tests for calculate_bounds."""

    def test_single_point(self):
        """Test bounds of a single POI collapse onto it."""
        bounds = calculate_bounds([Coordinate(lat=43.65, lng=-79.38)])

        assert bounds.north == 43.65
        assert bounds.south == 43.65
        assert bounds.east == -79.38
        assert bounds.west == -79.38

    def test_multiple_points(self):
        """Test bounds of several POIs."""
        bounds = calculate_bounds([
            Coordinate(lat=43.65, lng=-79.38),
            Coordinate(lat=43.70, lng=-79.40),
            Coordinate(lat=43.60, lng=-79.35),
        ])

        assert bounds.north == 43.70
        assert bounds.south == 43.60
        assert bounds.east == -79.35
        assert bounds.west == -79.40

    def test_accepts_mappings(self):
        """Test dicts with lat/lng keys are accepted."""
        bounds = calculate_bounds([{"lat": 1.0, "lng": 2.0}, {"lat": -1.0, "lng": 3.0}])
        assert bounds == Bounds(north=1.0, south=-1.0, east=3.0, west=2.0)

    def test_empty_raises(self):
        """Test that an empty input is rejected with a descriptive message."""
        with pytest.raises(ValueError, match="At least one coordinate required"):
            calculate_bounds([])


class TestCalculateCenter:
    """Tests for calculate_center."""

    def test_midpoint(self):
        """Test center is the midpoint of the bounds."""
        center = calculate_center(Bounds(north=43.70, south=43.60, east=-79.35, west=-79.45))

        assert abs(center.lat - 43.65) < 1e-9
        assert abs(center.lng - (-79.40)) < 1e-9


class TestCalculateZoom:
    """Tests for calculate_zoom."""

    def test_small_bounds_high_zoom(self):
        """Test a ~100 m box gets a close-up zoom."""
        bounds = Bounds(north=43.651, south=43.650, east=-79.380, west=-79.381)
        assert calculate_zoom(bounds, MapSize(width=400, height=600)) >= 16

    def test_large_bounds_low_zoom(self):
        """Test a one-degree box gets a far zoom."""
        bounds = Bounds(north=44.0, south=43.0, east=-79.0, west=-80.0)
        assert calculate_zoom(bounds, MapSize(width=400, height=600)) <= 10

    def test_tiny_bounds_clamped(self):
        """Test that very small bounds do not exceed the max zoom."""
        bounds = Bounds(north=43.6501, south=43.6500, east=-79.3800, west=-79.3801)
        zoom = calculate_zoom(bounds, MapSize(width=400, height=600))
        assert MIN_ZOOM <= zoom <= MAX_ZOOM

    def test_point_bounds(self):
        """Test a zero-size box clamps to the max zoom without raising."""
        bounds = Bounds(north=43.65, south=43.65, east=-79.38, west=-79.38)
        assert calculate_zoom(bounds, MapSize()) == MAX_ZOOM

    def test_whole_world(self):
        """Test pole-to-pole, full-longitude bounds clamp to the min zoom."""
        bounds = Bounds(north=90.0, south=-90.0, east=180.0, west=-180.0)
        assert calculate_zoom(bounds, MapSize()) == MIN_ZOOM

    def test_returns_int(self):
        """Test the zoom is an integer."""
        bounds = Bounds(north=43.70, south=43.60, east=-79.35, west=-79.45)
        assert isinstance(calculate_zoom(bounds, MapSize()), int)

    def test_narrow_axis_limits_zoom(self):
        """Test the zoom is limited by the axis that needs more room."""
        tall = Bounds(north=43.70, south=43.60, east=-79.380, west=-79.381)
        wide = Bounds(north=43.651, south=43.650, east=-79.30, west=-79.45)
        size = MapSize(width=400, height=700)

        point = Bounds(north=43.65, south=43.65, east=-79.38, west=-79.38)
        assert calculate_zoom(tall, size) < calculate_zoom(point, size)
        assert calculate_zoom(wide, size) < calculate_zoom(point, size)
