"""
Unit tests for checkpoint validators.
"""

from hunt_zones.checkpoints import ValidationType, gps_radius, manual, photo_only, qr_code


class TestValidators:
    """Tests for the checkpoint validators."""

    def test_photo_only_and_manual_always_pass(self):
        """Test the validators that need no input."""
        assert photo_only() is True
        assert manual() is True

    def test_qr_code_exact_match(self):
        """Test QR values must match exactly."""
        assert qr_code("HUNT-42", "HUNT-42") is True
        assert qr_code("hunt-42", "HUNT-42") is False
        assert qr_code("", "HUNT-42") is False

    def test_gps_radius_at_poi(self):
        """Test standing on the POI passes even with a 0 m radius."""
        assert gps_radius(43.6532, -79.3832, 43.6532, -79.3832, 0.0) is True

    def test_gps_radius_inside(self):
        """Test a user ~30 m away passes a 50 m radius."""
        assert gps_radius(43.6532, -79.3832, 43.6534, -79.3830, 50.0) is True

    def test_gps_radius_outside(self):
        """Test Toronto is not within 100 km of New York."""
        assert gps_radius(43.65, -79.38, 40.71, -74.01, 100_000.0) is False

    def test_validation_types(self):
        """Test validation types round-trip from their stored names."""
        assert ValidationType("GPS_RADIUS") is ValidationType.GPS_RADIUS
        assert {v.value for v in ValidationType} == {"PHOTO_ONLY", "GPS_RADIUS", "QR_CODE", "MANUAL"}
