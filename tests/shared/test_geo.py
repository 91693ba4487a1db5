"""
Tests for shared geographic functions.

Tests the haversine distance and speed calculations.
"""

import pytest

from gpx_analyzer.shared.geo import (
    haversine,
    speed_kmh,
    EARTH_RADIUS_KM,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine(43.0, 76.0, 43.0, 76.0)
        assert dist == 0.0

    def test_known_distance_aachen_cologne(self):
        """Test with known distance (Aachen to Cologne ~64km)."""
        dist = haversine(50.7753, 6.0839, 50.9375, 6.9603)
        assert 60 < dist < 68

    def test_small_distance(self):
        """Test small distance calculation."""
        # 0.001 degree latitude ≈ 111 meters
        dist = haversine(43.0, 76.0, 43.001, 76.0)
        assert 0.1 < dist < 0.15

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(43.0, 76.0, 44.0, 77.0)
        dist_ba = haversine(44.0, 77.0, 43.0, 76.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_east_west_distance(self):
        """At equator, 1 degree longitude ≈ 111 km."""
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert 110 < dist < 112

    def test_earth_radius_constant(self):
        """Mean Earth radius, 6,371,000 m."""
        assert EARTH_RADIUS_KM == 6371.0

    def test_negative_coordinates(self):
        """Test with negative (southern/western) coordinates."""
        # Sydney -> Melbourne
        dist = haversine(-33.8688, 151.2093, -37.8136, 144.9631)
        assert 700 < dist < 900


# =============================================================================
# Test Edge Cases
# =============================================================================

class TestEdgeCases:
    """Tests for edge cases and boundary conditions."""

    def test_haversine_poles(self):
        """North Pole to South Pole is half a circumference."""
        dist = haversine(90.0, 0.0, -90.0, 0.0)
        assert 19900 < dist < 20100

    def test_haversine_antipodal(self):
        """Opposite sides of the equator must not hit a math domain error."""
        dist = haversine(0.0, 0.0, 0.0, 180.0)
        assert 19900 < dist < 20100

    def test_haversine_antimeridian(self):
        """Test distance across the antimeridian (180° longitude)."""
        dist = haversine(0.0, 179.0, 0.0, -179.0)
        assert 220 < dist < 225


# =============================================================================
# Test Speed
# =============================================================================

class TestSpeedKmh:
    """Tests for speed_kmh function."""

    def test_ten_km_in_an_hour(self):
        assert speed_kmh(10.0, 3600) == pytest.approx(10.0)

    def test_short_interval(self):
        """100 m in 10 s = 36 km/h."""
        assert speed_kmh(0.1, 10) == pytest.approx(36.0)

    @pytest.mark.parametrize("seconds", [0, -5])
    def test_no_elapsed_time(self, seconds):
        """No division by zero, no negative speed."""
        assert speed_kmh(1.0, seconds) == 0.0
