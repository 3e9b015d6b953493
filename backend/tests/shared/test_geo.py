"""
Tests for shared geographic functions.

Tests the haversine distance and path length helpers.
"""

import math

import pytest

from tripgpx.shared.geo import (
    haversine,
    cumulative_distances,
    EARTH_RADIUS_KM,
)


# One degree of arc on the 6371 km sphere
ONE_DEGREE_KM = EARTH_RADIUS_KM * math.pi / 180


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be exactly 0."""
        assert haversine(43.0, 76.0, 43.0, 76.0) == 0.0
        assert haversine(-33.8688, 151.2093, -33.8688, 151.2093) == 0.0

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(43.6142, 13.5173, 45.4642, 9.19)
        dist_ba = haversine(45.4642, 9.19, 43.6142, 13.5173)
        assert dist_ab == pytest.approx(dist_ba, rel=1e-12)

    def test_east_west_at_equator(self):
        """1 degree of longitude at the equator is ~111 km."""
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert dist == pytest.approx(ONE_DEGREE_KM, rel=1e-9)
        assert 111.1 < dist < 111.3

    def test_north_south(self):
        """1 degree of latitude is ~111 km everywhere."""
        assert haversine(45.0, 7.0, 46.0, 7.0) == pytest.approx(ONE_DEGREE_KM, rel=1e-9)

    def test_reference_formula(self):
        """Matches the atan2 haversine computed by hand."""
        lat1, lon1, lat2, lon2 = 43.6142, 13.5173, 43.6152, 13.5183
        d_lat = math.radians(lat2 - lat1)
        d_lon = math.radians(lon2 - lon1)
        a = (math.sin(d_lat / 2) ** 2
             + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
             * math.sin(d_lon / 2) ** 2)
        expected = 2 * 6371 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        assert haversine(lat1, lon1, lat2, lon2) == pytest.approx(expected, rel=1e-12)

    def test_known_distance_ancona_milan(self):
        """Ancona to Milan is roughly 400 km in a straight line."""
        dist = haversine(43.6158, 13.5189, 45.4642, 9.19)
        assert 380 < dist < 420

    def test_antimeridian(self):
        """Crossing 180° longitude takes the short way."""
        dist = haversine(0.0, 179.0, 0.0, -179.0)
        assert dist == pytest.approx(2 * ONE_DEGREE_KM, rel=1e-9)

    def test_poles(self):
        """Pole to pole is half the circumference."""
        assert haversine(90.0, 0.0, -90.0, 0.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_earth_radius_constant(self):
        assert EARTH_RADIUS_KM == 6371.0


# =============================================================================
# Test Path Length
# =============================================================================

class TestCumulativeDistances:
    """Tests for cumulative_distances."""

    def test_empty(self):
        assert cumulative_distances([]) == []

    def test_single_point(self):
        assert cumulative_distances([(43.0, 76.0)]) == [0.0]

    def test_running_total(self):
        """Each entry adds the step from the previous point."""
        points = [(0.0, 0.0), (0.0, 1.0), (0.0, 3.0)]
        distances = cumulative_distances(points)
        assert distances[0] == 0.0
        assert distances[1] == pytest.approx(ONE_DEGREE_KM)
        assert distances[2] == pytest.approx(3 * ONE_DEGREE_KM)

    def test_round_trip(self):
        """Out and back is twice one way."""
        points = [(43.0, 76.0), (43.01, 76.0), (43.0, 76.0)]
        one_way = haversine(43.0, 76.0, 43.01, 76.0)
        assert cumulative_distances(points)[-1] == pytest.approx(2 * one_way)

    def test_accepts_generator(self):
        points = ((0.0, float(i)) for i in range(3))
        assert cumulative_distances(points)[-1] == pytest.approx(2 * ONE_DEGREE_KM)
