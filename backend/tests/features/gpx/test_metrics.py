"""
Tests for path metrics accumulation.
"""

import pytest

from tripgpx.features.gpx.metrics import PathMetrics, measure_path
from tripgpx.features.gpx.points import ParsedPoint, parse_timestamp
from tripgpx.features.gpx.xml_adapter import RawPoint
from tripgpx.shared.geo import haversine


def _point(lat, lon, ele=None, time=None):
    ts = parse_timestamp(RawPoint(time=time)) if time else None
    return ParsedPoint(lat=lat, lon=lon, elevation=ele, time=ts)


def _climb(elevations):
    """Points 0.001° apart along a meridian with the given elevations."""
    return [_point(45.0 + i * 0.001, 7.0, ele) for i, ele in enumerate(elevations)]


class TestMeasurePath:
    """Tests for measure_path."""

    def test_empty(self):
        assert measure_path([]) == PathMetrics()

    def test_single_point(self):
        metrics = measure_path([_point(45.0, 7.0, 1500)])
        assert metrics.distance_km == 0.0
        assert metrics.max_elevation_m == 1500
        assert metrics.min_elevation_m == 1500

    def test_distance(self):
        points = [_point(0.0, 0.0), _point(0.0, 1.0), _point(0.0, 2.0)]
        expected = haversine(0.0, 0.0, 0.0, 1.0) + haversine(0.0, 1.0, 0.0, 2.0)
        assert measure_path(points).distance_km == pytest.approx(expected)

    def test_noise_suppressed(self):
        """[100, 102, 100] counts no gain or loss."""
        metrics = measure_path(_climb([100, 102, 100]))
        assert metrics.elevation_gain_m == 0
        assert metrics.elevation_loss_m == 0

    def test_gain_and_loss(self):
        """[100, 110, 95] gains 10 and loses 15."""
        metrics = measure_path(_climb([100, 110, 95]))
        assert metrics.elevation_gain_m == 10
        assert metrics.elevation_loss_m == 15

    def test_small_steps_not_carried_over(self):
        """Sub-threshold steps are dropped, not summed into the next one."""
        metrics = measure_path(_climb([100, 102, 104, 106]))
        assert metrics.elevation_gain_m == 0

    def test_bounds_ignore_threshold(self):
        """Max/min see every reading, even sub-threshold jitter."""
        metrics = measure_path(_climb([100, 102, 101]))
        assert metrics.max_elevation_m == 102
        assert metrics.min_elevation_m == 100

    def test_missing_elevation_breaks_pair(self):
        """Gain needs elevation on both neighbours."""
        points = [_point(45.0, 7.0, 100), _point(45.001, 7.0), _point(45.002, 7.0, 150)]
        metrics = measure_path(points)
        assert metrics.elevation_gain_m == 0
        assert metrics.max_elevation_m == 150
        assert metrics.min_elevation_m == 100

    def test_no_elevation(self):
        metrics = measure_path([_point(45.0, 7.0), _point(45.1, 7.0)])
        assert metrics.max_elevation_m is None
        assert metrics.min_elevation_m is None

    def test_gain_loss_disabled(self):
        metrics = measure_path(_climb([100, 200, 50]), count_gain_loss=False)
        assert metrics.elevation_gain_m == 0
        assert metrics.elevation_loss_m == 0
        assert metrics.max_elevation_m == 200
        assert metrics.min_elevation_m == 50

    def test_custom_threshold(self):
        metrics = measure_path(_climb([100, 102, 104]), noise_threshold_m=1.0)
        assert metrics.elevation_gain_m == 4

    def test_time_range_first_and_last(self):
        points = [
            _point(45.0, 7.0, time="2024-01-01T10:00:00Z"),
            _point(45.001, 7.0),
            _point(45.002, 7.0, time="2024-01-01T10:15:00Z"),
        ]
        metrics = measure_path(points)
        assert metrics.start_time.iso_string == "2024-01-01T10:00:00Z"
        assert metrics.end_time.iso_string == "2024-01-01T10:15:00Z"

    def test_time_disabled(self):
        points = [_point(45.0, 7.0, time="2024-01-01T10:00:00Z")]
        metrics = measure_path(points, count_time=False)
        assert metrics.start_time is None
        assert metrics.end_time is None


class TestMerge:
    """Tests for PathMetrics.merge and combine."""

    def test_combine_empty(self):
        assert PathMetrics.combine([]) == PathMetrics()

    def test_sums_and_bounds(self):
        a = PathMetrics(distance_km=1.5, elevation_gain_m=10, max_elevation_m=300, min_elevation_m=200)
        b = PathMetrics(distance_km=2.0, elevation_loss_m=5, max_elevation_m=250, min_elevation_m=150)
        merged = a.merge(b)
        assert merged.distance_km == 3.5
        assert merged.elevation_gain_m == 10
        assert merged.elevation_loss_m == 5
        assert merged.max_elevation_m == 300
        assert merged.min_elevation_m == 150

    def test_bounds_absent_on_one_side(self):
        a = PathMetrics(max_elevation_m=300, min_elevation_m=200)
        assert a.merge(PathMetrics()) == a
        assert PathMetrics().merge(a) == a

    def test_time_order(self):
        """Start comes from the first path with a time, end from the last."""
        first = measure_path([_point(45.0, 7.0, time="2024-01-01T08:00:00Z")])
        second = measure_path([_point(45.0, 7.0, time="2024-01-01T09:00:00Z")])
        merged = PathMetrics.combine([first, PathMetrics(), second])
        assert merged.start_time.iso_string == "2024-01-01T08:00:00Z"
        assert merged.end_time.iso_string == "2024-01-01T09:00:00Z"

    def test_immutable(self):
        metrics = PathMetrics()
        with pytest.raises(AttributeError):
            metrics.distance_km = 5.0
