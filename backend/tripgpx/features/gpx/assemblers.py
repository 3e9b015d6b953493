"""
Track, route and waypoint assembly.

Walks a GpxDocument and produces the typed collections together with the
metrics each collection contributes to the document totals.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .metrics import PathMetrics, measure_path
from .points import ParsedPoint, parse_coordinates, parse_point
from .schemas import GeoPoint, Route, Track, Waypoint
from .xml_adapter import GpxDocument, RawPoint

logger = logging.getLogger(__name__)


def _valid_points(raw_points: Sequence[RawPoint], context: str) -> List[ParsedPoint]:
    points = [p for p in (parse_point(raw) for raw in raw_points) if p is not None]
    skipped = len(raw_points) - len(points)
    if skipped:
        logger.debug(f"Skipped {skipped} point(s) with invalid coordinates in {context}")
    return points


def _geo_point(point: ParsedPoint) -> GeoPoint:
    return GeoPoint(lat=point.lat, lon=point.lon, elevation=point.elevation)


def assemble_tracks(
    doc: GpxDocument,
    noise_threshold_m: Optional[float] = None
) -> Tuple[List[Track], PathMetrics]:
    """
    One Track per <trkseg> with at least one valid point.

    Segments of all tracks are flattened; each keeps its parent track's
    name. Track points feed distance, elevation gain/loss, elevation
    bounds and the time range.
    """
    tracks: List[Track] = []
    measured: List[PathMetrics] = []

    for index, raw_track in enumerate(doc.tracks, start=1):
        name = raw_track.name or f"Track {index}"

        for segment in raw_track.segments:
            points = _valid_points(segment.points, f"track '{name}'")
            if not points:
                continue

            measured.append(measure_path(points, noise_threshold_m=noise_threshold_m))
            tracks.append(Track(name=name, points=[_geo_point(p) for p in points]))

    return tracks, PathMetrics.combine(measured)


def assemble_routes(doc: GpxDocument) -> Tuple[List[Route], PathMetrics]:
    """
    One Route per <rte> with at least one valid point.

    Routes add to distance and elevation bounds only. Gain/loss and
    timestamps come from tracks alone.
    """
    routes: List[Route] = []
    measured: List[PathMetrics] = []

    for raw_route in doc.routes:
        name = raw_route.name or f"Route {len(routes) + 1}"
        points = _valid_points(raw_route.points, f"route '{name}'")
        if not points:
            continue

        measured.append(measure_path(points, count_gain_loss=False, count_time=False))
        routes.append(Route(name=name, points=[_geo_point(p) for p in points]))

    return routes, PathMetrics.combine(measured)


def assemble_waypoints(doc: GpxDocument) -> List[Waypoint]:
    """Top-level <wpt> points. They never contribute to distance or elevation."""
    return [
        Waypoint(
            lat=point.lat,
            lon=point.lon,
            elevation=point.elevation,
            name=point.name,
        )
        for point in _valid_points(doc.waypoints, "waypoints")
    ]


def count_waypoints(doc: GpxDocument) -> int:
    """Number of valid top-level <wpt> elements, never track or route points."""
    return sum(1 for raw in doc.waypoints if parse_coordinates(raw).valid)
