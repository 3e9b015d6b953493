"""
Key point extraction.

Picks the start, a point roughly every N km and the finish from the
parsed geometry, for trip cards and stage summaries.
"""

from typing import List, Optional, Sequence

from tripgpx.config import settings
from tripgpx.shared.elevation import round_half_up
from tripgpx.shared.geo import cumulative_distances

from .schemas import GeoPoint, KeyPoint, KeyPointType, Route, Track


def _key_point(
    point: GeoPoint,
    distance_km: float,
    point_type: KeyPointType,
    description: str
) -> KeyPoint:
    return KeyPoint(
        lat=point.lat,
        lon=point.lon,
        elevation=point.elevation,
        distance_from_start_km=distance_km,
        point_type=point_type,
        description=description,
    )


def extract_key_points(
    tracks: Sequence[Track],
    routes: Sequence[Route],
    interval_km: Optional[float] = None
) -> List[KeyPoint]:
    """
    Start, intermediate points every interval_km, and finish.

    Track points come first, then route points, measured as one
    continuous path.

    Args:
        tracks: Parsed tracks
        routes: Parsed routes
        interval_km: Spacing of intermediate points (default from settings)

    Returns:
        Key points in path order; empty if there are no points
    """
    interval = settings.key_point_interval_km if interval_km is None else interval_km

    points: List[GeoPoint] = [p for track in tracks for p in track.points]
    points += [p for route in routes for p in route.points]

    if not points:
        return []

    if len(points) == 1:
        return [_key_point(points[0], 0.0, KeyPointType.START, "Single point")]

    distances = cumulative_distances((p.lat, p.lon) for p in points)
    key_points = [_key_point(points[0], 0.0, KeyPointType.START, "Start")]
    last_key_km = 0.0

    for point, distance_km in zip(points[1:], distances[1:]):
        if distance_km - last_key_km >= interval:
            key_points.append(_key_point(
                point, distance_km, KeyPointType.INTERMEDIATE,
                f"{int(round_half_up(distance_km))}km"
            ))
            last_key_km = distance_km

    total_km = distances[-1]
    key_points.append(_key_point(
        points[-1], total_km, KeyPointType.END,
        f"Finish ({int(round_half_up(total_km))}km)"
    ))

    return key_points
