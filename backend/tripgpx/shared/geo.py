"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for distance calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Iterable, List, Tuple

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Uses the atan2 form; results must match distances already stored
    on trips.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def cumulative_distances(points: Iterable[Tuple[float, float]]) -> List[float]:
    """
    Running distance from the first point to every point.

    Args:
        points: (lat, lon) pairs in path order

    Returns:
        One value per point in kilometers, starting at 0.0
    """
    result: List[float] = []
    previous = None
    total = 0.0

    for lat, lon in points:
        if previous is not None:
            total += haversine(previous[0], previous[1], lat, lon)
        result.append(total)
        previous = (lat, lon)

    return result
