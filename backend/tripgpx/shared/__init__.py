"""
Shared utilities (NOT business logic).

Usage:
    from tripgpx.shared import haversine, elevation_step
"""
from .geo import (
    haversine,
    cumulative_distances,
    EARTH_RADIUS_KM,
)
from .elevation import (
    elevation_step,
    round_half_up,
    DEFAULT_NOISE_THRESHOLD_M,
)

__all__ = [
    # geo
    "haversine",
    "cumulative_distances",
    "EARTH_RADIUS_KM",
    # elevation
    "elevation_step",
    "round_half_up",
    "DEFAULT_NOISE_THRESHOLD_M",
]
