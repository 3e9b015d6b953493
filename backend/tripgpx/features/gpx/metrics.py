"""
Path metrics.

Distance, elevation and time accumulation over one segment or route,
returned as an immutable PathMetrics. Document totals are the merge of
the per-path results, so no "previous point" ever crosses a path boundary.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional, Sequence

from tripgpx.config import settings
from tripgpx.shared.elevation import elevation_step
from tripgpx.shared.geo import haversine

from .points import ParsedPoint, Timestamp


def _pick(a: Optional[float], b: Optional[float], choose) -> Optional[float]:
    if a is None:
        return b
    if b is None:
        return a
    return choose(a, b)


@dataclass(frozen=True)
class PathMetrics:
    """Accumulated metrics. Bounds and times are None until observed."""
    distance_km: float = 0.0
    elevation_gain_m: float = 0.0
    elevation_loss_m: float = 0.0
    max_elevation_m: Optional[float] = None
    min_elevation_m: Optional[float] = None
    start_time: Optional[Timestamp] = None
    end_time: Optional[Timestamp] = None

    def merge(self, other: "PathMetrics") -> "PathMetrics":
        """Combine with a path measured after this one."""
        return PathMetrics(
            distance_km=self.distance_km + other.distance_km,
            elevation_gain_m=self.elevation_gain_m + other.elevation_gain_m,
            elevation_loss_m=self.elevation_loss_m + other.elevation_loss_m,
            max_elevation_m=_pick(self.max_elevation_m, other.max_elevation_m, max),
            min_elevation_m=_pick(self.min_elevation_m, other.min_elevation_m, min),
            start_time=self.start_time or other.start_time,
            end_time=other.end_time or self.end_time,
        )

    @classmethod
    def combine(cls, metrics: Iterable["PathMetrics"]) -> "PathMetrics":
        return reduce(cls.merge, metrics, cls())


def measure_path(
    points: Sequence[ParsedPoint],
    count_gain_loss: bool = True,
    count_time: bool = True,
    noise_threshold_m: Optional[float] = None
) -> PathMetrics:
    """
    Measure one contiguous path.

    Args:
        points: Valid points in path order
        count_gain_loss: Accumulate elevation gain/loss between neighbours
        count_time: Track first and last timestamps
        noise_threshold_m: Override for the configured noise threshold

    Returns:
        PathMetrics for this path alone
    """
    threshold = (
        settings.elevation_noise_threshold_m
        if noise_threshold_m is None else noise_threshold_m
    )

    distance = 0.0
    gain = 0.0
    loss = 0.0
    max_elevation: Optional[float] = None
    min_elevation: Optional[float] = None
    start_time: Optional[Timestamp] = None
    end_time: Optional[Timestamp] = None
    previous: Optional[ParsedPoint] = None

    for point in points:
        # Bounds ignore the noise threshold
        if point.elevation is not None:
            max_elevation = _pick(max_elevation, point.elevation, max)
            min_elevation = _pick(min_elevation, point.elevation, min)

        if count_time and point.time is not None:
            if start_time is None:
                start_time = point.time
            end_time = point.time

        if previous is not None:
            distance += haversine(previous.lat, previous.lon, point.lat, point.lon)

            if (
                count_gain_loss
                and previous.elevation is not None
                and point.elevation is not None
            ):
                step_gain, step_loss = elevation_step(
                    previous.elevation, point.elevation, threshold
                )
                gain += step_gain
                loss += step_loss

        previous = point

    return PathMetrics(
        distance_km=distance,
        elevation_gain_m=gain,
        elevation_loss_m=loss,
        max_elevation_m=max_elevation,
        min_elevation_m=min_elevation,
        start_time=start_time,
        end_time=end_time,
    )
