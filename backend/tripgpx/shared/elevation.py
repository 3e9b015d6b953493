"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from decimal import Decimal, ROUND_FLOOR
from typing import Tuple

# GPS and barometric readings jitter by a couple of meters
DEFAULT_NOISE_THRESHOLD_M = 3.0


def elevation_step(
    previous: float,
    current: float,
    threshold: float = DEFAULT_NOISE_THRESHOLD_M
) -> Tuple[float, float]:
    """
    Gain and loss contributed by one step between two readings.

    Differences smaller than the threshold are dropped entirely, they
    are not carried into the next comparison.

    Args:
        previous: Elevation of the earlier point (m)
        current: Elevation of the later point (m)
        threshold: Minimum absolute difference to count (m)

    Returns:
        Tuple of (gain_m, loss_m), at most one of them non-zero
    """
    diff = current - previous
    if abs(diff) < threshold:
        return 0.0, 0.0
    if diff > 0:
        return diff, 0.0
    return 0.0, abs(diff)


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with ties going up (toward +inf), as stored records expect.

    Works on the exact binary value, so 0.125 -> 0.13 but 2.675 -> 2.67.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value
    """
    quantum = Decimal(1).scaleb(-digits)
    shifted = Decimal(value) + quantum / 2
    return float(shifted.quantize(quantum, rounding=ROUND_FLOOR))
