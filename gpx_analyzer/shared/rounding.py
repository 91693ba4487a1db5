"""
Rounding helpers for published metrics.

Python's built-in round() uses banker's rounding; metrics are published
with half-away-from-zero rounding instead (0.125 -> 0.13, -0.125 -> -0.13).
"""
import math

# Metrics are published with two decimals
METRIC_DECIMALS = 2


def round_half_away(value: float, decimals: int = METRIC_DECIMALS) -> float:
    """
    Round half away from zero.

    Args:
        value: Value to round
        decimals: Number of decimal places

    Returns:
        Rounded value (never -0.0)

    Example:
        >>> round_half_away(2.345)
        2.35
    """
    scale = 10 ** decimals
    rounded = math.floor(abs(value) * scale + 0.5) / scale
    if rounded == 0:
        return 0.0
    return math.copysign(rounded, value)


def truncate(value: float, decimals: int = METRIC_DECIMALS) -> float:
    """Drop digits past `decimals` (towards zero)."""
    scale = 10 ** decimals
    truncated = math.trunc(value * scale) / scale
    if truncated == 0:
        return 0.0
    return truncated
