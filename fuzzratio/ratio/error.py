"""
Candidate Error Metric

Measures how far a floored ratio component lands from the true value.
"""

import math

from .math_utils import gcd, round2
from .types import ErrorMetric, PairError


def get_error(value: float, divisor: float) -> ErrorMetric:
    """
    Error of flooring one scaled dimension.

    Args:
        value: Dimension divided by divisor
        divisor: Candidate divisor

    Returns:
        ErrorMetric with range, percent, ratio and mod
    """
    original = value * divisor
    mod = math.floor(value) * divisor
    ratio = mod / divisor

    # Compared against mod - ratio, not a ceil value.
    if abs(mod - original) > abs(mod - ratio - original):
        closest = mod - ratio
    else:
        closest = mod

    error_range = abs(original - closest)
    percent = round2(error_range / original * 100)

    return ErrorMetric(range=error_range, percent=percent, ratio=ratio, mod=mod)


def get_pair_error(width: float, height: float, divisor: float) -> PairError:
    """
    Width and height error with the ratio components reduced jointly.

    Flooring can introduce a common factor the divisor did not remove,
    e.g. 1920/2 x 1080/2 floors to 960:540 which reduces to 16:9.
    """
    error = PairError(
        width=get_error(width, divisor),
        height=get_error(height, divisor),
    )

    common = gcd(error.width.ratio, error.height.ratio)
    error.width.ratio = error.width.ratio / common
    error.height.ratio = error.height.ratio / common

    return error


__all__ = ["get_error", "get_pair_error"]
