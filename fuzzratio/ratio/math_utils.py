"""
Ratio Arithmetic Helpers

GCD, reduction and rounding shared by the fuzzing stages.
"""

import math
from typing import Tuple

from .types import Number, Ratio


def gcd(left: Number, right: Number) -> Number:
    """
    Greatest common divisor by the Euclidean algorithm.

    Works on integral floats as well as ints, since fuzzed ratio
    components are produced by float division.
    """
    while right != 0:
        left, right = right, left % right
    return left


def is_integral(value: Number) -> bool:
    """True if value has no fractional part."""
    return float(value).is_integer()


def round2(value: float) -> float:
    """Round to 2 decimals, halves rounded up (not banker's rounding)."""
    return math.floor(value * 100 + 0.5) / 100


def reduce_pair(width: Number, height: Number) -> Tuple[Number, Number]:
    """Divide both components by their GCD."""
    divisor = gcd(width, height)
    return width / divisor, height / divisor


def reduce_ratio(width: Number, height: Number) -> Ratio:
    """Exact GCD-reduced ratio of the given dimensions."""
    reduced_width, reduced_height = reduce_pair(width, height)
    return Ratio(width=reduced_width, height=reduced_height)


__all__ = ["gcd", "is_integral", "round2", "reduce_pair", "reduce_ratio"]
