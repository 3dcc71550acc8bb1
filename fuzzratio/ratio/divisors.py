"""
Divisor Enumeration

Produces the candidate divisors tested against a (width, height) pair.

Two strategies exist and they yield different candidate sets:

    - "range": every integer in [2, floor(min(width, height) / 2)]. Includes
      divisors that do not divide both dimensions, so near-ratios are found.
      This is the default.
    - "remainder": the Euclidean remainder sequence of (width, height).
      Legacy behavior, only used when explicitly selected.
"""

import logging
import math
from typing import List

from .types import Number

logger = logging.getLogger(__name__)

DIVISOR_STRATEGIES = ("range", "remainder")


def range_divisors(width: Number, height: Number) -> List[int]:
    """Every integer from 2 up to half the smaller dimension (inclusive)."""
    upper = math.floor(min(width, height) / 2)
    return list(range(2, upper + 1))


def remainder_divisors(width: Number, height: Number) -> List[Number]:
    """
    Nonzero remainders produced while computing gcd(width, height).

    Example: (1920, 1080) -> [840, 240, 120]
    """
    divisors = []
    left, right = width, height
    while right != 0:
        remainder = left % right
        if remainder == 0:
            break
        divisors.append(remainder)
        left, right = right, remainder
    return divisors


def get_divisors(width: Number, height: Number, strategy: str = "range") -> List[Number]:
    """
    Enumerate candidate divisors with the given strategy.

    Args:
        width: True width
        height: True height
        strategy: "range" or "remainder"

    Returns:
        Ordered list of divisors (may be empty)

    Raises:
        ValueError: If strategy is unknown
    """
    if strategy == "range":
        divisors = range_divisors(width, height)
    elif strategy == "remainder":
        divisors = remainder_divisors(width, height)
    else:
        raise ValueError(
            f"Unknown divisor strategy: {strategy!r}, expected one of {DIVISOR_STRATEGIES}"
        )

    logger.debug(f"{width}x{height}: {len(divisors)} divisors ({strategy})")
    return divisors


__all__ = [
    "DIVISOR_STRATEGIES",
    "range_divisors",
    "remainder_divisors",
    "get_divisors",
]
