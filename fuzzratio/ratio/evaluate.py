"""
Candidate Evaluation

Turns divisors into exact and error-bearing candidates within tolerance.
"""

import logging
from typing import List, Sequence

from .error import get_pair_error
from .math_utils import is_integral
from .types import Candidate, Number, PairError

logger = logging.getLogger(__name__)


def is_within_tolerance(error: PairError, fuzz_type: str, tolerance: float) -> bool:
    """
    Check both dimensions against tolerance.

    Args:
        error: Width/height error metrics
        fuzz_type: "percent" compares percent error, "range" compares pixel error
        tolerance: Maximum accepted value (inclusive)

    Raises:
        ValueError: If fuzz_type is unknown
    """
    if fuzz_type == "percent":
        return error.width.percent <= tolerance and error.height.percent <= tolerance
    if fuzz_type == "range":
        return error.width.range <= tolerance and error.height.range <= tolerance
    raise ValueError(f"Unknown fuzz type: {fuzz_type!r}, expected 'percent' or 'range'")


def evaluate_candidates(
    width: Number,
    height: Number,
    divisors: Sequence[Number],
    fuzz_type: str,
    tolerance: float,
) -> List[Candidate]:
    """
    Evaluate every divisor.

    An exact reduction is always accepted without an error metric. The same
    divisor is then also tested as an error-bearing candidate, so both forms
    can appear for one divisor (exact first).

    Args:
        width: True width
        height: True height
        divisors: Candidate divisors in enumeration order
        fuzz_type: "percent" or "range"
        tolerance: Maximum accepted error

    Returns:
        Accepted candidates in enumeration order
    """
    candidates = []

    for divisor in divisors:
        scaled_width = width / divisor
        scaled_height = height / divisor

        if is_integral(scaled_width) and is_integral(scaled_height):
            candidates.append(Candidate(width=scaled_width, height=scaled_height, divisor=divisor))

        error = get_pair_error(scaled_width, scaled_height, divisor)
        if is_within_tolerance(error, fuzz_type, tolerance):
            candidates.append(
                Candidate(width=scaled_width, height=scaled_height, divisor=divisor, error=error)
            )

    logger.debug(
        f"{width}x{height}: {len(candidates)} of {len(divisors)} divisors accepted "
        f"({fuzz_type} <= {tolerance})"
    )
    return candidates


__all__ = ["is_within_tolerance", "evaluate_candidates"]
