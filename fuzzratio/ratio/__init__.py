"""
Fuzzed Aspect Ratio Module

Finds small-integer ratios (16:9, 4:3, ...) that approximate a pixel
width:height within a tolerance.
"""

from .types import (
    Ratio,
    RatioError,
    FuzzRatio,
    FuzzResult,
    Candidate,
    ErrorMetric,
    PairError,
)
from .math_utils import gcd, reduce_ratio, round2
from .divisors import DIVISOR_STRATEGIES, get_divisors, range_divisors, remainder_divisors
from .error import get_error, get_pair_error
from .evaluate import evaluate_candidates, is_within_tolerance
from .ranking import filter_allowed, rank_candidates
from .assemble import assemble_result, collect_alts, to_fuzz_ratio
from .core import FuzzOptions, fuzz_ratio, fuzz_dimensions

__all__ = [
    # Types
    "Ratio",
    "RatioError",
    "FuzzRatio",
    "FuzzResult",
    "Candidate",
    "ErrorMetric",
    "PairError",
    # Arithmetic
    "gcd",
    "reduce_ratio",
    "round2",
    # Stages
    "DIVISOR_STRATEGIES",
    "get_divisors",
    "range_divisors",
    "remainder_divisors",
    "get_error",
    "get_pair_error",
    "evaluate_candidates",
    "is_within_tolerance",
    "filter_allowed",
    "rank_candidates",
    "assemble_result",
    "collect_alts",
    "to_fuzz_ratio",
    # Entry points
    "FuzzOptions",
    "fuzz_ratio",
    "fuzz_dimensions",
]
