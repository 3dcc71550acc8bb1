"""
Fuzzed Aspect Ratio (Core)

Finds small-integer ratios approximating width:height within a tolerance.

Pipeline:
    enumerate divisors -> evaluate -> filter allow-list -> rank -> assemble

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Optional, Sequence, Tuple

from .assemble import assemble_result
from .divisors import get_divisors
from .evaluate import evaluate_candidates
from .math_utils import reduce_ratio
from .ranking import filter_allowed, rank_candidates
from .types import FuzzResult, Number, Ratio

if TYPE_CHECKING:
    from ..config.fuzz_config import FuzzConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FuzzOptions:
    """
    Input of a fuzzing run.

    Attributes:
        width: True pixel width (positive, finite)
        height: True pixel height (positive, finite)
        fuzz_type: "percent" (0-100 scale) or "range" (pixels)
        tolerance: Maximum accepted error, inclusive
        allowed_ratios: Optional allow-list of reduced ratios
        divisor_strategy: "range" (default) or legacy "remainder"
    """
    width: Number
    height: Number
    fuzz_type: Literal["percent", "range"] = "percent"
    tolerance: float = 0.0
    allowed_ratios: Optional[Tuple[Ratio, ...]] = None
    divisor_strategy: Literal["range", "remainder"] = "range"

    def __post_init__(self):
        from ..config.parsers import parse_allowed_ratios
        object.__setattr__(self, "allowed_ratios", parse_allowed_ratios(self.allowed_ratios))

        from ..config.validators import validate_fuzz_options
        validate_fuzz_options(self)


def fuzz_ratio(options: FuzzOptions) -> FuzzResult:
    """
    Compute the exact and fuzzed aspect ratio of the given dimensions.

    Args:
        options: Dimensions and fuzz settings

    Returns:
        FuzzResult with the exact ratio, the best fuzzed candidate
        and deduplicated alternates
    """
    width, height = options.width, options.height

    divisors = get_divisors(width, height, options.divisor_strategy)
    candidates = evaluate_candidates(
        width=width,
        height=height,
        divisors=divisors,
        fuzz_type=options.fuzz_type,
        tolerance=options.tolerance,
    )
    allowed = filter_allowed(candidates, options.allowed_ratios)
    ranked = rank_candidates(allowed)

    result = assemble_result(reduce_ratio(width, height), ranked)

    if result.fuzzed is not None:
        logger.debug(
            f"{width}x{height}: fuzzed to {result.fuzzed.key} "
            f"(divisor={result.fuzzed.divisor}, {len(result.alts)} alts)"
        )
    else:
        logger.debug(f"{width}x{height}: no fuzzed ratio, exact {result.ratio.key}")

    return result


def fuzz_dimensions(
    width: Number,
    height: Number,
    config: Optional["FuzzConfig"] = None,
    fuzz_type: Optional[str] = None,
    tolerance: Optional[float] = None,
    allowed_ratios: Optional[Sequence[Ratio]] = None,
    divisor_strategy: Optional[str] = None,
) -> FuzzResult:
    """
    Fuzz width x height with settings from a config and/or explicit arguments.

    Priority: explicit argument > FuzzConfig > defaults

    Args:
        width: True pixel width
        height: True pixel height
        config: FuzzConfig (optional)
        fuzz_type: "percent" or "range"
        tolerance: Maximum accepted error
        allowed_ratios: Allow-list of reduced ratios
        divisor_strategy: "range" or "remainder"

    Returns:
        FuzzResult
    """
    if config is not None:
        fuzz_type = fuzz_type if fuzz_type is not None else config.fuzz_type
        tolerance = tolerance if tolerance is not None else config.tolerance
        allowed_ratios = allowed_ratios if allowed_ratios is not None else config.allowed_ratios
        divisor_strategy = divisor_strategy if divisor_strategy is not None else config.divisor_strategy

    fuzz_type = fuzz_type if fuzz_type is not None else "percent"
    tolerance = tolerance if tolerance is not None else 0.0
    divisor_strategy = divisor_strategy if divisor_strategy is not None else "range"

    return fuzz_ratio(
        FuzzOptions(
            width=width,
            height=height,
            fuzz_type=fuzz_type,
            tolerance=tolerance,
            allowed_ratios=allowed_ratios,
            divisor_strategy=divisor_strategy,
        )
    )


__all__ = ["FuzzOptions", "fuzz_ratio", "fuzz_dimensions"]
