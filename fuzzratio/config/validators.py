"""
Configuration Validators for fuzzratio.

This module provides validation functions for FuzzConfig and FuzzOptions.

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Optional, Sequence

from ..ratio.divisors import DIVISOR_STRATEGIES

if TYPE_CHECKING:
    from ..ratio.core import FuzzOptions
    from ..ratio.types import Ratio
    from .fuzz_config import FuzzConfig

FUZZ_TYPES = ("percent", "range")


def validate_fuzz_config(config: "FuzzConfig") -> None:
    """Validate FuzzConfig fields.

    Args:
        config: FuzzConfig instance to validate.

    Raises:
        ValueError: If any field is out of range.
    """
    _validate_fuzz_type(config.fuzz_type)
    _validate_tolerance(config.tolerance)
    _validate_divisor_strategy(config.divisor_strategy)
    _validate_allowed_ratios(config.allowed_ratios)


def validate_fuzz_options(options: "FuzzOptions") -> None:
    """Validate FuzzOptions: dimensions plus the fuzz settings.

    Raises:
        ValueError: If any field is out of range.
    """
    validate_dimensions(options.width, options.height)
    _validate_fuzz_type(options.fuzz_type)
    _validate_tolerance(options.tolerance)
    _validate_divisor_strategy(options.divisor_strategy)
    _validate_allowed_ratios(options.allowed_ratios)


def validate_dimensions(width: Any, height: Any) -> None:
    """Width and height must be positive finite numbers."""
    for name, value in (("width", width), ("height", height)):
        if not _is_positive_number(value):
            raise ValueError(
                f"Configuration error: {name} must be a positive finite number, got {value!r}"
            )


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def _validate_fuzz_type(fuzz_type: str) -> None:
    if fuzz_type not in FUZZ_TYPES:
        raise ValueError(
            f"Configuration error: fuzz_type must be one of {FUZZ_TYPES}, got {fuzz_type!r}"
        )


def _validate_tolerance(tolerance: Any) -> None:
    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
        raise ValueError(f"Configuration error: tolerance must be a number, got {tolerance!r}")
    if not math.isfinite(tolerance) or tolerance < 0:
        raise ValueError(
            f"Configuration error: tolerance must be non-negative and finite, got {tolerance}"
        )


def _validate_divisor_strategy(strategy: str) -> None:
    if strategy not in DIVISOR_STRATEGIES:
        raise ValueError(
            f"Configuration error: divisor_strategy must be one of {DIVISOR_STRATEGIES}, "
            f"got {strategy!r}"
        )


def _validate_allowed_ratios(allowed_ratios: Optional[Sequence["Ratio"]]) -> None:
    if allowed_ratios is None:
        return

    for ratio in allowed_ratios:
        if not (_is_positive_number(ratio.width) and _is_positive_number(ratio.height)):
            raise ValueError(
                f"Configuration error: allowed ratio {ratio.width}:{ratio.height} "
                f"must have positive components"
            )


__all__ = [
    "FUZZ_TYPES",
    "validate_fuzz_config",
    "validate_fuzz_options",
    "validate_dimensions",
]
