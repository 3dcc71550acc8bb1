"""
Fuzz Configuration for fuzzratio.

This module defines the FuzzConfig dataclass holding the tolerance settings
applied when fuzzing an aspect ratio.

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from ..ratio.types import Ratio


@dataclass
class FuzzConfig:
    """Fuzz settings shared by every dimension pair fuzzed with it.

    Attributes:
        fuzz_type: Error metric compared against tolerance
            ('percent' on a 0-100 scale, 'range' in pixels).
        tolerance: Maximum accepted error, inclusive.
        allowed_ratios: Optional allow-list of reduced ratios. Accepts Ratio
            objects, "16:9" strings, {width, height} mappings or pairs.
        divisor_strategy: Divisor enumeration ('range' scans every divisor,
            'remainder' uses the legacy Euclidean remainder sequence).
    """

    fuzz_type: Literal["percent", "range"] = "percent"
    tolerance: float = 0.0
    allowed_ratios: Optional[Tuple[Ratio, ...]] = None
    divisor_strategy: Literal["range", "remainder"] = "range"

    def __post_init__(self):
        """Normalize allowed ratios and validate."""
        from .parsers import parse_allowed_ratios
        self.allowed_ratios = parse_allowed_ratios(self.allowed_ratios)

        from .validators import validate_fuzz_config
        validate_fuzz_config(self)

    @classmethod
    def default(cls) -> "FuzzConfig":
        """Exact matching only (percent, tolerance 0)."""
        return cls()

    @classmethod
    def for_testing(cls) -> "FuzzConfig":
        """Loose range tolerance used by unit tests."""
        return cls(fuzz_type="range", tolerance=2.0)

    def to_dict(self) -> dict:
        """Convert config to dictionary (YAML layout of the fuzz section)."""
        allowed = None
        if self.allowed_ratios is not None:
            allowed = [ratio.key for ratio in self.allowed_ratios]
        return {
            "type": self.fuzz_type,
            "tolerance": self.tolerance,
            "allowed_ratios": allowed,
            "divisor_strategy": self.divisor_strategy,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FuzzConfig":
        """Create config from dictionary."""
        from .parsers import parse_fuzz_config
        return parse_fuzz_config(config_dict)

    @classmethod
    def from_yaml(cls, path: str) -> "FuzzConfig":
        """Load config from a YAML file."""
        from .loader import load_fuzz_config
        return load_fuzz_config(path)


__all__ = ["FuzzConfig"]
