"""
Configuration module for fuzzratio.

Usage:
    from fuzzratio.config import FuzzConfig
    config = FuzzConfig.from_yaml("configs/fuzz.yaml")

Author: fuzzratio Project
Date: 2026-10-18
"""

from .fuzz_config import FuzzConfig
from .loader import load_fuzz_config
from .parsers import parse_allowed_ratios, parse_fuzz_config, parse_ratio
from .validators import FUZZ_TYPES, validate_dimensions, validate_fuzz_config

__all__ = [
    "FuzzConfig",
    "FUZZ_TYPES",
    "load_fuzz_config",
    "parse_ratio",
    "parse_allowed_ratios",
    "parse_fuzz_config",
    "validate_dimensions",
    "validate_fuzz_config",
]
