"""
fuzzratio: Fuzzed Aspect Ratio Matching

Finds small-integer aspect ratios (16:9, 4:3, ...) for pixel dimensions,
tolerating off-by-a-few-pixel measurement noise.

Modules:
    - ratio: divisor search, error metric, ranking and result assembly
    - config: FuzzConfig, validation and YAML loading
    - image: Pillow helpers for image files

Usage:
    from fuzzratio import fuzz_dimensions
    result = fuzz_dimensions(1921, 1081, fuzz_type="range", tolerance=2)
    result.fuzzed.key  # "16:9"

Author: fuzzratio Project
Date: 2026-10-18
"""

__version__ = "0.1.0"

from . import ratio
from . import config
from . import image

from .config import FuzzConfig
from .ratio import (
    FuzzOptions,
    FuzzRatio,
    FuzzResult,
    Ratio,
    RatioError,
    fuzz_dimensions,
    fuzz_ratio,
)
from .image import fuzz_image_ratio, scan_images_for_ratios

__all__ = [
    "__version__",
    "ratio",
    "config",
    "image",
    "FuzzConfig",
    "FuzzOptions",
    "FuzzRatio",
    "FuzzResult",
    "Ratio",
    "RatioError",
    "fuzz_dimensions",
    "fuzz_ratio",
    "fuzz_image_ratio",
    "scan_images_for_ratios",
]
