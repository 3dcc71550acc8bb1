"""
Image Aspect Ratio Module

Reads image sizes with Pillow and fuzzes their aspect ratios.
"""

from .utils import (
    IMAGE_EXTENSIONS,
    read_image_size,
    fuzz_image_ratio,
    scan_images_for_ratios,
)

__all__ = [
    "IMAGE_EXTENSIONS",
    "read_image_size",
    "fuzz_image_ratio",
    "scan_images_for_ratios",
]
