"""
fuzzratio Image Utilities

Fuzzed aspect ratios for image files.

包含:
    - fuzz_image_ratio: 單張圖片長寬比模糊匹配
    - scan_images_for_ratios: 遞迴掃描圖片目錄

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Tuple, Union

from PIL import Image

from ..ratio.core import fuzz_dimensions
from ..ratio.types import FuzzResult

if TYPE_CHECKING:
    from ..config.fuzz_config import FuzzConfig

logger = logging.getLogger(__name__)


# 支援的圖片副檔名
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".gif", ".tiff", ".tif"}


def read_image_size(path: Union[str, Path]) -> Tuple[int, int]:
    """Return (width, height) of an image without decoding pixel data."""
    with Image.open(path) as img:
        return img.size


def fuzz_image_ratio(
    path: Union[str, Path],
    config: Optional["FuzzConfig"] = None,
) -> FuzzResult:
    """
    Fuzz the aspect ratio of one image.

    Args:
        path: Image file path
        config: FuzzConfig (optional, exact matching if omitted)

    Returns:
        FuzzResult for the image's pixel size

    Raises:
        FileNotFoundError: If the file does not exist
        PIL.UnidentifiedImageError: If the file is not a readable image
    """
    width, height = read_image_size(path)
    return fuzz_dimensions(width, height, config=config)


def scan_images_for_ratios(
    root_dir: Union[str, Path],
    config: Optional["FuzzConfig"] = None,
) -> Dict[Path, FuzzResult]:
    """
    Scan an image directory and fuzz every image's aspect ratio.

    Unreadable files are skipped with a warning.

    Args:
        root_dir: Image root directory
        config: FuzzConfig applied to every image

    Returns:
        Mapping of image path to FuzzResult, in sorted path order
    """
    root_dir = Path(root_dir)
    results: Dict[Path, FuzzResult] = {}
    skipped = 0

    # 遞迴搜尋所有圖片
    all_images = []
    for ext in IMAGE_EXTENSIONS:
        all_images.extend(root_dir.rglob(f"*{ext}"))
        all_images.extend(root_dir.rglob(f"*{ext.upper()}"))
    all_images = sorted(set(all_images))

    logger.info(f"Scanning {len(all_images)} images for aspect ratios...")

    for img_path in all_images:
        try:
            results[img_path] = fuzz_image_ratio(img_path, config=config)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.warning(f"Failed to read image {img_path}: {e}")
            skipped += 1

    logger.info(f"Aspect ratio scan complete: {len(results)} valid, {skipped} skipped")

    # 統計各比例數量
    ratio_counts = defaultdict(int)
    for result in results.values():
        winner = result.fuzzed if result.fuzzed is not None else result.ratio
        ratio_counts[winner.key] += 1

    for key, count in sorted(ratio_counts.items()):
        logger.info(f"  Ratio {key}: {count} images")

    return results


__all__ = [
    "IMAGE_EXTENSIONS",
    "read_image_size",
    "fuzz_image_ratio",
    "scan_images_for_ratios",
]
