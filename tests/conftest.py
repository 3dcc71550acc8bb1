"""
Shared pytest fixtures and utilities for fuzzratio tests.

This module provides:
- Config fixtures (exact, range, percent)
- Image fixtures (image directory factory)

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, Tuple

import pytest
from PIL import Image

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# ============================================================================
# Custom Markers
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture
def exact_config():
    """Percent tolerance 0: only exact reductions qualify."""
    from fuzzratio.config import FuzzConfig
    return FuzzConfig.default()


@pytest.fixture
def range_config():
    """Range tolerance of 2 pixels."""
    from fuzzratio.config import FuzzConfig
    return FuzzConfig.for_testing()


@pytest.fixture
def percent_config():
    """Percent tolerance of 3%."""
    from fuzzratio.config import FuzzConfig
    return FuzzConfig(fuzz_type="percent", tolerance=3.0)


# ============================================================================
# Image Fixtures
# ============================================================================

@pytest.fixture
def make_images(tmp_path) -> Callable[[Dict[str, Tuple[int, int]]], Path]:
    """
    Factory writing solid-color images under tmp_path.

    Usage:
        root = make_images({"a.png": (161, 91), "sub/b.jpg": (32, 18)})
    """
    def _make(sizes: Dict[str, Tuple[int, int]]) -> Path:
        for name, size in sizes.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            Image.new("RGB", size, color=(128, 64, 32)).save(path)
        return tmp_path

    return _make
