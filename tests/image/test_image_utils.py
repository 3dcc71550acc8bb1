"""
fuzzratio Image Utils Tests

Tests for:
    - read_image_size / fuzz_image_ratio: single image
    - scan_images_for_ratios: directory scanning

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import logging

import pytest
from PIL import Image, UnidentifiedImageError

from fuzzratio.image import (
    IMAGE_EXTENSIONS,
    fuzz_image_ratio,
    read_image_size,
    scan_images_for_ratios,
)
from fuzzratio.ratio import FuzzResult, Ratio


class TestFuzzImageRatio:
    """Single image tests."""

    def test_read_image_size(self, make_images):
        """Test (width, height) order."""
        root = make_images({"wide.png": (161, 91)})
        assert read_image_size(root / "wide.png") == (161, 91)

    def test_fuzz_noisy_image(self, make_images, range_config):
        """Test a 161x91 image fuzzes to 16:9 within 2px."""
        root = make_images({"wide.png": (161, 91)})

        result = fuzz_image_ratio(root / "wide.png", config=range_config)

        assert result.ratio == Ratio(23, 13)
        assert result.fuzzed.key == "16:9"
        assert result.fuzzed.divisor == 2

    def test_fuzz_image_default_config(self, make_images):
        """Test no config means exact matching only."""
        root = make_images({"tiny.png": (16, 9)})

        result = fuzz_image_ratio(root / "tiny.png")

        assert result == FuzzResult(ratio=Ratio(16, 9))

    def test_missing_file_raises(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            fuzz_image_ratio(tmp_path / "missing.png")

    def test_invalid_image_raises(self, tmp_path):
        """Test a non-image file raises UnidentifiedImageError."""
        bad = tmp_path / "bad.png"
        bad.write_text("not an image", encoding="utf-8")

        with pytest.raises(UnidentifiedImageError):
            fuzz_image_ratio(bad)


class TestScanImagesForRatios:
    """Directory scanning tests."""

    def test_image_extensions(self):
        """Test common extensions are supported."""
        assert {".jpg", ".jpeg", ".png", ".webp"} <= IMAGE_EXTENSIONS

    def test_scan_recursive(self, make_images, range_config):
        """Test nested images are found and fuzzed."""
        root = make_images({
            "a.png": (161, 91),
            "b.jpg": (32, 18),
            "sub/c.png": (100, 100),
        })

        results = scan_images_for_ratios(root, config=range_config)

        assert sorted(path.name for path in results) == ["a.png", "b.jpg", "c.png"]
        assert results[root / "a.png"].fuzzed.key == "16:9"
        assert results[root / "sub" / "c.png"].fuzzed.key == "1:1"

    def test_scan_skips_unreadable(self, make_images, caplog):
        """Test unreadable files are skipped with a warning."""
        root = make_images({"good.png": (32, 18)})
        (root / "broken.png").write_text("garbage", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="fuzzratio.image.utils"):
            results = scan_images_for_ratios(root)

        assert list(results) == [root / "good.png"]
        assert "Failed to read image" in caplog.text
        assert "broken.png" in caplog.text

    def test_scan_skips_oversized(self, make_images, monkeypatch, caplog):
        """Test images over Pillow's pixel limit are skipped, not fatal."""
        root = make_images({"big.png": (64, 36), "small.png": (16, 9)})
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 500)

        with caplog.at_level(logging.WARNING, logger="fuzzratio.image.utils"):
            results = scan_images_for_ratios(root)

        assert list(results) == [root / "small.png"]
        assert "Failed to read image" in caplog.text
        assert "big.png" in caplog.text

    def test_scan_ignores_other_files(self, make_images):
        """Test non-image extensions are not scanned."""
        root = make_images({"good.png": (32, 18)})
        (root / "notes.txt").write_text("hello", encoding="utf-8")

        results = scan_images_for_ratios(root)

        assert list(results) == [root / "good.png"]

    def test_scan_logs_summary(self, make_images, range_config, caplog):
        """Test per-ratio counts are logged."""
        root = make_images({"a.png": (161, 91), "b.png": (161, 91)})

        with caplog.at_level(logging.INFO, logger="fuzzratio.image.utils"):
            scan_images_for_ratios(root, config=range_config)

        assert "2 valid, 0 skipped" in caplog.text
        assert "Ratio 16:9: 2 images" in caplog.text

    def test_scan_empty_dir(self, tmp_path):
        """Test an empty directory gives no results."""
        assert scan_images_for_ratios(tmp_path) == {}
