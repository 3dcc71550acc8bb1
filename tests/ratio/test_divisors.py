"""
Divisor Enumeration Tests

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import pytest

from fuzzratio.ratio import get_divisors, range_divisors, remainder_divisors


class TestRangeDivisors:
    """Full scan from 2 to half the smaller dimension."""

    def test_range_small(self):
        """Test 16x9 scans 2..4."""
        assert range_divisors(16, 9) == [2, 3, 4]

    def test_range_includes_non_divisors(self):
        """Test divisors that do not divide either dimension are included."""
        divisors = range_divisors(1921, 1081)
        assert 7 in divisors
        assert divisors[0] == 2
        assert divisors[-1] == 540

    @pytest.mark.parametrize("width, height", [(2, 2), (3, 100), (100, 1), (3, 3)])
    def test_range_empty_below_four(self, width, height):
        """Test min dimension < 4 yields no divisors."""
        assert range_divisors(width, height) == []

    def test_range_four(self):
        """Test min dimension of 4 yields only 2."""
        assert range_divisors(4, 4) == [2]

    def test_range_float_dimensions(self):
        """Test float dimensions use the floored half."""
        assert range_divisors(9.5, 20.0) == [2, 3, 4]


class TestRemainderDivisors:
    """Legacy Euclidean remainder sequence."""

    def test_remainder_full_hd(self):
        """Test 1920x1080 remainder chain."""
        assert remainder_divisors(1920, 1080) == [840, 240, 120]

    def test_remainder_portrait(self):
        """Test first remainder is the smaller dimension when width < height."""
        assert remainder_divisors(796, 1134) == [796, 338, 120, 98, 22, 10, 2]

    def test_remainder_coprime_ends_with_one(self):
        """Test coprime dimensions end the chain at 1."""
        assert remainder_divisors(5, 3) == [2, 1]

    def test_remainder_exact_multiple_empty(self):
        """Test an exact multiple has no nonzero remainder."""
        assert remainder_divisors(6, 3) == []

    def test_strategies_differ(self):
        """Test the two strategies are not interchangeable."""
        assert range_divisors(1920, 1080) != remainder_divisors(1920, 1080)


class TestGetDivisors:
    """Strategy dispatch."""

    def test_default_is_range(self):
        """Test the default strategy is the range scan."""
        assert get_divisors(16, 9) == range_divisors(16, 9)

    def test_remainder_selected(self):
        """Test remainder strategy dispatch."""
        assert get_divisors(1920, 1080, "remainder") == [840, 240, 120]

    def test_unknown_strategy_raises(self):
        """Test unknown strategy raises ValueError."""
        with pytest.raises(ValueError, match="Unknown divisor strategy"):
            get_divisors(16, 9, "euclid")
