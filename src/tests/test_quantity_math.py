"""
Tests for recipe scaling quantity math.

Covers percent/goal conversion, half-up rounding and the zero-base
fallback.
"""

import pytest

from src.services.planning.quantity_math import (
    percent_from_quantities,
    quantity_from_percent,
    round_half_up,
)


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4

    def test_below_half_rounds_down(self):
        assert round_half_up(2.4999) == 2

    def test_whole_numbers_unchanged(self):
        assert round_half_up(7.0) == 7


class TestPercentFromQuantities:
    """Tests for percent_from_quantities."""

    def test_double_goal_is_200_percent(self):
        assert percent_from_quantities(50, 100) == 200

    def test_equal_goal_is_100_percent(self):
        assert percent_from_quantities(50, 50) == 100

    def test_rounds_to_whole_percent(self):
        # 1/3 = 33.33...%
        assert percent_from_quantities(3, 1) == 33
        # 2/3 = 66.66...%
        assert percent_from_quantities(3, 2) == 67

    def test_zero_base_falls_back_to_100(self):
        assert percent_from_quantities(0, 100) == 100

    def test_negative_base_falls_back_to_100(self):
        assert percent_from_quantities(-5, 100) == 100


class TestQuantityFromPercent:
    """Tests for quantity_from_percent."""

    def test_scales_base(self):
        assert quantity_from_percent(100, 120) == 120
        assert quantity_from_percent(50, 200) == 100

    def test_rounds_half_up(self):
        # 30 * 150% = 45; 25 * 50% = 12.5 -> 13
        assert quantity_from_percent(30, 150) == 45
        assert quantity_from_percent(25, 50) == 13

    def test_fractional_percent(self):
        assert quantity_from_percent(200, 12.5) == 25


class TestRoundTrip:
    """Goal -> percent -> goal stays within one unit for small bases."""

    @pytest.mark.parametrize("base", [1, 7, 24, 50, 100])
    def test_round_trip_within_one_unit(self, base):
        for goal in range(1, 3 * base + 1):
            percent = percent_from_quantities(base, goal)
            assert abs(quantity_from_percent(base, percent) - goal) <= 1
