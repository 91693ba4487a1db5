"""
Tests for metric rounding helpers.
"""

import math

import pytest

from gpx_analyzer.shared.rounding import round_half_away, truncate


class TestRoundHalfAway:
    """Tests for round_half_away function."""

    @pytest.mark.parametrize("value, expected", [
        (0.125, 0.13),
        (-0.125, -0.13),
        (2.5, 2.5),
        (1.005, 1.0),     # 1.005 is 1.00499999... in binary
        (145.0, 145.0),
        (140.666666, 140.67),
        (-415.25, -415.25),
    ])
    def test_two_decimals(self, value, expected):
        assert round_half_away(value) == expected

    def test_differs_from_bankers_rounding(self):
        """round() would give 0.0 and 2.0 here."""
        assert round_half_away(0.5, 0) == 1.0
        assert round_half_away(2.5, 0) == 3.0
        assert round(2.5) == 2

    def test_no_negative_zero(self):
        result = round_half_away(-0.001)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestTruncate:
    """Tests for truncate function."""

    def test_drops_digits(self):
        assert truncate(119.996) == 119.99
        assert truncate(45.678) == 45.67

    def test_negative(self):
        assert truncate(-1.239) == -1.23

    def test_zero(self):
        assert truncate(0.004) == 0.0
