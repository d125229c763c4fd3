"""
Tests for compass rose conversions.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from constants import COMPASS_DIRECTIONS
from map_geometry.compass import compass_to_degrees, degrees_to_compass


class TestCompassRose:
    """Tests for the label table itself."""

    def test_has_24_points(self):
        assert len(COMPASS_DIRECTIONS) == 24
        assert len(set(COMPASS_DIRECTIONS)) == 24

    def test_cardinal_positions(self):
        assert COMPASS_DIRECTIONS[0] == "N"
        assert COMPASS_DIRECTIONS[6] == "E"
        assert COMPASS_DIRECTIONS[12] == "S"
        assert COMPASS_DIRECTIONS[18] == "W"


class TestCompassToDegrees:
    """Tests for label to degrees."""

    @pytest.mark.parametrize("label,expected", [
        ("N", 0.0),
        ("N⅓NE", 15.0),
        ("NE", 45.0),
        ("E", 90.0),
        ("SE", 135.0),
        ("S", 180.0),
        ("W", 270.0),
        ("N⅓NW", 345.0),
    ])
    def test_known_labels(self, label, expected):
        assert compass_to_degrees(label) == expected

    def test_every_label_is_index_times_15(self):
        for idx, label in enumerate(COMPASS_DIRECTIONS):
            assert compass_to_degrees(label) == idx * 15

    @pytest.mark.parametrize("label", ["NNE", "north", "", "n"])
    def test_unknown_label_raises(self, label):
        """Unknown labels fail instead of producing a negative angle."""
        with pytest.raises(ValueError, match="Unknown compass direction"):
            compass_to_degrees(label)


class TestDegreesToCompass:
    """Tests for degrees to label."""

    @pytest.mark.parametrize("degrees,expected", [
        (0, "N"),
        (7.4, "N"),
        (7.5, "N⅓NE"),
        (45, "NE"),
        (90, "E"),
        (352.4, "N⅓NW"),
        (352.5, "N"),
        (359.9, "N"),
    ])
    def test_rounds_to_nearest(self, degrees, expected):
        assert degrees_to_compass(degrees) == expected

    def test_round_trip_every_label(self):
        for label in COMPASS_DIRECTIONS:
            assert degrees_to_compass(compass_to_degrees(label)) == label

    @pytest.mark.parametrize("degrees,equivalent", [
        (-15, 345),
        (-90, 270),
        (360, 0),
        (375, 15),
        (720 + 45, 45),
        (-360 - 180, 180),
    ])
    def test_wraps_around(self, degrees, equivalent):
        assert degrees_to_compass(degrees) == degrees_to_compass(equivalent)

    def test_any_real_gives_a_label(self):
        for tenth in range(-7200, 7200, 7):
            assert degrees_to_compass(tenth / 10) in COMPASS_DIRECTIONS

    @pytest.mark.parametrize("degrees", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_raises(self, degrees):
        with pytest.raises(ValueError, match="non-finite"):
            degrees_to_compass(degrees)
