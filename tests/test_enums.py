# -*- coding: utf-8 -*-
"""Tests for enumerations."""

import pytest

from geocoord_lib.enums import AngleFormat
from geocoord_lib.enums import Axis
from geocoord_lib.enums import Bearing
from geocoord_lib.enums import CoordinateKind
from geocoord_lib.enums import Format
from geocoord_lib.enums import Hemisphere
from geocoord_lib.enums import TokenKind


class TestFormat:
    """Tests for Format enum."""

    @pytest.mark.parametrize("value", ["latlon", "LATLON", " LatLon "])
    def test_normalize(self, value):
        """Test case-insensitive matching."""
        assert Format.normalize(value) is Format.LATLON

    def test_normalize_passthrough(self):
        """Test enum members and None pass through."""
        assert Format.normalize(Format.LONLAT) is Format.LONLAT
        assert Format.normalize(None) is None

    def test_normalize_unknown(self):
        """Test unknown orders raise."""
        with pytest.raises(ValueError, match="Unknown coordinate order"):
            Format.normalize("xy")


class TestCoordinateKind:
    """Tests for CoordinateKind enum."""

    def test_order(self):
        """Test the order implied by the aliases."""
        assert CoordinateKind.LATLON.order is Format.LATLON
        assert CoordinateKind.LONLAT.order is Format.LONLAT
        assert CoordinateKind.WGS.order is None

    def test_is_geographic(self):
        """Test which kinds are geographic."""
        assert CoordinateKind.WGS.is_geographic
        assert CoordinateKind.LONLAT.is_geographic
        assert not CoordinateKind.MGRS.is_geographic
        assert not CoordinateKind.UTM.is_geographic


class TestBearing:
    """Tests for Bearing enum."""

    def test_axis(self):
        """Test the axis of each letter."""
        assert Bearing.NORTH.axis is Axis.LAT
        assert Bearing.SOUTH.axis is Axis.LAT
        assert Bearing.EAST.axis is Axis.LON
        assert Bearing.WEST.axis is Axis.LON

    def test_is_negative(self):
        """Test south and west are negative."""
        assert Bearing.SOUTH.is_negative
        assert Bearing.WEST.is_negative
        assert not Bearing.NORTH.is_negative

    def test_label(self):
        """Test human readable names."""
        assert Bearing.NORTH.label == "North"
        assert Bearing.WEST.label == "West"

    @pytest.mark.parametrize(
        ("value", "axis", "expected"),
        [
            (1, Axis.LAT, Bearing.NORTH),
            (0, Axis.LAT, Bearing.NORTH),
            (-1, Axis.LAT, Bearing.SOUTH),
            (0, Axis.LON, Bearing.EAST),
            (-1, Axis.LON, Bearing.WEST),
        ],
    )
    def test_for_value(self, value, axis, expected):
        """Test the letter describing a signed value."""
        assert Bearing.for_value(value, axis) is expected


class TestOtherEnums:
    """Tests for the remaining enums."""

    def test_axis_other(self):
        """Test the opposite axis."""
        assert Axis.LAT.other is Axis.LON
        assert Axis.LON.other is Axis.LAT

    @pytest.mark.parametrize(
        ("letter", "expected"), [("N", "N"), ("X", "N"), ("M", "S"), ("c", "S")]
    )
    def test_hemisphere(self, letter, expected):
        """Test the hemisphere of band letters."""
        assert Hemisphere.from_zone_letter(letter) is Hemisphere(expected)

    def test_token_marks(self):
        """Test which token kinds are unit marks."""
        assert TokenKind.DEGREE.is_mark
        assert TokenKind.SECOND.is_mark
        assert not TokenKind.NUMBER.is_mark

    def test_angle_format_values(self):
        """Test the format names."""
        assert [fmt.value for fmt in AngleFormat] == ["dd", "ddm", "dms"]
