# -*- coding: utf-8 -*-
"""Tests for the coordinate conversion facade."""

import pytest
from pydantic import ValidationError

from geocoord_lib.coordinate import MGRSCoordinate
from geocoord_lib.coordinate import UTMCoordinate
from geocoord_lib.coordinate import WGSCoordinate
from geocoord_lib.coordinate import create_coordinate
from geocoord_lib.enums import CoordinateKind
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import Format
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import InvalidCoordinateError
from tests.conftest import PARIS


class TestCreateCoordinateWgs:
    """Tests for geographic inputs."""

    def test_text(self):
        """Test free text."""
        point = create_coordinate("wgs", "46.1N 93.2E")
        assert isinstance(point, WGSCoordinate)
        assert point.lat == 46.1
        assert point.lon == 93.2
        assert point.kind is CoordinateKind.WGS

    def test_text_with_order(self):
        """Test the order argument."""
        point = create_coordinate("wgs", "-71.0589, 42.3601", order="lonlat")
        assert point.lat == 42.3601
        assert point.lon == -71.0589

    def test_latlon_kind(self):
        """Test the latitude-first alias."""
        point = create_coordinate("latlon", "-74.006, 40.7128")
        assert point.lat == -74.006
        assert point.lon == 40.7128

    def test_lonlat_kind(self):
        """Test the longitude-first alias and its display order."""
        point = create_coordinate("lonlat", "-74.006, 40.7128")
        assert point.lat == 40.7128
        assert point.lon == -74.006
        assert point.order is Format.LONLAT
        assert point.to_string() == "-74.006°, 40.7128°"

    def test_kind_case_insensitive(self):
        """Test the kind is matched case-insensitively."""
        assert isinstance(create_coordinate("WGS", "40 74"), WGSCoordinate)

    def test_tuple(self):
        """Test a numeric pair."""
        point = create_coordinate("wgs", (40.7128, -74.006))
        assert (point.lat, point.lon) == (40.7128, -74.006)

    def test_tuple_lonlat(self):
        """Test a numeric pair read longitude first."""
        point = create_coordinate("lonlat", [-74.006, 40.7128])
        assert (point.lat, point.lon) == (40.7128, -74.006)

    def test_object(self):
        """Test a loosely keyed mapping."""
        point = create_coordinate("wgs", {"Latitude": 1.5, "LON": 2.5})
        assert (point.lat, point.lon) == (1.5, 2.5)

    def test_tuple_out_of_range(self):
        """Test a numeric pair outside the valid range."""
        with pytest.raises(CoordinateParseException, match="outside valid range") as exc:
            create_coordinate("wgs", (95, 0))
        assert exc.value.category is ErrorCategory.RANGE

    def test_invalid_object(self):
        """Test a mapping with non-numeric values."""
        with pytest.raises(CoordinateParseException, match="Invalid coordinate object"):
            create_coordinate("wgs", {"lat": "x", "lon": 1})

    @pytest.mark.parametrize("value", [42, (1, 2, 3), {"x": 1}])
    def test_invalid_input(self, value):
        """Test inputs of no recognised shape."""
        with pytest.raises(CoordinateParseException, match="Invalid coordinate input"):
            create_coordinate("wgs", value)

    def test_text_error_carries_parser_message(self):
        """Test the exception message is the parser's literal message."""
        with pytest.raises(CoordinateParseException) as exc:
            create_coordinate("wgs", "12N 34N")
        error = exc.value.to_error()
        assert error.category is ErrorCategory.CONFLICT
        assert "same axis" in str(exc.value)
        assert error.raw == "12N 34N"

    def test_unknown_kind(self):
        """Test an unknown kind is a programming error."""
        with pytest.raises(ValueError, match="Unknown coordinate kind"):
            create_coordinate("xyz", "40 74")


class TestCreateCoordinateSkipValidation:
    """Tests for the recognition-only mode."""

    @pytest.mark.parametrize(
        ("kind", "value", "expected"),
        [
            ("wgs", "91 0", True),
            ("wgs", "hello", False),
            ("wgs", (45, 90), True),
            ("wgs", (95, 0), False),
            ("wgs", {"lat": "x", "lon": 1}, False),
            ("wgs", 42, False),
            ("mgrs", "33XJV", True),
            ("mgrs", "hello", False),
            ("utm", "31U 448252 5411954", True),
            ("utm", "31U", False),
        ],
    )
    def test_boolean(self, kind, value, expected):
        """Test every kind answers with a boolean."""
        assert create_coordinate(kind, value, skip_validation=True) is expected


class TestWgsCoordinate:
    """Tests for WGSCoordinate."""

    def test_to_wgs_is_self(self):
        """Test the identity conversion."""
        point = create_coordinate("wgs", "40 74")
        assert point.to_wgs() is point

    @pytest.mark.parametrize(
        ("angle_format", "compass", "expected"),
        [
            ("dd", False, "42.3601°, -71.0589°"),
            ("ddm", False, "42° 21.606', -71° 3.534'"),
            ("dms", False, "42° 21' 36.36\", -71° 3' 32.04\""),
            ("dd", True, "42.3601°N, 71.0589°W"),
        ],
    )
    def test_to_string(self, angle_format, compass, expected):
        """Test the display formats."""
        point = create_coordinate("wgs", "42.3601, -71.0589")
        assert point.to_string(angle_format, compass=compass) == expected

    def test_str(self):
        """Test str() is the default rendering."""
        assert str(create_coordinate("wgs", "42.3601, -71.0589")) == "42.3601°, -71.0589°"

    def test_tokens(self):
        """Test the lexical parts of the rendering."""
        point = create_coordinate("wgs", "46.1N 93.2E")
        assert point.tokens() == ("46.1", "°", ",", "93.2", "°")

    def test_to_geojson(self):
        """Test GeoJSON puts longitude first."""
        point = create_coordinate("wgs", "42.3601, -71.0589").to_geojson()
        assert point["type"] == "Point"
        assert list(point["coordinates"]) == [-71.0589, 42.3601]

    def test_to_mgrs_round_trip(self, reference_point):
        """Test WGS84 -> MGRS -> WGS84 returns the same point."""
        point = create_coordinate("wgs", (reference_point.lat, reference_point.lon))
        back = point.to_mgrs().to_wgs()
        assert back.lat == pytest.approx(reference_point.lat, abs=1e-6)
        assert back.lon == pytest.approx(reference_point.lon, abs=1e-6)

    def test_to_mgrs_precision(self):
        """Test a coarse reference."""
        point = create_coordinate("wgs", (PARIS.lat, PARIS.lon))
        assert point.to_mgrs(0).to_string() == "31UDQ"

    def test_grid_renditions(self):
        """Test the MGRS and UTM text of a written point."""
        point = create_coordinate("wgs", "48.8584 N, 2.2945 E")
        assert point.to_mgrs().to_string() == "31UDQ4825211954"
        assert point.to_utm().to_string() == "31U 448252 5411955"

    def test_to_utm(self):
        """Test the UTM zone of a point."""
        utm_point = create_coordinate("wgs", (PARIS.lat, PARIS.lon)).to_utm()
        assert isinstance(utm_point, UTMCoordinate)
        assert utm_point.to_string().startswith("31U ")

    def test_polar_has_no_grid(self):
        """Test points beyond 84N have no MGRS rendition."""
        with pytest.raises(InvalidCoordinateError):
            create_coordinate("wgs", "85 0").to_mgrs()

    def test_frozen(self):
        """Test coordinates are immutable."""
        point = create_coordinate("wgs", "40 74")
        with pytest.raises(ValidationError):
            point.lat = 1


class TestMgrsCoordinate:
    """Tests for MGRSCoordinate."""

    def test_parse(self):
        """Test MGRS text."""
        grid = create_coordinate("mgrs", "31U DQ 48252 11954")
        assert isinstance(grid, MGRSCoordinate)
        assert grid.kind is CoordinateKind.MGRS
        assert grid.to_string() == "31UDQ4825211954"

    def test_invalid(self):
        """Test the parser's message is raised."""
        with pytest.raises(
            CoordinateParseException, match="Invalid zone letter 'X' for zone '60'"
        ):
            create_coordinate("mgrs", "60XJV")

    def test_to_mgrs_is_self(self):
        """Test the identity conversion."""
        grid = create_coordinate("mgrs", "31UDQ4825211954")
        assert grid.to_mgrs() is grid
        assert grid.to_mgrs(5) is grid

    def test_to_mgrs_precision(self):
        """Test a coarser reference of the same cell."""
        grid = create_coordinate("mgrs", "31UDQ4825211954")
        assert grid.to_mgrs(2).to_string() == "31UDQ4811"

    def test_tokens(self):
        """Test the grid zone, square and digit groups."""
        grid = create_coordinate("mgrs", "31UDQ4825211954")
        assert grid.tokens() == ("31U", "DQ", "48252", "11954")

    def test_to_utm(self):
        """Test the south-west corner of the cell."""
        grid = create_coordinate("mgrs", "31UDQ4825211954")
        assert grid.to_utm().to_string() == "31U 448252 5411954"

    def test_to_wgs(self):
        """Test the corner lands within a meter of the point."""
        point = create_coordinate("mgrs", "31UDQ4825211954").to_wgs()
        assert point.lat == pytest.approx(PARIS.lat, abs=1e-4)
        assert point.lon == pytest.approx(PARIS.lon, abs=1e-4)

    def test_utm_round_trip_keeps_letters(self):
        """Test MGRS -> UTM -> MGRS keeps the reference."""
        grid = create_coordinate("mgrs", "33UXP0412")
        assert grid.to_utm().to_mgrs(2).to_string() == "33UXP0412"

    def test_text_round_trip(self):
        """Test WGS84 -> MGRS -> text -> MGRS keeps the text."""
        text = create_coordinate("wgs", (PARIS.lat, PARIS.lon)).to_mgrs().to_string()
        assert create_coordinate("mgrs", text).to_string() == text


class TestUtmCoordinate:
    """Tests for UTMCoordinate."""

    def test_parse(self):
        """Test UTM text."""
        point = create_coordinate("utm", "31U 448252 5411954")
        assert isinstance(point, UTMCoordinate)
        assert point.kind is CoordinateKind.UTM
        assert point.to_utm() is point
        assert point.tokens() == ("31U", "448252", "5411954")

    def test_to_mgrs(self):
        """Test lettering a UTM coordinate."""
        point = create_coordinate("utm", "31U 448252 5411954")
        assert point.to_mgrs().to_string() == "31UDQ4825211954"

    def test_to_wgs(self):
        """Test unprojecting a UTM coordinate."""
        point = create_coordinate("utm", "31U 448252 5411954").to_wgs()
        assert point.lat == pytest.approx(PARIS.lat, abs=1e-4)
        assert point.lon == pytest.approx(PARIS.lon, abs=1e-4)

    def test_invalid(self):
        """Test the parser's message is raised."""
        with pytest.raises(CoordinateParseException, match="Invalid easting value"):
            create_coordinate("utm", "31U 50000 5411954")
