# -*- coding: utf-8 -*-
"""Geographic Coordinate Library.

A Python library for parsing, validating, converting and formatting
geographic coordinates: free-text WGS84 latitude/longitude, MGRS grid
references and UTM coordinates.

Usage:
    # Parse free text and convert
    from geocoord_lib import create_coordinate
    point = create_coordinate("wgs", "40° 42' 46.08\" N, 74° 0' 21.6\" W")
    print(point.to_mgrs().to_string())
    print(point.to_utm().to_string())
    print(point.to_string("dms", compass=True))

    # Or use the parsers directly; they return a value or a ParseError
    from geocoord_lib import parse_mgrs, parse_wgs
    result = parse_wgs("46.1N 93.2E")
    grid = parse_mgrs("32VKN")
"""

__version__ = "0.1.0"

# Constants
from geocoord_lib.constants import LAT_KEYS
from geocoord_lib.constants import LON_KEYS

# Facade
from geocoord_lib.coordinate import MGRSCoordinate
from geocoord_lib.coordinate import UTMCoordinate
from geocoord_lib.coordinate import WGSCoordinate
from geocoord_lib.coordinate import create_coordinate
from geocoord_lib.enums import AngleFormat
from geocoord_lib.enums import CoordinateKind
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import Format
from geocoord_lib.enums import TokenKind
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import InvalidCoordinateError
from geocoord_lib.errors import ParseError
from geocoord_lib.format import create_formatter
from geocoord_lib.format import format_angle
from geocoord_lib.format import format_coordinate
from geocoord_lib.format import format_decimal_degrees
from geocoord_lib.format import format_degrees_minutes_seconds
from geocoord_lib.format import split_angle
from geocoord_lib.mgrs import format_mgrs
from geocoord_lib.mgrs import parse_mgrs
from geocoord_lib.models import AngleParts
from geocoord_lib.models import FormatOptions
from geocoord_lib.models import LatLon
from geocoord_lib.models import MGRSValue
from geocoord_lib.models import UTMValue
from geocoord_lib.normalize import is_coordinate_object
from geocoord_lib.normalize import is_coordinate_tuple
from geocoord_lib.normalize import normalize_object_to_latlon
from geocoord_lib.normalize import tuple_to_latlon
from geocoord_lib.normalize import validate_numeric_coordinate
from geocoord_lib.projection import mgrs_to_utm
from geocoord_lib.projection import utm_to_mgrs
from geocoord_lib.projection import utm_to_wgs
from geocoord_lib.projection import wgs_to_utm
from geocoord_lib.utm import format_utm
from geocoord_lib.utm import parse_utm
from geocoord_lib.wgs import Token
from geocoord_lib.wgs import parse_wgs
from geocoord_lib.wgs import tokenize

__all__ = [
    # Constants
    "LAT_KEYS",
    "LON_KEYS",
    # Enums
    "AngleFormat",
    # Models
    "AngleParts",
    "CoordinateKind",
    # Errors
    "CoordinateParseException",
    "ErrorCategory",
    "Format",
    "FormatOptions",
    "InvalidCoordinateError",
    "LatLon",
    # Facade
    "MGRSCoordinate",
    "MGRSValue",
    "ParseError",
    "Token",
    "TokenKind",
    "UTMCoordinate",
    "UTMValue",
    "WGSCoordinate",
    "create_coordinate",
    # Formatting
    "create_formatter",
    "format_angle",
    "format_coordinate",
    "format_decimal_degrees",
    "format_degrees_minutes_seconds",
    "format_mgrs",
    "format_utm",
    # Normalization
    "is_coordinate_object",
    "is_coordinate_tuple",
    # Projection
    "mgrs_to_utm",
    "normalize_object_to_latlon",
    # Parsing
    "parse_mgrs",
    "parse_utm",
    "parse_wgs",
    "split_angle",
    "tokenize",
    "tuple_to_latlon",
    "utm_to_mgrs",
    "utm_to_wgs",
    "validate_numeric_coordinate",
    "wgs_to_utm",
]
