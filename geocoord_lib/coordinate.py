# -*- coding: utf-8 -*-
"""Coordinate conversion facade.

`create_coordinate` parses or normalizes an input of a declared kind and
returns a coordinate object that converts between WGS84, MGRS and UTM:

    >>> point = create_coordinate("wgs", "48.8584 N, 2.2945 E")
    >>> point.to_mgrs().to_string()
    '31UDQ4825211954'
    >>> point.to_utm().to_string()
    '31U 448252 5411955'
    >>> point.to_string("dms")
    '48° 51\\' 30.24", 2° 17\\' 40.2"'

Invalid input raises `CoordinateParseException` carrying the parser's literal
message; with ``skip_validation=True`` a recognition boolean is returned
instead.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from typing import NoReturn

from geojson import Point
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from geocoord_lib.constants import DEFAULT_MGRS_PRECISION
from geocoord_lib.enums import AngleFormat
from geocoord_lib.enums import CoordinateKind
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import Format
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import ParseError
from geocoord_lib.format import format_coordinate
from geocoord_lib.mgrs.parser import parse_mgrs
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
from geocoord_lib.utm.parser import parse_utm
from geocoord_lib.wgs.lexer import tokenize
from geocoord_lib.wgs.parser import parse_wgs
from geocoord_lib.wgs.pipes import WGS_PIPES
from geocoord_lib.wgs.pipes import run_pipeline

logger = logging.getLogger(__name__)

INVALID_OBJECT_ERROR = (
    "Invalid coordinate object; object must contain valid latitude and "
    "longitude properties."
)
INVALID_INPUT_ERROR = (
    "Invalid coordinate input; expected a string, [lat, lon] tuple, or "
    "{ lat, lon } object."
)


# -----------------------------------------------------------------------------
# Coordinate Objects
# -----------------------------------------------------------------------------


class WGSCoordinate(BaseModel):
    """A WGS84 point.

    Attributes:
        lat: Latitude in degrees
        lon: Longitude in degrees
        order: Axis order the point was given in, used as display default
    """

    model_config = ConfigDict(frozen=True)

    lat: Latitude
    lon: Longitude
    order: Format = Format.LATLON

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.WGS

    @property
    def latlon(self) -> LatLon:
        return LatLon(lat=self.lat, lon=self.lon)

    def to_wgs(self) -> WGSCoordinate:
        return self

    def to_utm(self) -> UTMCoordinate:
        return UTMCoordinate(value=wgs_to_utm(self.lat, self.lon))

    def to_mgrs(self, precision: int = DEFAULT_MGRS_PRECISION) -> MGRSCoordinate:
        """Letter the point on the MGRS grid.

        The returned reference remembers this point, so converting it back to
        WGS84 yields the point itself rather than the cell's corner.
        """
        value = utm_to_mgrs(wgs_to_utm(self.lat, self.lon), precision)
        return MGRSCoordinate(value=value, origin=self.latlon)

    def to_string(
        self,
        format: AngleFormat | str = AngleFormat.DD,
        order: Format | str | None = None,
        compass: bool = False,
    ) -> str:
        """Render the point, e.g. ``42.3601°, -71.0589°``.

        Args:
            format: ``dd``, ``ddm`` or ``dms``
            order: Axis order; defaults to the order the point was given in
            compass: Use N/S/E/W letters instead of signs
        """
        return format_coordinate(
            self.latlon,
            angle_format=format,
            order=order or self.order,
            compass=compass,
        )

    def tokens(self) -> tuple[str, ...]:
        """Lexical parts of the rendered point, divider included."""
        tokens, _ = run_pipeline(WGS_PIPES, tokenize(self.to_string()))
        return tuple(str(token) for token in tokens)

    def to_geojson(self) -> Point:
        """GeoJSON Point (longitude first)."""
        return Point((self.lon, self.lat))

    def __str__(self) -> str:
        return self.to_string()


class MGRSCoordinate(BaseModel):
    """An MGRS grid reference.

    Attributes:
        value: The parsed reference
        origin: The exact point the reference was derived from, if any
    """

    model_config = ConfigDict(frozen=True)

    value: MGRSValue
    origin: LatLon | None = Field(default=None, exclude=True, repr=False)

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.MGRS

    def to_wgs(self) -> WGSCoordinate:
        """The originating point, or the south-west corner of the cell."""
        point = self.origin if self.origin is not None else utm_to_wgs(self.to_utm().value)
        return WGSCoordinate(lat=point.lat, lon=point.lon)

    def to_utm(self) -> UTMCoordinate:
        if self.origin is not None:
            return UTMCoordinate(value=wgs_to_utm(self.origin.lat, self.origin.lon))
        return UTMCoordinate(value=mgrs_to_utm(self.value))

    def to_mgrs(self, precision: int | None = None) -> MGRSCoordinate:
        if precision is None or precision == self.value.digits:
            return self
        value = utm_to_mgrs(self.to_utm().value, precision)
        return MGRSCoordinate(value=value, origin=self.origin)

    def to_string(self, spaced: bool = False) -> str:
        return self.value.to_string(spaced)

    def tokens(self) -> tuple[str, ...]:
        """Grid zone, square and digit groups, e.g. ``("31U", "DQ", "48252", "11954")``."""
        return tuple(self.to_string(spaced=True).split())

    def __str__(self) -> str:
        return self.to_string()


class UTMCoordinate(BaseModel):
    """A UTM coordinate."""

    model_config = ConfigDict(frozen=True)

    value: UTMValue

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.UTM

    def to_wgs(self) -> WGSCoordinate:
        point = utm_to_wgs(self.value)
        return WGSCoordinate(lat=point.lat, lon=point.lon)

    def to_utm(self) -> UTMCoordinate:
        return self

    def to_mgrs(self, precision: int = DEFAULT_MGRS_PRECISION) -> MGRSCoordinate:
        return MGRSCoordinate(value=utm_to_mgrs(self.value, precision))

    def to_string(self) -> str:
        return self.value.to_string()

    def tokens(self) -> tuple[str, ...]:
        return tuple(self.to_string().split())

    def __str__(self) -> str:
        return self.to_string()


Coordinate = WGSCoordinate | MGRSCoordinate | UTMCoordinate


# -----------------------------------------------------------------------------
# Factory
# -----------------------------------------------------------------------------


def _raise(error: ParseError) -> NoReturn:
    logger.debug("Invalid coordinate input: %s", error.message)
    raise CoordinateParseException.from_error(error)


def _input_error(reason: str, category: ErrorCategory = ErrorCategory.INPUT) -> ParseError:
    return ParseError(reason=reason, category=category)


def _numeric_wgs(
    lat: Any,
    lon: Any,
    order: Format,
    skip_validation: bool,
) -> WGSCoordinate | bool:
    errors = validate_numeric_coordinate(lat, lon)
    if skip_validation:
        return not errors
    if errors:
        _raise(_input_error(" ".join(errors), ErrorCategory.RANGE))
    return WGSCoordinate(lat=lat, lon=lon, order=order)


def _create_wgs(
    value: Any,
    order: Format | None,
    skip_validation: bool,
) -> WGSCoordinate | bool:
    if isinstance(value, str):
        result = parse_wgs(value, order, skip_validation)
        if skip_validation:
            return result
        if isinstance(result, ParseError):
            _raise(result)
        return WGSCoordinate(lat=result.lat, lon=result.lon, order=order or Format.LATLON)

    if is_coordinate_tuple(value):
        order = order or Format.LATLON
        point = tuple_to_latlon(order, value)
        return _numeric_wgs(point["lat"], point["lon"], order, skip_validation)

    if is_coordinate_object(value):
        point = normalize_object_to_latlon(value)
        if point is None:
            if skip_validation:
                return False
            _raise(_input_error(INVALID_OBJECT_ERROR))
        return _numeric_wgs(
            point["lat"], point["lon"], order or Format.LATLON, skip_validation
        )

    if skip_validation:
        return False
    _raise(_input_error(INVALID_INPUT_ERROR))


def create_coordinate(
    kind: CoordinateKind | str,
    value: str | tuple[float, float] | list[float] | Mapping[str, Any],
    order: Format | str | None = None,
    skip_validation: bool = False,
) -> Coordinate | bool:
    """Parse a coordinate of a declared kind.

    Args:
        kind: ``wgs``, ``latlon``, ``lonlat``, ``mgrs`` or ``utm``. ``latlon``
            and ``lonlat`` are ``wgs`` with a fixed axis order.
        value: Text for every kind; WGS kinds also take a ``[a, b]`` pair
            (read in the declared order) or a mapping with lat/lon keys.
        order: Axis order for ``wgs`` input; ignored by the other kinds
        skip_validation: Only check that the input is recognisably of that
            kind and return a boolean

    Returns:
        A WGSCoordinate, MGRSCoordinate or UTMCoordinate, or a boolean when
        `skip_validation` is True

    Raises:
        ValueError: If the kind or order is unknown
        CoordinateParseException: If the input is invalid
    """
    if not isinstance(kind, CoordinateKind):
        try:
            kind = CoordinateKind(str(kind).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown coordinate kind: {kind!r}") from None

    if kind.is_geographic:
        return _create_wgs(value, kind.order or Format.normalize(order), skip_validation)

    parse = parse_mgrs if kind is CoordinateKind.MGRS else parse_utm
    result = parse(value, skip_validation)
    if skip_validation:
        return result
    if isinstance(result, ParseError):
        _raise(result)

    if isinstance(result, MGRSValue):
        return MGRSCoordinate(value=result)
    return UTMCoordinate(value=result)
