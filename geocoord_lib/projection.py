# -*- coding: utf-8 -*-
"""Projection between WGS84 geographic coordinates, UTM and MGRS.

The Transverse Mercator math is delegated to pyproj (WGS84 <-> EPSG:326xx /
EPSG:327xx); the zone number, including the Norway and Svalbard exceptions,
and the latitude band come from the `utm` package. MGRS lettering is handled
by `geocoord_lib.mgrs.grid`.
"""

from __future__ import annotations

import logging
import math

import utm
from pyproj import Transformer

from geocoord_lib.constants import DEFAULT_MGRS_PRECISION
from geocoord_lib.constants import GRID_SQUARE_SIZE_METERS
from geocoord_lib.constants import MGRS_MAX_DIGITS
from geocoord_lib.constants import UTM_MAX_LATITUDE
from geocoord_lib.constants import UTM_MIN_LATITUDE
from geocoord_lib.constants import UTM_NORTH_EPSG_BASE
from geocoord_lib.constants import UTM_SOUTH_EPSG_BASE
from geocoord_lib.constants import WGS84_CRS
from geocoord_lib.errors import InvalidCoordinateError
from geocoord_lib.mgrs.grid import column_easting
from geocoord_lib.mgrs.grid import column_letter
from geocoord_lib.mgrs.grid import row_letter
from geocoord_lib.mgrs.grid import row_northing
from geocoord_lib.models import LatLon
from geocoord_lib.models import MGRSValue
from geocoord_lib.models import UTMValue

logger = logging.getLogger(__name__)

# Cache for pyproj transformers ((source CRS, target CRS) -> transformer)
_transformer_cache: dict[tuple[str, str], Transformer] = {}

# Sub-micrometer noise from the projection must not flip a truncated digit.
_METER_ROUNDING = 6


def utm_epsg(zone: int, northern: bool) -> str:
    """EPSG code of the WGS84 / UTM zone, e.g. ``EPSG:32631``."""
    base = UTM_NORTH_EPSG_BASE if northern else UTM_SOUTH_EPSG_BASE
    return f"EPSG:{base + zone}"


def _get_transformer(source: str, target: str) -> Transformer:
    """Get or create a cached transformer between two CRS.

    Args:
        source: Source CRS, e.g. ``EPSG:4326``
        target: Target CRS

    Returns:
        Transformer taking and returning ``(x, y)`` (longitude first)
    """
    key = (source, target)
    if key not in _transformer_cache:
        logger.debug("Creating transformer %s -> %s", source, target)
        _transformer_cache[key] = Transformer.from_crs(source, target, always_xy=True)
    return _transformer_cache[key]


def wgs_to_utm(lat: float, lon: float) -> UTMValue:
    """Project a WGS84 point to UTM.

    Args:
        lat: Latitude in degrees, -80 to 84
        lon: Longitude in degrees

    Returns:
        The UTM coordinate in the point's own zone

    Raises:
        InvalidCoordinateError: If the latitude is outside UTM coverage or the
            projection fails
    """
    if not UTM_MIN_LATITUDE <= lat <= UTM_MAX_LATITUDE:
        raise InvalidCoordinateError(
            f"Latitude {lat} is outside UTM coverage "
            f"({UTM_MIN_LATITUDE:g} to {UTM_MAX_LATITUDE:g})"
        )

    zone_number = utm.latlon_to_zone_number(lat, lon)
    zone_letter = utm.latitude_to_zone_letter(lat)
    northern = lat >= 0

    try:
        transformer = _get_transformer(WGS84_CRS, utm_epsg(zone_number, northern))
        easting, northing = transformer.transform(lon, lat)
    except Exception as e:
        raise InvalidCoordinateError(
            f"Failed to convert WGS84 ({lat}, {lon}) to UTM zone {zone_number}: {e}"
        ) from e

    if not (math.isfinite(easting) and math.isfinite(northing)):
        raise InvalidCoordinateError(
            f"Failed to convert WGS84 ({lat}, {lon}) to UTM zone {zone_number}"
        )

    return UTMValue(
        zone_number=zone_number,
        zone_letter=zone_letter,
        easting=float(easting),
        northing=float(northing),
    )


def utm_to_wgs(value: UTMValue) -> LatLon:
    """Unproject a UTM coordinate to WGS84.

    Raises:
        InvalidCoordinateError: If conversion fails
    """
    try:
        transformer = _get_transformer(
            utm_epsg(value.zone_number, value.is_northern), WGS84_CRS
        )
        lon, lat = transformer.transform(value.easting, value.northing)
        return LatLon(lat=float(lat), lon=float(lon))
    except Exception as e:
        raise InvalidCoordinateError(
            f"Failed to convert UTM ({value.easting}, {value.northing}) "
            f"zone {value.zone_number}{value.zone_letter}: {e}"
        ) from e


def utm_to_mgrs(value: UTMValue, precision: int = DEFAULT_MGRS_PRECISION) -> MGRSValue:
    """Letter a UTM coordinate on the MGRS grid.

    Digits are truncated, so the reference names the cell containing the point.

    Args:
        value: UTM coordinate
        precision: Digits per axis (0-5); 5 is 1 m, 0 is the bare 100 km square

    Raises:
        ValueError: If precision is out of range
        InvalidCoordinateError: If the easting falls outside the lettered columns
    """
    if not 0 <= precision <= MGRS_MAX_DIGITS:
        raise ValueError(f"MGRS precision must be 0-{MGRS_MAX_DIGITS}, got {precision}")

    easting = math.floor(round(value.easting, _METER_ROUNDING))
    northing = math.floor(round(value.northing, _METER_ROUNDING))

    try:
        grid_col = column_letter(value.zone_number, easting)
    except ValueError as e:
        raise InvalidCoordinateError(str(e)) from e

    divisor = 10 ** (MGRS_MAX_DIGITS - precision)
    return MGRSValue(
        zone_number=value.zone_number,
        zone_letter=value.zone_letter,
        grid_col=grid_col,
        grid_row=row_letter(value.zone_number, northing),
        easting=(easting % GRID_SQUARE_SIZE_METERS) // divisor,
        northing=(northing % GRID_SQUARE_SIZE_METERS) // divisor,
        precision_digits=2 * precision,
    )


def mgrs_to_utm(value: MGRSValue) -> UTMValue:
    """South-west corner of the cell an MGRS reference names.

    Raises:
        InvalidCoordinateError: If the row letter does not occur in the band
    """
    base_northing = row_northing(value.zone_number, value.zone_letter, value.grid_row)
    if base_northing is None:
        raise InvalidCoordinateError(
            f"Grid square row '{value.grid_row}' does not occur in zone "
            f"'{value.zone_number}{value.zone_letter}'"
        )

    return UTMValue(
        zone_number=value.zone_number,
        zone_letter=value.zone_letter,
        easting=column_easting(value.zone_number, value.grid_col) + value.easting_offset,
        northing=base_northing + value.northing_offset,
    )


def wgs_to_mgrs(lat: float, lon: float, precision: int = DEFAULT_MGRS_PRECISION) -> MGRSValue:
    return utm_to_mgrs(wgs_to_utm(lat, lon), precision)


def mgrs_to_wgs(value: MGRSValue) -> LatLon:
    return utm_to_wgs(mgrs_to_utm(value))
