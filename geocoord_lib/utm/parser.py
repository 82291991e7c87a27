# -*- coding: utf-8 -*-
"""Parser for UTM coordinates written as ``31U 448252 5411954``.

The grid zone designator follows the MGRS rules (same zone numbers, band
letters and zone exceptions); easting and northing are plain meters.
"""

from __future__ import annotations

import logging
import re

from geocoord_lib.constants import GRID_SQUARE_SIZE_METERS
from geocoord_lib.constants import UTM_MAX_EASTING
from geocoord_lib.constants import UTM_MIN_EASTING
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.errors import ParseError
from geocoord_lib.errors import empty_input_error
from geocoord_lib.errors import is_blank
from geocoord_lib.mgrs.grid import band_range
from geocoord_lib.mgrs.grid import is_northing_in_band
from geocoord_lib.mgrs.parser import read_grid_zone
from geocoord_lib.models import UTMValue

logger = logging.getLogger(__name__)

#: Grammar of a UTM coordinate, used by the format-only check
UTM_PATTERN = re.compile(
    r"^(0?[1-9]|[1-5][0-9]|60)\s*([C-HJ-NP-X])\s+(\d{1,6})\s+(\d{1,7})$",
    re.IGNORECASE,
)

_METERS = re.compile(r"\d+(?:\.\d+)?")


def _error(reason: str, category: ErrorCategory = ErrorCategory.STRUCTURE) -> ParseError:
    return ParseError(reason=reason, category=category)


def _parse(text: str) -> UTMValue | ParseError:
    zone = read_grid_zone(text)
    if isinstance(zone, ParseError):
        return zone
    zone_number, zone_letter, remainder = zone

    if remainder and remainder[0].isdigit():
        return _error("No space found between zone letter and easting")
    if remainder and not remainder[0].isspace():
        # The band must be a single letter followed by a space.
        return _error(f"Invalid zone letter '{zone_letter}{remainder.split()[0]}'")

    parts = remainder.split()
    if len(parts) != 2:
        return _error("Invalid easting/northing pair - expected two values")
    easting_text, northing_text = parts

    if not _METERS.fullmatch(easting_text):
        return _error("Invalid (non-numeric) characters in easting")
    if not _METERS.fullmatch(northing_text):
        return _error("Invalid (non-numeric) characters in northing")

    easting = float(easting_text)
    northing = float(northing_text)

    if not UTM_MIN_EASTING <= easting <= UTM_MAX_EASTING:
        return _error(
            "Invalid easting value - outside expected range "
            f"{UTM_MIN_EASTING}-{UTM_MAX_EASTING}",
            ErrorCategory.RANGE,
        )

    if not is_northing_in_band(zone_letter, northing):
        band = band_range(zone_letter)
        return _error(
            "Invalid northing value - outside expected range "
            f"{band.min_northing}-{band.max_northing + GRID_SQUARE_SIZE_METERS} "
            f"for band '{zone_letter}'",
            ErrorCategory.RANGE,
        )

    return UTMValue(
        zone_number=zone_number,
        zone_letter=zone_letter,
        easting=easting,
        northing=northing,
    )


def parse_utm(raw: str, skip_validation: bool = False) -> UTMValue | ParseError | bool:
    """Parse a UTM coordinate.

    Args:
        raw: Zone, band letter, easting and northing, e.g. ``31 U 448252 5411954``
        skip_validation: Only test the grammar and return a boolean

    Returns:
        - When `skip_validation` is True: True if the grammar matches
        - Otherwise: the UTMValue, or a ParseError describing the first problem
    """
    if skip_validation:
        return not is_blank(raw) and UTM_PATTERN.match(raw.strip()) is not None

    if is_blank(raw):
        return empty_input_error()

    result = _parse(" ".join(raw.upper().split()))
    if isinstance(result, ParseError):
        result = result.for_input(raw)
        logger.debug("Rejected UTM input: %s", result.message)
    return result


def format_utm(value: UTMValue) -> str:
    """Render a UTM value as ``31U 448252 5411954``."""
    return value.to_string()
