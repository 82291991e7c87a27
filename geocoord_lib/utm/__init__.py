# -*- coding: utf-8 -*-
"""UTM module for parsing and formatting zone/easting/northing strings."""

from geocoord_lib.utm.parser import UTM_PATTERN
from geocoord_lib.utm.parser import format_utm
from geocoord_lib.utm.parser import parse_utm

__all__ = [
    "UTM_PATTERN",
    "format_utm",
    "parse_utm",
]
