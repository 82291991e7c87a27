# -*- coding: utf-8 -*-
"""MGRS module for parsing and formatting grid references."""

from geocoord_lib.mgrs.grid import BAND_RANGES
from geocoord_lib.mgrs.grid import GRID_COLUMN_OVERRIDES
from geocoord_lib.mgrs.grid import ZONE_LETTER_EXCEPTIONS
from geocoord_lib.mgrs.grid import BandRange
from geocoord_lib.mgrs.parser import MGRS_PATTERN
from geocoord_lib.mgrs.parser import format_mgrs
from geocoord_lib.mgrs.parser import parse_mgrs

__all__ = [
    "BAND_RANGES",
    "GRID_COLUMN_OVERRIDES",
    "MGRS_PATTERN",
    "ZONE_LETTER_EXCEPTIONS",
    "BandRange",
    "format_mgrs",
    "parse_mgrs",
]
