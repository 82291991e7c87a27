# -*- coding: utf-8 -*-
"""MGRS 100 km grid lettering.

Columns cycle through three 8-letter sets selected by ``(zone - 1) % 3``.
Rows cycle through 20 letters every 2,000 km of northing, shifted by five
letters in even zones. A row letter therefore names several candidate
squares; the latitude band picks the one that lies inside it.

Norway (32V) and Svalbard (31X, 33X, 35X, 37X) use widened or narrowed zones,
so their valid column letters come from an override table instead of the
regular sets.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

from geocoord_lib.constants import GRID_COLUMN_LETTERS
from geocoord_lib.constants import GRID_COLUMN_SETS
from geocoord_lib.constants import GRID_ROW_CYCLE_METERS
from geocoord_lib.constants import GRID_ROW_EVEN_ZONE_OFFSET
from geocoord_lib.constants import GRID_ROW_LETTERS
from geocoord_lib.constants import GRID_SQUARE_SIZE_METERS


class BandRange(NamedTuple):
    """Extent of a latitude band.

    ``min_northing`` and ``max_northing`` bound the southern edge of every
    100 km square that intersects the band, in UTM meters (southern bands
    include the 10,000 km false northing).
    """

    min_lat: float
    max_lat: float
    min_northing: int
    max_northing: int


# -----------------------------------------------------------------------------
# Tables
# -----------------------------------------------------------------------------

#: Latitude band extents, keyed by band letter
BAND_RANGES: Mapping[str, BandRange] = MappingProxyType(
    {
        "C": BandRange(-80, -72, 1_100_000, 2_000_000),
        "D": BandRange(-72, -64, 2_000_000, 2_900_000),
        "E": BandRange(-64, -56, 2_800_000, 3_700_000),
        "F": BandRange(-56, -48, 3_700_000, 4_600_000),
        "G": BandRange(-48, -40, 4_600_000, 5_500_000),
        "H": BandRange(-40, -32, 5_500_000, 6_400_000),
        "J": BandRange(-32, -24, 6_400_000, 7_300_000),
        "K": BandRange(-24, -16, 7_300_000, 8_200_000),
        "L": BandRange(-16, -8, 8_200_000, 9_100_000),
        "M": BandRange(-8, 0, 9_100_000, 9_900_000),
        "N": BandRange(0, 8, 0, 800_000),
        "P": BandRange(8, 16, 800_000, 1_700_000),
        "Q": BandRange(16, 24, 1_700_000, 2_600_000),
        "R": BandRange(24, 32, 2_600_000, 3_500_000),
        "S": BandRange(32, 40, 3_500_000, 4_400_000),
        "T": BandRange(40, 48, 4_400_000, 5_300_000),
        "U": BandRange(48, 56, 5_300_000, 6_200_000),
        "V": BandRange(56, 64, 6_200_000, 7_100_000),
        "W": BandRange(64, 72, 7_000_000, 7_900_000),
        "X": BandRange(72, 84, 7_900_000, 9_300_000),
    }
)

#: Band letters that do not exist in a zone (Svalbard gaps)
ZONE_LETTER_EXCEPTIONS: Mapping[int, str] = MappingProxyType(
    {
        32: "X",
        34: "X",
        36: "X",
        60: "X",
    }
)

#: Valid column letters of irregular grid zones
GRID_COLUMN_OVERRIDES: Mapping[tuple[int, str], str] = MappingProxyType(
    {
        (32, "V"): "JKLMN",
        (31, "X"): "QRSTUV",
        (33, "X"): "ABCDEFGH",
        (35, "X"): "JKLMNPQR",
        (37, "X"): "STUVWXYZ",
    }
)

# Row cycles needed to cover 0-10,000 km of northing.
_ROW_CYCLES = 5


# -----------------------------------------------------------------------------
# Zones
# -----------------------------------------------------------------------------


def is_zone_exception(zone_number: int, zone_letter: str) -> bool:
    """True when the band does not exist in that zone (e.g. ``60X``)."""
    return zone_letter in ZONE_LETTER_EXCEPTIONS.get(zone_number, "")


def band_range(zone_letter: str) -> BandRange:
    return BAND_RANGES[zone_letter]


def is_northing_in_band(zone_letter: str, northing: float) -> bool:
    """True when a UTM northing falls inside a square of the band."""
    band = BAND_RANGES[zone_letter]
    return band.min_northing <= northing < band.max_northing + GRID_SQUARE_SIZE_METERS


# -----------------------------------------------------------------------------
# Columns
# -----------------------------------------------------------------------------


def column_set(zone_number: int) -> str:
    """Regular column letters of a zone."""
    return GRID_COLUMN_SETS[(zone_number - 1) % len(GRID_COLUMN_SETS)]


def valid_column_letters(zone_number: int, zone_letter: str) -> str:
    """Column letters accepted in a grid zone, overrides included."""
    return GRID_COLUMN_OVERRIDES.get((zone_number, zone_letter), column_set(zone_number))


def column_letter(zone_number: int, easting: float) -> str:
    """Column letter of the square containing an easting.

    Raises:
        ValueError: If the easting lies outside the lettered 100-900 km span
    """
    index = math.floor(easting / GRID_SQUARE_SIZE_METERS) - 1
    letters = column_set(zone_number)
    if not 0 <= index < len(letters):
        raise ValueError(f"Easting {easting} is outside the lettered grid columns")
    return letters[index]


def column_easting(zone_number: int, letter: str) -> int:
    """Easting of the western edge of a column.

    Letters outside the zone's regular set (only reachable through the
    Svalbard overrides) are placed by their position within any set.
    """
    letters = column_set(zone_number)
    if letter in letters:
        index = letters.index(letter)
    else:
        index = GRID_COLUMN_LETTERS.index(letter) % len(letters)
    return (index + 1) * GRID_SQUARE_SIZE_METERS


# -----------------------------------------------------------------------------
# Rows
# -----------------------------------------------------------------------------


def _row_offset(zone_number: int) -> int:
    return GRID_ROW_EVEN_ZONE_OFFSET if zone_number % 2 == 0 else 0


def row_letter(zone_number: int, northing: float) -> str:
    """Row letter of the square containing a northing."""
    cycle_index = math.floor(northing / GRID_SQUARE_SIZE_METERS) % len(GRID_ROW_LETTERS)
    return GRID_ROW_LETTERS[(cycle_index + _row_offset(zone_number)) % len(GRID_ROW_LETTERS)]


def row_index(zone_number: int, letter: str) -> int:
    """Position (0-19) of a row letter within the 2,000 km cycle of a zone."""
    return (GRID_ROW_LETTERS.index(letter) - _row_offset(zone_number)) % len(
        GRID_ROW_LETTERS
    )


def row_northing(zone_number: int, zone_letter: str, letter: str) -> int | None:
    """Southern edge of the square a row letter names inside a band.

    Returns:
        The northing in meters, or None when no square with that letter
        intersects the band.
    """
    band = BAND_RANGES[zone_letter]
    base = row_index(zone_number, letter) * GRID_SQUARE_SIZE_METERS
    for cycle in range(_ROW_CYCLES):
        northing = base + cycle * GRID_ROW_CYCLE_METERS
        if band.min_northing <= northing <= band.max_northing:
            return northing
    return None


def is_row_valid_for_band(zone_number: int, zone_letter: str, letter: str) -> bool:
    return row_northing(zone_number, zone_letter, letter) is not None
