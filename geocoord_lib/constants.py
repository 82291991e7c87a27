# -*- coding: utf-8 -*-
"""Constants used throughout the geocoord_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON output
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Geographic Limits
# -----------------------------------------------------------------------------

#: Absolute latitude limit in degrees
LAT_LIMIT: float = 90.0

#: Absolute longitude limit in degrees
LON_LIMIT: float = 180.0

#: Minutes / seconds per larger unit
SEXAGESIMAL_BASE: int = 60

#: Lowest latitude covered by UTM (UPS beyond)
UTM_MIN_LATITUDE: float = -80.0

#: Highest latitude covered by UTM (UPS beyond)
UTM_MAX_LATITUDE: float = 84.0

# -----------------------------------------------------------------------------
# Free-text Symbols
# -----------------------------------------------------------------------------

DEGREE_SYMBOL = "°"
MINUTE_SYMBOL = "'"
SECOND_SYMBOL = '"'

#: Characters acting as an explicit latitude/longitude divider
DIVIDER_CHARS = ",;/"

#: Marker used for a divider in simplified / signature patterns
DIVIDER_MARKER = "/"

#: Character replacements applied before tokenizing
SYMBOL_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("−", "-"),  # minus sign
    ("–", "-"),  # en dash
    ("′", MINUTE_SYMBOL),  # prime
    ("″", SECOND_SYMBOL),  # double prime
    ("''", SECOND_SYMBOL),
    ("º", DEGREE_SYMBOL),  # masculine ordinal, common degree stand-in
)

#: Minimum / maximum count of numbers in a free-text coordinate
MIN_NUMBERS: int = 2
MAX_NUMBERS: int = 6

#: Maximum count of numbers describing one axis (degrees, minutes, seconds)
MAX_NUMBERS_PER_AXIS: int = 3

#: Reason shared by every structural free-text error
WGS_FORMAT_ERROR = "Input is not in a valid WGS format"

#: Reason returned for empty / non-string input
EMPTY_INPUT_ERROR = "Input must be a non-empty string"

# -----------------------------------------------------------------------------
# Normalization
# -----------------------------------------------------------------------------

#: Accepted latitude keys, highest priority first
LAT_KEYS: tuple[str, ...] = ("lat", "latitude")

#: Accepted longitude keys, highest priority first
LON_KEYS: tuple[str, ...] = ("lon", "longitude")

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Default separator between the two formatted axes
DEFAULT_SEPARATOR = ", "

#: Fixed decimals of `format_decimal_degrees`
DECIMAL_DEGREES_PRECISION: int = 6

#: Rounding of seconds in `format_degrees_minutes_seconds`
DMS_SECONDS_PRECISION: int = 2

#: Maximum decimals kept (then trimmed) by display formatting
DISPLAY_DEGREES_PRECISION: int = 6
DISPLAY_MINUTES_PRECISION: int = 4
DISPLAY_SECONDS_PRECISION: int = 4

# -----------------------------------------------------------------------------
# UTM / MGRS Grid
# -----------------------------------------------------------------------------

#: Valid latitude band letters, south to north
ZONE_LETTERS = "CDEFGHJKLMNPQRSTUVWX"

#: First band letter of the northern hemisphere
NORTHERN_FIRST_BAND = "N"

#: Highest UTM zone number
MAX_ZONE_NUMBER: int = 60

#: Side of an MGRS grid square in meters
GRID_SQUARE_SIZE_METERS: int = 100_000

#: All column letters (I and O excluded)
GRID_COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"

#: Column letter sets, selected by (zone - 1) % 3
GRID_COLUMN_SETS: tuple[str, str, str] = ("ABCDEFGH", "JKLMNPQR", "STUVWXYZ")

#: All row letters (I and O excluded)
GRID_ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

#: Row letter offset applied in even-numbered zones
GRID_ROW_EVEN_ZONE_OFFSET: int = 5

#: Northing span after which row letters repeat
GRID_ROW_CYCLE_METERS: int = len(GRID_ROW_LETTERS) * GRID_SQUARE_SIZE_METERS

#: Digits per axis at 1 meter precision
MGRS_MAX_DIGITS: int = 5

#: Default digits per axis when converting to MGRS
DEFAULT_MGRS_PRECISION: int = 5

#: Valid easting range of a UTM coordinate (inclusive)
UTM_MIN_EASTING: int = 100_000
UTM_MAX_EASTING: int = 900_000

#: False northing of the southern hemisphere
SOUTHERN_FALSE_NORTHING: int = 10_000_000

# -----------------------------------------------------------------------------
# Coordinate Reference Systems
# -----------------------------------------------------------------------------

#: Geographic WGS84
WGS84_CRS = "EPSG:4326"

#: EPSG code base of WGS84 / UTM north (32601 - 32660)
UTM_NORTH_EPSG_BASE: int = 32600

#: EPSG code base of WGS84 / UTM south (32701 - 32760)
UTM_SOUTH_EPSG_BASE: int = 32700
