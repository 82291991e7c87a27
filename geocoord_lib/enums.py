# -*- coding: utf-8 -*-
"""Enumerations for coordinate parsing and formatting.

This module contains all enumerations used by the parsers, the formatters
and the conversion facade.
"""

from enum import Enum

from geocoord_lib.constants import NORTHERN_FIRST_BAND


class Format(str, Enum):
    """Axis order of a coordinate pair.

    Attributes:
        LATLON: Latitude first
        LONLAT: Longitude first
    """

    LATLON = "latlon"
    LONLAT = "lonlat"

    @classmethod
    def normalize(cls, value: "str | Format | None") -> "Format | None":
        """Normalize an order string to a Format enum value.

        Performs case-insensitive matching, so ``"LATLON"`` and ``"latlon"``
        are equivalent.

        Args:
            value: The order string (or enum) to normalize

        Returns:
            The corresponding Format, or None if value is None

        Raises:
            ValueError: If the order string is not recognized
        """
        if value is None or isinstance(value, Format):
            return value

        normalized = value.strip().lower()
        for fmt in cls:
            if fmt.value == normalized:
                return fmt

        raise ValueError(f"Unknown coordinate order: {value!r}")


class CoordinateKind(str, Enum):
    """Kinds of coordinate accepted by `create_coordinate`.

    Attributes:
        WGS: WGS84 latitude/longitude text, order inferred or given
        LATLON: WGS84 text, latitude first
        LONLAT: WGS84 text, longitude first
        MGRS: Military Grid Reference System string
        UTM: Universal Transverse Mercator string
    """

    WGS = "wgs"
    LATLON = "latlon"
    LONLAT = "lonlat"
    MGRS = "mgrs"
    UTM = "utm"

    @property
    def order(self) -> Format | None:
        """Axis order implied by the kind alias, if any."""
        return {
            CoordinateKind.LATLON: Format.LATLON,
            CoordinateKind.LONLAT: Format.LONLAT,
        }.get(self)

    @property
    def is_geographic(self) -> bool:
        return self in (CoordinateKind.WGS, CoordinateKind.LATLON, CoordinateKind.LONLAT)


class AngleFormat(str, Enum):
    """Display formats of a single angle.

    Attributes:
        DD: Decimal degrees
        DDM: Degrees and decimal minutes
        DMS: Degrees, minutes and seconds
    """

    DD = "dd"
    DDM = "ddm"
    DMS = "dms"


class Axis(str, Enum):
    LAT = "lat"
    LON = "lon"

    @property
    def other(self) -> "Axis":
        return Axis.LON if self is Axis.LAT else Axis.LAT


class Bearing(str, Enum):
    """Compass letters and the axis/sign they imply."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def axis(self) -> Axis:
        return Axis.LAT if self in (Bearing.NORTH, Bearing.SOUTH) else Axis.LON

    @property
    def is_negative(self) -> bool:
        return self in (Bearing.SOUTH, Bearing.WEST)

    @property
    def label(self) -> str:
        """Human readable name (``North``, ``East``...)."""
        return self.name.title()

    @classmethod
    def for_value(cls, value: float, axis: Axis) -> "Bearing":
        """Bearing letter describing the sign of a value; zero is N/E."""
        if axis is Axis.LAT:
            return cls.NORTH if value >= 0 else cls.SOUTH
        return cls.EAST if value >= 0 else cls.WEST


class Hemisphere(str, Enum):
    NORTH = "N"
    SOUTH = "S"

    @classmethod
    def from_zone_letter(cls, zone_letter: str) -> "Hemisphere":
        """Hemisphere of a latitude band letter (N and later are north)."""
        return cls.NORTH if zone_letter.upper() >= NORTHERN_FIRST_BAND else cls.SOUTH


class TokenKind(str, Enum):
    """Lexical token kinds of free-text coordinates.

    Attributes:
        NUMBER: Numeric literal (sign and precision preserved)
        BEARING: Compass letter N, S, E or W
        DIVIDER: Separator between the two coordinate parts
        DEGREE: Degree mark
        MINUTE: Minute mark
        SECOND: Second mark
    """

    NUMBER = "number"
    BEARING = "bearing"
    DIVIDER = "divider"
    DEGREE = "degree"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def is_mark(self) -> bool:
        return self in (TokenKind.DEGREE, TokenKind.MINUTE, TokenKind.SECOND)


class ErrorCategory(str, Enum):
    """Category of a parse error.

    Attributes:
        INPUT: Empty, missing or non-string input
        STRUCTURE: Grammar / token count / divider problems
        RANGE: Value outside its allowed bounds
        CONFLICT: Contradicting indicators (axis, sign, order)
        SPECIFICATION: Grid rule violation for a specific zone and band
    """

    INPUT = "input"
    STRUCTURE = "structure"
    RANGE = "range"
    CONFLICT = "conflict"
    SPECIFICATION = "specification"
