# -*- coding: utf-8 -*-
"""Formatting of latitude/longitude pairs.

Two layers are provided:

- `create_formatter` turns a single-value function into a pair formatter
  honouring `FormatOptions` (ordinal letters, decoration, separator, order).
  `format_decimal_degrees` and `format_degrees_minutes_seconds` are built
  with it.
- `format_angle` / `format_coordinate` render the human display used by
  `WGSCoordinate.to_string` (``42° 21' 36.36"``), trimming trailing zeros.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from collections.abc import Sequence

from geocoord_lib.constants import DECIMAL_DEGREES_PRECISION
from geocoord_lib.constants import DEFAULT_SEPARATOR
from geocoord_lib.constants import DEGREE_SYMBOL
from geocoord_lib.constants import DISPLAY_DEGREES_PRECISION
from geocoord_lib.constants import DISPLAY_MINUTES_PRECISION
from geocoord_lib.constants import DISPLAY_SECONDS_PRECISION
from geocoord_lib.constants import DMS_SECONDS_PRECISION
from geocoord_lib.constants import MINUTE_SYMBOL
from geocoord_lib.constants import SECOND_SYMBOL
from geocoord_lib.constants import SEXAGESIMAL_BASE
from geocoord_lib.enums import AngleFormat
from geocoord_lib.enums import Axis
from geocoord_lib.enums import Bearing
from geocoord_lib.enums import Format
from geocoord_lib.models import AngleParts
from geocoord_lib.models import FormatOptions
from geocoord_lib.models import LatLon

AxisFormatter = Callable[[float], str]
PairFormatter = Callable[[LatLon | Sequence[float], FormatOptions | None], str]


# -----------------------------------------------------------------------------
# Formatter Factory
# -----------------------------------------------------------------------------


def create_formatter(axis_fn: AxisFormatter) -> PairFormatter:
    """Build a pair formatter from a single-value formatter.

    With ``with_ordinal`` the absolute value is formatted and the N/S/E/W
    letter appended (zero counts as N/E), so ordinal output never carries a
    minus sign.

    Args:
        axis_fn: Formats one signed angle

    Returns:
        ``formatter(coords, options=None)`` where ``coords`` is a LatLon or a
        ``(lat, lon)`` pair
    """

    def formatter(
        coords: LatLon | Sequence[float],
        options: FormatOptions | None = None,
    ) -> str:
        options = options or FormatOptions()
        lat, lon = coords.as_tuple() if isinstance(coords, LatLon) else coords

        parts = []
        for axis, value in ((Axis.LAT, lat), (Axis.LON, lon)):
            if options.with_ordinal:
                bearing = Bearing.for_value(value, axis)
                parts.append(f"{axis_fn(abs(value))}{bearing.value}")
            else:
                parts.append(axis_fn(value))

        if options.order is Format.LONLAT:
            parts.reverse()

        return f"{options.prefix}{options.separator.join(parts)}{options.suffix}"

    return formatter


def decimal_degrees(value: float) -> str:
    return f"{value:.{DECIMAL_DEGREES_PRECISION}f}"


def degrees_minutes_seconds(value: float) -> str:
    """Floored degrees and minutes, seconds rounded to 2 decimals."""
    sign = "-" if value < 0 else ""
    value = abs(value)
    degrees = math.floor(value)
    minutes = math.floor((value - degrees) * SEXAGESIMAL_BASE)
    seconds = (value - degrees - minutes / SEXAGESIMAL_BASE) * SEXAGESIMAL_BASE**2
    return (
        f"{sign}{degrees}{DEGREE_SYMBOL} {minutes}{MINUTE_SYMBOL} "
        f"{seconds:.{DMS_SECONDS_PRECISION}f}{SECOND_SYMBOL}"
    )


format_decimal_degrees = create_formatter(decimal_degrees)
format_degrees_minutes_seconds = create_formatter(degrees_minutes_seconds)


# -----------------------------------------------------------------------------
# Display Formatting
# -----------------------------------------------------------------------------


def _trim(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def split_angle(value: float, angle_format: AngleFormat | str) -> AngleParts:
    """Split an angle into the parts a display format shows.

    The sign is carried by ``degrees``; minutes and seconds are absolute.
    The smallest part is rounded to display precision and a value that
    rounds up to 60 carries into the next unit.

    Example:
        >>> split_angle(-71.0589, "dms")
        AngleParts(degrees=-71.0, minutes=3.0, seconds=32.04)
    """
    angle_format = AngleFormat(angle_format)
    sign = -1.0 if value < 0 else 1.0
    magnitude = abs(value)

    if angle_format is AngleFormat.DD:
        return AngleParts(degrees=sign * round(magnitude, DISPLAY_DEGREES_PRECISION))

    degrees = math.floor(magnitude)
    total_minutes = (magnitude - degrees) * SEXAGESIMAL_BASE

    if angle_format is AngleFormat.DDM:
        minutes = round(total_minutes, DISPLAY_MINUTES_PRECISION)
        if minutes >= SEXAGESIMAL_BASE:
            degrees, minutes = degrees + 1, 0.0
        return AngleParts(degrees=sign * degrees, minutes=minutes)

    minutes = math.floor(total_minutes)
    seconds = round((total_minutes - minutes) * SEXAGESIMAL_BASE, DISPLAY_SECONDS_PRECISION)
    if seconds >= SEXAGESIMAL_BASE:
        minutes, seconds = minutes + 1, 0.0
    if minutes >= SEXAGESIMAL_BASE:
        degrees, minutes = degrees + 1, 0
    return AngleParts(degrees=sign * degrees, minutes=float(minutes), seconds=seconds)


def format_angle(
    value: float,
    angle_format: AngleFormat | str = AngleFormat.DD,
    axis: Axis | None = None,
) -> str:
    """Render one angle for display.

    Args:
        value: Signed angle in degrees
        angle_format: ``dd``, ``ddm`` or ``dms``
        axis: When given, the compass letter of that axis replaces the sign

    Example:
        >>> format_angle(-71.0589, "ddm")
        "-71° 3.534'"
        >>> format_angle(40.7489, axis=Axis.LAT)
        '40.7489°N'
    """
    angle_format = AngleFormat(angle_format)
    parts = split_angle(value, angle_format)

    if angle_format is AngleFormat.DD:
        text = f"{_trim(abs(parts.degrees), DISPLAY_DEGREES_PRECISION)}{DEGREE_SYMBOL}"
    elif angle_format is AngleFormat.DDM:
        text = (
            f"{abs(parts.degrees):.0f}{DEGREE_SYMBOL} "
            f"{_trim(parts.minutes, DISPLAY_MINUTES_PRECISION)}{MINUTE_SYMBOL}"
        )
    else:
        text = (
            f"{abs(parts.degrees):.0f}{DEGREE_SYMBOL} "
            f"{parts.minutes:.0f}{MINUTE_SYMBOL} "
            f"{_trim(parts.seconds, DISPLAY_SECONDS_PRECISION)}{SECOND_SYMBOL}"
        )

    if axis is not None:
        return f"{text}{Bearing.for_value(value, axis).value}"

    # A value rounding to zero is shown unsigned.
    is_zero = not any((parts.degrees, parts.minutes, parts.seconds))
    return text if value >= 0 or is_zero else f"-{text}"


def format_coordinate(
    coords: LatLon,
    angle_format: AngleFormat | str = AngleFormat.DD,
    order: Format | str = Format.LATLON,
    compass: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Render a coordinate for display, e.g. ``40.7489°N, 73.968°W``."""
    order = Format.normalize(order)
    lat = format_angle(coords.lat, angle_format, Axis.LAT if compass else None)
    lon = format_angle(coords.lon, angle_format, Axis.LON if compass else None)
    pair = (lon, lat) if order is Format.LONLAT else (lat, lon)
    return separator.join(pair)
