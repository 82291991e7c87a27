# -*- coding: utf-8 -*-
"""Parser for loosely formatted WGS84 latitude/longitude text.

Supports, among others:
- Decimal degrees: ``40.7128, -74.0060``
- Degrees minutes: ``40° 42.768', -74° 0.36'``
- Degrees minutes seconds: ``40° 42' 46.08" N, 74° 0' 21.6" W``
- Compass letters before or after the value: ``N40.7128 W74.0060``
- Compact DDMMSSH: ``0451530E 123015N``
- Missing divider: ``42 25 35 N 71 7 15 E``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from geocoord_lib.constants import LAT_LIMIT
from geocoord_lib.constants import LON_LIMIT
from geocoord_lib.constants import SEXAGESIMAL_BASE
from geocoord_lib.enums import Axis
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import Format
from geocoord_lib.enums import TokenKind
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import ParseError
from geocoord_lib.errors import empty_input_error
from geocoord_lib.errors import is_blank
from geocoord_lib.models import LatLon
from geocoord_lib.wgs.lexer import Token
from geocoord_lib.wgs.lexer import tokenize
from geocoord_lib.wgs.patterns import group_slots
from geocoord_lib.wgs.patterns import signature
from geocoord_lib.wgs.pipes import STRUCTURE_PIPES
from geocoord_lib.wgs.pipes import WGS_PIPES
from geocoord_lib.wgs.pipes import Tokens
from geocoord_lib.wgs.pipes import run_pipeline
from geocoord_lib.wgs.pipes import split_sides

logger = logging.getLogger(__name__)

_UNIT_NAMES = ("Degrees", "Minutes", "Seconds")


@dataclass(frozen=True)
class CoordinatePart:
    """One side of the divider, reduced to a signed value.

    Attributes:
        value: Signed decimal degrees
        axis: Axis named by a compass letter, if any
    """

    value: float
    axis: Axis | None = None


def _range_error(reason: str) -> ParseError:
    return ParseError(reason=reason, category=ErrorCategory.RANGE)


def _conflict_error(reason: str) -> ParseError:
    return ParseError(reason=reason, category=ErrorCategory.CONFLICT)


def assemble_part(side: Tokens) -> CoordinatePart | ParseError:
    """Sum degrees, minutes and seconds of one side and apply its bearing.

    Args:
        side: Tokens of one side; must already form a valid group

    Returns:
        The signed part, or a ParseError for out-of-bounds units or a sign
        contradicting the compass letter.
    """
    slots = group_slots(signature(side)) or ()
    numbers = [token for token in side if token.kind is TokenKind.NUMBER]
    bearing = next(
        (token.bearing for token in side if token.kind is TokenKind.BEARING), None
    )

    units = [0.0, 0.0, 0.0]
    for slot, number in zip(slots, numbers, strict=True):
        if slot and number.value < 0:
            return _range_error(f"{_UNIT_NAMES[slot]} value too low ({number.text})")
        if slot and abs(number.value) >= SEXAGESIMAL_BASE:
            return _range_error(f"{_UNIT_NAMES[slot]} value too high ({number.text})")
        units[slot] = abs(number.value)

    # Only the smallest unit written may carry a fraction.
    for slot, number in zip(slots[:-1], numbers[:-1], strict=True):
        if not number.value.is_integer():
            return _range_error(
                f"{_UNIT_NAMES[slot]} value must be whole when followed by "
                f"{_UNIT_NAMES[slot + 1].lower()} ({number.text})"
            )

    degrees, minutes, seconds = units
    value = (
        degrees
        + minutes / SEXAGESIMAL_BASE
        + seconds / (SEXAGESIMAL_BASE * SEXAGESIMAL_BASE)
    )
    negative = numbers[0].is_negative

    if bearing is None:
        return CoordinatePart(value=-value if negative else value)

    if negative and not bearing.is_negative:
        return _conflict_error(
            f"Conflicting indicators: negative value with {bearing.label} bearing"
        )

    negative = negative or bearing.is_negative
    return CoordinatePart(value=-value if negative else value, axis=bearing.axis)


def assign_axes(
    first: CoordinatePart,
    second: CoordinatePart,
    order: Format | None,
) -> tuple[float, float] | ParseError:
    """Resolve which part is latitude and which is longitude.

    Compass letters win, then the explicit order, then position (first part
    is latitude unless the order says otherwise).

    Args:
        first: Part before the divider
        second: Part after the divider
        order: Explicit order, or None when the caller did not state one

    Returns:
        ``(lat, lon)`` or a ParseError when the indicators conflict
    """
    if first.axis and second.axis and first.axis is second.axis:
        return _conflict_error(
            f'Both parts assigned to the same axis: "{first.axis.value}"'
        )

    if order is not None and first.axis and second.axis:
        expected = Axis.LAT if order is Format.LATLON else Axis.LON
        if first.axis is not expected:
            return _conflict_error(
                f'Coordinate parts contradict specified order "{order.value}"'
            )

    first_axis = first.axis
    if first_axis is None:
        if second.axis is not None:
            first_axis = second.axis.other
        elif order is Format.LONLAT:
            first_axis = Axis.LON
        else:
            first_axis = Axis.LAT

    if first_axis is Axis.LAT:
        return first.value, second.value
    return second.value, first.value


def assemble_coordinate(tokens: Tokens, order: Format | None = None) -> LatLon | ParseError:
    """Turn validated tokens (with a divider) into a coordinate."""
    first_side, second_side = split_sides(tokens)

    first = assemble_part(first_side)
    if isinstance(first, ParseError):
        return first

    second = assemble_part(second_side)
    if isinstance(second, ParseError):
        return second

    assigned = assign_axes(first, second, order)
    if isinstance(assigned, ParseError):
        return assigned

    lat, lon = assigned
    if abs(lat) > LAT_LIMIT:
        return _range_error(f"Latitude value out of range ({lat:g})")
    if abs(lon) > LON_LIMIT:
        return _range_error(f"Longitude value out of range ({lon:g})")

    return LatLon(lat=lat, lon=lon)


def _tokenize(raw: str) -> tuple[Token, ...] | ParseError:
    try:
        return tokenize(raw)
    except CoordinateParseException as e:
        return e.to_error()


def parse_wgs(
    raw: str,
    order: Format | str | None = None,
    skip_validation: bool = False,
) -> LatLon | ParseError | bool:
    """Parse a WGS84 latitude/longitude string.

    Args:
        raw: The coordinate text
        order: Expected order, ``"latlon"`` or ``"lonlat"``. Only consulted
            when compass letters do not decide the axes.
        skip_validation: Only check that the text is recognisably a WGS
            coordinate and return a boolean.

    Returns:
        - When `skip_validation` is True: True if the format is recognised
        - Otherwise: the LatLon, or a ParseError describing the first problem

    Example:
        >>> parse_wgs("46.1N 93.2E")
        LatLon(lat=46.1, lon=93.2)
        >>> parse_wgs("-71.0589, 42.3601", order="lonlat")
        LatLon(lat=42.3601, lon=-71.0589)
    """
    order = Format.normalize(order)

    if is_blank(raw):
        return False if skip_validation else empty_input_error()

    tokens = _tokenize(raw)
    if isinstance(tokens, ParseError):
        return False if skip_validation else tokens

    if skip_validation:
        _, error = run_pipeline(STRUCTURE_PIPES, tokens)
        return error is None

    tokens, error = run_pipeline(WGS_PIPES, tokens)
    result = error if error is not None else assemble_coordinate(tokens, order)

    if isinstance(result, ParseError):
        result = result.for_input(raw)
        logger.debug("Rejected WGS input: %s", result.message)

    return result
