# -*- coding: utf-8 -*-
"""Strict parser for MGRS grid references.

A reference reads ``<zone><band><column><row>[<easting><northing>]``, e.g.
``33UXP0412`` or ``04Q FJ 12345 67890``. Whitespace anywhere is ignored.

Checks run from the most general (is there a zone number at all) to the most
specific (does that row letter exist in that band), and the first failure is
reported.
"""

from __future__ import annotations

import logging
import re

from geocoord_lib.constants import GRID_COLUMN_LETTERS
from geocoord_lib.constants import GRID_ROW_LETTERS
from geocoord_lib.constants import MAX_ZONE_NUMBER
from geocoord_lib.constants import MGRS_MAX_DIGITS
from geocoord_lib.constants import ZONE_LETTERS
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.errors import ParseError
from geocoord_lib.errors import empty_input_error
from geocoord_lib.errors import is_blank
from geocoord_lib.mgrs.grid import is_row_valid_for_band
from geocoord_lib.mgrs.grid import is_zone_exception
from geocoord_lib.mgrs.grid import valid_column_letters
from geocoord_lib.models import MGRSValue

logger = logging.getLogger(__name__)

#: Grammar of an MGRS reference, used by the format-only check
MGRS_PATTERN = re.compile(
    r"^(0?[1-9]|[1-5][0-9]|60)\s*([C-HJ-NP-X])\s*([A-HJ-NP-Z])([A-HJ-NP-V])\s*"
    r"(?:\d\s*\d|\d{2}\s*\d{2}|\d{3}\s*\d{3}|\d{4}\s*\d{4}|\d{5}\s*\d{5})?$",
    re.IGNORECASE,
)

ZONE_NUMBER_PATTERN = re.compile(r"^[-+]?\d{1,2}")

_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"[0-9]*")


def _structure_error(reason: str) -> ParseError:
    return ParseError(reason=reason, category=ErrorCategory.STRUCTURE)


def _specification_error(reason: str) -> ParseError:
    return ParseError(reason=reason, category=ErrorCategory.SPECIFICATION)


def read_grid_zone(text: str) -> tuple[int, str, str] | ParseError:
    """Read the zone number and band letter at the start of a reference.

    Shared with the UTM parser, which uses the same grid zone designator.

    Args:
        text: Uppercased reference

    Returns:
        ``(zone_number, zone_letter, remainder)`` or the first ParseError
    """
    match = ZONE_NUMBER_PATTERN.match(text)
    if match is None:
        return _structure_error("No zone number found")

    zone_text = match.group()
    zone_number = int(zone_text)
    if not 1 <= zone_number <= MAX_ZONE_NUMBER:
        return _structure_error(f"Invalid zone number '{zone_text}'")

    rest = text[match.end() :]
    remainder = rest.lstrip()
    # A digit right after the zone number is a bad letter, after a space a missing one.
    if not remainder or (remainder[0].isdigit() and len(remainder) < len(rest)):
        return _structure_error("No zone letter found")

    zone_letter = remainder[0]
    if zone_letter not in ZONE_LETTERS:
        return _structure_error(f"Invalid zone letter '{zone_letter}'")

    if is_zone_exception(zone_number, zone_letter):
        return _specification_error(
            f"Invalid zone letter '{zone_letter}' for zone '{zone_number}'"
        )

    return zone_number, zone_letter, remainder[1:]


def _read_square(remainder: str) -> tuple[str, str] | ParseError:
    if not remainder:
        return _structure_error("No grid square column letter found")
    if remainder[0] not in GRID_COLUMN_LETTERS:
        return _structure_error(f"Invalid grid square column letter '{remainder[0]}'")

    if len(remainder) < 2:
        return _structure_error("No grid square row letter found")
    if remainder[1] not in GRID_ROW_LETTERS:
        return _structure_error(f"Invalid grid square row letter '{remainder[1]}'")

    return remainder[0], remainder[1]


def _check_digits(digits: str) -> ParseError | None:
    if len(digits) % 2:
        return _structure_error(
            "Invalid easting/northing pair - must be even number of digits"
        )
    if not _DIGITS.fullmatch(digits):
        return _structure_error(
            "Invalid (non-numeric) characters in easting/northing"
        )
    if len(digits) // 2 > MGRS_MAX_DIGITS:
        return _structure_error(
            "Invalid easting/northing precision - greater than 5 digits"
        )
    return None


def _parse(text: str) -> MGRSValue | ParseError:
    zone = read_grid_zone(text)
    if isinstance(zone, ParseError):
        return zone
    zone_number, zone_letter, remainder = zone

    square = _read_square(remainder)
    if isinstance(square, ParseError):
        return square
    grid_col, grid_row = square

    digits = remainder[2:]
    if (error := _check_digits(digits)) is not None:
        return error

    designator = f"{zone_number}{zone_letter}"
    if grid_col not in valid_column_letters(zone_number, zone_letter):
        return _specification_error(
            f"Invalid grid square column '{grid_col}' for zone '{designator}'"
        )
    if not is_row_valid_for_band(zone_number, zone_letter, grid_row):
        return _specification_error(
            f"Invalid grid square row '{grid_row}' for zone '{designator}'"
        )

    half = len(digits) // 2
    return MGRSValue(
        zone_number=zone_number,
        zone_letter=zone_letter,
        grid_col=grid_col,
        grid_row=grid_row,
        easting=int(digits[:half]) if half else 0,
        northing=int(digits[half:]) if half else 0,
        precision_digits=len(digits),
    )


def parse_mgrs(raw: str, skip_validation: bool = False) -> MGRSValue | ParseError | bool:
    """Parse an MGRS reference.

    Args:
        raw: The reference, spacing and case are free
        skip_validation: Only test the grammar and return a boolean; zone
            exceptions and grid lettering are not checked.

    Returns:
        - When `skip_validation` is True: True if the grammar matches
        - Otherwise: the MGRSValue, or a ParseError describing the first problem

    Example:
        >>> parse_mgrs("32VKN").grid_zone
        '32V'
        >>> parse_mgrs("60XJV").reason
        "Invalid zone letter 'X' for zone '60'"
    """
    if skip_validation:
        return not is_blank(raw) and MGRS_PATTERN.match(raw.strip()) is not None

    if is_blank(raw):
        return empty_input_error()

    result = _parse(_WHITESPACE.sub("", raw).upper())
    if isinstance(result, ParseError):
        result = result.for_input(raw)
        logger.debug("Rejected MGRS input: %s", result.message)
    return result


def format_mgrs(value: MGRSValue, spaced: bool = False) -> str:
    """Render an MGRS value, e.g. ``01CEQ5555555555`` or ``01C EQ 55555 55555``."""
    return value.to_string(spaced)
