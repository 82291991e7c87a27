# -*- coding: utf-8 -*-
"""Validation and repair stages for free-text coordinate tokens.

Every stage has the contract ``(tokens) -> (tokens, error | None)`` and is
pure. `run_pipeline` applies stages left to right and stops at the first
error, so no stage ever sees tokens an earlier stage rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Sequence

from geocoord_lib.constants import MAX_NUMBERS
from geocoord_lib.constants import MAX_NUMBERS_PER_AXIS
from geocoord_lib.constants import MIN_NUMBERS
from geocoord_lib.constants import WGS_FORMAT_ERROR
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import TokenKind
from geocoord_lib.errors import ParseError
from geocoord_lib.wgs.lexer import DIVIDER_TOKEN
from geocoord_lib.wgs.lexer import Token
from geocoord_lib.wgs.patterns import find_divider_offset
from geocoord_lib.wgs.patterns import group_slots
from geocoord_lib.wgs.patterns import sign_mask
from geocoord_lib.wgs.patterns import signature

logger = logging.getLogger(__name__)

Tokens = tuple[Token, ...]
PipeResult = tuple[Tokens, ParseError | None]
Pipe = Callable[[Tokens], PipeResult]

#: Sign masks whose negative values are left to assembly validation
SIGN_CHECK_EXEMPTIONS: frozenset[str] = frozenset({"_--_"})

_SLOT_NAMES = ("Degrees", "Minutes", "Seconds")


def structure_error(detail: str) -> ParseError:
    return ParseError(
        reason=WGS_FORMAT_ERROR,
        category=ErrorCategory.STRUCTURE,
        detail=detail,
    )


def split_sides(tokens: Sequence[Token]) -> list[Tokens]:
    """Split tokens at every divider."""
    sides: list[list[Token]] = [[]]
    for token in tokens:
        if token.kind is TokenKind.DIVIDER:
            sides.append([])
        else:
            sides[-1].append(token)
    return [tuple(side) for side in sides]


def _count_numbers(tokens: Sequence[Token]) -> int:
    return sum(1 for token in tokens if token.kind is TokenKind.NUMBER)


def _has_divider(tokens: Sequence[Token]) -> bool:
    return any(token.kind is TokenKind.DIVIDER for token in tokens)


# -----------------------------------------------------------------------------
# Stages
# -----------------------------------------------------------------------------


def check_numbers(tokens: Tokens) -> PipeResult:
    """Reject token sequences with too few or too many numbers."""
    count = _count_numbers(tokens)
    if count < MIN_NUMBERS:
        return tokens, structure_error("too few numbers")
    if count > MAX_NUMBERS:
        return tokens, structure_error("too many numbers")

    if _has_divider(tokens) and any(
        _count_numbers(side) > MAX_NUMBERS_PER_AXIS for side in split_sides(tokens)
    ):
        return tokens, structure_error("too many numbers")

    return tokens, None


def fix_dividers(tokens: Tokens) -> PipeResult:
    """Insert the missing divider when a table says where it belongs."""
    if _has_divider(tokens):
        return tokens, None

    offset = find_divider_offset(tokens)
    if offset is None:
        return tokens, structure_error("unable to tell where latitude and longitude split")

    seen = 0
    for index, token in enumerate(tokens):
        if token.kind in (TokenKind.NUMBER, TokenKind.BEARING):
            if seen == offset:
                return tokens[:index] + (DIVIDER_TOKEN,) + tokens[index:], None
            seen += 1

    return tokens, structure_error("unable to tell where latitude and longitude split")


def check_dividers(tokens: Tokens) -> PipeResult:
    """Require exactly two non-empty sides."""
    sides = split_sides(tokens)
    if len(sides) > 2:
        return tokens, structure_error("too many dividers")
    if len(sides) < 2 or not all(sides):
        return tokens, structure_error("missing coordinate part")
    return tokens, None


def check_groups(tokens: Tokens) -> PipeResult:
    """Each side must read as degrees[, minutes[, seconds]] plus one bearing."""
    for side in split_sides(tokens):
        if group_slots(signature(side)) is None:
            text = " ".join(str(token) for token in side)
            return tokens, structure_error(f"unrecognized coordinate part '{text}'")
    return tokens, None


def check_signs(tokens: Tokens) -> PipeResult:
    """Only the degrees slot may carry a negative sign, per side."""
    if sign_mask(tokens) in SIGN_CHECK_EXEMPTIONS:
        return tokens, None

    for side in split_sides(tokens):
        slots = group_slots(signature(side)) or ()
        numbers = [token for token in side if token.kind is TokenKind.NUMBER]
        for slot, number in zip(slots, numbers, strict=False):
            if slot and number.is_negative:
                return tokens, ParseError(
                    reason=f"{_SLOT_NAMES[slot]} value too low ({number.text})",
                    category=ErrorCategory.RANGE,
                )
    return tokens, None


#: Stages establishing that the input is recognisably a WGS coordinate
STRUCTURE_PIPES: tuple[Pipe, ...] = (
    check_numbers,
    fix_dividers,
    check_dividers,
    check_groups,
)

#: Every stage run before assembly
WGS_PIPES: tuple[Pipe, ...] = (*STRUCTURE_PIPES, check_signs)


def run_pipeline(pipes: Sequence[Pipe], tokens: Tokens) -> PipeResult:
    """Apply stages in order, stopping at the first error."""
    for pipe in pipes:
        tokens, error = pipe(tokens)
        if error is not None:
            logger.debug("Stage %s rejected tokens: %s", pipe.__name__, error.message)
            return tokens, error
    return tokens, None
