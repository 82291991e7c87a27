# -*- coding: utf-8 -*-
"""Structural patterns of free-text coordinates.

Token sequences are reduced to short strings so that structural decisions
(where is the divider, is this side a valid degrees/minutes/seconds group)
can be made by table lookup instead of by nested conditionals.

Two alphabets are used:

- ``simplify``: ``N`` number, ``B`` bearing, ``/`` divider; unit marks dropped.
- ``signature``: like ``simplify`` but a number followed by a unit mark becomes
  ``D``, ``M`` or ``S`` and a mark not following a number becomes ``?``.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping
from collections.abc import Sequence
from itertools import product
from types import MappingProxyType
from typing import TYPE_CHECKING

from geocoord_lib.constants import DIVIDER_MARKER
from geocoord_lib.constants import MAX_NUMBERS_PER_AXIS
from geocoord_lib.enums import TokenKind

if TYPE_CHECKING:
    from geocoord_lib.wgs.lexer import Token

BEARING = "B"
BARE_NUMBER = "N"
STRAY_MARK = "?"

#: Signature letter of a number carrying a unit mark
MARK_LETTERS: Mapping[TokenKind, str] = MappingProxyType(
    {
        TokenKind.DEGREE: "D",
        TokenKind.MINUTE: "M",
        TokenKind.SECOND: "S",
    }
)

#: Slot (0 degrees, 1 minutes, 2 seconds) fixed by a unit mark
MARKED_SLOTS: Mapping[str, int] = MappingProxyType({"D": 0, "M": 1, "S": 2})

NUMBER_LETTERS = BARE_NUMBER + "".join(MARKED_SLOTS)

#: Fallback divider offsets keyed by `simplify` output
SIMPLER_PATTERNS: Mapping[str, int] = MappingProxyType(
    {
        "NN": 1,
        "NNB": 1,
        "BNNB": 2,
        "BNN": 2,
    }
)


def simplify(tokens: Sequence[Token]) -> str:
    """Reduce tokens to ``N`` / ``B`` (and ``/`` for a divider)."""
    letters = []
    for token in tokens:
        match token.kind:
            case TokenKind.NUMBER:
                letters.append(BARE_NUMBER)
            case TokenKind.BEARING:
                letters.append(BEARING)
            case TokenKind.DIVIDER:
                letters.append(DIVIDER_MARKER)
    return "".join(letters)


def signature(tokens: Sequence[Token]) -> str:
    """Reduce tokens to the unit-aware alphabet used by `GENOME`."""
    letters: list[str] = []
    open_number = False
    for token in tokens:
        if token.kind.is_mark:
            if open_number:
                letters[-1] = MARK_LETTERS[token.kind]
            else:
                letters.append(STRAY_MARK)
            open_number = False
            continue

        match token.kind:
            case TokenKind.NUMBER:
                letters.append(BARE_NUMBER)
            case TokenKind.BEARING:
                letters.append(BEARING)
            case TokenKind.DIVIDER:
                letters.append(DIVIDER_MARKER)
        open_number = token.kind is TokenKind.NUMBER

    return "".join(letters)


def group_slots(shape: str) -> tuple[int, ...] | None:
    """Interpret one side of a coordinate.

    Args:
        shape: Signature of one side, e.g. ``"DMB"`` or ``"NNN"``

    Returns:
        The slot of every number (0 degrees, 1 minutes, 2 seconds), or None
        when the shape is not a valid group.
    """
    body = shape
    leading = body.startswith(BEARING)
    if leading:
        body = body[1:]
    if body.endswith(BEARING):
        if leading:
            return None
        body = body[:-1]

    if not 1 <= len(body) <= MAX_NUMBERS_PER_AXIS:
        return None

    slots: list[int] = []
    current = -1
    for letter in body:
        if letter == BARE_NUMBER:
            slot = current + 1
        elif letter in MARKED_SLOTS:
            slot = MARKED_SLOTS[letter]
        else:
            return None

        if slot <= current or slot >= MAX_NUMBERS_PER_AXIS:
            return None
        slots.append(slot)
        current = slot

    return tuple(slots)


def is_group_shape(shape: str) -> bool:
    return group_slots(shape) is not None


def _group_shapes() -> list[str]:
    shapes = []
    for size in range(1, MAX_NUMBERS_PER_AXIS + 1):
        for letters in product(NUMBER_LETTERS, repeat=size):
            body = "".join(letters)
            if is_group_shape(body):
                shapes.extend((body, BEARING + body, body + BEARING))
    return shapes


def _build_genome() -> Mapping[str, int]:
    offsets: dict[str, set[int]] = defaultdict(set)
    for first, second in product(_group_shapes(), repeat=2):
        # A bearing right after a bare group is that group's suffix.
        if BEARING not in first and second.startswith(BEARING):
            continue
        offsets[first + second].add(len(first))

    return MappingProxyType(
        {
            pattern: candidates.pop()
            for pattern, candidates in sorted(offsets.items())
            if len(candidates) == 1
        }
    )


#: Divider offset for every divider-less signature with exactly one valid split
GENOME: Mapping[str, int] = _build_genome()


def find_divider_offset(tokens: Sequence[Token]) -> int | None:
    """Position (in numbers and bearings) where the divider belongs.

    `GENOME` is consulted first. It already holds every signature
    `SIMPLER_PATTERNS` can match, so the simplified lookup is only a safety
    net should the generated table ever be narrowed.

    Returns None when neither table knows the pattern; the caller must not
    guess in that case.
    """
    pattern = signature(tokens)
    if pattern in GENOME:
        return GENOME[pattern]
    if STRAY_MARK in pattern:
        return None
    return SIMPLER_PATTERNS.get(simplify(tokens))


def sign_mask(tokens: Sequence[Token]) -> str:
    """``_`` per bearing, ``-`` per negative number, ``+`` per other number."""
    mask = []
    for token in tokens:
        if token.kind is TokenKind.BEARING:
            mask.append("_")
        elif token.kind is TokenKind.NUMBER:
            mask.append("-" if token.is_negative else "+")
    return "".join(mask)
