# -*- coding: utf-8 -*-
"""Tokenizer for free-text latitude/longitude input.

The lexer only recognises lexical units; it never decides whether a sequence
of tokens makes sense. That is the job of the pipe stages.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from geocoord_lib.constants import DIVIDER_CHARS
from geocoord_lib.constants import SYMBOL_REPLACEMENTS
from geocoord_lib.constants import WGS_FORMAT_ERROR
from geocoord_lib.enums import Axis
from geocoord_lib.enums import Bearing
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import TokenKind
from geocoord_lib.errors import CoordinateParseException

logger = logging.getLogger(__name__)

# Decimal comma between two digit runs that are not already decimals.
_DECIMAL_COMMA = re.compile(r"(?<![\d.])(\d+),(\d+)(?![\d.])")

# Unsigned digits glued to a compass letter (DDMMSSH / DDDMMSSH).
_COMPACT = re.compile(r"(?<![\d.+\-])(\d{4,7})([NSEW])(?![A-Z\d])")

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+))
    |(?P<bearing>[NSEW])
    |(?P<divider>[,;/])
    |(?P<degree>°)
    |(?P<minute>')
    |(?P<second>")
    |(?P<space>\s+)
    |(?P<other>.)
    """,
    re.VERBOSE,
)

_MARK_KINDS = {
    "degree": TokenKind.DEGREE,
    "minute": TokenKind.MINUTE,
    "second": TokenKind.SECOND,
}


@dataclass(frozen=True)
class Token:
    """An atomic lexical unit.

    Attributes:
        kind: Token kind
        text: Literal text (numbers keep sign and precision)
    """

    kind: TokenKind
    text: str

    @property
    def value(self) -> float:
        """Numeric value of a NUMBER token."""
        return float(self.text)

    @property
    def is_negative(self) -> bool:
        return self.kind is TokenKind.NUMBER and self.text.startswith("-")

    @property
    def bearing(self) -> Bearing:
        return Bearing(self.text)

    def __str__(self) -> str:
        return self.text


DIVIDER_TOKEN = Token(TokenKind.DIVIDER, " ")


def _expand_compact(match: re.Match) -> str:
    digits, letter = match.groups()
    width = 3 if Bearing(letter).axis is Axis.LON else 2
    if len(digits) not in (width + 2, width + 4):
        return match.group(0)

    parts = [digits[:width], digits[width : width + 2], digits[width + 2 :]]
    return " ".join(part for part in parts if part) + letter


def normalize_text(raw: str) -> str:
    """Uppercase and unify the symbols users type for signs and unit marks."""
    text = raw.strip()
    for source, target in SYMBOL_REPLACEMENTS:
        text = text.replace(source, target)
    text = text.upper()
    text = _DECIMAL_COMMA.sub(r"\1.\2", text)
    return _COMPACT.sub(_expand_compact, text)


def tokenize(raw: str) -> tuple[Token, ...]:
    """Split a raw coordinate string into tokens.

    Args:
        raw: Free-text coordinate

    Returns:
        The token sequence, in input order

    Raises:
        CoordinateParseException: If a character is not part of any token
    """
    text = normalize_text(raw)
    explicit_divider = any(char in text for char in DIVIDER_CHARS)

    tokens: list[Token] = []
    for match in _TOKEN_PATTERN.finditer(text):
        group = match.lastgroup
        lexeme = match.group()

        match group:
            case "number":
                tokens.append(Token(TokenKind.NUMBER, lexeme))

            case "bearing":
                tokens.append(Token(TokenKind.BEARING, lexeme))

            case "divider":
                tokens.append(Token(TokenKind.DIVIDER, lexeme))

            case "degree" | "minute" | "second":
                tokens.append(Token(_MARK_KINDS[group], lexeme))

            case "space":
                # Wide gaps only divide when nothing else does.
                if not explicit_divider and len(lexeme) > 1:
                    tokens.append(Token(TokenKind.DIVIDER, lexeme))

            case _:
                logger.debug("Unrecognized character %r in %r", lexeme, raw)
                raise CoordinateParseException(
                    WGS_FORMAT_ERROR,
                    category=ErrorCategory.STRUCTURE,
                    detail=f"unrecognized character '{lexeme}'",
                    raw=raw,
                )

    return tuple(tokens)
