# -*- coding: utf-8 -*-
"""Error handling for coordinate parsing.

Parsers report failures as `ParseError` records (values, never raised) so that
callers can surface the literal message. `CoordinateParseException` is the
raising counterpart used by the conversion facade.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace

from geocoord_lib.constants import EMPTY_INPUT_ERROR
from geocoord_lib.enums import ErrorCategory


@dataclass(frozen=True)
class ParseError:
    """Represents a parsing failure.

    This is a data record for storing error information, not an exception.
    Use CoordinateParseException for raising errors.

    Attributes:
        reason: Human-readable description of the failure
        category: Failure category
        detail: Optional qualifier appended in parentheses
        raw: The offending input, when known
    """

    reason: str
    category: ErrorCategory
    detail: str | None = None
    raw: str | None = None

    @property
    def message(self) -> str:
        """Full literal message, e.g. ``Minutes value too high (60); input: "..."``."""
        text = self.reason
        if self.raw is not None:
            text += f'; input: "{self.raw}"'
        if self.detail:
            text += f" ({self.detail})"
        return text

    def __str__(self) -> str:
        """Format as human-readable error string."""
        return f"{self.category.value}: {self.message}"

    def for_input(self, raw: str) -> ParseError:
        """Return a copy bound to the offending input."""
        return replace(self, raw=raw)


def empty_input_error() -> ParseError:
    return ParseError(reason=EMPTY_INPUT_ERROR, category=ErrorCategory.INPUT)


def is_blank(raw: object) -> bool:
    """True for anything that is not a string with visible content."""
    return not isinstance(raw, str) or not raw.strip()


class CoordinateParseException(Exception):  # noqa: N818
    """Exception raised for coordinate parsing errors.

    Attributes:
        reason: Error message
        category: Failure category
        detail: Optional qualifier
        raw: The offending input
    """

    def __init__(
        self,
        reason: str,
        category: ErrorCategory = ErrorCategory.STRUCTURE,
        detail: str | None = None,
        raw: str | None = None,
    ):
        self.reason = reason
        self.category = category
        self.detail = detail
        self.raw = raw
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        return self.to_error().message

    def to_error(self) -> ParseError:
        """Convert exception to ParseError record."""
        return ParseError(
            reason=self.reason,
            category=self.category,
            detail=self.detail,
            raw=self.raw,
        )

    @classmethod
    def from_error(cls, error: ParseError) -> CoordinateParseException:
        """Build an exception carrying the same information as a record."""
        return cls(
            error.reason,
            category=error.category,
            detail=error.detail,
            raw=error.raw,
        )


class InvalidCoordinateError(Exception):
    """Error raised when a coordinate cannot be projected or converted."""
