# -*- coding: utf-8 -*-
"""Tests for error records and exceptions."""

from dataclasses import FrozenInstanceError

import pytest

from geocoord_lib.constants import EMPTY_INPUT_ERROR
from geocoord_lib.enums import ErrorCategory
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import InvalidCoordinateError
from geocoord_lib.errors import ParseError
from geocoord_lib.errors import empty_input_error
from geocoord_lib.errors import is_blank


class TestParseError:
    """Tests for ParseError dataclass."""

    def test_message_reason_only(self):
        """Test a bare reason."""
        error = ParseError(reason="No zone number found", category=ErrorCategory.STRUCTURE)
        assert error.message == "No zone number found"

    def test_message_with_input_and_detail(self):
        """Test the input and detail are appended."""
        error = ParseError(
            reason="Input is not in a valid WGS format",
            category=ErrorCategory.STRUCTURE,
            detail="too few numbers",
            raw="40",
        )
        assert error.message == (
            'Input is not in a valid WGS format; input: "40" (too few numbers)'
        )

    def test_str(self):
        """Test the category prefix."""
        error = ParseError(reason="Minutes value too high (60)", category=ErrorCategory.RANGE)
        assert str(error) == "range: Minutes value too high (60)"

    def test_for_input(self):
        """Test binding the input returns a copy."""
        error = ParseError(reason="x", category=ErrorCategory.RANGE)
        bound = error.for_input("91 0")
        assert bound.raw == "91 0"
        assert error.raw is None

    def test_immutable(self):
        """Test that ParseError is immutable."""
        error = ParseError(reason="x", category=ErrorCategory.RANGE)
        with pytest.raises(FrozenInstanceError):
            error.reason = "y"


class TestCoordinateParseException:
    """Tests for CoordinateParseException."""

    def test_str_is_message(self):
        """Test the exception text is the literal message."""
        exc = CoordinateParseException("Bad", category=ErrorCategory.INPUT, raw="q")
        assert str(exc) == 'Bad; input: "q"'

    def test_default_category(self):
        """Test the default category."""
        assert CoordinateParseException("Bad").category is ErrorCategory.STRUCTURE

    def test_round_trip(self):
        """Test conversion to and from a record."""
        error = ParseError(
            reason="Bad", category=ErrorCategory.CONFLICT, detail="d", raw="r"
        )
        assert CoordinateParseException.from_error(error).to_error() == error

    def test_raise(self):
        """Test raising and catching."""
        with pytest.raises(CoordinateParseException, match="Bad"):
            raise CoordinateParseException("Bad")


class TestHelpers:
    """Tests for module helpers."""

    def test_empty_input_error(self):
        """Test the empty input record."""
        error = empty_input_error()
        assert error.reason == EMPTY_INPUT_ERROR
        assert error.category is ErrorCategory.INPUT

    @pytest.mark.parametrize("raw", ["", "  ", "\t\n", None, 12, ["40 74"]])
    def test_blank(self, raw):
        """Test blank and non-string inputs."""
        assert is_blank(raw)

    def test_not_blank(self):
        """Test a visible string."""
        assert not is_blank(" 40 74 ")

    def test_invalid_coordinate_error(self):
        """Test InvalidCoordinateError is a plain exception."""
        assert issubclass(InvalidCoordinateError, Exception)
        assert not issubclass(InvalidCoordinateError, CoordinateParseException)
