# -*- coding: utf-8 -*-
"""Tests for the token validation stages."""

import pytest

from geocoord_lib.enums import ErrorCategory
from geocoord_lib.enums import TokenKind
from geocoord_lib.wgs.lexer import tokenize
from geocoord_lib.wgs.patterns import sign_mask
from geocoord_lib.wgs.pipes import SIGN_CHECK_EXEMPTIONS
from geocoord_lib.wgs.pipes import STRUCTURE_PIPES
from geocoord_lib.wgs.pipes import WGS_PIPES
from geocoord_lib.wgs.pipes import check_dividers
from geocoord_lib.wgs.pipes import check_groups
from geocoord_lib.wgs.pipes import check_numbers
from geocoord_lib.wgs.pipes import check_signs
from geocoord_lib.wgs.pipes import fix_dividers
from geocoord_lib.wgs.pipes import run_pipeline
from geocoord_lib.wgs.pipes import split_sides


class TestSplitSides:
    """Tests for split_sides."""

    def test_split(self):
        """Test splitting at a divider."""
        first, second = split_sides(tokenize("40 N, 74 W"))
        assert [str(token) for token in first] == ["40", "N"]
        assert [str(token) for token in second] == ["74", "W"]

    def test_no_divider(self):
        """Test a single side without a divider."""
        assert len(split_sides(tokenize("40 74"))) == 1


class TestCheckNumbers:
    """Tests for check_numbers."""

    def test_ok(self):
        """Test an acceptable count."""
        _, error = check_numbers(tokenize("40, 74"))
        assert error is None

    def test_too_few(self):
        """Test a single number."""
        _, error = check_numbers(tokenize("40"))
        assert error.detail == "too few numbers"
        assert error.category is ErrorCategory.STRUCTURE

    def test_too_many(self):
        """Test seven numbers."""
        _, error = check_numbers(tokenize("1 2 3 4 5 6 7"))
        assert error.detail == "too many numbers"

    def test_too_many_on_one_side(self):
        """Test four numbers before the divider."""
        _, error = check_numbers(tokenize("1 2 3 4, 5"))
        assert error.detail == "too many numbers"


class TestFixDividers:
    """Tests for fix_dividers."""

    def test_inserts_divider(self):
        """Test a divider is inserted between two bare numbers."""
        tokens, error = fix_dividers(tokenize("40 74"))
        assert error is None
        assert [token.kind for token in tokens] == [
            TokenKind.NUMBER,
            TokenKind.DIVIDER,
            TokenKind.NUMBER,
        ]

    def test_inserts_after_marks(self):
        """Test the divider lands after the unit marks of the first side."""
        tokens, error = fix_dividers(tokenize("40° 30' N 74° W"))
        assert error is None
        first, second = split_sides(tokens)
        assert [str(token) for token in first] == ["40", "°", "30", "'", "N"]
        assert [str(token) for token in second] == ["74", "°", "W"]

    def test_explicit_divider_untouched(self):
        """Test tokens with a divider are returned as they are."""
        tokens = tokenize("40, 74")
        fixed, error = fix_dividers(tokens)
        assert error is None
        assert fixed == tokens

    def test_ambiguous(self):
        """Test four bare numbers cannot be split."""
        _, error = fix_dividers(tokenize("1 2 3 4"))
        assert error.detail == "unable to tell where latitude and longitude split"


class TestCheckDividers:
    """Tests for check_dividers."""

    def test_too_many(self):
        """Test three sides."""
        _, error = check_dividers(tokenize("40, 74, 5"))
        assert error.detail == "too many dividers"

    def test_missing_part(self):
        """Test an empty side."""
        _, error = check_dividers(tokenize("40, 74,"))
        assert error.detail == "too many dividers"
        _, error = check_dividers(tokenize("40 74 ,"))
        assert error.detail == "missing coordinate part"


class TestCheckGroups:
    """Tests for check_groups."""

    def test_valid(self):
        """Test valid sides."""
        _, error = check_groups(tokenize("40° 30', 74° 15'"))
        assert error is None

    def test_repeated_unit(self):
        """Test two degree values on one side."""
        _, error = check_groups(tokenize("40° 30°, 74"))
        assert error.detail == "unrecognized coordinate part '40 ° 30 °'"

    def test_two_bearings(self):
        """Test a bearing on both ends of a side."""
        _, error = check_groups(tokenize("N 40 N, 74"))
        assert error is not None


class TestCheckSigns:
    """Tests for check_signs."""

    def test_negative_degrees(self):
        """Test negative degrees are fine."""
        _, error = check_signs(tokenize("-40 30, -74 15"))
        assert error is None

    def test_negative_minutes(self):
        """Test negative minutes are rejected."""
        _, error = check_signs(tokenize("40 -30, 74"))
        assert error.reason == "Minutes value too low (-30)"
        assert error.category is ErrorCategory.RANGE

    def test_negative_seconds(self):
        """Test negative seconds are rejected."""
        _, error = check_signs(tokenize("40 30 -15, 74"))
        assert error.reason == "Seconds value too low (-15)"

    def test_exempt_mask(self):
        """Test the double negative between bearings is left for assembly."""
        assert sign_mask(tokenize("N -40 -74 W")) in SIGN_CHECK_EXEMPTIONS
        _, error = check_signs(tokenize("N -40 -74 W"))
        assert error is None


class TestRunPipeline:
    """Tests for run_pipeline."""

    def test_success(self):
        """Test every stage passes and a divider is added."""
        tokens, error = run_pipeline(WGS_PIPES, tokenize("40 74"))
        assert error is None
        assert TokenKind.DIVIDER in [token.kind for token in tokens]

    def test_stops_at_first_error(self):
        """Test later stages never run after a failure."""
        _, error = run_pipeline(WGS_PIPES, tokenize("40"))
        assert error.detail == "too few numbers"

    def test_structure_pipes_skip_signs(self):
        """Test the structural stages do not check signs."""
        _, error = run_pipeline(STRUCTURE_PIPES, tokenize("40 -30, 74"))
        assert error is None

    @pytest.mark.parametrize("pipes", [(), (check_numbers,)])
    def test_partial_pipelines(self, pipes):
        """Test any sequence of stages can be run."""
        tokens = tokenize("40, 74")
        result, error = run_pipeline(pipes, tokens)
        assert error is None
        assert result == tokens
