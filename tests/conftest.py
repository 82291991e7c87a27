# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared reference points and helpers used across the
parser, projection and facade tests.
"""

from __future__ import annotations

import logging

import pytest

from geocoord_lib.errors import ParseError
from geocoord_lib.models import LatLon
from geocoord_lib.models import MGRSValue
from geocoord_lib.models import UTMValue

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Reference Points
# =============================================================================

#: Eiffel Tower, Paris
PARIS = LatLon(lat=48.8584, lon=2.2945)

#: Central Park, New York
NEW_YORK = LatLon(lat=40.7812, lon=-73.9665)

#: Christ the Redeemer, Rio de Janeiro
RIO = LatLon(lat=-22.9519, lon=-43.2105)

#: Sydney Opera House
SYDNEY = LatLon(lat=-33.8568, lon=151.2153)

#: Longyearbyen, Svalbard
LONGYEARBYEN = LatLon(lat=78.2232, lon=15.6267)

#: Bergen, Norway (zone 32 widened over 32V)
BERGEN = LatLon(lat=60.3913, lon=5.3221)

REFERENCE_POINTS = {
    "paris": PARIS,
    "new_york": NEW_YORK,
    "rio": RIO,
    "sydney": SYDNEY,
    "longyearbyen": LONGYEARBYEN,
    "bergen": BERGEN,
}


# =============================================================================
# Helpers
# =============================================================================


def assert_error(result: object, *fragments: str) -> ParseError:
    """Assert `result` is a ParseError whose message contains every fragment."""
    assert isinstance(result, ParseError), f"expected an error, got {result!r}"
    for fragment in fragments:
        assert fragment in result.message, (
            f"{fragment!r} not in {result.message!r}"
        )
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(params=sorted(REFERENCE_POINTS), ids=sorted(REFERENCE_POINTS))
def reference_point(request) -> LatLon:
    """Each named reference point in turn."""
    return REFERENCE_POINTS[request.param]


@pytest.fixture
def paris() -> LatLon:
    return PARIS


@pytest.fixture
def paris_utm() -> UTMValue:
    """UTM of the Eiffel Tower, truncated to the meter."""
    return UTMValue(
        zone_number=31, zone_letter="U", easting=448252.0, northing=5411954.0
    )


@pytest.fixture
def paris_mgrs() -> MGRSValue:
    """MGRS of the Eiffel Tower at 1 m precision (same cell as `paris_utm`)."""
    return MGRSValue(
        zone_number=31,
        zone_letter="U",
        grid_col="D",
        grid_row="Q",
        easting=48252,
        northing=11954,
        precision_digits=10,
    )
