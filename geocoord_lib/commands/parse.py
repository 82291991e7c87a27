# -*- coding: utf-8 -*-
"""Parse command.

Validates a coordinate of a declared kind and prints every rendition of it
as JSON.
"""

import argparse
import logging

import orjson

from geocoord_lib.constants import JSON_ENCODING
from geocoord_lib.coordinate import create_coordinate
from geocoord_lib.enums import CoordinateKind
from geocoord_lib.enums import Format
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import InvalidCoordinateError

logger = logging.getLogger(__name__)


def _dumps(document: object) -> str:
    return orjson.dumps(document, option=orjson.OPT_INDENT_2).decode(JSON_ENCODING)


def describe(kind: str, text: str, order: str | None = None) -> dict:
    """Parse `text` and collect its WGS84, MGRS and UTM renditions.

    Renditions that cannot be computed (e.g. MGRS beyond 84°N) are None.

    Raises:
        CoordinateParseException: If the input is invalid
    """
    coordinate = create_coordinate(kind, text, order=order)
    wgs = coordinate.to_wgs()

    document = {
        "kind": coordinate.kind.value,
        "input": text,
        "lat": float(wgs.lat),
        "lon": float(wgs.lon),
        "wgs": wgs.to_string(),
        "mgrs": None,
        "utm": None,
    }
    try:
        document["mgrs"] = coordinate.to_mgrs().to_string()
        document["utm"] = coordinate.to_utm().to_string()
    except InvalidCoordinateError as e:
        logger.warning("No grid rendition for %s: %s", text, e)

    return document


def parse(args: list[str]) -> int:
    """Entry point for the parse command."""
    parser = argparse.ArgumentParser(
        prog="geocoord parse",
        description="Validate a coordinate and print it as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geocoord parse -k wgs "40° 42' 46.08\\" N, 74° 0' 21.6\\" W"
  geocoord parse -k wgs "-74.006 40.7128" --order lonlat
  geocoord parse -k mgrs "31U DQ 48252 11954"
  geocoord parse -k utm "31U 448252 5411954"
  geocoord parse -k mgrs 60XJV --check          # prints true / false

Notes:
  - The exit status is 1 when the input is invalid
  - --check only tests the format, not zone or grid rules
""",
    )

    parser.add_argument(
        "input",
        help="Coordinate text",
    )
    parser.add_argument(
        "-k",
        "--kind",
        choices=[kind.value for kind in CoordinateKind],
        default=CoordinateKind.WGS.value,
        help="Kind of coordinate (default: wgs)",
    )
    parser.add_argument(
        "--order",
        choices=[fmt.value for fmt in Format],
        default=None,
        help="Axis order of WGS input when no compass letter decides it",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the input is recognisable",
    )

    parsed_args = parser.parse_args(args)

    if parsed_args.check:
        recognized = create_coordinate(
            parsed_args.kind,
            parsed_args.input,
            order=parsed_args.order,
            skip_validation=True,
        )
        print(_dumps(recognized))  # noqa: T201
        return 0 if recognized else 1

    try:
        document = describe(parsed_args.kind, parsed_args.input, parsed_args.order)

    except CoordinateParseException as e:
        logger.error("Error: %s", e)
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    print(_dumps(document))  # noqa: T201
    return 0
