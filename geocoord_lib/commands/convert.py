# -*- coding: utf-8 -*-
"""Convert command.

Converts a coordinate between WGS84, MGRS and UTM, optionally as a GeoJSON
Feature.
"""

import argparse
import logging

import orjson
from geojson import Feature

from geocoord_lib.constants import DEFAULT_MGRS_PRECISION
from geocoord_lib.constants import JSON_ENCODING
from geocoord_lib.constants import MGRS_MAX_DIGITS
from geocoord_lib.coordinate import Coordinate
from geocoord_lib.coordinate import create_coordinate
from geocoord_lib.enums import AngleFormat
from geocoord_lib.enums import CoordinateKind
from geocoord_lib.enums import Format
from geocoord_lib.errors import CoordinateParseException
from geocoord_lib.errors import InvalidCoordinateError

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error raised for invalid conversion options."""


def render(
    coordinate: Coordinate,
    target: CoordinateKind | str,
    angle_format: AngleFormat | str = AngleFormat.DD,
    compass: bool = False,
    precision: int = DEFAULT_MGRS_PRECISION,
    order: Format | str | None = None,
) -> str:
    """Convert a coordinate and render it as text.

    Raises:
        ConversionError: If the target kind is unknown
        InvalidCoordinateError: If the point cannot be projected
    """
    try:
        kind = CoordinateKind(target)
    except ValueError:
        raise ConversionError(f"Unsupported target: {target}") from None

    match kind:
        case CoordinateKind.MGRS:
            return coordinate.to_mgrs(precision).to_string()

        case CoordinateKind.UTM:
            return coordinate.to_utm().to_string()

        case _:
            return coordinate.to_wgs().to_string(
                angle_format, order=kind.order or order, compass=compass
            )


def to_feature(coordinate: Coordinate, precision: int = DEFAULT_MGRS_PRECISION) -> Feature:
    """GeoJSON Feature of the point with its text renditions as properties."""
    wgs = coordinate.to_wgs()
    properties = {"wgs": wgs.to_string()}
    try:
        properties["mgrs"] = coordinate.to_mgrs(precision).to_string()
        properties["utm"] = coordinate.to_utm().to_string()
    except InvalidCoordinateError as e:
        logger.warning("No grid rendition for %s: %s", properties["wgs"], e)

    return Feature(geometry=wgs.to_geojson(), properties=properties)


def convert(args: list[str]) -> int:
    """Entry point for the convert command."""
    parser = argparse.ArgumentParser(
        prog="geocoord convert",
        description="Convert a coordinate between WGS84, MGRS and UTM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geocoord convert -k wgs -t mgrs "48.8584 N, 2.2945 E"
  geocoord convert -k wgs -t mgrs "48.8584 N, 2.2945 E" --precision 3
  geocoord convert -k mgrs -t wgs 31UDQ4825211954 --format dms --compass
  geocoord convert -k utm -t wgs "31U 448252 5411954" --format ddm
  geocoord convert -k wgs -t wgs "46.1N 93.2E" --geojson

Notes:
  - MGRS output is truncated, it names the cell containing the point
  - MGRS input converts to the south-west corner of its cell
  - Latitudes beyond 84N / 80S have no UTM or MGRS rendition
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
        help="Kind of the input coordinate (default: wgs)",
    )
    parser.add_argument(
        "-t",
        "--target",
        choices=[kind.value for kind in CoordinateKind],
        required=True,
        help="Kind to convert to",
    )
    parser.add_argument(
        "--order",
        choices=[fmt.value for fmt in Format],
        default=None,
        help="Axis order of WGS input and output",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in AngleFormat],
        default=AngleFormat.DD.value,
        dest="angle_format",
        help="Angle format of WGS output (default: dd)",
    )
    parser.add_argument(
        "--compass",
        action="store_true",
        help="Use N/S/E/W letters instead of signs in WGS output",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        choices=range(MGRS_MAX_DIGITS + 1),
        default=DEFAULT_MGRS_PRECISION,
        help="MGRS digits per axis, 5 is 1 m (default: 5)",
    )
    parser.add_argument(
        "--geojson",
        action="store_true",
        help="Print a GeoJSON Feature instead of text",
    )

    parsed_args = parser.parse_args(args)

    try:
        coordinate = create_coordinate(
            parsed_args.kind, parsed_args.input, order=parsed_args.order
        )

        if parsed_args.geojson:
            feature = to_feature(coordinate, parsed_args.precision)
            result = orjson.dumps(feature, option=orjson.OPT_INDENT_2).decode(
                JSON_ENCODING
            )
        else:
            result = render(
                coordinate,
                parsed_args.target,
                angle_format=parsed_args.angle_format,
                compass=parsed_args.compass,
                precision=parsed_args.precision,
                order=parsed_args.order,
            )

    except (CoordinateParseException, InvalidCoordinateError, ConversionError) as e:
        logger.error("Error: %s", e)
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    print(result)  # noqa: T201
    return 0
