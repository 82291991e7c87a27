# -*- coding: utf-8 -*-
"""``geocoord`` command line entry point.

Sub-commands are discovered through the ``geocoord_lib.actions`` entry-point
group, so ``geocoord parse ...`` loads `geocoord_lib.commands.parse.parse`.
"""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import entry_points

import geocoord_lib


def main() -> int:
    registered_commands = entry_points(group="geocoord_lib.actions")

    parser = argparse.ArgumentParser(
        prog="geocoord",
        description="Parse and convert WGS84, MGRS and UTM coordinates",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {geocoord_lib.__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log why inputs are rejected",
    )
    parser.add_argument(
        "command",
        choices=sorted(registered_commands.names),
    )
    parser.add_argument(
        "args",
        help=argparse.SUPPRESS,
        nargs=argparse.REMAINDER,
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    command_fn = registered_commands[args.command].load()
    return command_fn(args.args)
