# -*- coding: utf-8 -*-
"""WGS module for tokenizing and parsing free-text latitude/longitude."""

from geocoord_lib.wgs.lexer import Token
from geocoord_lib.wgs.lexer import tokenize
from geocoord_lib.wgs.parser import assemble_coordinate
from geocoord_lib.wgs.parser import parse_wgs
from geocoord_lib.wgs.patterns import GENOME
from geocoord_lib.wgs.patterns import SIMPLER_PATTERNS
from geocoord_lib.wgs.patterns import signature
from geocoord_lib.wgs.patterns import simplify
from geocoord_lib.wgs.pipes import WGS_PIPES
from geocoord_lib.wgs.pipes import check_numbers
from geocoord_lib.wgs.pipes import fix_dividers
from geocoord_lib.wgs.pipes import run_pipeline

__all__ = [
    "GENOME",
    "SIMPLER_PATTERNS",
    "WGS_PIPES",
    "Token",
    "assemble_coordinate",
    "check_numbers",
    "fix_dividers",
    "parse_wgs",
    "run_pipeline",
    "signature",
    "simplify",
    "tokenize",
]
