"""
converter: Unit Conversion REPL
===============================

Reads tokens from stdin and converts between units of a fixed table:

    > 10 degrees Celsius in degrees Fahrenheit
    10.0 degrees Celsius is 50.0 degrees Fahrenheit
    > 1 km to m
    1.0 kilometer is 1000.0 meters
    > exit

Architecture:
    stdin -> shared.console.run_session -> RequestParser (state machine)
        -> ConversionEngine -> UnitCatalog
"""

import logging
import sys

from shared.console import run_session
from shared.settings import Settings, configure_logging

from .catalog import UnitCatalog
from .engine import ConversionEngine, format_number
from .models import (
    Category,
    Unit,
    ParserState,
    ParserEffect,
    ConversionStatus,
    ConversionRequest,
    ConversionResult,
    Transition,
)
from .parser import RequestParser, transition

logger = logging.getLogger(__name__)

__all__ = [
    "UnitCatalog",
    "ConversionEngine",
    "format_number",
    "Category",
    "Unit",
    "ParserState",
    "ParserEffect",
    "ConversionStatus",
    "ConversionRequest",
    "ConversionResult",
    "Transition",
    "RequestParser",
    "transition",
    "main",
]


def main() -> int:
    """Entry point for the ``unit-converter`` console script."""
    configure_logging(Settings.from_environment())

    parser = RequestParser()
    logger.info(f"[{parser.session_id}] Converter started")
    code = run_session(parser, sys.stdin, sys.stdout)
    logger.info(f"[{parser.session_id}] Converter stopped in state {parser.state.value}")
    return code
