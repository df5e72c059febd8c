"""
Shared Library for the Console Simulators
=========================================

Utilities used by both the unit converter and the coffee machine.

Modules
-------
settings
    Environment-driven settings and logging setup
console
    Token reader and the loop that drives a session
helpers
    Session ids and safe/strict token parsing
errors
    Common exception types

Quick Start
-----------
>>> import sys
>>> from shared import Settings, configure_logging, run_session
>>>
>>> settings = Settings.from_environment()
>>> configure_logging(settings)
>>> run_session(session, sys.stdin, sys.stdout)
"""

from .errors import (
    SimulatorError,
    TokenParseError,
)

from .helpers import (
    generate_session_id,
    parse_float_safe,
    parse_int_safe,
    parse_float_strict,
    parse_int_strict,
    is_degree_marker,
)

from .settings import (
    Settings,
    configure_logging,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_FORMAT,
)

from .console import (
    Session,
    read_tokens,
    run_session,
)

__all__ = [
    # Errors
    "SimulatorError",
    "TokenParseError",
    # Helpers
    "generate_session_id",
    "parse_float_safe",
    "parse_int_safe",
    "parse_float_strict",
    "parse_int_strict",
    "is_degree_marker",
    # Settings
    "Settings",
    "configure_logging",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_FORMAT",
    # Console
    "Session",
    "read_tokens",
    "run_session",
]
