"""
Helper utilities shared by the simulators.
Includes session ids and safe/strict token parsing.
"""

import uuid
import logging
from typing import Optional, Any

from .errors import TokenParseError

logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    """Generate a short id used to correlate log lines of one session."""
    return f"session-{uuid.uuid4().hex[:12]}"


def parse_float_safe(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Safely parse a value to float."""
    if value is None:
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def parse_int_safe(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """Safely parse a value to int."""
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def parse_float_strict(token: str) -> float:
    """
    Parse a token as float.

    Raises:
        TokenParseError: If the token is not a number
    """
    # digit-group underscores are Python literal syntax, not console input
    value = None if "_" in token else parse_float_safe(token, default=None)
    if value is None:
        raise TokenParseError(token, "a number")
    return value


def parse_int_strict(token: str) -> int:
    """
    Parse a token as int.

    Raises:
        TokenParseError: If the token is not an integer
    """
    value = None if "_" in token else parse_int_safe(token, default=None)
    if value is None:
        raise TokenParseError(token, "an integer")
    return value


def is_degree_marker(token: str) -> bool:
    """True for the "degree"/"degrees" token that opens a two-word unit phrase."""
    return token.lower() in ("degree", "degrees")
