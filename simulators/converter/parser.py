"""
Request Parser
==============

Token-driven state machine that assembles a conversion request from input
such as ``10 degrees Celsius in degrees Fahrenheit``.

Grammar
-------
    <number> <unit-phrase> <filler> <unit-phrase>  |  exit

A unit phrase is one token, or two when it starts with "degree"/"degrees".
The filler token (e.g. "in", "to") is read and discarded.

``transition()`` is pure: it maps (state, request, token) to the next state,
the next request and the effect to perform. ``RequestParser`` owns the
current state and request for one session and carries out the effects.
"""

import logging
from typing import List, Optional

from shared.errors import TokenParseError
from shared.helpers import generate_session_id, parse_float_strict, is_degree_marker

from .engine import ConversionEngine
from .models import (
    ConversionRequest,
    ConversionResult,
    ParserEffect,
    ParserState,
    Transition,
)

logger = logging.getLogger(__name__)

IDLE_PROMPT = "Enter what you want to convert (or exit): "
PARSE_ERROR_MESSAGE = "Parse error"
EXIT_COMMAND = "exit"


def transition(state: ParserState, request: ConversionRequest, token: str) -> Transition:
    """
    Compute the parser step for a single token.

    Args:
        state: Current parser state
        request: Request accumulated so far
        token: Next input token

    Returns:
        Transition with the next state, next request and effect
    """
    if state == ParserState.IDLE:
        if token == EXIT_COMMAND:
            return Transition(ParserState.EXIT, ConversionRequest())
        try:
            value = parse_float_strict(token)
        except TokenParseError:
            return _parse_error()
        return Transition(ParserState.READ_NUMBER, request.with_value(value))

    if state == ParserState.READ_NUMBER:
        if is_degree_marker(token):
            return Transition(ParserState.READ_DEGREE_UNIT_NAME_IN, request.append_source(token))
        return Transition(ParserState.READ_UNIT_NAME_IN, request.append_source(token))

    if state == ParserState.READ_DEGREE_UNIT_NAME_IN:
        return Transition(ParserState.READ_UNIT_NAME_IN, request.append_source(token))

    if state == ParserState.READ_UNIT_NAME_IN:
        # filler word
        return Transition(ParserState.READ_FILLER_WORD, request)

    if state == ParserState.READ_FILLER_WORD:
        if is_degree_marker(token):
            return Transition(ParserState.READ_DEGREE_UNIT_NAME_OUT, request.append_destination(token))
        return _complete(request.append_destination(token))

    if state == ParserState.READ_DEGREE_UNIT_NAME_OUT:
        return _complete(request.append_destination(token))

    return _parse_error()


def _complete(request: ConversionRequest) -> Transition:
    return Transition(
        ParserState.IDLE,
        ConversionRequest(),
        effect=ParserEffect.CONVERT,
        completed=request,
    )


def _parse_error() -> Transition:
    return Transition(ParserState.IDLE, ConversionRequest(), effect=ParserEffect.PARSE_ERROR)


class RequestParser:
    """
    One converter session: current state, pending request and effect handling.
    """

    def __init__(self, engine: Optional[ConversionEngine] = None, session_id: Optional[str] = None):
        self.engine = engine or ConversionEngine()
        self.session_id = session_id or generate_session_id()
        self.state = ParserState.IDLE
        self.request = ConversionRequest()
        self.last_result: Optional[ConversionResult] = None

    @property
    def finished(self) -> bool:
        return self.state == ParserState.EXIT

    def prompt(self) -> Optional[str]:
        """The prompt is only shown while waiting for a new request."""
        if self.state == ParserState.IDLE:
            return IDLE_PROMPT
        return None

    def handle(self, token: str) -> List[str]:
        """
        Consume one token.

        Returns:
            Output lines to print (empty for intermediate steps)
        """
        step = transition(self.state, self.request, token)
        logger.debug(f"[{self.session_id}] {self.state.value} --{token!r}--> {step.state.value}")

        self.state = step.state
        self.request = step.request

        if step.effect == ParserEffect.CONVERT:
            completed = step.completed
            self.last_result = self.engine.convert(completed.value, completed.from_unit, completed.to_unit)
            return [self.last_result.message]

        if step.effect == ParserEffect.PARSE_ERROR:
            logger.warning(f"[{self.session_id}] Parse error at token {token!r}")
            return [PARSE_ERROR_MESSAGE]

        return []
