"""
Console Loop Driver
===================

Reads whitespace-delimited tokens and feeds them, one at a time, to a
session object. Each token is fully handled (including its output) before
the next one is read.

A session exposes:
    prompt() -> Optional[str]    text to show before the next token, if any
    handle(token) -> List[str]   output lines produced by that token
    finished -> bool             True once the session reached its exit state
"""

import logging
from typing import Iterator, List, Optional, Protocol, TextIO

logger = logging.getLogger(__name__)


class Session(Protocol):
    @property
    def finished(self) -> bool: ...

    def prompt(self) -> Optional[str]: ...

    def handle(self, token: str) -> List[str]: ...


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a text stream, lazily."""
    for line in stream:
        for token in line.split():
            yield token


def run_session(session: Session, stdin: TextIO, stdout: TextIO) -> int:
    """
    Drive a session until it finishes or input runs out.

    Returns:
        Process exit code (always 0)
    """
    tokens = read_tokens(stdin)
    try:
        while not session.finished:
            prompt = session.prompt()
            if prompt:
                stdout.write(prompt + "\n")
                stdout.flush()

            token = next(tokens, None)
            if token is None:
                logger.info("End of input reached")
                break

            for line in session.handle(token):
                stdout.write(line + "\n")
            stdout.flush()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0
