"""
Common exception types shared by both simulators.
"""


class SimulatorError(Exception):
    """Base class for simulator errors."""
    pass


class TokenParseError(SimulatorError):
    """Raised when a token cannot be read as the expected number type."""

    def __init__(self, token: str, expected: str):
        self.token = token
        self.expected = expected
        super().__init__(f"Expected {expected}, got {token!r}")
