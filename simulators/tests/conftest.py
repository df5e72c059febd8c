"""
Pytest Configuration and Fixtures

This file provides:
- Custom markers (unit, integration)
- A fresh coffee machine and sessions for both simulators
- A helper that runs a session over a string of input and returns stdout
"""

import io

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shared.console import run_session
from converter import RequestParser
from coffee_machine import CoffeeMachine, SupplyParser


# ============== Custom Pytest Markers ==============

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual modules")
    config.addinivalue_line("markers", "integration: Integration tests")


# ============== Fixtures ==============

@pytest.fixture
def machine():
    """A coffee machine with the factory stock: 400/540/120/9 and $550."""
    return CoffeeMachine()


@pytest.fixture
def coffee_session(machine):
    """Supply Parser session bound to the fresh machine fixture."""
    return SupplyParser(machine, session_id="session-test")


@pytest.fixture
def converter_session():
    """Request Parser session in Idle."""
    return RequestParser(session_id="session-test")


@pytest.fixture
def run_dialogue():
    """
    Run a session over ``text`` and return (exit_code, stdout).

    Usage:
        code, out = run_dialogue(session, "remaining exit")
    """
    def _run(session, text):
        stdin = io.StringIO(text)
        stdout = io.StringIO()
        code = run_session(session, stdin, stdout)
        return code, stdout.getvalue()
    return _run


def feed(session, text):
    """Feed whitespace-separated tokens to a session, collecting output lines."""
    lines = []
    for token in text.split():
        lines.extend(session.handle(token))
    return lines
