"""
Unit Tests for Shared Helpers

Tests session id generation and the safe/strict token parsers.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from shared.errors import TokenParseError, SimulatorError
from shared.helpers import (
    generate_session_id,
    parse_float_safe,
    parse_int_safe,
    parse_float_strict,
    parse_int_strict,
    is_degree_marker,
)


class TestGenerateSessionId:

    @pytest.mark.unit
    def test_format(self):
        session_id = generate_session_id()
        assert session_id.startswith("session-")
        assert len(session_id) == 20
        int(session_id.replace("session-", ""), 16)

    @pytest.mark.unit
    def test_uniqueness(self):
        ids = [generate_session_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestSafeParsing:

    @pytest.mark.unit
    def test_parse_float_safe(self):
        assert parse_float_safe("2.5") == 2.5
        assert parse_float_safe("-3") == -3.0
        assert parse_float_safe("abc") == 0.0
        assert parse_float_safe(None, default=None) is None
        assert parse_float_safe("abc", default=None) is None

    @pytest.mark.unit
    def test_parse_int_safe(self):
        assert parse_int_safe("7") == 7
        assert parse_int_safe("7.5") == 0
        assert parse_int_safe("x", default=None) is None


class TestStrictParsing:

    @pytest.mark.unit
    def test_parse_float_strict(self):
        assert parse_float_strict("1e3") == 1000.0
        with pytest.raises(TokenParseError) as exc:
            parse_float_strict("ten")
        assert exc.value.token == "ten"
        assert isinstance(exc.value, SimulatorError)

    @pytest.mark.unit
    def test_parse_int_strict(self):
        assert parse_int_strict("42") == 42
        with pytest.raises(TokenParseError):
            parse_int_strict("4.2")

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["1_000", "_1", "1__0"])
    def test_digit_group_underscores_rejected(self, token):
        with pytest.raises(TokenParseError):
            parse_float_strict(token)
        with pytest.raises(TokenParseError):
            parse_int_strict(token)


class TestDegreeMarker:

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["degree", "degrees", "Degree", "DEGREES"])
    def test_markers(self, token):
        assert is_degree_marker(token)

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["deg", "celsius", "degreess", ""])
    def test_non_markers(self, token):
        assert not is_degree_marker(token)
