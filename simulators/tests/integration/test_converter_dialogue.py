"""
Integration Tests for the Unit Converter

Drives complete input through the console loop and checks stdout.
"""

import pytest
from unittest.mock import patch

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from converter import RequestParser, main
from converter.parser import IDLE_PROMPT

PROMPT = IDLE_PROMPT + "\n"


@pytest.mark.integration
class TestConverterDialogue:

    def test_single_conversion_then_exit(self, converter_session, run_dialogue):
        code, out = run_dialogue(converter_session, "1 km in m\nexit\n")
        assert code == 0
        assert out == PROMPT + "1.0 kilometer is 1000.0 meters\n" + PROMPT
        assert converter_session.finished

    def test_tokens_may_span_lines(self, converter_session, run_dialogue):
        _, out = run_dialogue(converter_session, "10\ndegrees\ncelsius\nin\ndegrees\nfahrenheit\nexit")
        assert "10.0 degrees Celsius is 50.0 degrees Fahrenheit\n" in out

    def test_mixed_session(self, converter_session, run_dialogue):
        text = "\n".join([
            "hello",
            "-5 meter in foot",
            "3 m to gram",
            "0 celsius in kelvin",
            "exit",
        ])
        _, out = run_dialogue(converter_session, text)
        assert out.split("\n") == [
            IDLE_PROMPT,
            "Parse error",
            IDLE_PROMPT,
            "Length shouldn't be negative",
            IDLE_PROMPT,
            "Conversion from meters to grams is impossible",
            IDLE_PROMPT,
            "0.0 degrees Celsius is 273.15 Kelvins",
            IDLE_PROMPT,
            "",
        ]

    def test_end_of_input_without_exit(self, converter_session, run_dialogue):
        code, out = run_dialogue(converter_session, "1 km")
        assert code == 0
        assert out == PROMPT
        assert not converter_session.finished

    def test_tokens_after_exit_are_not_read(self, converter_session, run_dialogue):
        _, out = run_dialogue(converter_session, "exit 1 km in m")
        assert out == PROMPT


@pytest.mark.integration
class TestConverterMain:

    def test_main_runs_over_stdio(self, capsys, monkeypatch):
        import io
        monkeypatch.setattr("sys.stdin", io.StringIO("100 cm in m exit"))
        with patch("converter.configure_logging"):
            code = main()
        assert code == 0
        assert "100.0 centimeters is 1.0 meter" in capsys.readouterr().out
