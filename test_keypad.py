"""
Tests for the button harness
"""
import pytest

import keypad
from calculator import Calculator


@pytest.fixture
def calc():
    return Calculator()


def test_digits_and_equals(calc):
    assert keypad.press_sequence(calc, ["5", "+", "3", "="]) == "8"


def test_txt_prints_display(calc, capsys):
    keypad.press_sequence(calc, ["1", "2", "txt"])
    assert capsys.readouterr().out == "The result is: 12\n"
    assert calc.display == "12"


def test_invalid_token_reports_and_keeps_state(calc, capsys):
    keypad.press_sequence(calc, ["4", "+"])
    before = calc.snapshot()
    assert keypad.press(calc, "sin") is False
    assert capsys.readouterr().out == "invalid input\n"
    assert calc.snapshot() == before


@pytest.mark.parametrize("token", ["", "10", "%", "ac", None])
def test_rejected_tokens(calc, token, capsys):
    assert keypad.press(calc, token) is False
    assert "invalid input" in capsys.readouterr().out
    assert calc.display == "0"


@pytest.mark.parametrize("tokens, expected", [
    (["x!"], "1"),
    (["5", "x!"], "120"),
    (["1", "1", "x!"], "ERROR"),
    (["1", "6", "sqr"], "4"),
    (["4", "1/x"], "0.25"),
    (["1", "log"], "0"),
    (["0", "log"], "ERROR"),
    (["7", "-/+"], "-7"),
    (["7", "-/+", "+/-"], "7"),
    (["2", "**", "3", "="], "8"),
    (["2", "x^y", "3", "="], "8"),
    (["9", "-", "4", "="], "5"),
    (["6", "*", "7", "="], "42"),
    (["1", "/", "0", "="], "ERROR"),
    (["1", ".", "5", ".", "*", "2", "="], "3"),
    (["8", "-/+", "**", ".", "5", "="], "ERROR"),
    (["3", "4", "AC"], "0"),
    (["5", "+", "AC", "3", "="], "8"),
])
def test_buttons(calc, tokens, expected):
    assert keypad.press_sequence(calc, tokens) == expected


def test_memory_buttons(calc):
    keypad.press_sequence(calc, ["MC", "5", "M+", "AC", "3", "M+", "AC", "MR"])
    assert calc.display == "8"
    keypad.press_sequence(calc, ["AC", "2", "M-", "MR"])
    assert calc.display == "6"
    keypad.press_sequence(calc, ["MC", "MR"])
    assert calc.display == "0"


def test_numeric_button_on_error_display(calc, capsys):
    keypad.press_sequence(calc, ["1", "/", "0", "="])
    capsys.readouterr()
    assert keypad.press(calc, "x!") is False
    assert capsys.readouterr().out == "invalid display: 'ERROR'\n"
    assert calc.display == "ERROR"


def test_buttons_list_covers_every_action():
    for token in keypad.ACTIONS:
        assert token in keypad.BUTTONS
    assert "txt" in keypad.BUTTONS
    assert all(d in keypad.BUTTONS for d in "0123456789")


def test_every_button_is_accepted(calc, capsys):
    for token in keypad.BUTTONS:
        calc.all_clear()
        calc.enter_digit("2")
        assert keypad.press(calc, token) is True, token
