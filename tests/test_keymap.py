"""Tests for keyboard equivalents."""

import pytest

from calculator import CalculatorEngine
from keymap import key_to_event


@pytest.mark.parametrize("char, keysym, expected", [
    ("5", "5", ("digit", "5")),
    ("", "KP_7", ("digit", "7")),
    ("+", "plus", ("operator", "+")),
    ("-", "minus", ("operator", "-")),
    ("*", "asterisk", ("operator", "×")),
    ("/", "slash", ("operator", "÷")),
    ("", "KP_Divide", ("operator", "÷")),
    (".", "period", ("dot", None)),
    ("\x7f", "Delete", ("clear_entry", None)),
    ("\x08", "BackSpace", ("backspace", None)),
    ("\r", "Return", ("equals", None)),
    ("\r", "KP_Enter", ("equals", None)),
])
def test_key_to_event(char, keysym, expected):
    assert key_to_event(char, keysym) == expected


@pytest.mark.parametrize("char, keysym", [
    ("a", "a"),
    ("", "Shift_L"),
    ("=", "equal"),
    ("", "KP_Home"),
])
def test_unbound_keys(char, keysym):
    assert key_to_event(char, keysym) is None


def test_keyboard_session_drives_engine():
    engine = CalculatorEngine()
    for char, keysym in [("1", "1"), ("2", "2"), ("*", "asterisk"),
                         ("3", "3"), ("\r", "Return")]:
        state = engine.handle(*key_to_event(char, keysym))
    assert state["entry"] == "36"
    assert state["formula"] == "12 × 3 ="
