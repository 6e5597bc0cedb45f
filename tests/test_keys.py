import pytest

from tuikit.keys import (
    FunctionKey,
    Key,
    KeyEvent,
    KeyModifiers,
    key_event_to_string,
    parse_key_event,
    parse_key_sequence,
)


def test_simple_keys():
    assert parse_key_event("a") == KeyEvent("a", KeyModifiers.NONE)
    assert parse_key_event("enter") == KeyEvent(Key.ENTER, KeyModifiers.NONE)
    assert parse_key_event("esc") == KeyEvent(Key.ESC, KeyModifiers.NONE)


def test_with_modifiers():
    assert parse_key_event("ctrl-a") == KeyEvent("a", KeyModifiers.CONTROL)
    assert parse_key_event("alt-enter") == KeyEvent(Key.ENTER, KeyModifiers.ALT)
    assert parse_key_event("shift-esc") == KeyEvent(Key.ESC, KeyModifiers.SHIFT)


def test_multiple_modifiers():
    assert parse_key_event("ctrl-alt-a") == KeyEvent(
        "a", KeyModifiers.CONTROL | KeyModifiers.ALT
    )
    assert parse_key_event("ctrl-shift-enter") == KeyEvent(
        Key.ENTER, KeyModifiers.CONTROL | KeyModifiers.SHIFT
    )


def test_reverse_multiple_modifiers():
    event = KeyEvent("a", KeyModifiers.CONTROL | KeyModifiers.ALT)
    assert key_event_to_string(event) == "ctrl-alt-a"


@pytest.mark.parametrize("raw", ["invalid-key", "ctrl-invalid-key"])
def test_invalid_keys(raw):
    with pytest.raises(ValueError):
        parse_key_event(raw)


def test_case_insensitivity():
    assert parse_key_event("CTRL-a") == KeyEvent("a", KeyModifiers.CONTROL)
    assert parse_key_event("AlT-eNtEr") == KeyEvent(Key.ENTER, KeyModifiers.ALT)


def test_shift_uppercases_character():
    assert parse_key_event("shift-a") == KeyEvent("A", KeyModifiers.SHIFT)


def test_backtab_implies_shift():
    assert parse_key_event("backtab") == KeyEvent(Key.BACK_TAB, KeyModifiers.SHIFT)


def test_named_characters_and_function_keys():
    assert parse_key_event("space") == KeyEvent(" ")
    assert parse_key_event("minus") == KeyEvent("-")
    assert parse_key_event("hyphen") == KeyEvent("-")
    assert parse_key_event("f5") == KeyEvent(FunctionKey(5))


def test_to_string_special_cases():
    assert key_event_to_string(KeyEvent(" ")) == "space"
    assert key_event_to_string(KeyEvent(FunctionKey(3))) == "f(3)"
    assert key_event_to_string(KeyEvent(Key.CAPS_LOCK)) == ""
    assert key_event_to_string(KeyEvent(Key.PAGE_UP, KeyModifiers.SHIFT)) == "shift-pageup"


@pytest.mark.parametrize("raw", ["ctrl-alt-a", "enter", "shift-esc", "backspace", "q"])
def test_round_trip(raw):
    assert key_event_to_string(parse_key_event(raw)) == raw


def test_sequence_single():
    assert parse_key_sequence("<q>") == (KeyEvent("q"),)


def test_sequence_multiple():
    assert parse_key_sequence("<ctrl-a><b>") == (
        KeyEvent("a", KeyModifiers.CONTROL),
        KeyEvent("b"),
    )


def test_sequence_without_brackets():
    assert parse_key_sequence("ctrl-d") == (KeyEvent("d", KeyModifiers.CONTROL),)


@pytest.mark.parametrize("raw", ["<a", "<a>>", ""])
def test_sequence_errors(raw):
    with pytest.raises(ValueError):
        parse_key_sequence(raw)


def test_non_ascii_single_char_rejected():
    with pytest.raises(ValueError):
        parse_key_event("é")


def test_key_event_rejects_long_char():
    with pytest.raises(ValueError):
        KeyEvent("ab")