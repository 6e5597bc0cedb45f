import json

from tuikit.json_editor import CurrentlyEditing, CurrentScreen, JsonEditor
from tuikit.keys import Key, KeyEvent


def _type(editor: JsonEditor, text: str) -> None:
    for ch in text:
        assert editor.handle_key(KeyEvent(ch)) is None


def test_new_editor_state():
    editor = JsonEditor()
    assert editor.current_screen is CurrentScreen.MAIN
    assert editor.currently_editing is None
    assert editor.pairs == {}


def test_full_entry_flow():
    editor = JsonEditor()
    editor.handle_key(KeyEvent("e"))
    assert editor.current_screen is CurrentScreen.EDITING
    assert editor.currently_editing is CurrentlyEditing.KEY
    _type(editor, "name")
    editor.handle_key(KeyEvent(Key.ENTER))
    assert editor.currently_editing is CurrentlyEditing.VALUE
    _type(editor, "value")
    editor.handle_key(KeyEvent(Key.ENTER))
    assert editor.pairs == {"name": "value"}
    assert editor.current_screen is CurrentScreen.MAIN
    assert editor.currently_editing is None
    assert editor.key_input == ""
    assert editor.value_input == ""


def test_to_json_round_trip():
    editor = JsonEditor(pairs={"a": "1", "b": "two"})
    assert json.loads(editor.to_json()) == {"a": "1", "b": "two"}


def test_to_json_is_compact():
    assert JsonEditor(pairs={"a": "b"}).to_json() == '{"a":"b"}'


def test_save_key_value_overwrites_existing():
    editor = JsonEditor(key_input="k", value_input="new", pairs={"k": "old"})
    editor.currently_editing = CurrentlyEditing.VALUE
    editor.save_key_value()
    assert editor.pairs == {"k": "new"}
    assert editor.currently_editing is None


def test_toggle_editing_cycle():
    editor = JsonEditor()
    editor.toggle_editing()
    assert editor.currently_editing is CurrentlyEditing.KEY
    editor.toggle_editing()
    assert editor.currently_editing is CurrentlyEditing.VALUE
    editor.toggle_editing()
    assert editor.currently_editing is CurrentlyEditing.KEY


def test_tab_switches_target_of_typing():
    editor = JsonEditor()
    editor.handle_key(KeyEvent("e"))
    _type(editor, "k")
    editor.handle_key(KeyEvent(Key.TAB))
    _type(editor, "v")
    assert editor.key_input == "k"
    assert editor.value_input == "v"


def test_backspace_removes_last_char():
    editor = JsonEditor()
    editor.handle_key(KeyEvent("e"))
    _type(editor, "abc")
    editor.handle_key(KeyEvent(Key.BACKSPACE))
    assert editor.key_input == "ab"
    editor.handle_key(KeyEvent(Key.BACKSPACE))
    editor.handle_key(KeyEvent(Key.BACKSPACE))
    editor.handle_key(KeyEvent(Key.BACKSPACE))
    assert editor.key_input == ""


def test_esc_cancels_editing():
    editor = JsonEditor()
    editor.handle_key(KeyEvent("e"))
    editor.handle_key(KeyEvent(Key.ESC))
    assert editor.current_screen is CurrentScreen.MAIN
    assert editor.currently_editing is None


def test_quit_and_confirm_print():
    editor = JsonEditor()
    assert editor.handle_key(KeyEvent("q")) is None
    assert editor.current_screen is CurrentScreen.EXITING
    assert editor.handle_key(KeyEvent("x")) is None
    assert editor.handle_key(KeyEvent("y")) is True


def test_quit_without_print():
    for key in ("n", "q"):
        editor = JsonEditor(current_screen=CurrentScreen.EXITING)
        assert editor.handle_key(KeyEvent(key)) is False


def test_typing_q_while_editing_does_not_quit():
    editor = JsonEditor()
    editor.handle_key(KeyEvent("e"))
    _type(editor, "q")
    assert editor.current_screen is CurrentScreen.EDITING
    assert editor.key_input == "q"