"""A small editor that collects key/value pairs and emits them as JSON."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field

from .keys import Key, KeyEvent

__all__ = ["CurrentScreen", "CurrentlyEditing", "JsonEditor"]


class CurrentScreen(enum.Enum):
    """The screen the user is looking at."""

    MAIN = "main"
    EDITING = "editing"
    EXITING = "exiting"


class CurrentlyEditing(enum.Enum):
    """Which half of the pair is being edited."""

    KEY = "key"
    VALUE = "value"


@dataclass
class JsonEditor:
    """Editor state: the pair being typed and the pairs saved so far."""

    key_input: str = ""
    value_input: str = ""
    pairs: dict[str, str] = field(default_factory=dict)
    current_screen: CurrentScreen = CurrentScreen.MAIN
    currently_editing: CurrentlyEditing | None = None

    def save_key_value(self) -> None:
        """Store the typed pair and clear the inputs."""
        self.pairs[self.key_input] = self.value_input
        self.key_input = ""
        self.value_input = ""
        self.currently_editing = None

    def toggle_editing(self) -> None:
        """Switch between editing the key and the value."""
        if self.currently_editing is CurrentlyEditing.KEY:
            self.currently_editing = CurrentlyEditing.VALUE
        else:
            self.currently_editing = CurrentlyEditing.KEY

    def to_json(self) -> str:
        """The saved pairs as compact JSON."""
        return json.dumps(self.pairs, separators=(",", ":"), ensure_ascii=False)

    def _append(self, ch: str) -> None:
        if self.currently_editing is CurrentlyEditing.KEY:
            self.key_input += ch
        elif self.currently_editing is CurrentlyEditing.VALUE:
            self.value_input += ch

    def _backspace(self) -> None:
        if self.currently_editing is CurrentlyEditing.KEY:
            self.key_input = self.key_input[:-1]
        elif self.currently_editing is CurrentlyEditing.VALUE:
            self.value_input = self.value_input[:-1]

    def _confirm(self) -> None:
        if self.currently_editing is CurrentlyEditing.KEY:
            self.currently_editing = CurrentlyEditing.VALUE
        elif self.currently_editing is CurrentlyEditing.VALUE:
            self.save_key_value()
            self.current_screen = CurrentScreen.MAIN

    def handle_key(self, key_event: KeyEvent) -> bool | None:
        """Apply a key press.

        Returns None while the editor keeps running; on exit returns True if
        the pairs should be printed and False if not.
        """
        code = key_event.code
        match self.current_screen:
            case CurrentScreen.MAIN:
                if code == "e":
                    self.current_screen = CurrentScreen.EDITING
                    self.currently_editing = CurrentlyEditing.KEY
                elif code == "q":
                    self.current_screen = CurrentScreen.EXITING
            case CurrentScreen.EXITING:
                if code == "y":
                    return True
                if code in ("n", "q"):
                    return False
            case CurrentScreen.EDITING:
                if code is Key.ENTER:
                    self._confirm()
                elif code is Key.BACKSPACE:
                    self._backspace()
                elif code is Key.ESC:
                    self.current_screen = CurrentScreen.MAIN
                    self.currently_editing = None
                elif code is Key.TAB:
                    self.toggle_editing()
                elif isinstance(code, str):
                    self._append(code)
        return None