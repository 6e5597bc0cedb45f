"""A single-line input box with a cursor and a history of submitted messages."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .keys import Key, KeyEvent

__all__ = ["InputMode", "InputApp"]


class InputMode(enum.Enum):
    """Whether keys edit the input or control the application."""

    NORMAL = "normal"
    EDITING = "editing"


@dataclass
class InputApp:
    """The input text, the cursor's character position and recorded messages."""

    input: str = ""
    character_index: int = 0
    input_mode: InputMode = InputMode.NORMAL
    messages: list[str] = field(default_factory=list)

    def _clamp_cursor(self, position: int) -> int:
        return max(0, min(position, len(self.input)))

    def move_cursor_left(self) -> None:
        self.character_index = self._clamp_cursor(self.character_index - 1)

    def move_cursor_right(self) -> None:
        self.character_index = self._clamp_cursor(self.character_index + 1)

    def enter_char(self, new_char: str) -> None:
        """Insert a character at the cursor and move past it."""
        index = self.character_index
        self.input = self.input[:index] + new_char + self.input[index:]
        self.move_cursor_right()

    def delete_char(self) -> None:
        """Remove the character to the left of the cursor, if any."""
        index = self.character_index
        if index == 0:
            return
        self.input = self.input[: index - 1] + self.input[index:]
        self.move_cursor_left()

    def reset_cursor(self) -> None:
        self.character_index = 0

    def submit_message(self) -> None:
        """Record the input as a message and clear it."""
        self.messages.append(self.input)
        self.input = ""
        self.reset_cursor()

    def handle_key(self, key_event: KeyEvent) -> bool:
        """Apply a key press; returns True when the user asked to quit."""
        code = key_event.code
        if self.input_mode is InputMode.NORMAL:
            if code == "e":
                self.input_mode = InputMode.EDITING
            elif code == "q":
                return True
            return False

        if code is Key.ENTER:
            self.submit_message()
        elif isinstance(code, str):
            self.enter_char(code)
        elif code is Key.BACKSPACE:
            self.delete_char()
        elif code is Key.LEFT:
            self.move_cursor_left()
        elif code is Key.RIGHT:
            self.move_cursor_right()
        elif code is Key.ESC:
            self.input_mode = InputMode.NORMAL
        return False