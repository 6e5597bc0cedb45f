"""Key events and the textual key notation used in keybinding files."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "KeyModifiers",
    "Key",
    "FunctionKey",
    "KeyEvent",
    "parse_key_event",
    "parse_key_sequence",
    "key_event_to_string",
]


class KeyModifiers(enum.Flag):
    """Modifier keys held down with a key."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


class Key(enum.Enum):
    """Named, non-character keys."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    TAB = "tab"
    BACK_TAB = "backtab"
    DELETE = "delete"
    INSERT = "insert"
    ESC = "esc"
    NULL = "null"
    CAPS_LOCK = "capslock"
    SCROLL_LOCK = "scrolllock"
    NUM_LOCK = "numlock"
    PRINT_SCREEN = "printscreen"
    PAUSE = "pause"
    MENU = "menu"
    KEYPAD_BEGIN = "keypadbegin"
    MEDIA = "media"
    MODIFIER = "modifier"


@dataclass(frozen=True)
class FunctionKey:
    """A function key such as F1."""

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError("function key number must be an int")
        if not 0 <= self.number <= 255:
            raise ValueError(f"function key number out of range: {self.number}")


KeyCode = Key | FunctionKey | str


@dataclass(frozen=True)
class KeyEvent:
    """A key together with its modifiers; a str code is a single character."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if isinstance(self.code, str):
            if len(self.code) != 1:
                raise ValueError(f"character key must be one character: {self.code!r}")
        elif not isinstance(self.code, (Key, FunctionKey)):
            raise TypeError(f"unsupported key code: {self.code!r}")


_PARSE_NAMES: dict[str, KeyCode] = {
    "esc": Key.ESC,
    "enter": Key.ENTER,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "up": Key.UP,
    "down": Key.DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "backtab": Key.BACK_TAB,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
    "insert": Key.INSERT,
    **{f"f{n}": FunctionKey(n) for n in range(1, 13)},
    "space": " ",
    "hyphen": "-",
    "minus": "-",
    "tab": Key.TAB,
}

_DISPLAY_NAMES: dict[Key, str] = {
    Key.BACKSPACE: "backspace",
    Key.ENTER: "enter",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.UP: "up",
    Key.DOWN: "down",
    Key.HOME: "home",
    Key.END: "end",
    Key.PAGE_UP: "pageup",
    Key.PAGE_DOWN: "pagedown",
    Key.TAB: "tab",
    Key.BACK_TAB: "backtab",
    Key.DELETE: "delete",
    Key.INSERT: "insert",
    Key.ESC: "esc",
}

_MODIFIER_PREFIXES = (
    ("ctrl-", KeyModifiers.CONTROL),
    ("alt-", KeyModifiers.ALT),
    ("shift-", KeyModifiers.SHIFT),
)


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def _extract_modifiers(raw: str) -> tuple[str, KeyModifiers]:
    modifiers = KeyModifiers.NONE
    current = raw
    while True:
        for prefix, flag in _MODIFIER_PREFIXES:
            if current.startswith(prefix):
                modifiers |= flag
                current = current[len(prefix):]
                break
        else:
            return current, modifiers


def _parse_key_code(raw: str, modifiers: KeyModifiers) -> KeyEvent:
    if raw in _PARSE_NAMES:
        code = _PARSE_NAMES[raw]
        if code is Key.BACK_TAB:
            modifiers |= KeyModifiers.SHIFT
        return KeyEvent(code, modifiers)
    if len(raw.encode("utf-8")) == 1:
        ch = raw
        if KeyModifiers.SHIFT in modifiers:
            ch = ch.upper()
        return KeyEvent(ch, modifiers)
    raise ValueError(f"Unable to parse {raw}")


def parse_key_event(raw: str) -> KeyEvent:
    """Parse notation such as ``ctrl-a`` or ``alt-enter`` into a key event."""
    remaining, modifiers = _extract_modifiers(_ascii_lower(raw))
    return _parse_key_code(remaining, modifiers)


def parse_key_sequence(raw: str) -> tuple[KeyEvent, ...]:
    """Parse a sequence such as ``<ctrl-a><b>`` into key events."""
    if raw.count(">") != raw.count("<"):
        raise ValueError(f"Unable to parse `{raw}`")
    if "><" not in raw:
        raw = raw.removeprefix("<")
        raw = raw.removeprefix(">")
    parts = []
    for seq in raw.split("><"):
        if seq.startswith("<"):
            parts.append(seq[1:])
        elif seq.endswith(">"):
            parts.append(seq[:-1])
        else:
            parts.append(seq)
    return tuple(parse_key_event(part) for part in parts)


def key_event_to_string(key_event: KeyEvent) -> str:
    """Render a key event back into the keybinding notation."""
    code = key_event.code
    if isinstance(code, FunctionKey):
        name = f"f({code.number})"
    elif isinstance(code, str):
        name = "space" if code == " " else code
    else:
        name = _DISPLAY_NAMES.get(code, "")

    modifiers = [
        label
        for flag, label in (
            (KeyModifiers.CONTROL, "ctrl"),
            (KeyModifiers.SHIFT, "shift"),
            (KeyModifiers.ALT, "alt"),
        )
        if flag in key_event.modifiers
    ]
    prefix = "-".join(modifiers)
    return f"{prefix}-{name}" if prefix else name