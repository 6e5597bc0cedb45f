"""Text styles and the colour notation used in style configuration."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

__all__ = ["Modifier", "Style", "parse_style", "process_color_string", "parse_color"]


class Modifier(enum.Flag):
    """Text attributes."""

    NONE = 0
    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINED = 8
    SLOW_BLINK = 16
    RAPID_BLINK = 32
    REVERSED = 64
    HIDDEN = 128
    CROSSED_OUT = 256


@dataclass(frozen=True)
class Style:
    """Foreground and background colour indexes plus added modifiers."""

    fg: int | None = None
    bg: int | None = None
    modifiers: Modifier = Modifier.NONE


_U8_RE = re.compile(r"\+?[0-9]+")

_NAMED_COLORS = {
    "bold black": 8,
    "bold red": 9,
    "bold green": 10,
    "bold yellow": 11,
    "bold blue": 12,
    "bold magenta": 13,
    "bold cyan": 14,
    "bold white": 15,
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}


def _parse_u8(text: str) -> int:
    if _U8_RE.fullmatch(text):
        value = int(text)
        if value <= 255:
            return value
    return 0


def _trim_start_matches(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _digit(byte: int) -> int:
    return byte - 48 if 48 <= byte <= 57 else 0


def _checked_index(value: int) -> int:
    if value > 255:
        raise ValueError(f"color index out of range: {value}")
    return value


def parse_style(line: str) -> Style:
    """Parse a description such as ``underline red on blue``."""
    split_at = line.lower().find("on ")
    if split_at < 0:
        split_at = len(line)
    foreground, background = line[:split_at], line[split_at:]
    fg_color, fg_mods = process_color_string(foreground)
    bg_color, bg_mods = process_color_string(background.replace("on ", ""))
    return Style(
        fg=parse_color(fg_color),
        bg=parse_color(bg_color),
        modifiers=fg_mods | bg_mods,
    )


def process_color_string(color_str: str) -> tuple[str, Modifier]:
    """Strip modifier words from a colour description and collect them."""
    color = (
        color_str.replace("grey", "gray")
        .replace("bright ", "")
        .replace("bold ", "")
        .replace("underline ", "")
        .replace("inverse ", "")
    )
    modifiers = Modifier.NONE
    if "underline" in color_str:
        modifiers |= Modifier.UNDERLINED
    if "bold" in color_str:
        modifiers |= Modifier.BOLD
    if "inverse" in color_str:
        modifiers |= Modifier.REVERSED
    return color, modifiers


def parse_color(s: str) -> int | None:
    """Return the 256-colour palette index that a colour name denotes, if any."""
    s = s.strip()
    if "bright color" in s:
        rest = _trim_start_matches(s, "bright ")
        # A shift of a byte by its own width leaves it unchanged.
        return _parse_u8(_trim_start_matches(rest, "color"))
    if "color" in s:
        return _parse_u8(_trim_start_matches(s, "color"))
    if "gray" in s:
        return _checked_index(232 + _parse_u8(_trim_start_matches(s, "gray")))
    if "rgb" in s:
        data = s.encode("utf-8")
        if len(data) < 6:
            raise ValueError(f"rgb color needs three digits: {s!r}")
        red, green, blue = (_digit(b) for b in data[3:6])
        return _checked_index(16 + red * 36 + green * 6 + blue)
    return _NAMED_COLORS.get(s)