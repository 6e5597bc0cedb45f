"""Counter applications that change a byte-sized counter with the arrow keys."""

from __future__ import annotations

from dataclasses import dataclass

from .keys import Key, KeyEvent

__all__ = ["CounterError", "BasicCounterApp", "GuardedCounterApp"]

_U8_MAX = 255
_GUARD_LIMIT = 2


class CounterError(Exception):
    """Raised when the counter leaves the range the application allows."""


def _checked_add(value: int) -> int:
    if value >= _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return value + 1


def _checked_sub(value: int) -> int:
    if value <= 0:
        raise OverflowError("attempt to subtract with overflow")
    return value - 1


@dataclass
class BasicCounterApp:
    """A counter moved by Left and Right; ``q`` asks the application to exit."""

    counter: int = 0
    exit: bool = False

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Apply a key press to the application state."""
        code = key_event.code
        if code == "q":
            self.quit()
        elif code is Key.LEFT:
            self.decrement_counter()
        elif code is Key.RIGHT:
            self.increment_counter()

    def quit(self) -> None:
        self.exit = True

    def increment_counter(self) -> None:
        """Add one; going past the byte range raises OverflowError."""
        self.counter = _checked_add(self.counter)

    def decrement_counter(self) -> None:
        """Subtract one; going below zero raises OverflowError."""
        self.counter = _checked_sub(self.counter)


@dataclass
class GuardedCounterApp:
    """Like the basic counter, but reports a counter above two as an error."""

    counter: int = 0
    exit: bool = False

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Apply a key press; CounterError propagates from the counter methods."""
        code = key_event.code
        if code == "q":
            self.quit()
        elif code is Key.LEFT:
            self.decrement_counter()
        elif code is Key.RIGHT:
            self.increment_counter()

    def quit(self) -> None:
        self.exit = True

    def decrement_counter(self) -> None:
        """Subtract one; going below zero raises OverflowError."""
        self.counter = _checked_sub(self.counter)

    def increment_counter(self) -> None:
        """Add one and raise CounterError once the counter exceeds two."""
        self.counter = _checked_add(self.counter)
        if self.counter > _GUARD_LIMIT:
            raise CounterError("counter overflow")