"""Counter applications driven by key events and asynchronous actions."""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass, field

from .keys import Key, KeyEvent, KeyModifiers

__all__ = [
    "SaturatingCounterApp",
    "AsyncAction",
    "AsyncCounterApp",
    "update",
    "get_action",
]

_U8_MAX = 255
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass
class SaturatingCounterApp:
    """A byte-sized counter that stops at its limits instead of wrapping."""

    should_quit: bool = False
    counter: int = 0
    ticks: int = field(default=0, compare=False)

    def tick(self) -> None:
        """Record a tick of the terminal; the counter itself is unaffected."""
        self.ticks += 1

    def quit(self) -> None:
        self.should_quit = True

    def increment_counter(self) -> None:
        if self.counter < _U8_MAX:
            self.counter += 1

    def decrement_counter(self) -> None:
        if self.counter > 0:
            self.counter -= 1


def update(app: SaturatingCounterApp, key_event: KeyEvent) -> None:
    """Apply a key press to the counter application."""
    code = key_event.code
    if code is Key.ESC or code == "q":
        app.quit()
    elif code in ("c", "C"):
        if key_event.modifiers == KeyModifiers.CONTROL:
            app.quit()
    elif code is Key.RIGHT or code == "j":
        app.increment_counter()
    elif code is Key.LEFT or code == "k":
        app.decrement_counter()


class AsyncAction(enum.Enum):
    """Actions of the asynchronous counter."""

    TICK = "tick"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    NETWORK_REQUEST_AND_THEN_INCREMENT = "network_request_and_then_increment"
    NETWORK_REQUEST_AND_THEN_DECREMENT = "network_request_and_then_decrement"
    QUIT = "quit"
    RENDER = "render"
    NONE = "none"


_KEY_ACTIONS = {
    "j": AsyncAction.INCREMENT,
    "k": AsyncAction.DECREMENT,
    "J": AsyncAction.NETWORK_REQUEST_AND_THEN_INCREMENT,
    "K": AsyncAction.NETWORK_REQUEST_AND_THEN_DECREMENT,
    "q": AsyncAction.QUIT,
}


def get_action(key_event: KeyEvent) -> AsyncAction:
    """Map a key press to the action it triggers."""
    code = key_event.code
    if isinstance(code, str):
        return _KEY_ACTIONS.get(code, AsyncAction.NONE)
    return AsyncAction.NONE


@dataclass
class AsyncCounterApp:
    """A signed counter whose slow actions complete after a simulated request."""

    action_queue: asyncio.Queue
    counter: int = 0
    should_quit: bool = False
    network_delay: float = 5.0
    _tasks: set = field(default_factory=set, init=False, repr=False, compare=False)

    def _delayed(self, action: AsyncAction) -> asyncio.Task:
        queue = self.action_queue
        delay = self.network_delay

        async def run() -> None:
            await asyncio.sleep(delay)
            queue.put_nowait(action)

        task = asyncio.get_running_loop().create_task(run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def update(self, action: AsyncAction) -> asyncio.Task | None:
        """Apply an action; network requests return the task that completes them."""
        match action:
            case AsyncAction.INCREMENT:
                if self.counter >= _I64_MAX:
                    raise OverflowError("attempt to add with overflow")
                self.counter += 1
            case AsyncAction.DECREMENT:
                if self.counter <= _I64_MIN:
                    raise OverflowError("attempt to subtract with overflow")
                self.counter -= 1
            case AsyncAction.NETWORK_REQUEST_AND_THEN_INCREMENT:
                return self._delayed(AsyncAction.INCREMENT)
            case AsyncAction.NETWORK_REQUEST_AND_THEN_DECREMENT:
                return self._delayed(AsyncAction.DECREMENT)
            case AsyncAction.QUIT:
                self.should_quit = True
        return None