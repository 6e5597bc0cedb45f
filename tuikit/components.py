"""Screen components: the component protocol, an FPS counter and the home view."""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .action import Action, ActionKind
from .keys import Key, KeyEvent, KeyModifiers

__all__ = ["Component", "FpsCounter", "HomeMode", "Home"]

log = logging.getLogger(__name__)

_USIZE_MAX = 2**64 - 1


class Component:
    """Base for parts of the interface that react to keys and actions."""

    def register_action_handler(self, queue: asyncio.Queue) -> None:
        """Receive the queue that actions may be sent on."""
        return None

    def handle_key_events(self, key: KeyEvent) -> Action | None:
        """React to a key press; may return an action to dispatch."""
        return None

    def update(self, action: Action) -> Action | None:
        """React to an action; may return a follow-up action."""
        return None


@dataclass
class FpsCounter(Component):
    """Measures how often the application ticks and renders per second."""

    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    app_frames: int = field(default=0, init=False)
    app_fps: float = field(default=0.0, init=False)
    render_frames: int = field(default=0, init=False)
    render_fps: float = field(default=0.0, init=False)
    app_start_time: float = field(init=False)
    render_start_time: float = field(init=False)

    def __post_init__(self) -> None:
        self.app_start_time = self.clock()
        self.render_start_time = self.clock()

    def app_tick(self) -> None:
        """Count one application tick."""
        self.app_frames += 1
        now = self.clock()
        elapsed = now - self.app_start_time
        if elapsed >= 1.0:
            self.app_fps = self.app_frames / elapsed
            self.app_start_time = now
            self.app_frames = 0

    def render_tick(self) -> None:
        """Count one rendered frame."""
        self.render_frames += 1
        now = self.clock()
        elapsed = now - self.render_start_time
        if elapsed >= 1.0:
            self.render_fps = self.render_frames / elapsed
            self.render_start_time = now
            self.render_frames = 0

    def update(self, action: Action) -> Action | None:
        if action.kind is ActionKind.TICK:
            self.app_tick()
        if action.kind is ActionKind.RENDER:
            self.render_tick()
        return None

    def status_line(self) -> str:
        """The text shown in the corner of the screen."""
        return f"{self.app_fps:.2f} fps (app) {self.render_fps:.2f} fps (render)"


class HomeMode(enum.Enum):
    """Input modes of the home view."""

    NORMAL = "normal"
    INSERT = "insert"
    PROCESSING = "processing"


@dataclass
class Home(Component):
    """The main view: a counter, tick counts and lines of entered text."""

    show_help: bool = False
    counter: int = 0
    app_ticker: int = 0
    render_ticker: int = 0
    mode: HomeMode = HomeMode.NORMAL
    input: str = ""
    cursor: int = 0
    action_queue: asyncio.Queue | None = field(default=None, repr=False, compare=False)
    keymap: dict[KeyEvent, Action] = field(default_factory=dict)
    text: list[str] = field(default_factory=list)
    last_events: list[KeyEvent] = field(default_factory=list)
    schedule_delay: float = 1.0
    _tasks: set = field(default_factory=set, init=False, repr=False, compare=False)

    def register_action_handler(self, queue: asyncio.Queue) -> None:
        self.action_queue = queue

    def tick(self) -> None:
        log.info("Tick")
        self.app_ticker = min(self.app_ticker + 1, _USIZE_MAX)
        self.last_events.clear()

    def render_tick(self) -> None:
        log.debug("Render Tick")
        self.render_ticker = min(self.render_ticker + 1, _USIZE_MAX)

    def add(self, s: str) -> None:
        self.text.append(s)

    def increment(self, i: int) -> None:
        self.counter = min(self.counter + i, _USIZE_MAX)

    def decrement(self, i: int) -> None:
        self.counter = max(self.counter - i, 0)

    def schedule_increment(self, i: int) -> asyncio.Task:
        """After a delay, send an increment bracketed by processing actions."""
        return self._schedule(Action(ActionKind.INCREMENT, (i,)))

    def schedule_decrement(self, i: int) -> asyncio.Task:
        """After a delay, send a decrement bracketed by processing actions."""
        return self._schedule(Action(ActionKind.DECREMENT, (i,)))

    def _schedule(self, action: Action) -> asyncio.Task:
        queue = self.action_queue
        if queue is None:
            raise RuntimeError("no action handler registered")
        delay = self.schedule_delay

        async def run() -> None:
            queue.put_nowait(Action(ActionKind.ENTER_PROCESSING))
            await asyncio.sleep(delay)
            queue.put_nowait(action)
            queue.put_nowait(Action(ActionKind.EXIT_PROCESSING))

        task = asyncio.get_running_loop().create_task(run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _edit_input(self, key: KeyEvent) -> None:
        code = key.code
        if isinstance(code, str):
            if key.modifiers & (KeyModifiers.CONTROL | KeyModifiers.ALT):
                return
            self.input = self.input[: self.cursor] + code + self.input[self.cursor:]
            self.cursor += 1
        elif code is Key.BACKSPACE:
            if self.cursor > 0:
                self.input = self.input[: self.cursor - 1] + self.input[self.cursor:]
                self.cursor -= 1
        elif code is Key.DELETE:
            self.input = self.input[: self.cursor] + self.input[self.cursor + 1:]
        elif code is Key.LEFT:
            self.cursor = max(self.cursor - 1, 0)
        elif code is Key.RIGHT:
            self.cursor = min(self.cursor + 1, len(self.input))
        elif code is Key.HOME:
            self.cursor = 0
        elif code is Key.END:
            self.cursor = len(self.input)

    def handle_key_events(self, key: KeyEvent) -> Action | None:
        self.last_events.append(key)
        if self.mode is not HomeMode.INSERT:
            return None
        if key.code is Key.ESC:
            return Action(ActionKind.ENTER_NORMAL)
        if key.code is Key.ENTER:
            if self.action_queue is not None:
                try:
                    self.action_queue.put_nowait(
                        Action(ActionKind.COMPLETE_INPUT, (self.input,))
                    )
                except asyncio.QueueFull as exc:
                    log.error("Failed to send action: %r", exc)
            return Action(ActionKind.ENTER_NORMAL)
        self._edit_input(key)
        return Action(ActionKind.UPDATE)

    def update(self, action: Action) -> Action | None:
        match action.kind:
            case ActionKind.TICK:
                self.tick()
            case ActionKind.RENDER:
                self.render_tick()
            case ActionKind.TOGGLE_SHOW_HELP:
                self.show_help = not self.show_help
            case ActionKind.SCHEDULE_INCREMENT:
                self.schedule_increment(1)
            case ActionKind.SCHEDULE_DECREMENT:
                self.schedule_decrement(1)
            case ActionKind.INCREMENT:
                self.increment(action.args[0])
            case ActionKind.DECREMENT:
                self.decrement(action.args[0])
            case ActionKind.COMPLETE_INPUT:
                self.add(action.args[0])
            case ActionKind.ENTER_NORMAL:
                self.mode = HomeMode.NORMAL
            case ActionKind.ENTER_INSERT:
                self.mode = HomeMode.INSERT
            case ActionKind.ENTER_PROCESSING:
                self.mode = HomeMode.PROCESSING
            case ActionKind.EXIT_PROCESSING:
                self.mode = HomeMode.NORMAL
        return None