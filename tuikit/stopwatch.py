"""A stopwatch that records split times and measures its own frame rate."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import pairwise

from .keys import Key, KeyEvent

__all__ = ["AppState", "Message", "Stopwatch", "format_duration"]

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MILLI = 1_000_000


class AppState(enum.Enum):
    """Whether the stopwatch is stopped, running or about to quit."""

    STOPPED = "stopped"
    RUNNING = "running"
    QUITTING = "quitting"


class Message(enum.Enum):
    """What a key press asks the stopwatch to do."""

    START_OR_SPLIT = "start_or_split"
    STOP = "stop"
    TICK = "tick"
    QUIT = "quit"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as ``MM:SS.mmm``."""
    if seconds < 0:
        raise ValueError(f"duration must not be negative: {seconds}")
    nanos = round(seconds * _NANOS_PER_SECOND)
    whole, rest = divmod(nanos, _NANOS_PER_SECOND)
    millis = rest // _NANOS_PER_MILLI
    return f"{whole // 60:02}:{whole % 60:02}.{millis:03}"


@dataclass
class Stopwatch:
    """Stopwatch state: split instants, run state and frame-rate counters."""

    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    state: AppState = AppState.STOPPED
    splits: list[float] = field(default_factory=list)
    frames: int = 0
    fps: float = 0.0
    start_time: float = field(init=False)

    def __post_init__(self) -> None:
        self.start_time = self.clock()

    def handle_event(self, key_event: KeyEvent | None) -> Message:
        """Map a key press to a message; any other event is a tick."""
        if key_event is None:
            return Message.TICK
        code = key_event.code
        if code == "q":
            return Message.QUIT
        if code == " ":
            return Message.START_OR_SPLIT
        if code == "s" or code is Key.ENTER:
            return Message.STOP
        return Message.TICK

    def update(self, message: Message) -> None:
        """Apply a message to the stopwatch."""
        match message:
            case Message.START_OR_SPLIT:
                self.start_or_split()
            case Message.STOP:
                self.stop()
            case Message.TICK:
                self.tick()
            case Message.QUIT:
                self.quit()

    def start_or_split(self) -> None:
        """Start a stopped stopwatch, or record a split on a running one."""
        if self.state is AppState.STOPPED:
            self._start()
        else:
            self._record_split()

    def stop(self) -> None:
        """Record a final split and stop."""
        self._record_split()
        self.state = AppState.STOPPED

    def tick(self) -> None:
        """Count a frame and refresh the frame rate once a second has passed."""
        self.frames += 1
        now = self.clock()
        elapsed = now - self.start_time
        if elapsed >= 1.0:
            self.fps = self.frames / elapsed
            self.start_time = now
            self.frames = 0

    def quit(self) -> None:
        self.state = AppState.QUITTING

    def _start(self) -> None:
        self.splits.clear()
        self.state = AppState.RUNNING
        self._record_split()

    def _record_split(self) -> None:
        if self.state is not AppState.RUNNING:
            return
        self.splits.append(self.clock())

    def elapsed(self) -> float:
        """Seconds since the start while running; otherwise first to last split."""
        if self.state is AppState.RUNNING:
            if not self.splits:
                return 0.0
            return self.clock() - self.splits[0]
        if not self.splits:
            return 0.0
        return self.splits[-1] - self.splits[0]

    def split_lines(self) -> list[str]:
        """Split lines, newest first, as ``#NN -- split -- total``."""
        start = self.splits[0] if self.splits else self.clock()
        lines = [
            f"#{index + 1:02} -- {format_duration(current - previous)}"
            f" -- {format_duration(current - start)}"
            for index, (previous, current) in enumerate(pairwise(self.splits))
        ]
        lines.reverse()
        return lines