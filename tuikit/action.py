"""Application actions and their configuration form."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["ActionKind", "Action", "action_from_config"]


class ActionKind(enum.Enum):
    """The kinds of action; the value is the name used in configuration."""

    TICK = "Tick"
    RENDER = "Render"
    RESIZE = "Resize"
    SUSPEND = "Suspend"
    RESUME = "Resume"
    QUIT = "Quit"
    REFRESH = "Refresh"
    ERROR = "Error"
    HELP = "Help"
    TOGGLE_SHOW_HELP = "ToggleShowHelp"
    SCHEDULE_INCREMENT = "ScheduleIncrement"
    SCHEDULE_DECREMENT = "ScheduleDecrement"
    INCREMENT = "Increment"
    DECREMENT = "Decrement"
    COMPLETE_INPUT = "CompleteInput"
    ENTER_NORMAL = "EnterNormal"
    ENTER_INSERT = "EnterInsert"
    ENTER_PROCESSING = "EnterProcessing"
    EXIT_PROCESSING = "ExitProcessing"
    UPDATE = "Update"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _u16(value: Any) -> bool:
    return _is_int(value) and 0 <= value <= 0xFFFF


def _usize(value: Any) -> bool:
    return _is_int(value) and value >= 0


def _text(value: Any) -> bool:
    return isinstance(value, str)


_PAYLOADS: dict[ActionKind, tuple[Callable[[Any], bool], ...]] = {
    ActionKind.RESIZE: (_u16, _u16),
    ActionKind.ERROR: (_text,),
    ActionKind.INCREMENT: (_usize,),
    ActionKind.DECREMENT: (_usize,),
    ActionKind.COMPLETE_INPUT: (_text,),
}


@dataclass(frozen=True)
class Action:
    """An action with the arguments its kind carries."""

    kind: ActionKind
    args: tuple = ()

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ActionKind):
            raise TypeError(f"not an action kind: {self.kind!r}")
        args = tuple(self.args)
        checks = _PAYLOADS.get(self.kind, ())
        if len(args) != len(checks):
            raise ValueError(
                f"{self.kind.value} takes {len(checks)} argument(s), got {len(args)}"
            )
        for check, arg in zip(checks, args):
            if not check(arg):
                raise ValueError(f"invalid argument for {self.kind.value}: {arg!r}")
        object.__setattr__(self, "args", args)

    def __str__(self) -> str:
        return self.kind.value

    def to_config(self) -> str | dict[str, Any]:
        """Return the configuration form that action_from_config reads."""
        if not self.args:
            return self.kind.value
        if len(self.args) == 1:
            return {self.kind.value: self.args[0]}
        return {self.kind.value: list(self.args)}


def _kind(name: Any) -> ActionKind:
    try:
        return ActionKind(name)
    except ValueError:
        raise ValueError(f"unknown action: {name!r}") from None


def action_from_config(value: Any) -> Action:
    """Build an action from its configuration form.

    Actions without arguments are plain names; others are a one-entry mapping
    from name to the argument, or to a list of arguments.
    """
    if isinstance(value, str):
        kind = _kind(value)
        if kind in _PAYLOADS:
            raise ValueError(f"{value} needs arguments")
        return Action(kind)
    if isinstance(value, dict) and len(value) == 1:
        ((name, payload),) = value.items()
        kind = _kind(name)
        arity = len(_PAYLOADS.get(kind, ()))
        if arity == 0:
            if payload is not None:
                raise ValueError(f"{name} takes no arguments")
            return Action(kind)
        if arity == 1:
            return Action(kind, (payload,))
        if not isinstance(payload, (list, tuple)):
            raise ValueError(f"{name} needs a list of {arity} arguments")
        return Action(kind, tuple(payload))
    raise ValueError(f"cannot read an action from {value!r}")