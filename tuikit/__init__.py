"""State and logic for terminal applications: keys, styles, layout, actions, config and apps."""

__version__ = "0.1.0"

__all__ = [
    "action",
    "components",
    "config",
    "counter",
    "counter_actions",
    "json_editor",
    "keys",
    "layout",
    "stopwatch",
    "style",
    "text_input",
]