# tuikit

Building blocks for terminal applications: key-binding notation, colour and
style strings, rectangle layout, typed actions, a layered configuration
loader, and the state machines behind several small interactive apps (two
counters, a text input box, a JSON key/value editor and a stopwatch).

Everything here is plain state and logic, so each piece can be driven and
tested directly from Python.

## Installation

Install the package from its source directory with any standard Python
installer. It needs Python 3.11 or later and depends on `platformdirs` and
`pyyaml`.

## Key bindings (`tuikit.keys`)

Key sequences are written the way they appear in configuration files:

```python
from tuikit.keys import parse_key_event, parse_key_sequence, key_event_to_string

event = parse_key_event("ctrl-alt-a")
print(key_event_to_string(event))        # ctrl-alt-a

sequence = parse_key_sequence("<ctrl-d><q>")
print(len(sequence))                     # 2
```

A `KeyEvent` holds a code (a `Key` member, a `FunctionKey`, or a
one-character string) and `KeyModifiers` flags. Modifier prefixes (`ctrl-`,
`alt-`, `shift-`) and key names are case-insensitive; with `shift-` a
character key is upper-cased, and `backtab` always carries SHIFT. Named keys
include `enter`, `esc`, `tab`, `backspace`, `delete`, `insert`, the arrows,
`home`, `end`, `pageup`, `pagedown`, `space`, `hyphen`/`minus` and `f1`–`f12`.
Input that cannot be parsed raises `ValueError`.

## Styles (`tuikit.style`)

```python
from tuikit.style import parse_style

style = parse_style("underline red on blue")
print(style.fg, style.bg)                # 1 4
```

A style string holds a foreground, an optional `on <background>`, and the
words `bold`, `underline` and `inverse`, which become `Modifier` flags on the
resulting `Style`. `parse_color` maps names to 256-colour palette indexes:
plain names (`red` is 1), `bold` names (`bold red` is 9), `colorN`, greys
(`grayN` is 232 + N) and cube entries (`rgb123` is 16 + 1·36 + 2·6 + 3 = 67 —
note that digits are read from the fixed positions 3–5 of the string).
Unknown names give `None`.

## Layout (`tuikit.layout`)

```python
from tuikit.layout import Rect, Percentage, center, centered_rect

area = Rect(0, 0, 100, 100)
print(center(area, Percentage(20), Percentage(30)))
# Rect(x=40, y=35, width=20, height=30)

popup = centered_rect(60, 25, area)
```

`split(area, constraints, vertical)` divides a rectangle into pieces sized by
`Length` and `Percentage` constraints; space left over goes to the last
piece. `Rect` offers `right()`, `bottom()` and `inner(horizontal, vertical)`.

## Actions (`tuikit.action`)

An `Action` pairs an `ActionKind` with the arguments that kind carries
(`Resize` takes two sizes, `Increment`/`Decrement` a non-negative count,
`Error`/`CompleteInput` a string). Wrong arguments raise `ValueError`.
`action_from_config` reads the configuration form — a plain name such as
`"Quit"`, or a one-entry mapping such as `{"Increment": 3}` — and
`Action.to_config()` writes it back.

## Configuration (`tuikit.config`)

`Config.load(config_dir, data_dir)` reads `config.json`, then `config.yaml`,
then `config.toml` from the configuration directory (later files override
earlier ones) and parses their `keybindings` and `styles` tables, grouped by
`Mode`. If none of the files exists an error is logged and an empty
configuration is returned. `Config.from_mapping(data)` builds a configuration
from data already read, and `config.merge_defaults(defaults)` fills in any
binding or style that is missing from another `Config`.

```toml
[keybindings.Home]
"<q>" = "Quit"
"<ctrl-c>" = "Quit"

[styles.Home]
title = "bold cyan on black"
```

`get_config_dir()` and `get_data_dir()` give the per-user directories; the
environment variables `TUIKIT_CONFIG` and `TUIKIT_DATA` override them.
`git_describe(pkg_version, git_info)` combines a version with `git describe`
output, and `version(commit_info)` builds the version banner, running
`git describe` itself when no commit text is given.

## Apps

Each app is a state object that takes key events and updates itself:

- `tuikit.counter.BasicCounterApp` and `GuardedCounterApp`: Left and Right
  change a byte-sized counter (leaving 0–255 raises `OverflowError`), `q`
  sets `exit`. The guarded app raises `CounterError("counter overflow")`
  once the counter passes 2.
- `tuikit.counter_actions.SaturatingCounterApp` with `update(app, key_event)`:
  a counter that stops at 0 and 255; `j`/Right and `k`/Left move it, and
  `q`, Esc or Ctrl-C quit.
- `tuikit.counter_actions.AsyncCounterApp` with `get_action(key_event)`:
  `AsyncAction` values change a signed counter; the network-request actions
  schedule an increment or decrement on the action queue after
  `network_delay` seconds (run inside an asyncio loop).
- `tuikit.text_input.InputApp`: a single-line editor with a cursor and a
  message history; `handle_key` returns `True` when the user asks to quit.
- `tuikit.json_editor.JsonEditor`: collects key/value pairs and renders them
  with `to_json()`; `handle_key` returns `True` or `False` on exit (print or
  not) and `None` otherwise.
- `tuikit.stopwatch.Stopwatch`: start, split and stop, with
  `split_lines()` and `format_duration(seconds)` giving `MM:SS.mmm` strings.
  A custom `clock` may be passed in.
- `tuikit.components.Home` and `FpsCounter`: `Component` subclasses that
  react to `Action` values; `FpsCounter.status_line()` gives the frame-rate
  text.

```python
from tuikit.json_editor import JsonEditor

editor = JsonEditor()
editor.key_input = "name"
editor.value_input = "tuikit"
editor.save_key_value()
print(editor.to_json())                  # {"name":"tuikit"}
```

## What this package does not do

It does not draw anything or talk to a terminal: there is no screen
rendering, no raw-mode handling, no terminal event reader and no main loop.
It installs no command. An application is expected to read key events
itself, feed them to these objects and draw their state with a terminal
library of its choice.

## Tests

The test suite uses pytest and pytest-asyncio, available through the `test`
extra.