"""Application configuration: keybindings, styles and data locations."""

from __future__ import annotations

import enum
import json
import logging
import os
import subprocess
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import yaml

from .action import Action, action_from_config
from .keys import KeyEvent, parse_key_sequence
from .style import Style, parse_style

__all__ = [
    "Mode",
    "Config",
    "get_data_dir",
    "get_config_dir",
    "git_describe",
    "version",
]

log = logging.getLogger(__name__)

PACKAGE_NAME = "tuikit"
PACKAGE_VERSION = "0.1.0"
PROJECT_NAME = PACKAGE_NAME.upper()
DATA_ENV = f"{PROJECT_NAME}_DATA"
CONFIG_ENV = f"{PROJECT_NAME}_CONFIG"


class Mode(enum.Enum):
    """Application modes that keybindings and styles are grouped by."""

    HOME = "Home"


KeySequence = tuple[KeyEvent, ...]


def get_data_dir() -> Path:
    """Directory for application data, overridable by the TUIKIT_DATA variable."""
    override = os.environ.get(DATA_ENV)
    if override is not None:
        return Path(override)
    return Path(platformdirs.user_data_dir(PACKAGE_NAME, appauthor=False))


def get_config_dir() -> Path:
    """Directory for configuration, overridable by the TUIKIT_CONFIG variable."""
    override = os.environ.get(CONFIG_ENV)
    if override is not None:
        return Path(override)
    return Path(platformdirs.user_config_dir(PACKAGE_NAME, appauthor=False))


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _read_yaml(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        content = yaml.safe_load(handle)
    return {} if content is None else content


def _read_toml(path: Path) -> Any:
    with path.open("rb") as handle:
        return tomllib.load(handle)


# Later files override earlier ones.
_CONFIG_FILES: tuple[tuple[str, Callable[[Path], Any]], ...] = (
    ("config.json", _read_json),
    ("config.yaml", _read_yaml),
    ("config.toml", _read_toml),
)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _mode(name: Any) -> Mode:
    try:
        return Mode(name)
    except ValueError:
        raise ValueError(f"unknown mode: {name!r}") from None


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{what} must be a mapping, got {value!r}")
    return value


def _parse_keybindings(raw: Any) -> dict[Mode, dict[KeySequence, Action]]:
    bindings: dict[Mode, dict[KeySequence, Action]] = {}
    for mode_name, inner in _require_mapping(raw, "keybindings").items():
        bindings[_mode(mode_name)] = {
            parse_key_sequence(key_str): action_from_config(cmd)
            for key_str, cmd in _require_mapping(inner, f"keybindings for {mode_name}").items()
        }
    return bindings


def _parse_styles(raw: Any) -> dict[Mode, dict[str, Style]]:
    styles: dict[Mode, dict[str, Style]] = {}
    for mode_name, inner in _require_mapping(raw, "styles").items():
        parsed: dict[str, Style] = {}
        for name, description in _require_mapping(inner, f"styles for {mode_name}").items():
            if not isinstance(description, str):
                raise ValueError(f"style {name!r} must be a string, got {description!r}")
            parsed[name] = parse_style(description)
        styles[_mode(mode_name)] = parsed
    return styles


@dataclass
class Config:
    """Loaded configuration."""

    data_dir: Path = field(default_factory=Path)
    config_dir: Path = field(default_factory=Path)
    keybindings: dict[Mode, dict[KeySequence, Action]] = field(default_factory=dict)
    styles: dict[Mode, dict[str, Style]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from already-read configuration data."""
        data = _require_mapping(data, "configuration")
        return cls(
            data_dir=Path(data.get("_data_dir", "")),
            config_dir=Path(data.get("_config_dir", "")),
            keybindings=_parse_keybindings(data.get("keybindings", {})),
            styles=_parse_styles(data.get("styles", {})),
        )

    @classmethod
    def load(cls, config_dir: str | os.PathLike | None = None,
             data_dir: str | os.PathLike | None = None) -> Config:
        """Read config.json, config.yaml and config.toml from the config directory."""
        config_path = Path(config_dir) if config_dir is not None else get_config_dir()
        data_path = Path(data_dir) if data_dir is not None else get_data_dir()
        raw: dict[str, Any] = {
            "_data_dir": str(data_path),
            "_config_dir": str(config_path),
        }
        found_config = False
        for name, reader in _CONFIG_FILES:
            path = config_path / name
            if not path.exists():
                continue
            found_config = True
            raw = _deep_merge(raw, _require_mapping(reader(path), str(path)))
        if not found_config:
            log.error("No configuration file found. Application may not behave as expected")
        return cls.from_mapping(raw)

    def merge_defaults(self, defaults: Config) -> None:
        """Fill in bindings and styles that are not set here from the defaults."""
        for mode, default_bindings in defaults.keybindings.items():
            user_bindings = self.keybindings.setdefault(mode, {})
            for key, action in default_bindings.items():
                user_bindings.setdefault(key, action)
        for mode, default_styles in defaults.styles.items():
            user_styles = self.styles.setdefault(mode, {})
            for name, style in default_styles.items():
                user_styles.setdefault(name, style)


def git_describe(pkg_version: str, git_info: str | None) -> str:
    """Combine the package version with the output of ``git describe``."""
    if git_info is None:
        return pkg_version
    if pkg_version in git_info:
        # Drop the 'g' that precedes the commit hash.
        return git_info.replace("g", "")
    return f"v{pkg_version}-{git_info}"


def _read_git_info() -> str | None:
    try:
        result = subprocess.run(
            ["git", "describe", "--always", "--tags", "--long", "--dirty"],
            capture_output=True,
            check=False,
        )
        return result.stdout.decode("utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None


def version(commit_info: str | None = None) -> str:
    """Version text with the commit description and the directories in use."""
    if commit_info is None:
        commit_info = git_describe(PACKAGE_VERSION, _read_git_info())
    return (
        f"{commit_info}\n"
        "\n"
        f"Config directory: {get_config_dir()}\n"
        f"Data directory: {get_data_dir()}"
    )