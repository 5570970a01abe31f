"""JSON color configuration loading and validation.

The config file maps extensions, file types, and mode bits to color names::

    {
      "bright": true,
      "classify": false,
      "extension": {"py": "yellow", "tar": "red"},
      "filetype": {"directory": "blue", "symlink": "cyan"},
      "mode": {"exec": "green", "sticky": "bg blue"}
    }

A missing file yields default settings. Any invalid value is fatal: every
problem is collected and reported together through ``ConfigError``.
"""

from __future__ import annotations

import json
from pathlib import Path

from .colors import COLOR_BY_NAME, FILEMODE_BY_NAME, FILETYPE_BY_NAME
from .entry import EntryKind, ModeFlag
from .settings import Settings, build_color_table

CONFIG_PATH = Path.home() / ".config" / "dirlist.json"


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("\n".join(problems))
        self.problems = list(problems)


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the raw JSON config object.

    Returns an empty dict when the file does not exist. Unreadable files,
    malformed JSON, and non-object documents raise ``ConfigError``.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigError([f"{config_path}: failed to open: {exc.strerror or exc}"]) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError([f"{config_path}: syntax error in JSON: {exc}"]) from exc
    if not isinstance(data, dict):
        raise ConfigError([f"{config_path}: top level should be a map"])
    return data


def _load_bool(data: dict[str, object], key: str, source: Path, problems: list[str]) -> bool:
    value = data.get(key, False)
    if isinstance(value, bool):
        return value
    problems.append(f"{source}: '{key}' should be a boolean: true or false")
    return False


def _load_color_map(
    data: dict[str, object],
    key: str,
    names: dict[str, object] | None,
    source: Path,
    problems: list[str],
) -> dict[object, int]:
    """Validate one ``{"name": "color"}`` section.

    When ``names`` is given, keys are translated through it and unknown keys
    are reported; otherwise keys are used lowercased as-is.
    """
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        problems.append(f"{source}: '{key}' should be a map: {{\"{key}\": \"color\"}}")
        return {}

    result: dict[object, int] = {}
    for raw_key, raw_color in value.items():
        if names is not None:
            if raw_key not in names:
                problems.append(f"{source}: invalid {key} name: '{raw_key}'")
                continue
            table_key: object = names[raw_key]
        else:
            table_key = raw_key.lower()

        if not isinstance(raw_color, str):
            problems.append(f"{source}: invalid color string in map '{key}'")
            continue
        color = COLOR_BY_NAME.get(raw_color)
        if color is None:
            problems.append(f"{source}: invalid color name: '{raw_color}'")
            continue
        result[table_key] = color
    return result


def settings_from_config(data: dict[str, object], source: Path | None = None) -> Settings:
    """Convert a raw config object into ``Settings``; raises ``ConfigError``."""
    source = CONFIG_PATH if source is None else source
    problems: list[str] = []

    bold = _load_bool(data, "bright", source, problems)
    classify = _load_bool(data, "classify", source, problems)
    by_extension = _load_color_map(data, "extension", None, source, problems)
    by_filetype = _load_color_map(data, "filetype", FILETYPE_BY_NAME, source, problems)
    by_mode = _load_color_map(data, "mode", FILEMODE_BY_NAME, source, problems)

    if problems:
        raise ConfigError(problems)

    return Settings(
        bold=bold,
        classify=classify,
        color_by_extension={str(ext): color for ext, color in by_extension.items()},
        color_by_filetype=build_color_table(len(EntryKind), by_filetype),
        color_by_mode=build_color_table(len(ModeFlag), by_mode),
    )


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate the config file into ``Settings``."""
    config_path = CONFIG_PATH if path is None else path
    return settings_from_config(load_config(config_path), config_path)
