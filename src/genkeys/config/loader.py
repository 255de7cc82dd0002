from __future__ import annotations

import json
import os
from pathlib import Path

from genkeys.config.env_loader import ENV_CONFIG_PATH, apply_env_overrides
from genkeys.config.model import GenkeysConfig
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.guidance import build_guidance_message
from genkeys.generators.formats import ConfigFormat

CONFIG_FILENAME = "genkeys.json"
DEFINITIONS_FILENAME = "genkeys.gnks"

_FIELDS = {
    "WriteToFile": ("write_to_file", bool),
    "SwayPath": ("sway_path", str),
    "HyprlandPath": ("hyprland_path", str),
}


def config_dir() -> Path:
    return Path(os.getenv("HOME", "~")).expanduser() / ".config"


def default_config_path() -> Path:
    override = os.getenv(ENV_CONFIG_PATH)
    if override:
        return Path(override)
    return config_dir() / CONFIG_FILENAME


def default_definitions_path() -> Path:
    return config_dir() / DEFINITIONS_FILENAME


def load_config(path: Path | None = None) -> GenkeysConfig:
    config = GenkeysConfig()
    config_path = path if path is not None else default_config_path()
    if config_path.exists():
        _apply_json_config(config, _read_json(config_path), config_path)
    apply_env_overrides(config)
    return config


def output_path(config: GenkeysConfig, fmt: ConfigFormat) -> Path:
    """Path the given format writes to; fails when it was never configured."""
    field, key = {
        "sway": ("sway_path", "SwayPath"),
        "hyprland": ("hyprland_path", "HyprlandPath"),
    }[fmt.value]
    raw = getattr(config, field)
    if not raw.strip():
        raise GenkeysError(
            build_guidance_message(
                what=f"`{key}` not defined in config",
                why="WriteToFile is enabled, so every generated format needs an output path.",
                fix=f"Set `{key}` in {default_config_path()} or disable WriteToFile.",
                example=f'{{"WriteToFile": true, "{key}": "/home/user/.config/{fmt.value}/keys.conf"}}',
            ),
            kind=ErrorKind.CONFIG,
        )
    return Path(raw).expanduser()


def _read_json(path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise GenkeysError(f"Could not open file `{path}`: {err}", kind=ErrorKind.IO) from err
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise GenkeysError(f"Could not parse config `{path}`: {err}", kind=ErrorKind.CONFIG) from err


def _apply_json_config(config: GenkeysConfig, data: object, path: Path) -> None:
    if not isinstance(data, dict):
        raise GenkeysError(f"Could not parse config `{path}`: expected a JSON object", kind=ErrorKind.CONFIG)
    for key, (field, expected) in _FIELDS.items():
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, expected):
            raise GenkeysError(
                f"Could not parse config `{path}`: `{key}` must be a {expected.__name__}",
                kind=ErrorKind.CONFIG,
            )
        setattr(config, field, value)


__all__ = [
    "CONFIG_FILENAME",
    "DEFINITIONS_FILENAME",
    "default_config_path",
    "default_definitions_path",
    "load_config",
    "output_path",
]
