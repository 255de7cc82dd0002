from __future__ import annotations

import os

from genkeys.config.model import GenkeysConfig
from genkeys.errors.base import ErrorKind, GenkeysError

ENV_CONFIG_PATH = "GENKEYS_CONFIG"
ENV_WRITE_TO_FILE = "GENKEYS_WRITE_TO_FILE"
ENV_SWAY_PATH = "GENKEYS_SWAY_PATH"
ENV_HYPRLAND_PATH = "GENKEYS_HYPRLAND_PATH"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def apply_env_overrides(config: GenkeysConfig) -> None:
    write_to_file = os.getenv(ENV_WRITE_TO_FILE)
    if write_to_file:
        config.write_to_file = _parse_bool(ENV_WRITE_TO_FILE, write_to_file)
    sway_path = os.getenv(ENV_SWAY_PATH)
    if sway_path:
        config.sway_path = sway_path
    hyprland_path = os.getenv(ENV_HYPRLAND_PATH)
    if hyprland_path:
        config.hyprland_path = hyprland_path


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise GenkeysError(f"{name} must be one of 1/0, true/false, yes/no, on/off", kind=ErrorKind.CONFIG)


__all__ = [
    "apply_env_overrides",
    "ENV_CONFIG_PATH",
    "ENV_HYPRLAND_PATH",
    "ENV_SWAY_PATH",
    "ENV_WRITE_TO_FILE",
]
