from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GenkeysConfig:
    write_to_file: bool = False
    sway_path: str = ""
    hyprland_path: str = ""


__all__ = ["GenkeysConfig"]
