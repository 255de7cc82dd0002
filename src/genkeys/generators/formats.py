from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from genkeys.ast.nodes import Keybinding
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.generators import hyprland, sway

Renderer = Callable[[Sequence[Keybinding]], str]


class ConfigFormat(str, Enum):
    SWAY = "sway"
    HYPRLAND = "hyprland"
    ALL = "all"

    @classmethod
    def from_value(cls, value: object | None) -> "ConfigFormat":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.ALL
        if isinstance(value, str):
            name = _ALIASES.get(value, value)
            if name in {member.value for member in cls}:
                return cls(name)
        raise GenkeysError(f"Unknown configuration format: `{value}`", kind=ErrorKind.USAGE)

    def targets(self) -> tuple["ConfigFormat", ...]:
        if self is ConfigFormat.ALL:
            return (ConfigFormat.SWAY, ConfigFormat.HYPRLAND)
        return (self,)


_ALIASES = {"i3": "sway"}

RENDERERS: dict[ConfigFormat, Renderer] = {
    ConfigFormat.SWAY: sway.render,
    ConfigFormat.HYPRLAND: hyprland.render,
}


def renderer_for(fmt: ConfigFormat) -> Renderer:
    try:
        return RENDERERS[fmt]
    except KeyError as err:
        raise GenkeysError(f"Saving config format `{fmt.value}` is not implemented", kind=ErrorKind.USAGE) from err


__all__ = ["ConfigFormat", "RENDERERS", "Renderer", "renderer_for"]
