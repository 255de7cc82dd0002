from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from genkeys.keys.model import Key
from genkeys.lexer.tokens import TokenLocation


@dataclass(frozen=True)
class Keybinding:
    keys: Tuple[Key, ...]
    command: str
    location: TokenLocation

    def __post_init__(self) -> None:
        if not self.keys:
            raise ValueError("Keybinding needs at least one key")
        object.__setattr__(self, "keys", tuple(self.keys))


__all__ = ["Keybinding"]
