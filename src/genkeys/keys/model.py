from __future__ import annotations

from dataclasses import dataclass
from typing import Union

NUMPAD_MIN = 1
NUMPAD_MAX = 9


@dataclass(frozen=True)
class PrintKey:
    pass


@dataclass(frozen=True)
class SuperKey:
    pass


@dataclass(frozen=True)
class ShiftKey:
    pass


@dataclass(frozen=True)
class EnterKey:
    pass


@dataclass(frozen=True)
class NumpadKey:
    number: int

    def __post_init__(self) -> None:
        if not NUMPAD_MIN <= self.number <= NUMPAD_MAX:
            raise ValueError(f"Numpad key out of range: {self.number}")


@dataclass(frozen=True)
class CharacterKey:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Character key must be a single character: {self.char!r}")
        upper = self.char.upper()
        # some characters (e.g. "ß") upper-case to more than one
        if len(upper) == 1:
            object.__setattr__(self, "char", upper)


Key = Union[PrintKey, SuperKey, ShiftKey, EnterKey, NumpadKey, CharacterKey]

PRINT = PrintKey()
SUPER = SuperKey()
SHIFT = ShiftKey()
ENTER = EnterKey()


__all__ = [
    "CharacterKey",
    "EnterKey",
    "Key",
    "NUMPAD_MAX",
    "NUMPAD_MIN",
    "NumpadKey",
    "PrintKey",
    "ShiftKey",
    "SuperKey",
    "ENTER",
    "PRINT",
    "SHIFT",
    "SUPER",
]
