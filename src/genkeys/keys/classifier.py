from __future__ import annotations

from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.guidance import build_guidance_message
from genkeys.keys.model import (
    ENTER,
    NUMPAD_MAX,
    NUMPAD_MIN,
    PRINT,
    SHIFT,
    SUPER,
    CharacterKey,
    Key,
    NumpadKey,
)
from genkeys.lexer.tokens import TokenLocation

NUMPAD_PREFIX = "N_"

_NAMED_KEYS: dict[str, Key] = {
    "Print": PRINT,
    "Super": SUPER,
    "Shift": SHIFT,
    "Enter": ENTER,
}


def classify(text: str, location: TokenLocation) -> Key:
    named = _NAMED_KEYS.get(text)
    if named is not None:
        return named
    if text.startswith(NUMPAD_PREFIX):
        return _classify_numpad(text, location)
    if len(text) != 1:
        raise GenkeysError(
            build_guidance_message(
                what=f"Invalid character key `{text}`",
                why="Keys are Print, Super, Shift, Enter, N_1..N_9 or a single character.",
                fix="Split the keys with spaces or use one of the named keys.",
                example='bind "Super Shift Q" "swaymsg kill"',
            ),
            kind=ErrorKind.INVALID_CHARACTER_KEY,
            location=location,
        )
    return CharacterKey(text)


def _classify_numpad(text: str, location: TokenLocation) -> NumpadKey:
    digits = text[len(NUMPAD_PREFIX):]
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise GenkeysError(
            f"Invalid `{NUMPAD_PREFIX}` key `{text}`",
            kind=ErrorKind.INVALID_NUMPAD_KEY,
            location=location,
        )
    number = int(digits)
    if not NUMPAD_MIN <= number <= NUMPAD_MAX:
        raise GenkeysError(
            f"Keypads have only 9 keys, got `{text}`",
            kind=ErrorKind.NUMPAD_RANGE,
            location=location,
        )
    return NumpadKey(number)


__all__ = ["classify", "NUMPAD_PREFIX"]
