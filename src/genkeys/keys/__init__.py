from genkeys.keys.classifier import classify
from genkeys.keys.model import (
    ENTER,
    PRINT,
    SHIFT,
    SUPER,
    CharacterKey,
    EnterKey,
    Key,
    NumpadKey,
    PrintKey,
    ShiftKey,
    SuperKey,
)

__all__ = [
    "classify",
    "CharacterKey",
    "EnterKey",
    "Key",
    "NumpadKey",
    "PrintKey",
    "ShiftKey",
    "SuperKey",
    "ENTER",
    "PRINT",
    "SHIFT",
    "SUPER",
]
