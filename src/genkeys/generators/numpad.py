from __future__ import annotations

from genkeys.keys.model import NumpadKey

# keypad digits map to their spatial (navigation) names
NUMPAD_LABELS: dict[int, str] = {
    8: "KP_Up",
    2: "KP_Down",
    4: "KP_Left",
    6: "KP_Right",
    5: "KP_Begin",
    7: "KP_Home",
    9: "KP_Prior",
    1: "KP_End",
    3: "KP_Next",
}


def numpad_label(key: NumpadKey) -> str:
    return NUMPAD_LABELS[key.number]


__all__ = ["NUMPAD_LABELS", "numpad_label"]
