from __future__ import annotations

from typing import Sequence

from genkeys.ast.nodes import Keybinding
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.guidance import build_guidance_message
from genkeys.generators.numpad import numpad_label
from genkeys.generators.quoting import Quoter, ensure_single_line, posix_quote
from genkeys.keys.model import CharacterKey, EnterKey, Key, NumpadKey, PrintKey, ShiftKey, SuperKey

MAX_KEYS = 3


def render_key(key: Key) -> str:
    if isinstance(key, PrintKey):
        return "Print"
    if isinstance(key, SuperKey):
        return "$mainMod"
    if isinstance(key, ShiftKey):
        return "SHIFT"
    if isinstance(key, EnterKey):
        return "Return"
    if isinstance(key, NumpadKey):
        return numpad_label(key)
    if isinstance(key, CharacterKey):
        return key.char
    raise TypeError(f"Unsupported key for hyprland: {key!r}")


def validate(keybindings: Sequence[Keybinding]) -> None:
    ensure_single_line(keybindings)
    for binding in keybindings:
        if len(binding.keys) > MAX_KEYS:
            raise GenkeysError(
                build_guidance_message(
                    what=f"Hyprland keybindings cannot contain more than {MAX_KEYS} keys",
                    why="Hyprland binds take a modifier field and a single trigger key.",
                    fix="Drop a modifier from this binding or generate only the sway config.",
                    example='bind "Super Shift Print" "grim"',
                ),
                kind=ErrorKind.TOO_MANY_KEYS_FOR_HYPRLAND,
                location=binding.location,
            )


def render_line(binding: Keybinding, *, quote: Quoter = posix_quote) -> str:
    # the last key is the trigger; anything before it is a modifier
    *modifiers, trigger = [render_key(key) for key in binding.keys]
    return f"bind = {' '.join(modifiers)}, {trigger}, exec, sh -c {quote(binding.command)}"


def render(keybindings: Sequence[Keybinding], *, quote: Quoter = posix_quote) -> str:
    """Render Hyprland ``bind =`` lines.

    The key-count check runs over the whole batch first, so an invalid
    binding anywhere produces no output at all.
    """
    validate(keybindings)
    return "".join(f"{render_line(binding, quote=quote)}\n" for binding in keybindings)


__all__ = ["MAX_KEYS", "render", "render_key", "render_line", "validate"]
