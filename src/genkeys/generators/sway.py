from __future__ import annotations

from typing import Sequence

from genkeys.ast.nodes import Keybinding
from genkeys.generators.numpad import numpad_label
from genkeys.generators.quoting import Quoter, ensure_single_line, posix_quote
from genkeys.keys.model import CharacterKey, EnterKey, Key, NumpadKey, PrintKey, ShiftKey, SuperKey


def render_key(key: Key) -> str:
    if isinstance(key, PrintKey):
        return "Print"
    if isinstance(key, SuperKey):
        return "$mod"
    if isinstance(key, ShiftKey):
        return "Shift"
    if isinstance(key, EnterKey):
        return "Return"
    if isinstance(key, NumpadKey):
        return numpad_label(key)
    if isinstance(key, CharacterKey):
        return key.char
    raise TypeError(f"Unsupported key for sway: {key!r}")


def render_line(binding: Keybinding, *, quote: Quoter = posix_quote) -> str:
    combo = "+".join(render_key(key) for key in binding.keys)
    return f"bindsym {combo} exec sh -c {quote(binding.command)}"


def render(keybindings: Sequence[Keybinding], *, quote: Quoter = posix_quote) -> str:
    """Render sway/i3 ``bindsym`` lines, one per keybinding."""
    ensure_single_line(keybindings)
    return "".join(f"{render_line(binding, quote=quote)}\n" for binding in keybindings)


__all__ = ["render", "render_key", "render_line"]
