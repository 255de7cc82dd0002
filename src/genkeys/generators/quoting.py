from __future__ import annotations

from typing import Callable, Sequence

from genkeys.ast.nodes import Keybinding
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.guidance import build_guidance_message

Quoter = Callable[[str], str]

LINE_BREAKS = ("\n", "\r")


def posix_quote(text: str) -> str:
    """Wrap text in single quotes so any shell reads it back verbatim.

    Unlike ``shlex.quote`` this always quotes, so generated lines keep one
    stable shape (``sh -c 'foo'``) whatever the command looks like.
    """
    return "'" + text.replace("'", "'\"'\"'") + "'"


def ensure_single_line(keybindings: Sequence[Keybinding]) -> None:
    # config formats end a binding at the line break, quoted or not
    for binding in keybindings:
        if any(brk in binding.command for brk in LINE_BREAKS):
            raise GenkeysError(
                build_guidance_message(
                    what="Exec command cannot span several lines",
                    why="Each keybinding is written as a single config line.",
                    fix="Join the commands with `;` or `&&` on one line.",
                    example='bind "Super R" "notify-send reload; swaymsg reload"',
                ),
                kind=ErrorKind.MULTILINE_COMMAND,
                location=binding.location,
            )


__all__ = ["LINE_BREAKS", "Quoter", "ensure_single_line", "posix_quote"]
