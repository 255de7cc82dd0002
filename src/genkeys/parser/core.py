from __future__ import annotations

from typing import List, Sequence

from genkeys.ast.nodes import Keybinding
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.guidance import build_guidance_message
from genkeys.keys.classifier import classify
from genkeys.keys.model import CharacterKey, EnterKey, Key
from genkeys.lexer.tokens import STRING, WORD, Token

BIND = "bind"


class Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.position = 0

    def parse(self) -> List[Keybinding]:
        keybindings: List[Keybinding] = []
        while self.position < len(self.tokens):
            tok = self._current()
            if tok.kind == STRING:
                raise GenkeysError(
                    "Strings cannot be used as commands",
                    kind=ErrorKind.STRING_AS_COMMAND,
                    location=tok.location,
                )
            if tok.kind == WORD and tok.text == BIND:
                keybindings.append(self._parse_bind())
                continue
            raise GenkeysError(
                build_guidance_message(
                    what=f"Unknown command: `{tok.text}`",
                    why="The only supported command is `bind`.",
                    fix="Start each definition with `bind`.",
                    example='bind "Super Enter" "foot"',
                ),
                kind=ErrorKind.UNKNOWN_COMMAND,
                location=tok.location,
            )
        return keybindings

    def _current(self) -> Token:
        return self.tokens[self.position]

    def _peek(self, offset: int) -> Token | None:
        index = self.position + offset
        if index >= len(self.tokens):
            return None
        return self.tokens[index]

    def _parse_bind(self) -> Keybinding:
        bind_tok = self._current()
        keys_tok = self._peek(1)
        if keys_tok is None:
            raise GenkeysError(
                "Key combination not provided for command `bind`",
                kind=ErrorKind.KEY_COMBINATION_MISSING,
                location=bind_tok.location,
            )
        exec_tok = self._peek(2)
        if exec_tok is None:
            raise GenkeysError(
                "Exec command not provided for command `bind`",
                kind=ErrorKind.EXEC_COMMAND_MISSING,
                location=bind_tok.location,
            )
        if keys_tok.kind != STRING:
            raise GenkeysError(
                "Key combination must be a string",
                kind=ErrorKind.KEY_COMBINATION_NOT_STRING,
                location=keys_tok.location,
            )
        if exec_tok.kind != STRING:
            raise GenkeysError(
                "Exec command must be a string",
                kind=ErrorKind.EXEC_COMMAND_NOT_STRING,
                location=exec_tok.location,
            )

        keys = self._parse_keys(keys_tok)
        self.position += 3
        return Keybinding(keys=tuple(keys), command=exec_tok.text.strip(), location=bind_tok.location)

    def _parse_keys(self, keys_tok: Token) -> List[Key]:
        names = keys_tok.text.split()
        if not names:
            raise GenkeysError(
                "Key combination must have at least one key",
                kind=ErrorKind.EMPTY_KEY_COMBINATION,
                location=keys_tok.location,
            )
        keys = [classify(name, keys_tok.location) for name in names]
        if isinstance(keys[0], (CharacterKey, EnterKey)):
            raise GenkeysError(
                build_guidance_message(
                    what="Key combination cannot start with a character key or `Enter`",
                    why="Character keys and Enter only make sense as the last key of a chord.",
                    fix="Start the combination with Super, Shift, Print or a numpad key.",
                    example=f'bind "Super {names[0]}" "..."',
                ),
                kind=ErrorKind.INVALID_LEADING_KEY,
                location=keys_tok.location,
            )
        return keys


def parse(tokens: Sequence[Token]) -> List[Keybinding]:
    return Parser(tokens).parse()


__all__ = ["BIND", "Parser", "parse"]
