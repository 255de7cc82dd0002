from __future__ import annotations

from typing import List

from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.guidance import build_guidance_message
from genkeys.lexer.tokens import STRING, WORD, Token, TokenLocation


class Lexer:
    """Row/column-aware lexer for keybinding definition files.

    Produces WORD tokens (runs of non-whitespace, non-quote characters) and
    STRING tokens (raw text between double quotes, no escapes). Every token
    carries the location of its first character; for strings that is the
    opening quote.
    """

    def __init__(self, file_name: str, source: str) -> None:
        self.file_name = file_name
        self.source = source
        self.row = 1
        self.column = 1

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        word: list[str] = []
        word_start: TokenLocation | None = None
        i = 0
        while i < len(self.source):
            ch = self.source[i]
            if ch.isspace():
                if word:
                    tokens.append(Token(WORD, "".join(word), word_start))
                    word = []
                self._advance(ch)
                i += 1
                continue
            if ch == '"':
                if word:
                    tokens.append(Token(WORD, "".join(word), word_start))
                    word = []
                token, i = self._read_string(i)
                tokens.append(token)
                continue
            if not word:
                word_start = self._location()
            word.append(ch)
            self._advance(ch)
            i += 1
        if word:
            tokens.append(Token(WORD, "".join(word), word_start))
        return tokens

    def _read_string(self, start: int) -> tuple[Token, int]:
        assert self.source[start] == '"'
        start_location = self._location()
        self._advance('"')
        chars: list[str] = []
        i = start + 1
        while i < len(self.source):
            ch = self.source[i]
            self._advance(ch)
            if ch == '"':
                return Token(STRING, "".join(chars), start_location), i + 1
            chars.append(ch)
            i += 1
        raise GenkeysError(
            build_guidance_message(
                what="Unclosed string",
                why="Strings run from one double quote to the next and cannot be escaped.",
                fix='Add the closing " for this string.',
                example='bind "Super Enter" "foot"',
            ),
            kind=ErrorKind.UNCLOSED_STRING,
            location=start_location,
        )

    def _location(self) -> TokenLocation:
        return TokenLocation(self.file_name, self.row, self.column)

    def _advance(self, ch: str) -> None:
        if ch == "\n":
            self.row += 1
            self.column = 1
        else:
            self.column += 1


def lex(file_name: str, source: str) -> List[Token]:
    return Lexer(file_name, source).tokenize()


__all__ = ["Lexer", "lex"]
