from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from genkeys.lexer.tokens import TokenLocation


class ErrorKind(str, Enum):
    UNCLOSED_STRING = "UnclosedString"
    INVALID_NUMPAD_KEY = "InvalidNumpadKey"
    NUMPAD_RANGE = "NumpadRangeError"
    INVALID_CHARACTER_KEY = "InvalidCharacterKey"
    UNKNOWN_COMMAND = "UnknownCommand"
    STRING_AS_COMMAND = "StringAsCommand"
    KEY_COMBINATION_MISSING = "KeyCombinationMissing"
    EXEC_COMMAND_MISSING = "ExecCommandMissing"
    KEY_COMBINATION_NOT_STRING = "KeyCombinationNotString"
    EXEC_COMMAND_NOT_STRING = "ExecCommandNotString"
    EMPTY_KEY_COMBINATION = "EmptyKeyCombination"
    INVALID_LEADING_KEY = "InvalidLeadingKey"
    TOO_MANY_KEYS_FOR_HYPRLAND = "TooManyKeysForHyprland"
    MULTILINE_COMMAND = "MultilineCommand"
    IO = "IOError"
    CONFIG = "ConfigError"
    USAGE = "UsageError"


class GenkeysError(Exception):
    """The single error type raised by every stage of the pipeline.

    Core stages never print or exit. They raise this error with a kind and,
    when the failure points at source text, the location of the offending
    token. The CLI is the only place that renders it and picks an exit code.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        location: "TokenLocation | None" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.location = location

    @property
    def file(self) -> str | None:
        return self.location.file if self.location else None

    @property
    def line(self) -> int | None:
        return self.location.row if self.location else None

    @property
    def column(self) -> int | None:
        return self.location.column if self.location else None

    def __str__(self) -> str:
        if self.location is None:
            return f"ERROR: {self.message}"
        return f"{self.location}: {self.message}"


__all__ = ["ErrorKind", "GenkeysError"]
