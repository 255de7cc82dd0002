from __future__ import annotations

from dataclasses import dataclass

WORD = "WORD"
STRING = "STRING"


@dataclass(frozen=True)
class TokenLocation:
    file: str
    row: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.row}:{self.column}"


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    location: TokenLocation

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Token({self.kind}, {self.text!r}, {self.location})"
