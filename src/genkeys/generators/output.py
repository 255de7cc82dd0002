from __future__ import annotations

from pathlib import Path
from typing import TextIO

from genkeys.errors.base import ErrorKind, GenkeysError


def write_stream(text: str, stream: TextIO) -> None:
    try:
        stream.write(text)
        stream.flush()
    except (OSError, ValueError) as err:
        raise GenkeysError(f"Could not flush buffer: {err}", kind=ErrorKind.IO) from err


def write_file(text: str, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            write_stream(text, handle)
    except OSError as err:
        raise GenkeysError(f"Could not open file `{path}`: {err}", kind=ErrorKind.IO) from err


__all__ = ["write_file", "write_stream"]
