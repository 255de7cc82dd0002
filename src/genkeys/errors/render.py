from __future__ import annotations

from genkeys.errors.base import GenkeysError


def format_error(err: GenkeysError, source: str | dict[str, str] | None = None) -> str:
    base = str(err)
    if source is None or err.line is None:
        return base

    source_text = None
    if isinstance(source, dict):
        if err.file is not None:
            source_text = source.get(err.file)
    else:
        source_text = source

    if not source_text:
        return base

    lines = source_text.split("\n")
    line_index = err.line - 1
    if line_index < 0 or line_index >= len(lines):
        return base

    line_text = lines[line_index]
    column = err.column if err.column is not None else 1
    caret_pos = max(1, min(column, len(line_text) + 1))
    caret_line = " " * (caret_pos - 1) + "^"
    return f"{base}\n{line_text}\n{caret_line}"


__all__ = ["format_error"]
