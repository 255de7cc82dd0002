from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, TextIO

from genkeys.ast.nodes import Keybinding
from genkeys.config.loader import output_path
from genkeys.config.model import GenkeysConfig
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.generators.formats import ConfigFormat, renderer_for
from genkeys.generators.output import write_file, write_stream
from genkeys.lexer.lexer import lex
from genkeys.parser.core import parse


def compile_source(file_name: str, source: str) -> List[Keybinding]:
    return parse(lex(file_name, source))


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as err:
        raise GenkeysError(f"Could not open file `{path}`: {err}", kind=ErrorKind.IO) from err
    except UnicodeDecodeError as err:
        raise GenkeysError(f"File `{path}` is not valid UTF-8: {err}", kind=ErrorKind.IO) from err


def compile_file(path: Path) -> List[Keybinding]:
    return compile_source(str(path), read_source(path))


def render_format(fmt: ConfigFormat, keybindings: Sequence[Keybinding]) -> str:
    return renderer_for(fmt)(keybindings)


def emit(
    fmt: ConfigFormat,
    keybindings: Sequence[Keybinding],
    config: GenkeysConfig,
    stream: TextIO,
) -> Path | None:
    """Render one format and send it to its configured destination.

    Rendering finishes before any destination is opened, so a failing
    generator leaves existing output files untouched. Returns the written
    path, or None when the text went to ``stream``.
    """
    text = render_format(fmt, keybindings)
    if config.write_to_file:
        path = output_path(config, fmt)
        write_file(text, path)
        return path
    write_stream(text, stream)
    return None


def run(
    fmt: ConfigFormat,
    file_name: str,
    source: str,
    config: GenkeysConfig,
    stream: TextIO,
) -> list[tuple[ConfigFormat, Path | None]]:
    keybindings = compile_source(file_name, source)
    return [(target, emit(target, keybindings, config, stream)) for target in fmt.targets()]


__all__ = ["compile_file", "compile_source", "emit", "read_source", "render_format", "run"]
