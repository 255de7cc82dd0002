from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from genkeys.cli.help_text import HELP_PAGES, USAGE
from genkeys.config.loader import default_definitions_path, load_config
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.errors.render import format_error
from genkeys.generators.formats import ConfigFormat
from genkeys.pipeline import read_source, run
from genkeys.version import get_version


def main(argv: list[str] | None = None, *, stdout: TextIO | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    out = stdout if stdout is not None else sys.stdout
    context: dict = {}
    try:
        cmd = args[0] if args else ConfigFormat.ALL.value
        if cmd == "--version":
            print(f"genkeys {get_version()}", file=out)
            return 0
        if cmd in {"help", "--help", "-h"}:
            return _print_help(args[1:], out)
        try:
            fmt = ConfigFormat.from_value(cmd)
        except GenkeysError:
            print(USAGE, file=sys.stderr)
            raise
        definitions = Path(args[1]) if len(args) > 1 else default_definitions_path()
        config = load_config()
        source = read_source(definitions)
        context["sources"] = {str(definitions): source}
        written = run(fmt, str(definitions), source, config, out)
        for target, path in written:
            if path is not None:
                print(f"Wrote {target.value} keybindings to {path}", file=sys.stderr)
        return 0
    except GenkeysError as err:
        print(format_error(err, context.get("sources")), file=sys.stderr)
        return 1


def _print_help(pages: list[str], out: TextIO) -> int:
    if not pages:
        print(USAGE, file=out)
        return 0
    text = HELP_PAGES.get(pages[0])
    if text is None:
        raise GenkeysError(f"Unknown help page: `{pages[0]}`", kind=ErrorKind.USAGE)
    print(text, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
