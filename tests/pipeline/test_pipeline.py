from __future__ import annotations

import io

import pytest

from genkeys.config.model import GenkeysConfig
from genkeys.errors.base import ErrorKind, GenkeysError
from genkeys.generators.formats import ConfigFormat
from genkeys.pipeline import compile_file, compile_source, emit, run

SOURCE = 'bind "Super 1" "foo"\nbind "Super Shift Print" "slurp | grim"\n'


def test_compile_source_runs_lexer_and_parser() -> None:
    bindings = compile_source("keys.gnks", SOURCE)
    assert [b.command for b in bindings] == ["foo", "slurp | grim"]


def test_compile_file_uses_path_as_file_name(tmp_path) -> None:
    path = tmp_path / "keys.gnks"
    path.write_text('bind "A" "x"', encoding="utf-8")
    with pytest.raises(GenkeysError) as excinfo:
        compile_file(path)
    assert excinfo.value.file == str(path)


def test_compile_file_missing(tmp_path) -> None:
    with pytest.raises(GenkeysError) as excinfo:
        compile_file(tmp_path / "missing.gnks")
    assert excinfo.value.kind is ErrorKind.IO


def test_run_all_writes_sway_then_hyprland_to_stream() -> None:
    out = io.StringIO()
    written = run(ConfigFormat.ALL, "keys.gnks", SOURCE, GenkeysConfig(), out)
    assert written == [(ConfigFormat.SWAY, None), (ConfigFormat.HYPRLAND, None)]
    assert out.getvalue() == (
        "bindsym $mod+1 exec sh -c 'foo'\n"
        "bindsym $mod+Shift+Print exec sh -c 'slurp | grim'\n"
        "bind = $mainMod, 1, exec, sh -c 'foo'\n"
        "bind = $mainMod SHIFT, Print, exec, sh -c 'slurp | grim'\n"
    )


def test_emit_writes_configured_file(tmp_path) -> None:
    target = tmp_path / "hypr" / "keys.conf"
    config = GenkeysConfig(write_to_file=True, hyprland_path=str(target))
    out = io.StringIO()
    path = emit(ConfigFormat.HYPRLAND, compile_source("keys.gnks", SOURCE), config, out)
    assert path == target
    assert out.getvalue() == ""
    assert target.read_text(encoding="utf-8").startswith("bind = $mainMod, 1, exec")


def test_failed_render_leaves_existing_file_untouched(tmp_path) -> None:
    target = tmp_path / "keys.conf"
    target.write_text("previous\n", encoding="utf-8")
    config = GenkeysConfig(write_to_file=True, hyprland_path=str(target))
    bindings = compile_source("keys.gnks", 'bind "Super Shift Print N_1" "x"')
    with pytest.raises(GenkeysError) as excinfo:
        emit(ConfigFormat.HYPRLAND, bindings, config, io.StringIO())
    assert excinfo.value.kind is ErrorKind.TOO_MANY_KEYS_FOR_HYPRLAND
    assert target.read_text(encoding="utf-8") == "previous\n"


def test_emit_requires_configured_path() -> None:
    config = GenkeysConfig(write_to_file=True, sway_path="  ")
    with pytest.raises(GenkeysError) as excinfo:
        emit(ConfigFormat.SWAY, compile_source("keys.gnks", SOURCE), config, io.StringIO())
    assert excinfo.value.kind is ErrorKind.CONFIG
    assert "`SwayPath` not defined in config" in excinfo.value.message


class _BrokenStream:
    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        raise OSError("disk full")


def test_flush_failure_is_io_error() -> None:
    with pytest.raises(GenkeysError) as excinfo:
        emit(ConfigFormat.SWAY, compile_source("keys.gnks", SOURCE), GenkeysConfig(), _BrokenStream())
    assert excinfo.value.kind is ErrorKind.IO
    assert "disk full" in excinfo.value.message


def test_compile_file_rejects_invalid_utf8(tmp_path) -> None:
    path = tmp_path / "keys.gnks"
    path.write_bytes(b'bind "Super 1" "\xff\xfe"')
    with pytest.raises(GenkeysError) as excinfo:
        compile_file(path)
    assert excinfo.value.kind is ErrorKind.IO
    assert "not valid UTF-8" in excinfo.value.message


def test_output_file_that_cannot_be_created(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    config = GenkeysConfig(write_to_file=True, sway_path=str(blocker / "keys.conf"))
    with pytest.raises(GenkeysError) as excinfo:
        emit(ConfigFormat.SWAY, compile_source("keys.gnks", SOURCE), config, io.StringIO())
    assert excinfo.value.kind is ErrorKind.IO
    assert "Could not open file" in excinfo.value.message


def test_closed_stream_is_io_error() -> None:
    out = io.StringIO()
    out.close()
    with pytest.raises(GenkeysError) as excinfo:
        emit(ConfigFormat.SWAY, compile_source("keys.gnks", SOURCE), GenkeysConfig(), out)
    assert excinfo.value.kind is ErrorKind.IO
