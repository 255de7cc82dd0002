from __future__ import annotations

import json

import pytest

from genkeys.cli.help_text import CONFIGURING_USAGE, KEYBINDINGS_USAGE, USAGE
from genkeys.cli.main import main as cli_main


@pytest.fixture(autouse=True)
def _home(monkeypatch, tmp_path):
    for key in ["GENKEYS_CONFIG", "GENKEYS_WRITE_TO_FILE", "GENKEYS_SWAY_PATH", "GENKEYS_HYPRLAND_PATH"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def _definitions(tmp_path, text: str = 'bind "Super 1" "foo"\n'):
    path = tmp_path / "keys.gnks"
    path.write_text(text, encoding="utf-8")
    return path


def test_sway_to_stdout(tmp_path, capsys) -> None:
    rc = cli_main(["sway", str(_definitions(tmp_path))])
    assert rc == 0
    assert capsys.readouterr().out == "bindsym $mod+1 exec sh -c 'foo'\n"


def test_i3_is_sway_alias(tmp_path, capsys) -> None:
    assert cli_main(["i3", str(_definitions(tmp_path))]) == 0
    assert capsys.readouterr().out.startswith("bindsym ")


def test_hyprland_to_stdout(tmp_path, capsys) -> None:
    rc = cli_main(["hyprland", str(_definitions(tmp_path))])
    assert rc == 0
    assert capsys.readouterr().out == "bind = $mainMod, 1, exec, sh -c 'foo'\n"


def test_defaults_to_all_and_home_definitions(tmp_path, capsys) -> None:
    config_dir = tmp_path / ".config"
    config_dir.mkdir()
    (config_dir / "genkeys.gnks").write_text('bind "Print" "grim"', encoding="utf-8")
    assert cli_main([]) == 0
    assert capsys.readouterr().out == "bindsym Print exec sh -c 'grim'\nbind = , Print, exec, sh -c 'grim'\n"


def test_write_to_file(tmp_path, capsys) -> None:
    config_dir = tmp_path / ".config"
    config_dir.mkdir()
    sway_path = tmp_path / "out" / "sway.conf"
    hypr_path = tmp_path / "out" / "hypr.conf"
    (config_dir / "genkeys.json").write_text(
        json.dumps({"WriteToFile": True, "SwayPath": str(sway_path), "HyprlandPath": str(hypr_path)}),
        encoding="utf-8",
    )
    rc = cli_main(["all", str(_definitions(tmp_path))])
    captured = capsys.readouterr()
    assert rc == 0
    assert captured.out == ""
    assert f"Wrote sway keybindings to {sway_path}" in captured.err
    assert sway_path.read_text(encoding="utf-8") == "bindsym $mod+1 exec sh -c 'foo'\n"
    assert hypr_path.read_text(encoding="utf-8") == "bind = $mainMod, 1, exec, sh -c 'foo'\n"


def test_parse_error_is_rendered_with_caret(tmp_path, capsys) -> None:
    path = _definitions(tmp_path, 'bind "Super 1" "foo"\nbind "A" "bar"\n')
    rc = cli_main(["sway", str(path)])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert f"{path}:2:6: Key combination cannot start with" in captured.err
    assert 'bind "A" "bar"\n     ^' in captured.err


def test_hyprland_key_limit_fails_without_output(tmp_path, capsys) -> None:
    path = _definitions(tmp_path, 'bind "Super 1" "ok"\nbind "Super Shift Print N_2" "x"\n')
    rc = cli_main(["hyprland", str(path)])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert "more than 3 keys" in captured.err


def test_missing_definitions_file(tmp_path, capsys) -> None:
    rc = cli_main(["sway", str(tmp_path / "nope.gnks")])
    assert rc == 1
    assert "Could not open file" in capsys.readouterr().err


def test_unknown_format_prints_usage(capsys) -> None:
    rc = cli_main(["kde"])
    captured = capsys.readouterr()
    assert rc == 1
    assert USAGE in captured.err
    assert "Unknown configuration format: `kde`" in captured.err


def test_help_pages(capsys) -> None:
    assert cli_main(["help"]) == 0
    assert capsys.readouterr().out.strip() == USAGE
    assert cli_main(["help", "configuring"]) == 0
    assert capsys.readouterr().out.strip() == CONFIGURING_USAGE
    assert cli_main(["help", "key_defs"]) == 0
    assert capsys.readouterr().out.strip() == KEYBINDINGS_USAGE


def test_unknown_help_page(capsys) -> None:
    assert cli_main(["help", "nope"]) == 1
    assert "Unknown help page: `nope`" in capsys.readouterr().err


def test_version(capsys) -> None:
    assert cli_main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("genkeys ")


@pytest.mark.parametrize("name", ["SWAY", "Hyprland", " sway"])
def test_format_names_are_case_sensitive(tmp_path, capsys, name) -> None:
    assert cli_main([name, str(_definitions(tmp_path))]) == 1
    assert f"Unknown configuration format: `{name}`" in capsys.readouterr().err
