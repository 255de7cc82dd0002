from __future__ import annotations

USAGE = """USAGE: genkeys <COMP/WM> [CONFIG]
genkeys reads a file containing keybinding definitions and outputs a config file compatible with many wayland compositors/window managers.

  COMP/WM   Dump the keybinding definitions in the configuration format used by <COMP/WM>.
            Supported compositors/window managers are:
              sway/i3
              hyprland
              all (default)
            If 'help' is provided instead, print this help.
  CONFIG    The file containing the keybinding definitions. Defaults to '$HOME/.config/genkeys.gnks'.
            For more details, see 'genkeys help key_defs'.

  genkeys can also save the generated configs to files. For more details, see 'genkeys help configuring'."""

CONFIGURING_USAGE = """Configuring:
genkeys looks for its configuration file at '$HOME/.config/genkeys.json' (or at $GENKEYS_CONFIG when set).
It is a JSON object:
  {
    "WriteToFile": true,
    "HyprlandPath": "/home/user/.config/hypr/keys.conf",
    "SwayPath": "/home/user/.config/sway/keys.conf"
  }
WriteToFile: whether genkeys writes its output to files instead of standard output.
HyprlandPath/SwayPath: the files genkeys writes each format to.
Environment overrides: GENKEYS_WRITE_TO_FILE, GENKEYS_HYPRLAND_PATH, GENKEYS_SWAY_PATH."""

KEYBINDINGS_USAGE = """Defining keybindings:
Keybindings are defined the following way:
  bind "<keys>" "<shell command>"
Where <keys> are the keys that should be pressed in order to run <shell command>, separated by spaces.
Keys are Print, Super, Shift, Enter, N_1..N_9 (numpad) or any single character.
A combination cannot start with a single character or Enter.
Example:
  bind "Super Shift Print" "slurp | grim -g - $(xdg-user-dir PICTURES)/screenshot.png\""""

HELP_PAGES = {
    "configuring": CONFIGURING_USAGE,
    "key_defs": KEYBINDINGS_USAGE,
}


__all__ = ["CONFIGURING_USAGE", "HELP_PAGES", "KEYBINDINGS_USAGE", "USAGE"]
