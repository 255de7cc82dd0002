"""genkeys: compile keybinding definitions into compositor configs."""

from genkeys.version import get_version

__all__ = ["get_version"]
