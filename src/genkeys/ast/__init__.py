from genkeys.ast.nodes import Keybinding

__all__ = ["Keybinding"]
