# ---------------------------------------------------------------------------
# File: menu/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public menu package surface for ezmenu.
#
# Notes:
#   - Uses lazy exports to avoid circular imports (PEP 562).
#   - Do NOT import from ezmenu.menu inside menu modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Controller
	"MenuController", "menu_action",

	# Items
	"MenuItem", "ItemSpec", "NativeSubmenu", "CallableHandler", "NamedMethod",
	"ItemRegistry",

	# Activation
	"ActivationMode", "ActivationToken", "Selection",

	# Native backends
	"NativeMenu", "TkNativeMenu", "bind_context_menu", "ContextMenuBinding",

	# Tooltip policy
	"resolve_tooltip_text",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"MenuController": ("ezmenu.menu.controller", "MenuController"),
	"menu_action": ("ezmenu.menu.controller", "menu_action"),

	"MenuItem": ("ezmenu.menu.items", "MenuItem"),
	"ItemSpec": ("ezmenu.menu.items", "ItemSpec"),
	"NativeSubmenu": ("ezmenu.menu.items", "NativeSubmenu"),
	"CallableHandler": ("ezmenu.menu.items", "CallableHandler"),
	"NamedMethod": ("ezmenu.menu.items", "NamedMethod"),
	"ItemRegistry": ("ezmenu.menu.registry", "ItemRegistry"),

	"ActivationMode": ("ezmenu.menu.activation", "ActivationMode"),
	"ActivationToken": ("ezmenu.menu.activation", "ActivationToken"),
	"Selection": ("ezmenu.menu.activation", "Selection"),

	"NativeMenu": ("ezmenu.menu.native", "NativeMenu"),
	"TkNativeMenu": ("ezmenu.menu.tk_menu", "TkNativeMenu"),
	"bind_context_menu": ("ezmenu.menu.tk_binding", "bind_context_menu"),
	"ContextMenuBinding": ("ezmenu.menu.tk_binding", "ContextMenuBinding"),

	"resolve_tooltip_text": ("ezmenu.menu.tooltip_policy", "resolve_tooltip_text"),
}

def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for ezmenu.menu exports.
	"""
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from ezmenu.menu.controller import MenuController, menu_action
	from ezmenu.menu.items import MenuItem, ItemSpec, NativeSubmenu, CallableHandler, NamedMethod
	from ezmenu.menu.registry import ItemRegistry
	from ezmenu.menu.activation import ActivationMode, ActivationToken, Selection
	from ezmenu.menu.native import NativeMenu
	from ezmenu.menu.tk_menu import TkNativeMenu
	from ezmenu.menu.tk_binding import bind_context_menu, ContextMenuBinding
	from ezmenu.menu.tooltip_policy import resolve_tooltip_text
