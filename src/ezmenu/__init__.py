# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#   ezmenu: named, reusable menu definitions over a native menu control.
#
# Notes:
#   - Lazy exports (PEP 562); importing ezmenu does not import Tk.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__version__ = "0.1.0"

__all__ = [
	"MenuController",
	"menu_action",
	"MenuItem",
	"ItemSpec",
	"ActivationMode",
	"ActivationToken",
	"TooltipHandler",
	"TooltipSlotPool",
	"create_menu",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"MenuController": ("ezmenu.menu.controller", "MenuController"),
	"menu_action": ("ezmenu.menu.controller", "menu_action"),
	"MenuItem": ("ezmenu.menu.items", "MenuItem"),
	"ItemSpec": ("ezmenu.menu.items", "ItemSpec"),
	"ActivationMode": ("ezmenu.menu.activation", "ActivationMode"),
	"ActivationToken": ("ezmenu.menu.activation", "ActivationToken"),
	"TooltipHandler": ("ezmenu.tooltips.handler", "TooltipHandler"),
	"TooltipSlotPool": ("ezmenu.tooltips.pool", "TooltipSlotPool"),
	"create_menu": ("ezmenu.app.compose", "create_menu"),
}

def __getattr__(name: str) -> Any:
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
	from ezmenu.menu.items import MenuItem, ItemSpec
	from ezmenu.menu.activation import ActivationMode, ActivationToken
	from ezmenu.tooltips.handler import TooltipHandler
	from ezmenu.tooltips.pool import TooltipSlotPool
	from ezmenu.app.compose import create_menu
