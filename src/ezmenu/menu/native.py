# ---------------------------------------------------------------------------
# File: native.py
# ---------------------------------------------------------------------------
# Description:
#	Contract between MenuController and the native menu widget.
#
# Notes:
#	- MenuController only talks to the native menu through NativeMenu.
#	- A "target" is either a selection callback or a submenu object.
#	- Selection callbacks are called as callback(name, position, menu_handle).
#	- Implementations must raise on unknown names (never silently no-op),
#	  otherwise the registry and the native menu drift apart.
#	- TkNativeMenu (tk_menu.py) is the bundled implementation.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/14/2026	Paul G. LeDuc				Add update_item for options/target changes
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, Union, runtime_checkable

import tkinter as tk


SelectionCallback = Callable[[str, Any, Any], Any]

# Opaque per-item display options (forwarded verbatim).
DisplayOptions = Union[str, Mapping[str, Any], None]


@runtime_checkable
class NativeMenu(Protocol):
	"""
	Minimal interface MenuController needs from a native menu.
	"""

	@property
	def handle(self) -> Any: ...

	def add_item(self, name: str, target: Any, options: DisplayOptions = "") -> None: ...
	def insert_item(self, before: str | int, name: str, target: Any, options: DisplayOptions = "") -> None: ...
	def delete_item(self, name: str) -> None: ...
	def rename_item(self, old: str, new: str) -> None: ...
	def update_item(self, name: str, *, target: Any = None, options: DisplayOptions = None) -> None: ...

	def set_icon(self, name: str, icon: Any, **kwargs: Any) -> None: ...

	def check_item(self, name: str) -> None: ...
	def uncheck_item(self, name: str) -> None: ...
	def toggle_check(self, name: str) -> None: ...
	def enable_item(self, name: str) -> None: ...
	def disable_item(self, name: str) -> None: ...
	def toggle_enable(self, name: str) -> None: ...

	def show(self, x: int | None = None, y: int | None = None) -> None: ...


def is_native_menu(obj: Any) -> bool:
	"""
	True if obj can be attached as a submenu.

	Accepts NativeMenu implementations and raw tk.Menu widgets.
	"""
	if isinstance(obj, tk.Menu):
		return True
	return hasattr(obj, "handle") and callable(getattr(obj, "add_item", None))
