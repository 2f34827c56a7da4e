# ---------------------------------------------------------------------------
# File: tk_binding.py
# ---------------------------------------------------------------------------
# Description:
#	Wire a Tk widget's context-menu gestures to MenuController.activate().
#
# Notes:
#	- Mouse: <Button-3> (plus <Button-2> on macOS). Keyboard: <Shift-F10>
#	  and the Menu key where Tk knows it.
#	- The entry under the pointer is reported as the token's `item`:
#		ttk.Treeview	-> identify_row(y) (None for empty space)
#		tk.Listbox		-> nearest(y)
#		other widgets	-> None
#	- Keyboard requests use the focused row/selection and the widget's
#	  top-left corner.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

import tkinter as tk

from ezmenu.core.logging import get_menu_logger
from ezmenu.menu.activation import ActivationMode

if TYPE_CHECKING:
	from ezmenu.menu.controller import MenuController


log = get_menu_logger("binding")

MOUSE_SEQUENCES: tuple[str, ...] = ("<Button-3>",) + (("<Button-2>",) if sys.platform == "darwin" else ())
KEY_SEQUENCES: tuple[str, ...] = ("<Shift-F10>",) + (("<App>",) if sys.platform.startswith("win") else ())


@dataclass(slots=True)
class ContextMenuBinding:
	"""
	Handle returned by bind_context_menu(); call unbind() to disconnect.
	"""
	widget: Any
	bind_ids: dict[str, str] = field(default_factory=dict)

	def unbind(self) -> None:
		for sequence, funcid in list(self.bind_ids.items()):
			self.widget.unbind(sequence, funcid)
		self.bind_ids.clear()


def bind_context_menu(controller: "MenuController", widget: Any, *, window: Any = None) -> ContextMenuBinding:
	"""
	Bind widget's context-menu gestures to controller.activate().

	The controller must be in CONTROL or WINDOW mode. In WINDOW mode the
	window defaults to widget.winfo_toplevel().
	"""
	if controller.mode is ActivationMode.NONE:
		raise ValueError("bind_context_menu() requires a CONTROL or WINDOW mode controller")

	if controller.mode is ActivationMode.WINDOW and window is None:
		window = widget.winfo_toplevel()

	def on_mouse(event: tk.Event) -> str:
		item = entry_at(widget, event.y)
		_activate(controller, widget, window, item, True, event.x_root, event.y_root)
		return "break"

	def on_key(_event: tk.Event) -> str:
		item = focused_entry(widget)
		x = widget.winfo_rootx()
		y = widget.winfo_rooty()
		_activate(controller, widget, window, item, False, x, y)
		return "break"

	binding = ContextMenuBinding(widget=widget)
	for sequence in MOUSE_SEQUENCES:
		binding.bind_ids[sequence] = widget.bind(sequence, on_mouse, add="+")
	for sequence in KEY_SEQUENCES:
		try:
			binding.bind_ids[sequence] = widget.bind(sequence, on_key, add="+")
		except tk.TclError:
			log.debug("Key sequence %s not supported by this Tk build", sequence)

	return binding


def entry_at(widget: Any, y: int) -> Optional[Any]:
	identify_row = getattr(widget, "identify_row", None)
	if callable(identify_row):
		return identify_row(y) or None

	nearest = getattr(widget, "nearest", None)
	if callable(nearest):
		index = nearest(y)
		return index if index is not None and index >= 0 else None

	return None


def focused_entry(widget: Any) -> Optional[Any]:
	focus = getattr(widget, "focus", None)
	if callable(focus) and hasattr(widget, "identify_row"):
		return focus() or None

	curselection = getattr(widget, "curselection", None)
	if callable(curselection):
		sel = curselection()
		return sel[0] if sel else None

	return None


def _activate(
	controller: "MenuController",
	widget: Any,
	window: Any,
	item: Any,
	is_right_click: bool,
	x: int,
	y: int,
) -> None:
	if controller.mode is ActivationMode.WINDOW:
		controller.activate(window, widget, item, is_right_click, x, y)
	else:
		controller.activate(widget, item, is_right_click, x, y)
