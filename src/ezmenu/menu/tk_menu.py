# ---------------------------------------------------------------------------
# File: tk_menu.py
# ---------------------------------------------------------------------------
# Description:
#	TkNativeMenu: NativeMenu implementation over tk.Menu.
#
# Notes:
#	- Command items are checkbutton entries so they can show a check mark.
#	  The check state belongs to the application: a click does not toggle it.
#	- Submenu items are cascade entries.
#	- String options are whitespace separated tokens:
#		checked / -checked		initial check mark
#		disabled / enabled		initial state
#		key=value				passed to entryconfigure (e.g. accelerator=Ctrl+C)
#	  Mappings are passed through (with optional "checked"/"enabled" keys).
#	- Entries are tracked by name in our own list; tk.Menu.index() treats
#	  labels as patterns, so it is not used for lookups.
#	- Tests pass a FakeMenu via menu= and a var_factory so no Tk root is needed.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				App-owned check state + option tokens
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional

import tkinter as tk

from ezmenu.core.errors import ItemNotFoundError, NameConflictError
from ezmenu.menu.native import DisplayOptions, is_native_menu


class _Entry:
	__slots__ = ("owner", "label", "target", "options", "var", "checked", "enabled")

	def __init__(self, owner: "TkNativeMenu", label: str, target: Any, options: DisplayOptions) -> None:
		self.owner = owner
		self.label = label
		self.target = target
		self.options = options
		self.var: Any = None
		self.checked = False
		self.enabled = True

	@property
	def is_cascade(self) -> bool:
		return is_native_menu(self.target)

	def fire(self) -> None:
		# Undo Tk's automatic toggle; the application owns the check mark.
		if self.var is not None:
			self.var.set(self.checked)
		if callable(self.target):
			self.target(self.label, self.owner.position(self.label), self.owner.handle)


def parse_options(options: DisplayOptions) -> tuple[Optional[bool], Optional[bool], dict[str, Any]]:
	"""
	Split display options into (checked, enabled, extra entryconfigure kwargs).
	"""
	checked: Optional[bool] = None
	enabled: Optional[bool] = None
	extra: dict[str, Any] = {}

	if not options:
		return checked, enabled, extra

	if isinstance(options, str):
		for token in options.split():
			if "=" in token:
				key, _, value = token.partition("=")
				extra[key] = value
				continue
			word = token.lower().lstrip("+")
			if word == "checked":
				checked = True
			elif word == "-checked":
				checked = False
			elif word in ("disabled", "-enabled"):
				enabled = False
			elif word in ("enabled", "-disabled"):
				enabled = True
			else:
				raise ValueError(f"Unknown menu option token: {token!r}")
		return checked, enabled, extra

	extra = dict(options)
	if "checked" in extra:
		checked = bool(extra.pop("checked"))
	if "enabled" in extra:
		enabled = bool(extra.pop("enabled"))
	return checked, enabled, extra


class TkNativeMenu:
	"""
	TkNativeMenu

	master:			Parent widget for a new tk.Menu (ignored when menu= is given)
	menu:			Existing tk.Menu (or test double) to drive
	tearoff:		Whether the menu has a tear-off entry (shifts Tk indexes by one)
	var_factory:	Creates the per-entry check variable
	"""

	def __init__(
		self,
		master: tk.Misc | None = None,
		*,
		menu: Any = None,
		tearoff: bool = False,
		var_factory: Callable[[], Any] | None = None,
	) -> None:
		self._menu = menu if menu is not None else tk.Menu(master, tearoff=int(tearoff))
		self._offset = 1 if tearoff else 0
		self._entries: list[_Entry] = []
		self._var_factory = var_factory or (lambda: tk.BooleanVar(master=self._menu, value=False))

	def __repr__(self) -> str:
		return f"<TkNativeMenu handle={self.handle!r} items={len(self._entries)}>"

	@property
	def menu(self) -> Any:
		return self._menu

	@property
	def handle(self) -> str:
		return str(self._menu)

	def names(self) -> list[str]:
		return [e.label for e in self._entries]

	def position(self, name: str) -> int:
		for i, entry in enumerate(self._entries):
			if entry.label == name:
				return i
		raise ItemNotFoundError(name)

	def is_checked(self, name: str) -> bool:
		return self._entry(name).checked

	def is_enabled(self, name: str) -> bool:
		return self._entry(name).enabled

	# -----------------------------------------------------------------------
	# NativeMenu: structure
	# -----------------------------------------------------------------------

	def add_item(self, name: str, target: Any, options: DisplayOptions = "") -> None:
		self._ensure_new(name)
		self._create(len(self._entries), _Entry(self, name, target, options))

	def insert_item(self, before: str | int, name: str, target: Any, options: DisplayOptions = "") -> None:
		self._ensure_new(name)
		index = self.position(before) if isinstance(before, str) else int(before)
		if not 0 <= index <= len(self._entries):
			raise IndexError(f"Menu position out of range: {index}")
		self._create(index, _Entry(self, name, target, options))

	def delete_item(self, name: str) -> None:
		index = self.position(name)
		self._menu.delete(index + self._offset)
		self._entries.pop(index)

	def rename_item(self, old: str, new: str) -> None:
		entry = self._entry(old)
		if new != old:
			self._ensure_new(new)
		self._menu.entryconfigure(self.position(old) + self._offset, label=new)
		entry.label = new

	def update_item(self, name: str, *, target: Any = None, options: DisplayOptions = None) -> None:
		index = self.position(name)
		entry = self._entries[index]

		if target is not None and target is not entry.target:
			if is_native_menu(target) or entry.is_cascade:
				# Command <-> cascade (or cascade swap): rebuild the entry in place.
				self._menu.delete(index + self._offset)
				self._entries.pop(index)
				replacement = _Entry(self, name, target, entry.options)
				replacement.checked = entry.checked
				replacement.enabled = entry.enabled
				self._create(index, replacement)
				entry = replacement
			else:
				entry.target = target

		if options is not None:
			entry.options = options
			self._apply_options(index, entry, options)

	def set_icon(self, name: str, icon: Any, **kwargs: Any) -> None:
		kwargs.setdefault("compound", "left")
		self._menu.entryconfigure(self.position(name) + self._offset, image=icon, **kwargs)

	# -----------------------------------------------------------------------
	# NativeMenu: state
	# -----------------------------------------------------------------------

	def check_item(self, name: str) -> None:
		self._set_checked(name, True)

	def uncheck_item(self, name: str) -> None:
		self._set_checked(name, False)

	def toggle_check(self, name: str) -> None:
		self._set_checked(name, not self._entry(name).checked)

	def enable_item(self, name: str) -> None:
		self._set_enabled(name, True)

	def disable_item(self, name: str) -> None:
		self._set_enabled(name, False)

	def toggle_enable(self, name: str) -> None:
		self._set_enabled(name, not self._entry(name).enabled)

	def show(self, x: int | None = None, y: int | None = None) -> None:
		if x is None or y is None:
			px, py = self._menu.winfo_pointerxy()
			x = px if x is None else x
			y = py if y is None else y
		try:
			self._menu.tk_popup(int(x), int(y))
		finally:
			self._menu.grab_release()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _entry(self, name: str) -> _Entry:
		return self._entries[self.position(name)]

	def _ensure_new(self, name: str) -> None:
		if any(e.label == name for e in self._entries):
			raise NameConflictError(name)

	def _create(self, index: int, entry: _Entry) -> None:
		checked, enabled, extra = parse_options(entry.options)
		appending = index == len(self._entries)

		if entry.is_cascade:
			submenu = entry.target.menu if isinstance(entry.target, TkNativeMenu) else entry.target
			if appending:
				self._menu.add_cascade(label=entry.label, menu=submenu, **extra)
			else:
				self._menu.insert_cascade(index + self._offset, label=entry.label, menu=submenu, **extra)
		else:
			entry.var = self._var_factory()
			kwargs = dict(
				label=entry.label,
				variable=entry.var,
				onvalue=True,
				offvalue=False,
				command=entry.fire,
				**extra,
			)
			if appending:
				self._menu.add_checkbutton(**kwargs)
			else:
				self._menu.insert_checkbutton(index + self._offset, **kwargs)

		self._entries.insert(index, entry)

		if checked is not None:
			entry.checked = checked
		if enabled is not None:
			entry.enabled = enabled
		self._sync_state(index, entry)

	def _apply_options(self, index: int, entry: _Entry, options: DisplayOptions) -> None:
		checked, enabled, extra = parse_options(options)
		if extra:
			self._menu.entryconfigure(index + self._offset, **extra)
		if checked is not None:
			entry.checked = checked
		if enabled is not None:
			entry.enabled = enabled
		self._sync_state(index, entry)

	def _sync_state(self, index: int, entry: _Entry) -> None:
		if entry.var is not None:
			entry.var.set(entry.checked)
		self._menu.entryconfigure(index + self._offset, state=("normal" if entry.enabled else "disabled"))

	def _set_checked(self, name: str, value: bool) -> None:
		entry = self._entry(name)
		if entry.is_cascade:
			raise ValueError(f"Submenu item {name!r} cannot be checked")
		entry.checked = value
		entry.var.set(value)

	def _set_enabled(self, name: str, value: bool) -> None:
		index = self.position(name)
		entry = self._entries[index]
		entry.enabled = value
		self._menu.entryconfigure(index + self._offset, state=("normal" if value else "disabled"))
