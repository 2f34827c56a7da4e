# ---------------------------------------------------------------------------
# File: items.py
# ---------------------------------------------------------------------------
# Description:
#	Menu item model for ezmenu.
#
# Notes:
#	- An item's action is one of three tagged variants:
#		NativeSubmenu(menu)		opens a submenu, never dispatched
#		CallableHandler(func)	called as func(controller, selection[, token])
#		NamedMethod(name)		resolved on the controller at dispatch time
#	- MenuItem mutators go through the owning controller so the native menu
#	  and the registry change together. The owner is held weakly.
#	- ItemSpec is the bulk/default-items input record.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Replace string/callable sniffing with tagged bindings
# 10/14/2026	Paul G. LeDuc				Accept dict/tuple item specs (ItemSpec.coerce)
# 10/17/2026	Paul G. LeDuc				Accept list item specs
# ---------------------------------------------------------------------------

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence, Union

from ezmenu.menu.native import DisplayOptions, is_native_menu

if TYPE_CHECKING:
	from ezmenu.menu.controller import MenuController


# (controller, handler_result) -> text or None
TooltipTransform = Callable[[Any, Any], Any]
TooltipPolicy = Union[str, TooltipTransform, None]


# ---------------------------------------------------------------------------
# Action bindings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NativeSubmenu:
	menu: Any

	@property
	def target(self) -> Any:
		return self.menu


@dataclass(frozen=True, slots=True)
class CallableHandler:
	func: Callable[..., Any]

	@property
	def target(self) -> Any:
		return self.func


@dataclass(frozen=True, slots=True)
class NamedMethod:
	name: str

	@property
	def target(self) -> Any:
		return self.name


ActionBinding = Union[NativeSubmenu, CallableHandler, NamedMethod]


def as_binding(action: Any) -> ActionBinding:
	"""
	Normalize a user-supplied action into an ActionBinding.

	- ActionBinding		-> unchanged
	- str				-> NamedMethod
	- native menu		-> NativeSubmenu
	- callable			-> CallableHandler
	"""
	if isinstance(action, (NativeSubmenu, CallableHandler, NamedMethod)):
		return action
	if isinstance(action, str):
		if not action:
			raise ValueError("Named action must be a non-empty string")
		return NamedMethod(action)
	if is_native_menu(action):
		return NativeSubmenu(action)
	if callable(action):
		return CallableHandler(action)
	raise TypeError(f"Unsupported menu action: {action!r}")


# ---------------------------------------------------------------------------
# Item specs (bulk input)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ItemSpec:
	"""
	ItemSpec

	name:		Item name (display text + lookup key)
	action:		Submenu, callable, or method name
	options:	Display options forwarded to the native menu
	tooltip:	Tooltip policy (None/"" = use handler result)
	"""
	name: str
	action: Any
	options: DisplayOptions = ""
	tooltip: TooltipPolicy = None

	@classmethod
	def coerce(cls, value: Any) -> "ItemSpec":
		if isinstance(value, ItemSpec):
			return value
		if isinstance(value, Mapping):
			try:
				return cls(
					name=value["name"],
					action=value["action"],
					options=value.get("options", ""),
					tooltip=value.get("tooltip"),
				)
			except KeyError as ex:
				raise ValueError(f"Item spec is missing key {ex.args[0]!r}: {value!r}") from ex
		# lists too, for items loaded from JSON or YAML
		if isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and 2 <= len(value) <= 4:
			return cls(*value)
		raise TypeError(f"Unsupported item spec: {value!r}")


# ---------------------------------------------------------------------------
# MenuItem
# ---------------------------------------------------------------------------

class MenuItem:
	"""
	MenuItem

	A named entry owned by one MenuController. Reads are local; writes are
	routed through the controller so the native menu stays in sync.
	"""

	__slots__ = ("_name", "_binding", "_options", "_tooltip", "_owner", "__weakref__")

	def __init__(
		self,
		name: str,
		action: Any,
		options: DisplayOptions = "",
		tooltip: TooltipPolicy = None,
		*,
		owner: Optional["MenuController"] = None,
	) -> None:
		if not name:
			raise ValueError("Menu item name must be a non-empty string")

		self._name = name
		self._binding: ActionBinding = as_binding(action)
		self._options: DisplayOptions = options
		self._tooltip: TooltipPolicy = tooltip
		self._owner: Optional[weakref.ReferenceType[MenuController]] = None
		if owner is not None:
			self._attach(owner)

	def __repr__(self) -> str:
		kind = type(self._binding).__name__
		return f"<MenuItem name={self._name!r} action={kind}>"

	# -----------------------------------------------------------------------
	# Read access
	# -----------------------------------------------------------------------

	@property
	def binding(self) -> ActionBinding:
		return self._binding

	@property
	def is_submenu(self) -> bool:
		return isinstance(self._binding, NativeSubmenu)

	@property
	def owner(self) -> Optional["MenuController"]:
		return self._owner() if self._owner is not None else None

	# -----------------------------------------------------------------------
	# Mutable properties (routed through the owner)
	# -----------------------------------------------------------------------

	@property
	def name(self) -> str:
		return self._name

	@name.setter
	def name(self, value: str) -> None:
		self._require_owner().rename(self._name, value)

	@property
	def action(self) -> Any:
		"""
		The action as supplied (submenu, callable, or method name).
		"""
		return self._binding.target

	@action.setter
	def action(self, value: Any) -> None:
		self._require_owner().set_action(self._name, value)

	@property
	def options(self) -> DisplayOptions:
		return self._options

	@options.setter
	def options(self, value: DisplayOptions) -> None:
		self._require_owner().set_options(self._name, value)

	@property
	def tooltip(self) -> TooltipPolicy:
		return self._tooltip

	@tooltip.setter
	def tooltip(self, value: TooltipPolicy) -> None:
		self._require_owner().set_tooltip(self._name, value)

	# -----------------------------------------------------------------------
	# State helpers
	# -----------------------------------------------------------------------

	def check(self) -> None:
		self._require_owner().check(self._name)

	def uncheck(self) -> None:
		self._require_owner().uncheck(self._name)

	def toggle_check(self) -> None:
		self._require_owner().toggle_check(self._name)

	def enable(self) -> None:
		self._require_owner().enable(self._name)

	def disable(self) -> None:
		self._require_owner().disable(self._name)

	def toggle_enable(self) -> None:
		self._require_owner().toggle_enable(self._name)

	def set_icon(self, icon: Any, **kwargs: Any) -> None:
		self._require_owner().set_icon(self._name, icon, **kwargs)

	# -----------------------------------------------------------------------
	# Controller hooks (not for host code)
	# -----------------------------------------------------------------------

	def _attach(self, owner: "MenuController") -> None:
		self._owner = weakref.ref(owner)

	def _detach(self) -> None:
		self._owner = None

	def _set_name(self, name: str) -> None:
		self._name = name

	def _set_binding(self, binding: ActionBinding) -> None:
		self._binding = binding

	def _set_options(self, options: DisplayOptions) -> None:
		self._options = options

	def _set_tooltip(self, tooltip: TooltipPolicy) -> None:
		self._tooltip = tooltip

	def _require_owner(self) -> "MenuController":
		owner = self.owner
		if owner is None:
			raise RuntimeError(f"Menu item {self._name!r} is not attached to a menu")
		return owner
