# ---------------------------------------------------------------------------
# File: controller.py
# ---------------------------------------------------------------------------
# Description:
#	MenuController: named-item façade over a native menu.
#
# Notes:
#	- Every item lives in two places: the native menu (display) and the
#	  ItemRegistry (metadata). All mutations go native first, registry second,
#	  and are validated against the registry before touching the native menu.
#	- All native items share one selection callback. The callback holds the
#	  controller weakly, so there is no controller <-> native menu cycle.
#	- Context-menu flow:
#		activate()  -> token stored, availability handler, native show()
#		select()    -> token taken + cleared, handler called, tooltip shown
#	- Handler signatures:
#		ActivationMode.NONE:			handler(controller, selection)
#		ActivationMode.CONTROL/WINDOW:	handler(controller, selection, token)
#	- Named actions resolve through the `actions` table passed to the
#	  constructor, then through methods decorated with @menu_action.
#	- Handler exceptions are never caught here.
#	- add_items/delete_items/delete_matching/rename are not transactional: a
#	  native failure part way leaves earlier steps applied.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Add activation modes + tokens
# 10/13/2026	Paul G. LeDuc				Named actions via @menu_action table
# 10/14/2026	Paul G. LeDuc				Weak selection callback (no ref cycle)
# 10/15/2026	Paul G. LeDuc				Add telemetry for activate/select
# 10/17/2026	Paul G. LeDuc				Resolve actions by name; track tooltip serials
# ---------------------------------------------------------------------------

from __future__ import annotations

import re
import weakref
from typing import Any, Callable, ClassVar, Iterable, Iterator, Mapping, Optional, Union

from ezmenu.core.errors import (
	ActivationModeError,
	ItemNotFoundError,
	NameConflictError,
	UnknownActionError,
)
from ezmenu.core.logging import get_menu_logger
from ezmenu.core.telemetry import Telemetry, get_telemetry
from ezmenu.menu.activation import ActivationMode, ActivationToken, Selection
from ezmenu.menu.items import (
	ActionBinding,
	CallableHandler,
	ItemSpec,
	MenuItem,
	NamedMethod,
	NativeSubmenu,
	TooltipPolicy,
	as_binding,
)
from ezmenu.menu.native import DisplayOptions, NativeMenu
from ezmenu.menu.registry import ItemRegistry
from ezmenu.menu.tooltip_policy import resolve_tooltip_text
from ezmenu.tooltips.handler import TooltipHandler, TooltipOptionsLike


log = get_menu_logger("controller")

Handler = Callable[..., Any]
AvailabilityHandler = Callable[["MenuController", ActivationToken], Any]


def menu_action(name: str | None = None) -> Callable[[Handler], Handler]:
	"""
	Mark a MenuController method as a named action.

		class FileMenu(MenuController):
			@menu_action("open")
			def on_open(self, selection): ...

		FileMenu(native, items=[ItemSpec("Open", "open")])
	"""
	def deco(func: Handler) -> Handler:
		func.__menu_action__ = name or func.__name__  # type: ignore[attr-defined]
		return func
	return deco


class _SelectionCallback:
	"""
	Native-facing selection callback. Holds the controller weakly.
	"""

	__slots__ = ("_ref",)

	def __init__(self, controller: "MenuController") -> None:
		self._ref: Optional[weakref.ReferenceType[MenuController]] = weakref.ref(controller)

	def detach(self) -> None:
		self._ref = None

	def __call__(self, name: str, position: Any = None, menu: Any = None) -> Any:
		controller = self._ref() if self._ref is not None else None
		if controller is None:
			log.debug("Selection %r ignored: menu controller released", name)
			return None
		return controller.select(name, position, menu)


class MenuController:
	"""
	MenuController

	Owns the item registry, the native menu reference, the pending activation
	token, and the selection/availability/tooltip bindings.
	"""

	# action name -> method attribute name; filled per subclass
	_action_table: ClassVar[dict[str, str]] = {}

	_ACTIVATORS: ClassVar[dict[ActivationMode, str]] = {
		ActivationMode.CONTROL: "_activate_control",
		ActivationMode.WINDOW: "_activate_window",
	}

	def __init_subclass__(cls, **kwargs: Any) -> None:
		super().__init_subclass__(**kwargs)
		table = dict(cls._action_table)
		for attr_name, attr in vars(cls).items():
			action_name = getattr(attr, "__menu_action__", None)
			if action_name:
				table[action_name] = attr_name
		cls._action_table = table

	def __init__(
		self,
		native: NativeMenu,
		*,
		items: Iterable[Any] = (),
		mode: ActivationMode | int = ActivationMode.NONE,
		case_sensitive: bool = True,
		show_tooltips: bool = False,
		tooltip_handler: Optional[TooltipHandler] = None,
		tooltip_options: TooltipOptionsLike = None,
		selection_handler: Optional[Handler] = None,
		availability_handler: Optional[AvailabilityHandler] = None,
		actions: Optional[Mapping[str, Handler]] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._native = native
		self._registry = ItemRegistry(case_sensitive=case_sensitive)
		self._callback = _SelectionCallback(self)
		self._telemetry = telemetry if telemetry is not None else get_telemetry()

		self._mode = ActivationMode(mode)
		self._token: Optional[ActivationToken] = None

		self.show_tooltips = show_tooltips
		self.tooltip_handler = tooltip_handler
		self.tooltip_options = tooltip_options
		self.selection_handler = selection_handler
		self.availability_handler = availability_handler
		self._actions: dict[str, Handler] = dict(actions or {})
		# (handler, slot, serial) for each tooltip this controller showed
		self._tooltips: list[tuple[TooltipHandler, int, int]] = []

		self._closed = False

		self.add_items(items)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} mode={self._mode.name} items={len(self._registry)}>"

	# -----------------------------------------------------------------------
	# Accessors
	# -----------------------------------------------------------------------

	@property
	def native(self) -> NativeMenu:
		return self._native

	@property
	def handle(self) -> Any:
		return self._native.handle

	@property
	def registry(self) -> ItemRegistry:
		return self._registry

	@property
	def mode(self) -> ActivationMode:
		return self._mode

	@property
	def token(self) -> Optional[ActivationToken]:
		"""
		The pending activation token (None outside an activation).
		"""
		return self._token

	@property
	def closed(self) -> bool:
		return self._closed

	def get(self, name: str) -> MenuItem:
		return self._registry.get(name)

	def find(self, name: str) -> Optional[MenuItem]:
		return self._registry.find(name)

	def has(self, name: str) -> bool:
		return self._registry.has(name)

	def names(self) -> list[str]:
		return self._registry.names()

	def __contains__(self, name: object) -> bool:
		return name in self._registry

	def __iter__(self) -> Iterator[MenuItem]:
		return iter(self._registry)

	def __len__(self) -> int:
		return len(self._registry)

	# -----------------------------------------------------------------------
	# Item mutation
	# -----------------------------------------------------------------------

	def add(
		self,
		name: str,
		action: Any,
		options: DisplayOptions = "",
		tooltip: TooltipPolicy = None,
	) -> MenuItem:
		"""
		Append an item. Raises NameConflictError if name is taken.
		"""
		self._ensure_new(name)
		item = MenuItem(name, action, options, tooltip)

		self._native.add_item(name, self._native_target(item.binding), options)
		self._register(item)

		log.debug("Added menu item %r (%s)", name, type(item.binding).__name__)
		return item

	def insert(
		self,
		before: str | int,
		name: str,
		action: Any,
		options: DisplayOptions = "",
		tooltip: TooltipPolicy = None,
	) -> MenuItem:
		"""
		Insert an item before an existing item (by name) or a 0-based position.
		"""
		self._ensure_new(name)
		if isinstance(before, str):
			before = self._registry.get(before).name
		item = MenuItem(name, action, options, tooltip)

		self._native.insert_item(before, name, self._native_target(item.binding), options)
		self._register(item)

		log.debug("Inserted menu item %r before %r", name, before)
		return item

	def add_items(self, specs: Iterable[Any]) -> list[MenuItem]:
		"""
		Add items in order. Items added before a failure stay added.

		Each spec may be an ItemSpec, a mapping with name/action[/options/tooltip],
		or a (name, action[, options[, tooltip]]) tuple or list.
		"""
		added: list[MenuItem] = []
		for raw in specs:
			spec = ItemSpec.coerce(raw)
			added.append(self.add(spec.name, spec.action, spec.options, spec.tooltip))
		return added

	def delete(self, name: str) -> MenuItem:
		item = self._registry.get(name)

		self._native.delete_item(item.name)
		self._registry.delete(item.name)
		item._detach()

		log.debug("Deleted menu item %r", item.name)
		return item

	def delete_items(self, names: Iterable[str]) -> list[MenuItem]:
		return [self.delete(name) for name in list(names)]

	def delete_matching(self, pattern: Union[str, re.Pattern[str]], flags: int = 0) -> list[str]:
		"""
		Delete every item whose name matches pattern (re.search semantics).

		Returns the deleted names.
		"""
		regex = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
		matched = [name for name in self._registry.names() if regex.search(name)]
		for name in matched:
			self.delete(name)
		return matched

	def clear(self) -> None:
		self.delete_items(self._registry.names())

	def rename(self, old: str, new: str) -> MenuItem:
		"""
		Rename an item in the native menu and re-key it in the registry.
		"""
		if not new:
			raise ValueError("Menu item name must be a non-empty string")

		item = self._registry.get(old)
		current = item.name
		if new == current:
			return item

		other = self._registry.find(new)
		if other is not None and other is not item:
			raise NameConflictError(new)

		self._native.rename_item(current, new)
		self._registry.delete(current)
		item._set_name(new)
		self._registry.set(new, item)

		log.debug("Renamed menu item %r -> %r", current, new)
		return item

	def set_options(self, name: str, options: DisplayOptions) -> None:
		item = self._registry.get(name)
		self._native.update_item(item.name, options=options)
		item._set_options(options)

	def set_action(self, name: str, action: Any) -> None:
		item = self._registry.get(name)
		binding = as_binding(action)
		self._native.update_item(item.name, target=self._native_target(binding))
		item._set_binding(binding)

	def set_tooltip(self, name: str, tooltip: TooltipPolicy) -> None:
		self._registry.get(name)._set_tooltip(tooltip)

	# -----------------------------------------------------------------------
	# Item state (forwarded to the native menu)
	# -----------------------------------------------------------------------

	def check(self, name: str) -> None:
		self._native.check_item(self._registry.get(name).name)

	def uncheck(self, name: str) -> None:
		self._native.uncheck_item(self._registry.get(name).name)

	def toggle_check(self, name: str) -> None:
		self._native.toggle_check(self._registry.get(name).name)

	def enable(self, name: str) -> None:
		self._native.enable_item(self._registry.get(name).name)

	def disable(self, name: str) -> None:
		self._native.disable_item(self._registry.get(name).name)

	def toggle_enable(self, name: str) -> None:
		self._native.toggle_enable(self._registry.get(name).name)

	def set_icon(self, name: str, icon: Any, **kwargs: Any) -> None:
		self._native.set_icon(self._registry.get(name).name, icon, **kwargs)

	# -----------------------------------------------------------------------
	# Activation
	# -----------------------------------------------------------------------

	def set_mode(self, mode: ActivationMode | int) -> None:
		"""
		Switch activation mode. Any pending token is dropped.
		"""
		self._mode = ActivationMode(mode)
		self._token = None
		log.debug("Menu mode set to %s", self._mode.name)

	def activate(self, *args: Any, **kwargs: Any) -> None:
		"""
		Context-menu entry point.

		CONTROL:	activate(control, item, is_right_click, x, y)
		WINDOW:		activate(window, control, item, is_right_click, x, y)
		"""
		method_name = self._ACTIVATORS.get(self._mode)
		if method_name is None:
			raise ActivationModeError(
				f"{self.__class__.__name__} is not a context menu (mode={self._mode.name})"
			)
		getattr(self, method_name)(*args, **kwargs)

	def show(self, x: int | None = None, y: int | None = None) -> None:
		"""
		Pop up the menu without an activation (no token).
		"""
		self._token = None
		self._native.show(x, y)

	def _activate_control(
		self,
		control: Any,
		item: Any = None,
		is_right_click: bool = True,
		x: int | None = None,
		y: int | None = None,
	) -> None:
		self._begin_activation(ActivationToken(
			control=control,
			item=item,
			is_right_click=bool(is_right_click),
			x=x,
			y=y,
		))

	def _activate_window(
		self,
		window: Any,
		control: Any = None,
		item: Any = None,
		is_right_click: bool = True,
		x: int | None = None,
		y: int | None = None,
	) -> None:
		self._begin_activation(ActivationToken(
			control=control,
			window=window,
			item=item,
			is_right_click=bool(is_right_click),
			x=x,
			y=y,
		))

	def _begin_activation(self, token: ActivationToken) -> None:
		self._token = token

		self._telemetry.event("menu.activate", {"mode": self._mode.name, "right_click": token.is_right_click})
		log.info("Menu activated at (%s, %s) item=%r", token.x, token.y, token.item)

		try:
			if self.availability_handler is not None:
				self.availability_handler(self, token)
			self._native.show(token.x, token.y)
		except BaseException:
			self._token = None
			raise

	# -----------------------------------------------------------------------
	# Selection dispatch
	# -----------------------------------------------------------------------

	def select(self, name: str, position: Any = None, menu: Any = None) -> Any:
		"""
		Dispatch a native "item selected" notification.

		Returns the handler's result (None for submenu items).

		Raises:
			ItemNotFoundError: name is not registered (native menu out of sync).
			UnknownActionError: a named action cannot be resolved.
		"""
		item = self._registry.find(name)
		if item is None:
			log.error("Selected item %r is not registered; native menu and registry are out of sync", name)
			raise ItemNotFoundError(name)

		token, self._token = self._token, None

		if item.is_submenu:
			log.debug("Ignoring selection of submenu item %r", item.name)
			return None

		selection = Selection(
			name=item.name,
			position=position,
			menu=menu if menu is not None else self._native.handle,
			item=item,
		)

		handler = self.selection_handler or self._resolve_handler(item.binding)

		self._telemetry.event("menu.select", {"name": item.name, "mode": self._mode.name})
		log.info("Menu selection %r", item.name)

		with self._telemetry.timer("menu.dispatch_ms", {"name": item.name}):
			result = self._call_handler(handler, selection, token)

		if self.show_tooltips and self.tooltip_handler is not None:
			text = resolve_tooltip_text(item.tooltip, self, result)
			if text:
				self._show_tooltip(self.tooltip_handler, text)

		return result

	def _show_tooltip(self, handler: TooltipHandler, text: str) -> None:
		self._tooltips = [t for t in self._tooltips if t[0].serial(t[1]) == t[2]]
		slot = handler.show(text, self.tooltip_options)
		serial = handler.serial(slot)
		if serial is not None:
			self._tooltips.append((handler, slot, serial))

	def resolve_action(self, action_name: str) -> Handler:
		"""
		Look up a named action: constructor `actions` first, then @menu_action methods.

		Methods are looked up by attribute name on the instance's class, so an
		override in a subclass wins even when it is not decorated again.
		"""
		func = self._actions.get(action_name)
		if func is not None:
			return func
		attr_name = self._action_table.get(action_name)
		func = getattr(type(self), attr_name, None) if attr_name else None
		if not callable(func):
			raise UnknownActionError(action_name)
		return func

	def register_action(self, action_name: str, func: Handler) -> None:
		self._actions[action_name] = func

	def _resolve_handler(self, binding: ActionBinding) -> Handler:
		if isinstance(binding, CallableHandler):
			return binding.func
		if isinstance(binding, NamedMethod):
			return self.resolve_action(binding.name)
		raise TypeError(f"Binding is not dispatchable: {binding!r}")

	def _call_handler(self, handler: Handler, selection: Selection, token: Optional[ActivationToken]) -> Any:
		if self._mode is ActivationMode.NONE:
			return handler(self, selection)
		return handler(self, selection, token)

	# -----------------------------------------------------------------------
	# Lifetime
	# -----------------------------------------------------------------------

	def close(self) -> None:
		"""
		End tooltips shown by this controller, then drop handler bindings
		and the pending token.

		Native items stay in place; selecting them afterwards does nothing.
		"""
		if self._closed:
			return
		self._closed = True
		self._token = None
		for handler, slot, serial in self._tooltips:
			handler.end(slot, serial)
		self._tooltips.clear()
		self.selection_handler = None
		self.availability_handler = None
		self.tooltip_handler = None
		self._actions.clear()
		self._callback.detach()
		log.debug("Menu controller closed")

	def __enter__(self) -> "MenuController":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _ensure_new(self, name: str) -> None:
		if not name:
			raise ValueError("Menu item name must be a non-empty string")
		if self._registry.has(name):
			raise NameConflictError(name)

	def _register(self, item: MenuItem) -> None:
		item._attach(self)
		self._registry.set(item.name, item)

	def _native_target(self, binding: ActionBinding) -> Any:
		if isinstance(binding, NativeSubmenu):
			return binding.menu
		return self._callback
