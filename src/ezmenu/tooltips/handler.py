# ---------------------------------------------------------------------------
# File: handler.py
# ---------------------------------------------------------------------------
# Description:
#	TooltipHandler: shows transient tooltips in pooled slots.
#
# Notes:
#	- Rendering is delegated to a TooltipRenderer (see tk_renderer.py).
#	- Options resolve field by field: call > instance defaults > class defaults.
#	- A slot is in use from show() until end() or its expiry timer, whichever
#	  comes first. The other one is then a no-op: each shown tooltip has its
#	  own _ActiveTooltip entry, and expiry only fires for the entry that
#	  scheduled it (the slot may already belong to a newer tooltip).
#	- Each show() gets a serial number. Callers that keep slot ids around
#	  pass it to end() so a reused slot is left alone.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Dedup dismissal (timer vs explicit end)
# 10/15/2026	Paul G. LeDuc				Add telemetry counters
# 10/17/2026	Paul G. LeDuc				Per-show serials for end()
# ---------------------------------------------------------------------------

from __future__ import annotations

import itertools
from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar, Literal, Mapping, Optional, Protocol, Union, runtime_checkable

from ezmenu.core.errors import TooltipCapacityError
from ezmenu.core.logging import get_menu_logger
from ezmenu.core.telemetry import Telemetry, get_telemetry
from ezmenu.tooltips.pool import TooltipSlotPool


log = get_menu_logger("tooltips")

TooltipMode = Literal["mouse", "absolute"]


@runtime_checkable
class TooltipRenderer(Protocol):
	"""
	What TooltipHandler needs from the display layer.

	cancel(handle) is optional; when missing, stale timers are ignored instead.
	"""

	def render(self, text: str, x: int, y: int, slot: int) -> None: ...
	def clear(self, slot: int) -> None: ...
	def cursor_position(self) -> tuple[int, int]: ...
	def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any: ...


@dataclass(frozen=True, slots=True)
class TooltipOptions:
	"""
	TooltipOptions

	mode:		"mouse" (cursor + offset) or "absolute" (x, y as given)
	x, y:		Screen position for "absolute"
	offset_x:	Horizontal offset from the cursor for "mouse"
	offset_y:	Vertical offset from the cursor for "mouse"
	duration:	Milliseconds before auto-dismiss; 0 keeps it until end().
				Negative values are treated as their absolute value.

	Unset fields (None) fall through to the next layer.
	"""
	mode: Optional[TooltipMode] = None
	x: Optional[int] = None
	y: Optional[int] = None
	offset_x: Optional[int] = None
	offset_y: Optional[int] = None
	duration: Optional[int] = None

	@classmethod
	def coerce(cls, value: "TooltipOptionsLike") -> "TooltipOptions":
		if value is None:
			return cls()
		if isinstance(value, TooltipOptions):
			return value
		known = {f.name for f in fields(cls)}
		unknown = set(value) - known
		if unknown:
			raise ValueError(f"Unknown tooltip options: {sorted(unknown)}")
		return cls(**dict(value))

	def merge(self, *overrides: "TooltipOptionsLike") -> "TooltipOptions":
		"""
		Return a copy with every non-None field of each override applied, in order.
		"""
		values = {f.name: getattr(self, f.name) for f in fields(self)}
		for layer in overrides:
			opts = TooltipOptions.coerce(layer)
			for f in fields(opts):
				val = getattr(opts, f.name)
				if val is not None:
					values[f.name] = val
		return TooltipOptions(**values)


TooltipOptionsLike = Union[TooltipOptions, Mapping[str, Any], None]


class _ActiveTooltip:
	__slots__ = ("slot", "serial", "text", "timer", "dismissed")

	def __init__(self, slot: int, serial: int, text: str) -> None:
		self.slot = slot
		self.serial = serial
		self.text = text
		self.timer: Any = None
		self.dismissed = False


class TooltipHandler:
	"""
	TooltipHandler

	Shows text near the cursor (or at absolute coordinates) in a slot
	borrowed from a TooltipSlotPool.
	"""

	DEFAULT_OPTIONS: ClassVar[TooltipOptions] = TooltipOptions(
		mode="mouse",
		x=None,
		y=None,
		offset_x=10,
		offset_y=10,
		duration=2000,
	)

	def __init__(
		self,
		renderer: TooltipRenderer,
		pool: TooltipSlotPool,
		*,
		defaults: TooltipOptionsLike = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._renderer = renderer
		self._pool = pool
		self._defaults = TooltipOptions.coerce(defaults)
		self._telemetry = telemetry if telemetry is not None else get_telemetry()
		self._active: dict[int, _ActiveTooltip] = {}
		self._serials = itertools.count(1)

	@property
	def pool(self) -> TooltipSlotPool:
		return self._pool

	@property
	def defaults(self) -> TooltipOptions:
		return self._defaults

	@defaults.setter
	def defaults(self, value: TooltipOptionsLike) -> None:
		self._defaults = TooltipOptions.coerce(value)

	def resolve_options(self, options: TooltipOptionsLike = None) -> TooltipOptions:
		return self.DEFAULT_OPTIONS.merge(self._defaults, options)

	def active_slots(self) -> list[int]:
		return list(self._active)

	def serial(self, slot: int) -> Optional[int]:
		"""
		Serial of the tooltip showing in slot, or None if the slot is free.
		"""
		entry = self._active.get(slot)
		return entry.serial if entry is not None else None

	def show(self, text: str, options: TooltipOptionsLike = None) -> int:
		"""
		Render text in a fresh slot and return the slot id.

		Raises:
			TooltipCapacityError: no slot is free (nothing is rendered).
			ValueError: "absolute" mode without x/y, or an unknown mode.
		"""
		opts = self.resolve_options(options)
		x, y = self._position(opts)

		try:
			slot = self._pool.acquire()
		except TooltipCapacityError:
			self._telemetry.counter("tooltip.capacity_exhausted")
			log.warning("Tooltip pool exhausted; dropping tooltip %r", text)
			raise

		entry = _ActiveTooltip(slot, next(self._serials), text)
		self._active[slot] = entry

		try:
			self._renderer.render(text, x, y, slot)
		except Exception:
			self._active.pop(slot, None)
			self._pool.release(slot)
			raise

		duration = abs(opts.duration or 0)
		if duration:
			entry.timer = self._renderer.schedule(duration, lambda: self._expire(entry))

		self._telemetry.counter("tooltip.shown", attrs={"mode": opts.mode})
		log.debug("Tooltip slot=%s at (%s, %s) duration=%sms: %r", slot, x, y, duration, text)
		return slot

	def end(self, slot: int, serial: Optional[int] = None) -> bool:
		"""
		Dismiss the tooltip in slot and release the slot.

		Returns False (and does nothing) if the slot is not showing a tooltip
		from this handler, or if serial is given and the slot now holds a
		different tooltip.
		"""
		entry = self._active.get(slot)
		if entry is None or (serial is not None and entry.serial != serial):
			log.debug("Tooltip slot=%s serial=%s already dismissed", slot, serial)
			return False

		self._cancel_timer(entry)
		self._dismiss(entry)
		return True

	def end_all(self) -> None:
		for slot in list(self._active):
			self.end(slot)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _position(self, opts: TooltipOptions) -> tuple[int, int]:
		if opts.mode == "absolute":
			if opts.x is None or opts.y is None:
				raise ValueError("Absolute tooltip position requires x and y")
			return int(opts.x), int(opts.y)

		if opts.mode == "mouse":
			cx, cy = self._renderer.cursor_position()
			return int(cx) + int(opts.offset_x or 0), int(cy) + int(opts.offset_y or 0)

		raise ValueError(f"Unknown tooltip mode: {opts.mode!r}")

	def _expire(self, entry: _ActiveTooltip) -> None:
		entry.timer = None
		if entry.dismissed or self._active.get(entry.slot) is not entry:
			return
		self._dismiss(entry)

	def _dismiss(self, entry: _ActiveTooltip) -> None:
		entry.dismissed = True
		self._active.pop(entry.slot, None)
		try:
			self._renderer.clear(entry.slot)
		finally:
			self._pool.release(entry.slot)
		log.debug("Tooltip slot=%s dismissed", entry.slot)

	def _cancel_timer(self, entry: _ActiveTooltip) -> None:
		if entry.timer is None:
			return
		cancel = getattr(self._renderer, "cancel", None)
		if callable(cancel):
			cancel(entry.timer)
		entry.timer = None
