# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared test doubles and fixtures for ezmenu tests.
#
# Notes:
#	- FakeNativeMenu mirrors the NativeMenu contract in plain Python so the
#	  controller can be exercised without Tk.
#	- FakeRenderer records tooltip calls and runs timers on demand.
#	- tk_root skips the test when no display is available.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Add FakeTkMenu + FakeRenderer timers
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

import pytest

from ezmenu.core.errors import ItemNotFoundError, NameConflictError
from ezmenu.core.telemetry import MemorySink, Telemetry
from ezmenu.tooltips.handler import TooltipHandler
from ezmenu.tooltips.pool import TooltipSlotPool


# ---------------------------------------------------------------------------
# Native menu double
# ---------------------------------------------------------------------------

@dataclass
class FakeNativeEntry:
	name: str
	target: Any
	options: Any
	checked: bool = False
	enabled: bool = True
	icon: Any = None


class FakeNativeMenu:
	"""
	Plain-Python NativeMenu. Raises on unknown names like a real backend.
	"""

	def __init__(self, handle: str = "menu-1") -> None:
		self._handle = handle
		self.entries: list[FakeNativeEntry] = []
		self.shown_at: list[tuple[Any, Any]] = []
		self.fail_next: dict[str, Exception] = {}

	@property
	def handle(self) -> str:
		return self._handle

	def names(self) -> list[str]:
		return [e.name for e in self.entries]

	def entry(self, name: str) -> FakeNativeEntry:
		for e in self.entries:
			if e.name == name:
				return e
		raise ItemNotFoundError(name)

	def click(self, name: str) -> Any:
		"""
		Simulate the user picking an entry.
		"""
		e = self.entry(name)
		return e.target(e.name, self.names().index(e.name), self._handle)

	def _maybe_fail(self, op: str) -> None:
		ex = self.fail_next.pop(op, None)
		if ex is not None:
			raise ex

	def add_item(self, name: str, target: Any, options: Any = "") -> None:
		self._maybe_fail("add_item")
		if name in self.names():
			raise NameConflictError(name)
		self.entries.append(FakeNativeEntry(name, target, options))

	def insert_item(self, before: Any, name: str, target: Any, options: Any = "") -> None:
		self._maybe_fail("insert_item")
		if name in self.names():
			raise NameConflictError(name)
		index = self.names().index(self.entry(before).name) if isinstance(before, str) else before
		self.entries.insert(index, FakeNativeEntry(name, target, options))

	def delete_item(self, name: str) -> None:
		self._maybe_fail("delete_item")
		self.entries.remove(self.entry(name))

	def rename_item(self, old: str, new: str) -> None:
		self._maybe_fail("rename_item")
		self.entry(old).name = new

	def update_item(self, name: str, *, target: Any = None, options: Any = None) -> None:
		e = self.entry(name)
		if target is not None:
			e.target = target
		if options is not None:
			e.options = options

	def set_icon(self, name: str, icon: Any, **kwargs: Any) -> None:
		self.entry(name).icon = icon

	def check_item(self, name: str) -> None:
		self.entry(name).checked = True

	def uncheck_item(self, name: str) -> None:
		self.entry(name).checked = False

	def toggle_check(self, name: str) -> None:
		e = self.entry(name)
		e.checked = not e.checked

	def enable_item(self, name: str) -> None:
		self.entry(name).enabled = True

	def disable_item(self, name: str) -> None:
		self.entry(name).enabled = False

	def toggle_enable(self, name: str) -> None:
		e = self.entry(name)
		e.enabled = not e.enabled

	def show(self, x: Any = None, y: Any = None) -> None:
		self.shown_at.append((x, y))


# ---------------------------------------------------------------------------
# tk.Menu double (for TkNativeMenu)
# ---------------------------------------------------------------------------

@dataclass
class FakeTkEntry:
	kind: str
	attrs: dict[str, Any]


class FakeVar:
	def __init__(self) -> None:
		self.value: Any = None

	def set(self, value: Any) -> None:
		self.value = value

	def get(self) -> Any:
		return self.value


class FakeTkMenu:
	"""
	Minimal stand-in for tk.Menu: records entries by Tk index.
	"""

	def __init__(self, path: str = ".!menu", pointer: tuple[int, int] = (0, 0)) -> None:
		self.path = path
		self.pointer = pointer
		self.entries: list[FakeTkEntry] = []
		self.popups: list[tuple[int, int]] = []
		self.grab_released = 0
		self.fail_popup: Exception | None = None

	def __str__(self) -> str:
		return self.path

	def add_checkbutton(self, **kwargs: Any) -> None:
		self.entries.append(FakeTkEntry("check", dict(kwargs)))

	def add_cascade(self, **kwargs: Any) -> None:
		self.entries.append(FakeTkEntry("cascade", dict(kwargs)))

	def insert_checkbutton(self, index: int, **kwargs: Any) -> None:
		self.entries.insert(index, FakeTkEntry("check", dict(kwargs)))

	def insert_cascade(self, index: int, **kwargs: Any) -> None:
		self.entries.insert(index, FakeTkEntry("cascade", dict(kwargs)))

	def delete(self, index: int) -> None:
		del self.entries[index]

	def entryconfigure(self, index: int, **kwargs: Any) -> None:
		self.entries[index].attrs.update(kwargs)

	def labels(self) -> list[str]:
		return [e.attrs["label"] for e in self.entries]

	def winfo_pointerxy(self) -> tuple[int, int]:
		return self.pointer

	def tk_popup(self, x: int, y: int) -> None:
		if self.fail_popup is not None:
			raise self.fail_popup
		self.popups.append((x, y))

	def grab_release(self) -> None:
		self.grab_released += 1


# ---------------------------------------------------------------------------
# Tooltip renderer double
# ---------------------------------------------------------------------------

class FakeRenderer:
	def __init__(self, cursor: tuple[int, int] = (0, 0)) -> None:
		self.cursor = cursor
		self.rendered: dict[int, tuple[str, int, int]] = {}
		self.history: list[tuple[str, int, int, int]] = []
		self.cleared: list[int] = []
		self.timers: dict[int, tuple[int, Callable[[], None]]] = {}
		self.cancelled: list[int] = []
		self._next_timer = 0

	def render(self, text: str, x: int, y: int, slot: int) -> None:
		self.rendered[slot] = (text, x, y)
		self.history.append((text, x, y, slot))

	def clear(self, slot: int) -> None:
		self.rendered.pop(slot, None)
		self.cleared.append(slot)

	def cursor_position(self) -> tuple[int, int]:
		return self.cursor

	def schedule(self, delay_ms: int, callback: Callable[[], None]) -> int:
		self._next_timer += 1
		self.timers[self._next_timer] = (delay_ms, callback)
		return self._next_timer

	def cancel(self, handle: int) -> None:
		self.timers.pop(handle, None)
		self.cancelled.append(handle)

	def fire(self, handle: int) -> None:
		_delay, callback = self.timers.pop(handle)
		callback()

	def fire_all(self) -> None:
		for handle in list(self.timers):
			self.fire(handle)


class NoCancelRenderer(FakeRenderer):
	"""
	Renderer without cancel(): stale timers still fire.
	"""

	cancel = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def native() -> FakeNativeMenu:
	return FakeNativeMenu()


@pytest.fixture
def make_native() -> Callable[..., FakeNativeMenu]:
	return FakeNativeMenu


@pytest.fixture
def tk_menu() -> FakeTkMenu:
	return FakeTkMenu(pointer=(300, 400))


@pytest.fixture
def renderer() -> FakeRenderer:
	return FakeRenderer(cursor=(10, 20))


@pytest.fixture
def no_cancel_renderer() -> NoCancelRenderer:
	return NoCancelRenderer(cursor=(10, 20))


@pytest.fixture
def pool() -> TooltipSlotPool:
	return TooltipSlotPool()


@pytest.fixture
def telemetry() -> tuple[Telemetry, MemorySink]:
	sink = MemorySink()
	return Telemetry(enabled=True, sink=sink), sink


@pytest.fixture
def tooltips(renderer: FakeRenderer, pool: TooltipSlotPool) -> TooltipHandler:
	return TooltipHandler(renderer, pool)


@pytest.fixture
def tk_root() -> Iterator[Any]:
	tk = pytest.importorskip("tkinter")
	try:
		root = tk.Tk()
	except tk.TclError:
		pytest.skip("Tk display not available")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()
