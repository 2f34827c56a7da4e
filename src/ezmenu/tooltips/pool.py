# ---------------------------------------------------------------------------
# File: pool.py
# ---------------------------------------------------------------------------
# Description:
#	Bounded pool of tooltip slot ids.
#
# Notes:
#	- Slots are small positive integers, numbered from `start`.
#	- acquire() is LIFO: a released id is the next one handed out.
#	- An empty pool raises TooltipCapacityError; it never blocks or evicts.
#	- Releasing an id that is not in use raises ValueError.
#	- Pools with disjoint id ranges can share one renderer.
#	- get_default_pool() is for the composition root only.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Reject duplicate release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from ezmenu.core.errors import TooltipCapacityError


DEFAULT_POOL_SIZE = 20


class TooltipSlotPool:
	"""
	TooltipSlotPool

	Hands out slot ids for concurrently visible tooltips.
	"""

	def __init__(self, size: int = DEFAULT_POOL_SIZE, *, start: int = 1) -> None:
		if size < 1:
			raise ValueError("Tooltip pool size must be at least 1")
		if start < 1:
			raise ValueError("Tooltip slot ids start at 1 or higher")

		self._size = size
		self._start = start

		# Top of the stack is the end of the list; lowest id comes out first.
		self._free: list[int] = list(range(start + size - 1, start - 1, -1))
		self._in_use: set[int] = set()

	@property
	def size(self) -> int:
		return self._size

	@property
	def slot_range(self) -> range:
		return range(self._start, self._start + self._size)

	def available(self) -> int:
		return len(self._free)

	def in_use(self) -> frozenset[int]:
		return frozenset(self._in_use)

	def is_in_use(self, slot: int) -> bool:
		return slot in self._in_use

	def acquire(self) -> int:
		if not self._free:
			raise TooltipCapacityError(
				f"No free tooltip slots ({self._size} in use)"
			)
		slot = self._free.pop()
		self._in_use.add(slot)
		return slot

	def release(self, slot: int) -> None:
		if slot not in self._in_use:
			raise ValueError(f"Tooltip slot {slot} is not in use")
		self._in_use.remove(slot)
		self._free.append(slot)

	def __len__(self) -> int:
		return len(self._free)

	def __repr__(self) -> str:
		return f"<TooltipSlotPool size={self._size} free={len(self._free)}>"


# ---------------------------------------------------------------------------
# Process-wide default (composition root)
# ---------------------------------------------------------------------------

_default_pool: Optional[TooltipSlotPool] = None


def get_default_pool() -> TooltipSlotPool:
	global _default_pool

	if _default_pool is None:
		_default_pool = TooltipSlotPool()

	return _default_pool


def _reset_default_pool_for_tests() -> None:
	global _default_pool
	_default_pool = None
