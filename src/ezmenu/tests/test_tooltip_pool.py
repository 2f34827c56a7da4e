# ---------------------------------------------------------------------------
# File: test_tooltip_pool.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for TooltipSlotPool.
#
# Notes:
#   - Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial tests
# 10/15/2026	Paul G. LeDuc				Duplicate release + partition tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from ezmenu.core.errors import TooltipCapacityError
from ezmenu.tooltips import pool as pool_mod
from ezmenu.tooltips.pool import TooltipSlotPool, get_default_pool


def test_default_pool_has_twenty_slots():
	p = TooltipSlotPool()

	slots = [p.acquire() for _ in range(20)]

	assert slots == list(range(1, 21))
	assert p.available() == 0

	with pytest.raises(TooltipCapacityError):
		p.acquire()


def test_released_slot_is_next_acquired():
	p = TooltipSlotPool()
	a = p.acquire()
	b = p.acquire()
	c = p.acquire()

	p.release(b)
	assert p.acquire() == b

	p.release(a)
	p.release(c)
	assert p.acquire() == c
	assert p.acquire() == a


def test_release_after_exhaustion_allows_acquire():
	p = TooltipSlotPool(size=2)
	a = p.acquire()
	p.acquire()

	with pytest.raises(TooltipCapacityError):
		p.acquire()

	p.release(a)
	assert p.acquire() == a


def test_double_release_is_rejected():
	p = TooltipSlotPool(size=3)
	a = p.acquire()
	p.release(a)

	with pytest.raises(ValueError):
		p.release(a)

	# Pool is not corrupted: still exactly 3 distinct slots.
	assert sorted(p.acquire() for _ in range(3)) == [1, 2, 3]


def test_release_unknown_slot_is_rejected():
	p = TooltipSlotPool(size=3)
	with pytest.raises(ValueError):
		p.release(99)


def test_partitioned_pools_do_not_overlap():
	a = TooltipSlotPool(size=5, start=1)
	b = TooltipSlotPool(size=5, start=6)

	assert set(a.slot_range).isdisjoint(b.slot_range)
	assert b.acquire() == 6
	assert a.acquire() == 1


def test_in_use_tracking():
	p = TooltipSlotPool(size=4)
	s = p.acquire()

	assert p.is_in_use(s) is True
	assert p.in_use() == frozenset({s})
	assert len(p) == 3


def test_invalid_pool_arguments():
	with pytest.raises(ValueError):
		TooltipSlotPool(size=0)
	with pytest.raises(ValueError):
		TooltipSlotPool(start=0)


def test_default_pool_is_process_wide(monkeypatch):
	monkeypatch.setattr(pool_mod, "_default_pool", None)

	first = get_default_pool()
	assert get_default_pool() is first
	assert first.size == 20
