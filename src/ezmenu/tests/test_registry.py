# ---------------------------------------------------------------------------
# File: test_registry.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for ItemRegistry.
#
# Notes:
#   - Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial tests
# 10/13/2026	Paul G. LeDuc				Add case-insensitive coverage
# ---------------------------------------------------------------------------

import pytest

from ezmenu.core.errors import ItemNotFoundError
from ezmenu.menu.items import MenuItem
from ezmenu.menu.registry import ItemRegistry


def _item(name: str) -> MenuItem:
	return MenuItem(name, lambda ctl, sel: None)


def test_set_get_has_and_order():
	reg = ItemRegistry()
	a, b, c = _item("Open"), _item("Save"), _item("Close")

	reg.set("Open", a)
	reg.set("Save", b)
	reg.set("Close", c)

	assert reg.get("Save") is b
	assert reg.has("Open") is True
	assert "Close" in reg
	assert reg.names() == ["Open", "Save", "Close"]
	assert [i.name for i in reg] == ["Open", "Save", "Close"]
	assert len(reg) == 3


def test_get_missing_raises_item_not_found():
	reg = ItemRegistry()

	with pytest.raises(ItemNotFoundError) as ex:
		reg.get("nope")

	assert ex.value.name == "nope"
	assert isinstance(ex.value, KeyError)
	assert reg.find("nope") is None
	assert reg.has("nope") is False


def test_set_replaces_existing_in_place():
	reg = ItemRegistry()
	reg.set("A", _item("A"))
	reg.set("B", _item("B"))

	replacement = _item("A")
	reg.set("A", replacement)

	assert reg.get("A") is replacement
	assert reg.names() == ["A", "B"]


def test_delete_removes_and_returns_item():
	reg = ItemRegistry()
	item = _item("A")
	reg.set("A", item)

	assert reg.delete("A") is item
	assert "A" not in reg

	with pytest.raises(ItemNotFoundError):
		reg.delete("A")


def test_case_sensitive_by_default():
	reg = ItemRegistry()
	reg.set("Copy", _item("Copy"))

	assert reg.has("Copy") is True
	assert reg.has("copy") is False


def test_case_insensitive_lookup_keeps_original_spelling():
	reg = ItemRegistry(case_sensitive=False)
	item = _item("Copy")
	reg.set("Copy", item)

	assert reg.get("COPY") is item
	assert "copy" in reg
	assert reg.names() == ["Copy"]

	reg.delete("cOpY")
	assert len(reg) == 0


def test_case_sensitivity_locked_once_items_exist():
	reg = ItemRegistry()
	reg.case_sensitive = False		# empty: allowed
	assert reg.case_sensitive is False

	reg.set("A", _item("A"))
	with pytest.raises(RuntimeError):
		reg.case_sensitive = True

	# Setting the same value is a no-op
	reg.case_sensitive = False


def test_empty_name_rejected():
	reg = ItemRegistry()
	with pytest.raises(ValueError):
		reg.set("", _item("x"))


def test_contains_non_string_is_false():
	reg = ItemRegistry()
	reg.set("1", _item("1"))
	assert 1 not in reg
