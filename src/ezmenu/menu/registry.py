# ---------------------------------------------------------------------------
# File: registry.py
# ---------------------------------------------------------------------------
# Description:
#	Ordered, name-keyed store of MenuItem objects.
#
# Notes:
#	- One registry per MenuController; never shared.
#	- Case sensitivity is chosen at construction. It can only be changed
#	  while the registry is empty.
#	- Case-insensitive keys compare with str.casefold(); the item keeps its
#	  own spelling.
#	- Iteration is insertion order. A renamed item is re-inserted, so it
#	  moves to the end.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Add case-insensitive keys
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterator, Optional

from ezmenu.core.errors import ItemNotFoundError
from ezmenu.menu.items import MenuItem


class ItemRegistry:
	"""
	ItemRegistry

	Stores menu items by name and preserves insertion order.
	"""

	def __init__(self, *, case_sensitive: bool = True) -> None:
		self._case_sensitive = case_sensitive
		self._items: dict[str, MenuItem] = {}

	@property
	def case_sensitive(self) -> bool:
		return self._case_sensitive

	@case_sensitive.setter
	def case_sensitive(self, value: bool) -> None:
		if value == self._case_sensitive:
			return
		if self._items:
			raise RuntimeError("Cannot change case sensitivity of a non-empty registry")
		self._case_sensitive = value

	def key(self, name: str) -> str:
		return name if self._case_sensitive else name.casefold()

	def set(self, name: str, item: MenuItem) -> None:
		if not name:
			raise ValueError("Item name must be a non-empty string")
		self._items[self.key(name)] = item

	def get(self, name: str) -> MenuItem:
		item = self._items.get(self.key(name))
		if item is None:
			raise ItemNotFoundError(name)
		return item

	def find(self, name: str) -> Optional[MenuItem]:
		return self._items.get(self.key(name))

	def has(self, name: str) -> bool:
		return self.key(name) in self._items

	def delete(self, name: str) -> MenuItem:
		try:
			return self._items.pop(self.key(name))
		except KeyError:
			raise ItemNotFoundError(name) from None

	def names(self) -> list[str]:
		return [item.name for item in self._items.values()]

	def items(self) -> list[MenuItem]:
		return list(self._items.values())

	def clear(self) -> None:
		self._items.clear()

	def __contains__(self, name: object) -> bool:
		return isinstance(name, str) and self.has(name)

	def __iter__(self) -> Iterator[MenuItem]:
		return iter(list(self._items.values()))

	def __len__(self) -> int:
		return len(self._items)
