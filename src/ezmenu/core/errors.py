# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Error types raised by ezmenu.
#
# Notes:
#	- Each error also derives from the closest builtin so callers that catch
#	  ValueError/KeyError/RuntimeError keep working.
#	- Errors raised inside selection or availability handlers are NOT wrapped.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations


class MenuError(Exception):
	"""
	Base class for ezmenu errors.
	"""


class NameConflictError(MenuError, ValueError):
	"""
	An item with the requested name already exists.
	"""

	def __init__(self, name: str) -> None:
		super().__init__(f"Menu item already exists: {name!r}")
		self.name = name


class ItemNotFoundError(MenuError, KeyError):
	"""
	No item is registered under the requested name.
	"""

	def __init__(self, name: str) -> None:
		super().__init__(name)
		self.name = name

	def __str__(self) -> str:
		return f"Menu item not found: {self.name!r}"


class UnknownActionError(MenuError, LookupError):
	"""
	A named action could not be resolved on the controller.
	"""

	def __init__(self, action: str) -> None:
		super().__init__(f"Unknown menu action: {action!r}")
		self.action = action


class ActivationModeError(MenuError, RuntimeError):
	"""
	activate() was called on a controller that is not a context menu.
	"""


class TooltipCapacityError(MenuError, RuntimeError):
	"""
	The tooltip slot pool has no free slots.
	"""
