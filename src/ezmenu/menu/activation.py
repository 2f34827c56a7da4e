# ---------------------------------------------------------------------------
# File: activation.py
# ---------------------------------------------------------------------------
# Description:
#	Activation modes, activation tokens, and the selection record handed to
#	menu item handlers.
#
# Notes:
#	- An ActivationToken captures the UI context of one context-menu request
#	  and is consumed by exactly one selection dispatch.
#	- Mode NONE never produces tokens.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
	from ezmenu.menu.items import MenuItem


class ActivationMode(IntEnum):
	"""
	How the controller is wired to the host.

	NONE:		plain menu (menubar/popup); handlers get (controller, selection)
	CONTROL:	context menu of a single control; activate(control, item, right_click, x, y)
	WINDOW:		context menu of a window; activate(window, control, item, right_click, x, y)
	"""
	NONE = 0
	CONTROL = 1
	WINDOW = 2


@dataclass(frozen=True, slots=True)
class ActivationToken:
	"""
	ActivationToken

	control:		Control the menu was requested on (may be None for window-level requests)
	window:			Window the control lives in (WINDOW mode only)
	item:			List/tree entry under the cursor, if any
	is_right_click:	True for mouse requests, False for keyboard (Shift+F10 / Menu key)
	x, y:			Screen coordinates the menu was shown at
	"""
	control: Any = None
	window: Any = None
	item: Any = None
	is_right_click: bool = False
	x: Optional[int] = None
	y: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Selection:
	"""
	Selection

	name:		Selected item name
	position:	Position reported by the native menu (0-based, may be None)
	menu:		Native menu handle that reported the selection
	item:		The registered MenuItem
	"""
	name: str
	position: Any
	menu: Any
	item: "MenuItem"
