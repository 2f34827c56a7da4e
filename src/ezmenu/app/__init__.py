# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Composition helpers for hosts embedding ezmenu.
# ---------------------------------------------------------------------------

from __future__ import annotations

from .compose import (
	create_menu,
	create_tooltip_handler,
	init_ambient,
	new_tooltip_pool,
	tooltip_defaults,
)

__all__ = [
	"create_menu",
	"create_tooltip_handler",
	"init_ambient",
	"new_tooltip_pool",
	"tooltip_defaults",
]
