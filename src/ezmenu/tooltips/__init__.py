# ---------------------------------------------------------------------------
# File: tooltips/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public tooltip package surface for ezmenu.
#
# Notes:
#	- TkTooltipRenderer is exported lazily so the pool/handler can be used
#	  without importing ttkthemes.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .pool import DEFAULT_POOL_SIZE, TooltipSlotPool, get_default_pool
from .handler import TooltipHandler, TooltipOptions, TooltipRenderer

__all__ = [
	"DEFAULT_POOL_SIZE",
	"TooltipSlotPool",
	"get_default_pool",
	"TooltipHandler",
	"TooltipOptions",
	"TooltipRenderer",
	"TkTooltipRenderer",
]


def __getattr__(name: str) -> Any:
	if name == "TkTooltipRenderer":
		from .tk_renderer import TkTooltipRenderer
		return TkTooltipRenderer
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if TYPE_CHECKING:
	from .tk_renderer import TkTooltipRenderer
