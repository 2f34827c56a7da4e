# ---------------------------------------------------------------------------
# File: compose.py
# ---------------------------------------------------------------------------
# Description:
#	Composition root for ezmenu: builds controllers and tooltip handlers
#	from configuration.
#
# Notes:
#	- This is the only place the process-wide tooltip pool is looked up.
#	  Library code receives its pool explicitly.
#	- Explicit keyword arguments win over cfg values.
#
#	Supported cfg keys:
#	- "menu.mode"            0/1/2 (ActivationMode)       (default: 0)
#	- "menu.case_sensitive"  bool                          (default: True)
#	- "menu.show_tooltips"   bool                          (default: True if a renderer is given)
#	- "tooltip.mode"         "mouse" | "absolute"
#	- "tooltip.x", "tooltip.y", "tooltip.offset_x", "tooltip.offset_y"
#	- "tooltip.duration"     milliseconds, 0 = until dismissed
#	- "tooltip.pool_size"    size for new_tooltip_pool() (default: 20)
#	- logging.* / telemetry_* keys (see init_ambient)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial coding / release
# 10/16/2026	Paul G. LeDuc				Add init_ambient (logging + telemetry)
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from ezmenu.core.config import MenuConfig
from ezmenu.core.logging import get_menu_logger, init_logging
from ezmenu.core.telemetry import Telemetry, init_telemetry
from ezmenu.menu.controller import MenuController
from ezmenu.menu.native import NativeMenu
from ezmenu.tooltips.handler import TooltipHandler, TooltipOptions, TooltipRenderer
from ezmenu.tooltips.pool import DEFAULT_POOL_SIZE, TooltipSlotPool, get_default_pool


ConfigLike = Optional[Union[MenuConfig, Mapping[str, Any]]]

_TOOLTIP_KEYS: tuple[str, ...] = ("mode", "x", "y", "offset_x", "offset_y", "duration")


def init_ambient(cfg: ConfigLike = None) -> Telemetry:
	"""
	Configure logging and global telemetry from cfg. Returns the telemetry.
	"""
	config = MenuConfig.coerce(cfg)
	init_logging(config)
	return init_telemetry(config, logger=get_menu_logger("telemetry"))


def tooltip_defaults(cfg: ConfigLike = None) -> TooltipOptions:
	"""
	Instance-level tooltip defaults from "tooltip.*" keys (unset keys stay None).
	"""
	config = MenuConfig.coerce(cfg)
	values: dict[str, Any] = {}
	for key in _TOOLTIP_KEYS:
		val = config.get(f"tooltip.{key}")
		if val is None:
			continue
		values[key] = val if key == "mode" else int(val)
	return TooltipOptions(**values)


def new_tooltip_pool(cfg: ConfigLike = None, *, start: int = 1) -> TooltipSlotPool:
	"""
	Build a private pool (e.g. to keep one subsystem's slots apart).
	"""
	config = MenuConfig.coerce(cfg)
	return TooltipSlotPool(config.get_int("tooltip.pool_size", DEFAULT_POOL_SIZE), start=start)


def create_tooltip_handler(
	renderer: TooltipRenderer,
	cfg: ConfigLike = None,
	*,
	pool: Optional[TooltipSlotPool] = None,
	telemetry: Optional[Telemetry] = None,
) -> TooltipHandler:
	return TooltipHandler(
		renderer,
		pool if pool is not None else get_default_pool(),
		defaults=tooltip_defaults(cfg),
		telemetry=telemetry,
	)


def create_menu(
	native: NativeMenu,
	cfg: ConfigLike = None,
	*,
	renderer: Optional[TooltipRenderer] = None,
	items: Iterable[Any] = (),
	controller_cls: type[MenuController] = MenuController,
	pool: Optional[TooltipSlotPool] = None,
	telemetry: Optional[Telemetry] = None,
	**kwargs: Any,
) -> MenuController:
	"""
	Build a controller over native, wiring a tooltip handler when a renderer is given.

	Remaining keyword arguments go to controller_cls.
	"""
	config = MenuConfig.coerce(cfg)

	tooltip_handler = kwargs.pop("tooltip_handler", None)
	if tooltip_handler is None and renderer is not None:
		tooltip_handler = create_tooltip_handler(renderer, config, pool=pool, telemetry=telemetry)

	kwargs.setdefault("mode", config.get_int("menu.mode", 0))
	kwargs.setdefault("case_sensitive", config.get_bool("menu.case_sensitive", True))
	kwargs.setdefault("show_tooltips", config.get_bool("menu.show_tooltips", tooltip_handler is not None))

	return controller_cls(
		native,
		items=items,
		tooltip_handler=tooltip_handler,
		telemetry=telemetry,
		**kwargs,
	)
