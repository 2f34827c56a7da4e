# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for ezmenu (errors, config, logging, telemetry).
#
# Notes:
#	Keep this lightweight (no Tk imports). Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import MenuConfig
from .errors import (
	ActivationModeError,
	ItemNotFoundError,
	MenuError,
	NameConflictError,
	TooltipCapacityError,
	UnknownActionError,
)
from .logging import init_logging, get_logger, get_menu_logger
from .telemetry import Telemetry, init_telemetry, get_telemetry

__all__ = [
	"MenuConfig",
	"MenuError",
	"NameConflictError",
	"ItemNotFoundError",
	"UnknownActionError",
	"ActivationModeError",
	"TooltipCapacityError",
	"get_logger",
	"get_menu_logger",
	"init_logging",
	"Telemetry",
	"init_telemetry",
	"get_telemetry",
]
