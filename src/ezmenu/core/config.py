# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration wrapper for ezmenu.
#
# Notes:
#	- MenuConfig is a thin read-only view over a plain dict.
#	- Keys are flat dotted strings ("menu.show_tooltips", "tooltip.duration").
#	- Anything with get(key, default) can stand in for MenuConfig.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Add typed helpers (get_bool/get_int)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class MenuConfig:
	"""
	Light wrapper for config options.
	"""
	options: Mapping[str, Any] | None = None

	@classmethod
	def coerce(cls, cfg: "MenuConfig | Mapping[str, Any] | None") -> "MenuConfig":
		if isinstance(cfg, MenuConfig):
			return cfg
		return cls(dict(cfg) if cfg is not None else None)

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)

	def get_bool(self, key: str, default: bool = False) -> bool:
		val = self.get(key, None)
		if val is None:
			return default
		if isinstance(val, str):
			return val.strip().lower() in ("1", "true", "yes", "on")
		return bool(val)

	def get_int(self, key: str, default: int = 0) -> int:
		val = self.get(key, None)
		if val is None:
			return default
		try:
			return int(val)
		except (TypeError, ValueError):
			return default
