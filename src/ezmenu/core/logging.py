# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for ezmenu (stdlib logging).
#
# Notes:
#	- Library modules only ask for loggers (get_menu_logger); they never
#	  configure handlers themselves.
#	- init_logging() is for the host/composition root. It is idempotent and
#	  only reconfigures when the resolved settings change.
#
#	Supported cfg keys (dotted key first, legacy alias second):
#	- "logging.level"      / "log_level"       (default: "INFO")
#	- "logging.console"    / "log_console"     (default: True)
#	- "logging.file"       / "log_file"        (default: None)
#	- "logging.file_mode"  / "log_file_mode"   (default: "a")
#	- "logging.reset_root" / "log_reset_root"  (default: True)
#	- "logging.format"     / "log_format"      (default: standard format)
#	- "logging.datefmt"    / "log_datefmt"     (default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Table-driven cfg lookup + get_menu_logger
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


LOGGER_BASE = "ezmenu"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# setting -> (dotted key, legacy key, default)
_SETTINGS: dict[str, tuple[str, str, Any]] = {
	"level":		("logging.level", "log_level", "INFO"),
	"console":		("logging.console", "log_console", True),
	"file":			("logging.file", "log_file", None),
	"file_mode":	("logging.file_mode", "log_file_mode", "a"),
	"reset_root":	("logging.reset_root", "log_reset_root", True),
	"format":		("logging.format", "log_format", DEFAULT_FORMAT),
	"datefmt":		("logging.datefmt", "log_datefmt", "%Y-%m-%d %H:%M:%S"),
}


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_menu_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a logger under the ezmenu namespace.

	Examples:
		get_menu_logger()              -> ezmenu
		get_menu_logger("controller")  -> ezmenu.controller
		get_menu_logger("tooltips")    -> ezmenu.tooltips
	"""
	if component:
		return logging.getLogger(f"{LOGGER_BASE}.{component}")
	return logging.getLogger(LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure root logging from cfg.

	Safe to call repeatedly; handlers are only rebuilt when the resolved
	settings differ from the previous call.

	Args:
		cfg:
			Any object that supports cfg.get(key, default) (e.g., MenuConfig) or a dict-like.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	settings = {name: _lookup(cfg, *spec) for name, spec in _SETTINGS.items()}

	level = _coerce_level(settings["level"])
	log_file = str(settings["file"]) if settings["file"] else None
	file_mode = _coerce_file_mode(settings["file_mode"])

	signature: tuple[Any, ...] = (
		level,
		bool(settings["console"]),
		log_file,
		file_mode,
		bool(settings["reset_root"]),
		str(settings["format"]),
		str(settings["datefmt"]),
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	root = logging.getLogger()
	root.setLevel(level)

	if settings["reset_root"]:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=str(settings["format"]), datefmt=str(settings["datefmt"]))

	if settings["console"]:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str) -> Any:
	"""
	Return cfg[key] or None. Accepts cfg.get() objects and plain mappings.
	"""
	if cfg is None:
		return None

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, None)

	try:
		return cfg[key]  # type: ignore[index]
	except (KeyError, IndexError, TypeError):
		return None


def _lookup(cfg: Any | None, key: str, legacy_key: str, default: Any) -> Any:
	val = _cfg_get(cfg, key)
	if val is None:
		val = _cfg_get(cfg, legacy_key)
	return default if val is None else val


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		found = logging.getLevelName(val)
		return found if isinstance(found, int) else logging.INFO

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only "a" or "w"; anything else appends.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (intended for unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
