# ---------------------------------------------------------------------------
# File: test_config_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for MenuConfig and ezmenu.core.logging.
#
# Notes:
#	- init_logging() touches the root logger; the fixture restores its
#	  handlers and level and resets the module's init state.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from ezmenu.core.config import MenuConfig
from ezmenu.core.logging import (
	_reset_logging_for_tests,
	get_menu_logger,
	init_logging,
)


_KEEP_ROOT = {"logging.reset_root": False}


@pytest.fixture
def new_handlers():
	"""
	Yield a function returning the root handlers added since setup.
	"""
	root = logging.getLogger()
	saved_handlers = list(root.handlers)
	saved_level = root.level
	_reset_logging_for_tests()

	def added() -> list[logging.Handler]:
		return [h for h in root.handlers if h not in saved_handlers]

	try:
		yield added
	finally:
		for h in added():
			root.removeHandler(h)
			h.close()
		root.setLevel(saved_level)
		_reset_logging_for_tests()


# ---------------------------------------------------------------------------
# MenuConfig
# ---------------------------------------------------------------------------

def test_config_get_with_and_without_options():
	assert MenuConfig().get("menu.mode", 0) == 0
	assert MenuConfig({"menu.mode": 2}).get("menu.mode", 0) == 2


def test_config_coerce_passes_instances_through():
	cfg = MenuConfig({"a": 1})

	assert MenuConfig.coerce(cfg) is cfg
	assert MenuConfig.coerce({"a": 1}).get("a") == 1
	assert MenuConfig.coerce(None).get("a", "x") == "x"


@pytest.mark.parametrize("raw, expected", [
	("yes", True),
	("On", True),
	("0", False),
	("false", False),
	(1, True),
	(None, True),
])
def test_config_get_bool(raw, expected):
	cfg = MenuConfig({"flag": raw})

	assert cfg.get_bool("flag", default=True) is expected


def test_config_get_int_falls_back_on_garbage():
	cfg = MenuConfig({"n": "12", "bad": "twelve"})

	assert cfg.get_int("n") == 12
	assert cfg.get_int("bad", 7) == 7
	assert cfg.get_int("missing", 3) == 3


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def test_menu_logger_names():
	assert get_menu_logger().name == "ezmenu"
	assert get_menu_logger("controller").name == "ezmenu.controller"


def test_init_logging_is_idempotent(new_handlers):
	init_logging({**_KEEP_ROOT, "logging.level": "DEBUG"})
	init_logging({**_KEEP_ROOT, "logging.level": "DEBUG"})

	assert len(new_handlers()) == 1
	assert logging.getLogger().level == logging.DEBUG


def test_init_logging_reconfigures_on_change(new_handlers):
	init_logging({**_KEEP_ROOT, "logging.level": "DEBUG"})
	init_logging(MenuConfig({**_KEEP_ROOT, "logging.level": "WARNING"}))

	assert logging.getLogger().level == logging.WARNING
	assert new_handlers()[-1].level == logging.WARNING


def test_init_logging_legacy_keys_and_file(new_handlers, tmp_path):
	log_file = tmp_path / "logs" / "ezmenu.log"

	init_logging({
		"log_reset_root": False,
		"log_level": "INFO",
		"log_console": False,
		"log_file": str(log_file),
	})
	get_menu_logger("controller").info("hello from the menu")

	(handler,) = new_handlers()
	handler.flush()

	assert isinstance(handler, logging.FileHandler)
	assert "ezmenu.controller: hello from the menu" in log_file.read_text(encoding="utf-8")


def test_init_logging_unknown_level_defaults_to_info(new_handlers):
	init_logging({**_KEEP_ROOT, "logging.level": "chatty", "logging.console": False})

	assert logging.getLogger().level == logging.INFO
	assert new_handlers() == []
