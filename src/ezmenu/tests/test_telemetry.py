# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ezmenu.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#	- init_telemetry() replaces the global instance; each test restores a
#	  disabled one afterwards.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial tests
# 10/14/2026	Paul G. LeDuc				MenuConfig + LogSink coverage
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from ezmenu.core.config import MenuConfig
from ezmenu.core.telemetry import (
	LogSink,
	MemorySink,
	NullSink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


@pytest.fixture(autouse=True)
def _restore_global_telemetry():
	yield
	init_telemetry(None)


def test_disabled_telemetry_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("menu.select", {"name": "Open"})
	t.counter("tooltip.shown")

	with t.timer("menu.dispatch_ms"):
		pass

	assert t.enabled is False
	assert sink.events == []
	assert sink.metrics == []


def test_event_reaches_sink_with_timestamp():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("menu.activate", {"mode": "CONTROL"})

	assert sink.event_names() == ["menu.activate"]
	ev = sink.events[0]
	assert ev.attrs == {"mode": "CONTROL"}
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_counter_defaults_to_one():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("tooltip.shown", attrs={"mode": "mouse"})

	m = sink.metrics[0]
	assert (m.name, m.value, m.attrs) == ("tooltip.shown", 1.0, {"mode": "mouse"})


def test_timer_reports_error_and_does_not_swallow():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with pytest.raises(ZeroDivisionError):
		with t.timer("menu.dispatch_ms", {"name": "Divide"}):
			1 / 0

	m = sink.metrics[0]
	assert m.name == "menu.dispatch_ms"
	assert m.value >= 0.0
	assert m.attrs == {"name": "Divide", "error": "ZeroDivisionError"}


def test_memorysink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)
	t.event("x")
	t.counter("y")

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_log_sink_writes_debug_records(caplog):
	logger = logging.getLogger("ezmenu.telemetry.test")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger="ezmenu.telemetry.test"):
		t.event("menu.select", {"name": "Copy"})
		t.counter("tooltip.shown")

	messages = [r.getMessage() for r in caplog.records]
	assert any("menu.select" in m for m in messages)
	assert any("tooltip.shown" in m for m in messages)
	assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_get_telemetry_before_init_is_disabled():
	init_telemetry(None)

	t = get_telemetry()

	assert isinstance(t, Telemetry)
	assert t.enabled is False
	t.event("should.not.raise")


def test_init_telemetry_accepts_menu_config():
	logger = logging.getLogger("ezmenu.telemetry")

	t = init_telemetry(MenuConfig({"telemetry_enabled": True, "telemetry_sink": "log"}), logger)

	assert t is get_telemetry()
	assert t.enabled is True
	assert isinstance(t.sink, LogSink)


def test_init_telemetry_log_sink_without_logger_falls_back():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=None)

	assert t.enabled is True
	assert isinstance(t.sink, NullSink)


def test_init_telemetry_unknown_sink_falls_back():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "nope"})

	assert isinstance(t.sink, NullSink)
	t.counter("enabled.unknownsink")


def test_init_telemetry_memory_sink_collects_menu_records(native):
	from ezmenu.menu.controller import MenuController

	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "Memory"})
	ctl = MenuController(native)
	ctl.add("Open", lambda c, s: None)

	ctl.select("Open")

	assert isinstance(t.sink, MemorySink)
	assert t.sink.event_names() == ["menu.select"]
	assert len(t.sink.metric_values("menu.dispatch_ms")) == 1
