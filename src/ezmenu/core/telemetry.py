# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry for ezmenu.
#
#   Menu controllers and tooltip handlers report:
#     - events   (menu.activate, menu.select)
#     - counters (tooltip.shown, tooltip.capacity_exhausted)
#     - timers   (menu.dispatch_ms)
#
# Notes:
#   - Backends are "sinks"; the default is NullSink (no-op).
#   - Calls are no-ops while disabled; sink errors are not caught.
#   - MemorySink backs tests and the "memory" sink option.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/14/2026	Paul G. LeDuc				Accept MenuConfig in init_telemetry
# 10/16/2026	Paul G. LeDuc				Sink table + "memory" sink
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any]


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes telemetry records to a logger at DEBUG level.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink for tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def metric_values(self, name: str) -> list[float]:
		return [m.value for m in self.metrics if m.name == name]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade. All methods are no-ops when disabled.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	@property
	def sink(self) -> TelemetrySink:
		return self._sink

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=attrs or {}))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a metric.

	The metric is emitted even when the timed block raises; the exception
	is not suppressed.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start: float = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		attrs = dict(self._attrs)
		if exc_type is not None:
			attrs["error"] = exc_type.__name__
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=attrs)


# ---------------------------------------------------------------------------
# Global helpers (composition root only)
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


_SINKS: dict[str, Callable[[Optional[logging.Logger]], Optional[TelemetrySink]]] = {
	"null": lambda _logger: NullSink(),
	"log": lambda logger: LogSink(logger) if logger is not None else None,
	"memory": lambda _logger: MemorySink(),
}


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize the global telemetry instance.

	Expected cfg keys:
		telemetry_enabled: bool
		telemetry_sink: "null" | "log" | "memory"

	"log" without a logger, or an unknown sink name, falls back to NullSink.
	"memory" lets a host inspect records via get_telemetry().sink.
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False)) if cfg is not None else False
	sink_name = str(cfg.get("telemetry_sink", "null")).strip().lower() if cfg is not None else "null"

	sink: Optional[TelemetrySink] = None
	if enabled:
		factory = _SINKS.get(sink_name)
		sink = factory(logger) if factory is not None else None

	_telemetry = Telemetry(enabled, sink if sink is not None else NullSink())
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance (disabled until init_telemetry()).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
