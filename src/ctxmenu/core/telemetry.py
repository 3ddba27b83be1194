# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry for ctxmenu.
#
#	Emits three shapes of signal:
#		- events	(menu.build_failed, host.registration_failed, ...)
#		- counters	(menu.hidden_items, host.menu_registered, ...)
#		- timers	(menu.build, reported in milliseconds)
#
# Notes:
#	- Backends are "sinks"; NullSink is the default.
#	- There is no process-wide instance. Whoever builds the integration
#	  facade owns its Telemetry and passes it in.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Replace global helpers with build_telemetry()
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from ctxmenu.core.config import cfg_get


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to a logger at DEBUG level.
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
	Keeps everything in lists. Used by tests and the CLI --stats output.
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

	def metric(self, name: str) -> Optional[TelemetryMetric]:
		for m in reversed(self.metrics):
			if m.name == name:
				return m
		return None

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry

	All methods are no-ops when disabled.
	"""

	def __init__(self, enabled: bool = False, sink: Optional[TelemetrySink] = None) -> None:
		self._enabled = enabled
		self._sink: TelemetrySink = sink if sink is not None else NullSink()

	@property
	def enabled(self) -> bool:
		return self._enabled

	@property
	def sink(self) -> TelemetrySink:
		return self._sink

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=dict(attrs or {})))

	def counter(self, name: str, value: float = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=dict(attrs or {})))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_Timer":
		return _Timer(self, name, dict(attrs or {}))


class _Timer:
	"""
	Context manager reporting elapsed milliseconds as a counter.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self.attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_Timer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		attrs = dict(self.attrs)
		if exc_type is not None:
			attrs["error"] = exc_type.__name__
		self._telemetry.counter(self._name, value=elapsed_ms, attrs=attrs)


def build_telemetry(cfg: Any | None = None, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Build a Telemetry instance from config.

	cfg keys:
		telemetry_enabled / telemetryEnabled:	bool
		telemetry_sink / telemetrySink:			"null" | "log" | "memory"
	"""
	enabled = bool(cfg_get(cfg, "telemetry_enabled", "telemetryEnabled", default=False))
	if not enabled:
		return Telemetry(False, NullSink())

	sink_name = str(cfg_get(cfg, "telemetry_sink", "telemetrySink", default="null")).lower()
	sink: TelemetrySink
	if sink_name == "log":
		sink = LogSink(logger or logging.getLogger("ctxmenu.telemetry"))
	elif sink_name == "memory":
		sink = MemorySink()
	else:
		sink = NullSink()

	return Telemetry(enabled=True, sink=sink)
