# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ctxmenu.core.telemetry.
#
# Notes:
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# 10/09/2026	Paul G. LeDuc				build_telemetry sink selection
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from ctxmenu.core.telemetry import LogSink, MemorySink, NullSink, Telemetry, build_telemetry


def test_disabled_telemetry_drops_everything():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("menu.build_failed", {"error": "x"})
	t.counter("menu.hidden_items", 4)
	with t.timer("menu.build"):
		pass

	assert sink.events == []
	assert sink.metrics == []


def test_event_and_counter_reach_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("host.registration_failed", {"target": "menu"})
	t.counter("host.menu_registered", 7, {"context": "page"})

	assert sink.event_names() == ["host.registration_failed"]
	assert sink.events[0].attrs["target"] == "menu"
	assert sink.events[0].timestamp > 0.0

	m = sink.metric("host.menu_registered")
	assert m.value == 7.0
	assert m.attrs == {"context": "page"}


def test_timer_records_error_attr_and_reraises():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with pytest.raises(KeyError):
		with t.timer("menu.build", {"context": "all"}):
			raise KeyError("x")

	m = sink.metric("menu.build")
	assert m.value >= 0.0
	assert m.attrs == {"context": "all", "error": "KeyError"}


def test_memory_sink_lookup_returns_latest_and_clears():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("menu.hidden_items", 1)
	t.counter("menu.hidden_items", 3)

	assert sink.metric("menu.hidden_items").value == 3.0
	assert sink.metric("nope") is None

	sink.clear()
	assert sink.metrics == []


def test_build_telemetry_selects_sink():
	assert build_telemetry(None).enabled is False
	assert isinstance(build_telemetry({"telemetry_enabled": False, "telemetry_sink": "memory"}).sink, NullSink)

	memory = build_telemetry({"telemetryEnabled": True, "telemetrySink": "memory"})
	assert memory.enabled is True
	assert isinstance(memory.sink, MemorySink)

	log = build_telemetry({"telemetry_enabled": True, "telemetry_sink": "LOG"}, logging.getLogger("t"))
	assert isinstance(log.sink, LogSink)

	assert isinstance(build_telemetry({"telemetry_enabled": True, "telemetry_sink": "nope"}).sink, NullSink)


def test_log_sink_writes_debug_records(caplog):
	t = Telemetry(enabled=True, sink=LogSink(logging.getLogger("ctxmenu.telemetry.test")))

	with caplog.at_level(logging.DEBUG, logger="ctxmenu.telemetry.test"):
		t.event("menu.build_failed", {"error": "boom"})

	assert any("menu.build_failed" in r.getMessage() for r in caplog.records)
