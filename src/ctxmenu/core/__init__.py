# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for ctxmenu (config helpers, logging, telemetry).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import ConfigView, cfg_get
from .logging import get_logger, get_menu_logger, init_logging
from .telemetry import MemorySink, NullSink, Telemetry, build_telemetry

__all__ = [
	"ConfigView",
	"cfg_get",
	"get_logger",
	"get_menu_logger",
	"init_logging",
	"MemorySink",
	"NullSink",
	"Telemetry",
	"build_telemetry",
]
