# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Integration feature flags for ctxmenu.
#
# Notes:
#	- Frozen. Build one per MenuSystemIntegration.
#	- from_mapping() accepts snake_case or camelCase keys; unknown keys are
#	  ignored.
#	- get() lets the config be handed to cfg_get()-style readers
#	  (build_telemetry, init_logging).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Telemetry flags
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ctxmenu.core.config import camel_case, cfg_get


@dataclass(frozen=True, slots=True)
class IntegrationConfig:
	"""
	IntegrationConfig

	enable_i18n:					translate item titles when building menus
	enable_context_evaluation:		re-filter resolved items through the evaluator
	enable_shortcut_integration:	register shortcuts with the host
	enable_menu_registration:		register menu entries with the host
	enable_settings_sync:			accept update_from_settings()
	debug_mode:						verbose logging of facade operations
	performance_mode:				skip per-item explanations in build results
	locale:							initial translator locale (None -> "en")
	telemetry_enabled / telemetry_sink:	see ctxmenu.core.telemetry
	"""
	enable_i18n: bool = True
	enable_context_evaluation: bool = True
	enable_shortcut_integration: bool = True
	enable_menu_registration: bool = True
	enable_settings_sync: bool = True
	debug_mode: bool = False
	performance_mode: bool = False
	locale: Optional[str] = None
	telemetry_enabled: bool = False
	telemetry_sink: str = "null"

	@classmethod
	def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "IntegrationConfig":
		if data is None:
			return cls()
		if isinstance(data, IntegrationConfig):
			return data

		kwargs: dict[str, Any] = {}
		for f in fields(cls):
			value = cfg_get(data, f.name, camel_case(f.name))
			if value is None:
				continue
			kwargs[f.name] = str(value) if f.name in ("locale", "telemetry_sink") else bool(value)
		return cls(**kwargs)

	def get(self, key: str, default: Any = None) -> Any:
		return getattr(self, key, default)
