# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the config helpers and IntegrationConfig.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from ctxmenu.app.config import IntegrationConfig
from ctxmenu.core.config import ConfigView, camel_case, cfg_get


def test_cfg_get_first_present_key_wins():
	cfg = {"maxDepth": 4, "max_depth": None}

	assert cfg_get(cfg, "max_depth", "maxDepth") == 4
	assert cfg_get(cfg, "nope", default=7) == 7
	assert cfg_get(None, "max_depth", default="x") == "x"


def test_cfg_get_works_with_get_objects():
	view = ConfigView({"log_level": "DEBUG"})

	assert cfg_get(view, "logging.level", "log_level") == "DEBUG"
	assert ConfigView().get("anything", 3) == 3


def test_camel_case():
	assert camel_case("max_items_per_group") == "maxItemsPerGroup"
	assert camel_case("locale") == "locale"


def test_integration_config_from_camel_and_snake():
	cfg = IntegrationConfig.from_mapping({
		"enableI18n": False,
		"enable_shortcut_integration": False,
		"debugMode": 1,
		"locale": "de",
		"telemetrySink": "memory",
	})

	assert cfg.enable_i18n is False
	assert cfg.enable_shortcut_integration is False
	assert cfg.debug_mode is True
	assert cfg.enable_menu_registration is True
	assert cfg.locale == "de"
	assert cfg.telemetry_sink == "memory"
	assert cfg.get("telemetry_sink") == "memory"
	assert cfg.get("missing", "d") == "d"


def test_integration_config_passthrough():
	cfg = IntegrationConfig(performance_mode=True)

	assert IntegrationConfig.from_mapping(cfg) is cfg
	assert IntegrationConfig.from_mapping(None) == IntegrationConfig()
