# ---------------------------------------------------------------------------
# File: test_codec.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ctxmenu.menu.codec (dict <-> dataclass).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import json

from ctxmenu.menu.codec import config_from_dict, config_to_dict, item_from_dict
from ctxmenu.menu.defaults import build_default_config
from ctxmenu.menu.store import MenuOrganizer


def test_item_from_dict_accepts_camel_case_and_legacy_key():
	item = item_from_dict({
		"id": "x",
		"i18nKey": "menu.items.x",
		"groupId": "tools",
		"contextRules": [{"type": "url", "condition": "hide_when", "value": "a"}],
		"shortcut": {"key": "x", "modifiers": ["ctrl"]},
		"type": "checkbox",
		"iconUrl": "x.png",
	})

	assert item.translation_key == "menu.items.x"
	assert item.group_id == "tools"
	assert item.context_rules[0].condition == "hide_when"
	assert item.shortcut.modifiers == ("ctrl",)
	assert item.kind == "checkbox"
	assert item.icon_url == "x.png"


def test_default_config_survives_json():
	config = build_default_config()

	payload = json.loads(json.dumps(config_to_dict(config)))
	restored = config_from_dict(payload)

	assert [g.id for g in restored.groups] == [g.id for g in config.groups]
	assert restored.items == config.items
	assert payload["items"][0]["shortcut"] == "ctrl+shift+k"


def test_exported_store_reloads_into_fresh_store():
	s = MenuOrganizer()
	s.initialize(build_default_config())
	s.set_customization({"itemId": "about", "hidden": True, "customShortcut": "alt+a", "timestamp": 5})

	data = config_to_dict(s.export_config())
	other = MenuOrganizer()
	other.initialize(data)

	custom = other.get_customization("about")
	assert custom.hidden is True
	assert custom.custom_shortcut.key == "a"
	assert custom.timestamp == 5.0
	assert other.structure == s.structure
