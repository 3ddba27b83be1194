# ---------------------------------------------------------------------------
# File: test_integration.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for ctxmenu.app.integration (MenuSystemIntegration).
#
# Notes:
#	- Async tests via pytest-asyncio.
#	- Host registrars are AsyncMock / InMemoryRegistrar; no real host.
#	- Telemetry assertions use MemorySink.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial tests
# 10/09/2026	Paul G. LeDuc				Telemetry + registration failure coverage
# 10/12/2026	Paul G. LeDuc				Bad customization priority from settings/import
# ---------------------------------------------------------------------------

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from ctxmenu.app.integration import MenuSystemIntegration
from ctxmenu.core.telemetry import MemorySink, Telemetry
from ctxmenu.menu.errors import MenuErrorType, MenuOrganizationError
from ctxmenu.menu.types import MenuItem
from ctxmenu.services.host import InMemoryRegistrar


TOOLS_CONFIG = {
	"groups": [{"id": "tools", "name": "Tools", "priority": 5}],
	"items": [
		{"id": "export", "groupId": "tools", "priority": 10, "translationKey": "menu.export", "title": "Export"},
		{"id": "import", "groupId": "tools", "priority": 3, "translationKey": "menu.import"},
	],
}

SESSIONS_ON = {"features": {"sessions": {"enabled": True}}}


def _telemetry() -> tuple[Telemetry, MemorySink]:
	sink = MemorySink()
	return Telemetry(enabled=True, sink=sink), sink


@pytest.mark.asyncio
async def test_initialize_loads_default_catalogue():
	integration = MenuSystemIntegration()

	await integration.initialize()

	assert integration.is_initialized() is True
	assert integration.store.get_item("open-popup") is not None
	assert integration.translator.is_initialized() is True


@pytest.mark.asyncio
async def test_build_menu_translates_and_orders():
	integration = MenuSystemIntegration()
	await integration.initialize()

	result = await integration.build_menu_for_context({"pageUrl": "https://example.com", "tabCount": 4}, SESSIONS_ON)

	assert result.success is True
	ids = [i.id for i in result.visible_items]
	assert ids[0] == "open-popup"
	assert "capture-tabs" in ids
	assert "show-sessions" in ids
	priorities = [i.priority for i in result.menu_items]
	assert priorities == sorted(priorities, reverse=True)

	by_id = {i.id: i for i in result.visible_items}
	assert by_id["open-popup"].title == "Open TabKiller"
	assert by_id["open-popup"].description == "Open the TabKiller popup window"
	assert result.context.browser_type == "chrome"
	assert result.context.tab_count == 4


@pytest.mark.asyncio
async def test_build_menu_rules_hide_items_for_context():
	integration = MenuSystemIntegration()
	await integration.initialize()

	result = await integration.build_menu_for_context({"pageUrl": "https://example.com", "tabCount": 1})
	ids = {i.id for i in result.visible_items}

	# single tab + sessions feature off
	assert "capture-tabs" not in ids
	assert "start-session" not in ids
	assert "save-tab" in ids


@pytest.mark.asyncio
async def test_build_menu_regroups_by_context_kind():
	integration = MenuSystemIntegration()
	await integration.initialize()

	result = await integration.build_menu_for_context({"pageUrl": "chrome-extension://abc/options.html"})
	ids = {i.id for i in result.visible_items}

	# tab-actions is a page-only group
	assert "close-tab" in {i.id for i in result.menu_items}
	assert "close-tab" not in ids
	assert "open-settings" in ids


@pytest.mark.asyncio
async def test_build_menu_never_raises_when_not_initialized():
	integration = MenuSystemIntegration()

	result = await integration.build_menu_for_context({"pageUrl": "https://x"})

	assert result.success is False
	assert result.menu_items == ()
	assert result.visible_items == ()
	assert result.groups == ()
	assert "not initialized" in result.error


@pytest.mark.asyncio
async def test_build_menu_failure_is_flagged_and_counted():
	telemetry, sink = _telemetry()
	integration = MenuSystemIntegration(telemetry=telemetry)
	await integration.initialize(TOOLS_CONFIG)

	# failures inside a single rule are contained, so break the evaluator itself
	integration.evaluator.evaluate_item = MagicMock(side_effect=RuntimeError("broken"))  # type: ignore[method-assign]

	result = await integration.build_menu_for_context({})

	assert result.success is False
	assert result.visible_items == ()
	assert "broken" in result.error
	assert "menu.build_failed" in sink.event_names()


@pytest.mark.asyncio
async def test_build_menu_emits_timer_and_hidden_counter():
	telemetry, sink = _telemetry()
	integration = MenuSystemIntegration(telemetry=telemetry)
	await integration.initialize(TOOLS_CONFIG)
	await integration.customize_item({"itemId": "import", "hidden": True})

	result = await integration.build_menu_for_context({})

	assert [i.id for i in result.visible_items] == ["export"]
	assert sink.metric("menu.build") is not None
	assert sink.metric("menu.hidden_items").value == 1


@pytest.mark.asyncio
async def test_translation_falls_back_to_title_then_key():
	integration = MenuSystemIntegration()
	await integration.initialize(TOOLS_CONFIG)

	result = await integration.build_menu_for_context({})
	titles = {i.id: i.title for i in result.visible_items}

	assert titles == {"export": "Export", "import": "menu.import"}
	assert integration.missing_translation_keys() == ["menu.export", "menu.import"]


@pytest.mark.asyncio
async def test_custom_name_wins_over_translation():
	integration = MenuSystemIntegration()
	await integration.initialize()
	await integration.customize_item({"itemId": "about", "customName": "Credits"})

	result = await integration.build_menu_for_context({})

	assert {i.id: i.title for i in result.visible_items}["about"] == "Credits"


@pytest.mark.asyncio
async def test_performance_mode_skips_structure():
	integration = MenuSystemIntegration(config={"performanceMode": True, "enableI18n": False})
	await integration.initialize(TOOLS_CONFIG)

	result = await integration.build_menu_for_context({})

	assert result.success is True
	assert result.structure is None
	assert result.visible_items[1].title is None


@pytest.mark.asyncio
async def test_update_from_settings_requires_initialize():
	integration = MenuSystemIntegration()

	with pytest.raises(RuntimeError):
		await integration.update_from_settings({"maxDepth": 2})


@pytest.mark.asyncio
async def test_update_from_settings_merges_structure_and_customizations():
	integration = MenuSystemIntegration()
	await integration.initialize(TOOLS_CONFIG)

	await integration.update_from_settings({
		"maxItemsPerGroup": 4,
		"compactMode": True,
		"menuCustomizations": [
			{"itemId": "export", "hidden": False, "customShortcut": "ctrl+shift+K", "userModified": True, "timestamp": 1.0},
		],
	})

	config = await integration.get_current_config()
	assert config.structure.max_items_per_group == 4
	assert config.structure.compact_mode is True
	assert config.structure.max_depth == 3

	(custom,) = config.customizations
	assert custom.custom_shortcut.key == "K"
	assert custom.custom_shortcut.modifiers == ("ctrl", "shift")
	assert [g.id for g in config.groups] == ["tools"]


@pytest.mark.asyncio
async def test_bad_customization_priority_is_rejected_and_menu_still_builds():
	integration = MenuSystemIntegration()
	await integration.initialize(TOOLS_CONFIG)

	with pytest.raises(MenuOrganizationError) as ei:
		await integration.update_from_settings({
			"maxDepth": 2,
			"menuCustomizations": [{"itemId": "export", "priority": "7"}],
		})
	assert ei.value.type == MenuErrorType.INVALID_STRUCTURE

	bad = dict(TOOLS_CONFIG, customizations=[{"itemId": "import", "priority": 5000}])
	with pytest.raises(MenuOrganizationError):
		await integration.import_configuration(bad)

	assert integration.store.structure.max_depth == 3
	assert integration.store.get_customizations() == []

	result = await integration.build_menu_for_context({})
	assert result.success is True
	assert [i.id for i in result.visible_items] == ["export", "import"]


@pytest.mark.asyncio
async def test_settings_sync_disabled_ignores_update():
	integration = MenuSystemIntegration(config={"enable_settings_sync": False})
	await integration.initialize(TOOLS_CONFIG)

	await integration.update_from_settings({"maxDepth": 1})

	assert integration.store.structure.max_depth == 3


@pytest.mark.asyncio
async def test_mutations_propagate_store_errors():
	integration = MenuSystemIntegration()
	await integration.initialize(TOOLS_CONFIG)

	with pytest.raises(MenuOrganizationError) as ei:
		await integration.add_custom_menu_item({"id": "x", "groupId": "missing", "translationKey": "k"})
	assert ei.value.type == MenuErrorType.MISSING_GROUP

	with pytest.raises(MenuOrganizationError):
		await integration.remove_menu_group("tools")

	await integration.add_custom_menu_group({"id": "extra", "name": "Extra"})
	await integration.add_custom_menu_item({"id": "x", "groupId": "extra", "translationKey": "k"})
	await integration.remove_menu_item("x")
	await integration.remove_menu_group("extra")

	assert integration.store.get_group("extra") is None


@pytest.mark.asyncio
async def test_export_import_round_trip_and_reset():
	integration = MenuSystemIntegration()
	await integration.initialize(TOOLS_CONFIG)
	await integration.apply_customizations([{"itemId": "import", "hidden": True}])

	exported = await integration.export_configuration()

	other = MenuSystemIntegration()
	await other.initialize()
	await other.import_configuration(exported)

	result = await other.build_menu_for_context({})
	assert [i.id for i in result.visible_items] == ["export"]

	await other.reset_to_defaults()
	result = await other.build_menu_for_context({})
	assert [i.id for i in result.visible_items] == ["export", "import"]


@pytest.mark.asyncio
async def test_register_with_context_menu_accepts_async_registrar():
	registrar = MagicMock()
	registrar.register_menu_items = AsyncMock()
	telemetry, sink = _telemetry()

	integration = MenuSystemIntegration(menu_registrar=registrar, telemetry=telemetry)
	await integration.initialize(TOOLS_CONFIG)
	built = await integration.build_menu_for_context({})

	ok = await integration.register_with_context_menu(built.visible_items, built.context)

	assert ok is True
	registrar.register_menu_items.assert_awaited_once()
	(entries,) = registrar.register_menu_items.await_args.args
	assert [e.id for e in entries] == ["export", "import"]
	assert entries[0].parent_id == "tools"
	assert sink.metric("host.menu_registered").value == 2


@pytest.mark.asyncio
async def test_registration_failure_is_logged_not_raised():
	registrar = MagicMock()
	registrar.register_menu_items = AsyncMock(side_effect=RuntimeError("host down"))
	registrar.register_commands = MagicMock(side_effect=RuntimeError("host down"))
	telemetry, sink = _telemetry()

	integration = MenuSystemIntegration(menu_registrar=registrar, shortcut_registrar=registrar, telemetry=telemetry)
	await integration.initialize()

	items = integration.store.get_items()
	assert await integration.register_with_context_menu(items) is False
	assert await integration.register_shortcuts(items) is False
	assert sink.event_names().count("host.registration_failed") == 2


@pytest.mark.asyncio
async def test_register_shortcuts_with_sync_registrar():
	host = InMemoryRegistrar()
	integration = MenuSystemIntegration(shortcut_registrar=host)
	await integration.initialize()

	ok = await integration.register_shortcuts(integration.store.get_items())

	assert ok is True
	ids = {c.id for c in host.commands}
	assert "open-popup" in ids
	assert "about" not in ids
	assert all(c.default_shortcut is not None for c in host.commands)


@pytest.mark.asyncio
async def test_registration_disabled_by_config():
	host = InMemoryRegistrar()
	integration = MenuSystemIntegration(
		menu_registrar=host,
		shortcut_registrar=host,
		config={"enableMenuRegistration": False, "enableShortcutIntegration": False},
	)
	await integration.initialize()

	items = integration.store.get_items()
	assert await integration.register_with_context_menu(items) is False
	assert await integration.register_shortcuts(items) is False
	assert host.calls == 0


@pytest.mark.asyncio
async def test_shortcut_handler_calls_on_activate():
	activated: list[object] = []
	host = InMemoryRegistrar()
	integration = MenuSystemIntegration(shortcut_registrar=host)
	await integration.initialize(TOOLS_CONFIG)

	item = MenuItem("run", "menu.run", shortcut=None, on_activate=activated.append)
	await integration.add_custom_menu_item(item)
	await integration.update_menu_item("run", {"shortcut": "ctrl+r"})

	await integration.register_shortcuts(integration.store.get_items())
	(command,) = host.commands
	await command.handler("run")

	assert activated == [{"menu_item_id": "run"}]


@pytest.mark.asyncio
async def test_destroy_then_initialize_again():
	integration = MenuSystemIntegration()
	await integration.initialize(TOOLS_CONFIG)

	await integration.destroy()
	assert integration.is_initialized() is False
	assert integration.store.get_items() == []

	await integration.initialize()
	result = await integration.build_menu_for_context({})
	assert result.success is True
	assert {i.id: i.title for i in result.visible_items}["about"] == "About TabKiller"


def test_profile_and_context_configs():
	integration = MenuSystemIntegration()

	minimal = integration.get_config_for_user_profile("minimal")
	assert {i.id for i in minimal.items} == {"open-popup", "capture-tabs", "bookmark-page", "open-settings"}

	link = integration.get_config_for_context("link")
	assert "open-popup" in {i.id for i in link.items}
