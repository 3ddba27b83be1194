# ---------------------------------------------------------------------------
# File: test_i18n.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ctxmenu.services.i18n (Translator, NamespaceAccessor).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from ctxmenu.menu.errors import MenuErrorType, MenuOrganizationError
from ctxmenu.services.i18n import Translator


def test_translate_nested_key():
	t = Translator()

	assert t.translate("menu.items.open-popup") == "Open TabKiller"
	assert t.t("menu.groups.tabs") == "Tab Management"


def test_translate_never_returns_empty():
	t = Translator()

	assert t.translate("menu.items.nope", fallback="Nope") == "Nope"
	assert t.translate("menu.items.nope") == "menu.items.nope"
	assert t.translate("menu.items.nope", fallback="") == "menu.items.nope"
	# a branch node is not a string
	assert t.translate("menu.items") == "menu.items"


def test_interpolation_fills_known_placeholders_only():
	t = Translator()

	assert t.translate("menu.success.items-registered", {"count": 3}) == "Registered 3 menu item(s)"
	assert t.translate("Hello {{who}} {{missing}}", {"who": "you"}) == "Hello you {{missing}}"


def test_custom_translations_layer_over_builtin():
	t = Translator()
	t.add_translations("en", "menu", {"items": {"open-popup": "Launch"}, "extra": {"x": "X"}})
	t.add_translations("en", "menu", {"extra": {"y": "Y"}})

	assert t.translate("menu.items.open-popup") == "Launch"
	assert t.translate("menu.items.about") == "About TabKiller"
	assert t.translate("menu.extra.x") == "X"
	assert t.translate("menu.extra.y") == "Y"

	with pytest.raises(ValueError):
		t.add_translations("xx", "menu", {})


@pytest.mark.asyncio
async def test_change_locale_falls_back_and_rejects_unsupported():
	t = Translator()
	await t.initialize()

	await t.change_locale("fr")
	assert t.current_locale == "fr"
	assert t.translate("menu.items.about") == "About TabKiller"

	t.add_translations("fr", "menu", {"items": {"about": "À propos"}})
	assert t.translate("menu.items.about") == "À propos"

	with pytest.raises(ValueError):
		await t.change_locale("xx")
	assert t.current_locale == "fr"


@pytest.mark.asyncio
async def test_initialize_with_unsupported_locale_keeps_default():
	t = Translator()

	await t.initialize("klingon")

	assert t.current_locale == "en"
	assert t.is_initialized() is True


def test_exists_and_require():
	t = Translator()

	assert t.exists("menu.items.about") is True
	assert t.exists("menu.items.nope") is False
	assert t.require("menu.items.about") == "About TabKiller"

	with pytest.raises(MenuOrganizationError) as ei:
		t.require("menu.items.nope")
	assert ei.value.type == MenuErrorType.I18N_KEY_MISSING


@pytest.mark.asyncio
async def test_destroy_and_reinitialize():
	t = Translator()
	t.destroy()

	assert t.translate("menu.items.about") == "menu.items.about"

	await t.initialize()
	assert t.translate("menu.items.about") == "About TabKiller"


def test_namespace_accessor():
	t = Translator()
	menu = t.namespace("menu")

	assert menu.items["open-popup"]() == "Open TabKiller"
	assert menu.groups.help() == "Help"
	assert menu.items["nope"](fallback="?") == "?"
	assert menu.items["open-popup"].key == "menu.items.open-popup"


def test_available_locales():
	codes = [info.code for info in Translator().available_locales()]

	assert codes[0] == "en"
	assert "ja" in codes
