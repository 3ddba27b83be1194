# ---------------------------------------------------------------------------
# File: test_shortcuts.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ctxmenu.menu.shortcuts.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# 10/06/2026	Paul G. LeDuc				ShortcutMap conflicts
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from ctxmenu.menu.shortcuts import (
	KeyCombination,
	ShortcutMap,
	coerce_shortcut,
	format_shortcut,
	parse_shortcut,
)


def test_parse_splits_modifiers_and_key():
	combo = parse_shortcut("ctrl+shift+K")

	assert combo == KeyCombination(key="K", modifiers=("ctrl", "shift"))
	assert format_shortcut(combo) == "ctrl+shift+K"
	assert str(combo) == "ctrl+shift+K"


def test_parse_normalizes_aliases_and_plus_key():
	assert parse_shortcut("Control+Option+x").modifiers == ("ctrl", "alt")
	assert parse_shortcut("cmd+,").modifiers == ("meta",)

	plus = parse_shortcut("ctrl++")
	assert plus.key == "+"
	assert plus.modifiers == ("ctrl",)


def test_parse_empty_and_invalid():
	assert parse_shortcut(None) is None
	assert parse_shortcut("   ") is None

	with pytest.raises(ValueError):
		parse_shortcut("ctrl+")


def test_canonical_ignores_modifier_order_and_key_case():
	a = parse_shortcut("shift+ctrl+k")
	b = parse_shortcut("ctrl+shift+K")

	assert a.canonical() == b.canonical() == "ctrl+shift+k"


def test_coerce_accepts_mapping_and_rejects_junk():
	combo = coerce_shortcut({"key": "d", "modifiers": ["Ctrl", "Shift"], "code": "KeyD"})

	assert combo.modifiers == ("ctrl", "shift")
	assert combo.code == "KeyD"

	with pytest.raises(ValueError):
		coerce_shortcut({"modifiers": ["ctrl"]})
	with pytest.raises(ValueError):
		coerce_shortcut(42)


def test_shortcut_map_tracks_conflicts():
	m = ShortcutMap.from_pairs([
		("a", parse_shortcut("ctrl+k")),
		("b", parse_shortcut("Control+K")),
		("c", None),
		("d", parse_shortcut("alt+k")),
	])

	assert m.resolve(parse_shortcut("ctrl+k")) == "a"
	assert m.conflicts() == {"ctrl+k": ["a", "b"]}

	m.unbind(parse_shortcut("ctrl+k"), "a")
	assert m.resolve(parse_shortcut("ctrl+k")) == "b"
	assert m.conflicts() == {}


def test_shortcut_map_bind_without_overwrite():
	m = ShortcutMap()
	m.bind(parse_shortcut("ctrl+j"), "first")

	with pytest.raises(ValueError):
		m.bind(parse_shortcut("ctrl+j"), "second", overwrite=False)

	with pytest.raises(ValueError):
		m.bind(parse_shortcut("ctrl+q"), "")

	assert m.keys() == ["ctrl+j"]
