# ---------------------------------------------------------------------------
# File: defaults.py
# ---------------------------------------------------------------------------
# Description:
#	Stock menu catalogue for ctxmenu: groups, items, shortcuts and the
#	profile / context-specific configurations built from them.
#
# Notes:
#	- Everything here is immutable data. Builders return fresh
#	  OrganizationConfig values; nothing is shared mutable state.
#	- Subset configs always carry the ancestors of the groups they keep,
#	  so they validate on their own.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Profiles (minimal / power-user) + context configs
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable, Iterable, Optional

from ctxmenu.menu.shortcuts import KeyCombination
from ctxmenu.menu.types import (
	DEFAULT_STRUCTURE,
	ContextRule,
	MenuGroup,
	MenuItem,
	OrganizationConfig,
	StructureConfig,
)


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------

DEFAULT_GROUPS: tuple[MenuGroup, ...] = (
	MenuGroup("navigation", "Navigation", 1000, description="Navigation and access to main features", contexts=("page", "selection", "link")),
	MenuGroup("tabs", "Tab Management", 900, description="Tab-related actions and management", contexts=("page", "all")),
	MenuGroup("sessions", "Session Management", 800, description="Browsing session tracking and management", contexts=("page", "all")),
	MenuGroup("bookmarks", "Bookmarks", 700, description="Bookmark management and organization", contexts=("page", "link")),
	MenuGroup("settings", "Settings", 600, description="Extension settings and configuration", contexts=("all",)),
	MenuGroup("tools", "Tools", 500, description="Additional tools and utilities", contexts=("all",)),
	MenuGroup("help", "Help", 100, description="Help and documentation", contexts=("all",)),

	# Sub-groups
	MenuGroup("tab-actions", "Tab Actions", 950, parent_id="tabs", description="Individual tab actions", contexts=("page",)),
	MenuGroup("tab-organization", "Tab Organization", 940, parent_id="tabs", description="Tab organization and grouping", contexts=("page",)),
	MenuGroup("session-actions", "Session Actions", 850, parent_id="sessions", description="Session control actions", contexts=("page",)),
	MenuGroup("bookmark-actions", "Bookmark Actions", 750, parent_id="bookmarks", description="Bookmark creation and management", contexts=("page", "link")),
)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

WEB_PAGE_ONLY: tuple[ContextRule, ...] = (
	ContextRule("page_type", "show_when", "equals", "web"),
)
WITH_SELECTION: tuple[ContextRule, ...] = (
	ContextRule("selection_exists", "show_when", "exists"),
)
HIDE_IN_EXTENSION: tuple[ContextRule, ...] = (
	ContextRule("extension_context", "hide_when", "exists"),
)
SESSION_FEATURE_ENABLED: tuple[ContextRule, ...] = (
	ContextRule("user_setting", "show_when", "equals", "features.sessions.enabled"),
)
MULTIPLE_TABS: tuple[ContextRule, ...] = (
	ContextRule("tab_count", "show_when", None, 2),
)

COMMON_CONTEXT_RULES: dict[str, tuple[ContextRule, ...]] = {
	"web_page_only": WEB_PAGE_ONLY,
	"with_selection": WITH_SELECTION,
	"hide_in_extension": HIDE_IN_EXTENSION,
	"session_feature_enabled": SESSION_FEATURE_ENABLED,
	"multiple_tabs": MULTIPLE_TABS,
}


# ---------------------------------------------------------------------------
# Shortcuts
# ---------------------------------------------------------------------------

def _ctrl_shift(key: str) -> KeyCombination:
	return KeyCombination(key=key, modifiers=("ctrl", "shift"))


DEFAULT_SHORTCUTS: dict[str, KeyCombination] = {
	"open-popup": _ctrl_shift("k"),
	"show-history": _ctrl_shift("h"),
	"show-sessions": _ctrl_shift("s"),
	"capture-tabs": _ctrl_shift("c"),
	"start-session": _ctrl_shift("n"),
	"end-session": _ctrl_shift("e"),
	"bookmark-page": _ctrl_shift("d"),
	"open-settings": _ctrl_shift(","),
	"search-history": _ctrl_shift("f"),
}


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

def _item(
	item_id: str,
	title: str,
	group_id: str,
	category: str,
	priority: int,
	tags: Iterable[str],
	contexts: Iterable[str] = ("all",),
	rules: Iterable[ContextRule] = (),
) -> MenuItem:
	return MenuItem(
		id=item_id,
		translation_key=f"menu.items.{item_id}",
		group_id=group_id,
		priority=priority,
		title=title,
		category=category,
		tags=tuple(tags),
		context_rules=tuple(rules),
		shortcut=DEFAULT_SHORTCUTS.get(item_id),
		contexts=tuple(contexts),
	)


DEFAULT_ITEMS: tuple[MenuItem, ...] = (
	# Navigation
	_item("open-popup", "Open TabKiller", "navigation", "navigation", 1000, ("popup", "main", "interface")),
	_item("show-history", "Show History", "navigation", "navigation", 990, ("history", "browse")),
	_item("show-sessions", "Show Sessions", "navigation", "navigation", 980, ("sessions", "browse"), rules=SESSION_FEATURE_ENABLED),
	_item("show-bookmarks", "Show Bookmarks", "navigation", "bookmarks", 970, ("bookmarks", "browse")),

	# Tabs
	_item("capture-tabs", "Capture All Tabs", "tab-actions", "tabs", 950, ("capture", "save", "tabs"), ("page",), WEB_PAGE_ONLY + MULTIPLE_TABS),
	_item("save-tab", "Save This Tab", "tab-actions", "tabs", 940, ("save", "tab"), ("page",), WEB_PAGE_ONLY),
	_item("close-tab", "Close Tab", "tab-actions", "tabs", 930, ("close", "tab"), ("page",)),
	_item("duplicate-tab", "Duplicate Tab", "tab-actions", "tabs", 920, ("duplicate", "tab"), ("page",), WEB_PAGE_ONLY),
	_item("pin-tab", "Pin Tab", "tab-organization", "tabs", 910, ("pin", "organize"), ("page",)),
	_item("move-tab-to-window", "Move to New Window", "tab-organization", "tabs", 900, ("move", "window", "organize"), ("page",)),

	# Sessions
	_item("start-session", "Start New Session", "session-actions", "sessions", 850, ("start", "session", "tracking"), ("page",), SESSION_FEATURE_ENABLED),
	_item("end-session", "End Current Session", "session-actions", "sessions", 840, ("end", "session", "tracking"), ("page",), SESSION_FEATURE_ENABLED),
	_item("tag-session", "Tag Session", "session-actions", "sessions", 830, ("tag", "session", "organize"), ("page",), SESSION_FEATURE_ENABLED),
	_item("save-session", "Save Session", "session-actions", "sessions", 820, ("save", "session"), ("page",), SESSION_FEATURE_ENABLED),

	# Bookmarks
	_item("bookmark-page", "Bookmark This Page", "bookmark-actions", "bookmarks", 750, ("bookmark", "save"), ("page",), WEB_PAGE_ONLY),
	_item("bookmark-tabs", "Bookmark All Tabs", "bookmark-actions", "bookmarks", 740, ("bookmark", "save", "tabs"), ("page",), WEB_PAGE_ONLY + MULTIPLE_TABS),
	_item("organize-bookmarks", "Organize Bookmarks", "bookmark-actions", "bookmarks", 730, ("organize", "bookmarks")),

	# Settings
	_item("open-settings", "Open Settings", "settings", "settings", 600, ("settings", "configuration")),
	_item("keyboard-shortcuts", "Keyboard Shortcuts", "settings", "settings", 590, ("shortcuts", "keyboard")),

	# Tools
	_item("search-history", "Search History", "tools", "tools", 500, ("search", "history")),
	_item("export-data", "Export Data", "tools", "tools", 490, ("export", "data", "backup")),
	_item("import-data", "Import Data", "tools", "tools", 480, ("import", "data", "restore")),
	_item("clean-storage", "Clean Storage", "tools", "tools", 470, ("clean", "storage", "maintenance")),

	# Help
	_item("user-guide", "User Guide", "help", "help", 100, ("help", "guide", "documentation")),
	_item("report-issue", "Report Issue", "help", "help", 90, ("report", "bug", "issue")),
	_item("about", "About TabKiller", "help", "help", 80, ("about", "info")),
)


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

PROFILES: tuple[str, ...] = ("minimal", "default", "power-user")
CONTEXT_KINDS: tuple[str, ...] = ("extension", "selection", "link")


def build_default_config() -> OrganizationConfig:
	return OrganizationConfig(
		structure=DEFAULT_STRUCTURE,
		groups=DEFAULT_GROUPS,
		items=DEFAULT_ITEMS,
	)


def create_minimal_config() -> OrganizationConfig:
	items = _pick_items(lambda i: i.id in ("open-popup", "capture-tabs", "bookmark-page", "open-settings"))
	return OrganizationConfig(
		structure=StructureConfig(compact_mode=True, max_items_per_group=5, enable_submenus=False),
		groups=_groups_for(items),
		items=items,
	)


def create_power_user_config() -> OrganizationConfig:
	return OrganizationConfig(
		structure=StructureConfig(max_depth=4, max_items_per_group=15, show_shortcuts=True, compact_mode=False),
		groups=DEFAULT_GROUPS,
		items=DEFAULT_ITEMS,
	)


def get_config_for_profile(profile: str) -> OrganizationConfig:
	"""
	"minimal" | "default" | "power-user". Unknown names fall back to default.
	"""
	if profile == "minimal":
		return create_minimal_config()
	if profile == "power-user":
		return create_power_user_config()
	return build_default_config()


def get_default_config_for_context(kind: str) -> OrganizationConfig:
	"""
	"extension" | "selection" | "link". Unknown kinds get the default config.
	"""
	if kind == "extension":
		items = _pick_items(lambda i: i.id in ("open-popup", "show-history", "open-settings", "user-guide"))
		structure = StructureConfig(compact_mode=True, max_items_per_group=5)
	elif kind == "selection":
		items = _pick_items(
			lambda i: any(r.type == "selection_exists" for r in i.context_rules)
			or i.id in ("open-popup", "search-history")
		)
		structure = DEFAULT_STRUCTURE
	elif kind == "link":
		items = _pick_items(lambda i: "link" in i.contexts or i.id in ("bookmark-page", "open-popup"))
		structure = DEFAULT_STRUCTURE
	else:
		return build_default_config()

	return OrganizationConfig(structure=structure, groups=_groups_for(items), items=items)


def _pick_items(predicate: Callable[[MenuItem], bool]) -> tuple[MenuItem, ...]:
	return tuple(i for i in DEFAULT_ITEMS if predicate(i))


def _groups_for(items: Iterable[MenuItem]) -> tuple[MenuGroup, ...]:
	by_id = {g.id: g for g in DEFAULT_GROUPS}
	wanted: set[str] = set()

	for item in items:
		current: Optional[str] = item.group_id
		while current and current not in wanted and current in by_id:
			wanted.add(current)
			current = by_id[current].parent_id

	return tuple(g for g in DEFAULT_GROUPS if g.id in wanted)
