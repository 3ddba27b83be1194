# ---------------------------------------------------------------------------
# File: types.py
# ---------------------------------------------------------------------------
# Description:
#	Data model for the menu organization subsystem.
#
# Notes:
#	- Entities are frozen dataclasses with tuple collections, so a snapshot
#	  handed to a caller cannot be used to mutate Store internals.
#	- Updates go through dataclasses.replace (see MenuOrganizer.update_item).
#	- Priorities are integers in [PRIORITY_MIN, PRIORITY_MAX]; higher sorts first.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Add rule conditions + item states
# 10/09/2026	Paul G. LeDuc				Add StructureConfig.merged (snake/camel keys)
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Literal, Mapping, Optional, Union

from ctxmenu.core.config import camel_case, cfg_get
from ctxmenu.menu.shortcuts import KeyCombination


PRIORITY_MIN = 0
PRIORITY_MAX = 1000

RuleCondition = Literal["show_when", "hide_when", "enable_when", "disable_when"]
RuleOperator = Literal["equals", "contains", "startsWith", "endsWith", "matches", "exists"]

RULE_CONDITIONS: tuple[str, ...] = ("show_when", "hide_when", "enable_when", "disable_when")
RULE_OPERATORS: tuple[str, ...] = ("equals", "contains", "startsWith", "endsWith", "matches", "exists")

ActivateHandler = Callable[..., Any]


def priority_in_bounds(priority: Any) -> bool:
	if isinstance(priority, bool) or not isinstance(priority, int):
		return False
	return PRIORITY_MIN <= priority <= PRIORITY_MAX


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ContextRule:
	"""
	ContextRule

	type:		Rule kind, dispatched through the evaluator registry ("url", "tab_count", ...)
	condition:	How a match is interpreted (show_when / hide_when / enable_when / disable_when)
	operator:	Comparison applied to the resolved field and value (None -> rule default)
	value:		Rule argument (pattern, threshold, setting path, feature name, ...)
	"""
	type: str
	condition: str = "show_when"
	operator: Optional[str] = None
	value: Any = None


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MenuGroup:
	id: str
	name: str = ""
	priority: int = 0
	enabled: bool = True
	visible: bool = True
	parent_id: Optional[str] = None
	description: Optional[str] = None
	icon: Optional[str] = None
	contexts: tuple[str, ...] = field(default_factory=tuple)
	context_rules: tuple[ContextRule, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class MenuItem:
	"""
	MenuItem

	Leaf menu entry. translation_key is required (validated by the Store).
	title is the untranslated display text; customizations may override it.
	"""
	id: str
	translation_key: str = ""
	group_id: Optional[str] = None
	priority: int = 0
	enabled: bool = True
	visible: bool = True
	title: Optional[str] = None
	description: Optional[str] = None
	category: str = "custom"
	tags: tuple[str, ...] = field(default_factory=tuple)
	context_rules: tuple[ContextRule, ...] = field(default_factory=tuple)
	shortcut: Optional[KeyCombination] = None
	contexts: tuple[str, ...] = field(default_factory=tuple)
	kind: str = "normal"
	icon_url: Optional[str] = None
	on_activate: Optional[ActivateHandler] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class MenuCustomization:
	"""
	Per-item user override. Fields left as None keep the item's own value.
	"""
	item_id: str
	hidden: bool = False
	priority: Optional[int] = None
	group_id: Optional[str] = None
	custom_name: Optional[str] = None
	custom_shortcut: Optional[KeyCombination] = None
	user_modified: bool = True
	timestamp: float = field(default_factory=time.time)


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderContext:
	"""
	Snapshot of the surface a menu is being built for. Never mutated during
	a resolution pass.
	"""
	browser_type: str = ""
	page_url: str = ""
	selection_text: str = ""
	media_type: str = ""
	tab_count: int = 0
	user_settings: Mapping[str, Any] = field(default_factory=dict)
	capabilities: Mapping[str, Any] = field(default_factory=dict)

	def with_overrides(self, overrides: Union["RenderContext", Mapping[str, Any], None]) -> "RenderContext":
		"""
		Return a copy with fields taken from overrides (snake_case or camelCase keys).
		Keys that are absent or None keep this context's value.
		"""
		if overrides is None:
			return self
		if isinstance(overrides, RenderContext):
			return overrides

		changes: dict[str, Any] = {}
		for f in fields(self):
			value = cfg_get(overrides, f.name, camel_case(f.name))
			if value is not None:
				changes[f.name] = value
		return replace(self, **changes)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StructureConfig:
	max_depth: int = 3
	max_items_per_group: int = 10
	enable_submenus: bool = True
	show_icons: bool = True
	show_shortcuts: bool = True
	compact_mode: bool = False
	group_separators: bool = True

	def merged(self, overrides: Union["StructureConfig", Mapping[str, Any], None]) -> "StructureConfig":
		"""
		Field-by-field merge. Unknown keys are ignored.
		"""
		if overrides is None:
			return self
		if isinstance(overrides, StructureConfig):
			return overrides

		changes: dict[str, Any] = {}
		for f in fields(self):
			value = cfg_get(overrides, f.name, camel_case(f.name))
			if value is not None:
				changes[f.name] = value
		return replace(self, **changes)


DEFAULT_STRUCTURE = StructureConfig()


@dataclass(frozen=True, slots=True)
class OrganizationConfig:
	structure: Union[StructureConfig, Mapping[str, Any], None] = None
	groups: tuple[MenuGroup, ...] = field(default_factory=tuple)
	items: tuple[MenuItem, ...] = field(default_factory=tuple)
	customizations: tuple[MenuCustomization, ...] = field(default_factory=tuple)
	i18n_namespace: str = "menu"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VisibilityState:
	group_id: str
	visible: bool
	enabled: bool
	reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ItemState:
	item_id: str
	visible: bool
	enabled: bool
	reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class OrganizationResult:
	"""
	Render-ready structure: visible groups/items sorted by descending priority.
	"""
	groups: tuple[MenuGroup, ...] = field(default_factory=tuple)
	items: tuple[MenuItem, ...] = field(default_factory=tuple)
	visibility_states: tuple[VisibilityState, ...] = field(default_factory=tuple)
	item_states: tuple[ItemState, ...] = field(default_factory=tuple)
	total_items: int = 0
	hidden_items: int = 0
	errors: Optional[tuple[str, ...]] = None


@dataclass(frozen=True, slots=True)
class ValidationReport:
	valid: bool
	errors: list[str] = field(default_factory=list)
	warnings: list[str] = field(default_factory=list)
	group_errors: dict[str, list[str]] = field(default_factory=dict)
	item_errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ContextEvaluationResult:
	visible: bool = True
	enabled: bool = True
	matched_rules: tuple[ContextRule, ...] = field(default_factory=tuple)
	failed_rules: tuple[ContextRule, ...] = field(default_factory=tuple)
	reason: Optional[str] = None
