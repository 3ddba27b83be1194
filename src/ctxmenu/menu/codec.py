# ---------------------------------------------------------------------------
# File: codec.py
# ---------------------------------------------------------------------------
# Description:
#	Plain-dict conversion for menu configuration (export/import).
#
# Notes:
#	- Output dicts use snake_case keys and only JSON-friendly values
#	  (shortcuts become "ctrl+shift+K" strings; on_activate is dropped).
#	- Input accepts snake_case or camelCase keys, plus the legacy "i18nKey"
#	  spelling for translation keys.
#	- Already-typed values pass through untouched, so callers can mix
#	  dataclasses and dicts in one config.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Mapping, Optional, Union

from ctxmenu.core.config import camel_case, cfg_get
from ctxmenu.menu.shortcuts import KeyCombination, coerce_shortcut, format_shortcut
from ctxmenu.menu.types import (
	ContextRule,
	MenuCustomization,
	MenuGroup,
	MenuItem,
	OrganizationConfig,
	StructureConfig,
)


GroupLike = Union[MenuGroup, Mapping[str, Any]]
ItemLike = Union[MenuItem, Mapping[str, Any]]
RuleLike = Union[ContextRule, Mapping[str, Any]]
CustomizationLike = Union[MenuCustomization, Mapping[str, Any]]


# ---------------------------------------------------------------------------
# dict -> dataclass
# ---------------------------------------------------------------------------

def rule_from_dict(data: RuleLike) -> ContextRule:
	if isinstance(data, ContextRule):
		return data
	return ContextRule(
		type=str(_get(data, "type", default="")),
		condition=str(_get(data, "condition", default="show_when")),
		operator=_get(data, "operator"),
		value=_get(data, "value"),
	)


def group_from_dict(data: GroupLike) -> MenuGroup:
	if isinstance(data, MenuGroup):
		return data
	return MenuGroup(
		id=str(_get(data, "id", default="")),
		name=str(_get(data, "name", default="")),
		priority=_get(data, "priority", default=0),
		enabled=bool(_get(data, "enabled", default=True)),
		visible=bool(_get(data, "visible", default=True)),
		parent_id=_get(data, "parent_id"),
		description=_get(data, "description"),
		icon=_get(data, "icon"),
		contexts=tuple(_get(data, "contexts", default=())),
		context_rules=tuple(rule_from_dict(r) for r in _get(data, "context_rules", default=())),
	)


def item_from_dict(data: ItemLike) -> MenuItem:
	if isinstance(data, MenuItem):
		return data
	return MenuItem(
		id=str(_get(data, "id", default="")),
		translation_key=str(cfg_get(data, "translation_key", "translationKey", "i18n_key", "i18nKey", default="")),
		group_id=_get(data, "group_id"),
		priority=_get(data, "priority", default=0),
		enabled=bool(_get(data, "enabled", default=True)),
		visible=bool(_get(data, "visible", default=True)),
		title=_get(data, "title"),
		description=_get(data, "description"),
		category=str(_get(data, "category", default="custom")),
		tags=tuple(_get(data, "tags", default=())),
		context_rules=tuple(rule_from_dict(r) for r in _get(data, "context_rules", default=())),
		shortcut=coerce_shortcut(_get(data, "shortcut")),
		contexts=tuple(_get(data, "contexts", default=())),
		kind=str(cfg_get(data, "kind", "type", default="normal")),
		icon_url=_get(data, "icon_url"),
		on_activate=_get(data, "on_activate"),
	)


def customization_from_dict(data: CustomizationLike) -> MenuCustomization:
	if isinstance(data, MenuCustomization):
		return data

	kwargs: dict[str, Any] = dict(
		item_id=str(_get(data, "item_id", default="")),
		hidden=bool(_get(data, "hidden", default=False)),
		priority=_get(data, "priority"),
		group_id=_get(data, "group_id"),
		custom_name=_get(data, "custom_name"),
		custom_shortcut=coerce_shortcut(_get(data, "custom_shortcut")),
		user_modified=bool(_get(data, "user_modified", default=True)),
	)
	timestamp = _get(data, "timestamp")
	if timestamp is not None:
		kwargs["timestamp"] = float(timestamp)
	return MenuCustomization(**kwargs)


def config_from_dict(data: Union[OrganizationConfig, Mapping[str, Any]]) -> OrganizationConfig:
	if isinstance(data, OrganizationConfig):
		return data

	structure = _get(data, "structure")
	return OrganizationConfig(
		structure=StructureConfig().merged(structure) if structure is not None else None,
		groups=tuple(group_from_dict(g) for g in _get(data, "groups", default=())),
		items=tuple(item_from_dict(i) for i in _get(data, "items", default=())),
		customizations=tuple(customization_from_dict(c) for c in _get(data, "customizations", default=())),
		i18n_namespace=str(_get(data, "i18n_namespace", default="menu")),
	)


# ---------------------------------------------------------------------------
# dataclass -> dict
# ---------------------------------------------------------------------------

def rule_to_dict(rule: ContextRule) -> dict[str, Any]:
	return {"type": rule.type, "condition": rule.condition, "operator": rule.operator, "value": rule.value}


def group_to_dict(group: MenuGroup) -> dict[str, Any]:
	out = asdict(group)
	out["contexts"] = list(group.contexts)
	out["context_rules"] = [rule_to_dict(r) for r in group.context_rules]
	return out


def item_to_dict(item: MenuItem) -> dict[str, Any]:
	return {
		"id": item.id,
		"translation_key": item.translation_key,
		"group_id": item.group_id,
		"priority": item.priority,
		"enabled": item.enabled,
		"visible": item.visible,
		"title": item.title,
		"description": item.description,
		"category": item.category,
		"tags": list(item.tags),
		"context_rules": [rule_to_dict(r) for r in item.context_rules],
		"shortcut": _shortcut_str(item.shortcut),
		"contexts": list(item.contexts),
		"kind": item.kind,
		"icon_url": item.icon_url,
	}


def customization_to_dict(c: MenuCustomization) -> dict[str, Any]:
	return {
		"item_id": c.item_id,
		"hidden": c.hidden,
		"priority": c.priority,
		"group_id": c.group_id,
		"custom_name": c.custom_name,
		"custom_shortcut": _shortcut_str(c.custom_shortcut),
		"user_modified": c.user_modified,
		"timestamp": c.timestamp,
	}


def config_to_dict(config: OrganizationConfig) -> dict[str, Any]:
	structure = config.structure
	if not isinstance(structure, StructureConfig):
		structure = StructureConfig().merged(structure)

	return {
		"structure": asdict(structure),
		"groups": [group_to_dict(g) for g in config.groups],
		"items": [item_to_dict(i) for i in config.items],
		"customizations": [customization_to_dict(c) for c in config.customizations],
		"i18n_namespace": config.i18n_namespace,
	}


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _get(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
	return cfg_get(data, key, camel_case(key), default=default)


def _shortcut_str(combo: Optional[KeyCombination]) -> Optional[str]:
	return format_shortcut(combo) if combo is not None else None
