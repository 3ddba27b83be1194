# ---------------------------------------------------------------------------
# File: settings.py
# ---------------------------------------------------------------------------
# Description:
#	External menu settings <-> Store structure/customizations.
#
# Notes:
#	- Settings arrive in the options-page shape (camelCase, shortcut as a
#	  "ctrl+shift+K" string). snake_case keys are accepted as well.
#	- Structure flags missing from the settings keep the current value.
#	- Pure functions; the facade decides when to re-initialize the Store.
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
from typing import Any, Iterable, Mapping

from ctxmenu.core.config import camel_case, cfg_get
from ctxmenu.menu.codec import customization_from_dict
from ctxmenu.menu.shortcuts import format_shortcut
from ctxmenu.menu.types import DEFAULT_STRUCTURE, MenuCustomization, StructureConfig


def structure_from_settings(settings: Mapping[str, Any], base: StructureConfig = DEFAULT_STRUCTURE) -> StructureConfig:
	return base.merged(settings)


def customizations_from_settings(settings: Mapping[str, Any]) -> tuple[MenuCustomization, ...]:
	"""
	menuCustomizations[] -> MenuCustomization, splitting customShortcut into
	modifiers + key. Entries without an itemId are skipped.
	"""
	raw = cfg_get(settings, "menu_customizations", "menuCustomizations", default=()) or ()

	out: list[MenuCustomization] = []
	for entry in raw:
		if isinstance(entry, MenuCustomization):
			out.append(entry)
			continue

		if not cfg_get(entry, "item_id", "itemId"):
			continue

		# customShortcut strings are split by the codec
		out.append(customization_from_dict(entry))

	return tuple(out)


def settings_from_state(structure: StructureConfig, customizations: Iterable[MenuCustomization]) -> dict[str, Any]:
	"""
	Inverse of the above, in the options-page shape.
	"""
	out: dict[str, Any] = {camel_case(k): v for k, v in asdict(structure).items()}
	out["menuCustomizations"] = [
		{
			"itemId": c.item_id,
			"hidden": c.hidden,
			"priority": c.priority,
			"groupId": c.group_id,
			"customName": c.custom_name,
			"customShortcut": format_shortcut(c.custom_shortcut) if c.custom_shortcut else None,
			"userModified": c.user_modified,
			"timestamp": c.timestamp,
		}
		for c in customizations
	]
	return out
