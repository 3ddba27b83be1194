# ---------------------------------------------------------------------------
# File: resolver.py
# ---------------------------------------------------------------------------
# Description:
#	Visibility Resolver for ctxmenu (store state + context -> render structure).
#
# Notes:
#	- Read-only: works on a StoreSnapshot and never mutates the Store.
#	- Recomputed on every call. No caching across contexts.
#	- Ordering is a stable sort on descending priority, so equal priorities
#	  keep Store iteration order between calls.
#	- Any unexpected failure surfaces as one CONTEXT_RULE_ERROR. Callers never
#	  see a partially built result.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Per-item states + customization overlay
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Union

from ctxmenu.core.logging import get_menu_logger
from ctxmenu.menu.errors import MenuErrorType, MenuOrganizationError
from ctxmenu.menu.evaluator import ContextEvaluator
from ctxmenu.menu.store import MenuOrganizer, StoreSnapshot
from ctxmenu.menu.types import (
	ItemState,
	MenuCustomization,
	MenuGroup,
	MenuItem,
	OrganizationResult,
	RenderContext,
	VisibilityState,
)


_log = get_menu_logger("resolver")

HIDDEN_BY_USER = "hidden by user customization"


class VisibilityResolver:
	"""
	VisibilityResolver

	resolve(source, context) -> OrganizationResult

	source may be a live MenuOrganizer (a snapshot is taken first) or a
	StoreSnapshot.
	"""

	def __init__(self, evaluator: Optional[ContextEvaluator] = None) -> None:
		self._evaluator = evaluator or ContextEvaluator()

	@property
	def evaluator(self) -> ContextEvaluator:
		return self._evaluator

	def resolve(
		self,
		source: Union[MenuOrganizer, StoreSnapshot],
		context: Optional[RenderContext] = None,
	) -> OrganizationResult:
		ctx = context or RenderContext()
		snap = source.snapshot() if isinstance(source, MenuOrganizer) else source

		try:
			return self._resolve(snap, ctx)
		except MenuOrganizationError:
			raise
		except Exception as ex:
			_log.exception("Menu resolution failed")
			raise MenuOrganizationError(
				MenuErrorType.CONTEXT_RULE_ERROR,
				f"Menu resolution failed: {ex}",
				cause=ex,
			) from ex

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _resolve(self, snap: StoreSnapshot, ctx: RenderContext) -> OrganizationResult:
		states: list[VisibilityState] = []
		visible_groups: list[MenuGroup] = []

		for group in snap.groups:
			state = self._group_state(group, ctx)
			states.append(state)
			if state.visible:
				visible_groups.append(group)

		item_states: list[ItemState] = []
		visible_items: list[MenuItem] = []

		for item in snap.items:
			custom = snap.customizations.get(item.id)
			state = self._item_state(item, custom, ctx)
			item_states.append(state)
			if not state.visible:
				continue

			resolved = item if state.enabled else replace(item, enabled=False)
			visible_items.append(_overlay(resolved, custom))

		visible_groups.sort(key=lambda g: -g.priority)
		visible_items.sort(key=lambda i: -i.priority)

		total = len(snap.items)
		return OrganizationResult(
			groups=tuple(visible_groups),
			items=tuple(visible_items),
			visibility_states=tuple(states),
			item_states=tuple(item_states),
			total_items=total,
			hidden_items=total - len(visible_items),
		)

	def _group_state(self, group: MenuGroup, ctx: RenderContext) -> VisibilityState:
		if not group.visible:
			return VisibilityState(group.id, visible=False, enabled=False, reason="group hidden")

		if group.context_rules:
			result = self._evaluator.evaluate_rules(group.context_rules, ctx)
			if not result.visible or not result.enabled:
				return VisibilityState(group.id, result.visible, result.enabled, result.reason)

		if not group.enabled:
			return VisibilityState(group.id, visible=True, enabled=False, reason="group disabled")

		return VisibilityState(group.id, visible=True, enabled=True)

	def _item_state(
		self,
		item: MenuItem,
		custom: Optional[MenuCustomization],
		ctx: RenderContext,
	) -> ItemState:
		if custom is not None and custom.hidden:
			return ItemState(item.id, visible=False, enabled=False, reason=HIDDEN_BY_USER)

		if not item.visible:
			return ItemState(item.id, visible=False, enabled=False, reason="item hidden")

		result = self._evaluator.evaluate_item(item, ctx)
		if not result.visible:
			return ItemState(item.id, visible=False, enabled=False, reason=result.reason)

		if not item.enabled:
			return ItemState(item.id, visible=True, enabled=False, reason="item disabled")
		if not result.enabled:
			return ItemState(item.id, visible=True, enabled=False, reason=result.reason)

		return ItemState(item.id, visible=True, enabled=True)


def _overlay(item: MenuItem, custom: Optional[MenuCustomization]) -> MenuItem:
	"""
	Field-by-field customization overlay. None keeps the item's own value.
	"""
	if custom is None:
		return item

	changes = {}
	if custom.priority is not None:
		changes["priority"] = custom.priority
	if custom.group_id is not None:
		changes["group_id"] = custom.group_id
	if custom.custom_name is not None:
		changes["title"] = custom.custom_name
	if custom.custom_shortcut is not None:
		changes["shortcut"] = custom.custom_shortcut

	return replace(item, **changes) if changes else item
