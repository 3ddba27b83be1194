# ---------------------------------------------------------------------------
# File: store.py
# ---------------------------------------------------------------------------
# Description:
#	Menu Organization Store for ctxmenu (groups, items, customizations).
#
# Notes:
#	- The Store is the only owner of menu state. Callers receive snapshots.
#	- Every mutation validates first and writes last, so a failed call leaves
#	  the Store exactly as it was.
#	- initialize() builds the new state off to the side and swaps it in only
#	  when validation reports no errors.
#	- Orphaned items (group removed after the item was stored) are a warning,
#	  never an error. add_item() with an unknown group is a hard failure.
#	- No locking: callers await one mutation before starting the next.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Atomic initialize + full error enumeration
# 10/07/2026	Paul G. LeDuc				Cycle check reports pre-existing cycles
# 10/08/2026	Paul G. LeDuc				Depth/size/shortcut-conflict warnings
# 10/12/2026	Paul G. LeDuc				Coerce rule/camelCase patches; bad customization priority is an error
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Iterable, Mapping, Optional, Union

from ctxmenu.core.config import camel_case
from ctxmenu.core.logging import get_menu_logger
from ctxmenu.menu.codec import (
	CustomizationLike,
	GroupLike,
	ItemLike,
	config_from_dict,
	customization_from_dict,
	group_from_dict,
	item_from_dict,
	rule_from_dict,
)
from ctxmenu.menu.errors import MenuErrorType, MenuOrganizationError
from ctxmenu.menu.shortcuts import ShortcutMap, coerce_shortcut
from ctxmenu.menu.types import (
	DEFAULT_STRUCTURE,
	PRIORITY_MAX,
	PRIORITY_MIN,
	ContextRule,
	MenuCustomization,
	MenuGroup,
	MenuItem,
	OrganizationConfig,
	StructureConfig,
	ValidationReport,
	priority_in_bounds,
)


_log = get_menu_logger("store")

# Patch key (snake_case or camelCase) -> MenuItem field
_ITEM_KEYS: dict[str, str] = {
	key: f.name for f in fields(MenuItem) for key in (f.name, camel_case(f.name))
}


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
	"""
	Point-in-time copy of Store state, in Store iteration order.
	"""
	groups: tuple[MenuGroup, ...] = field(default_factory=tuple)
	items: tuple[MenuItem, ...] = field(default_factory=tuple)
	customizations: Mapping[str, MenuCustomization] = field(default_factory=dict)
	structure: StructureConfig = DEFAULT_STRUCTURE


class MenuOrganizer:
	"""
	MenuOrganizer

	Authoritative collection of menu groups, items and customizations.
	"""

	def __init__(self) -> None:
		self._groups: dict[str, MenuGroup] = {}
		self._items: dict[str, MenuItem] = {}
		self._customizations: dict[str, MenuCustomization] = {}
		self._structure: StructureConfig = DEFAULT_STRUCTURE
		self._i18n_namespace: str = "menu"
		self._initialized: bool = False

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def initialize(self, config: Union[OrganizationConfig, Mapping[str, Any]]) -> ValidationReport:
		"""
		Replace the entire Store with config.

		Raises:
			MenuOrganizationError(INVALID_STRUCTURE) listing every validation
			error. The Store is left untouched in that case.
		"""
		try:
			cfg = config_from_dict(config)
		except (TypeError, ValueError) as ex:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Malformed menu configuration: {ex}",
				cause=ex,
			) from ex

		groups = {g.id: g for g in cfg.groups}
		items = {i.id: i for i in cfg.items}
		customizations = {c.item_id: c for c in cfg.customizations}
		structure = DEFAULT_STRUCTURE.merged(cfg.structure)

		report = _validate(groups, items, customizations, structure)
		if not report.valid:
			_log.info("Rejected menu configuration with %d error(s)", len(report.errors))
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				"Menu organization validation failed: " + "; ".join(report.errors),
				validation=report,
			)

		self._groups = groups
		self._items = items
		self._customizations = customizations
		self._structure = structure
		self._i18n_namespace = cfg.i18n_namespace
		self._initialized = True

		for warning in report.warnings:
			_log.warning("Menu organization: %s", warning)
		_log.debug(
			"Loaded %d group(s), %d item(s), %d customization(s)",
			len(groups),
			len(items),
			len(customizations),
		)
		return report

	def destroy(self) -> None:
		self._groups.clear()
		self._items.clear()
		self._customizations.clear()
		self._structure = DEFAULT_STRUCTURE
		self._initialized = False

	def is_initialized(self) -> bool:
		return self._initialized

	# -----------------------------------------------------------------------
	# Groups
	# -----------------------------------------------------------------------

	def add_group(self, group: GroupLike) -> MenuGroup:
		g = group_from_dict(group)

		problems = _group_field_errors(g)
		if problems:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Invalid group {g.id!r}: " + "; ".join(problems),
				group_id=g.id or None,
			)

		if g.parent_id and _creates_cycle(self._groups, g.id, g.parent_id):
			raise MenuOrganizationError(
				MenuErrorType.CIRCULAR_DEPENDENCY,
				f"Adding group {g.id!r} under {g.parent_id!r} would create a circular dependency",
				group_id=g.id,
			)

		self._groups[g.id] = g
		_log.debug("Added group %r", g.id)
		return g

	def remove_group(self, group_id: str) -> None:
		if group_id not in self._groups:
			raise MenuOrganizationError(
				MenuErrorType.MISSING_GROUP,
				f"Group {group_id!r} not found",
				group_id=group_id,
			)

		child_groups = [g.id for g in self._groups.values() if g.parent_id == group_id]
		child_items = [i.id for i in self._items.values() if i.group_id == group_id]
		if child_groups or child_items:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Cannot remove group {group_id!r}: it still has "
				f"{len(child_groups)} sub-group(s) and {len(child_items)} item(s)",
				group_id=group_id,
			)

		del self._groups[group_id]
		_log.debug("Removed group %r", group_id)

	def get_group(self, group_id: str) -> Optional[MenuGroup]:
		return self._groups.get(group_id)

	def get_groups(self) -> list[MenuGroup]:
		return list(self._groups.values())

	# -----------------------------------------------------------------------
	# Items
	# -----------------------------------------------------------------------

	def add_item(self, item: ItemLike) -> MenuItem:
		i = item_from_dict(item)
		self._check_item_fields(i)

		if i.group_id and i.group_id not in self._groups:
			raise MenuOrganizationError(
				MenuErrorType.MISSING_GROUP,
				f"Group {i.group_id!r} not found for item {i.id!r}",
				item_id=i.id,
				group_id=i.group_id,
			)

		self._items[i.id] = i
		_log.debug("Added item %r", i.id)
		return i

	def update_item(self, item_id: str, patch: Mapping[str, Any]) -> MenuItem:
		existing = self._items.get(item_id)
		if existing is None:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Item {item_id!r} not found",
				item_id=item_id,
			)

		unknown = sorted(k for k in patch if k not in _ITEM_KEYS)
		if unknown:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Unknown item field(s) for {item_id!r}: {', '.join(unknown)}",
				item_id=item_id,
			)

		changes = {_ITEM_KEYS[k]: v for k, v in patch.items()}

		if "id" in changes and changes["id"] != item_id:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Item id cannot be changed ({item_id!r} -> {changes['id']!r})",
				item_id=item_id,
			)

		try:
			if "shortcut" in changes:
				changes["shortcut"] = coerce_shortcut(changes["shortcut"])
			if "context_rules" in changes:
				changes["context_rules"] = _coerce_rules(changes["context_rules"])
			for key in ("tags", "contexts"):
				if key in changes:
					changes[key] = tuple(changes[key] or ())
		except (TypeError, ValueError) as ex:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Invalid patch for item {item_id!r}: {ex}",
				item_id=item_id,
				cause=ex,
			) from ex

		updated = replace(existing, **changes)
		self._check_item_fields(updated)

		self._items[item_id] = updated
		_log.debug("Updated item %r (%s)", item_id, ", ".join(sorted(changes)))
		return updated

	def remove_item(self, item_id: str) -> None:
		if item_id not in self._items:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Item {item_id!r} not found",
				item_id=item_id,
			)

		del self._items[item_id]
		self._customizations.pop(item_id, None)
		_log.debug("Removed item %r", item_id)

	def get_item(self, item_id: str) -> Optional[MenuItem]:
		return self._items.get(item_id)

	def get_items(self) -> list[MenuItem]:
		return list(self._items.values())

	# -----------------------------------------------------------------------
	# Customizations
	# -----------------------------------------------------------------------

	def apply_customizations(self, customizations: Iterable[CustomizationLike]) -> None:
		"""
		Replace every customization. Later entries for the same item win.
		"""
		incoming: dict[str, MenuCustomization] = {}
		for raw in customizations:
			c = self._checked_customization(raw)
			incoming[c.item_id] = c

		self._customizations = incoming

	def set_customization(self, customization: CustomizationLike) -> MenuCustomization:
		c = self._checked_customization(customization)
		self._customizations[c.item_id] = c
		return c

	def remove_customization(self, item_id: str) -> None:
		self._customizations.pop(item_id, None)

	def get_customization(self, item_id: str) -> Optional[MenuCustomization]:
		return self._customizations.get(item_id)

	def get_customizations(self) -> list[MenuCustomization]:
		return list(self._customizations.values())

	def reset_to_defaults(self) -> None:
		"""
		Drop all user customizations. Groups and items stay as loaded.
		"""
		self._customizations.clear()

	# -----------------------------------------------------------------------
	# Structure + export
	# -----------------------------------------------------------------------

	@property
	def structure(self) -> StructureConfig:
		return self._structure

	@property
	def i18n_namespace(self) -> str:
		return self._i18n_namespace

	def snapshot(self) -> StoreSnapshot:
		return StoreSnapshot(
			groups=tuple(self._groups.values()),
			items=tuple(self._items.values()),
			customizations=dict(self._customizations),
			structure=self._structure,
		)

	def export_config(self) -> OrganizationConfig:
		return OrganizationConfig(
			structure=self._structure,
			groups=tuple(self._groups.values()),
			items=tuple(self._items.values()),
			customizations=tuple(self._customizations.values()),
			i18n_namespace=self._i18n_namespace,
		)

	# -----------------------------------------------------------------------
	# Validation
	# -----------------------------------------------------------------------

	def validate_organization(self) -> ValidationReport:
		return _validate(self._groups, self._items, self._customizations, self._structure)

	def would_create_cycle(self, group_id: str, parent_id: str) -> bool:
		return _creates_cycle(self._groups, group_id, parent_id)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _check_item_fields(self, item: MenuItem) -> None:
		problems = _item_field_errors(item)
		if problems:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Invalid item {item.id!r}: " + "; ".join(problems),
				item_id=item.id or None,
				group_id=item.group_id,
			)

	def _checked_customization(self, raw: CustomizationLike) -> MenuCustomization:
		try:
			c = customization_from_dict(raw)
		except (TypeError, ValueError) as ex:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				f"Malformed customization: {ex}",
				cause=ex,
			) from ex

		if not c.item_id:
			raise MenuOrganizationError(
				MenuErrorType.INVALID_STRUCTURE,
				"Customization item_id is required",
			)
		if c.priority is not None and not priority_in_bounds(c.priority):
			raise MenuOrganizationError(
				MenuErrorType.INVALID_PRIORITY,
				f"Customization priority for {c.item_id!r} must be between {PRIORITY_MIN} and {PRIORITY_MAX}",
				item_id=c.item_id,
			)
		return c


# ---------------------------------------------------------------------------
# Validation helpers (module level so initialize() can validate unsaved state)
# ---------------------------------------------------------------------------

_PRIORITY_MESSAGE = f"Priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}"


def _group_field_errors(group: MenuGroup) -> list[str]:
	problems: list[str] = []
	if not group.id:
		problems.append("Group id is required")
	if not group.name:
		problems.append("Group name is required")
	if not priority_in_bounds(group.priority):
		problems.append(_PRIORITY_MESSAGE)
	if group.id and group.parent_id == group.id:
		problems.append("Group cannot be its own parent")
	problems.extend(_rule_errors(group.context_rules))
	return problems


def _item_field_errors(item: MenuItem) -> list[str]:
	problems: list[str] = []
	if not item.id:
		problems.append("Item id is required")
	if not item.translation_key:
		problems.append("Translation key is required")
	if not priority_in_bounds(item.priority):
		problems.append(_PRIORITY_MESSAGE)
	problems.extend(_rule_errors(item.context_rules))
	return problems


def _rule_errors(rules: Iterable[Any]) -> list[str]:
	problems: list[str] = []
	for rule in rules:
		if not isinstance(rule, ContextRule):
			problems.append(f"Context rule must be a ContextRule, got {type(rule).__name__}")
		elif not rule.type:
			problems.append("Context rule type is required")
	return problems


def _coerce_rules(values: Any) -> tuple[ContextRule, ...]:
	"""
	List of ContextRule or rule mappings -> tuple of ContextRule.
	"""
	if values is None:
		return ()
	if isinstance(values, (str, Mapping)):
		raise TypeError("context_rules must be a list of rules")

	rules: list[ContextRule] = []
	for raw in values:
		if not isinstance(raw, (ContextRule, Mapping)):
			raise TypeError(f"Context rule must be a mapping, got {type(raw).__name__}")
		rules.append(rule_from_dict(raw))
	return tuple(rules)


def _creates_cycle(groups: Mapping[str, MenuGroup], group_id: str, parent_id: str) -> bool:
	"""
	Walk parent links upward from parent_id.

	True when group_id is reached, or when a node repeats (a cycle already
	exists above this parent).

	The visited set bounds the walk, not structure.max_depth: nesting past
	max_depth is only a warning, so stored chains can be longer than it.
	"""
	visited: set[str] = set()
	current: Optional[str] = parent_id

	while current:
		if current == group_id:
			return True
		if current in visited:
			return True
		visited.add(current)

		node = groups.get(current)
		current = node.parent_id if node is not None else None

	return False


def _depth(groups: Mapping[str, MenuGroup], group: MenuGroup) -> int:
	depth = 1
	seen: set[str] = {group.id}
	current = group.parent_id
	while current and current in groups and current not in seen:
		seen.add(current)
		depth += 1
		current = groups[current].parent_id
	return depth


def _validate(
	groups: Mapping[str, MenuGroup],
	items: Mapping[str, MenuItem],
	customizations: Mapping[str, MenuCustomization],
	structure: StructureConfig,
) -> ValidationReport:
	errors: list[str] = []
	warnings: list[str] = []
	group_errors: dict[str, list[str]] = {}
	item_errors: dict[str, list[str]] = {}

	# Groups
	for group in groups.values():
		problems: list[str] = []

		if group.parent_id:
			if group.parent_id == group.id:
				problems.append("Group cannot be its own parent")
			elif _creates_cycle(groups, group.id, group.parent_id):
				problems.append("Circular dependency detected")

			if group.parent_id not in groups:
				problems.append(f"Parent group {group.parent_id!r} not found")

		if not priority_in_bounds(group.priority):
			problems.append(_PRIORITY_MESSAGE)
		problems.extend(_rule_errors(group.context_rules))

		if problems:
			group_errors[group.id] = problems
			errors.extend(f"Group {group.id!r}: {p}" for p in problems)
		elif _depth(groups, group) > structure.max_depth:
			warnings.append(f"Group {group.id!r} is nested deeper than max depth {structure.max_depth}")

	# Items (a dangling group reference is not an item error)
	for item in items.values():
		problems = []

		if not priority_in_bounds(item.priority):
			problems.append(_PRIORITY_MESSAGE)
		if not item.translation_key:
			problems.append("Translation key is required")
		problems.extend(_rule_errors(item.context_rules))

		if problems:
			item_errors[item.id] = problems
			errors.extend(f"Item {item.id!r}: {p}" for p in problems)

	orphaned = [i.id for i in items.values() if i.group_id and i.group_id not in groups]
	if orphaned:
		warnings.append(f"{len(orphaned)} item(s) reference non-existent groups")

	per_group: dict[str, int] = {}
	for item in items.values():
		if item.group_id in groups:
			per_group[item.group_id] = per_group.get(item.group_id, 0) + 1
	for group_id, count in per_group.items():
		if count > structure.max_items_per_group:
			warnings.append(
				f"Group {group_id!r} has {count} items (max {structure.max_items_per_group})"
			)

	shortcut_map = ShortcutMap.from_pairs(
		(i.id, _effective_shortcut(i, customizations.get(i.id))) for i in items.values()
	)
	for canon, owners in shortcut_map.conflicts().items():
		warnings.append(f"Shortcut {canon!r} is assigned to multiple items: {', '.join(owners)}")

	unknown = [item_id for item_id in customizations if item_id not in items]
	if unknown:
		warnings.append(f"{len(unknown)} customization(s) reference unknown items")

	# A bad override priority would break ordering at resolution time.
	for c in customizations.values():
		if c.priority is not None and not priority_in_bounds(c.priority):
			item_errors.setdefault(c.item_id, []).append(f"Customization {_PRIORITY_MESSAGE.lower()}")
			errors.append(f"Customization for {c.item_id!r}: {_PRIORITY_MESSAGE}")

	return ValidationReport(
		valid=not errors,
		errors=errors,
		warnings=warnings,
		group_errors=group_errors,
		item_errors=item_errors,
	)


def _effective_shortcut(item: MenuItem, customization: Optional[MenuCustomization]):
	if customization is not None and customization.custom_shortcut is not None:
		return customization.custom_shortcut
	return item.shortcut
