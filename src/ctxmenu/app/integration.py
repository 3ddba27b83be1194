# ---------------------------------------------------------------------------
# File: integration.py
# ---------------------------------------------------------------------------
# Description:
#	Integration facade for ctxmenu (store + resolver + translator + host).
#
# Notes:
#	- The only caller-visible mutation path. Store failures propagate.
#	- build_menu_for_context() never raises; failures come back as a
#	  MenuBuildResult with success=False and empty lists.
#	- Host registration is best-effort: failures are logged and reported as
#	  False, never raised.
#	- Registrars may be sync or async.
#	- No lock. Await each mutation before starting the next; resolution is
#	  read-only and may overlap freely.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Telemetry + missing translation report
# 10/10/2026	Paul G. LeDuc				Group context re-filter on build
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ctxmenu.core.logging import get_menu_logger
from ctxmenu.core.telemetry import Telemetry, build_telemetry
from ctxmenu.menu.codec import CustomizationLike, GroupLike, ItemLike
from ctxmenu.menu.defaults import (
	build_default_config,
	get_config_for_profile,
	get_default_config_for_context,
)
from ctxmenu.menu.evaluator import ContextEvaluator, current_context_kind
from ctxmenu.menu.resolver import VisibilityResolver
from ctxmenu.menu.store import MenuOrganizer
from ctxmenu.menu.types import (
	MenuCustomization,
	MenuGroup,
	MenuItem,
	OrganizationConfig,
	OrganizationResult,
	RenderContext,
	ValidationReport,
)
from ctxmenu.services.host import (
	MenuRegistrar,
	ShortcutRegistrar,
	build_menu_entries,
	build_shortcut_commands,
	call_maybe_async,
)
from ctxmenu.services.i18n import Translator

from .config import IntegrationConfig
from .settings import customizations_from_settings, structure_from_settings


_log = get_menu_logger("integration")

ConfigLike = Union[OrganizationConfig, Mapping[str, Any]]
ContextLike = Union[RenderContext, Mapping[str, Any], None]

# Filled in before caller-supplied context fields.
BASE_CONTEXT = RenderContext(browser_type="chrome", tab_count=1)


@dataclass(frozen=True, slots=True)
class MenuBuildResult:
	"""
	MenuBuildResult

	menu_items:		every visible item from resolution (untranslated)
	visible_items:	menu_items after the evaluator re-filter and translation
	groups:			visible groups, priority-descending
	structure:		full resolution (states, counts); None on failure or in
					performance mode
	"""
	success: bool
	context: RenderContext
	menu_items: tuple[MenuItem, ...] = field(default_factory=tuple)
	visible_items: tuple[MenuItem, ...] = field(default_factory=tuple)
	groups: tuple[MenuGroup, ...] = field(default_factory=tuple)
	error: Optional[str] = None
	structure: Optional[OrganizationResult] = None


class MenuSystemIntegration:
	"""
	MenuSystemIntegration

	Owns one Store, evaluator, resolver and translator. Host registrars are
	optional.
	"""

	def __init__(
		self,
		menu_registrar: Optional[MenuRegistrar] = None,
		shortcut_registrar: Optional[ShortcutRegistrar] = None,
		config: Union[IntegrationConfig, Mapping[str, Any], None] = None,
		*,
		translator: Optional[Translator] = None,
		evaluator: Optional[ContextEvaluator] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._config = IntegrationConfig.from_mapping(config)
		self._menu_registrar = menu_registrar
		self._shortcut_registrar = shortcut_registrar

		self._store = MenuOrganizer()
		self._evaluator = evaluator or ContextEvaluator()
		self._resolver = VisibilityResolver(self._evaluator)
		self._translator = translator or Translator(debug=self._config.debug_mode)
		self._telemetry = telemetry or build_telemetry(self._config, _log)

		self._initialized = False

	# -----------------------------------------------------------------------
	# Accessors
	# -----------------------------------------------------------------------

	@property
	def config(self) -> IntegrationConfig:
		return self._config

	@property
	def store(self) -> MenuOrganizer:
		return self._store

	@property
	def evaluator(self) -> ContextEvaluator:
		return self._evaluator

	@property
	def translator(self) -> Translator:
		return self._translator

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry

	def is_initialized(self) -> bool:
		return self._initialized

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	async def initialize(self, config: Optional[ConfigLike] = None) -> None:
		"""
		Boot the translator (when enabled) and load the Store with config, or
		the stock catalogue when config is None.

		Call once; destroy() before initializing again.
		"""
		if self._config.enable_i18n:
			await self._translator.initialize(self._config.locale)

		report = self._store.initialize(config if config is not None else build_default_config())
		self._initialized = True

		if self._config.debug_mode:
			_log.info(
				"MenuSystemIntegration initialized (%d group(s), %d item(s), %d warning(s))",
				len(self._store.get_groups()),
				len(self._store.get_items()),
				len(report.warnings),
			)

	async def destroy(self) -> None:
		self._store.destroy()
		if self._config.enable_i18n:
			self._translator.destroy()
		self._initialized = False

	# -----------------------------------------------------------------------
	# Settings / configuration
	# -----------------------------------------------------------------------

	async def update_from_settings(self, settings: Mapping[str, Any]) -> None:
		"""
		Merge options-page settings into the current configuration and reload
		the Store with it. Raises if the merged configuration does not validate.
		"""
		self._require_initialized()

		if not self._config.enable_settings_sync:
			_log.info("Settings sync disabled; ignoring settings update")
			return

		current = self._store.export_config()
		updated = replace(
			current,
			structure=structure_from_settings(settings, self._store.structure),
			customizations=customizations_from_settings(settings),
		)
		self._store.initialize(updated)

		if self._config.debug_mode:
			_log.info("Menu configuration updated from settings")

	async def get_current_config(self) -> OrganizationConfig:
		return self._store.export_config()

	def get_config_for_user_profile(self, profile: str) -> OrganizationConfig:
		return get_config_for_profile(profile)

	def get_config_for_context(self, kind: str) -> OrganizationConfig:
		return get_default_config_for_context(kind)

	# -----------------------------------------------------------------------
	# Resolution
	# -----------------------------------------------------------------------

	def full_context(self, context: ContextLike = None, user_settings: Optional[Mapping[str, Any]] = None) -> RenderContext:
		ctx = BASE_CONTEXT.with_overrides(context)
		if user_settings is not None:
			ctx = replace(ctx, user_settings=user_settings)
		return ctx

	async def get_menu_structure(self, context: ContextLike = None) -> OrganizationResult:
		"""
		Raising variant of resolution. MenuOrganizationError(CONTEXT_RULE_ERROR)
		on failure.
		"""
		self._require_initialized()
		return self._resolver.resolve(self._store, self.full_context(context))

	async def build_menu_for_context(
		self,
		context: ContextLike = None,
		user_settings: Optional[Mapping[str, Any]] = None,
	) -> MenuBuildResult:
		ctx = BASE_CONTEXT

		try:
			ctx = self.full_context(context, user_settings)
			self._require_initialized()

			kind = current_context_kind(ctx)
			with self._telemetry.timer("menu.build", {"context": kind}):
				result = self._resolver.resolve(self._store, ctx)

				visible = list(result.items)
				if self._config.enable_context_evaluation:
					visible = [i for i in visible if self._passes_context(i, ctx)]
				if self._config.enable_i18n:
					visible = [self._localized(i) for i in visible]

			self._telemetry.counter("menu.hidden_items", result.hidden_items, {"context": kind})

			return MenuBuildResult(
				success=True,
				context=ctx,
				menu_items=result.items,
				visible_items=tuple(visible),
				groups=result.groups,
				structure=None if self._config.performance_mode else result,
			)

		except Exception as ex:
			_log.error("Failed to build menu for context: %s", ex, exc_info=self._config.debug_mode)
			self._telemetry.event("menu.build_failed", {"error": str(ex)})
			return MenuBuildResult(success=False, context=ctx, error=str(ex))

	def missing_translation_keys(self) -> list[str]:
		"""
		Translation keys of stored items that resolve in neither the current
		nor the fallback locale.
		"""
		return [
			item.translation_key
			for item in self._store.get_items()
			if not self._translator.exists(item.translation_key)
		]

	# -----------------------------------------------------------------------
	# Host registration (best-effort)
	# -----------------------------------------------------------------------

	async def register_with_context_menu(self, items: Sequence[MenuItem], context: ContextLike = None) -> bool:
		if self._menu_registrar is None or not self._config.enable_menu_registration:
			return False

		try:
			entries = build_menu_entries(items, self._title_for, submenus=self._store.structure.enable_submenus)
			await call_maybe_async(self._menu_registrar.register_menu_items, entries)
		except Exception as ex:
			_log.error("Failed to register menu items with host: %s", ex, exc_info=True)
			self._telemetry.event("host.registration_failed", {"target": "menu", "error": str(ex)})
			return False

		self._telemetry.counter("host.menu_registered", len(entries))
		if self._config.debug_mode:
			kind = current_context_kind(self.full_context(context))
			_log.info("Registered %d menu item(s) for %r context", len(entries), kind)
		return True

	async def register_shortcuts(self, items: Sequence[MenuItem]) -> bool:
		if self._shortcut_registrar is None or not self._config.enable_shortcut_integration:
			return False

		try:
			commands = build_shortcut_commands(items, self._title_for)
			await call_maybe_async(self._shortcut_registrar.register_commands, commands)
		except Exception as ex:
			_log.error("Failed to register keyboard shortcuts: %s", ex, exc_info=True)
			self._telemetry.event("host.registration_failed", {"target": "shortcuts", "error": str(ex)})
			return False

		self._telemetry.counter("host.shortcuts_registered", len(commands))
		if self._config.debug_mode:
			_log.info("Registered %d keyboard shortcut(s)", len(commands))
		return True

	# -----------------------------------------------------------------------
	# Store pass-throughs
	# -----------------------------------------------------------------------

	async def add_custom_menu_item(self, item: ItemLike) -> MenuItem:
		self._require_initialized()
		return self._store.add_item(item)

	async def update_menu_item(self, item_id: str, patch: Mapping[str, Any]) -> MenuItem:
		self._require_initialized()
		return self._store.update_item(item_id, patch)

	async def remove_menu_item(self, item_id: str) -> None:
		self._require_initialized()
		self._store.remove_item(item_id)

	async def add_custom_menu_group(self, group: GroupLike) -> MenuGroup:
		self._require_initialized()
		return self._store.add_group(group)

	async def remove_menu_group(self, group_id: str) -> None:
		self._require_initialized()
		self._store.remove_group(group_id)

	async def apply_customizations(self, customizations: Iterable[CustomizationLike]) -> None:
		self._require_initialized()
		self._store.apply_customizations(customizations)

	async def customize_item(self, customization: CustomizationLike) -> MenuCustomization:
		self._require_initialized()
		return self._store.set_customization(customization)

	async def reset_to_defaults(self) -> None:
		self._require_initialized()
		self._store.reset_to_defaults()

	async def validate(self) -> ValidationReport:
		self._require_initialized()
		return self._store.validate_organization()

	async def export_configuration(self) -> OrganizationConfig:
		self._require_initialized()
		return self._store.export_config()

	async def import_configuration(self, config: ConfigLike) -> ValidationReport:
		self._require_initialized()
		return self._store.initialize(config)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _require_initialized(self) -> None:
		if not self._initialized:
			raise RuntimeError("MenuSystemIntegration is not initialized")

	def _passes_context(self, item: MenuItem, ctx: RenderContext) -> bool:
		if not self._evaluator.evaluate_item(item, ctx).visible:
			return False

		group = self._store.get_group(item.group_id) if item.group_id else None
		if group is not None and not self._evaluator.evaluate_group(group, ctx).visible:
			return False

		return True

	def _localized(self, item: MenuItem) -> MenuItem:
		custom = self._store.get_customization(item.id)
		if custom is not None and custom.custom_name:
			title = item.title
		else:
			title = self._translator.translate(item.translation_key, None, item.title or item.translation_key)

		description = item.description
		desc_key = f"{self._store.i18n_namespace}.descriptions.{item.id}"
		if self._translator.exists(desc_key):
			description = self._translator.translate(desc_key, None, item.description)

		return replace(item, title=title, description=description)

	def _title_for(self, item: MenuItem) -> str:
		if item.title:
			return item.title
		if self._config.enable_i18n:
			return self._translator.translate(item.translation_key, None, item.id)
		return item.id
