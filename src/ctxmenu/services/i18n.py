# ---------------------------------------------------------------------------
# File: i18n.py
# ---------------------------------------------------------------------------
# Description:
#	Translation lookup service for ctxmenu.
#
# Notes:
#	- The menu core depends only on translate(key, context, fallback).
#	- translate() never returns an empty string: current locale, then the
#	  fallback locale, then the caller's fallback, then the key itself.
#	- Custom translations (add_translations) are layered over the built-in
#	  table for their locale.
#	- Locales may be supported without shipping a table; they resolve through
#	  the fallback locale.
#	- NamespaceAccessor is a thin convenience wrapper over translate().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				require() + NamespaceAccessor
# ---------------------------------------------------------------------------

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ctxmenu.core.logging import get_menu_logger
from ctxmenu.menu.errors import MenuErrorType, MenuOrganizationError
from ctxmenu.services import locale_en


InterpolationContext = Mapping[str, Any]

_log = get_menu_logger("i18n")

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True, slots=True)
class LocaleInfo:
	code: str
	name: str
	native_name: str
	direction: str = "ltr"


SUPPORTED_LOCALES: dict[str, LocaleInfo] = {
	"en": LocaleInfo("en", "English", "English"),
	"es": LocaleInfo("es", "Spanish", "Español"),
	"fr": LocaleInfo("fr", "French", "Français"),
	"de": LocaleInfo("de", "German", "Deutsch"),
	"it": LocaleInfo("it", "Italian", "Italiano"),
	"pt": LocaleInfo("pt", "Portuguese", "Português"),
	"ja": LocaleInfo("ja", "Japanese", "日本語"),
	"zh": LocaleInfo("zh", "Chinese", "中文"),
	"ko": LocaleInfo("ko", "Korean", "한국어"),
	"ru": LocaleInfo("ru", "Russian", "Русский"),
}

BUILTIN_TABLES: dict[str, Mapping[str, Any]] = {
	locale_en.LOCALE: locale_en.TRANSLATIONS,
}


class Translator:
	"""
	Translator

	Owns the loaded locale tables and the current locale. One instance per
	integration; there is no process-wide translator.
	"""

	def __init__(
		self,
		*,
		default_locale: str = "en",
		fallback_locale: str = "en",
		enable_fallback: bool = True,
		enable_interpolation: bool = True,
		debug: bool = False,
	) -> None:
		self._default_locale = default_locale
		self._fallback_locale = fallback_locale
		self._enable_fallback = enable_fallback
		self._enable_interpolation = enable_interpolation
		self._debug = debug

		self._current: str = default_locale
		self._tables: dict[str, Mapping[str, Any]] = {}
		self._custom: dict[str, dict[str, Any]] = {}
		self._initialized = False

		self._load_builtin_tables()

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	async def initialize(self, locale: Optional[str] = None) -> None:
		"""
		Load built-in tables and select locale (or the default locale).
		An unsupported locale is logged and the default is kept.
		"""
		self._load_builtin_tables()
		self._current = self._default_locale

		target = locale or self._default_locale
		if target != self._current:
			try:
				await self.change_locale(target)
			except ValueError:
				_log.warning("Locale %r is not supported; using %r", target, self._current)

		self._initialized = True

	async def change_locale(self, locale: str) -> None:
		if locale not in SUPPORTED_LOCALES:
			raise ValueError(f"Unsupported locale: {locale}")

		if locale not in self._tables:
			_log.info("No translations bundled for %r; falling back to %r", locale, self._fallback_locale)

		self._current = locale

	def destroy(self) -> None:
		self._tables.clear()
		self._custom.clear()
		self._current = self._default_locale
		self._initialized = False

	def is_initialized(self) -> bool:
		return self._initialized

	@property
	def current_locale(self) -> str:
		return self._current

	def available_locales(self) -> list[LocaleInfo]:
		return list(SUPPORTED_LOCALES.values())

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def translate(
		self,
		key: str,
		context: Optional[InterpolationContext] = None,
		fallback: Optional[str] = None,
	) -> str:
		text = self._lookup_chain(key)

		if text is None:
			if self._debug:
				_log.warning("Missing translation for %r (locale %r)", key, self._current)
			text = fallback or key

		if context and self._enable_interpolation:
			text = _interpolate(text, context)

		return text or key

	t = translate

	def exists(self, key: str) -> bool:
		return self._lookup_chain(key) is not None

	def require(self, key: str, context: Optional[InterpolationContext] = None) -> str:
		"""
		Like translate(), but a key with no translation raises
		MenuOrganizationError(I18N_KEY_MISSING).
		"""
		if not self.exists(key):
			raise MenuOrganizationError(
				MenuErrorType.I18N_KEY_MISSING,
				f"No translation for {key!r} (locale {self._current!r})",
			)
		return self.translate(key, context)

	def add_translations(self, locale: str, namespace: str, translations: Mapping[str, Any]) -> None:
		"""
		Register strings under namespace for locale. Later calls for the same
		namespace merge over earlier ones.
		"""
		if locale not in SUPPORTED_LOCALES:
			raise ValueError(f"Unsupported locale: {locale}")
		if not namespace:
			raise ValueError("namespace must be a non-empty string")

		table = self._custom.setdefault(locale, {})
		existing = table.get(namespace)
		if isinstance(existing, dict):
			table[namespace] = _deep_merge(existing, translations)
		else:
			table[namespace] = _deep_merge({}, translations)

	def namespace(self, name: str) -> "NamespaceAccessor":
		return NamespaceAccessor(self, (name,))

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _load_builtin_tables(self) -> None:
		for locale, table in BUILTIN_TABLES.items():
			self._tables[locale] = table

	def _lookup_chain(self, key: str) -> Optional[str]:
		text = self._lookup(key, self._current)
		if text is None and self._enable_fallback and self._current != self._fallback_locale:
			text = self._lookup(key, self._fallback_locale)
		return text

	def _lookup(self, key: str, locale: str) -> Optional[str]:
		custom = self._custom.get(locale)
		if custom:
			found = _resolve_path(custom, key)
			if found is not None:
				return found

		table = self._tables.get(locale)
		if table is None:
			return None
		return _resolve_path(table, key)


class NamespaceAccessor:
	"""
	translator.namespace("menu").items["open-popup"]() -> "Open TabKiller"

	Attribute and item access extend the key path; calling translates it.
	"""

	__slots__ = ("_translator", "_path")

	def __init__(self, translator: Translator, path: tuple[str, ...]) -> None:
		self._translator = translator
		self._path = path

	def __getattr__(self, name: str) -> "NamespaceAccessor":
		if name.startswith("__"):
			raise AttributeError(name)
		return NamespaceAccessor(self._translator, self._path + (name,))

	def __getitem__(self, name: str) -> "NamespaceAccessor":
		return NamespaceAccessor(self._translator, self._path + (str(name),))

	def __call__(self, context: Optional[InterpolationContext] = None, fallback: Optional[str] = None) -> str:
		return self._translator.translate(self.key, context, fallback)

	@property
	def key(self) -> str:
		return ".".join(self._path)

	def __repr__(self) -> str:
		return f"NamespaceAccessor({self.key!r})"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve_path(table: Mapping[str, Any], key: str) -> Optional[str]:
	current: Any = table
	for part in key.split("."):
		if isinstance(current, Mapping) and part in current:
			current = current[part]
		else:
			return None
	return current if isinstance(current, str) and current else None


def _interpolate(text: str, context: InterpolationContext) -> str:
	def _sub(match: re.Match[str]) -> str:
		value = context.get(match.group(1))
		return match.group(0) if value is None else str(value)

	return _PLACEHOLDER.sub(_sub, text)


def _deep_merge(base: dict[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
	out = dict(base)
	for k, v in extra.items():
		if isinstance(v, Mapping) and isinstance(out.get(k), dict):
			out[k] = _deep_merge(out[k], v)
		elif isinstance(v, Mapping):
			out[k] = _deep_merge({}, v)
		else:
			out[k] = v
	return out
