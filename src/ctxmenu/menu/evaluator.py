# ---------------------------------------------------------------------------
# File: evaluator.py
# ---------------------------------------------------------------------------
# Description:
#	Context rule evaluation for ctxmenu (rule + render context -> bool).
#
# Notes:
#	- Stateless apart from the rule-type registry.
#	- Rule kinds are dispatched through a dict (type -> callable). Built-ins
#	  are registered at construction; add_custom_evaluator() replaces or adds.
#	- A rule's predicate "matches" or not; whether that is good news depends on
#	  the rule condition (show_when vs hide_when, enable_when vs disable_when).
#	- Unknown rule types evaluate to True (logged). Exceptions raised inside a
#	  single rule evaluate to False (logged).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Short-circuit evaluate_rules + explanations
# 10/07/2026	Paul G. LeDuc				Add time_range/tab_state/browser_info/session_state
# ---------------------------------------------------------------------------

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping, Optional
from urllib.parse import urlsplit

from ctxmenu.core.logging import get_menu_logger
from ctxmenu.menu.types import (
	ContextEvaluationResult,
	ContextRule,
	MenuGroup,
	MenuItem,
	RenderContext,
)


RuleEvaluator = Callable[[ContextRule, RenderContext], bool]
Clock = Callable[[], datetime]

EXTENSION_URL_PREFIXES: tuple[str, ...] = ("chrome-extension://", "moz-extension://")
INTERNAL_URL_PREFIXES: tuple[str, ...] = ("chrome://", "about:")

_log = get_menu_logger("evaluator")


class ContextEvaluator:
	"""
	ContextEvaluator

	evaluate_rule:		one rule -> bool (predicate matched)
	evaluate_rules:		ordered rules -> ContextEvaluationResult (AND, short-circuit)
	evaluate_item:		an item's rules
	evaluate_group:		a group's flags, context kinds and rules
	"""

	def __init__(self, *, clock: Optional[Clock] = None) -> None:
		self._clock: Clock = clock or datetime.now
		self._evaluators: dict[str, RuleEvaluator] = {}
		self._register_builtin_evaluators()

	# -----------------------------------------------------------------------
	# Registry
	# -----------------------------------------------------------------------

	def add_custom_evaluator(self, rule_type: str, fn: RuleEvaluator) -> None:
		if not rule_type:
			raise ValueError("rule_type must be a non-empty string")
		if not callable(fn):
			raise ValueError(f"Evaluator for {rule_type!r} must be callable")
		self._evaluators[rule_type] = fn

	def has_evaluator(self, rule_type: str) -> bool:
		return rule_type in self._evaluators

	def rule_types(self) -> list[str]:
		return list(self._evaluators.keys())

	# -----------------------------------------------------------------------
	# Evaluation
	# -----------------------------------------------------------------------

	def evaluate_rule(self, rule: ContextRule, context: RenderContext) -> bool:
		fn = self._evaluators.get(rule.type)
		if fn is None:
			_log.warning("Unknown context rule type %r; treating as matched", rule.type)
			return True

		try:
			return bool(fn(rule, context))
		except Exception:
			_log.warning("Context rule %r raised; treating as not matched", rule.type, exc_info=True)
			return False

	def evaluate_rules(self, rules: Iterable[ContextRule], context: RenderContext) -> ContextEvaluationResult:
		"""
		AND of all rules, in order. Stops at the first rule whose outcome
		disagrees with its condition and reports it as the failed rule.
		"""
		matched: list[ContextRule] = []

		for rule in rules:
			hit = self.evaluate_rule(rule, context)
			condition = rule.condition or "show_when"

			if condition in ("hide_when", "disable_when"):
				passed = not hit
			else:
				passed = hit

			if passed:
				matched.append(rule)
				continue

			if condition in ("enable_when", "disable_when"):
				visible, enabled = True, False
			else:
				visible, enabled = False, False

			return ContextEvaluationResult(
				visible=visible,
				enabled=enabled,
				matched_rules=tuple(matched),
				failed_rules=(rule,),
				reason=f"context rule {rule.type}:{condition} failed",
			)

		return ContextEvaluationResult(visible=True, enabled=True, matched_rules=tuple(matched))

	def evaluate_item(self, item: MenuItem, context: RenderContext) -> ContextEvaluationResult:
		return self.evaluate_rules(item.context_rules, context)

	def evaluate_group(self, group: MenuGroup, context: RenderContext) -> ContextEvaluationResult:
		if not group.visible:
			return ContextEvaluationResult(visible=False, enabled=False, reason="group hidden")

		if group.contexts:
			current = current_context_kind(context)
			if current != "all" and "all" not in group.contexts and current not in group.contexts:
				return ContextEvaluationResult(
					visible=False,
					enabled=False,
					reason=f"group not shown in {current!r} context",
				)

		result = self.evaluate_rules(group.context_rules, context)
		if result.visible and result.enabled and not group.enabled:
			return ContextEvaluationResult(
				visible=True,
				enabled=False,
				matched_rules=result.matched_rules,
				reason="group disabled",
			)
		return result

	# -----------------------------------------------------------------------
	# Built-in rule kinds
	# -----------------------------------------------------------------------

	def _register_builtin_evaluators(self) -> None:
		builtins: dict[str, RuleEvaluator] = {
			"url": _eval_url,
			"domain": _eval_domain,
			"tab_count": _eval_tab_count,
			"selection_exists": _eval_selection,
			"media_type": _eval_media_type,
			"page_type": _eval_page_type,
			"extension_context": _eval_extension_context,
			"user_setting": _eval_user_setting,
			"feature_enabled": _eval_feature_enabled,
			"time_range": self._eval_time_range,
			"tab_state": _eval_tab_state,
			"browser_info": _eval_browser_info,
			"session_state": _eval_session_state,
		}
		for rule_type, fn in builtins.items():
			self.add_custom_evaluator(rule_type, fn)

	def _eval_time_range(self, rule: ContextRule, context: RenderContext) -> bool:
		"""
		value: "09-17" (inclusive hours) or {"days": [0..6], "startHour": h, "endHour": h}.
		Days use 0 = Sunday.
		"""
		if not rule.value:
			return False

		now = self._clock()
		hour = now.hour
		day = (now.weekday() + 1) % 7

		window = rule.value
		if isinstance(window, str):
			start_raw, _, end_raw = window.partition("-")
			try:
				start, end = int(start_raw), int(end_raw)
			except ValueError:
				return False
			return start <= hour <= end

		if isinstance(window, Mapping):
			days = window.get("days")
			if days is not None and day not in days:
				return False
			start = window.get("startHour", window.get("start_hour"))
			end = window.get("endHour", window.get("end_hour"))
			if start is not None and end is not None:
				return int(start) <= hour <= int(end)

		return True


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def current_context_kind(context: RenderContext) -> str:
	url = context.page_url or ""
	if url:
		if url.startswith(EXTENSION_URL_PREFIXES):
			return "browser_action"
		return "page"
	return "all"


def page_kind(url: str) -> str:
	if url.startswith(EXTENSION_URL_PREFIXES):
		return "extension"
	if url.startswith(INTERNAL_URL_PREFIXES):
		return "internal"
	if url.startswith("file://"):
		return "local"
	if url.startswith(("https://", "http://")):
		return "web"
	return "regular"


def compare(actual: str, operator: Optional[str], expected: Any, *, default: str = "contains") -> bool:
	"""
	Apply a rule operator to a resolved string field.
	"""
	op = operator or default

	if op == "exists":
		return bool(actual)

	pattern = "" if expected is None else str(expected)

	if op == "equals":
		return actual == pattern
	if op == "contains":
		return pattern in actual
	if op == "startsWith":
		return actual.startswith(pattern)
	if op == "endsWith":
		return actual.endswith(pattern)
	if op == "matches":
		try:
			return re.search(pattern, actual) is not None
		except re.error:
			return False

	_log.warning("Unknown rule operator %r; using %r", op, default)
	return compare(actual, default, expected, default="contains")


def lookup_path(data: Any, path: str) -> Any:
	"""
	Dotted-path lookup into nested mappings ("ui.menu.showIcons").
	"""
	current = data
	for part in path.split("."):
		if isinstance(current, Mapping) and part in current:
			current = current[part]
		else:
			return None
	return current


def _is_extension_url(url: str) -> bool:
	return bool(url) and url.startswith(EXTENSION_URL_PREFIXES)


def _eval_url(rule: ContextRule, context: RenderContext) -> bool:
	if not context.page_url or not rule.value:
		return False
	return compare(context.page_url, rule.operator, rule.value)


def _eval_domain(rule: ContextRule, context: RenderContext) -> bool:
	if not context.page_url or not rule.value:
		return False
	try:
		host = urlsplit(context.page_url).hostname or ""
	except ValueError:
		return False
	if not host:
		return False
	return compare(host, rule.operator, rule.value)


def _eval_tab_count(rule: ContextRule, context: RenderContext) -> bool:
	count = int(context.tab_count or 0)
	threshold = int(rule.value or 0)
	if rule.operator == "equals":
		return count == threshold
	return count >= threshold


def _eval_selection(rule: ContextRule, context: RenderContext) -> bool:
	return bool(context.selection_text and context.selection_text.strip())


def _eval_media_type(rule: ContextRule, context: RenderContext) -> bool:
	if rule.operator == "exists":
		return bool(context.media_type)
	if not context.media_type or not rule.value:
		return False
	return compare(context.media_type, rule.operator, rule.value, default="equals")


def _eval_page_type(rule: ContextRule, context: RenderContext) -> bool:
	if not context.page_url or not rule.value:
		return False
	kind = page_kind(context.page_url)
	if rule.operator == "exists":
		return True
	return kind == rule.value


def _eval_extension_context(rule: ContextRule, context: RenderContext) -> bool:
	return context.browser_type == "extension" or _is_extension_url(context.page_url)


def _eval_user_setting(rule: ContextRule, context: RenderContext) -> bool:
	"""
	value: "path.to.setting" or {"path": "...", "value": expected}.

	- equals:	setting == expected (expected defaults to True)
	- exists:	setting is present
	- default:	setting is truthy
	"""
	if not context.user_settings or not rule.value:
		return False

	if isinstance(rule.value, Mapping):
		path = str(rule.value.get("path", ""))
		expected = rule.value.get("value", True)
	else:
		path = str(rule.value)
		expected = True

	setting = lookup_path(context.user_settings, path)

	if rule.operator == "equals":
		return setting == expected
	if rule.operator == "exists":
		return setting is not None
	return bool(setting)


# Feature name -> (settings path, default when absent)
_FEATURE_SETTINGS: dict[str, tuple[str, bool]] = {
	"contextMenus": ("ui.menu.enableContextMenus", True),
	"sessions": ("general.autoStartSessions", True),
	"notifications": ("general.enableNotifications", True),
	"analytics": ("general.enableAnalytics", False),
	"browserSync": ("general.enableBrowserSync", True),
	"ssbSync": ("privacy.enableSSBSync", False),
	"dataEncryption": ("privacy.encryptData", True),
	"shortcuts": ("ui.menu.showShortcuts", True),
	"icons": ("ui.menu.showIcons", True),
	"submenus": ("ui.menu.enableSubmenus", True),
}


def _eval_feature_enabled(rule: ContextRule, context: RenderContext) -> bool:
	if not context.user_settings or not rule.value:
		return False

	feature = str(rule.value)
	settings = context.user_settings

	if feature == "incognito":
		return not lookup_path(settings, "privacy.excludeIncognito")

	known = _FEATURE_SETTINGS.get(feature)
	if known is not None:
		path, default_on = known
		value = lookup_path(settings, path)
		if default_on:
			return value is not False
		return value is True

	return lookup_path(settings, f"features.{feature}") is True


def _eval_tab_state(rule: ContextRule, context: RenderContext) -> bool:
	if not rule.value:
		return False

	count = int(context.tab_count or 0)
	state = rule.value
	if state == "multiple":
		return count > 1
	if state == "single":
		return count == 1
	if state == "many":
		return count > 5
	if state == "few":
		return count <= 5
	return True


_MOBILE_MARKERS: tuple[str, ...] = ("android", "webos", "iphone", "ipad", "ipod", "blackberry", "iemobile", "opera mini")


def _eval_browser_info(rule: ContextRule, context: RenderContext) -> bool:
	if not rule.value:
		return False

	browser = (context.browser_type or "").lower()
	wanted = str(rule.value).lower()
	if wanted == "mobile":
		return any(m in browser for m in _MOBILE_MARKERS)
	if wanted == "desktop":
		return not any(m in browser for m in _MOBILE_MARKERS)
	return compare(browser, rule.operator, wanted, default="contains")


def _eval_session_state(rule: ContextRule, context: RenderContext) -> bool:
	if not rule.value or not context.user_settings:
		return False

	settings = context.user_settings
	state = rule.value
	if state == "active":
		return lookup_path(settings, "general.autoStartSessions") is True
	if state == "tracking_enabled":
		return lookup_path(settings, "general.autoStartSessions") is not False
	if state == "sync_enabled":
		return lookup_path(settings, "privacy.enableSSBSync") is True
	return True
