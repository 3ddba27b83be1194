# ---------------------------------------------------------------------------
# File: test_evaluator.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ctxmenu.menu.evaluator (ContextEvaluator).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# 10/07/2026	Paul G. LeDuc				time_range / tab_state / browser_info
# ---------------------------------------------------------------------------

from __future__ import annotations

from datetime import datetime

import pytest

from ctxmenu.menu.evaluator import ContextEvaluator, compare, current_context_kind, page_kind
from ctxmenu.menu.types import ContextRule, MenuGroup, MenuItem, RenderContext


WEB = RenderContext(page_url="https://example.com/docs", tab_count=3)


def test_url_and_domain_rules_use_operators():
	ev = ContextEvaluator()

	assert ev.evaluate_rule(ContextRule("url", value="example"), WEB) is True
	assert ev.evaluate_rule(ContextRule("url", operator="startsWith", value="https://"), WEB) is True
	assert ev.evaluate_rule(ContextRule("url", operator="endsWith", value=".org"), WEB) is False
	assert ev.evaluate_rule(ContextRule("domain", operator="equals", value="example.com"), WEB) is True
	assert ev.evaluate_rule(ContextRule("url", operator="matches", value=r"/docs$"), WEB) is True
	assert ev.evaluate_rule(ContextRule("url", value="x"), RenderContext()) is False


def test_tab_count_threshold_and_equals():
	ev = ContextEvaluator()

	assert ev.evaluate_rule(ContextRule("tab_count", value=2), WEB) is True
	assert ev.evaluate_rule(ContextRule("tab_count", operator="equals", value=2), WEB) is False
	assert ev.evaluate_rule(ContextRule("tab_count", value=5), WEB) is False


def test_selection_media_page_and_extension_rules():
	ev = ContextEvaluator()
	ctx = RenderContext(page_url="chrome-extension://abc/popup.html", selection_text=" hi ", media_type="image")

	assert ev.evaluate_rule(ContextRule("selection_exists"), ctx) is True
	assert ev.evaluate_rule(ContextRule("selection_exists"), RenderContext(selection_text="   ")) is False
	assert ev.evaluate_rule(ContextRule("media_type", value="image"), ctx) is True
	assert ev.evaluate_rule(ContextRule("media_type", operator="exists"), RenderContext()) is False
	assert ev.evaluate_rule(ContextRule("page_type", value="extension"), ctx) is True
	assert ev.evaluate_rule(ContextRule("page_type", value="web"), WEB) is True
	assert ev.evaluate_rule(ContextRule("extension_context"), ctx) is True
	assert ev.evaluate_rule(ContextRule("extension_context"), WEB) is False


def test_user_setting_and_feature_rules():
	ev = ContextEvaluator()
	ctx = RenderContext(user_settings={
		"features": {"sessions": {"enabled": True}, "beta": True},
		"general": {"enableAnalytics": False},
		"privacy": {"excludeIncognito": True},
	})

	assert ev.evaluate_rule(ContextRule("user_setting", operator="equals", value="features.sessions.enabled"), ctx) is True
	assert ev.evaluate_rule(ContextRule("user_setting", operator="equals", value={"path": "features.beta", "value": False}), ctx) is False
	assert ev.evaluate_rule(ContextRule("user_setting", operator="exists", value="general.enableAnalytics"), ctx) is True
	assert ev.evaluate_rule(ContextRule("user_setting", value="missing.path"), ctx) is False

	assert ev.evaluate_rule(ContextRule("feature_enabled", value="analytics"), ctx) is False
	assert ev.evaluate_rule(ContextRule("feature_enabled", value="notifications"), ctx) is True
	assert ev.evaluate_rule(ContextRule("feature_enabled", value="incognito"), ctx) is False
	assert ev.evaluate_rule(ContextRule("feature_enabled", value="beta"), ctx) is True


def test_time_range_uses_injected_clock():
	# 2026-10-19 is a Monday (day 1 with 0 = Sunday)
	ev = ContextEvaluator(clock=lambda: datetime(2026, 10, 19, 10, 30))

	assert ev.evaluate_rule(ContextRule("time_range", value="09-17"), RenderContext()) is True
	assert ev.evaluate_rule(ContextRule("time_range", value="18-23"), RenderContext()) is False
	assert ev.evaluate_rule(ContextRule("time_range", value={"days": [1, 2], "startHour": 8, "endHour": 12}), RenderContext()) is True
	assert ev.evaluate_rule(ContextRule("time_range", value={"days": [0, 6]}), RenderContext()) is False


def test_tab_state_browser_and_session_rules():
	ev = ContextEvaluator()

	assert ev.evaluate_rule(ContextRule("tab_state", value="multiple"), WEB) is True
	assert ev.evaluate_rule(ContextRule("tab_state", value="single"), WEB) is False
	assert ev.evaluate_rule(ContextRule("browser_info", value="firefox"), RenderContext(browser_type="Firefox")) is True
	assert ev.evaluate_rule(ContextRule("browser_info", value="desktop"), RenderContext(browser_type="chrome")) is True

	settings = RenderContext(user_settings={"general": {"autoStartSessions": True}})
	assert ev.evaluate_rule(ContextRule("session_state", value="active"), settings) is True
	assert ev.evaluate_rule(ContextRule("session_state", value="sync_enabled"), settings) is False


def test_unknown_rule_type_passes_and_raising_rule_fails():
	ev = ContextEvaluator()

	def boom(rule, ctx):
		raise RuntimeError("boom")

	ev.add_custom_evaluator("boom", boom)

	assert ev.evaluate_rule(ContextRule("no_such_type"), WEB) is True
	assert ev.evaluate_rule(ContextRule("boom"), WEB) is False


def test_add_custom_evaluator_replaces_and_validates():
	ev = ContextEvaluator()

	ev.add_custom_evaluator("url", lambda rule, ctx: False)
	assert ev.evaluate_rule(ContextRule("url", value="example"), WEB) is False

	with pytest.raises(ValueError):
		ev.add_custom_evaluator("", lambda rule, ctx: True)
	with pytest.raises(ValueError):
		ev.add_custom_evaluator("x", "not callable")  # type: ignore[arg-type]

	assert ev.has_evaluator("time_range") is True


def test_evaluate_rules_short_circuits_and_explains():
	ev = ContextEvaluator()
	calls: list[str] = []

	def spy(rule, ctx):
		calls.append(rule.value)
		return True

	ev.add_custom_evaluator("spy", spy)

	rules = (
		ContextRule("spy", value="first"),
		ContextRule("tab_count", value=10),
		ContextRule("spy", value="never"),
	)
	result = ev.evaluate_rules(rules, WEB)

	assert result.visible is False
	assert result.enabled is False
	assert result.matched_rules == (rules[0],)
	assert result.failed_rules == (rules[1],)
	assert "tab_count" in result.reason
	assert calls == ["first"]


def test_hide_and_disable_conditions():
	ev = ContextEvaluator()

	hide = ev.evaluate_rules((ContextRule("url", "hide_when", value="example"),), WEB)
	assert hide.visible is False

	disable = ev.evaluate_rules((ContextRule("url", "disable_when", value="example"),), WEB)
	assert disable.visible is True
	assert disable.enabled is False

	enable = ev.evaluate_rules((ContextRule("url", "enable_when", value="nomatch"),), WEB)
	assert enable.visible is True
	assert enable.enabled is False


def test_evaluate_item_with_no_rules_is_visible():
	ev = ContextEvaluator()

	result = ev.evaluate_item(MenuItem("x", "k"), WEB)

	assert result.visible is True
	assert result.enabled is True
	assert result.failed_rules == ()


def test_evaluate_group_flags_and_context_kinds():
	ev = ContextEvaluator()

	assert ev.evaluate_group(MenuGroup("g", "G", visible=False), WEB).reason == "group hidden"

	disabled = ev.evaluate_group(MenuGroup("g", "G", enabled=False), WEB)
	assert disabled.visible is True
	assert disabled.enabled is False
	assert disabled.reason == "group disabled"

	link_only = MenuGroup("g", "G", contexts=("link",))
	assert ev.evaluate_group(link_only, WEB).visible is False
	assert ev.evaluate_group(link_only, RenderContext()).visible is True
	assert ev.evaluate_group(MenuGroup("g", "G", contexts=("all",)), WEB).visible is True


def test_context_helpers():
	assert current_context_kind(RenderContext()) == "all"
	assert current_context_kind(WEB) == "page"
	assert current_context_kind(RenderContext(page_url="moz-extension://x/")) == "browser_action"

	assert page_kind("about:blank") == "internal"
	assert page_kind("file:///tmp/a.html") == "local"
	assert page_kind("ftp://x") == "regular"

	assert compare("abc", "exists", None) is True
	assert compare("abc", "matches", "[") is False
	assert compare("abc", "weird", "b") is True
