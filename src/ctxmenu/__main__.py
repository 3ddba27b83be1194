# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	python -m ctxmenu: print the resolved menu for one render context.
#
# Notes:
#	- Runs against the stock catalogue (or a profile of it).
#	- --setting a.b.c=value builds the user settings tree; "true"/"false"
#	  and integers are converted.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/10/2026	Paul G. LeDuc				--json / --stats output
# ---------------------------------------------------------------------------

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Optional, Sequence, TextIO

from ctxmenu.app.integration import MenuBuildResult, MenuSystemIntegration
from ctxmenu.core.logging import get_menu_logger, init_logging
from ctxmenu.core.telemetry import MemorySink, Telemetry
from ctxmenu.menu.codec import group_to_dict, item_to_dict
from ctxmenu.menu.defaults import PROFILES
from ctxmenu.menu.shortcuts import format_shortcut
from ctxmenu.menu.types import MenuGroup


_log = get_menu_logger("cli")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="ctxmenu", description="Print the context menu resolved for a page.")
	parser.add_argument("--url", default="", help="Page URL (empty: no page)")
	parser.add_argument("--selection", default="", help="Selected text")
	parser.add_argument("--media", default="", help="Media kind under the cursor (image, video, audio)")
	parser.add_argument("--tabs", type=int, default=1, help="Open tab count")
	parser.add_argument("--browser", default="chrome", help="Browser type")
	parser.add_argument("--profile", choices=PROFILES, default="default", help="Menu profile")
	parser.add_argument("--locale", default=None, help="Display locale (default: en)")
	parser.add_argument(
		"--setting",
		action="append",
		default=[],
		metavar="PATH=VALUE",
		help="User setting, e.g. features.sessions.enabled=true (repeatable)",
	)
	parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
	parser.add_argument("--stats", action="store_true", help="Include build telemetry")
	parser.add_argument("--log-level", default="WARNING", help="Logging level")
	return parser


def parse_settings(pairs: Sequence[str]) -> dict[str, Any]:
	"""
	["a.b=1", "a.c=true"] -> {"a": {"b": 1, "c": True}}
	"""
	out: dict[str, Any] = {}
	for pair in pairs:
		path, sep, raw = pair.partition("=")
		if not sep or not path.strip():
			raise ValueError(f"Expected PATH=VALUE, got {pair!r}")

		node = out
		parts = path.strip().split(".")
		for part in parts[:-1]:
			child = node.get(part)
			if not isinstance(child, dict):
				child = node[part] = {}
			node = child
		node[parts[-1]] = _coerce_value(raw.strip())
	return out


def _coerce_value(raw: str) -> Any:
	lowered = raw.lower()
	if lowered in ("true", "yes", "on"):
		return True
	if lowered in ("false", "no", "off"):
		return False
	try:
		return int(raw)
	except ValueError:
		return raw


async def run(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
	out = out or sys.stdout
	sink = MemorySink()
	telemetry = Telemetry(enabled=bool(args.stats), sink=sink)
	integration = MenuSystemIntegration(config={"locale": args.locale}, telemetry=telemetry)

	try:
		await integration.initialize(integration.get_config_for_user_profile(args.profile))

		context = {
			"page_url": args.url,
			"selection_text": args.selection,
			"media_type": args.media,
			"tab_count": args.tabs,
			"browser_type": args.browser,
		}
		result = await integration.build_menu_for_context(context, parse_settings(args.setting))
		if not result.success:
			print(f"error: {result.error}", file=sys.stderr)
			return 1

		stats = _stats(sink) if args.stats else None
		if args.json:
			_print_json(result, stats, out)
		else:
			_print_text(integration, result, stats, out)
		return 0
	finally:
		await integration.destroy()


def _stats(sink: MemorySink) -> dict[str, float]:
	return {m.name: m.value for m in sink.metrics}


def _print_json(result: MenuBuildResult, stats: Optional[dict[str, float]], out: TextIO) -> None:
	payload: dict[str, Any] = {
		"context": {
			"page_url": result.context.page_url,
			"selection_text": result.context.selection_text,
			"media_type": result.context.media_type,
			"tab_count": result.context.tab_count,
			"browser_type": result.context.browser_type,
		},
		"groups": [group_to_dict(g) for g in result.groups],
		"items": [item_to_dict(i) for i in result.visible_items],
	}
	if result.structure is not None:
		payload["total_items"] = result.structure.total_items
		payload["hidden_items"] = result.structure.hidden_items
	if stats is not None:
		payload["stats"] = stats
	json.dump(payload, out, indent=2, ensure_ascii=False)
	out.write("\n")


def _print_text(
	integration: MenuSystemIntegration,
	result: MenuBuildResult,
	stats: Optional[dict[str, float]],
	out: TextIO,
) -> None:
	structure = integration.store.structure
	groups = {g.id: g for g in result.groups}
	printed: set[str] = set()

	for group in result.groups:
		items = [i for i in result.visible_items if i.group_id == group.id]
		if not items:
			continue

		print(_group_label(integration, group, groups), file=out)
		for item in items:
			printed.add(item.id)
			print(_item_line(item, structure.show_shortcuts), file=out)
		if structure.group_separators:
			print("", file=out)

	loose = [i for i in result.visible_items if i.id not in printed]
	if loose:
		print("(ungrouped)", file=out)
		for item in loose:
			print(_item_line(item, structure.show_shortcuts), file=out)

	if result.structure is not None:
		print(
			f"{len(result.visible_items)} shown, {result.structure.hidden_items} hidden "
			f"of {result.structure.total_items} item(s)",
			file=out,
		)
	if stats is not None:
		for name, value in stats.items():
			print(f"{name}: {value:.2f}", file=out)


def _group_label(integration: MenuSystemIntegration, group: MenuGroup, visible: dict[str, MenuGroup]) -> str:
	ns = integration.store.i18n_namespace
	name = integration.translator.translate(f"{ns}.groups.{group.id}", None, group.name)
	parent = visible.get(group.parent_id) if group.parent_id else None
	if parent is None:
		return name
	parent_name = integration.translator.translate(f"{ns}.groups.{parent.id}", None, parent.name)
	return f"{parent_name} / {name}"


def _item_line(item, show_shortcuts: bool) -> str:
	line = f"  {item.title or item.translation_key}"
	if not item.enabled:
		line += " (disabled)"
	if show_shortcuts and item.shortcut is not None:
		line += f"  [{format_shortcut(item.shortcut)}]"
	return line


def main(argv: Optional[Sequence[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)

	init_logging({"log_level": args.log_level})

	try:
		parse_settings(args.setting)
	except ValueError as ex:
		parser.error(str(ex))

	_log.debug("Resolving menu for %r (profile %s)", args.url, args.profile)
	return asyncio.run(run(args))


if __name__ == "__main__":
	raise SystemExit(main())
