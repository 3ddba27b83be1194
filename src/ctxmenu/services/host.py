# ---------------------------------------------------------------------------
# File: host.py
# ---------------------------------------------------------------------------
# Description:
#	Host registration boundary for ctxmenu (native context menu + shortcuts).
#
# Notes:
#	- The host's APIs are reached only through MenuRegistrar /
#	  ShortcutRegistrar. Either may be sync or async; call_maybe_async() awaits
#	  whatever comes back.
#	- Entry/command builders are pure; titles are supplied by the caller so
#	  this module stays translation-agnostic.
#	- InMemoryRegistrar records what it was given. Used by the CLI and tests.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Protocol, Sequence, runtime_checkable

from ctxmenu.menu.shortcuts import KeyCombination
from ctxmenu.menu.types import ActivateHandler, MenuItem


TitleFor = Callable[[MenuItem], str]


@dataclass(frozen=True, slots=True)
class NativeMenuEntry:
	id: str
	kind: str
	title: str
	contexts: tuple[str, ...]
	enabled: bool = True
	visible: bool = True
	parent_id: Optional[str] = None
	icon: Optional[str] = None
	on_activate: Optional[ActivateHandler] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class ShortcutCommand:
	id: str
	name: str
	description: str
	category: str
	default_shortcut: KeyCombination
	handler: Callable[..., Awaitable[None]] = field(compare=False, repr=False)
	enabled: bool = True
	visible: bool = True
	contexts: tuple[str, ...] = ("all",)


@runtime_checkable
class MenuRegistrar(Protocol):
	def register_menu_items(self, entries: Sequence[NativeMenuEntry]) -> Any: ...


@runtime_checkable
class ShortcutRegistrar(Protocol):
	def register_commands(self, commands: Sequence[ShortcutCommand]) -> Any: ...


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_menu_entries(
	items: Sequence[MenuItem],
	title_for: TitleFor,
	*,
	submenus: bool = True,
) -> list[NativeMenuEntry]:
	"""
	Render-ready items -> host menu entries, in the given order.
	Items hang under their group only when submenus are enabled.
	"""
	return [
		NativeMenuEntry(
			id=item.id,
			kind=item.kind or "normal",
			title=title_for(item),
			contexts=item.contexts or ("page",),
			enabled=item.enabled,
			visible=item.visible,
			parent_id=item.group_id if submenus else None,
			icon=item.icon_url,
			on_activate=item.on_activate,
		)
		for item in items
	]


def build_shortcut_commands(items: Sequence[MenuItem], title_for: TitleFor) -> list[ShortcutCommand]:
	"""
	Items carrying a shortcut -> host commands. Items without one are skipped.
	"""
	commands: list[ShortcutCommand] = []
	for item in items:
		if item.shortcut is None:
			continue
		commands.append(
			ShortcutCommand(
				id=item.id,
				name=title_for(item),
				description=item.description or "",
				category=item.category,
				default_shortcut=item.shortcut,
				handler=_command_handler(item),
				enabled=item.enabled,
				visible=item.visible,
			)
		)
	return commands


def _command_handler(item: MenuItem) -> Callable[..., Awaitable[None]]:
	async def _run(command_id: str = "", *args: Any) -> None:
		if item.on_activate is None:
			return
		await call_maybe_async(item.on_activate, {"menu_item_id": command_id or item.id}, *args)

	return _run


async def call_maybe_async(fn: Callable[..., Any], *args: Any) -> Any:
	result = fn(*args)
	if inspect.isawaitable(result):
		result = await result
	return result


# ---------------------------------------------------------------------------
# In-memory host
# ---------------------------------------------------------------------------

@dataclass
class InMemoryRegistrar:
	"""
	InMemoryRegistrar

	Satisfies both registrar protocols. Each call replaces what was recorded.
	"""
	entries: list[NativeMenuEntry] = field(default_factory=list)
	commands: list[ShortcutCommand] = field(default_factory=list)
	calls: int = 0

	def register_menu_items(self, entries: Sequence[NativeMenuEntry]) -> None:
		self.calls += 1
		self.entries = list(entries)

	def register_commands(self, commands: Sequence[ShortcutCommand]) -> None:
		self.calls += 1
		self.commands = list(commands)

	def clear(self) -> None:
		self.entries.clear()
		self.commands.clear()
		self.calls = 0
