# ---------------------------------------------------------------------------
# File: shortcuts.py
# ---------------------------------------------------------------------------
# Description:
#	Keyboard shortcut model for menu items (KeyCombination) plus ShortcutMap,
#	a canonical-shortcut -> item id mapping used for conflict detection.
#
# Notes:
#	- Shortcut strings are modifiers joined by "+", key last ("ctrl+shift+K").
#	- Modifier aliases are normalized (control -> ctrl, command/cmd -> meta,
#	  option -> alt). The key keeps its case for display; canonical() lowercases
#	  it so "ctrl+K" and "Ctrl+k" collide.
#	- Pure mapping; no host shortcut API involvement.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Add ShortcutMap conflict tracking
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional


MODIFIER_ALIASES: dict[str, str] = {
	"control": "ctrl",
	"ctrl": "ctrl",
	"alt": "alt",
	"option": "alt",
	"shift": "shift",
	"meta": "meta",
	"cmd": "meta",
	"command": "meta",
}

# Display/canonical order for modifiers.
MODIFIER_ORDER: tuple[str, ...] = ("ctrl", "alt", "shift", "meta")


@dataclass(frozen=True, slots=True)
class KeyCombination:
	"""
	KeyCombination

	key:		Final key ("K", ",", "F5")
	modifiers:	Normalized modifier names in the order given
	code:		Optional physical key code
	"""
	key: str
	modifiers: tuple[str, ...] = field(default_factory=tuple)
	code: Optional[str] = None

	def canonical(self) -> str:
		mods = sorted(set(self.modifiers), key=_modifier_rank)
		return "+".join(mods + [self.key.lower()])

	def __str__(self) -> str:
		return format_shortcut(self)


def normalize_modifier(name: str) -> str:
	raw = name.strip().lower()
	return MODIFIER_ALIASES.get(raw, raw)


def parse_shortcut(text: Optional[str]) -> Optional[KeyCombination]:
	"""
	Decompose "ctrl+shift+K" into KeyCombination(key="K", modifiers=("ctrl", "shift")).

	Returns None for empty input. A trailing "+" means the plus key itself
	("ctrl++").
	"""
	if text is None:
		return None

	raw = text.strip()
	if not raw:
		return None

	if raw.endswith("++"):
		head, key = raw[:-2], "+"
	elif raw == "+":
		head, key = "", "+"
	else:
		head, _, key = raw.rpartition("+")

	key = key.strip()
	if not key:
		raise ValueError(f"Shortcut {text!r} has no key")

	modifiers = tuple(normalize_modifier(p) for p in head.split("+") if p.strip()) if head else ()
	return KeyCombination(key=key, modifiers=modifiers)


def format_shortcut(combo: KeyCombination) -> str:
	return "+".join(list(combo.modifiers) + [combo.key])


def coerce_shortcut(value: object) -> Optional[KeyCombination]:
	"""
	Accept a KeyCombination, a shortcut string, or a {key, modifiers} mapping.
	"""
	if value is None or isinstance(value, KeyCombination):
		return value

	if isinstance(value, str):
		return parse_shortcut(value)

	if isinstance(value, Mapping):
		key = value.get("key")
		if not key:
			raise ValueError("Shortcut mapping requires a non-empty 'key'")
		mods = value.get("modifiers") or ()
		return KeyCombination(
			key=str(key),
			modifiers=tuple(normalize_modifier(str(m)) for m in mods),
			code=value.get("code"),
		)

	raise ValueError(f"Unsupported shortcut value: {value!r}")


def _modifier_rank(name: str) -> tuple[int, str]:
	try:
		return (MODIFIER_ORDER.index(name), name)
	except ValueError:
		return (len(MODIFIER_ORDER), name)


@dataclass
class ShortcutMap:
	"""
	ShortcutMap

	Canonical shortcut -> item id. Tracks every claimant so conflicts can be
	reported instead of silently overwritten.
	"""
	_owners: dict[str, list[str]] = field(default_factory=dict)

	def bind(self, combo: KeyCombination, item_id: str, *, overwrite: bool = True) -> None:
		if not item_id:
			raise ValueError("item_id must be a non-empty string")

		canon = combo.canonical()
		owners = self._owners.setdefault(canon, [])

		if owners and not overwrite and item_id not in owners:
			raise ValueError(f"Shortcut {canon!r} already bound to {owners[0]!r}")

		if item_id not in owners:
			owners.append(item_id)

	def unbind(self, combo: KeyCombination, item_id: Optional[str] = None) -> None:
		canon = combo.canonical()
		if item_id is None:
			self._owners.pop(canon, None)
			return

		owners = self._owners.get(canon, [])
		if item_id in owners:
			owners.remove(item_id)
		if not owners:
			self._owners.pop(canon, None)

	def resolve(self, combo: KeyCombination) -> Optional[str]:
		owners = self._owners.get(combo.canonical())
		return owners[0] if owners else None

	def conflicts(self) -> dict[str, list[str]]:
		return {k: list(v) for k, v in self._owners.items() if len(v) > 1}

	def keys(self) -> list[str]:
		return list(self._owners.keys())

	def clear(self) -> None:
		self._owners.clear()

	@classmethod
	def from_pairs(cls, pairs: Iterable[tuple[str, Optional[KeyCombination]]]) -> "ShortcutMap":
		m = cls()
		for item_id, combo in pairs:
			if combo is not None:
				m.bind(combo, item_id)
		return m
