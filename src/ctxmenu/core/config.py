# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Small config helpers shared by ctxmenu (logging, integration, settings).
#
# Notes:
#	- cfg may be any object with .get(key, default) or a dict-like.
#	- Several key spellings can be offered; the first one present wins.
#	  (e.g., "logging.level" then "log_level", or "max_depth" then "maxDepth")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Accept multiple key spellings in cfg_get
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


_MISSING = object()


def cfg_get(cfg: Any | None, *keys: str, default: Any = None) -> Any:
	"""
	Best-effort config getter.

	Tries each key in order and returns the first value that is present
	and not None. Returns default when nothing matches.
	"""
	if cfg is None:
		return default

	for key in keys:
		value = _lookup(cfg, key)
		if value is not _MISSING and value is not None:
			return value

	return default


def _lookup(cfg: Any, key: str) -> Any:
	getter = getattr(cfg, "get", None)
	if callable(getter):
		try:
			return getter(key, _MISSING)
		except Exception:
			return _MISSING

	try:
		return cfg[key]  # type: ignore[index]
	except Exception:
		return _MISSING


@dataclass(frozen=True, slots=True)
class ConfigView:
	"""
	Light read-only wrapper for option dicts.
	"""
	options: Optional[Mapping[str, Any]] = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


def camel_case(name: str) -> str:
	"""
	"max_items_per_group" -> "maxItemsPerGroup"
	"""
	head, *rest = name.split("_")
	return head + "".join(p[:1].upper() + p[1:] for p in rest)
