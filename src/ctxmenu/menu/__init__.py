# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Menu core for ctxmenu (store, evaluator, resolver, shared types).
#
# Notes:
#	- Host- and translation-agnostic. Nothing here awaits.
#	- Re-export the stable surface only.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Export resolver + defaults
# ---------------------------------------------------------------------------

from __future__ import annotations

from .errors import MenuErrorType, MenuOrganizationError
from .evaluator import ContextEvaluator
from .resolver import VisibilityResolver
from .shortcuts import KeyCombination, ShortcutMap, format_shortcut, parse_shortcut
from .store import MenuOrganizer, StoreSnapshot
from .types import (
	ContextRule,
	MenuCustomization,
	MenuGroup,
	MenuItem,
	OrganizationConfig,
	OrganizationResult,
	RenderContext,
	StructureConfig,
	ValidationReport,
)

__all__ = [
	"ContextEvaluator",
	"ContextRule",
	"KeyCombination",
	"MenuCustomization",
	"MenuErrorType",
	"MenuGroup",
	"MenuItem",
	"MenuOrganizationError",
	"MenuOrganizer",
	"OrganizationConfig",
	"OrganizationResult",
	"RenderContext",
	"ShortcutMap",
	"StoreSnapshot",
	"StructureConfig",
	"ValidationReport",
	"VisibilityResolver",
	"format_shortcut",
	"parse_shortcut",
]
