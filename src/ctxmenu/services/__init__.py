# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for ctxmenu.
#
#	Services sit outside the menu core: translation lookup and the host
#	registration boundary. The integration facade constructs and wires them.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from .host import (
	InMemoryRegistrar,
	MenuRegistrar,
	NativeMenuEntry,
	ShortcutCommand,
	ShortcutRegistrar,
)
from .i18n import NamespaceAccessor, Translator

__all__ = [
	"InMemoryRegistrar",
	"MenuRegistrar",
	"NamespaceAccessor",
	"NativeMenuEntry",
	"ShortcutCommand",
	"ShortcutRegistrar",
	"Translator",
]
