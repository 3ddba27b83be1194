# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public app package surface for ctxmenu.
#
# Notes:
#	- Lazy exports keep "import ctxmenu.app.config" free of the facade's
#	  import graph (menu core + services).
# ---------------------------------------------------------------------------

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

__all__ = [
	"IntegrationConfig",
	"MenuBuildResult",
	"MenuSystemIntegration",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"IntegrationConfig": ("ctxmenu.app.config", "IntegrationConfig"),
	"MenuBuildResult": ("ctxmenu.app.integration", "MenuBuildResult"),
	"MenuSystemIntegration": ("ctxmenu.app.integration", "MenuSystemIntegration"),
}


def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	return getattr(importlib.import_module(mod_name), attr_name)


def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))


if TYPE_CHECKING:
	from ctxmenu.app.config import IntegrationConfig
	from ctxmenu.app.integration import MenuBuildResult, MenuSystemIntegration
