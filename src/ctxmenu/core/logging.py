# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for ctxmenu (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Idempotent initialization (won't duplicate handlers).
#	- Library modules only ask for loggers; applications (and the CLI) decide
#	  whether to call init_logging().
#
#	Supported cfg keys (first match wins):
#	- Level:		"logging.level", "log_level"			(default: "INFO")
#	- Console:		"logging.console", "log_console"		(default: True)
#	- File:			"logging.file", "log_file"				(default: None)
#	- File mode:	"logging.file_mode", "log_file_mode"	(default: "a")
#	- Root reset:	"logging.reset_root", "log_reset_root"	(default: True)
#	- Format:		"logging.format", "log_format"
#	- Date format:	"logging.datefmt", "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Use shared cfg_get + LoggingOptions signature
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any
import logging
import os

from ctxmenu.core.config import cfg_get


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

MENU_LOGGER_BASE = "ctxmenu.menu"


@dataclass(frozen=True, slots=True)
class LoggingOptions:
	level: int = logging.INFO
	console: bool = True
	log_file: str | None = None
	file_mode: str = "a"
	reset_root: bool = True
	fmt: str = DEFAULT_FORMAT
	datefmt: str = DEFAULT_DATEFMT

	@classmethod
	def from_cfg(cls, cfg: Any | None) -> "LoggingOptions":
		log_file = cfg_get(cfg, "logging.file", "log_file")
		return cls(
			level=_coerce_level(cfg_get(cfg, "logging.level", "log_level", default="INFO")),
			console=bool(cfg_get(cfg, "logging.console", "log_console", default=True)),
			log_file=str(log_file) if log_file else None,
			file_mode=_coerce_file_mode(cfg_get(cfg, "logging.file_mode", "log_file_mode", default="a")),
			reset_root=bool(cfg_get(cfg, "logging.reset_root", "log_reset_root", default=True)),
			fmt=str(cfg_get(cfg, "logging.format", "log_format", default=DEFAULT_FORMAT)),
			datefmt=str(cfg_get(cfg, "logging.datefmt", "log_datefmt", default=DEFAULT_DATEFMT)),
		)


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_APPLIED: LoggingOptions | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_menu_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a menu-subsystem logger.

	Examples:
		get_menu_logger()				-> ctxmenu.menu
		get_menu_logger("store")		-> ctxmenu.menu.store
		get_menu_logger("integration")	-> ctxmenu.menu.integration
	"""
	if component:
		return logging.getLogger(f"{MENU_LOGGER_BASE}.{component}")
	return logging.getLogger(MENU_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> LoggingOptions:
	"""
	Initialize stdlib logging for ctxmenu.

	Safe to call multiple times. The root logger is only reconfigured when
	the resolved options differ from the last applied ones.

	Returns:
		The options now in effect.
	"""
	global _APPLIED

	options = LoggingOptions.from_cfg(cfg)
	if _APPLIED is not None and astuple(_APPLIED) == astuple(options):
		return options

	_configure_root_logger(options)
	_APPLIED = options
	return options


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _coerce_level(level: Any) -> int:
	if isinstance(level, bool):
		return logging.INFO

	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = getattr(logging, val, None)
		return resolved if isinstance(resolved, int) else logging.INFO

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only "a" or "w" are accepted for the FileHandler.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _configure_root_logger(options: LoggingOptions) -> None:
	root = logging.getLogger()
	root.setLevel(options.level)

	if options.reset_root:
		for handler in list(root.handlers):
			root.removeHandler(handler)

	formatter = logging.Formatter(fmt=options.fmt, datefmt=options.datefmt)

	if options.console:
		ch = logging.StreamHandler()
		ch.setLevel(options.level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if options.log_file:
		parent = os.path.dirname(os.path.abspath(options.log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(options.log_file, mode=options.file_mode, encoding="utf-8")
		fh.setLevel(options.level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _APPLIED
	_APPLIED = None
