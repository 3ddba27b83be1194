# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Error kinds raised by the menu organization subsystem.
#
# Notes:
#	- Store mutations raise MenuOrganizationError; the integration facade
#	  lets them through to the caller.
#	- Resolution failures are wrapped as CONTEXT_RULE_ERROR.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Attach validation report to INVALID_STRUCTURE
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
	from ctxmenu.menu.types import ValidationReport


class MenuErrorType(str, Enum):
	INVALID_STRUCTURE = "INVALID_STRUCTURE"
	CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"
	MISSING_GROUP = "MISSING_GROUP"
	INVALID_PRIORITY = "INVALID_PRIORITY"
	CONTEXT_RULE_ERROR = "CONTEXT_RULE_ERROR"
	I18N_KEY_MISSING = "I18N_KEY_MISSING"
	UNKNOWN = "UNKNOWN"


class MenuOrganizationError(Exception):
	"""
	MenuOrganizationError

	- type:			MenuErrorType
	- item_id:		Offending item id (when known)
	- group_id:		Offending group id (when known)
	- cause:		Wrapped exception (also set as __cause__ by callers using "raise ... from")
	- validation:	Full validation report when a whole configuration was rejected
	"""

	def __init__(
		self,
		type: MenuErrorType,
		message: str,
		*,
		item_id: Optional[str] = None,
		group_id: Optional[str] = None,
		cause: Optional[BaseException] = None,
		validation: Optional["ValidationReport"] = None,
	) -> None:
		super().__init__(message)
		self.type = MenuErrorType(type)
		self.message = message
		self.item_id = item_id
		self.group_id = group_id
		self.cause = cause
		self.validation = validation

	def __repr__(self) -> str:
		return (
			f"<{self.__class__.__name__} type={self.type.value} "
			f"item_id={self.item_id!r} group_id={self.group_id!r} message={self.message!r}>"
		)
