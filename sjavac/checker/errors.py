# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Validation error taxonomy.

Validation is first-failure-wins: the first error raised (or, in the strict
pass, returned as `MatchedButInvalid`) ends the run. Every error carries a
stable `code` so tests and JSON consumers do not need to match on message
text. The driver attaches the line number and pass once the error escapes a
recognizer.
"""

from __future__ import annotations

from typing import Optional

from sjavac.core.diagnostics import Diagnostic
from sjavac.core.span import Span


class ValidationError(Exception):
	"""Base class for every S-Java validity violation."""

	code = "E_INVALID"

	def __init__(self, message: str, *, line: Optional[int] = None, column: Optional[int] = None) -> None:
		super().__init__(message)
		self.message = message
		self.line = line
		self.column = column
		self.phase: Optional[str] = None

	def at_line(self, line: int, phase: str) -> "ValidationError":
		"""Record where the error surfaced unless a recognizer already did."""
		if self.line is None:
			self.line = line
		if self.phase is None:
			self.phase = phase
		return self

	def to_diagnostic(self, file: Optional[str] = None) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase=self.phase,
			span=Span(file=file, line=self.line, column=self.column),
		)


class StructuralError(ValidationError):
	"""Unbalanced blocks or a function body not ending in `return;`."""

	code = "E_STRUCTURE"


class ScopeError(StructuralError):
	"""A closing brace with only the global frame left."""

	code = "E_SCOPE_CLOSE"


class DeclarationError(ValidationError):
	code = "E_DECLARATION"


class DuplicateNameError(DeclarationError):
	code = "E_DUPLICATE_NAME"


class FinalAssignmentError(DeclarationError):
	code = "E_FINAL_ASSIGN"


class TypeMismatchError(ValidationError):
	"""Incompatible assignment, condition or call-argument types."""

	code = "E_TYPE"


class UnresolvedReferenceError(ValidationError):
	"""Undeclared or uninitialized name, or a call to an unknown function."""

	code = "E_REFERENCE"


class IllegalLineError(ValidationError):
	"""A line that no recognizer accepts where one is required."""

	code = "E_SYNTAX"


__all__ = [
	"DeclarationError",
	"DuplicateNameError",
	"FinalAssignmentError",
	"IllegalLineError",
	"ScopeError",
	"StructuralError",
	"TypeMismatchError",
	"UnresolvedReferenceError",
	"ValidationError",
]
