# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Semantic side of the validator: the scope stack, the function registry, the
error taxonomy and the per-statement recognizers the driver dispatches to.
"""

from __future__ import annotations

from .errors import (
	DeclarationError,
	DuplicateNameError,
	FinalAssignmentError,
	IllegalLineError,
	ScopeError,
	StructuralError,
	TypeMismatchError,
	UnresolvedReferenceError,
	ValidationError,
)
from .recognizers import (
	MATCHED,
	NO_MATCH,
	FunctionDeclarationRecognizer,
	LineResult,
	Matched,
	MatchedButInvalid,
	NoMatch,
	Recognizer,
	ValidationContext,
	lenient_recognizers,
	strict_recognizers,
)
from .registry import FunctionRegistry, FunctionSignature
from .scope import ScopeFrame, ScopeStack, Variable

__all__ = [
	"DeclarationError",
	"DuplicateNameError",
	"FinalAssignmentError",
	"FunctionDeclarationRecognizer",
	"FunctionRegistry",
	"FunctionSignature",
	"IllegalLineError",
	"LineResult",
	"MATCHED",
	"Matched",
	"MatchedButInvalid",
	"NO_MATCH",
	"NoMatch",
	"Recognizer",
	"ScopeError",
	"ScopeFrame",
	"ScopeStack",
	"StructuralError",
	"TypeMismatchError",
	"UnresolvedReferenceError",
	"ValidationContext",
	"ValidationError",
	"Variable",
	"lenient_recognizers",
	"strict_recognizers",
]
