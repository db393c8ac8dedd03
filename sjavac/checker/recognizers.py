# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement recognizers.

Each recognizer owns one statement shape. `recognize(line, ctx)` answers with
a tagged result:

* `NO_MATCH`: the line is not this statement; the driver tries the next
  recognizer,
* `MATCHED`: the line is this statement and is legal; its side effects
  (declarations, initialization, frames) have been applied,
* `MatchedButInvalid(error)`: the line is this statement but breaks a rule.

Recognizers never decide whether an invalid line is fatal: in the lenient
pass the driver treats `MatchedButInvalid` as `MATCHED` (side effects still
apply), in the strict pass it raises the carried error. Structural failures
from the scope stack (closing the global frame) are raised directly and are
fatal in both passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Union

from sjavac.core.types import CONDITION_TYPES, Type, is_assignable
from sjavac.parser import (
	StatementParseError,
	is_blank,
	is_comment,
	is_scope_close,
	looks_like_control_header,
	looks_like_declaration,
	looks_like_function_header,
	looks_like_return,
	parse_assignment,
	parse_call,
	parse_control_header,
	parse_declaration,
	parse_function_header,
	parse_return,
)
from sjavac.parser.ast import Declaration, Declarator, Literal, Name, Value

from .errors import (
	DeclarationError,
	DuplicateNameError,
	FinalAssignmentError,
	IllegalLineError,
	TypeMismatchError,
	UnresolvedReferenceError,
	ValidationError,
)
from .registry import FunctionRegistry
from .scope import ScopeStack, Variable


@dataclass(frozen=True)
class NoMatch:
	pass


@dataclass(frozen=True)
class Matched:
	pass


@dataclass(frozen=True)
class MatchedButInvalid:
	error: ValidationError


LineResult = Union[NoMatch, Matched, MatchedButInvalid]

NO_MATCH = NoMatch()
MATCHED = Matched()


@dataclass
class ValidationContext:
	"""Mutable state threaded through every recognizer for one run."""

	scope: ScopeStack = field(default_factory=ScopeStack)
	registry: FunctionRegistry = field(default_factory=FunctionRegistry)
	strict: bool = False

	@property
	def phase(self) -> str:
		return "strict" if self.strict else "lenient"


class Recognizer(Protocol):
	name: str

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		...


def _result(error: Optional[ValidationError]) -> LineResult:
	return MATCHED if error is None else MatchedButInvalid(error)


def _resolve_initialized(name: Name, ctx: ValidationContext) -> Variable:
	var = ctx.scope.lookup(name.ident)
	if var is None:
		raise UnresolvedReferenceError(f"cannot find symbol '{name.ident}'", column=name.column)
	if not ctx.scope.is_initialized(var):
		raise UnresolvedReferenceError(f"variable '{name.ident}' is not initialized", column=name.column)
	return var


def _value_type(value: Value, ctx: ValidationContext) -> Type:
	if isinstance(value, Literal):
		return value.type
	return _resolve_initialized(value, ctx).type


def _check_assignable(value: Value, target: Type, ctx: ValidationContext) -> None:
	source = _value_type(value, ctx)
	if is_assignable(source, target):
		return
	column = value.column
	shown = value.text if isinstance(value, Literal) else value.ident
	raise TypeMismatchError(f"cannot assign {source} value '{shown}' to {target}", column=column)


class NotationRecognizer:
	"""Blank lines and full-line `//` comments."""

	name = "notation"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if is_blank(line) or is_comment(line):
			return MATCHED
		return NO_MATCH


class EndOfScopeRecognizer:
	name = "end-of-scope"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if not is_scope_close(line):
			return NO_MATCH
		ctx.scope.pop_frame()
		return MATCHED


class DeclarationRecognizer:
	"""`[final] <type> <name> [= <value>] (, <name> [= <value>])* ;`"""

	name = "declaration"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if not looks_like_declaration(line):
			return NO_MATCH
		try:
			decl = parse_declaration(line)
		except StatementParseError as exc:
			return MatchedButInvalid(DeclarationError("malformed variable declaration", column=exc.column))
		first_error: Optional[ValidationError] = None
		for declarator in decl.declarators:
			error = self._declare(decl, declarator, ctx)
			if first_error is None:
				first_error = error
		return _result(first_error)

	def _declare(self, decl: Declaration, declarator: Declarator, ctx: ValidationContext) -> Optional[ValidationError]:
		name = declarator.name
		if ctx.scope.declared_in_current_frame(name.ident):
			return DuplicateNameError(
				f"variable '{name.ident}' already exists in this scope",
				column=name.column,
			)
		error: Optional[ValidationError] = None
		if declarator.value is None:
			if decl.is_final:
				error = DeclarationError(f"final variable '{name.ident}' must be initialized", column=name.column)
		else:
			try:
				_check_assignable(declarator.value, decl.type, ctx)
			except ValidationError as exc:
				error = exc
		ctx.scope.declare(
			name.ident,
			Variable(type=decl.type, is_final=decl.is_final, initialized=declarator.value is not None),
		)
		return error


class AssignmentRecognizer:
	"""`<name> = <value> (, <name> = <value>)* ;`"""

	name = "assignment"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		try:
			stmt = parse_assignment(line)
		except StatementParseError:
			return NO_MATCH
		first_error: Optional[ValidationError] = None
		for item in stmt.items:
			try:
				self._assign(item.target, item.value, ctx)
			except ValidationError as exc:
				if first_error is None:
					first_error = exc
		return _result(first_error)

	def _assign(self, target: Name, value: Value, ctx: ValidationContext) -> None:
		var = ctx.scope.lookup(target.ident)
		if var is None:
			raise UnresolvedReferenceError(f"cannot find symbol '{target.ident}'", column=target.column)
		if var.is_final:
			raise FinalAssignmentError(
				f"cannot assign a value to final variable '{target.ident}'",
				column=target.column,
			)
		_check_assignable(value, var.type, ctx)
		ctx.scope.mark_initialized(target.ident)


class ControlHeaderRecognizer:
	"""`if ( <condition> ) {` and `while ( <condition> ) {` inside a function."""

	name = "control-header"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if ctx.scope.at_global_scope or not looks_like_control_header(line):
			return NO_MATCH
		try:
			header = parse_control_header(line)
		except StatementParseError as exc:
			return MatchedButInvalid(IllegalLineError(f"{exc}", column=exc.column))
		for term in header.terms:
			try:
				self._check_term(term, ctx)
			except ValidationError as exc:
				return MatchedButInvalid(exc)
		return MATCHED

	def _check_term(self, term: Value, ctx: ValidationContext) -> None:
		if isinstance(term, Literal):
			return
		var = ctx.scope.lookup(term.ident)
		if var is None:
			raise UnresolvedReferenceError(f"variable '{term.ident}' is not declared", column=term.column)
		if var.type not in CONDITION_TYPES:
			raise TypeMismatchError(
				f"variable '{term.ident}' of type {var.type} cannot be used as a condition",
				column=term.column,
			)
		if not ctx.scope.is_initialized(var):
			raise UnresolvedReferenceError(f"variable '{term.ident}' is not initialized", column=term.column)


class ReturnRecognizer:
	"""`return ;` inside a function."""

	name = "return"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if ctx.scope.at_global_scope or not looks_like_return(line):
			return NO_MATCH
		try:
			parse_return(line)
		except StatementParseError as exc:
			return MatchedButInvalid(IllegalLineError("functions return no value: expected 'return;'", column=exc.column))
		return MATCHED


class FunctionDeclarationRecognizer:
	"""
	`void <name> ( [[final] <type> <name> (, ...)*] ) {`

	On a match the signature is registered before the body is scanned and a
	frame holding the parameters is pushed; the driver then scans the body.
	"""

	name = "function-declaration"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if not looks_like_function_header(line):
			return NO_MATCH
		try:
			header = parse_function_header(line)
		except StatementParseError as exc:
			return MatchedButInvalid(DeclarationError("malformed function declaration", column=exc.column))
		fn_name = header.name
		if not ctx.scope.at_global_scope:
			return MatchedButInvalid(
				DeclarationError(
					f"function '{fn_name.ident}' must be declared at the outermost scope",
					column=fn_name.column,
				)
			)
		if not fn_name.ident[0].isalpha():
			return MatchedButInvalid(
				DeclarationError(f"function name '{fn_name.ident}' must start with a letter", column=fn_name.column)
			)
		seen: set[str] = set()
		for param in header.params:
			if param.name.ident in seen:
				return MatchedButInvalid(
					DuplicateNameError(
						f"parameter '{param.name.ident}' of '{fn_name.ident}' is declared twice",
						column=param.name.column,
					)
				)
			seen.add(param.name.ident)

		ctx.registry.declare(fn_name.ident, [p.type for p in header.params])
		ctx.scope.push_frame()
		for param in header.params:
			ctx.scope.declare(param.name.ident, Variable(type=param.type, is_final=param.is_final, initialized=True))
		return MATCHED


class FunctionCallRecognizer:
	"""`<name> ( [<value> (, <value>)*] ) ;` inside a function."""

	name = "function-call"

	def recognize(self, line: str, ctx: ValidationContext) -> LineResult:
		if ctx.scope.at_global_scope:
			return NO_MATCH
		try:
			call = parse_call(line)
		except StatementParseError:
			return NO_MATCH
		try:
			arg_types = [_value_type(arg, ctx) for arg in call.args]
		except ValidationError as exc:
			return MatchedButInvalid(exc)
		fn_name = call.name
		sig = ctx.registry.lookup(fn_name.ident)
		if sig is None:
			return MatchedButInvalid(
				UnresolvedReferenceError(f"cannot find function '{fn_name.ident}'", column=fn_name.column)
			)
		if not ctx.registry.matches(fn_name.ident, arg_types):
			shown = ", ".join(str(t) for t in arg_types)
			return MatchedButInvalid(
				TypeMismatchError(f"function {sig} cannot be called with ({shown})", column=fn_name.column)
			)
		return MATCHED


def lenient_recognizers() -> List[Recognizer]:
	"""Recognizers of the first pass: structure and declarations only."""
	return [
		EndOfScopeRecognizer(),
		NotationRecognizer(),
		DeclarationRecognizer(),
		AssignmentRecognizer(),
	]


def strict_recognizers() -> List[Recognizer]:
	"""Recognizers of the second pass: every statement shape."""
	return [
		EndOfScopeRecognizer(),
		NotationRecognizer(),
		DeclarationRecognizer(),
		AssignmentRecognizer(),
		FunctionCallRecognizer(),
		ControlHeaderRecognizer(),
		ReturnRecognizer(),
	]


__all__ = [
	"AssignmentRecognizer",
	"ControlHeaderRecognizer",
	"DeclarationRecognizer",
	"EndOfScopeRecognizer",
	"FunctionCallRecognizer",
	"FunctionDeclarationRecognizer",
	"LineResult",
	"MATCHED",
	"Matched",
	"MatchedButInvalid",
	"NO_MATCH",
	"NoMatch",
	"NotationRecognizer",
	"Recognizer",
	"ReturnRecognizer",
	"ValidationContext",
	"lenient_recognizers",
	"strict_recognizers",
]
