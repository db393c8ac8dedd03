# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type catalog for S-Java.

The language has exactly five primitive types. This module owns their
spelling, the literal grammar of each one, and the two compatibility
relations the checker needs:

* `is_assignable`: widening used by declarations and assignments
  (int → double → boolean),
* `is_call_compatible`: exact equality used when matching call arguments
  against a function signature.

The two relations are intentionally kept apart; calls never widen.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional


@dataclass(frozen=True)
class Type:
	name: str

	def __str__(self) -> str:  # pragma: no cover - trivial repr
		return self.name


INT = Type("int")
DOUBLE = Type("double")
BOOLEAN = Type("boolean")
CHAR = Type("char")
STRING = Type("String")

_PRIMITIVES: Dict[str, Type] = {
	"int": INT,
	"double": DOUBLE,
	"boolean": BOOLEAN,
	"char": CHAR,
	"String": STRING,
}

# Source types accepted by each declared type besides itself.
_WIDENING: Dict[Type, FrozenSet[Type]] = {
	DOUBLE: frozenset({INT}),
	BOOLEAN: frozenset({INT, DOUBLE}),
}

# Types allowed as terms of an if/while condition.
CONDITION_TYPES: FrozenSet[Type] = frozenset({INT, DOUBLE, BOOLEAN})

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_DOUBLE_LITERAL = re.compile(r"[+-]?([0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)")
_BOOLEAN_LITERAL = re.compile(r"true|false")
_CHAR_LITERAL = re.compile(r"'[^']'")
_STRING_LITERAL = re.compile(r'"[^"]*"')

# Checked in order: an int literal is also a valid double literal, so the
# narrowest type wins.
_LITERAL_GRAMMARS = (
	(INT, _INT_LITERAL),
	(DOUBLE, _DOUBLE_LITERAL),
	(BOOLEAN, _BOOLEAN_LITERAL),
	(CHAR, _CHAR_LITERAL),
	(STRING, _STRING_LITERAL),
)


class TypeCatalogError(Exception):
	pass


def resolve_type(name: str) -> Type:
	"""Map a type keyword to its Type; unknown keywords are an error."""
	builtin = _PRIMITIVES.get(name)
	if builtin is None:
		raise TypeCatalogError(f"'{name}' is not an S-Java type")
	return builtin


def is_type_keyword(name: str) -> bool:
	return name in _PRIMITIVES


def literal_type(text: str) -> Optional[Type]:
	"""
	Infer the type of a literal from its spelling.

	Returns None when `text` is not a literal at all (e.g. an identifier).
	"""
	for ty, grammar in _LITERAL_GRAMMARS:
		if grammar.fullmatch(text):
			return ty
	return None


def is_assignable(source: Type, target: Type) -> bool:
	"""True when a value of type `source` may be stored in a `target` variable."""
	if source == target:
		return True
	return source in _WIDENING.get(target, frozenset())


def is_call_compatible(arg: Type, param: Type) -> bool:
	"""Call arguments must match the declared parameter type exactly."""
	return arg == param


__all__ = [
	"BOOLEAN",
	"CHAR",
	"CONDITION_TYPES",
	"DOUBLE",
	"INT",
	"STRING",
	"Type",
	"TypeCatalogError",
	"is_assignable",
	"is_call_compatible",
	"is_type_keyword",
	"literal_type",
	"resolve_type",
]
