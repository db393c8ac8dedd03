# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement nodes produced by the S-Java line parser.

One node per statement shape; none of them nest beyond a value list because
S-Java has no expressions other than a single literal or name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from sjavac.core.types import Type


@dataclass(frozen=True)
class Name:
	ident: str
	column: Optional[int] = None


@dataclass(frozen=True)
class Literal:
	text: str
	type: Type
	column: Optional[int] = None


Value = Union[Literal, Name]


@dataclass(frozen=True)
class Declarator:
	name: Name
	value: Optional[Value] = None


@dataclass(frozen=True)
class Declaration:
	is_final: bool
	type: Type
	declarators: Tuple[Declarator, ...]


@dataclass(frozen=True)
class AssignItem:
	target: Name
	value: Value


@dataclass(frozen=True)
class Assignment:
	items: Tuple[AssignItem, ...]


@dataclass(frozen=True)
class ControlHeader:
	keyword: str  # "if" or "while"
	terms: Tuple[Value, ...]


@dataclass(frozen=True)
class ReturnStmt:
	pass


@dataclass(frozen=True)
class Param:
	is_final: bool
	type: Type
	name: Name


@dataclass(frozen=True)
class FunctionHeader:
	name: Name
	params: Tuple[Param, ...]


@dataclass(frozen=True)
class Call:
	name: Name
	args: Tuple[Value, ...]

