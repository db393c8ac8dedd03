# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type catalog: literal grammars and the two compatibility relations.
"""

from __future__ import annotations

import pytest

from sjavac.core.types import (
	BOOLEAN,
	CHAR,
	DOUBLE,
	INT,
	STRING,
	TypeCatalogError,
	is_assignable,
	is_call_compatible,
	is_type_keyword,
	literal_type,
	resolve_type,
)


def test_resolve_type_keywords() -> None:
	assert resolve_type("int") == INT
	assert resolve_type("String") == STRING
	assert is_type_keyword("boolean")
	assert not is_type_keyword("string")
	with pytest.raises(TypeCatalogError):
		resolve_type("Int")


@pytest.mark.parametrize(
	"text, expected",
	[
		("0", INT),
		("-7", INT),
		("3.14", DOUBLE),
		(".5", DOUBLE),
		("5.", DOUBLE),
		("false", BOOLEAN),
		("'z'", CHAR),
		('""', STRING),
		("name", None),
		("'zz'", None),
	],
)
def test_literal_type(text: str, expected) -> None:
	assert literal_type(text) == expected


def test_widening_is_one_directional() -> None:
	assert is_assignable(INT, DOUBLE)
	assert is_assignable(INT, BOOLEAN)
	assert is_assignable(DOUBLE, BOOLEAN)
	assert not is_assignable(DOUBLE, INT)
	assert not is_assignable(BOOLEAN, INT)
	assert not is_assignable(BOOLEAN, DOUBLE)


def test_char_and_string_accept_only_themselves() -> None:
	for ty in (CHAR, STRING):
		assert is_assignable(ty, ty)
		for other in (INT, DOUBLE, BOOLEAN):
			assert not is_assignable(other, ty)
			assert not is_assignable(ty, other)
	assert not is_assignable(CHAR, STRING)


def test_call_compatibility_never_widens() -> None:
	assert is_call_compatible(INT, INT)
	assert not is_call_compatible(INT, DOUBLE)
	assert not is_call_compatible(DOUBLE, BOOLEAN)
