# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from sjavac.checker import FunctionRegistry
from sjavac.core.types import BOOLEAN, DOUBLE, INT


def test_matches_requires_exact_positional_types() -> None:
	registry = FunctionRegistry()
	registry.declare("f", [INT, DOUBLE])
	assert registry.matches("f", [INT, DOUBLE])
	assert not registry.matches("f", [INT, INT])
	assert not registry.matches("f", [INT])
	assert not registry.matches("f", [INT, DOUBLE, BOOLEAN])


def test_unknown_function_never_matches() -> None:
	registry = FunctionRegistry()
	assert "g" not in registry
	assert registry.lookup("g") is None
	assert not registry.matches("g", [])


def test_redeclaration_overwrites() -> None:
	registry = FunctionRegistry()
	registry.declare("f", [INT])
	registry.declare("f", [DOUBLE])
	assert registry.lookup("f").params == (DOUBLE,)
	assert registry.matches("f", [DOUBLE])
	assert not registry.matches("f", [INT])
