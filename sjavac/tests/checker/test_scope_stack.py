# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from sjavac.checker import DuplicateNameError, ScopeError, ScopeStack, Variable
from sjavac.core.types import DOUBLE, INT, STRING


def test_global_frame_cannot_be_popped() -> None:
	scope = ScopeStack()
	assert scope.depth() == 1
	with pytest.raises(ScopeError):
		scope.pop_frame()
	scope.push_frame()
	scope.pop_frame()
	assert scope.depth() == 1


def test_duplicate_in_same_frame_is_rejected_but_shadowing_is_not() -> None:
	scope = ScopeStack()
	scope.declare("a", Variable(type=INT))
	with pytest.raises(DuplicateNameError):
		scope.declare("a", Variable(type=DOUBLE))
	scope.push_frame()
	inner = Variable(type=STRING)
	scope.declare("a", inner)
	assert scope.lookup("a") is inner
	scope.pop_frame()
	assert scope.lookup("a").type == INT


def test_declare_records_global_flag() -> None:
	scope = ScopeStack()
	outer = Variable(type=INT)
	scope.declare("g", outer)
	scope.push_frame()
	local = Variable(type=INT)
	scope.declare("l", local)
	assert outer.is_global is True
	assert local.is_global is False


def test_lookup_of_unknown_name_is_none() -> None:
	assert ScopeStack().lookup("missing") is None


def test_assigning_own_frame_variable_initializes_it_for_good() -> None:
	scope = ScopeStack()
	scope.push_frame()
	var = Variable(type=INT)
	scope.declare("x", var)
	scope.mark_initialized("x")
	assert var.initialized is True


def test_assigning_outer_variable_only_lasts_for_the_inner_frame() -> None:
	scope = ScopeStack()
	scope.push_frame()
	var = Variable(type=INT)
	scope.declare("x", var)
	scope.push_frame()
	scope.mark_initialized("x")
	assert scope.is_initialized(var)
	assert var.initialized is False
	scope.pop_frame()
	assert not scope.is_initialized(var)


def test_second_pass_exposes_first_pass_globals_to_function_bodies_only() -> None:
	scope = ScopeStack()
	scope.declare("later", Variable(type=INT, initialized=True))
	scope.begin_second_pass()
	assert scope.lookup("later") is None
	scope.push_frame()
	found = scope.lookup("later")
	assert found is not None and scope.is_initialized(found)
	scope.pop_frame()
	scope.declare("later", Variable(type=INT))
	assert scope.lookup("later").initialized is False


def test_second_pass_requires_closed_scopes() -> None:
	scope = ScopeStack()
	scope.push_frame()
	with pytest.raises(ScopeError):
		scope.begin_second_pass()
