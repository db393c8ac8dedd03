# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Scope stack for one validation run.

Frame 0 is the global frame and is never popped. Each block-opening line
(function header, `if`, `while`) pushes a frame and the matching `}` pops it.

Initialization is tracked per frame: assigning a variable owned by the
current frame initializes it for good, while assigning a variable owned by an
outer frame only counts until the current frame is popped. A global assigned
inside a function body therefore stays uninitialized for other functions,
and a local assigned inside an `if` is uninitialized again after the `}`.

The stack is shared by both passes. `begin_second_pass` keeps the globals the
first pass collected as a read-only view for function bodies, so a body may
use a global that is declared (or initialized) further down the file, while
statements at global scope are re-validated in textual order against a fresh
global frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from sjavac.core.types import Type

from .errors import DuplicateNameError, ScopeError


@dataclass(eq=False)
class Variable:
	type: Type
	is_final: bool = False
	initialized: bool = False
	is_global: bool = False


class ScopeFrame:
	def __init__(self) -> None:
		self.variables: Dict[str, Variable] = {}
		# Outer variables assigned while this frame is innermost.
		self.assigned: Set[Variable] = set()

	def __contains__(self, name: str) -> bool:
		return name in self.variables


class ScopeStack:
	def __init__(self) -> None:
		self._frames: List[ScopeFrame] = [ScopeFrame()]
		self._first_pass_globals: Optional[Dict[str, Variable]] = None

	def depth(self) -> int:
		return len(self._frames)

	@property
	def at_global_scope(self) -> bool:
		return len(self._frames) == 1

	def push_frame(self) -> None:
		self._frames.append(ScopeFrame())

	def pop_frame(self) -> None:
		if len(self._frames) <= 1:
			raise ScopeError("cannot close the global scope")
		self._frames.pop()

	def declare(self, name: str, var: Variable) -> None:
		frame = self._frames[-1]
		if name in frame:
			raise DuplicateNameError(f"variable '{name}' already exists in this scope")
		var.is_global = self.at_global_scope
		frame.variables[name] = var

	def declared_in_current_frame(self, name: str) -> bool:
		return name in self._frames[-1]

	def lookup(self, name: str) -> Optional[Variable]:
		"""Innermost-first lookup; None when the name is not visible."""
		for frame in reversed(self._frames[1:]):
			var = frame.variables.get(name)
			if var is not None:
				return var
		if self._first_pass_globals is not None and not self.at_global_scope:
			var = self._first_pass_globals.get(name)
			if var is not None:
				return var
		return self._frames[0].variables.get(name)

	def is_initialized(self, var: Variable) -> bool:
		if var.initialized:
			return True
		return any(var in frame.assigned for frame in self._frames)

	def mark_initialized(self, name: str) -> None:
		var = self.lookup(name)
		if var is None:
			raise KeyError(name)
		frame = self._frames[-1]
		if frame.variables.get(name) is var:
			var.initialized = True
		else:
			frame.assigned.add(var)

	def begin_second_pass(self) -> None:
		"""
		Freeze the first pass's globals and start a fresh global frame.

		Must be called with only the global frame on the stack.
		"""
		if len(self._frames) != 1:
			raise ScopeError("second pass started with open scopes")
		self._first_pass_globals = dict(self._frames[0].variables)
		self._frames = [ScopeFrame()]


__all__ = ["ScopeFrame", "ScopeStack", "Variable"]
