# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Function signature registry.

S-Java functions are `void` and never overloaded: the registry maps a name to
exactly one ordered tuple of parameter types, and a later declaration with
the same name replaces the earlier one. Both passes register every header
before its body is scanned, so recursive calls and calls to functions defined
further down the file resolve.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from sjavac.core.types import Type, is_call_compatible


@dataclass(frozen=True)
class FunctionSignature:
	name: str
	params: Tuple[Type, ...]

	def __str__(self) -> str:  # pragma: no cover - trivial repr
		inner = ", ".join(str(p) for p in self.params)
		return f"{self.name}({inner})"


class FunctionRegistry:
	def __init__(self) -> None:
		self._signatures: Dict[str, FunctionSignature] = {}

	def declare(self, name: str, param_types: Iterable[Type]) -> FunctionSignature:
		sig = FunctionSignature(name=name, params=tuple(param_types))
		self._signatures[name] = sig
		return sig

	def lookup(self, name: str) -> Optional[FunctionSignature]:
		return self._signatures.get(name)

	def __contains__(self, name: str) -> bool:
		return name in self._signatures

	def matches(self, name: str, arg_types: Sequence[Type]) -> bool:
		"""Exact positional match; calls never widen argument types."""
		sig = self._signatures.get(name)
		if sig is None or len(sig.params) != len(arg_types):
			return False
		return all(is_call_compatible(arg, param) for arg, param in zip(arg_types, sig.params))


__all__ = ["FunctionRegistry", "FunctionSignature"]
