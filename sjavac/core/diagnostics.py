# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure produced by the validator.

Validation stops at the first violation, so a run yields at most one
diagnostic; the structure still mirrors a compiler diagnostic so the CLI can
render it as text or JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a validation diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Pass that produced the diagnostic: "lenient", "strict" or "io".
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def render(self) -> str:
		"""Human-readable `file:line:col: severity: message` line."""
		return f"{self.span.render()}: {self.severity}: {self.message}"

	def to_json(self) -> dict:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}


__all__ = ["Diagnostic"]
