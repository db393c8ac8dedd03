# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source location attached to diagnostics.

S-Java is validated line by line, so a span is normally just a file and a
1-based line; the column is filled in when the offending token is known.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Span:
	"""Best-effort file/line/column of a diagnostic (Span() denotes unknown)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None

	def render(self) -> str:
		line = "?" if self.line is None else str(self.line)
		column = "?" if self.column is None else str(self.column)
		return f"{self.file or '<source>'}:{line}:{column}"


__all__ = ["Span"]
