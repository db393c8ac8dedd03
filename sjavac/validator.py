# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Two-pass validation driver.

The source is read twice through two independent handles:

1. lenient pass: only structure, declarations and assignments are
   recognized and rule violations are tolerated. It fills the function
   registry and the global frame with everything declared at the top level,
   in any order, and already enforces brace balance, the global-scope line
   rule and the trailing `return;` of every function body.
2. strict pass: every statement shape is recognized and the first rule
   violation aborts validation. Function bodies resolve calls and globals
   against what the lenient pass collected, which is what makes forward
   references legal.

Function bodies are scanned by recursion: the top-level loop hands a function
header to `_scan_body`, which recurses once per nested `if`/`while` block and
returns at the matching `}` together with the last non-blank line it saw.
"""

from __future__ import annotations

import enum
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from sjavac.checker import (
	FunctionDeclarationRecognizer,
	IllegalLineError,
	LineResult,
	Matched,
	MatchedButInvalid,
	NO_MATCH,
	NoMatch,
	Recognizer,
	StructuralError,
	ValidationContext,
	ValidationError,
	lenient_recognizers,
	strict_recognizers,
)
from sjavac.core.diagnostics import Diagnostic
from sjavac.core.span import Span
from sjavac.parser import is_blank, is_block_opener, is_return, is_scope_close

SourceOpener = Callable[[], TextIO]


class ValidationStatus(enum.Enum):
	VALID = 0
	INVALID = 1
	IO_FAILURE = 2


@dataclass
class ValidationResult:
	status: ValidationStatus
	diagnostic: Optional[Diagnostic] = None

	@property
	def ok(self) -> bool:
		return self.status is ValidationStatus.VALID

	@property
	def exit_code(self) -> int:
		return self.status.value


class _LineReader:
	"""Blocking line reader that remembers the 1-based number of the last line."""

	def __init__(self, handle: TextIO) -> None:
		self._handle = handle
		self.line_no = 0

	def next_line(self) -> Optional[str]:
		raw = self._handle.readline()
		if raw == "":
			return None
		self.line_no += 1
		return raw.rstrip("\r\n")


class Validator:
	"""
	Validates one S-Java source.

	`opener` must return a fresh, independent handle on every call; it is
	called twice, once per pass. A Validator holds the state of a single run;
	build a new one to validate again.
	"""

	def __init__(self, opener: SourceOpener, *, file: Optional[str] = None) -> None:
		self._opener = opener
		self.file = file
		self.ctx = ValidationContext()
		self._functions = FunctionDeclarationRecognizer()

	def validate(self) -> ValidationResult:
		"""Run both passes and fold the outcome into a ValidationResult."""
		try:
			self.run()
		except ValidationError as exc:
			return ValidationResult(ValidationStatus.INVALID, exc.to_diagnostic(self.file))
		except (OSError, UnicodeDecodeError) as exc:
			return ValidationResult(
				ValidationStatus.IO_FAILURE,
				Diagnostic(
					message="Unable to open file",
					code="E_IO",
					phase="io",
					span=Span(file=self.file),
					notes=[str(exc)],
				),
			)
		return ValidationResult(ValidationStatus.VALID)

	def run(self) -> None:
		"""Run both passes; raises the first ValidationError encountered."""
		with self._opener() as first, self._opener() as second:
			self._run_pass(first, lenient_recognizers(), strict=False)
			self.ctx.scope.begin_second_pass()
			self._run_pass(second, strict_recognizers(), strict=True)

	def _run_pass(self, handle: TextIO, recognizers: List[Recognizer], *, strict: bool) -> None:
		self.ctx.strict = strict
		reader = _LineReader(handle)
		try:
			while True:
				line = reader.next_line()
				if line is None:
					return
				self._top_level_line(line, reader, recognizers)
		except ValidationError as exc:
			raise exc.at_line(reader.line_no, self.ctx.phase)

	def _top_level_line(self, line: str, reader: _LineReader, recognizers: List[Recognizer]) -> None:
		result = self._functions.recognize(line, self.ctx)
		if isinstance(result, MatchedButInvalid):
			# A header that cannot be opened leaves no body to scan.
			raise result.error
		if isinstance(result, Matched):
			last = self._scan_body(reader, recognizers)
			if last is None or not is_return(last):
				raise StructuralError("last line of a function must be 'return;'")
			return
		if isinstance(self._dispatch(line, recognizers), NoMatch):
			raise IllegalLineError(f"illegal code at global scope: '{line.strip()}'")

	def _scan_body(self, reader: _LineReader, recognizers: List[Recognizer]) -> Optional[str]:
		"""
		Scan lines up to and including the `}` closing the innermost frame.

		Returns the last non-blank line before that `}` (None for an empty
		block).
		"""
		last: Optional[str] = None
		while True:
			line = reader.next_line()
			if line is None:
				raise StructuralError("reached end of file inside an unclosed block")
			if is_scope_close(line):
				self._dispatch(line, recognizers)
				return last
			if is_block_opener(line):
				self._open_block(line, recognizers)
				self._scan_body(reader, recognizers)
				last = line
				continue
			if isinstance(self._dispatch(line, recognizers), NoMatch) and self.ctx.strict:
				raise IllegalLineError(f"illegal code: '{line.strip()}'")
			if not is_blank(line):
				last = line

	def _open_block(self, line: str, recognizers: List[Recognizer]) -> None:
		result = self._functions.recognize(line, self.ctx)
		if isinstance(result, MatchedButInvalid) and self.ctx.strict:
			raise result.error
		if isinstance(result, NoMatch):
			result = self._dispatch(line, recognizers)
			if isinstance(result, NoMatch) and self.ctx.strict:
				raise IllegalLineError(f"illegal block opener: '{line.strip()}'")
		self.ctx.scope.push_frame()

	def _dispatch(self, line: str, recognizers: List[Recognizer]) -> LineResult:
		"""Offer `line` to each recognizer in order; the first non-NoMatch wins."""
		for recognizer in recognizers:
			result = recognizer.recognize(line, self.ctx)
			if isinstance(result, NoMatch):
				continue
			if isinstance(result, MatchedButInvalid) and self.ctx.strict:
				raise result.error
			return result
		return NO_MATCH


def validate_path(path: Path | str) -> ValidationResult:
	"""Validate an S-Java file, reading it twice from disk."""
	source = Path(path)
	return Validator(lambda: source.open(encoding="utf-8"), file=str(source)).validate()


def validate_text(text: str, *, file: Optional[str] = None) -> ValidationResult:
	"""Validate S-Java source held in memory."""
	return Validator(lambda: io.StringIO(text), file=file).validate()


__all__ = [
	"SourceOpener",
	"ValidationResult",
	"ValidationStatus",
	"Validator",
	"validate_path",
	"validate_text",
]
