# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line adapter for the S-Java validator.

Exit codes (also printed on stdout unless --json is given):

  0  the source is legal S-Java
  1  the source is not legal S-Java (the reason goes to stderr)
  2  the source could not be read or the invocation is wrong
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from sjavac.core.diagnostics import Diagnostic
from sjavac.core.span import Span
from sjavac.validator import ValidationResult, ValidationStatus, validate_path

SOURCE_SUFFIX = ".sjava"


def _io_failure(message: str, source: Path) -> ValidationResult:
	return ValidationResult(
		ValidationStatus.IO_FAILURE,
		Diagnostic(message=message, code="E_IO", phase="io", span=Span(file=str(source))),
	)


def _report(result: ValidationResult, *, as_json: bool) -> None:
	if as_json:
		diagnostics = [result.diagnostic.to_json()] if result.diagnostic is not None else []
		print(json.dumps({"exit_code": result.exit_code, "diagnostics": diagnostics}))
		return
	print(result.exit_code)
	if result.diagnostic is not None:
		print(result.diagnostic.render(), file=sys.stderr)
		for note in result.diagnostic.notes:
			print(f"  note: {note}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
	"""
	Validate one S-Java file and report the outcome.

	With --json, prints a single object `{"exit_code": n, "diagnostics": [...]}`
	on stdout; otherwise prints the exit code on stdout and a human-readable
	diagnostic on stderr.
	"""
	parser = argparse.ArgumentParser(description="sjavac: static validator for S-Java sources")
	parser.add_argument("source", type=Path, help="Path to the S-Java source file")
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit the outcome as JSON (exit_code plus phase/code/message/file/line/column diagnostics)",
	)
	parser.add_argument(
		"--allow-any-suffix",
		action="store_true",
		help=f"Do not require the source file name to end with '{SOURCE_SUFFIX}'",
	)
	args = parser.parse_args(argv)

	source: Path = args.source
	if not args.allow_any_suffix and source.suffix != SOURCE_SUFFIX:
		result = _io_failure("Wrong file format", source)
	else:
		result = validate_path(source)
	_report(result, as_json=args.json)
	return result.exit_code


if __name__ == "__main__":
	raise SystemExit(main())
