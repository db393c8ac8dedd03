# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sjavac: two-pass static validator for S-Java sources.

Layout:
  core:    type catalog, spans and diagnostics
  parser:  lark statement grammar and statement nodes
  checker: scope stack, function registry, statement recognizers
  validator: the two-pass driver (`validate_path`, `validate_text`)

The CLI entrypoint is `sjavac.sjavac:main`.
"""

from sjavac.validator import ValidationResult, ValidationStatus, Validator, validate_path, validate_text

__all__ = [
	"ValidationResult",
	"ValidationStatus",
	"Validator",
	"validate_path",
	"validate_text",
]
