# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
S-Java line parser.

S-Java statements never span lines, so parsing is per line: the grammar in
`grammar.lark` has one start rule per statement shape and is compiled once.
Whole-line shapes that carry no structure (blank, comment, lone `}`) are
plain regular expressions.
"""

from __future__ import annotations

from . import ast
from .parser import (
	StatementParseError,
	is_blank,
	is_block_opener,
	is_comment,
	is_return,
	is_scope_close,
	looks_like_control_header,
	looks_like_declaration,
	looks_like_function_header,
	looks_like_return,
	parse_assignment,
	parse_call,
	parse_control_header,
	parse_declaration,
	parse_function_header,
	parse_return,
)

__all__ = [
	"StatementParseError",
	"ast",
	"is_blank",
	"is_block_opener",
	"is_comment",
	"is_return",
	"is_scope_close",
	"looks_like_control_header",
	"looks_like_declaration",
	"looks_like_function_header",
	"looks_like_return",
	"parse_assignment",
	"parse_call",
	"parse_control_header",
	"parse_declaration",
	"parse_function_header",
	"parse_return",
]
