from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from sjavac.core.types import literal_type, resolve_type

from .ast import (
	AssignItem,
	Assignment,
	Call,
	ControlHeader,
	Declaration,
	Declarator,
	FunctionHeader,
	Literal,
	Name,
	Param,
	ReturnStmt,
	Value,
)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_START_RULES = [
	"declaration",
	"assignment",
	"if_header",
	"while_header",
	"return_stmt",
	"func_header",
	"call",
]

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start=_START_RULES,
	maybe_placeholders=False,
)

# Whole-line shapes that do not need the grammar.
_BLANK = re.compile(r"\s*")
_COMMENT = re.compile(r"//.*")
_SCOPE_CLOSE = re.compile(r"\s*\}\s*")
_BLOCK_OPENER = re.compile(r"(?!//).*\{\s*")
_RETURN = re.compile(r"\s*return\s*;\s*")

# Leading keywords that commit a line to one statement shape even when the
# rest of it does not parse.
_DECLARATION_HEAD = re.compile(r"\s*(final|int|double|boolean|char|String)\b")
_FUNCTION_HEAD = re.compile(r"\s*void\b")
_CONTROL_HEAD = re.compile(r"\s*(if|while)\b")
_RETURN_HEAD = re.compile(r"\s*return\b")


class StatementParseError(ValueError):
	"""
	A line did not fit the grammar of the statement it was parsed as.

	Carries the 1-based column of the first offending character when lark
	reports one, so the validator can point at it.
	"""

	def __init__(self, message: str, *, column: Optional[int] = None) -> None:
		super().__init__(message)
		self.column = column


def is_blank(line: str) -> bool:
	return _BLANK.fullmatch(line) is not None


def is_comment(line: str) -> bool:
	"""Full-line comment; `//` must start at the first column."""
	return _COMMENT.fullmatch(line) is not None


def is_scope_close(line: str) -> bool:
	return _SCOPE_CLOSE.fullmatch(line) is not None


def is_block_opener(line: str) -> bool:
	return _BLOCK_OPENER.fullmatch(line) is not None


def is_return(line: str) -> bool:
	return _RETURN.fullmatch(line) is not None


def looks_like_declaration(line: str) -> bool:
	return _DECLARATION_HEAD.match(line) is not None


def looks_like_function_header(line: str) -> bool:
	return _FUNCTION_HEAD.match(line) is not None


def looks_like_control_header(line: str) -> bool:
	return _CONTROL_HEAD.match(line) is not None


def looks_like_return(line: str) -> bool:
	return _RETURN_HEAD.match(line) is not None


def _parse(line: str, start: str) -> Tree:
	try:
		return _PARSER.parse(line, start=start)
	except UnexpectedInput as exc:
		column = getattr(exc, "column", None)
		if not isinstance(column, int) or column < 1:
			column = None
		raise StatementParseError(f"malformed {start.replace('_', ' ')}", column=column) from exc


def parse_declaration(line: str) -> Declaration:
	tree = _parse(line, "declaration")
	is_final = False
	decl_type = None
	declarators: List[Declarator] = []
	for child in tree.children:
		if isinstance(child, Token) and child.type == "FINAL":
			is_final = True
		elif _name(child) == "type_name":
			decl_type = _build_type(child)
		elif _name(child) == "declarator":
			declarators.append(_build_declarator(child))
	assert decl_type is not None
	return Declaration(is_final=is_final, type=decl_type, declarators=tuple(declarators))


def parse_assignment(line: str) -> Assignment:
	tree = _parse(line, "assignment")
	items = []
	for child in tree.children:
		target_tok, value_node = child.children
		items.append(AssignItem(target=_build_name(target_tok), value=_build_value(value_node)))
	return Assignment(items=tuple(items))


def parse_control_header(line: str) -> ControlHeader:
	"""Parse an `if (...) {` or `while (...) {` line."""
	start = "while_header" if line.lstrip().startswith("while") else "if_header"
	tree = _parse(line, start)
	condition = tree.children[0]
	terms: List[Value] = []
	for term in condition.children:
		tok = term.children[0]
		if tok.type == "NAME":
			terms.append(_build_name(tok))
		else:
			terms.append(_build_literal_token(tok))
	keyword = "while" if start == "while_header" else "if"
	return ControlHeader(keyword=keyword, terms=tuple(terms))


def parse_return(line: str) -> ReturnStmt:
	_parse(line, "return_stmt")
	return ReturnStmt()


def parse_function_header(line: str) -> FunctionHeader:
	tree = _parse(line, "func_header")
	name_tok = tree.children[0]
	params: List[Param] = []
	param_list = next((c for c in tree.children if _name(c) == "param_list"), None)
	if param_list is not None:
		for param in param_list.children:
			params.append(_build_param(param))
	return FunctionHeader(name=_build_name(name_tok), params=tuple(params))


def parse_call(line: str) -> Call:
	tree = _parse(line, "call")
	name_tok = tree.children[0]
	args: List[Value] = []
	arg_list = next((c for c in tree.children if _name(c) == "arg_list"), None)
	if arg_list is not None:
		args = [_build_value(node) for node in arg_list.children]
	return Call(name=_build_name(name_tok), args=tuple(args))


def _name(node: object) -> Optional[str]:
	if isinstance(node, Tree):
		return node.data if isinstance(node.data, str) else node.data.value
	return None


def _build_type(tree: Tree):
	tok = tree.children[0]
	return resolve_type(str(tok))


def _build_name(tok: Token) -> Name:
	return Name(ident=str(tok), column=tok.column)


def _build_literal_token(tok: Token) -> Literal:
	text = str(tok)
	ty = literal_type(text)
	if ty is None:
		raise StatementParseError(f"'{text}' is not a literal", column=tok.column)
	return Literal(text=text, type=ty, column=tok.column)


def _build_value(node: object) -> Value:
	if isinstance(node, Token):
		return _build_name(node)
	if _name(node) == "literal":
		return _build_literal_token(node.children[0])
	raise TypeError(f"Expected value node, got {node!r}")


def _build_declarator(tree: Tree) -> Declarator:
	name_tok = tree.children[0]
	value = _build_value(tree.children[1]) if len(tree.children) > 1 else None
	return Declarator(name=_build_name(name_tok), value=value)


def _build_param(tree: Tree) -> Param:
	is_final = False
	param_type = None
	name_tok = None
	for child in tree.children:
		if isinstance(child, Token) and child.type == "FINAL":
			is_final = True
		elif isinstance(child, Token) and child.type == "NAME":
			name_tok = child
		elif _name(child) == "type_name":
			param_type = _build_type(child)
	assert param_type is not None and name_tok is not None
	return Param(is_final=is_final, type=param_type, name=_build_name(name_tok))
