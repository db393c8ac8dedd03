# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from sjavac.parser import (
	is_blank,
	is_block_opener,
	is_comment,
	is_return,
	is_scope_close,
	looks_like_control_header,
	looks_like_declaration,
	looks_like_function_header,
)


def test_blank_lines() -> None:
	assert is_blank("")
	assert is_blank(" \t ")
	assert not is_blank(" ; ")


def test_comment_must_start_at_first_column() -> None:
	assert is_comment("// a comment")
	assert is_comment("//")
	assert not is_comment(" // indented")
	assert not is_comment("/* block */")


def test_scope_close_is_a_lone_brace() -> None:
	assert is_scope_close("}")
	assert is_scope_close("\t}  ")
	assert not is_scope_close("};")
	assert not is_scope_close("} }")


def test_block_opener_ends_with_brace() -> None:
	assert is_block_opener("if (a) {")
	assert is_block_opener("void f() {  ")
	assert not is_block_opener("// if (a) {")
	assert not is_block_opener("int a = 5;")


def test_return_line() -> None:
	assert is_return("\treturn;")
	assert is_return("return ;  ")
	assert not is_return("return 1;")


def test_leading_keywords() -> None:
	assert looks_like_declaration("final int x = 1;")
	assert looks_like_declaration("  String s;")
	assert not looks_like_declaration("integer = 5;")
	assert not looks_like_declaration("finalint x;")
	assert looks_like_function_header("void f() {")
	assert not looks_like_function_header("voidf = 3;")
	assert looks_like_control_header("while(x) {")
	assert not looks_like_control_header("iffy = 2;")
