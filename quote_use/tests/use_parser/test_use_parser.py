# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from quote_use.core.config import DeclarationStyle
from quote_use.core.errors import (
	IllegalSelfReference,
	MisplacedAlias,
	NonNameTail,
	UnterminatedDeclaration,
	UseSyntaxError,
	WildcardNotSupported,
)
from quote_use.tokens import Ident, TokenCursor, lex
from quote_use.use_parser import parse_declaration_text, parse_declarations, parse_use


def _pairs(source: str) -> list[tuple[str, str]]:
	return [(str(b.path.render()).replace(" ", ""), b.name.text) for b in parse_use(source)]


def test_single_path():
	assert _pairs("use ::a::b;") == [("::a::b", "b")]
	assert _pairs("use a::b::Name;") == [("::a::b::Name", "Name")]


def test_group_with_self():
	assert _pairs("use a::{c, self, b};") == [
		("::a::c", "c"),
		("::a", "a"),
		("::a::b", "b"),
	]


def test_aliases():
	assert _pairs("use a::{self as c, b as a};") == [("::a", "c"), ("::a::b", "a")]
	assert _pairs("use a::b::Name as Other;") == [("::a::b::Name", "Other")]


def test_nested_groups_flatten_in_order():
	assert _pairs("use a::{b::{a, b}, c};") == [
		("::a::b::a", "a"),
		("::a::b::b", "b"),
		("::a::c", "c"),
	]


def test_deeply_nested_groups():
	depth = 1000
	source = "use " + "".join(f"m{i}::{{" for i in range(depth)) + "Leaf" + "}" * depth + ";"
	bindings = parse_use(source)
	assert len(bindings) == 1
	assert bindings[0].name.text == "Leaf"
	assert len(bindings[0].path) == depth + 1


def test_trailing_comma_in_group():
	assert _pairs("use a::{b, c,};") == [("::a::b", "b"), ("::a::c", "c")]


def test_placeholder_segments():
	assert _pairs("use #var::a;") == [("#var::a", "a")]
	assert _pairs("use ::a::#var::a;") == [("::a::#var::a", "a")]
	assert _pairs("use ::a::#var as a;") == [("::a::#var", "a")]


def test_placeholder_token_can_be_a_group():
	bindings = parse_use("use #(root)::Name;")
	assert str(bindings[0].path.render()).replace(" ", "") == "#(root)::Name"


def test_placeholder_tail_needs_alias():
	with pytest.raises(NonNameTail):
		parse_use("use ::a::#b;")


def test_missing_terminator_lists_expected_tokens():
	cursor = TokenCursor(lex("# use hello\nnot a ;"))
	with pytest.raises(UnterminatedDeclaration) as excinfo:
		parse_declarations(cursor, DeclarationStyle.POUND)
	err = excinfo.value
	assert set(err.expected) == {";", "as", "::"}
	assert (err.span.line, err.span.column) == (2, 1)


def test_missing_terminator_after_group_points_at_stall():
	cursor = TokenCursor(lex("# use hello::{Hello}\n  not a ;"))
	with pytest.raises(UnterminatedDeclaration) as excinfo:
		parse_declarations(cursor, DeclarationStyle.POUND)
	err = excinfo.value
	assert err.expected == (";",)
	assert (err.span.line, err.span.column) == (2, 3)
	assert "`not`" in str(err)


def test_semicolon_inside_group():
	with pytest.raises(UnterminatedDeclaration) as excinfo:
		parse_use("use a::{b; c};")
	assert excinfo.value.span.column == 10


def test_missing_semicolon_at_end_of_input():
	with pytest.raises(UnterminatedDeclaration):
		parse_use("use a::b")


def test_wildcards_are_rejected():
	with pytest.raises(WildcardNotSupported):
		parse_use("use a::*;")
	with pytest.raises(WildcardNotSupported):
		parse_use("use a::{b, *};")


@pytest.mark.parametrize("source", ["use self;", "use {self};", "use self as x;", "use a::self::b;"])
def test_illegal_self_reference(source: str):
	with pytest.raises(IllegalSelfReference):
		parse_use(source)


def test_alias_must_be_on_last_segment():
	with pytest.raises(MisplacedAlias):
		parse_use("use a as b::c;")


def test_group_cannot_be_renamed():
	with pytest.raises(MisplacedAlias):
		parse_use("use a::{b, c} as d;")


def test_dangling_separator():
	with pytest.raises(UseSyntaxError) as excinfo:
		parse_use("use a::;")
	assert "after `::`" in str(excinfo.value)


def test_alias_needs_a_name():
	with pytest.raises(UseSyntaxError):
		parse_use('use a as "b";')


def test_errors_convert_to_diagnostics():
	with pytest.raises(UseSyntaxError) as excinfo:
		parse_use("use a::*;")
	diag = excinfo.value.to_diagnostic()
	assert diag.phase == "parser"
	assert diag.code == "wildcard-not-supported"
	assert diag.span.column == 8


def test_parse_declarations_stops_at_tail():
	cursor = TokenCursor(lex("# use a::B; # use c::D as E; B(E) #x"))
	bindings = parse_declarations(cursor, DeclarationStyle.POUND)
	assert [b.name.text for b in bindings] == ["B", "E"]
	assert cursor.rest() == lex("B(E) #x")


def test_bare_style_requires_no_pound():
	cursor = TokenCursor(lex("use a::B; B"))
	assert [b.name.text for b in parse_declarations(cursor, DeclarationStyle.BARE)] == ["B"]
	cursor = TokenCursor(lex("use a::B; B"))
	assert parse_declarations(cursor, DeclarationStyle.POUND) == []
	assert cursor.rest() == lex("use a::B; B")


def test_declaration_text_rejects_stray_tokens():
	assert [b.name for b in parse_declaration_text("use a::b; use c;")] == [Ident("b"), Ident("c")]
	with pytest.raises(UseSyntaxError):
		parse_declaration_text("use a::b; fn")


def test_path_separator_after_group_is_described_whole():
	with pytest.raises(UnterminatedDeclaration) as excinfo:
		parse_use("use a::{b}::c;")
	assert "found `::`" in str(excinfo.value)
