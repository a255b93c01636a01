# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from quote_use.core.errors import LexError, UseSyntaxError
from quote_use.tokens import Delimiter, Group, Ident, Literal, Punct, Spacing, TokenStream, lex


def test_lex_path_marks_first_colon_joint():
	stream = lex("::a::b")
	assert list(stream) == [
		Punct(":", Spacing.JOINT),
		Punct(":", Spacing.ALONE),
		Ident("a"),
		Punct(":", Spacing.JOINT),
		Punct(":", Spacing.ALONE),
		Ident("b"),
	]


def test_lex_separated_colons_are_alone():
	stream = lex("a : : b")
	assert [t.spacing for t in stream if isinstance(t, Punct)] == [Spacing.ALONE, Spacing.ALONE]


def test_lex_groups_keep_delimiters_and_nesting():
	stream = lex("f(a, [b]) { c }")
	assert len(stream) == 3
	paren = stream[1]
	assert isinstance(paren, Group) and paren.delimiter is Delimiter.PARENTHESIS
	inner = list(paren.stream)
	assert inner[0] == Ident("a")
	assert inner[1] == Punct(",")
	assert isinstance(inner[2], Group) and inner[2].delimiter is Delimiter.BRACKET
	assert inner[2].stream == TokenStream.of(Ident("b"))
	brace = stream[2]
	assert isinstance(brace, Group) and brace.delimiter is Delimiter.BRACE


def test_lex_literals():
	stream = lex('"a // not a comment" r"raw\\" b"bytes" \'x\' \'\\n\' 1.5e3f64 0xFF 42u8')
	assert all(isinstance(t, Literal) for t in stream)
	assert [t.text for t in stream] == [
		'"a // not a comment"',
		'r"raw\\"',
		'b"bytes"',
		"'x'",
		"'\\n'",
		"1.5e3f64",
		"0xFF",
		"42u8",
	]


def test_lex_lifetime_is_tick_plus_ident():
	stream = lex("&'a T")
	assert list(stream) == [
		Punct("&", Spacing.JOINT),
		Punct("'", Spacing.JOINT),
		Ident("a"),
		Ident("T"),
	]


def test_lex_skips_comments():
	stream = lex("a // trailing\n/* block */ b")
	assert stream == TokenStream.of(Ident("a"), Ident("b"))


def test_lex_raw_identifier():
	assert lex("r#type") == TokenStream.of(Ident("r#type"))


def test_lex_records_positions():
	stream = lex("a\n  b", file="body.rs")
	second = stream[1]
	assert second.span.file == "body.rs"
	assert (second.span.line, second.span.column) == (2, 3)


def test_spans_do_not_affect_equality():
	assert lex("x") == TokenStream.of(Ident("x"))


def test_render_roundtrip_text():
	assert str(lex("::a::b::Name(10); x => y")) == ":: a :: b :: Name (10) ; x => y"


def test_render_none_group_prints_contents_only():
	stream = TokenStream.of(Group(Delimiter.NONE, lex("a b")), Ident("c"))
	assert str(stream) == "a b c"


def test_unclosed_delimiter_points_at_opener():
	with pytest.raises(LexError) as excinfo:
		lex("use a::{b;\nName")
	err = excinfo.value
	assert isinstance(err, UseSyntaxError)
	assert "unclosed delimiter `{`" in str(err)
	assert (err.span.line, err.span.column) == (1, 8)


def test_mismatched_closer_is_reported():
	with pytest.raises(LexError) as excinfo:
		lex("(a]")
	assert "`]`" in str(excinfo.value)
	assert excinfo.value.span.column == 3


def test_unknown_character_is_reported():
	with pytest.raises(LexError) as excinfo:
		lex("a \\ b")
	assert excinfo.value.span.column == 3


def test_lex_and_render_deep_nesting():
	depth = 1000
	source = "(" * depth + "x" + ")" * depth
	stream = lex(source)
	for _ in range(depth):
		(group,) = stream
		assert group.delimiter is Delimiter.PARENTHESIS
		stream = group.stream
	assert list(stream) == [Ident("x")]
	assert str(lex(source)) == source


def test_render_deep_hand_built_stream():
	depth = 2000
	stream = TokenStream.of(Ident("x"))
	for _ in range(depth):
		stream = TokenStream.of(Group(Delimiter.BRACKET, stream))
	assert str(stream) == "[" * depth + "x" + "]" * depth
