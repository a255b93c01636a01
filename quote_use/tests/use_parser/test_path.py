# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from quote_use.core.errors import InternalInvariantViolation, NonNameTail
from quote_use.tokens import Ident, Punct, lex
from quote_use.use_parser import NameSegment, Path, PlaceholderSegment, parse_use


def _name(text: str) -> NameSegment:
	return NameSegment(Ident(text))


def test_render_adds_root_for_name_head():
	path = Path([_name("a"), _name("b")])
	assert path.render() == lex("::a::b")


def test_render_placeholder_head_has_no_root():
	path = Path([PlaceholderSegment(Punct("#"), Ident("root")), _name("Name")])
	assert path.render() == lex("#root::Name")


def test_render_placeholder_in_the_middle():
	path = Path([_name("a"), PlaceholderSegment(Punct("#"), Ident("var")), _name("b")])
	assert path.render() == lex("::a::#var::b")


def test_pop_if_self():
	path = Path([_name("a"), _name("self")])
	assert path.pop_if_self() is True
	assert path == Path([_name("a")])
	assert path.pop_if_self() is False


def test_last_name_rejects_placeholder():
	path = Path([_name("a"), PlaceholderSegment(Punct("#"), Ident("b"))])
	with pytest.raises(NonNameTail):
		path.last_name()


def test_pop_empty_path_is_an_invariant_violation():
	with pytest.raises(InternalInvariantViolation):
		Path().pop()


def test_copy_is_independent():
	path = Path([_name("a")])
	other = path.copy()
	other.push(_name("b"))
	assert len(path) == 1
	assert len(other) == 2


def test_pop_name():
	path = Path([_name("a"), _name("b")])
	assert path.pop_name() == Ident("b")
	assert path == Path([_name("a")])
	with pytest.raises(NonNameTail):
		Path([PlaceholderSegment(Punct("#"), Ident("b"))]).pop_name()


def test_bindings_are_hashable():
	first, second = parse_use("use a::{b, #x as c};")
	again = parse_use("use a::b;")[0]
	assert hash(first) == hash(again)
	assert {first, second, again} == {first, second}
