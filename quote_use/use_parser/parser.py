# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Hand-written parser for `use` declarations at the head of an invocation body.

Per declaration (after the introducer and an optional leading `::`):

	decl          := segment_chain ';'
	segment_chain := segment ( '::' segment_chain | 'as' NAME | '{' chains '}' | end )
	segment       := NAME | '#' token

Every declaration is flattened into `Binding`s. Brace groups are handled with
an explicit stack of frames rather than recursion: each frame owns a cursor
over one brace level, the shared prefix (`parent`) and the chain being built
(`path`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from quote_use.core.config import DeclarationStyle
from quote_use.core.errors import (
	IllegalSelfReference,
	MisplacedAlias,
	UnterminatedDeclaration,
	UseSyntaxError,
	WildcardNotSupported,
)
from quote_use.tokens import Delimiter, Group, Ident, TokenCursor, TokenStream, is_punct, lex
from .path import Binding, NameSegment, Path, PlaceholderSegment, Segment

_TOP_LEVEL_EXPECTED = (";", "as", "::")
_NESTED_EXPECTED = (",", "as", "::", "}")


@dataclass
class _Frame:
	parent: Path
	cursor: TokenCursor
	nested: bool
	path: Path
	after_group: bool = False


def _is_brace_group(tree: object) -> bool:
	return isinstance(tree, Group) and tree.delimiter is Delimiter.BRACE


def _at_end(frame: _Frame) -> bool:
	cursor = frame.cursor
	if cursor.peek_punct(";"):
		if frame.nested:
			raise UnterminatedDeclaration(
				"expected ident, `,`, `::` or `{`, found `;` (missing `}`?)",
				span=cursor.span(),
				expected=("ident", ",", "::", "{", "}"),
			)
		return True
	return cursor.is_empty()


def _parse_segment(cursor: TokenCursor) -> Segment:
	tree = cursor.peek()
	if tree is None:
		raise UnterminatedDeclaration(
			"expected a path segment, found end of input",
			span=cursor.span(),
			expected=("ident", "#", "{"),
		)
	if is_punct(tree, "*"):
		raise WildcardNotSupported("glob imports (`*`) are not supported", span=tree.span)
	if isinstance(tree, Ident):
		cursor.advance()
		return NameSegment(tree)
	if is_punct(tree, "#"):
		marker = cursor.advance()
		if cursor.is_empty():
			raise UseSyntaxError(
				"expected a token after `#`",
				span=cursor.span(),
				expected=("token",),
			)
		return PlaceholderSegment(marker, cursor.advance())  # type: ignore[arg-type]
	raise UseSyntaxError(
		f"expected ident, `#` or `{{`, found {cursor.describe()}",
		span=cursor.span(),
		expected=("ident", "#", "{"),
	)


def _bind_plain(path: Path, output: List[Binding]) -> None:
	"""Bind a finished chain under its own trailing name."""
	self_span = path.last().ident.span if isinstance(path.last(), NameSegment) else None
	if path.pop_if_self():
		if not path:
			raise IllegalSelfReference("`self` needs a parent path to refer to", span=self_span)
		output.append(Binding(path.copy(), path.last_name()))
		return
	name = path.last_name()
	output.append(Binding(path.copy(), name))


def _bind_alias(frame: _Frame, output: List[Binding]) -> None:
	cursor = frame.cursor
	as_tok = cursor.advance()
	self_span = frame.path.last().ident.span if isinstance(frame.path.last(), NameSegment) else None
	if frame.path.pop_if_self() and not frame.path:
		raise IllegalSelfReference("`self` needs a parent path to refer to", span=self_span)
	alias = cursor.peek()
	if not isinstance(alias, Ident):
		raise UseSyntaxError(
			f"expected a name after `as`, found {cursor.describe()}",
			span=cursor.span() if alias is not None else as_tok.span,
			expected=("ident",),
		)
	cursor.advance()
	output.append(Binding(frame.path.copy(), alias))


def _expect_separator(frame: _Frame, *, after: str) -> None:
	"""After an alias or a group only `,` or the end of the chain may follow."""
	cursor = frame.cursor
	if cursor.accept_op(","):
		return
	if after == "group" and cursor.peek_ident("as"):
		raise MisplacedAlias("a `{...}` group cannot be renamed", span=cursor.span())
	if after == "alias" and cursor.peek_op("::"):
		raise MisplacedAlias(
			"`as` must rename the last segment of a path",
			span=cursor.span(),
		)
	expected = (",", "}") if frame.nested else (";",)
	found = cursor.describe()
	tail = " (a group must end its path)" if after == "group" else ""
	raise UnterminatedDeclaration(
		f"expected {' or '.join(f'`{tok}`' for tok in expected)}, found {found}{tail}",
		span=cursor.span(),
		expected=expected,
	)


def _segment_follows(cursor: TokenCursor) -> bool:
	tree = cursor.peek()
	return isinstance(tree, Ident) or _is_brace_group(tree) or is_punct(tree, "#") or is_punct(tree, "*")


def _parse_tree(cursor: TokenCursor, output: List[Binding]) -> None:
	stack: List[_Frame] = [_Frame(parent=Path(), cursor=cursor, nested=False, path=Path())]
	while stack:
		frame = stack[-1]
		cur = frame.cursor
		if frame.after_group:
			frame.after_group = False
			if _at_end(frame):
				stack.pop()
				continue
			_expect_separator(frame, after="group")
			frame.path = frame.parent.copy()
			continue
		if _at_end(frame):
			stack.pop()
			continue
		tree = cur.peek()
		if _is_brace_group(tree):
			cur.advance()
			frame.after_group = True
			stack.append(
				_Frame(
					parent=frame.path.copy(),
					cursor=TokenCursor(tree.stream, end_span=tree.span),  # type: ignore[union-attr]
					nested=True,
					path=frame.path.copy(),
				)
			)
			continue

		frame.path.push(_parse_segment(cur))
		if cur.accept_op(",") or _at_end(frame):
			_bind_plain(frame.path, output)
			frame.path = frame.parent.copy()
		elif cur.peek_ident("as"):
			_bind_alias(frame, output)
			if _at_end(frame):
				stack.pop()
				continue
			_expect_separator(frame, after="alias")
			frame.path = frame.parent.copy()
		elif cur.peek_op("::"):
			if frame.path.last().is_self():
				raise IllegalSelfReference("`self` must be the last segment of a path", span=cur.span())
			cur.accept_op("::")
			if not _segment_follows(cur):
				raise UseSyntaxError(
					f"expected a path segment after `::`, found {cur.describe()}",
					span=cur.span(),
					expected=("ident", "#", "{"),
				)
		else:
			expected = _NESTED_EXPECTED if frame.nested else _TOP_LEVEL_EXPECTED
			raise UnterminatedDeclaration(
				"expected one of: " + ", ".join(f"`{tok}`" for tok in expected) + f", found {cur.describe()}",
				span=cur.span(),
				expected=expected,
			)


def parse_use_item(cursor: TokenCursor) -> List[Binding]:
	"""Parse one `use ...;` (starting at `use`) into its bindings."""
	if cursor.accept_ident("use") is None:
		raise UseSyntaxError(f"expected `use`, found {cursor.describe()}", span=cursor.span(), expected=("use",))
	cursor.accept_op("::")
	output: List[Binding] = []
	_parse_tree(cursor, output)
	if not cursor.accept_op(";"):
		raise UnterminatedDeclaration(
			f"expected `;`, found {cursor.describe()}",
			span=cursor.span(),
			expected=(";",),
		)
	return output


def peek_declaration(cursor: TokenCursor, style: DeclarationStyle) -> bool:
	if style is DeclarationStyle.POUND:
		return cursor.peek_punct("#") and cursor.peek_ident("use", 1)
	return cursor.peek_ident("use")


def parse_declarations(cursor: TokenCursor, style: DeclarationStyle) -> List[Binding]:
	"""
	Consume consecutive declarations from the head of `cursor`, stopping at the
	first token that does not start one. The cursor is left at the tail.
	"""
	bindings: List[Binding] = []
	while peek_declaration(cursor, style):
		if style is DeclarationStyle.POUND:
			cursor.advance()
		bindings.extend(parse_use_item(cursor))
	return bindings


def parse_declaration_text(source: str, *, file: Optional[str] = None) -> List[Binding]:
	"""
	Parse a text made only of bare `use ...;` declarations (prelude bundles).
	"""
	cursor = TokenCursor(lex(source, file=file))
	bindings = parse_declarations(cursor, DeclarationStyle.BARE)
	if not cursor.is_empty():
		raise UseSyntaxError(
			f"expected `use`, found {cursor.describe()}",
			span=cursor.span(),
			expected=("use",),
		)
	return bindings


def parse_use(source: str | TokenStream, *, file: Optional[str] = None) -> List[Binding]:
	"""Parse exactly one bare `use ...;` declaration."""
	stream = lex(source, file=file) if isinstance(source, str) else source
	cursor = TokenCursor(stream)
	bindings = parse_use_item(cursor)
	if not cursor.is_empty():
		raise UseSyntaxError(
			f"unexpected {cursor.describe()} after declaration",
			span=cursor.span(),
		)
	return bindings


__all__ = [
	"parse_use_item",
	"parse_use",
	"peek_declaration",
	"parse_declarations",
	"parse_declaration_text",
]
