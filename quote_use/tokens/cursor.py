# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
A read cursor over one level of a TokenStream.

The declaration parser and the entry points use this to peek at and consume
token trees; nested groups are entered by opening a new cursor over the
group's stream.
"""

from __future__ import annotations

from typing import Optional

from quote_use.core.errors import InternalInvariantViolation
from quote_use.core.span import Span
from .tokens import Group, Ident, Spacing, TokenStream, TokenTree, is_ident, is_punct


class TokenCursor:
	def __init__(self, stream: TokenStream, *, end_span: Optional[Span] = None) -> None:
		self._trees = tuple(stream)
		self._pos = 0
		# Reported for errors at the end of this level (e.g. the enclosing group).
		self.end_span = end_span if end_span is not None else Span()

	def is_empty(self) -> bool:
		return self._pos >= len(self._trees)

	def peek(self, offset: int = 0) -> Optional[TokenTree]:
		idx = self._pos + offset
		return self._trees[idx] if idx < len(self._trees) else None

	def advance(self) -> TokenTree:
		if self.is_empty():
			raise InternalInvariantViolation("advance past the end of a token cursor")
		tree = self._trees[self._pos]
		self._pos += 1
		return tree

	def rest(self) -> TokenStream:
		return TokenStream(self._trees[self._pos:])

	def span(self) -> Span:
		"""Span of the next token, or of the end of this level."""
		tree = self.peek()
		return tree.span if tree is not None else self.end_span

	def describe(self) -> str:
		"""Human-readable form of the next token for error messages."""
		tree = self.peek()
		if tree is None:
			return "end of input"
		if isinstance(tree, Group):
			return f"`{tree.delimiter.open}`"
		if self.peek_op("::"):
			return "`::`"
		return f"`{tree}`"

	def peek_ident(self, text: Optional[str] = None, offset: int = 0) -> bool:
		return is_ident(self.peek(offset), text)

	def peek_punct(self, char: str, offset: int = 0) -> bool:
		return is_punct(self.peek(offset), char)

	def peek_op(self, op: str, offset: int = 0) -> bool:
		"""True if the next puncts spell `op` with joint spacing between them."""
		for idx, ch in enumerate(op):
			tree = self.peek(offset + idx)
			if not is_punct(tree, ch):
				return False
			if idx < len(op) - 1 and tree.spacing is not Spacing.JOINT:
				return False
		return True

	def accept_op(self, op: str) -> bool:
		if not self.peek_op(op):
			return False
		self._pos += len(op)
		return True

	def accept_ident(self, text: str) -> Optional[Ident]:
		if not self.peek_ident(text):
			return None
		return self.advance()  # type: ignore[return-value]


__all__ = ["TokenCursor"]
