# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token rewriter: replaces bare identifiers bound in a SymbolTable with their
absolute paths.

A small state machine per nesting level decides whether an identifier is
"bare":

- after a joint `:` (the first half of `::`) an identifier is part of a path
  the caller already qualified and is left alone;
- after `#` the next token is a value spliced in by the downstream quoting
  facility and is passed through untouched;
- after a lifetime tick `'` the identifier is a lifetime name.

Groups are walked with an explicit stack; every group starts in NORMAL state
and is rebuilt with its original delimiter (`Delimiter.NONE` groups are
spliced into their parent). With namespacing enabled, `$ident`, `$'a` and `$$`
are handled by two extra states layered on top.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from quote_use.core.config import DEFAULT_CONFIG, ExpandConfig
from quote_use.core.span import Span
from quote_use.tokens import Delimiter, Group, Ident, Punct, Spacing, TokenStream, TokenTree, is_punct
from .namespace import ESCAPE
from .symbols import SymbolTable


class State(Enum):
	NORMAL = "normal"
	AFTER_JOINT_COLON = "after_joint_colon"
	AFTER_ESCAPE = "after_escape"
	AFTER_TICK = "after_tick"
	ESCAPE = "escape"  # saw `$`
	ESCAPE_QUOTE = "escape_quote"  # saw `$'`


@dataclass
class _Level:
	trees: Iterator[TokenTree]
	delimiter: Optional[Delimiter]  # None for the top level
	span: Span
	out: List[TokenTree] = field(default_factory=list)
	state: State = State.NORMAL
	# `$` / `$'` held back until we know whether an identifier follows.
	pending: List[TokenTree] = field(default_factory=list)

	def flush(self) -> None:
		self.out.extend(self.pending)
		self.pending.clear()


class TokenRewriter:
	def __init__(self, symbols: SymbolTable, config: ExpandConfig = DEFAULT_CONFIG) -> None:
		self.symbols = symbols
		self.namespace_idents = config.namespace_idents
		self.prefix = config.namespace_prefix()

	def rewrite(self, stream: TokenStream) -> TokenStream:
		stack: List[_Level] = [_Level(iter(stream), None, Span())]
		while True:
			level = stack[-1]
			tree = next(level.trees, None)
			if tree is None:
				level.flush()
				stack.pop()
				if not stack:
					return TokenStream(tuple(level.out))
				parent = stack[-1]
				if level.delimiter is Delimiter.NONE:
					parent.out.extend(level.out)
				else:
					parent.out.append(Group(level.delimiter, TokenStream(tuple(level.out)), level.span))  # type: ignore[arg-type]
				continue
			if isinstance(tree, Group):
				level.flush()
				level.state = State.NORMAL
				stack.append(_Level(iter(tree.stream), tree.delimiter, tree.span))
				continue
			if self.namespace_idents and self._namespace_step(level, tree):
				continue
			self._step(level, tree)

	def _namespace_step(self, level: _Level, tree: TokenTree) -> bool:
		"""Handle `$` escapes; False means `tree` still needs the normal step."""
		state = level.state
		if state is State.ESCAPE:
			if is_punct(tree, ESCAPE):
				level.pending.clear()
				level.out.append(Punct(ESCAPE, tree.spacing, tree.span))  # type: ignore[union-attr]
				level.state = State.NORMAL
				return True
			if isinstance(tree, Ident):
				level.pending.clear()
				level.out.append(Ident(self.prefix + tree.text, tree.span))
				level.state = State.NORMAL
				return True
			if is_punct(tree, "'"):
				level.pending.append(tree)
				level.state = State.ESCAPE_QUOTE
				return True
			level.flush()
			level.state = State.NORMAL
			return False
		if state is State.ESCAPE_QUOTE:
			if isinstance(tree, Ident):
				tick = level.pending[-1]
				level.pending.clear()
				level.out.append(Punct("'", Spacing.JOINT, tick.span))
				level.out.append(Ident(self.prefix + tree.text, tree.span))
				level.state = State.NORMAL
				return True
			level.flush()
			level.state = State.NORMAL
			return False
		if state is not State.AFTER_ESCAPE and is_punct(tree, ESCAPE):
			level.pending.append(tree)
			level.state = State.ESCAPE
			return True
		return False

	def _step(self, level: _Level, tree: TokenTree) -> None:
		state = level.state
		if state is State.AFTER_ESCAPE:
			level.out.append(tree)
			level.state = State.NORMAL
			return
		if isinstance(tree, Ident):
			binding = self.symbols.lookup(tree.text) if state is State.NORMAL else None
			if binding is not None:
				level.out.extend(binding.path.render())
			else:
				level.out.append(tree)
			level.state = State.NORMAL
			return
		level.out.append(tree)
		if isinstance(tree, Punct):
			if tree.char == ":":
				# The second colon of `::` (or a lone type-ascription colon)
				# leaves the state as it is.
				if tree.spacing is Spacing.JOINT:
					level.state = State.AFTER_JOINT_COLON
				return
			if tree.char == "#":
				level.state = State.AFTER_ESCAPE
				return
			if tree.char == "'" and tree.spacing is Spacing.JOINT:
				level.state = State.AFTER_TICK
				return
		level.state = State.NORMAL


def rewrite_tokens(stream: TokenStream, symbols: SymbolTable, config: ExpandConfig = DEFAULT_CONFIG) -> TokenStream:
	return TokenRewriter(symbols, config).rewrite(stream)


__all__ = ["State", "TokenRewriter", "rewrite_tokens"]
