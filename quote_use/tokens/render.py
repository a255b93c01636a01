"""Render token trees back into source text."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .tokens import Group, Punct, Spacing, TokenTree


def render_tokens(trees: Iterable[TokenTree]) -> str:
	"""
	Space-separated rendering; a joint punct is glued to what follows it and
	groups keep their exact delimiters. `Delimiter.NONE` groups print their
	contents only.

	Groups are walked with an explicit stack of (children, closing delimiter).
	"""
	parts: List[str] = []
	stack: List[Tuple[Iterator[TokenTree], str]] = [(iter(trees), "")]
	glue = True
	while stack:
		children, close = stack[-1]
		tree = next(children, None)
		if tree is None:
			stack.pop()
			parts.append(close)
			glue = False
			continue
		if not glue:
			parts.append(" ")
		if isinstance(tree, Group):
			parts.append(tree.delimiter.open)
			stack.append((iter(tree.stream), tree.delimiter.close))
			glue = True
			continue
		parts.append(str(tree))
		glue = isinstance(tree, Punct) and tree.spacing is Spacing.JOINT
	return "".join(parts)


__all__ = ["render_tokens"]
