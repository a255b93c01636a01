# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token trees.

A token is one of four variants (`Ident`, `Punct`, `Literal`, `Group`); a
`TokenStream` is an immutable sequence of them. Spans are carried for
diagnostics only and never take part in equality, so a rewritten stream can be
compared directly against the lexed text of the expected output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Tuple, Union, overload

from quote_use.core.span import Span


class Spacing(Enum):
	"""Whether a punct is immediately followed by another punct (`::`, `=>`)."""

	ALONE = "alone"
	JOINT = "joint"


class Delimiter(Enum):
	PARENTHESIS = "parenthesis"
	BRACE = "brace"
	BRACKET = "bracket"
	NONE = "none"  # invisible delimiter, e.g. a spliced fragment

	@property
	def open(self) -> str:
		return _DELIMITER_CHARS[self][0]

	@property
	def close(self) -> str:
		return _DELIMITER_CHARS[self][1]


_DELIMITER_CHARS = {
	Delimiter.PARENTHESIS: ("(", ")"),
	Delimiter.BRACE: ("{", "}"),
	Delimiter.BRACKET: ("[", "]"),
	Delimiter.NONE: ("", ""),
}


@dataclass(frozen=True)
class Ident:
	text: str
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return self.text


@dataclass(frozen=True)
class Punct:
	char: str
	spacing: Spacing = Spacing.ALONE
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return self.char


@dataclass(frozen=True)
class Literal:
	"""String, byte, char or numeric literal, kept as its source text."""

	text: str
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return self.text


@dataclass(frozen=True)
class Group:
	delimiter: Delimiter
	stream: "TokenStream"
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return f"{self.delimiter.open}{self.stream}{self.delimiter.close}"


TokenTree = Union[Ident, Punct, Literal, Group]


@dataclass(frozen=True)
class TokenStream:
	"""Immutable sequence of token trees."""

	trees: Tuple[TokenTree, ...] = ()

	@classmethod
	def of(cls, *trees: TokenTree) -> "TokenStream":
		return cls(tuple(trees))

	@classmethod
	def concat(cls, parts: Iterable[Iterable[TokenTree]]) -> "TokenStream":
		out: list[TokenTree] = []
		for part in parts:
			out.extend(part)
		return cls(tuple(out))

	def __iter__(self) -> Iterator[TokenTree]:
		return iter(self.trees)

	def __len__(self) -> int:
		return len(self.trees)

	def __bool__(self) -> bool:
		return bool(self.trees)

	@overload
	def __getitem__(self, index: int) -> TokenTree: ...

	@overload
	def __getitem__(self, index: slice) -> "TokenStream": ...

	def __getitem__(self, index):
		if isinstance(index, slice):
			return TokenStream(self.trees[index])
		return self.trees[index]

	def __add__(self, other: "TokenStream") -> "TokenStream":
		return TokenStream(self.trees + tuple(other))

	def __str__(self) -> str:
		from .render import render_tokens

		return render_tokens(self)


def is_punct(tree: object, char: str, spacing: Spacing | None = None) -> bool:
	if not isinstance(tree, Punct) or tree.char != char:
		return False
	return spacing is None or tree.spacing is spacing


def is_ident(tree: object, text: str | None = None) -> bool:
	if not isinstance(tree, Ident):
		return False
	return text is None or tree.text == text


def puncts(op: str, *, span: Span | None = None) -> list[Punct]:
	"""
	Build a multi-character operator (`::`, `=>`) as joint puncts; the last
	char is alone.
	"""
	span = span if span is not None else Span()
	out = [Punct(ch, Spacing.JOINT, span) for ch in op[:-1]]
	out.append(Punct(op[-1], Spacing.ALONE, span))
	return out


__all__ = [
	"Spacing",
	"Delimiter",
	"Ident",
	"Punct",
	"Literal",
	"Group",
	"TokenTree",
	"TokenStream",
	"is_punct",
	"is_ident",
	"puncts",
]
