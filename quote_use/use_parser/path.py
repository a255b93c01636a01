# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Paths and bindings produced by `use` declarations.

A path is an ordered list of segments. A segment is either a literal name or
a placeholder (`#var`): the marker plus one externally supplied token that is
spliced in by the downstream quoting facility and never inspected here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Union

from quote_use.core.errors import InternalInvariantViolation, NonNameTail
from quote_use.tokens import Ident, Punct, Spacing, TokenStream, TokenTree

SELF = "self"


@dataclass(frozen=True)
class NameSegment:
	ident: Ident

	@property
	def text(self) -> str:
		return self.ident.text

	def is_self(self) -> bool:
		return self.ident.text == SELF

	def to_tokens(self) -> List[TokenTree]:
		return [self.ident]


@dataclass(frozen=True)
class PlaceholderSegment:
	marker: Punct
	token: TokenTree

	def is_self(self) -> bool:
		return False

	def to_tokens(self) -> List[TokenTree]:
		return [self.marker, self.token]


Segment = Union[NameSegment, PlaceholderSegment]


def _separator(followed_by_punct: bool) -> List[Punct]:
	# The second colon is joint when a punct (e.g. a `#` marker) follows, the
	# way the lexer would have produced it.
	return [
		Punct(":", Spacing.JOINT),
		Punct(":", Spacing.JOINT if followed_by_punct else Spacing.ALONE),
	]


class Path:
	"""Mutable segment list used while parsing; bindings keep their own copy."""

	__slots__ = ("segments",)

	def __init__(self, segments: Iterable[Segment] = ()) -> None:
		self.segments: List[Segment] = list(segments)

	def __len__(self) -> int:
		return len(self.segments)

	def __iter__(self) -> Iterator[Segment]:
		return iter(self.segments)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Path):
			return NotImplemented
		return self.segments == other.segments

	__hash__ = None  # type: ignore[assignment]

	def __repr__(self) -> str:
		return f"Path({self.render()!s})" if self.segments else "Path()"

	def copy(self) -> "Path":
		return Path(self.segments)

	def push(self, segment: Segment) -> None:
		self.segments.append(segment)

	def pop(self) -> Segment:
		if not self.segments:
			raise InternalInvariantViolation("path should contain at least one segment")
		return self.segments.pop()

	def last(self) -> Segment:
		if not self.segments:
			raise InternalInvariantViolation("path should contain a segment")
		return self.segments[-1]

	def pop_if_self(self) -> bool:
		"""Drop a trailing `self` segment; report whether one was dropped."""
		if self.segments and self.segments[-1].is_self():
			self.segments.pop()
			return True
		return False

	def last_name(self) -> Ident:
		segment = self.last()
		if isinstance(segment, PlaceholderSegment):
			raise NonNameTail("expected ident as last path segment", span=segment.marker.span, expected=("ident",))
		return segment.ident

	def pop_name(self) -> Ident:
		ident = self.last_name()
		self.segments.pop()
		return ident

	def render(self) -> TokenStream:
		"""
		Tokens for this path: `::` root first when the head is a name (so a
		binding always expands to an absolute path), never when the head is a
		placeholder, which already carries its own root.
		"""
		if not self.segments:
			raise InternalInvariantViolation("cannot render an empty path")
		out: List[TokenTree] = []
		for idx, segment in enumerate(self.segments):
			seg_tokens = segment.to_tokens()
			if idx > 0 or isinstance(segment, NameSegment):
				out.extend(_separator(isinstance(seg_tokens[0], Punct)))
			out.extend(seg_tokens)
		return TokenStream(tuple(out))


@dataclass(frozen=True)
class Binding:
	"""Bare `name` in a tail is rewritten to `path`."""

	path: Path
	name: Ident

	def __hash__(self) -> int:
		# Path is mutable and unhashable; a binding owns its copy, so hash the segments.
		return hash((tuple(self.path.segments), self.name))

	def __str__(self) -> str:
		return f"{self.name.text} => {self.path.render()}"


__all__ = [
	"SELF",
	"NameSegment",
	"PlaceholderSegment",
	"Segment",
	"Path",
	"Binding",
]
