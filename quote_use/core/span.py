# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by tokens and diagnostics.

A Span can wrap whatever lexer/location object produced it via the `raw`
field while also carrying optional file/line/column info when available.
Spans never take part in token equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw lexer loc)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_loc(cls, loc: Any, *, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from an existing lexer/location object.

		If `loc` is already a Span, it is returned unchanged; otherwise the
		lexer-specific object (usually a `lark.Token`) is stored in `raw`.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			return loc
		return cls(
			file=file or getattr(loc, "file", None) or getattr(loc, "filename", None) or None,
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			raw=loc,
		)

	def short(self) -> str:
		"""Format as `line:column` (`?` for unknown parts)."""
		line = self.line if self.line is not None else "?"
		column = self.column if self.column is not None else "?"
		return f"{line}:{column}"


__all__ = ["Span"]
