# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error taxonomy for quote_use.

- `UseSyntaxError` and its subclasses are user-facing: they carry the
  offending token's span plus the set of tokens that would have been accepted,
  and the driver converts them into parser-phase diagnostics.
- `ConfigurationError` is raised while building a configuration, before any
  expansion runs.
- `InternalInvariantViolation` signals a bug in the parser itself and is never
  caught.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .diagnostics import Diagnostic
from .span import Span


class UseSyntaxError(ValueError):
	"""
	Malformed declaration or token input.

	This is a `ValueError` subclass so callers can treat it as a parse-time
	failure, but it carries a location (`span`) and an `expected` token set so
	it can be converted into a structured diagnostic instead of a traceback.
	"""

	code = "syntax"
	phase = "parser"

	def __init__(
		self,
		message: str,
		*,
		span: Optional[Span] = None,
		expected: Iterable[str] = (),
	) -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()
		self.expected = tuple(expected)

	def to_diagnostic(self) -> Diagnostic:
		notes = []
		if self.expected:
			notes.append("expected one of: " + ", ".join(f"`{tok}`" for tok in self.expected))
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase=self.phase,
			severity="error",
			span=self.span,
			notes=notes,
		)


class UnterminatedDeclaration(UseSyntaxError):
	"""A chain was not closed by `;`, `,` or `}` where one was required."""

	code = "unterminated-declaration"


class MisplacedAlias(UseSyntaxError):
	"""`as` used on something other than the final segment of a chain."""

	code = "misplaced-alias"


class WildcardNotSupported(UseSyntaxError):
	code = "wildcard-not-supported"


class IllegalSelfReference(UseSyntaxError):
	"""`self` with no enclosing path, or `self` continued with `::`."""

	code = "illegal-self-reference"


class NonNameTail(UseSyntaxError):
	"""A path bound under its own name ends in a placeholder."""

	code = "non-name-tail"


class LexError(UseSyntaxError):
	"""Unbalanced delimiters or characters the lexer does not know."""

	code = "lex"
	phase = "lexer"


class ConfigurationError(ValueError):
	"""Invalid or inconsistent feature selection."""

	code = "configuration"

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(message=str(self), code=self.code, phase="config", severity="error")


class InternalInvariantViolation(AssertionError):
	"""A parser bug (e.g. popping an empty path). Not a user error."""


__all__ = [
	"UseSyntaxError",
	"UnterminatedDeclaration",
	"MisplacedAlias",
	"WildcardNotSupported",
	"IllegalSelfReference",
	"NonNameTail",
	"LexError",
	"ConfigurationError",
	"InternalInvariantViolation",
]
