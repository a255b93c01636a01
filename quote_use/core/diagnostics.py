"""
Common diagnostic structure for the parser, registry and driver.

This is deliberately minimal: a message plus optional span/metadata. Errors
raised during an expansion are converted into Diagnostics at the CLI boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents an expansion diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Optional diagnostic phase label ("lexer", "parser", "config").
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		# Normalize missing spans to the sentinel Span() so downstream tooling
		# can rely on a structured object instead of None.
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def to_json(self, *, default_file: str | None = None) -> dict:
		"""Render to a structured JSON-friendly dict."""
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file or default_file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}

	def format(self, *, default_file: str | None = None) -> str:
		"""Render as `file:line:column: severity: message` (notes indented below)."""
		file = self.span.file or default_file or "<input>"
		lines = [f"{file}:{self.span.short()}: {self.severity}: {self.message}"]
		lines.extend(f"  note: {note}" for note in self.notes)
		return "\n".join(lines)


__all__ = ["Diagnostic"]
