"""
quote_use.use_parser: paths, bindings and the `use` declaration parser.
"""

from .path import SELF, Binding, NameSegment, Path, PlaceholderSegment, Segment
from .parser import (
	parse_declaration_text,
	parse_declarations,
	parse_use,
	parse_use_item,
	peek_declaration,
)

__all__ = [
	"SELF",
	"Binding",
	"NameSegment",
	"Path",
	"PlaceholderSegment",
	"Segment",
	"parse_declaration_text",
	"parse_declarations",
	"parse_use",
	"parse_use_item",
	"peek_declaration",
]
