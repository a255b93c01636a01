"""
quote_use.tokens: token trees, the lark-backed lexer, rendering and cursors.
"""

from .tokens import (
	Delimiter,
	Group,
	Ident,
	Literal,
	Punct,
	Spacing,
	TokenStream,
	TokenTree,
	is_ident,
	is_punct,
	puncts,
)
from .lexer import lex
from .render import render_tokens
from .cursor import TokenCursor

__all__ = [
	"Delimiter",
	"Group",
	"Ident",
	"Literal",
	"Punct",
	"Spacing",
	"TokenStream",
	"TokenTree",
	"is_ident",
	"is_punct",
	"puncts",
	"lex",
	"render_tokens",
	"TokenCursor",
]
