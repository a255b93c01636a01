"""
quote_use.rewrite: symbol table, token rewriter and `$ident` namespacing.
"""

from .symbols import NO_PRELUDE, NO_STD, SymbolTable, split_sentinels
from .rewriter import State, TokenRewriter, rewrite_tokens
from .namespace import format_ident_namespaced, namespace_text

__all__ = [
	"NO_PRELUDE",
	"NO_STD",
	"SymbolTable",
	"split_sentinels",
	"State",
	"TokenRewriter",
	"rewrite_tokens",
	"format_ident_namespaced",
	"namespace_text",
]
