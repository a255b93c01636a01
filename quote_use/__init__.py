# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
quote_use: resolve `use` declarations inside quote bodies.

A body such as

	# use std::fs::read;
	read("src/main.rs")

is rewritten so every bare identifier bound by a declaration (or by the
built-in prelude) becomes an absolute path, and is then wrapped in the
downstream quoting macro call:

	::quote::quote! { ::std::fs::read("src/main.rs") }

The CLI entrypoint is `quote_use.cli:main`.
"""

from quote_use.core.config import DEFAULT_CONFIG, DeclarationStyle, ExpandConfig, PreludeConfig
from quote_use.core.errors import (
	ConfigurationError,
	IllegalSelfReference,
	InternalInvariantViolation,
	LexError,
	MisplacedAlias,
	NonNameTail,
	UnterminatedDeclaration,
	UseSyntaxError,
	WildcardNotSupported,
)
from quote_use.macros import (
	QuoteFlavor,
	QuoteUse,
	expand,
	parse_quote_spanned_use,
	parse_quote_spanned_use_no_prelude,
	parse_quote_use,
	parse_quote_use_no_prelude,
	quote_spanned_use,
	quote_spanned_use_no_prelude,
	quote_use,
	quote_use_no_prelude,
)
from quote_use.rewrite import format_ident_namespaced
from quote_use.tokens import TokenStream, lex

__version__ = "0.1.0"

__all__ = [
	"DEFAULT_CONFIG",
	"DeclarationStyle",
	"ExpandConfig",
	"PreludeConfig",
	"ConfigurationError",
	"IllegalSelfReference",
	"InternalInvariantViolation",
	"LexError",
	"MisplacedAlias",
	"NonNameTail",
	"UnterminatedDeclaration",
	"UseSyntaxError",
	"WildcardNotSupported",
	"QuoteFlavor",
	"QuoteUse",
	"expand",
	"quote_use",
	"quote_spanned_use",
	"parse_quote_use",
	"parse_quote_spanned_use",
	"quote_use_no_prelude",
	"quote_spanned_use_no_prelude",
	"parse_quote_use_no_prelude",
	"parse_quote_spanned_use_no_prelude",
	"format_ident_namespaced",
	"TokenStream",
	"lex",
]
