# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Entry points.

Each entry point parses `[span =>] (# use ...;)* tail`, rewrites the tail and
returns the token stream that invokes the downstream quoting macro with it:

	quote_use("# use a::B; B::new()")
	    -> ::quote::quote! { ::a::B::new() }

The eight public functions differ only in which macro they wrap and whether
the `no_prelude` sentinel is injected; the work is done by `quote_use_impl`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple, Union

from quote_use.core.config import DEFAULT_CONFIG, DeclarationStyle, ExpandConfig
from quote_use.core.errors import UseSyntaxError
from quote_use.rewrite import NO_PRELUDE, SymbolTable, TokenRewriter
from quote_use.tokens import Delimiter, Group, Ident, Punct, TokenCursor, TokenStream, TokenTree, lex, puncts
from quote_use.use_parser import Binding, NameSegment, Path, parse_declarations

Body = Union[str, TokenStream]


class QuoteFlavor(Enum):
	QUOTE = "quote"
	QUOTE_SPANNED = "quote_spanned"
	PARSE_QUOTE = "parse_quote"
	PARSE_QUOTE_SPANNED = "parse_quote_spanned"

	@property
	def target(self) -> Tuple[str, str]:
		"""(crate, macro) of the downstream quoting call."""
		crate = "syn" if self.value.startswith("parse_") else "quote"
		return crate, self.value

	@property
	def spanned(self) -> bool:
		return self.value.endswith("_spanned")

	def macro_path(self) -> TokenStream:
		return Path(NameSegment(Ident(part)) for part in self.target).render()


@dataclass
class QuoteUse:
	"""Declarations stripped from the head of a body plus the remaining tail."""

	bindings: List[Binding]
	tail: TokenStream

	@classmethod
	def parse(cls, cursor: TokenCursor, style: DeclarationStyle = DeclarationStyle.POUND) -> "QuoteUse":
		bindings = parse_declarations(cursor, style)
		return cls(bindings, cursor.rest())

	def symbols(self, config: ExpandConfig = DEFAULT_CONFIG) -> SymbolTable:
		return SymbolTable.build(self.bindings, config)

	def expand(self, config: ExpandConfig = DEFAULT_CONFIG) -> TokenStream:
		return TokenRewriter(self.symbols(config), config).rewrite(self.tail)


def _as_stream(body: Body, file: Optional[str]) -> TokenStream:
	return lex(body, file=file) if isinstance(body, str) else body


def _no_prelude_binding() -> Binding:
	ident = Ident(NO_PRELUDE)
	return Binding(Path([NameSegment(ident)]), ident)


def split_span(cursor: TokenCursor) -> TokenStream:
	"""Consume `<span-expr> =>` and return the span expression tokens."""
	collected: List[TokenTree] = []
	while not cursor.is_empty():
		if cursor.peek_op("=>"):
			if not collected:
				raise UseSyntaxError("expected a span expression before `=>`", span=cursor.span(), expected=("expression",))
			cursor.accept_op("=>")
			return TokenStream(tuple(collected))
		collected.append(cursor.advance())
	raise UseSyntaxError(
		"expected `<span> =>` at the start of a spanned quote",
		span=cursor.span(),
		expected=("=>",),
	)


def parse_body(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> QuoteUse:
	cursor = TokenCursor(_as_stream(body, file))
	return QuoteUse.parse(cursor, config.style)


def expand(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	"""Strip the declarations from `body` and return the rewritten tail."""
	return parse_body(body, config=config, file=file).expand(config)


def prepare(
	flavor: QuoteFlavor,
	body: Body,
	*,
	config: ExpandConfig = DEFAULT_CONFIG,
	file: Optional[str] = None,
	no_prelude: bool = False,
) -> Tuple[TokenStream, QuoteUse]:
	"""Split a body into its span expression (spanned flavors only) and declarations + tail."""
	cursor = TokenCursor(_as_stream(body, file))
	span_tokens = split_span(cursor) if flavor.spanned else TokenStream()
	quote = QuoteUse.parse(cursor, config.style)
	if no_prelude:
		quote = replace(quote, bindings=[_no_prelude_binding(), *quote.bindings])
	return span_tokens, quote


def quote_use_impl(
	flavor: QuoteFlavor,
	body: Body,
	*,
	config: ExpandConfig = DEFAULT_CONFIG,
	file: Optional[str] = None,
	no_prelude: bool = False,
) -> TokenStream:
	span_tokens, quote = prepare(flavor, body, config=config, file=file, no_prelude=no_prelude)
	tail = quote.expand(config)
	inner: List[TokenTree] = list(span_tokens)
	if flavor.spanned:
		inner.extend(puncts("=>"))
	inner.extend(tail)
	return TokenStream.concat(
		[
			flavor.macro_path(),
			[Punct("!")],
			[Group(Delimiter.BRACE, TokenStream(tuple(inner)))],
		]
	)


def quote_use(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.QUOTE, body, config=config, file=file)


def quote_spanned_use(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.QUOTE_SPANNED, body, config=config, file=file)


def parse_quote_use(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.PARSE_QUOTE, body, config=config, file=file)


def parse_quote_spanned_use(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.PARSE_QUOTE_SPANNED, body, config=config, file=file)


def quote_use_no_prelude(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.QUOTE, body, config=config, file=file, no_prelude=True)


def quote_spanned_use_no_prelude(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.QUOTE_SPANNED, body, config=config, file=file, no_prelude=True)


def parse_quote_use_no_prelude(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.PARSE_QUOTE, body, config=config, file=file, no_prelude=True)


def parse_quote_spanned_use_no_prelude(body: Body, *, config: ExpandConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	return quote_use_impl(QuoteFlavor.PARSE_QUOTE_SPANNED, body, config=config, file=file, no_prelude=True)


__all__ = [
	"QuoteFlavor",
	"QuoteUse",
	"split_span",
	"parse_body",
	"expand",
	"prepare",
	"quote_use_impl",
	"quote_use",
	"quote_spanned_use",
	"parse_quote_use",
	"parse_quote_spanned_use",
	"quote_use_no_prelude",
	"quote_spanned_use_no_prelude",
	"parse_quote_use_no_prelude",
	"parse_quote_spanned_use_no_prelude",
]
